"""Settings read from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from textkit.shared.logger import get_logger

logger = get_logger(__name__)

ALLOWED_INDENTS = (2, 4)
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings.

    Attributes:
        indent: Default indentation for pretty-printing (2 or 4)
        log_level: Log level name used by the CLIs
        host: Bind address for the HTTP server
        port: Port for the HTTP server
    """

    indent: int = 2
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build settings from environment variables.

    Reads ``TEXTKIT_INDENT``, ``TEXTKIT_LOG_LEVEL``, ``TEXTKIT_HOST`` and
    ``TEXTKIT_PORT``. Invalid values are logged and replaced by defaults.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Settings instance
    """
    env = os.environ if environ is None else environ
    defaults = Settings()

    indent = defaults.indent
    raw_indent = env.get("TEXTKIT_INDENT")
    if raw_indent:
        try:
            indent = int(raw_indent)
        except ValueError:
            indent = -1
        if indent not in ALLOWED_INDENTS:
            logger.warning(f"Ignoring TEXTKIT_INDENT={raw_indent!r}, expected 2 or 4")
            indent = defaults.indent

    log_level = env.get("TEXTKIT_LOG_LEVEL", defaults.log_level).upper()
    if log_level not in LOG_LEVELS:
        logger.warning(f"Ignoring TEXTKIT_LOG_LEVEL={log_level!r}")
        log_level = defaults.log_level

    port = defaults.port
    raw_port = env.get("TEXTKIT_PORT")
    if raw_port:
        try:
            port = int(raw_port)
        except ValueError:
            logger.warning(f"Ignoring TEXTKIT_PORT={raw_port!r}, not a number")

    return Settings(
        indent=indent,
        log_level=log_level,
        host=env.get("TEXTKIT_HOST", defaults.host),
        port=port,
    )
