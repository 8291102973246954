"""Logging setup shared by all tools."""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "textkit"

LOG_FORMAT = "%(message)s"
DATE_FORMAT = "[%X]"


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def setup_logger(
    name: Optional[str] = None,
    level: Union[str, int] = "INFO",
) -> logging.Logger:
    """
    Configure logging with a rich handler.

    The handler is attached to the package root logger so every
    ``textkit.*`` module logs through it. Calling this more than once only
    updates the level.

    Args:
        name: Logger name to return (defaults to the package root)
        level: Log level name or number

    Returns:
        Configured logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)

    return logging.getLogger(name or ROOT_LOGGER_NAME)
