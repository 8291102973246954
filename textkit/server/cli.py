"""CLI to run the HTTP server."""

from typing import Optional

import click
import uvicorn

from textkit.config import load_settings
from textkit.shared.cli import info, success
from textkit.shared.logger import setup_logger


@click.command()
@click.option(
    "--host",
    help="Host to bind to (default from TEXTKIT_HOST, else 127.0.0.1)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    help="Port to listen on (default from TEXTKIT_PORT, else 8000)",
)
@click.option("--reload", is_flag=True, help="Reload on code changes")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def main(host: Optional[str], port: Optional[int], reload: bool, verbose: bool):
    """
    textkit server - Serve the converters over HTTP.

    \b
    POST /convert     {"text": "...", "direction": "csv-to-json", "indent": 2}
    GET  /directions  supported directions
    """
    settings = load_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    setup_logger(__name__, level=log_level)

    host = host or settings.host
    port = port or settings.port

    success(f"Starting textkit server on http://{host}:{port}")
    info("Press Ctrl+C to stop")

    uvicorn.run(
        "textkit.server.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level.lower(),
    )


if __name__ == "__main__":
    main()
