"""CLI interface for JSON Formatter."""

import sys
from pathlib import Path
from typing import Optional

import click

from textkit.config import load_settings
from textkit.result import ErrorKind
from textkit.shared.cli import error, handle_errors, info, print_stats, read_input, success, write_output
from textkit.shared.logger import setup_logger

from .formatter import JSONFormatter


@click.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path), required=False)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file (print to stdout if not specified)",
)
@click.option(
    "--query",
    "-q",
    help="JMESPath query to extract data",
)
@click.option(
    "--minify",
    is_flag=True,
    help="Minify output",
)
@click.option(
    "--indent",
    type=click.Choice(["2", "4"]),
    help="Indentation level (default from TEXTKIT_INDENT, else 2)",
)
@click.option("--check", is_flag=True, help="Only validate, print nothing on success")
@click.option("--stats", is_flag=True, help="Show line and character counts of the input")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@handle_errors
def main(
    input_file: Optional[Path],
    output: Optional[Path],
    query: Optional[str],
    minify: bool,
    indent: Optional[str],
    check: bool,
    stats: bool,
    verbose: bool,
):
    """
    JSON Formatter - Validate, pretty-print and minify JSON.

    Reads INPUT_FILE, or stdin when omitted.

    Examples:

        \b
        # Pretty print with 4 spaces
        json-fmt data.json --indent 4

        \b
        # Minify
        json-fmt data.json --minify --output data.min.json

        \b
        # Query then format
        json-fmt users.json --query 'users[0]'

        \b
        # Validate only
        json-fmt data.json --check
    """
    settings = load_settings()
    setup_logger(__name__, level="DEBUG" if verbose else settings.log_level)

    formatter = JSONFormatter()
    text = read_input(input_file)
    if stats:
        print_stats(text)

    if check:
        result = formatter.validate(text)
        if result.is_valid:
            success("Valid JSON")
            sys.exit(0)
        error(f"Invalid JSON: {result.error or 'empty input'}")
        sys.exit(1)

    level = None if minify else int(indent or settings.indent)

    if query:
        info(f"Applying query: {query}")
        result = formatter.query(text, query, indent=level)
    elif minify:
        result = formatter.minify(text)
    else:
        result = formatter.format(text, indent=level)

    if not result.ok:
        prefix = "Invalid JSON: " if result.error_kind is ErrorKind.SYNTAX else ""
        error(f"{prefix}{result.error}")
        sys.exit(1)

    write_output(result.output, output)
    sys.exit(0)


if __name__ == "__main__":
    main()
