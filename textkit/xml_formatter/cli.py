"""CLI interface for XML Formatter."""

import sys
from pathlib import Path
from typing import Optional

import click

from textkit.config import load_settings
from textkit.shared.cli import error, handle_errors, print_stats, read_input, success, write_output
from textkit.shared.logger import setup_logger

from .formatter import XMLFormatter


@click.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path), required=False)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file (print to stdout if not specified)",
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
    minify: bool,
    indent: Optional[str],
    check: bool,
    stats: bool,
    verbose: bool,
):
    """
    XML Formatter - Validate, pretty-print and minify XML.

    Reads INPUT_FILE, or stdin when omitted.

    Examples:

        \b
        # Pretty print
        xml-fmt feed.xml

        \b
        # Minify to a file
        xml-fmt feed.xml --minify --output feed.min.xml

        \b
        # Validate only
        xml-fmt feed.xml --check
    """
    settings = load_settings()
    setup_logger(__name__, level="DEBUG" if verbose else settings.log_level)

    formatter = XMLFormatter()
    text = read_input(input_file)
    if stats:
        print_stats(text)

    if check:
        result = formatter.validate(text)
        if result.is_valid:
            success("Valid XML")
            sys.exit(0)
        error(f"Invalid XML: {result.error or 'empty input'}")
        sys.exit(1)

    if minify:
        result = formatter.minify(text)
    else:
        result = formatter.format(text, indent=int(indent or settings.indent))

    if not result.ok:
        error(f"Invalid XML: {result.error}")
        sys.exit(1)

    write_output(result.output, output)
    sys.exit(0)


if __name__ == "__main__":
    main()
