"""CLI interface for the converter dispatcher."""

import sys
from pathlib import Path
from typing import Optional

import click

from textkit import __version__
from textkit.config import load_settings
from textkit.dispatcher import ConvertOptions, Direction, convert, export_filename
from textkit.shared.cli import (
    create_table,
    error,
    handle_errors,
    info,
    print_stats,
    print_table,
    read_input,
    write_output,
)
from textkit.shared.logger import setup_logger


@click.group()
@click.version_option(__version__, prog_name="textkit")
def main():
    """textkit - Convert and format CSV, JSON, YAML and XML text."""


@main.command("convert")
@click.argument("input_file", type=click.Path(exists=True, path_type=Path), required=False)
@click.option(
    "--direction",
    "-d",
    type=click.Choice([d.value for d in Direction]),
    required=True,
    help="Conversion to run",
)
@click.option(
    "--indent",
    type=click.Choice(["2", "4"]),
    help="Indentation for json-format/xml-format (default from TEXTKIT_INDENT, else 2)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file (print to stdout if not specified)",
)
@click.option(
    "--export",
    "export_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Write to the default export filename inside this directory",
)
@click.option("--stats", is_flag=True, help="Show line and character counts of the input")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@handle_errors
def convert_command(
    input_file: Optional[Path],
    direction: str,
    indent: Optional[str],
    output: Optional[Path],
    export_dir: Optional[Path],
    stats: bool,
    verbose: bool,
):
    """
    Convert INPUT_FILE (or stdin) in the given direction.

    Examples:

        \b
        textkit convert people.csv -d csv-to-json
        textkit convert data.json -d json-format --indent 4
        textkit convert data.json -d json-to-yaml --export out/
    """
    settings = load_settings()
    setup_logger(__name__, level="DEBUG" if verbose else settings.log_level)

    text = read_input(input_file)
    if stats:
        print_stats(text)

    options = ConvertOptions(indent=int(indent) if indent else None)
    result = convert(text, direction, options)

    if not result.ok:
        error(result.error)
        sys.exit(1)

    if export_dir is not None and output is None:
        export_dir.mkdir(parents=True, exist_ok=True)
        output = export_dir / export_filename(direction)
        info(f"Exporting to {output}")

    write_output(result.output, output)
    sys.exit(0)


@main.command("directions")
def directions_command():
    """List supported conversion directions."""
    table = create_table("Directions", "Direction", "Export file")
    for direction in Direction:
        table.add_row(direction.value, export_filename(direction))
    print_table(table)


if __name__ == "__main__":
    main()
