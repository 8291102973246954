"""CLI interface for YAML Converter."""

import sys
from pathlib import Path
from typing import Optional

import click

from textkit.config import load_settings
from textkit.shared.cli import error, handle_errors, info, print_stats, read_input, write_output
from textkit.shared.logger import setup_logger

from .converter import YAMLConverter


def detect_target(input_file: Optional[Path]) -> Optional[str]:
    """Guess the target format from the input file extension."""
    if input_file is None:
        return None
    suffix = input_file.suffix.lower()
    if suffix in [".yaml", ".yml"]:
        return "json"
    if suffix == ".json":
        return "yaml"
    return None


@click.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path), required=False)
@click.option(
    "--to",
    "-t",
    "to_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    help="Target format (auto-detect from file extension if not specified)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file (print to stdout if not specified)",
)
@click.option("--stats", is_flag=True, help="Show line and character counts of the input")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@handle_errors
def main(
    input_file: Optional[Path],
    to_format: Optional[str],
    output: Optional[Path],
    stats: bool,
    verbose: bool,
):
    """
    YAML Converter - Convert between JSON and simple YAML.

    Reading YAML is flat: each `key: value` line becomes one entry and
    nesting is not rebuilt.

    Examples:

        \b
        # JSON to YAML
        yaml-json config.json

        \b
        # Flat YAML to JSON
        yaml-json settings.yaml --output settings.json
    """
    settings = load_settings()
    setup_logger(__name__, level="DEBUG" if verbose else settings.log_level)

    target = (to_format or detect_target(input_file) or "").lower()
    if not target:
        error("Cannot auto-detect target format, use --to")
        sys.exit(1)

    text = read_input(input_file)
    if stats:
        print_stats(text)

    converter = YAMLConverter()
    if target == "json":
        info("Converting YAML to JSON")
        result = converter.yaml_to_json(text)
    else:
        info("Converting JSON to YAML")
        result = converter.json_to_yaml(text)

    if not result.ok:
        error(result.error)
        sys.exit(1)

    write_output(result.output, output)
    sys.exit(0)


if __name__ == "__main__":
    main()
