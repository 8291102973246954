"""
Single entry point over all converters.

``convert(text, direction, options)`` picks the converter for a direction
and always returns a ConversionResult.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Union

from textkit.config import load_settings
from textkit.csv_converter import CSVConverter
from textkit.json_formatter import JSONFormatter
from textkit.result import ConversionResult, StructureError
from textkit.shared.logger import get_logger
from textkit.xml_formatter import XMLFormatter
from textkit.yaml_converter import YAMLConverter

logger = get_logger(__name__)


class Direction(str, Enum):
    """Supported conversions."""

    CSV_TO_JSON = "csv-to-json"
    JSON_TO_CSV = "json-to-csv"
    JSON_FORMAT = "json-format"
    JSON_MINIFY = "json-minify"
    YAML_TO_JSON = "yaml-to-json"
    JSON_TO_YAML = "json-to-yaml"
    XML_FORMAT = "xml-format"
    XML_MINIFY = "xml-minify"


class TargetFormat(str, Enum):
    """Output formats, valued by their file extension."""

    JSON = "json"
    CSV = "csv"
    YAML = "yaml"
    XML = "xml"


@dataclass(frozen=True)
class ConvertOptions:
    """
    Options for convert().

    Attributes:
        indent: Spaces per level for the format directions (2 or 4);
            None uses the configured default
    """

    indent: Optional[int] = None


TARGET_FORMATS: Dict[Direction, TargetFormat] = {
    Direction.CSV_TO_JSON: TargetFormat.JSON,
    Direction.JSON_TO_CSV: TargetFormat.CSV,
    Direction.JSON_FORMAT: TargetFormat.JSON,
    Direction.JSON_MINIFY: TargetFormat.JSON,
    Direction.YAML_TO_JSON: TargetFormat.JSON,
    Direction.JSON_TO_YAML: TargetFormat.YAML,
    Direction.XML_FORMAT: TargetFormat.XML,
    Direction.XML_MINIFY: TargetFormat.XML,
}

Handler = Callable[[str, int], ConversionResult]

HANDLERS: Dict[Direction, Handler] = {
    Direction.CSV_TO_JSON: lambda text, indent: CSVConverter().csv_to_json(text),
    Direction.JSON_TO_CSV: lambda text, indent: CSVConverter().json_to_csv(text),
    Direction.JSON_FORMAT: lambda text, indent: JSONFormatter().format(text, indent),
    Direction.JSON_MINIFY: lambda text, indent: JSONFormatter().minify(text),
    Direction.YAML_TO_JSON: lambda text, indent: YAMLConverter().yaml_to_json(text),
    Direction.JSON_TO_YAML: lambda text, indent: YAMLConverter().json_to_yaml(text),
    Direction.XML_FORMAT: lambda text, indent: XMLFormatter().format(text, indent),
    Direction.XML_MINIFY: lambda text, indent: XMLFormatter().minify(text),
}


def convert(
    text: str,
    direction: Union[Direction, str],
    options: Optional[ConvertOptions] = None,
) -> ConversionResult:
    """
    Run one conversion.

    Args:
        text: Input text
        direction: Direction or its string value (e.g. "csv-to-json")
        options: Conversion options

    Returns:
        ConversionResult with output or error, never both. An unknown
        direction is a semantic error.
    """
    try:
        direction = Direction(direction)
    except ValueError:
        logger.warning(f"Unknown direction: {direction}")
        return ConversionResult.failure(StructureError(f"Unknown direction: {direction}"))

    indent = options.indent if options and options.indent is not None else load_settings().indent

    logger.debug(f"Dispatching {direction.value} (indent={indent}, {len(text)} chars)")
    return HANDLERS[direction](text, indent)


def target_format(direction: Union[Direction, str]) -> TargetFormat:
    """Format of the text a direction produces."""
    return TARGET_FORMATS[Direction(direction)]


def export_filename(direction: Union[Direction, str], stem: str = "converted") -> str:
    """
    Default download filename for a conversion result.

    Example:
        >>> export_filename("json-to-yaml")
        'converted.yaml'
    """
    return f"{stem}.{target_format(direction).value}"
