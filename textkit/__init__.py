"""
textkit

Pure text-format converters: CSV <-> JSON, JSON <-> YAML (flat subset),
and JSON/XML validation, formatting and minifying.
"""

__version__ = "0.1.0"

from .dispatcher import ConvertOptions, Direction, convert, export_filename
from .result import ConversionResult, ErrorKind

__all__ = [
    "ConversionResult",
    "ConvertOptions",
    "Direction",
    "ErrorKind",
    "convert",
    "export_filename",
]
