"""JSON Formatter - Validate, pretty-print and minify JSON."""

from .formatter import JSONFormatter, format_json, minify_json

__all__ = ["JSONFormatter", "format_json", "minify_json"]
