"""XML Formatter - Validate, pretty-print and minify XML."""

from .formatter import XMLFormatter, format_xml, minify_xml

__all__ = ["XMLFormatter", "format_xml", "minify_xml"]
