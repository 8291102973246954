"""Core XML validation and formatting logic."""

import re
from typing import List
from xml.dom import minidom
from xml.parsers.expat import ExpatError

from textkit.config import ALLOWED_INDENTS
from textkit.result import ConversionError, ConversionResult, FormatSyntaxError, StructureError
from textkit.shared.logger import get_logger

logger = get_logger(__name__)

WHITESPACE_GAP = re.compile(r">\s+<")
TAG_BOUNDARY = re.compile(r"(?<=>)(?=<)")

# Line classes, checked in this order
SELF_CONTAINED = re.compile(r".+</\w[^>]*>$", re.DOTALL)
CLOSING_TAG = re.compile(r"^</\w")
OPENING_TAG = re.compile(r"^<\w([^>]*[^/])?>.*$", re.DOTALL)


class XMLFormatter:
    """
    Validate, pretty-print and minify XML.

    Parsing uses xml.dom.minidom; its error message is returned unchanged.
    """

    def __init__(self):
        """Initialize XML formatter."""
        logger.debug("Initialized XMLFormatter")

    def serialize(self, text: str) -> str:
        """
        Parse XML and serialize it back to one flat string.

        Args:
            text: XML text

        Returns:
            Serialized document (top-level nodes, no XML declaration)

        Raises:
            FormatSyntaxError: With the parser's message
        """
        try:
            document = minidom.parseString(text)
        except ExpatError as e:
            raise FormatSyntaxError(str(e)) from e

        try:
            return "".join(node.toxml() for node in document.childNodes)
        finally:
            document.unlink()

    def indent_lines(self, flat: str, indent: int) -> str:
        """
        Break a flat document at every tag boundary and indent each piece.

        Args:
            flat: Serialized document without whitespace between tags
            indent: Spaces per depth level

        Returns:
            Indented document
        """
        lines: List[str] = []
        depth = 0

        for node in TAG_BOUNDARY.split(flat):
            if SELF_CONTAINED.search(node):
                lines.append(" " * (depth * indent) + node)
            elif CLOSING_TAG.match(node):
                depth = max(depth - 1, 0)
                lines.append(" " * (depth * indent) + node)
            elif OPENING_TAG.match(node):
                lines.append(" " * (depth * indent) + node)
                depth += 1
            else:
                lines.append(" " * (depth * indent) + node)

        return "\n".join(lines)

    def format(self, text: str, indent: int = 2) -> ConversionResult:
        """
        Pretty-print XML.

        Args:
            text: XML text
            indent: Spaces per level (2 or 4)

        Returns:
            ConversionResult with formatted XML, or the parser's error
        """
        if not text.strip():
            return ConversionResult.empty()

        try:
            if indent not in ALLOWED_INDENTS:
                raise StructureError(f"Unsupported indent: {indent} (expected 2 or 4)")
            flat = WHITESPACE_GAP.sub("><", self.serialize(text))
            output = self.indent_lines(flat, indent)

        except ConversionError as e:
            logger.warning(f"XML formatting failed: {e}")
            return ConversionResult.failure(e)

        return ConversionResult.success(output)

    def minify(self, text: str) -> ConversionResult:
        """
        Minify XML (remove whitespace between tags).

        Args:
            text: XML text

        Returns:
            ConversionResult with minified XML, or the parser's error
        """
        if not text.strip():
            return ConversionResult.empty()

        try:
            output = WHITESPACE_GAP.sub("><", self.serialize(text)).strip()
        except FormatSyntaxError as e:
            logger.warning(f"XML minify failed: {e}")
            return ConversionResult.failure(e)

        return ConversionResult.success(output)

    def validate(self, text: str) -> ConversionResult:
        """Check that text is well-formed XML without producing output."""
        if not text.strip():
            return ConversionResult.empty()
        try:
            self.serialize(text)
        except FormatSyntaxError as e:
            return ConversionResult.failure(e)
        return ConversionResult.success("")


def format_xml(text: str, indent: int = 2) -> ConversionResult:
    return XMLFormatter().format(text, indent)


def minify_xml(text: str) -> ConversionResult:
    return XMLFormatter().minify(text)
