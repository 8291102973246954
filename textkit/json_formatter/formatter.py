"""Core JSON validation and formatting logic."""

import json
from typing import Any, Optional

import jmespath
from jmespath.exceptions import JMESPathError

from textkit.config import ALLOWED_INDENTS
from textkit.result import ConversionError, ConversionResult, FormatSyntaxError, StructureError
from textkit.shared.logger import get_logger
from textkit.values import decode_json

logger = get_logger(__name__)


class JSONFormatter:
    """
    Validate, pretty-print and minify JSON.

    Results carry ``is_valid`` so callers can show a status badge.
    """

    def __init__(self):
        """Initialize JSON formatter."""
        logger.debug("Initialized JSONFormatter")

    def parse(self, text: str) -> Any:
        """
        Parse JSON text.

        Raises:
            FormatSyntaxError: With the decoder's message
        """
        return decode_json(text)

    def dump(self, data: Any, indent: Optional[int] = None) -> str:
        """
        Serialize data, indented or minified when indent is None.

        Raises:
            StructureError: If data holds NaN or an infinite float
        """
        try:
            if indent is None:
                return json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
            return json.dumps(data, indent=indent, ensure_ascii=False, allow_nan=False)
        except ValueError as e:
            raise StructureError(str(e)) from e

    def _run(self, text: str, indent: Optional[int], expression: Optional[str] = None) -> ConversionResult:
        if not text.strip():
            return ConversionResult.empty()

        try:
            if indent is not None and indent not in ALLOWED_INDENTS:
                raise StructureError(f"Unsupported indent: {indent} (expected 2 or 4)")
            data = self.parse(text)
            if expression:
                data = self.search(data, expression)
            output = self.dump(data, indent)

        except ConversionError as e:
            logger.warning(f"JSON formatting failed: {e}")
            return ConversionResult.failure(e)

        return ConversionResult.success(output)

    def search(self, data: Any, expression: str) -> Any:
        """
        Query data using JMESPath.

        Raises:
            StructureError: If the expression is invalid
        """
        try:
            return jmespath.search(expression, data)
        except JMESPathError as e:
            raise StructureError(f"Query failed: {e}") from e

    def format(self, text: str, indent: int = 2) -> ConversionResult:
        """
        Pretty-print JSON.

        Args:
            text: JSON text
            indent: Spaces per level (2 or 4)

        Returns:
            ConversionResult with formatted JSON, or the parser's error
        """
        return self._run(text, indent)

    def minify(self, text: str) -> ConversionResult:
        """
        Minify JSON (remove whitespace).

        Args:
            text: JSON text

        Returns:
            ConversionResult with minified JSON, or the parser's error
        """
        return self._run(text, None)

    def query(self, text: str, expression: str, indent: Optional[int] = 2) -> ConversionResult:
        """
        Extract part of a JSON document with JMESPath, then format it.

        Args:
            text: JSON text
            expression: JMESPath expression
            indent: Spaces per level, or None to minify

        Returns:
            ConversionResult with the formatted query result
        """
        return self._run(text, indent, expression)

    def validate(self, text: str) -> ConversionResult:
        """Check that text is valid JSON without producing output."""
        if not text.strip():
            return ConversionResult.empty()
        try:
            self.parse(text)
        except FormatSyntaxError as e:
            return ConversionResult.failure(e)
        return ConversionResult.success("")


def format_json(text: str, indent: int = 2) -> ConversionResult:
    return JSONFormatter().format(text, indent)


def minify_json(text: str) -> ConversionResult:
    return JSONFormatter().minify(text)
