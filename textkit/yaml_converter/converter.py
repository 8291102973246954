"""
Core JSON <-> YAML subset conversion logic.

Only a flat subset of YAML is read back: every ``key: value`` line becomes one
entry of a single mapping, and indentation is not used to rebuild nesting.
Writing is recursive over objects and arrays with a fixed two-space step.
"""

import json
import re
from typing import Any, Callable, Dict

from textkit.result import ConversionResult, FormatSyntaxError
from textkit.shared.logger import get_logger
from textkit.values import ValueKind, coerce_scalar, decode_json, format_number, kind_of

logger = get_logger(__name__)

INDENT_STEP = "  "
COMMENT_PREFIX = "#"
BULLET_PATTERN = re.compile(r"^-\s*")
QUOTE = '"'


def parse_scalar(raw: str) -> Any:
    """
    Type a YAML scalar.

    Double-quoted values are unquoted (JSON escapes decoded when they are
    valid); ``true``/``false``/``null`` and numbers are coerced; anything
    else stays a string.
    """
    if len(raw) >= 2 and raw.startswith(QUOTE) and raw.endswith(QUOTE):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            return raw[1:-1]
    return coerce_scalar(raw, allow_null=True)


class YAMLConverter:
    """Convert between JSON text and a flat YAML subset."""

    def __init__(self, indent: int = 2):
        """
        Initialize YAML converter.

        Args:
            indent: Indentation of the JSON produced by yaml_to_json
        """
        self.indent = indent
        self._renderers: Dict[ValueKind, Callable[[Any, int], str]] = {
            ValueKind.NULL: self._render_null,
            ValueKind.BOOL: self._render_bool,
            ValueKind.NUMBER: self._render_number,
            ValueKind.STRING: self._render_string,
            ValueKind.ARRAY: self._render_array,
            ValueKind.OBJECT: self._render_object,
        }
        logger.debug("Initialized YAMLConverter")

    def parse_mapping(self, text: str) -> Dict[str, Any]:
        """
        Read ``key: value`` lines into one flat mapping.

        Blank lines and comments are skipped, as are lines without a colon.
        A leading ``-`` bullet on the key is dropped. Later keys overwrite
        earlier ones.

        Args:
            text: YAML text

        Returns:
            Flat mapping in line order
        """
        result: Dict[str, Any] = {}

        for line_no, line in enumerate(text.split("\n"), start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith(COMMENT_PREFIX):
                continue
            if ":" not in line:
                logger.debug(f"Line {line_no}: no colon, skipped")
                continue

            key, _, value = line.partition(":")
            key = BULLET_PATTERN.sub("", key.strip())
            result[key] = parse_scalar(value.strip())

        return result

    def yaml_to_json(self, text: str) -> ConversionResult:
        """
        Convert YAML subset text to a flat JSON object.

        Never fails: unreadable lines are skipped.

        Args:
            text: YAML text

        Returns:
            ConversionResult with indented JSON
        """
        if not text.strip():
            return ConversionResult.empty()

        mapping = self.parse_mapping(text)
        logger.info(f"Read {len(mapping)} YAML key(s)")
        return ConversionResult.success(json.dumps(mapping, indent=self.indent, ensure_ascii=False, allow_nan=False))

    def render(self, value: Any, depth: int = 0) -> str:
        """
        Render a decoded value as YAML.

        Containers render as a block that starts with a newline, so the
        caller can append them directly after ``key:`` or ``- ``.

        Args:
            value: Decoded JSON value
            depth: Nesting level (two spaces each)

        Returns:
            YAML fragment
        """
        return self._renderers[kind_of(value)](value, depth)

    def _render_null(self, value: None, depth: int) -> str:
        return "null"

    def _render_bool(self, value: bool, depth: int) -> str:
        return "true" if value else "false"

    def _render_number(self, value: Any, depth: int) -> str:
        return format_number(value)

    def _render_string(self, value: str, depth: int) -> str:
        if "\n" in value or QUOTE in value:
            return json.dumps(value, ensure_ascii=False)
        return value

    def _render_array(self, value: list, depth: int) -> str:
        spaces = INDENT_STEP * depth
        lines = [f"{spaces}- {self.render(item, depth + 1)}" for item in value]
        return "\n" + "\n".join(lines) if lines else ""

    def _render_object(self, value: dict, depth: int) -> str:
        spaces = INDENT_STEP * depth
        lines = []
        for key, item in value.items():
            if kind_of(item).is_container:
                lines.append(f"{spaces}{key}:{self.render(item, depth + 1)}")
            else:
                lines.append(f"{spaces}{key}: {self.render(item, depth + 1)}")
        return "\n" + "\n".join(lines) if lines else ""

    def dump(self, data: Any) -> str:
        """Render a decoded value as a YAML document."""
        rendered = self.render(data)
        return rendered[1:] if rendered.startswith("\n") else rendered

    def json_to_yaml(self, text: str) -> ConversionResult:
        """
        Convert JSON text to YAML.

        Args:
            text: JSON text

        Returns:
            ConversionResult with YAML, or the JSON parser's error
        """
        if not text.strip():
            return ConversionResult.empty()

        try:
            data = decode_json(text)
        except FormatSyntaxError as e:
            logger.warning(f"JSON to YAML failed: {e}")
            return ConversionResult.failure(e)

        return ConversionResult.success(self.dump(data))


def yaml_to_json(text: str) -> ConversionResult:
    """Convert YAML subset text to JSON (see YAMLConverter.yaml_to_json)."""
    return YAMLConverter().yaml_to_json(text)


def json_to_yaml(text: str) -> ConversionResult:
    """Convert JSON text to YAML (see YAMLConverter.json_to_yaml)."""
    return YAMLConverter().json_to_yaml(text)
