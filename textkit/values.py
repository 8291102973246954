"""
Parsed value model shared by the converters.

Values produced by ``json.loads`` (and by the CSV/YAML tokenizers) are tagged
once with :func:`kind_of`; serializers then dispatch on the tag instead of
inspecting Python types themselves.
"""

import json
import math
import re
from enum import Enum
from typing import Any, NoReturn, Optional, Union

from textkit.result import FormatSyntaxError

Number = Union[int, float]

NUMBER_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)
INTEGER_PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)


class ValueKind(str, Enum):
    """Tags of the parsed value variant."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_container(self) -> bool:
        return self in (ValueKind.ARRAY, ValueKind.OBJECT)


def kind_of(value: Any) -> ValueKind:
    """
    Tag a decoded value.

    Args:
        value: Value as produced by ``json.loads``

    Returns:
        Matching ValueKind

    Raises:
        TypeError: If the value is not part of the JSON data model
    """
    if value is None:
        return ValueKind.NULL
    # bool before int: True is an int in Python
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def parse_number(token: str) -> Optional[Number]:
    """Parse a fully numeric ASCII token, or return None. Overflowing floats stay unparsed."""
    if not NUMBER_PATTERN.match(token):
        return None
    if INTEGER_PATTERN.match(token):
        return int(token)
    number = float(token)
    return number if math.isfinite(number) else None


def _reject_constant(name: str) -> NoReturn:
    raise FormatSyntaxError(f"Invalid JSON constant: {name}")


def _finite_float(token: str) -> float:
    number = float(token)
    if not math.isfinite(number):
        raise FormatSyntaxError(f"Number out of range: {token}")
    return number


def decode_json(text: str) -> Any:
    """
    Decode strict JSON.

    ``NaN``, ``Infinity`` and floats that overflow are rejected, so anything
    decoded can be written back as valid JSON.

    Raises:
        FormatSyntaxError: With the decoder's message
    """
    try:
        return json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except json.JSONDecodeError as e:
        raise FormatSyntaxError(str(e)) from e


def coerce_scalar(token: str, allow_null: bool = False) -> Any:
    """
    Coerce a raw text token into a typed scalar.

    ``true``/``false`` become booleans, fully numeric tokens become numbers,
    and with ``allow_null`` the literal ``null`` becomes None. Anything else,
    including the empty string, stays a string.

    Args:
        token: Raw token (already trimmed and unquoted)
        allow_null: Recognize the ``null`` literal

    Returns:
        Coerced value
    """
    if token == "true":
        return True
    if token == "false":
        return False
    if allow_null and token == "null":
        return None
    if token:
        number = parse_number(token)
        if number is not None:
            return number
    return token


def format_number(value: Number) -> str:
    """Literal text of a number."""
    return repr(value) if isinstance(value, float) else str(value)


def stringify_scalar(value: Any) -> str:
    """
    Plain-text rendering of a value for a single cell.

    Null renders empty, booleans as ``true``/``false``; containers fall back
    to compact JSON.
    """
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return ""
    if kind is ValueKind.BOOL:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        return format_number(value)
    if kind is ValueKind.STRING:
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
