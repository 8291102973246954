"""Conversion results and the errors that produce them."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Kinds of conversion failure."""

    SYNTAX = "syntax"
    SEMANTIC = "semantic"


class ConversionError(ValueError):
    """Base class for conversion failures."""

    kind: ErrorKind = ErrorKind.SYNTAX


class FormatSyntaxError(ConversionError):
    """Input violates the grammar of its format. Message comes from the parser."""

    kind = ErrorKind.SYNTAX


class StructureError(ConversionError):
    """Input parsed, but its shape does not fit the requested conversion."""

    kind = ErrorKind.SEMANTIC


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of a conversion.

    Either ``output`` holds the converted text and ``error`` is None, or
    ``output`` is empty and ``error`` holds the message.

    Attributes:
        output: Converted text
        error: Error message, if the conversion failed
        error_kind: Kind of the error, if any
        is_valid: Whether the input parsed successfully
    """

    output: str = ""
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    is_valid: bool = False

    @classmethod
    def success(cls, output: str) -> "ConversionResult":
        return cls(output=output, is_valid=True)

    @classmethod
    def failure(cls, exc: ConversionError) -> "ConversionResult":
        message = str(exc) or exc.__class__.__name__
        return cls(output="", error=message, error_kind=exc.kind, is_valid=False)

    @classmethod
    def empty(cls) -> "ConversionResult":
        """Result for blank input: nothing to convert and nothing wrong."""
        return cls()

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["error_kind"] = self.error_kind.value if self.error_kind else None
        return data
