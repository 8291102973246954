"""Core CSV <-> JSON conversion logic."""

import json
from enum import Enum
from typing import Any, Dict, List

from textkit.result import ConversionError, ConversionResult, StructureError
from textkit.shared.logger import get_logger
from textkit.values import ValueKind, coerce_scalar, decode_json, kind_of, stringify_scalar

logger = get_logger(__name__)

DELIMITER = ","
QUOTE = '"'
NEEDS_QUOTING = (DELIMITER, QUOTE, "\n")

NOT_AN_ARRAY = "JSON must be an array of objects"


class FieldState(str, Enum):
    """Tokenizer states."""

    UNQUOTED = "unquoted"
    QUOTED = "quoted"


def tokenize_line(line: str) -> List[str]:
    """
    Split one CSV line into trimmed fields.

    A lone or unbalanced quote never fails: it just toggles the state, so the
    rest of the line is read as one quoted run.

    Args:
        line: A single physical line

    Returns:
        List of field values
    """
    fields: List[str] = []
    buffer: List[str] = []
    state = FieldState.UNQUOTED
    i = 0

    while i < len(line):
        char = line[i]

        if char == QUOTE:
            if state is FieldState.QUOTED and line[i + 1 : i + 2] == QUOTE:
                buffer.append(QUOTE)
                i += 1
            elif state is FieldState.QUOTED:
                state = FieldState.UNQUOTED
            else:
                state = FieldState.QUOTED
        elif char == DELIMITER and state is FieldState.UNQUOTED:
            fields.append("".join(buffer).strip())
            buffer = []
        else:
            buffer.append(char)

        i += 1

    fields.append("".join(buffer).strip())
    return fields


def strip_quotes(value: str) -> str:
    """Remove one pair of surrounding double quotes, if present."""
    if len(value) >= 2 and value.startswith(QUOTE) and value.endswith(QUOTE):
        return value[1:-1]
    return value


def escape_cell(value: Any) -> str:
    """
    Render a value as a CSV cell.

    Cells containing a comma, quote or newline are wrapped in quotes with
    internal quotes doubled.
    """
    text = stringify_scalar(value)
    if any(ch in text for ch in NEEDS_QUOTING):
        return QUOTE + text.replace(QUOTE, QUOTE * 2) + QUOTE
    return text


class CSVConverter:
    """
    Convert between CSV text and JSON arrays of objects.

    Stateless: every call keeps its buffers local, so one instance can be
    shared freely.
    """

    def __init__(self, indent: int = 2):
        """
        Initialize CSV converter.

        Args:
            indent: Indentation of the JSON produced by csv_to_json
        """
        self.indent = indent
        logger.debug("Initialized CSVConverter")

    def parse_records(self, text: str) -> List[Dict[str, Any]]:
        """
        Parse CSV text into a list of records.

        The first line is the header. Blank lines are skipped, missing
        trailing fields become empty strings and surplus fields are dropped.

        Args:
            text: CSV text

        Returns:
            List of records (dicts in header order)
        """
        lines = text.strip().split("\n")
        header = [strip_quotes(name) for name in tokenize_line(lines[0])]
        logger.debug(f"CSV header: {header}")

        records = []
        for line_no, line in enumerate(lines[1:], start=2):
            if not line.strip():
                continue

            values = tokenize_line(line.strip())
            if len(values) > len(header):
                logger.debug(f"Line {line_no}: dropping {len(values) - len(header)} extra field(s)")

            record: Dict[str, Any] = {}
            for index, name in enumerate(header):
                raw = values[index] if index < len(values) else ""
                record[name] = coerce_scalar(strip_quotes(raw))
            records.append(record)

        return records

    def csv_to_json(self, text: str) -> ConversionResult:
        """
        Convert CSV text to a JSON array of objects.

        Args:
            text: CSV text

        Returns:
            ConversionResult with indented JSON
        """
        if not text.strip():
            return ConversionResult.empty()

        records = self.parse_records(text)
        logger.info(f"Parsed {len(records)} CSV record(s)")
        return ConversionResult.success(json.dumps(records, indent=self.indent, ensure_ascii=False, allow_nan=False))

    def build_csv(self, data: Any) -> str:
        """
        Render decoded JSON as CSV.

        Args:
            data: Decoded JSON value

        Returns:
            CSV text (trailing newlines trimmed)

        Raises:
            StructureError: If data is not an array
        """
        if kind_of(data) is not ValueKind.ARRAY:
            raise StructureError(NOT_AN_ARRAY)
        if not data:
            return ""

        # dict keeps first-seen order
        header: Dict[str, None] = {}
        for item in data:
            if kind_of(item) is ValueKind.OBJECT:
                header.update(dict.fromkeys(item))
        columns = list(header)

        rows = [",".join(escape_cell(name) for name in columns)]
        for item in data:
            record = item if kind_of(item) is ValueKind.OBJECT else {}
            rows.append(",".join(escape_cell(record.get(name)) for name in columns))

        return "\n".join(rows).rstrip("\n")

    def json_to_csv(self, text: str) -> ConversionResult:
        """
        Convert a JSON array of objects to CSV.

        Args:
            text: JSON text

        Returns:
            ConversionResult with CSV text, or the parse/structure error
        """
        if not text.strip():
            return ConversionResult.empty()

        try:
            data = decode_json(text)
            csv_text = self.build_csv(data)

        except ConversionError as e:
            logger.warning(f"JSON to CSV failed: {e}")
            return ConversionResult.failure(e)

        return ConversionResult.success(csv_text)


def csv_to_json(text: str) -> ConversionResult:
    """Convert CSV text to JSON (see CSVConverter.csv_to_json)."""
    return CSVConverter().csv_to_json(text)


def json_to_csv(text: str) -> ConversionResult:
    """Convert JSON text to CSV (see CSVConverter.json_to_csv)."""
    return CSVConverter().json_to_csv(text)
