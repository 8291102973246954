"""Tests for values, results, stats and settings."""

import pytest

from textkit.config import Settings, load_settings
from textkit.result import ConversionResult, ErrorKind, FormatSyntaxError, StructureError
from textkit.stats import text_stats
from textkit.values import ValueKind, coerce_scalar, decode_json, kind_of, parse_number, stringify_scalar


class TestValues:
    """Test the value variant helpers."""

    @pytest.mark.parametrize(
        "value, kind",
        [
            (None, ValueKind.NULL),
            (True, ValueKind.BOOL),
            (0, ValueKind.NUMBER),
            (1.5, ValueKind.NUMBER),
            ("", ValueKind.STRING),
            ([], ValueKind.ARRAY),
            ({}, ValueKind.OBJECT),
        ],
    )
    def test_kind_of(self, value, kind):
        assert kind_of(value) is kind

    def test_kind_of_rejects_other_types(self):
        with pytest.raises(TypeError):
            kind_of(object())

    def test_container_flag(self):
        assert ValueKind.ARRAY.is_container
        assert ValueKind.OBJECT.is_container
        assert not ValueKind.STRING.is_container

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("42", 42),
            ("-7", -7),
            ("+3", 3),
            ("2.", 2.0),
            (".5", 0.5),
            ("1E-2", 0.01),
            ("1,000", None),
            ("0x10", None),
            ("Infinity", None),
            ("1e400", None),
            ("-1e999", None),
            ("١٢", None),
            ("1٢", None),
            ("", None),
        ],
    )
    def test_parse_number(self, token, expected):
        assert parse_number(token) == expected

    def test_integers_stay_integers(self):
        assert isinstance(parse_number("10"), int)
        assert isinstance(parse_number("10.0"), float)

    def test_coerce_scalar(self):
        assert coerce_scalar("true") is True
        assert coerce_scalar("false") is False
        assert coerce_scalar("null") == "null"
        assert coerce_scalar("null", allow_null=True) is None
        assert coerce_scalar("") == ""
        assert coerce_scalar("TRUE") == "TRUE"

    def test_stringify_scalar(self):
        assert stringify_scalar(None) == ""
        assert stringify_scalar(False) == "false"
        assert stringify_scalar(3) == "3"
        assert stringify_scalar(0.25) == "0.25"
        assert stringify_scalar({"a": [1]}) == '{"a":[1]}'

    def test_decode_json(self):
        assert decode_json('{"a": [1, 2.5, null]}') == {"a": [1, 2.5, None]}

    @pytest.mark.parametrize("text", ["NaN", "[Infinity]", "-Infinity", "1e400", "[1, }"])
    def test_decode_json_rejects(self, text):
        with pytest.raises(FormatSyntaxError):
            decode_json(text)


class TestConversionResult:
    """Test result construction."""

    def test_success(self):
        result = ConversionResult.success("out")
        assert result.ok
        assert result.is_valid
        assert result.error_kind is None

    def test_failure(self):
        result = ConversionResult.failure(StructureError("bad shape"))

        assert not result.ok
        assert result.output == ""
        assert result.error == "bad shape"
        assert result.error_kind is ErrorKind.SEMANTIC

    def test_empty(self):
        result = ConversionResult.empty()
        assert result.ok
        assert not result.is_valid

    def test_to_dict(self):
        data = ConversionResult.failure(FormatSyntaxError("oops")).to_dict()
        assert data == {"output": "", "error": "oops", "error_kind": "syntax", "is_valid": False}

    def test_errors_are_value_errors(self):
        assert issubclass(FormatSyntaxError, ValueError)
        assert issubclass(StructureError, ValueError)


class TestStats:
    """Test input statistics."""

    def test_empty(self):
        stats = text_stats("")
        assert (stats.lines, stats.chars) == (0, 0)

    def test_lines_and_chars(self):
        stats = text_stats("a\nbc\n")
        assert (stats.lines, stats.chars) == (3, 5)


class TestSettings:
    """Test environment settings."""

    def test_defaults(self):
        assert load_settings({}) == Settings()

    def test_values(self):
        settings = load_settings(
            {
                "TEXTKIT_INDENT": "4",
                "TEXTKIT_LOG_LEVEL": "debug",
                "TEXTKIT_HOST": "0.0.0.0",
                "TEXTKIT_PORT": "9000",
            }
        )
        assert settings == Settings(indent=4, log_level="DEBUG", host="0.0.0.0", port=9000)

    @pytest.mark.parametrize("raw", ["3", "two", "-2"])
    def test_invalid_indent_falls_back(self, raw):
        assert load_settings({"TEXTKIT_INDENT": raw}).indent == 2

    def test_invalid_port_falls_back(self):
        assert load_settings({"TEXTKIT_PORT": "http"}).port == 8000

    def test_invalid_log_level_falls_back(self):
        assert load_settings({"TEXTKIT_LOG_LEVEL": "chatty"}).log_level == "INFO"
