"""Tests for the converter dispatcher."""

import json

import pytest

from textkit import ConvertOptions, Direction, ErrorKind, convert, export_filename
from textkit.dispatcher import TargetFormat, target_format


class TestConvert:
    """Test direction dispatch."""

    @pytest.mark.parametrize(
        "direction, text, expected",
        [
            (Direction.CSV_TO_JSON, "a\n1", '[\n  {\n    "a": 1\n  }\n]'),
            (Direction.JSON_TO_CSV, '[{"a": 1}, {"b": 2}]', "a,b\n1,\n,2"),
            (Direction.JSON_FORMAT, '{"a":1}', '{\n  "a": 1\n}'),
            (Direction.JSON_MINIFY, '{ "a" : 1 }', '{"a":1}'),
            (Direction.YAML_TO_JSON, "a: 1", '{\n  "a": 1\n}'),
            (Direction.JSON_TO_YAML, '{"a":1,"b":[1,2]}', "a: 1\nb:\n  - 1\n  - 2"),
            (Direction.XML_FORMAT, "<r><a/></r>", "<r>\n  <a/>\n</r>"),
            (Direction.XML_MINIFY, "<r>\n  <a/>\n</r>", "<r><a/></r>"),
        ],
    )
    def test_each_direction(self, direction, text, expected, monkeypatch):
        """Test every direction reaches its converter."""
        monkeypatch.delenv("TEXTKIT_INDENT", raising=False)

        result = convert(text, direction)

        assert result.ok
        assert result.output == expected

    def test_string_direction(self):
        """Test directions may be given by value."""
        assert convert("a\n1", "csv-to-json").ok

    def test_unknown_direction(self):
        """Test unknown directions come back as a semantic error result."""
        result = convert("x", "csv-to-xml")

        assert result.output == ""
        assert result.error == "Unknown direction: csv-to-xml"
        assert result.error_kind is ErrorKind.SEMANTIC
        assert not result.is_valid

    def test_indent_option(self):
        """Test indent is passed to formatters."""
        result = convert('{"a":1}', Direction.JSON_FORMAT, ConvertOptions(indent=4))
        assert result.output == '{\n    "a": 1\n}'

    def test_default_indent_from_environment(self, monkeypatch):
        """Test TEXTKIT_INDENT sets the default indentation."""
        monkeypatch.setenv("TEXTKIT_INDENT", "4")
        assert convert("<r><a/></r>", Direction.XML_FORMAT).output == "<r>\n    <a/>\n</r>"

    def test_csv_output_ignores_indent(self):
        """Test CSV to JSON always uses two spaces."""
        result = convert("a\n1", Direction.CSV_TO_JSON, ConvertOptions(indent=4))
        assert result.output == '[\n  {\n    "a": 1\n  }\n]'

    def test_error_result(self):
        """Test errors come back as results, never exceptions."""
        result = convert('{"a": 1}', Direction.JSON_TO_CSV)

        assert result.output == ""
        assert result.error == "JSON must be an array of objects"
        assert result.error_kind is ErrorKind.SEMANTIC

    def test_output_and_error_exclusive(self):
        """Test no direction returns both output and error."""
        for direction in Direction:
            for text in ["", "{", "<a>", "a,b\n1,2", '{"a": 1}']:
                result = convert(text, direction)
                assert not (result.output and result.error)

    def test_chained_conversions(self):
        """Test CSV -> JSON -> YAML."""
        as_json = convert("name,age\nAda,36", Direction.CSV_TO_JSON).output
        as_yaml = convert(as_json, Direction.JSON_TO_YAML).output
        assert as_yaml == "- \n  name: Ada\n  age: 36"
        assert json.loads(as_json) == [{"name": "Ada", "age": 36}]


class TestExport:
    """Test export naming."""

    @pytest.mark.parametrize(
        "direction, filename",
        [
            ("csv-to-json", "converted.json"),
            ("json-to-csv", "converted.csv"),
            ("json-to-yaml", "converted.yaml"),
            ("xml-minify", "converted.xml"),
        ],
    )
    def test_export_filename(self, direction, filename):
        assert export_filename(direction) == filename

    def test_custom_stem(self):
        assert export_filename(Direction.JSON_FORMAT, stem="data") == "data.json"

    def test_every_direction_has_target(self):
        for direction in Direction:
            assert isinstance(target_format(direction), TargetFormat)
