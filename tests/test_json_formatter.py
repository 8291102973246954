"""Tests for JSON Formatter."""

import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from textkit.json_formatter import JSONFormatter, format_json, minify_json
from textkit.result import ErrorKind


@pytest.fixture
def formatter():
    return JSONFormatter()


class TestFormat:
    """Test pretty-printing."""

    def test_two_spaces(self):
        """Test default indentation."""
        result = format_json('{"a":1,"b":[1,2]}')

        assert result.is_valid
        assert result.output == '{\n  "a": 1,\n  "b": [\n    1,\n    2\n  ]\n}'

    def test_four_spaces(self):
        """Test four-space indentation."""
        assert format_json('{"a":{"b":1}}', 4).output == '{\n    "a": {\n        "b": 1\n    }\n}'

    def test_key_order_preserved(self):
        """Test keys are not sorted."""
        assert format_json('{"z":1,"a":2}').output == '{\n  "z": 1,\n  "a": 2\n}'

    def test_unicode_kept(self):
        """Test non-ASCII text is not escaped."""
        assert format_json('["café"]').output == '[\n  "café"\n]'

    def test_invalid_json(self):
        """Test decoder error is surfaced unchanged."""
        with pytest.raises(json.JSONDecodeError) as exc_info:
            json.loads("{")

        result = format_json("{")

        assert not result.is_valid
        assert result.output == ""
        assert result.error == str(exc_info.value)
        assert result.error_kind is ErrorKind.SYNTAX

    def test_unsupported_indent(self, formatter):
        """Test only 2 and 4 are accepted."""
        result = formatter.format('{"a":1}', indent=3)

        assert result.output == ""
        assert result.error_kind is ErrorKind.SEMANTIC
        assert "3" in result.error

    def test_empty_input(self):
        """Test blank input is neither valid nor an error."""
        result = format_json("  ")
        assert result.output == ""
        assert result.error is None
        assert not result.is_valid

    def test_scalar_document(self):
        """Test a bare scalar is valid JSON."""
        assert format_json(" 42 ").output == "42"


class TestMinify:
    """Test minifying."""

    def test_removes_whitespace(self):
        """Test all insignificant whitespace is dropped."""
        result = minify_json('{ "a" : [1, 2],\n "b": {"c": null} }')
        assert result.is_valid
        assert result.output == '{"a":[1,2],"b":{"c":null}}'

    def test_string_whitespace_kept(self):
        """Test whitespace inside strings survives."""
        assert minify_json('{"a": "x  y"}').output == '{"a":"x  y"}'

    def test_invalid(self):
        """Test minify reports parse errors."""
        result = minify_json("[1,")
        assert not result.is_valid
        assert result.output == ""
        assert result.error


class TestNonFiniteNumbers:
    """Test JavaScript-only number literals are refused."""

    @pytest.mark.parametrize("text", ["NaN", "[Infinity]", '{"a": -Infinity}', "[1e400]"])
    def test_format_rejects(self, text):
        """Test format reports a syntax error instead of echoing the literal."""
        result = format_json(text)

        assert not result.is_valid
        assert result.output == ""
        assert result.error_kind is ErrorKind.SYNTAX

    @pytest.mark.parametrize("text", ["[NaN]", '{"a": Infinity}', "-Infinity", "-1e999"])
    def test_minify_rejects(self, text):
        """Test minify reports a syntax error."""
        result = minify_json(text)

        assert not result.is_valid
        assert result.output == ""
        assert result.error_kind is ErrorKind.SYNTAX

    def test_validate_rejects(self, formatter):
        """Test validate agrees with format."""
        assert not formatter.validate('{"a": NaN}').is_valid

    def test_large_finite_number_kept(self):
        """Test big but finite floats still format."""
        assert minify_json("[1e300]").output == "[1e+300]"

    def test_query_overflow_is_semantic_error(self, formatter):
        """Test a query that sums past the float range fails cleanly."""
        result = formatter.query("[1e308, 1e308]", "sum(@)")

        assert result.output == ""
        assert result.error_kind is ErrorKind.SEMANTIC


class TestQueryAndValidate:
    """Test JMESPath queries and validation."""

    def test_query(self, formatter):
        """Test extracting a sub-document."""
        doc = '{"users": [{"name": "a"}, {"name": "b"}]}'
        assert formatter.query(doc, "users[1].name").output == '"b"'

    def test_query_minified(self, formatter):
        """Test query output without indentation."""
        doc = '{"users": [{"name": "a", "id": 1}]}'
        assert formatter.query(doc, "users[0]", indent=None).output == '{"name":"a","id":1}'

    def test_bad_query(self, formatter):
        """Test invalid expressions are semantic errors."""
        result = formatter.query('{"a": 1}', "a[")
        assert result.error_kind is ErrorKind.SEMANTIC
        assert result.error.startswith("Query failed")

    def test_validate(self, formatter):
        """Test validation without output."""
        assert formatter.validate('{"a": 1}').is_valid
        assert formatter.validate('{"a": 1}').output == ""
        assert not formatter.validate('{"a": }').is_valid


json_documents = st.recursive(
    st.none() | st.booleans() | st.integers() | st.text(max_size=20),
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=8), children, max_size=4),
    max_leaves=20,
)


class TestIdempotence:
    """Property tests for formatting."""

    @given(json_documents, st.sampled_from([2, 4]))
    def test_format_twice(self, document, indent):
        """Test formatting formatted output changes nothing."""
        once = format_json(json.dumps(document), indent)
        twice = format_json(once.output, indent)
        assert twice.output == once.output

    @given(json_documents)
    def test_minify_preserves_value(self, document):
        """Test minified output decodes to the same value."""
        assert json.loads(minify_json(json.dumps(document)).output) == document
