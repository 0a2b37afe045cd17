"""
Tests for the exception hierarchy and its messages.
"""

import pytest

from jsonlookup.exceptions import (
    DocumentTypeError,
    EmptyIndexError,
    FilterError,
    FilterSyntaxError,
    IndexOutOfRangeError,
    JSONLookupError,
    KeyNotFoundError,
    NullTraversalError,
    OperatorNotImplementedError,
    PathEvaluationError,
    PathSyntaxError,
    UnsupportedOperatorError,
    ValueTypeError,
)


class TestHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        "error_class",
        [
            KeyNotFoundError,
            NullTraversalError,
            ValueTypeError,
            DocumentTypeError,
            IndexOutOfRangeError,
            EmptyIndexError,
        ],
    )
    def test_evaluation_errors(self, error_class):
        """Test traversal errors share the PathEvaluationError base."""
        assert issubclass(error_class, PathEvaluationError)
        assert issubclass(error_class, JSONLookupError)

    @pytest.mark.parametrize(
        "error_class", [FilterSyntaxError, UnsupportedOperatorError, OperatorNotImplementedError]
    )
    def test_filter_errors(self, error_class):
        """Test filter errors share the FilterError base and are not evaluation errors."""
        assert issubclass(error_class, FilterError)
        assert not issubclass(error_class, PathEvaluationError)

    def test_syntax_error_is_not_evaluation_error(self):
        """Test path syntax errors stay apart from evaluation errors."""
        assert issubclass(PathSyntaxError, JSONLookupError)
        assert not issubclass(PathSyntaxError, PathEvaluationError)


class TestPathSyntaxError:
    """Tests for PathSyntaxError."""

    def test_message_with_position(self):
        """Test the message includes the path, reason and position."""
        error = PathSyntaxError("$.a[0", "unmatched '['", 3)
        assert str(error) == "Invalid path '$.a[0': unmatched '[' (at position 3)"
        assert error.path == "$.a[0"
        assert error.reason == "unmatched '['"
        assert error.position == 3

    def test_message_without_position(self):
        """Test the position is left out when unknown."""
        assert str(PathSyntaxError("$.$", "bad")) == "Invalid path '$.$': bad"

    def test_format_pointer(self):
        """Test the pointer puts a caret under the offending character."""
        error = PathSyntaxError("$.a[0", "unmatched '['", 3)
        assert error.format_pointer() == "$.a[0\n   ^"

    def test_format_pointer_without_position(self):
        """Test the pointer is just the path when no position is known."""
        assert PathSyntaxError("$.$", "bad").format_pointer() == "$.$"


class TestEvaluationErrorMessages:
    """Tests for traversal error messages and attributes."""

    def test_key_not_found(self):
        """Test KeyNotFoundError message and attribute."""
        error = KeyNotFoundError("isbn")
        assert error.key == "isbn"
        assert str(error) == "key error: isbn not found in object"

    def test_null_traversal(self):
        """Test NullTraversalError message."""
        assert str(NullTraversalError("author")) == "get attribute from null object: author"

    def test_value_type(self):
        """Test ValueTypeError message and attributes."""
        error = ValueTypeError("array", "object")
        assert (error.expected, error.actual) == ("array", "object")
        assert str(error) == "object is not array: object"

    def test_document_type(self):
        """Test DocumentTypeError names the foreign type."""
        error = DocumentTypeError(object(), "nested")
        assert error.actual == "object"
        assert str(error) == "unsupported document value of type object: nested"

    @pytest.mark.parametrize(
        "bound,expected",
        [
            ("idx", "index out of range: len: 4, idx: 4"),
            ("from", "index [from] out of range: len: 4, from: 4"),
            ("to", "index [to] out of range: len: 4, to: 4"),
        ],
    )
    def test_index_out_of_range(self, bound, expected):
        """Test IndexOutOfRangeError names the bound, index and length."""
        assert str(IndexOutOfRangeError(4, 4, bound)) == expected

    def test_empty_index(self):
        """Test EmptyIndexError message."""
        assert str(EmptyIndexError()) == "cannot index on empty list"


class TestFilterErrorMessages:
    """Tests for filter error messages."""

    def test_filter_syntax(self):
        """Test FilterSyntaxError keeps predicate, reason and position."""
        error = FilterSyntaxError("@.a == 'x", "unterminated quote", 7)
        assert error.predicate == "@.a == 'x"
        assert str(error) == "Invalid filter '@.a == 'x': unterminated quote (at position 7)"

    def test_unsupported_operator(self):
        """Test UnsupportedOperatorError lists the valid operators."""
        error = UnsupportedOperatorError("!=")
        assert error.operator == "!="
        assert str(error) == "op should only be <, <=, ==, >= and >, got '!='"

    def test_operator_not_implemented(self):
        """Test OperatorNotImplementedError includes the hint."""
        error = OperatorNotImplementedError("=~", "pass a regex_matcher")
        assert str(error) == "filter operator '=~' is not implemented; pass a regex_matcher"
