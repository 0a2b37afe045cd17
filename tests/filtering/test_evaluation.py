"""
Tests for filter predicate evaluation.

This module tests operand resolution against the candidate and the root,
the exists/comparison/match operators and filtering of whole containers.
"""

import re
from typing import NamedTuple

import pytest

from jsonlookup.exceptions import (
    FilterSyntaxError,
    OperatorNotImplementedError,
    UnsupportedOperatorError,
    ValueTypeError,
)
from jsonlookup.filtering.evaluation import (
    ABSENT,
    ensure_supported,
    evaluate_predicate,
    get_filtered,
    resolve_explicit_path,
    resolve_operand,
)
from jsonlookup.filtering.predicate import Predicate, parse_predicate


def regex_search(value, pattern):
    return re.search(pattern.strip("/"), str(value)) is not None


class ExplicitPathCase(NamedTuple):
    """Test case for operand path resolution."""

    value: object
    path: str
    expected: object


EXPLICIT_PATH_CASES = [
    ExplicitPathCase({"a": 1}, "$.a", 1),
    ExplicitPathCase({"a": {"b": 1}}, "$.a.b", 1),
    ExplicitPathCase({"a": {"b": 1, "c": 2}}, "$.a.c", 2),
    ExplicitPathCase({"a": {"b": 1}, "b": 2}, "$.a.b", 1),
    ExplicitPathCase({"a": {"b": 1}, "b": 2}, "$.b", 2),
    ExplicitPathCase({"a": ["b", 1]}, "$.a[0]", "b"),
    ExplicitPathCase({"a": ["b", 1]}, "@.a[-1]", 1),
    ExplicitPathCase([[1, 2], [3]], "@[1][0]", 3),
]


class TestResolveExplicitPath:
    """Test the resolve_explicit_path() function."""

    @pytest.mark.parametrize("case", EXPLICIT_PATH_CASES, ids=[c.path for c in EXPLICIT_PATH_CASES])
    def test_explicit_paths(self, case):
        """Test key and single-index paths resolve."""
        assert resolve_explicit_path(case.value, case.path) == case.expected

    @pytest.mark.parametrize("path", ["@.a[0,1]", "@.a[0:1]", "@.a[*]", "@..a", "@.a[?(@.b)]"])
    def test_unsupported_segments(self, path):
        """Test only keys and single indexes are allowed in operand paths."""
        with pytest.raises(FilterSyntaxError):
            resolve_explicit_path({"a": [1, 2]}, path)

    def test_malformed_path(self):
        """Test path syntax errors surface as FilterSyntaxError."""
        with pytest.raises(FilterSyntaxError):
            resolve_explicit_path({"a": 1}, "@.a[x]")


class TestResolveOperand:
    """Test the resolve_operand() function."""

    def test_candidate_path(self):
        """Test '@.' operands resolve against the candidate."""
        assert resolve_operand("@.a", False, {"a": 1}, {"a": 2}) == 1

    def test_root_path(self):
        """Test '$.' operands resolve against the root."""
        assert resolve_operand("$.a", False, {"a": 1}, {"a": 2}) == 2

    def test_bare_markers(self):
        """Test bare '@' and '$' are the candidate and root themselves."""
        candidate, root = {"a": 1}, {"a": 2}
        assert resolve_operand("@", False, candidate, root) is candidate
        assert resolve_operand("$", False, candidate, root) is root

    def test_plain_literal(self):
        """Test text that is not a path stays a string."""
        assert resolve_operand("10", False, {}, {}) == "10"

    def test_quoted_literal(self):
        """Test quoted operands are never resolved."""
        assert resolve_operand("@.a", True, {"a": 1}, {}) == "@.a"

    @pytest.mark.parametrize("candidate", [{"a": 1}, {"b": None}, None, 5])
    def test_unresolved_path_is_absent(self, candidate):
        """Test paths that do not resolve give ABSENT."""
        assert resolve_operand("@.b.c", False, candidate, {}) is ABSENT


class EvalCase(NamedTuple):
    """Test case for predicate evaluation."""

    candidate: object
    root: object
    predicate: str
    expected: bool


EVAL_CASES = [
    EvalCase({"a": 1}, {}, "@.a", True),
    EvalCase({"a": 1}, {}, "@.b", False),
    EvalCase({"a": 1}, {"a": 1}, "$.a", True),
    EvalCase({"a": 1}, {"a": 1}, "$.b", False),
    EvalCase({"a": 1, "b": {"c": 2}}, {"a": 1, "b": {"c": 2}}, "$.b.c", True),
    EvalCase({"a": 1, "b": {"c": 2}}, {}, "$.b.a", False),
    EvalCase({"a": 3}, {"a": 3}, "$.a > 1", True),
    EvalCase({"a": None}, {}, "@.a", True),
    EvalCase({"price": 10}, {"limit": 20}, "@.price < $.limit", True),
    EvalCase({"price": 10}, {}, "@.price < $.limit", False),
    EvalCase({"name": "x"}, {}, "@.missing == @.other", False),
    EvalCase({"name": "Nigel Rees"}, {}, "@.name == 'Nigel Rees'", True),
]


class TestEvaluatePredicate:
    """Test the evaluate_predicate() function."""

    @pytest.mark.parametrize("case", EVAL_CASES, ids=[c.predicate for c in EVAL_CASES])
    def test_eval_cases(self, case):
        """Test exists checks and comparisons."""
        predicate = parse_predicate(case.predicate)
        assert evaluate_predicate(predicate, case.candidate, case.root) is case.expected

    def test_match_without_matcher(self):
        """Test '=~' without a regex matcher raises OperatorNotImplementedError."""
        predicate = parse_predicate("@.author =~ /.*REES/i")
        with pytest.raises(OperatorNotImplementedError):
            evaluate_predicate(predicate, {"author": "Nigel Rees"}, {})

    def test_match_with_matcher(self):
        """Test '=~' delegates to the regex matcher."""
        predicate = parse_predicate("@.author =~ /Rees/")
        assert evaluate_predicate(predicate, {"author": "Nigel Rees"}, {}, regex_search) is True
        assert evaluate_predicate(predicate, {"author": "Evelyn Waugh"}, {}, regex_search) is False

    def test_match_absent_operand(self):
        """Test an absent left operand never matches."""
        predicate = parse_predicate("@.author =~ /Rees/")
        assert evaluate_predicate(predicate, {}, {}, regex_search) is False


class TestEnsureSupported:
    """Test the ensure_supported() function."""

    def test_supported_predicate(self):
        """Test a valid comparison passes."""
        ensure_supported(parse_predicate("@.price < $.expensive"))

    def test_unknown_operator(self):
        """Test unknown operators raise UnsupportedOperatorError."""
        with pytest.raises(UnsupportedOperatorError):
            ensure_supported(Predicate("@.a", "!=", "1"))

    def test_match_without_matcher(self):
        """Test '=~' needs a matcher."""
        with pytest.raises(OperatorNotImplementedError):
            ensure_supported(parse_predicate("@.a =~ /x/"))
        ensure_supported(parse_predicate("@.a =~ /x/"), regex_search)

    def test_unsupported_operand_path(self):
        """Test operand paths are checked up front."""
        with pytest.raises(FilterSyntaxError):
            ensure_supported(parse_predicate("@.a[0:1] == 1"))


class TestGetFiltered:
    """Test the get_filtered() function."""

    def test_exists(self, bookstore, books):
        """Test filtering by member existence."""
        result = get_filtered(books, bookstore, "@.isbn")
        assert [book["isbn"] for book in result] == ["0-553-21311-3", "0-395-19395-8"]

    def test_compare_with_literal(self, bookstore, books):
        """Test filtering by comparison with a literal keeps order."""
        result = get_filtered(books, bookstore, "@.price > 10")
        assert [book["title"] for book in result] == ["Sword of Honour", "The Lord of the Rings"]

    def test_compare_with_root(self, bookstore, books):
        """Test filtering by comparison with a root path."""
        result = get_filtered(books, bookstore, "@.price < $.expensive")
        assert [book["price"] for book in result] == [8.95, 8.99]

    def test_object_members(self):
        """Test objects are filtered by member values in order."""
        value = {"x": {"color": "red"}, "y": {"size": 1}, "z": 3, "w": {"color": "blue"}}
        result = get_filtered(value, {}, "@.color")
        assert result == [{"color": "red"}, {"color": "blue"}]

    def test_array_candidates_broadcast(self, bookstore):
        """Test an array candidate 'has' a key through broadcasting."""
        result = get_filtered(bookstore["store"], bookstore, "@.color")
        assert result == [bookstore["store"]["book"], bookstore["store"]["bicycle"]]

    def test_no_matches(self, bookstore, books):
        """Test no match gives an empty list."""
        assert get_filtered(books, bookstore, "@.price > 100") == []

    def test_empty_array_still_checks_operator(self):
        """Test operator errors surface even with nothing to filter."""
        with pytest.raises(OperatorNotImplementedError):
            get_filtered([], {}, "@.a =~ /x/")

    def test_scalar_rejected(self):
        """Test filtering a scalar raises ValueTypeError."""
        with pytest.raises(ValueTypeError):
            get_filtered(5, {}, "@.a")

    def test_bad_candidates_skipped(self):
        """Test candidates that cannot be evaluated are skipped."""
        assert get_filtered([{"a": 1}, 3, None, {"a": 2}], {}, "@.a >= 1") == [{"a": 1}, {"a": 2}]
