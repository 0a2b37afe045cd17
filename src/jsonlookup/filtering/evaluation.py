"""
Evaluation of filter predicates against candidate values.

Operands starting with ``@`` resolve against the candidate being filtered,
operands starting with ``$`` against the document root. Operand paths may
only use key and single-index segments.
"""

import logging
from collections.abc import Callable
from functools import lru_cache
from typing import Any

from jsonlookup.core.value import ValueKind, get_idx, get_key, kind_of
from jsonlookup.exceptions import (
    FilterSyntaxError,
    OperatorNotImplementedError,
    PathEvaluationError,
    PathSyntaxError,
    UnsupportedOperatorError,
    ValueTypeError,
)
from jsonlookup.filtering.comparison import compare
from jsonlookup.filtering.predicate import (
    EXISTS,
    MATCH,
    OPERATORS,
    Predicate,
    parse_predicate,
)
from jsonlookup.parsing.parser import IndexSegment, KeySegment, Segment, parse_path

logger = logging.getLogger(__name__)

RegexMatcher = Callable[[Any, str], bool]


class _Absent:
    """Marker for an operand whose path does not resolve."""

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


def _is_operand_path(text: str, marker: str) -> bool:
    return text == marker or text.startswith((f"{marker}.", f"{marker}["))


@lru_cache(maxsize=256)
def _operand_segments(path: str) -> tuple[Segment, ...]:
    try:
        segments = parse_path(path)
    except PathSyntaxError as e:
        raise FilterSyntaxError(path, e.reason) from e

    for segment in segments[1:]:
        if isinstance(segment, IndexSegment):
            if len(segment.positions) != 1:
                raise FilterSyntaxError(path, "multiple indexes are not supported in filters")
        elif not isinstance(segment, KeySegment):
            raise FilterSyntaxError(
                path, f"{segment.kind.value} segments are not supported in filters"
            )
    return tuple(segments[1:])


def resolve_explicit_path(value: Any, path: str) -> Any:
    """
    Walk an operand path from a starting value.

    Params:
        value: Value the path's root marker stands for
        path: Operand path such as '@.price' or '$.store.book[0].title'

    Returns:
        The value at the end of the path

    Raises:
        FilterSyntaxError: If the path is malformed or uses segments other
            than keys and single indexes
        PathEvaluationError: If the path does not resolve in value
    """
    current = value
    for segment in _operand_segments(path):
        if isinstance(segment, KeySegment):
            current = get_key(current, segment.name)
            continue
        if segment.key:
            current = get_key(current, segment.key)
        current = get_idx(current, segment.positions[0])
    return current


def resolve_operand(text: str, literal: bool, candidate: Any, root: Any) -> Any:
    """
    Resolve one predicate operand to a value.

    Quoted literals and plain text stay strings. Paths that do not resolve
    give ABSENT.
    """
    if literal:
        return text

    if _is_operand_path(text, "@"):
        base = candidate
    elif _is_operand_path(text, "$"):
        base = root
    else:
        return text

    if len(text) == 1:
        return base
    try:
        return resolve_explicit_path(base, text)
    except PathEvaluationError as e:
        logger.debug("Operand '%s' is absent: %s", text, e)
        return ABSENT


def ensure_supported(predicate: Predicate, regex_matcher: RegexMatcher | None = None) -> None:
    """
    Check that a predicate can be evaluated at all.

    Runs before any candidate is visited, so operator and operand errors
    surface even when there is nothing to filter.

    Raises:
        UnsupportedOperatorError: If the operator is unknown
        OperatorNotImplementedError: If =~ is used without a regex matcher
        FilterSyntaxError: If an operand path is malformed
    """
    if predicate.operator not in OPERATORS:
        raise UnsupportedOperatorError(predicate.operator)
    if predicate.operator == MATCH and regex_matcher is None:
        raise OperatorNotImplementedError(MATCH, "pass a regex_matcher in LookupOptions")

    operands = [(predicate.left, predicate.left_literal)]
    if predicate.operator != MATCH:
        operands.append((predicate.right, predicate.right_literal))
    for text, literal in operands:
        if literal or len(text) <= 1:
            continue
        if _is_operand_path(text, "@") or _is_operand_path(text, "$"):
            _operand_segments(text)


def evaluate_predicate(
    predicate: Predicate,
    candidate: Any,
    root: Any,
    regex_matcher: RegexMatcher | None = None,
) -> bool:
    """
    Decide whether a candidate satisfies a predicate.

    Params:
        predicate: Parsed predicate
        candidate: Value the '@' operands resolve against
        root: Document the '$' operands resolve against
        regex_matcher: Optional hook implementing =~

    Returns:
        True if the candidate matches

    Raises:
        OperatorNotImplementedError: If =~ is used without a regex matcher
        UnsupportedOperatorError: If the operator is unknown
    """
    left = resolve_operand(predicate.left, predicate.left_literal, candidate, root)

    if predicate.operator == EXISTS:
        return left is not ABSENT

    if predicate.operator == MATCH:
        if regex_matcher is None:
            raise OperatorNotImplementedError(MATCH, "pass a regex_matcher in LookupOptions")
        if left is ABSENT:
            return False
        return bool(regex_matcher(left, predicate.right))

    right = resolve_operand(predicate.right, predicate.right_literal, candidate, root)
    if left is ABSENT or right is ABSENT:
        return False
    return compare(left, right, predicate.operator)


def get_filtered(
    value: Any,
    root: Any,
    predicate_text: str,
    regex_matcher: RegexMatcher | None = None,
) -> list:
    """
    Keep the children of a container that satisfy a predicate.

    Params:
        value: Array (filtered in order) or object (filtered by member values)
        root: Document root for '$' operands
        predicate_text: Unparsed predicate text
        regex_matcher: Optional hook implementing =~

    Returns:
        Flat list of the matching children

    Raises:
        FilterError: If the predicate is malformed or cannot be evaluated
        ValueTypeError: If value is neither an array nor an object
    """
    predicate = parse_predicate(predicate_text)
    ensure_supported(predicate, regex_matcher)

    kind = kind_of(value)
    if kind is ValueKind.ARRAY:
        candidates = list(value)
    elif kind is ValueKind.OBJECT:
        candidates = list(value.values())
    else:
        raise ValueTypeError("filterable", kind.value)

    results = []
    for candidate in candidates:
        try:
            matched = evaluate_predicate(predicate, candidate, root, regex_matcher)
        except PathEvaluationError as e:
            logger.debug("Skipping candidate for filter '%s': %s", predicate, e)
            continue
        if matched:
            results.append(candidate)
    return results
