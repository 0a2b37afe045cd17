"""
Path evaluation over decoded JSON documents.

Segments are applied strictly left to right, threading the current value
forward. The document root stays fixed so filter operands starting with '$'
always see the whole document.
"""

import logging
from collections.abc import Sequence
from typing import Any

from jsonlookup.core.value import (
    ValueKind,
    get_idx,
    get_key,
    get_range,
    get_scan,
    iter_descendants,
    kind_of,
)
from jsonlookup.exceptions import EmptyIndexError, PathEvaluationError
from jsonlookup.filtering.evaluation import RegexMatcher, get_filtered
from jsonlookup.parsing.parser import (
    FilterSegment,
    IndexSegment,
    KeySegment,
    RangeSegment,
    RootSegment,
    ScanSegment,
    Segment,
)

logger = logging.getLogger(__name__)


def apply_segment(
    segment: Segment,
    current: Any,
    root: Any,
    regex_matcher: RegexMatcher | None = None,
) -> Any:
    """
    Apply a single segment to the current value.

    Params:
        segment: Segment to apply
        current: Value produced by the previous segments
        root: Document root, used by filter operands
        regex_matcher: Optional hook implementing the =~ filter operator

    Returns:
        The value selected by the segment

    Raises:
        PathEvaluationError: If the segment does not apply to current
        FilterError: If a filter predicate is malformed
    """
    if isinstance(segment, RootSegment):
        return root
    if isinstance(segment, KeySegment):
        return get_key(current, segment.name)
    if isinstance(segment, ScanSegment):
        return get_scan(current)

    if segment.key:
        current = get_key(current, segment.key)

    if isinstance(segment, IndexSegment):
        if not segment.positions:
            raise EmptyIndexError()
        if len(segment.positions) == 1:
            return get_idx(current, segment.positions[0])
        return [get_idx(current, position) for position in segment.positions]
    if isinstance(segment, RangeSegment):
        return get_range(current, segment.start, segment.stop)
    if isinstance(segment, FilterSegment):
        return get_filtered(current, root, segment.predicate, regex_matcher)

    raise TypeError(f"Unknown segment type: {type(segment).__name__}")


def _is_multi_valued(segment: Segment) -> bool:
    if isinstance(segment, RangeSegment | FilterSegment):
        return True
    return isinstance(segment, IndexSegment) and len(segment.positions) > 1


def _apply_recursive(
    segment: Segment,
    current: Any,
    root: Any,
    regex_matcher: RegexMatcher | None,
) -> list:
    # Keyed segments look into objects, bare brackets into arrays
    if isinstance(segment, KeySegment) or getattr(segment, "key", ""):
        wanted = ValueKind.OBJECT
    else:
        wanted = ValueKind.ARRAY
    multi_valued = _is_multi_valued(segment)

    results = []
    for node in iter_descendants(current):
        if kind_of(node) is not wanted:
            continue
        try:
            value = apply_segment(segment, node, root, regex_matcher)
        except PathEvaluationError as e:
            logger.debug("Recursive '%s' skipped a node: %s", segment, e)
            continue
        if multi_valued:
            results.extend(value)
        else:
            results.append(value)
    return results


def evaluate(
    segments: Sequence[Segment],
    document: Any,
    regex_matcher: RegexMatcher | None = None,
) -> Any:
    """
    Evaluate parsed segments against a document.

    A scan followed by another segment applies that segment to the current
    value and all of its descendants, collecting every result. A scan at the
    end of the path lists the children of the current value.

    Params:
        segments: Parsed path, normally starting with a RootSegment
        document: Decoded JSON document
        regex_matcher: Optional hook implementing the =~ filter operator

    Returns:
        The selected value

    Raises:
        PathEvaluationError: On the first segment that does not apply
        FilterError: If a filter predicate is malformed or unsupported
    """
    root = document
    current = document
    position = 1 if segments and isinstance(segments[0], RootSegment) else 0

    while position < len(segments):
        segment = segments[position]
        if not isinstance(segment, ScanSegment):
            current = apply_segment(segment, current, root, regex_matcher)
            position += 1
            continue

        following = position + 1
        while following < len(segments) and isinstance(segments[following], ScanSegment):
            following += 1
        if following == len(segments):
            return get_scan(current)
        current = _apply_recursive(segments[following], current, root, regex_matcher)
        position = following + 1

    return current
