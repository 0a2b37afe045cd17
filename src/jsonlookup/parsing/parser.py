"""
Segment parser for lookup paths.

This module turns the textual tokens produced by the tokenizer into typed
segments: root, key, scan, index, range and filter.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from jsonlookup.exceptions import PathSyntaxError
from jsonlookup.parsing.tokenizer import SCAN_TOKEN, Tokenizer


class SegmentKind(Enum):
    """Type of path segment."""

    ROOT = "root"
    KEY = "key"
    SCAN = "scan"
    INDEX = "idx"
    RANGE = "range"
    FILTER = "filter"


@dataclass(frozen=True)
class RootSegment:
    """Represents the root marker ($ or @) that starts every path."""

    kind: ClassVar[SegmentKind] = SegmentKind.ROOT

    marker: str = "$"

    def __str__(self) -> str:
        return self.marker


@dataclass(frozen=True)
class KeySegment:
    """Represents an object member access (.name)."""

    kind: ClassVar[SegmentKind] = SegmentKind.KEY

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ScanSegment:
    """Represents a recursive descent (..) or wildcard (.*) step."""

    kind: ClassVar[SegmentKind] = SegmentKind.SCAN

    def __str__(self) -> str:
        return SCAN_TOKEN


@dataclass(frozen=True)
class IndexSegment:
    """Represents an index selection (key[0] or key[0,2,-1])."""

    kind: ClassVar[SegmentKind] = SegmentKind.INDEX

    key: str
    positions: tuple[int, ...]

    def __str__(self) -> str:
        return f"{self.key}[{','.join(str(p) for p in self.positions)}]"


@dataclass(frozen=True)
class RangeSegment:
    """
    Represents a range selection (key[1:3], key[:2], key[*]).

    Both bounds are inclusive; None stands for an open bound.
    """

    kind: ClassVar[SegmentKind] = SegmentKind.RANGE

    key: str
    start: int | None = None
    stop: int | None = None

    def __str__(self) -> str:
        if self.start is None and self.stop is None:
            return f"{self.key}[*]"
        start = "" if self.start is None else str(self.start)
        stop = "" if self.stop is None else str(self.stop)
        return f"{self.key}[{start}:{stop}]"


@dataclass(frozen=True)
class FilterSegment:
    """Represents a filter selection (key[?(<predicate>)]), predicate kept unparsed."""

    kind: ClassVar[SegmentKind] = SegmentKind.FILTER

    key: str
    predicate: str

    def __str__(self) -> str:
        return f"{self.key}[?({self.predicate})]"


Segment = (
    RootSegment | KeySegment | ScanSegment | IndexSegment | RangeSegment | FilterSegment
)

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int | None:
    text = text.strip()
    if INTEGER_PATTERN.fullmatch(text):
        return int(text)
    return None


def parse_segment(token: str) -> Segment:
    """
    Parse one path token into a typed segment.

    Params:
        token: A single token as produced by tokenize()

    Returns:
        The segment described by the token

    Raises:
        PathSyntaxError: If the bracket part of the token is malformed
    """
    if token == "$":
        return RootSegment("$")
    if token == SCAN_TOKEN:
        return ScanSegment()

    bracket = token.find("[")
    if bracket < 0:
        return KeySegment(token)

    key = token[:bracket]
    tail = token[bracket:]
    if len(tail) < 3 or not tail.endswith("]"):
        raise PathSyntaxError(token, "bracket should hold at least one character", bracket)
    body = tail[1:-1]

    if "?" in body:
        if not (body.startswith("?(") and body.endswith(")")):
            raise PathSyntaxError(token, "filter should look like [?(<predicate>)]", bracket)
        return FilterSegment(key, body[2:-1].strip(" "))

    if ":" in body:
        bounds = body.split(":")
        if len(bounds) != 2:
            raise PathSyntaxError(token, "range should have exactly one ':'", bracket)
        # Malformed bounds are open, not errors
        return RangeSegment(key, _parse_int(bounds[0]), _parse_int(bounds[1]))

    if body == "*":
        return RangeSegment(key, None, None)

    positions = []
    for part in body.split(","):
        position = _parse_int(part)
        if position is None:
            raise PathSyntaxError(token, f"invalid index '{part.strip()}'", bracket)
        positions.append(position)
    return IndexSegment(key, tuple(positions))


def parse_path(path: str) -> list[Segment]:
    """
    Tokenize and parse a whole path.

    Params:
        path: Path string starting with '$' or '@'

    Returns:
        List of segments, a RootSegment first

    Raises:
        PathSyntaxError: If the path or any of its segments is malformed
    """
    tokenizer = Tokenizer(path)
    tokens = tokenizer.tokenize()
    segments: list[Segment] = [RootSegment(tokens[0])]
    for index, token in enumerate(tokens[1:], start=1):
        # Quoted member names are always keys, even "*" or "a[0]"
        if index in tokenizer.literal_indices:
            segments.append(KeySegment(token))
            continue
        segment = parse_segment(token)
        if isinstance(segment, RootSegment):
            raise PathSyntaxError(path, "root '$' may only start a path")
        segments.append(segment)
    return segments
