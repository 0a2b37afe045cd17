"""
Path tokenizing and segment parsing.
"""

from jsonlookup.parsing.parser import (
    FilterSegment,
    IndexSegment,
    KeySegment,
    RangeSegment,
    RootSegment,
    ScanSegment,
    Segment,
    SegmentKind,
    parse_path,
    parse_segment,
)
from jsonlookup.parsing.tokenizer import Tokenizer, TokenizerState, tokenize

__all__ = [
    "FilterSegment",
    "IndexSegment",
    "KeySegment",
    "RangeSegment",
    "RootSegment",
    "ScanSegment",
    "Segment",
    "SegmentKind",
    "Tokenizer",
    "TokenizerState",
    "parse_path",
    "parse_segment",
    "tokenize",
]
