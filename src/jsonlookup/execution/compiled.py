"""
Compiled queries and the lookup entry points.
"""

import copy
import logging
from functools import lru_cache
from typing import Any

from attrs import frozen

from jsonlookup.core.options import DEFAULT_OPTIONS, LookupOptions
from jsonlookup.core.value import validate_document
from jsonlookup.execution.evaluator import evaluate
from jsonlookup.parsing.parser import Segment, parse_path

logger = logging.getLogger(__name__)


@frozen
class CompiledQuery:
    """
    A path parsed once and reusable across documents.

    Attributes:
        path: The path string as written
        segments: Parsed segments, a RootSegment first
    """

    path: str
    segments: tuple[Segment, ...]

    def lookup(self, document: Any, options: LookupOptions | None = None) -> Any:
        """
        Evaluate the query against a document.

        Params:
            document: Decoded JSON document; left untouched unless cloning
                is turned off
            options: Lookup options, DEFAULT_OPTIONS when omitted

        Returns:
            The selected value or list of values

        Raises:
            DocumentTypeError: If validation is on and the document is not JSON
            PathEvaluationError: If the path does not apply to the document
            FilterError: If a filter predicate is malformed or unsupported
        """
        if options is None:
            options = DEFAULT_OPTIONS
        if options.validate_document:
            validate_document(document)
        if options.clone_document:
            document = copy.deepcopy(document)
        return evaluate(self.segments, document, options.regex_matcher)

    def explain(self) -> list[str]:
        """Describe each segment as '<kind>: <token>'."""
        return [f"{segment.kind.value}: {segment}" for segment in self.segments]

    def __str__(self) -> str:
        return self.path


@lru_cache(maxsize=128)
def compile(path: str) -> CompiledQuery:
    """
    Parse a path into a reusable CompiledQuery.

    Results are cached, so compiling the same path twice is cheap.

    Raises:
        PathSyntaxError: If the path is malformed
    """
    logger.debug("Compiling path '%s'", path)
    return CompiledQuery(path, tuple(parse_path(path)))


def lookup(document: Any, path: str, options: LookupOptions | None = None) -> Any:
    """
    Select a value from a document with a path.

    Params:
        document: Decoded JSON document
        path: Path string such as '$.store.book[0].title'
        options: Lookup options, DEFAULT_OPTIONS when omitted

    Returns:
        The selected value or list of values

    Raises:
        JSONLookupError: If the path is malformed or does not apply
    """
    return compile(path).lookup(document, options)
