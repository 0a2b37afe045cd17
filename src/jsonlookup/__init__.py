"""
jsonlookup - Select values from decoded JSON documents with JSONPath-like paths

Paths such as ``$.store.book[?(@.price < 10)].title`` are tokenized, parsed
into segments and evaluated against plain Python JSON values.
"""

from importlib.metadata import version

from jsonlookup.core.options import DEFAULT_OPTIONS, LookupOptions
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
from jsonlookup.execution.compiled import CompiledQuery, compile, lookup

__version__ = version("jsonlookup")

__all__ = [
    "__version__",
    "lookup",
    "compile",
    "CompiledQuery",
    "LookupOptions",
    "DEFAULT_OPTIONS",
    "JSONLookupError",
    "PathSyntaxError",
    "PathEvaluationError",
    "KeyNotFoundError",
    "NullTraversalError",
    "ValueTypeError",
    "DocumentTypeError",
    "IndexOutOfRangeError",
    "EmptyIndexError",
    "FilterError",
    "FilterSyntaxError",
    "UnsupportedOperatorError",
    "OperatorNotImplementedError",
]
