"""
jsonlookup exception classes.

This package provides all exception types used throughout jsonlookup for
consistent error handling and reporting.
"""

from jsonlookup.exceptions.core import (
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

__all__ = [
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
