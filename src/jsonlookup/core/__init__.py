"""
Core value model and options for jsonlookup.
"""

from jsonlookup.core.options import DEFAULT_OPTIONS, LookupOptions
from jsonlookup.core.value import (
    ValueKind,
    get_idx,
    get_key,
    get_range,
    get_scan,
    iter_descendants,
    kind_of,
    validate_document,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "LookupOptions",
    "ValueKind",
    "get_idx",
    "get_key",
    "get_range",
    "get_scan",
    "iter_descendants",
    "kind_of",
    "validate_document",
]
