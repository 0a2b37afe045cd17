"""
Value model and traversal primitives.

Documents are plain decoded JSON trees: None, bool, int/float, str,
lists (or tuples) and mappings with string keys. Every primitive classifies
its input with kind_of() and handles each ValueKind explicitly, so a value
outside the model fails loudly instead of being guessed at.
"""

import logging
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any

from pydantic import JsonValue, TypeAdapter, ValidationError

from jsonlookup.exceptions import (
    DocumentTypeError,
    IndexOutOfRangeError,
    KeyNotFoundError,
    NullTraversalError,
    PathEvaluationError,
    ValueTypeError,
)

logger = logging.getLogger(__name__)

_DOCUMENT_ADAPTER = TypeAdapter(JsonValue)


class ValueKind(Enum):
    """Kinds of value a document can hold."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Any) -> ValueKind:
    """
    Classify a value into its ValueKind.

    Params:
        value: Any value found in a document

    Returns:
        The matching ValueKind

    Raises:
        DocumentTypeError: If the value is outside the JSON value model
    """
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int | float):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list | tuple):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    raise DocumentTypeError(value)


def validate_document(document: Any) -> None:
    """
    Check that a whole document fits the JSON value model.

    Params:
        document: Decoded document to check

    Raises:
        DocumentTypeError: If any nested value is not JSON-compatible
    """
    try:
        _DOCUMENT_ADAPTER.validate_python(document)
    except ValidationError as e:
        raise DocumentTypeError(document, f"{e.error_count()} invalid value(s)") from e


def get_key(value: Any, key: str) -> Any:
    """
    Look up a member by key.

    Arrays broadcast the lookup over their elements and keep only the
    successful results, in order. Failing elements are dropped.

    Params:
        value: Current value
        key: Member name

    Returns:
        The member value, or a new list of member values for arrays

    Raises:
        KeyNotFoundError: If an object has no such member
        NullTraversalError: If value is null
        ValueTypeError: If value is neither an object nor an array
    """
    kind = kind_of(value)
    if kind is ValueKind.OBJECT:
        if key not in value:
            raise KeyNotFoundError(key)
        return value[key]
    if kind is ValueKind.ARRAY:
        results = []
        for position, element in enumerate(value):
            try:
                results.append(get_key(element, key))
            except PathEvaluationError as e:
                logger.debug("Dropping element %d from '%s' broadcast: %s", position, key, e)
        return results
    if kind is ValueKind.NULL:
        raise NullTraversalError(key)
    raise ValueTypeError("object", kind.value)


def get_idx(value: Any, index: int) -> Any:
    """
    Return the element at an index; negative indexes count from the end.

    Raises:
        IndexOutOfRangeError: If the resolved index is outside the array
        ValueTypeError: If value is not an array
    """
    kind = kind_of(value)
    if kind is not ValueKind.ARRAY:
        raise ValueTypeError("array", kind.value)

    length = len(value)
    resolved = index if index >= 0 else length + index
    if resolved < 0 or resolved >= length:
        raise IndexOutOfRangeError(index, length)
    return value[resolved]


def get_range(value: Any, start: int | None, stop: int | None) -> list:
    """
    Slice an array between two bounds.

    The stop bound is inclusive: [0:1] returns two elements. Negative bounds
    count from the end, missing bounds are open.

    Params:
        value: Array to slice
        start: First index, or None for the beginning
        stop: Last index (inclusive), or None for the end

    Returns:
        New list with the selected elements, in order

    Raises:
        IndexOutOfRangeError: If a resolved bound is outside the array
        ValueTypeError: If value is not an array
    """
    kind = kind_of(value)
    if kind is not ValueKind.ARRAY:
        raise ValueTypeError("array", kind.value)

    length = len(value)
    resolved_start = 0
    resolved_stop = length
    if start is not None:
        resolved_start = length + start if start < 0 else start
    if stop is not None:
        resolved_stop = length + stop + 1 if stop < 0 else stop + 1

    if resolved_start < 0 or resolved_start >= length:
        raise IndexOutOfRangeError(start, length, bound="from")
    if resolved_stop < 0 or resolved_stop > length:
        raise IndexOutOfRangeError(stop, length, bound="to")
    return list(value[resolved_start:resolved_stop])


def get_scan(value: Any) -> list:
    """Flatten one container level into a list of its children."""
    kind = kind_of(value)
    if kind is ValueKind.OBJECT:
        return list(value.values())
    if kind is ValueKind.ARRAY:
        return list(value)
    raise ValueTypeError("scannable", kind.value)


def iter_descendants(value: Any) -> Iterator[Any]:
    """
    Walk a value and everything nested inside it, in pre-order.

    Object members are visited in insertion order.
    """
    yield value
    kind = kind_of(value)
    if kind is ValueKind.OBJECT:
        children = value.values()
    elif kind is ValueKind.ARRAY:
        children = value
    else:
        return
    for child in children:
        yield from iter_descendants(child)
