"""
Comparison rule used by filter predicates.

Both operands are rendered to text first. When both renderings are unsigned
decimals they are compared as numbers, otherwise as strings, so
``20 > "100"`` is false but ``"20" > "100a"`` is true.
"""

import json
import operator as op
from decimal import Decimal
from typing import Any

from jsonlookup.core.value import ValueKind, kind_of
from jsonlookup.exceptions import UnsupportedOperatorError
from jsonlookup.filtering.predicate import COMPARISON_OPERATORS

_OPERATOR_FUNCTIONS = {
    "<": op.lt,
    "<=": op.le,
    "==": op.eq,
    ">=": op.ge,
    ">": op.gt,
}


def render_text(value: Any) -> str:
    """
    Render a value to the text used for comparisons.

    Params:
        value: Any JSON value

    Returns:
        Strings unchanged, null/true/false for the JSON constants, repr() for
        numbers (positional, never with an exponent) and compact JSON for
        containers
    """
    kind = kind_of(value)
    if kind is ValueKind.STRING:
        return value
    if kind is ValueKind.NULL:
        return "null"
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        text = repr(value)
        if "e" in text:
            # Large and tiny floats are written out without an exponent
            return format(Decimal(text), "f")
        return text
    if kind is ValueKind.ARRAY:
        return json.dumps(list(value), separators=(",", ":"))
    return json.dumps(dict(value), separators=(",", ":"))


def is_number(text: str) -> bool:
    """Check whether text is an unsigned decimal: digits with at most one dot."""
    digits = 0
    dots = 0
    for char in text:
        if char == ".":
            dots += 1
            if dots > 1:
                return False
        elif "0" <= char <= "9":
            digits += 1
        else:
            return False
    return digits > 0


def compare(left: Any, right: Any, operator: str) -> bool:
    """
    Compare two values with a comparison operator.

    Params:
        left: Left operand value
        right: Right operand value
        operator: One of <, <=, ==, >= and >

    Returns:
        Result of the comparison, numeric when both sides render as numbers

    Raises:
        UnsupportedOperatorError: If the operator is not a comparison operator
    """
    if operator not in COMPARISON_OPERATORS:
        raise UnsupportedOperatorError(operator)

    left_text = render_text(left)
    right_text = render_text(right)
    compare_fn = _OPERATOR_FUNCTIONS[operator]
    if is_number(left_text) and is_number(right_text):
        return compare_fn(float(left_text), float(right_text))
    return compare_fn(left_text, right_text)
