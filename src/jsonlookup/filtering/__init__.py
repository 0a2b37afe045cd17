"""
Filter predicate mini-language: parsing, comparison and evaluation.
"""

from jsonlookup.filtering.comparison import compare, is_number, render_text
from jsonlookup.filtering.evaluation import (
    ABSENT,
    ensure_supported,
    evaluate_predicate,
    get_filtered,
    resolve_explicit_path,
    resolve_operand,
)
from jsonlookup.filtering.predicate import Predicate, parse_predicate

__all__ = [
    "ABSENT",
    "Predicate",
    "compare",
    "ensure_supported",
    "evaluate_predicate",
    "get_filtered",
    "is_number",
    "parse_predicate",
    "render_text",
    "resolve_explicit_path",
    "resolve_operand",
]
