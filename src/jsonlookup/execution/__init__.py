"""
Path evaluation and compiled queries.
"""

from jsonlookup.execution.compiled import CompiledQuery, compile, lookup
from jsonlookup.execution.evaluator import apply_segment, evaluate

__all__ = [
    "CompiledQuery",
    "apply_segment",
    "compile",
    "evaluate",
    "lookup",
]
