"""
Per-call configuration for path lookups.
"""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LookupOptions(BaseModel):
    """
    Options controlling how a lookup treats its document.

    Instances are immutable; build a new one with model_copy(update=...) to
    change a setting.
    """

    model_config = ConfigDict(frozen=True)

    clone_document: bool = Field(
        default=True,
        description="Deep-copy the document before traversal so results never alias caller data",
    )
    validate_document: bool = Field(
        default=False,
        description="Check the whole document against the JSON value model before traversal",
    )
    regex_matcher: Callable[[Any, str], bool] | None = Field(
        default=None,
        description="Hook for the =~ filter operator, called with the left value and the raw right operand",
    )


DEFAULT_OPTIONS = LookupOptions()
