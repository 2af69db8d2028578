from .bracket import (
    Bracketed,
    bracket,
    bracket_,
    bracket_on_error,
    finalize,
    on_error,
    on_success,
    protect,
    with_resource,
)
from .result import catch, recover, recover_with, throw

__all__ = (
    # Bracket
    "Bracketed",
    "bracket",
    "bracket_",
    "bracket_on_error",
    "finalize",
    "on_error",
    "on_success",
    "protect",
    "with_resource",
    # Result
    "catch",
    "recover",
    "recover_with",
    "throw",
)
