from .choice import (
    NO_SOLUTION,
    NoSolution,
    choice,
    conj,
    guard,
    ifte,
    mplus,
    mzero,
    observe,
    observe_all,
    once,
    or_else,
)

__all__ = (
    "NO_SOLUTION",
    "NoSolution",
    "choice",
    "conj",
    "guard",
    "ifte",
    "mplus",
    "mzero",
    "observe",
    "observe_all",
    "once",
    "or_else",
)
