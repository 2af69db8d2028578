from .adapt import Adaptation, Unwinding, adapt, intercept, rebase, step
from .effect import Effect, Resolved, Suspended, is_effect, resolved, suspended
from .run import EMPTY, RunPolicy, evaluate, run

__all__ = (
    # Types
    "Adaptation",
    "Effect",
    "Resolved",
    "Suspended",
    "Unwinding",
    # Constructors
    "resolved",
    "suspended",
    "is_effect",
    # Combinator
    "adapt",
    "intercept",
    "rebase",
    "step",
    # Evaluation
    "EMPTY",
    "RunPolicy",
    "evaluate",
    "run",
)
