"""
Algebraic effects for Python.

A two-constructor effect kernel with combinators for explicit context
dependency, resumable condition handling and lazy non-deterministic search.

Architecture:
- Kernel: ``Resolved`` / ``Suspended`` effects, ``adapt`` and the evaluator
- Context: map / contra_map / bind / provide, all derived from ``adapt``
- Conditions: signal / handle / restart, scoped through the context
- Control: bracket and a Result layer (``catch`` -> ``kungfu.Result``)
- Streams and logic: lazy Done/More streams and fair choice over them
"""

# Core types
from ._types import Ability, ContextMap, Continuation, Getter, Kleisli, Predicate, Rescue, Setter

# Kernel
from .kernel import (
    EMPTY,
    Effect,
    Resolved,
    RunPolicy,
    Suspended,
    Unwinding,
    adapt,
    evaluate,
    intercept,
    is_effect,
    resolved,
    run,
    suspended,
)

# Context algebra
from .context import (
    state,
    Pair,
    bind_cross,
    bind_same,
    context,
    contra_map,
    defer,
    func,
    lift,
    map,
    provide,
    provide_left,
    pure,
    request,
    sequence,
    then,
)

# Conditions
from .conditions import (
    Condition,
    cerror,
    error,
    find_restart,
    handle,
    handle_bind,
    ignore_errors,
    invoke_restart,
    list_restarts,
    resignal,
    signal,
    warn,
    with_restart,
)

# Control
from .control import (
    Bracketed,
    bracket,
    bracket_,
    bracket_on_error,
    catch,
    finalize,
    on_error,
    on_success,
    recover,
    recover_with,
    throw,
    with_resource,
)

# Streams & logic (namespace import - preferred)
from . import logic, stream
from .logic import (
    NO_SOLUTION,
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

# AST builder (Flow API)
from .flow import Expr, Flow, flow

# Errors
from ._errors import ContextAccessError, EffectError, MalformedConditionError, RestartNotFoundError

__all__ = (
    # Types
    "Ability",
    "ContextMap",
    "Continuation",
    "Getter",
    "Kleisli",
    "Predicate",
    "Rescue",
    "Setter",
    # Kernel
    "EMPTY",
    "Effect",
    "Resolved",
    "RunPolicy",
    "Suspended",
    "Unwinding",
    "adapt",
    "evaluate",
    "intercept",
    "is_effect",
    "resolved",
    "run",
    "suspended",
    # Context
    "state",
    "Pair",
    "bind_cross",
    "bind_same",
    "context",
    "contra_map",
    "defer",
    "func",
    "lift",
    "map",
    "provide",
    "provide_left",
    "pure",
    "request",
    "sequence",
    "then",
    # Conditions
    "Condition",
    "cerror",
    "error",
    "find_restart",
    "handle",
    "handle_bind",
    "ignore_errors",
    "invoke_restart",
    "list_restarts",
    "resignal",
    "signal",
    "warn",
    "with_restart",
    # Control
    "Bracketed",
    "bracket",
    "bracket_",
    "bracket_on_error",
    "catch",
    "finalize",
    "on_error",
    "on_success",
    "recover",
    "recover_with",
    "throw",
    "with_resource",
    # Streams & logic
    "stream",
    "logic",
    "NO_SOLUTION",
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
    # AST
    "Expr",
    "Flow",
    "flow",
    # Errors
    "ContextAccessError",
    "EffectError",
    "MalformedConditionError",
    "RestartNotFoundError",
)
