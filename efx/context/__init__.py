from . import state
from .algebra import (
    bind_cross,
    bind_same,
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
from .fields import (
    AMBIENT,
    CONDITION,
    EMPTY,
    HANDLERS,
    OUTER_HANDLERS,
    RESTARTS,
    Pair,
    context,
    entries,
    extend,
    field,
    first,
    put,
    rescope,
    restore,
    second,
)

__all__ = (
    # State namespace
    "state",
    # Algebra
    "bind_cross",
    "bind_same",
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
    # Context values
    "AMBIENT",
    "CONDITION",
    "EMPTY",
    "HANDLERS",
    "OUTER_HANDLERS",
    "RESTARTS",
    "Pair",
    "context",
    "entries",
    "extend",
    "field",
    "first",
    "put",
    "rescope",
    "restore",
    "second",
)
