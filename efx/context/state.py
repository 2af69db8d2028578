"""State over the ambient context.

Namespace module: ``from efx import state`` then ``state.get``, ``state.modify(...)``."""

from __future__ import annotations

import typing
from collections.abc import Callable

from ..kernel.effect import Effect, Resolved, Suspended
from .algebra import bind_same, func

# Read the whole context as the value
get: Effect[typing.Any, typing.Any] = Suspended(lambda ctx: Resolved(ctx, ctx))


def set[S](state: S) -> Effect[S, S]:
    """Replace the context; the new state is also the value."""
    return Resolved(state, state)


def modify[S](f: Callable[[S], S]) -> Effect[S, S]:
    return bind_same(lambda current: set(f(current)), get)


# Value computed from the state
gets = func


__all__ = ("get", "gets", "modify", "set")
