"""
Context values
==============

Контекст никогда не мутируется: every helper here returns a new value.

Mapping contexts are ``frozendict`` instances. Ambient fields used by the
condition system live under the names below; any other field belongs to the
program.
"""

from __future__ import annotations

import typing
from collections.abc import Mapping
from dataclasses import dataclass

from frozendict import frozendict

from .._errors import ContextAccessError
from ..kernel.run import EMPTY

# Ambient field names
HANDLERS = "handlers"
RESTARTS = "restarts"
CONDITION = "condition"
OUTER_HANDLERS = "outer_handlers"
AMBIENT = (HANDLERS, RESTARTS, CONDITION, OUTER_HANDLERS)


@dataclass(frozen=True, slots=True)
class Pair[A, B]:
    """Context required by ``bind_cross``: ``first`` feeds the first effect, ``second`` the continuation."""

    first: A
    second: B


def context(**fields: typing.Any) -> frozendict[str, typing.Any]:
    """Build a mapping context."""
    return frozendict(fields)


def field(ctx: typing.Any, name: str) -> typing.Any:
    """Read ``name`` from a mapping context, failing with a typed error."""
    if not isinstance(ctx, Mapping) or name not in ctx:
        raise ContextAccessError(name, ctx)
    return ctx[name]


def put(ctx: typing.Any, name: str, value: typing.Any) -> frozendict[str, typing.Any]:
    """Return ``ctx`` with ``name`` bound to ``value``."""
    if not isinstance(ctx, Mapping):
        raise ContextAccessError(name, ctx)
    return frozendict({**ctx, name: value})


def extend(ctx: typing.Any, fields: Mapping[str, typing.Any]) -> frozendict[str, typing.Any]:
    """Return ``ctx`` with every entry of ``fields`` bound."""
    if not isinstance(ctx, Mapping):
        raise ContextAccessError(next(iter(fields), "<fields>"), ctx)
    return frozendict({**ctx, **fields})


def entries(ctx: typing.Any, name: str) -> tuple[typing.Any, ...]:
    """Ambient stack stored under ``name``; empty when absent or when ``ctx`` is not a mapping."""
    if isinstance(ctx, Mapping):
        return tuple(ctx.get(name, ()))
    return ()


def restore(outer: typing.Any, inner: typing.Any, name: str) -> typing.Any:
    """
    Merge the inner final state back, with ``name`` reset to what ``outer`` had.

    Used by scoping operators: the inner effect's state survives, the entry it
    was given for its dynamic extent does not.
    """
    if not isinstance(inner, Mapping):
        return inner
    if isinstance(outer, Mapping) and name in outer:
        return frozendict({**inner, name: outer[name]})
    if name in inner:
        return frozendict({key: value for key, value in inner.items() if key != name})
    return inner


def rescope(outer: typing.Any, inner: typing.Any) -> typing.Any:
    """``inner`` with every ambient field reset to what ``outer`` had."""
    for name in AMBIENT:
        inner = restore(outer, inner, name)
    return inner


def first(ctx: typing.Any) -> typing.Any:
    if not isinstance(ctx, Pair):
        raise ContextAccessError("first", ctx)
    return ctx.first


def second(ctx: typing.Any) -> typing.Any:
    if not isinstance(ctx, Pair):
        raise ContextAccessError("second", ctx)
    return ctx.second


__all__ = (
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
