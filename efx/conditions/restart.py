"""
Restarts
========

Named recovery actions established around a computation. Invoking a restart
is a dynamic lookup-and-call: the restart's effect becomes the value of the
``invoke_restart`` expression. Nothing is unwound or rewound.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable

from .._errors import RestartNotFoundError
from ..context.algebra import contra_map
from ..context.fields import RESTARTS, entries, put, restore
from ..kernel.effect import Effect, Resolved, Suspended
from .condition import Restart

logger = logging.getLogger(__name__)

type RestartAction = Callable[[typing.Any], Effect[typing.Any, typing.Any]]


def with_restart[S, V](name: str, action: RestartAction, effect: Effect[S, V]) -> Effect[S, V]:
    """Offer restart ``name`` for the dynamic extent of ``effect``."""
    restart = Restart(name, action)
    return contra_map(
        lambda ctx: put(ctx, RESTARTS, (restart, *entries(ctx, RESTARTS))),
        lambda outer, inner: restore(outer, inner, RESTARTS),
        effect,
    )


def invoke_restart(name: str, value: typing.Any = None) -> Effect[typing.Any, typing.Any]:
    """
    Call the innermost restart named ``name`` with ``value``.

    Raises ``RestartNotFoundError`` when no such restart is in scope.
    """

    def ability(ctx: typing.Any) -> Effect[typing.Any, typing.Any]:
        restarts: tuple[Restart, ...] = entries(ctx, RESTARTS)
        for restart in restarts:
            if restart.name == name:
                logger.debug("invoking restart %r", name)
                return contra_map(lambda _outer: ctx, lambda _outer, _inner: ctx, restart.action(value))
        available = tuple(restart.name for restart in restarts)
        logger.error("restart %r not found (available: %s)", name, available)
        raise RestartNotFoundError(name, available)

    return Suspended(ability)


def find_restart(name: str) -> Effect[typing.Any, bool]:
    """Whether a restart called ``name`` is in scope."""
    return Suspended(lambda ctx: Resolved(ctx, any(r.name == name for r in entries(ctx, RESTARTS))))


def list_restarts() -> Effect[typing.Any, tuple[str, ...]]:
    """Names of the restarts in scope, innermost first."""
    return Suspended(lambda ctx: Resolved(ctx, tuple(r.name for r in entries(ctx, RESTARTS))))


__all__ = (
    "RestartAction",
    "find_restart",
    "invoke_restart",
    "list_restarts",
    "with_restart",
)
