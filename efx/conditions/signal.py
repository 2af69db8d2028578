"""
Signal / handle
===============

Request/response protocol, no stack unwinding: ``signal`` looks up the
innermost matching handler in the ambient handler tuple and evaluates the
handler's effect in place. The signal's value is the handler's value; with no
matching handler the signal resumes with ``None``.

The handler body runs with the full handler tuple still installed, including
its own frame. A handler that signals its own condition type again therefore
re-enters itself and can loop forever; ``resignal`` is the explicit way to
pass a condition on to the handlers outside the current frame.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Iterable, Mapping

from ..context.algebra import contra_map
from ..context.fields import CONDITION, HANDLERS, OUTER_HANDLERS, entries, extend, put, restore
from ..kernel.effect import Effect, Resolved, Suspended
from .condition import ERROR, Condition, Handler

logger = logging.getLogger(__name__)

type ConditionLike = Condition | Mapping[str, typing.Any]
type HandlerAction = Callable[[Condition], Effect[typing.Any, typing.Any]]


def _dispatch(condition: Condition, handlers: tuple[Handler, ...], ctx: typing.Any) -> Effect[typing.Any, typing.Any]:
    for index, handler in enumerate(handlers):
        if handler.matches(condition):
            break
    else:
        if condition.type == ERROR:
            logger.warning("unhandled error condition %r resumes with None", condition.message)
        else:
            logger.debug("no handler for %r, resuming", condition.type)
        return Resolved(ctx, None)

    logger.debug("condition %r handled by %r frame %d", condition.type, handler.pattern, index)
    handler_ctx = extend(ctx, {CONDITION: condition, OUTER_HANDLERS: handlers[index + 1 :]})
    return contra_map(lambda _outer: handler_ctx, lambda _outer, _inner: ctx, handler.action(condition))


def signal(condition: ConditionLike) -> Effect[typing.Any, typing.Any]:
    """
    Signal a condition to the innermost matching handler.

    The handler's context changes do not persist: once it finishes, the
    context reverts to the one at the signal site.
    """
    condition = Condition.of(condition)

    def ability(ctx: typing.Any) -> Effect[typing.Any, typing.Any]:
        return _dispatch(condition, entries(ctx, HANDLERS), ctx)

    return Suspended(ability)


def resignal(condition: ConditionLike) -> Effect[typing.Any, typing.Any]:
    """
    Pass a condition to the handlers outside the one currently running.

    Outside any handler body this behaves like ``signal``.
    """
    condition = Condition.of(condition)

    def ability(ctx: typing.Any) -> Effect[typing.Any, typing.Any]:
        if isinstance(ctx, Mapping) and OUTER_HANDLERS in ctx:
            handlers = tuple(ctx[OUTER_HANDLERS])
        else:
            handlers = entries(ctx, HANDLERS)
        return _dispatch(condition, handlers, ctx)

    return Suspended(ability)


def handle[S, V](pattern: str, action: HandlerAction, effect: Effect[S, V]) -> Effect[S, V]:
    """
    Install a handler for ``pattern`` for the dynamic extent of ``effect``.

    ``"*"`` matches every condition. The innermost installed handler wins.
    Inside a handler body the new handler is also visible to ``resignal``.
    """
    handler = Handler(pattern, action)

    def install(ctx: typing.Any) -> typing.Any:
        ctx = put(ctx, HANDLERS, (handler, *entries(ctx, HANDLERS)))
        if OUTER_HANDLERS in ctx:
            ctx = put(ctx, OUTER_HANDLERS, (handler, *ctx[OUTER_HANDLERS]))
        return ctx

    def uninstall(outer: typing.Any, inner: typing.Any) -> typing.Any:
        return restore(outer, restore(outer, inner, HANDLERS), OUTER_HANDLERS)

    return contra_map(install, uninstall, effect)


def handle_bind[S, V](
    bindings: Iterable[tuple[str, HandlerAction]] | Mapping[str, HandlerAction],
    effect: Effect[S, V],
) -> Effect[S, V]:
    """Install several handlers at once; the first binding ends up innermost."""
    pairs = list(bindings.items()) if isinstance(bindings, Mapping) else list(bindings)
    for pattern, action in pairs:
        effect = handle(pattern, action, effect)
    return effect


__all__ = (
    "ConditionLike",
    "HandlerAction",
    "handle",
    "handle_bind",
    "resignal",
    "signal",
)
