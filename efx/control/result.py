"""
Result layer
============

throw/catch over the condition system, with ``kungfu.Result`` as the outcome.

Unlike plain conditions, an error inside ``catch`` is always terminal: the
protected computation is abandoned at the signal site and ``catch`` produces
``Error(condition)``. Successful runs produce ``Ok(value)``.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Mapping

from kungfu import Error, Ok, Result

from ..conditions.condition import ERROR, Condition
from ..conditions.errors import error
from ..conditions.signal import handle
from ..context.algebra import bind_same, map, pure
from ..context.fields import rescope
from ..kernel.adapt import intercept
from ..kernel.effect import Effect, Resolved, Suspended
from .unwind import Unwind

logger = logging.getLogger(__name__)


def throw(error_type: str, details: Mapping[str, typing.Any] | None = None) -> Effect[typing.Any, typing.Any]:
    """Signal an error meant for ``catch``: ``message`` is ``error_type``, ``result`` is set."""
    return error(error_type, {**(details or {}), "result": True})


def catch[S, V](effect: Effect[S, V]) -> Effect[S, Result[V, Condition]]:
    """
    Run ``effect``, turning the first error condition it signals into ``Error``.

    Every ``"error"`` condition counts, thrown or signalled. Handlers installed
    inside ``effect`` still see errors first; whatever reaches this boundary
    abandons the computation. Fatal exceptions pass through untouched.

    An abandoned computation leaves the context as it was on entry, except for
    what releases (``bracket``, ``finalize``) wrote while unwinding.
    """

    def ability(ctx: typing.Any) -> Effect[S, Result[V, Condition]]:
        token = object()

        def abandon(condition: Condition) -> Effect[typing.Any, typing.Any]:
            def unwind(_ctx: typing.Any) -> typing.NoReturn:
                raise Unwind(token, condition)

            return Suspended(unwind)

        def settle(error: BaseException, outer: typing.Any) -> Effect[S, Result[V, Condition]]:
            if not isinstance(error, Unwind) or error.token is not token:
                raise error
            logger.debug("catch: unwound on %r", error.condition.message)
            state = outer if error.state is None else rescope(outer, error.state)
            return Resolved(state, Error(error.condition))

        return intercept(map(Ok, handle(ERROR, abandon, effect)), settle)

    return Suspended(ability)


def recover[S, V](effect: Effect[S, V], *, default: V) -> Effect[S, V]:
    """Catch errors and fall back to ``default``."""

    def collapse(result: Result[V, Condition]) -> Effect[S, V]:
        match result:
            case Ok(value):
                return pure(value)
            case Error(_):
                return pure(default)

    return bind_same(collapse, catch(effect))


def recover_with[S, V](effect: Effect[S, V], *, handler: Callable[[Condition], V]) -> Effect[S, V]:
    """Catch errors and compute a replacement value from the condition."""

    def collapse(result: Result[V, Condition]) -> Effect[S, V]:
        match result:
            case Ok(value):
                return pure(value)
            case Error(condition):
                return pure(handler(condition))

    return bind_same(collapse, catch(effect))


__all__ = ("catch", "recover", "recover_with", "throw")
