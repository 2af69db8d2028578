"""Error and warning conditions

Signalling an error is not a failure by itself: with no handler it resumes
with ``None`` like any other condition. It only becomes terminal when a
handler makes it so (an "abort"-style restart, or the Result layer)."""

from __future__ import annotations

import typing
from collections.abc import Mapping

from frozendict import frozendict

from ..context.algebra import pure, then
from ..kernel.effect import Effect
from .condition import CONTINUE, ERROR, WARNING, Condition
from .restart import with_restart
from .signal import handle, signal


def _condition(kind: str, message: str, details: Mapping[str, typing.Any] | None) -> Condition:
    return Condition(kind, frozendict({**(details or {}), "message": message}))


def error(message: str, details: Mapping[str, typing.Any] | None = None) -> Effect[typing.Any, typing.Any]:
    """Signal ``{"type": "error", "message": message, **details}``."""
    return signal(_condition(ERROR, message, details))


def warn(message: str, details: Mapping[str, typing.Any] | None = None) -> Effect[typing.Any, typing.Any]:
    """Signal ``{"type": "warning", "message": message, **details}``; ignored unless handled."""
    return signal(_condition(WARNING, message, details))


def cerror[V](
    continue_message: str,
    default: V,
    message: str,
    details: Mapping[str, typing.Any] | None = None,
) -> Effect[typing.Any, V]:
    """
    Signal a continuable error.

    A ``"continue"`` restart returning ``default`` is in scope while handlers
    run; the condition carries ``continuable=True`` and ``continue_message``.
    The value is always ``default``: a handler may observe the error or invoke
    the restart, but it cannot replace the value.
    """
    condition = _condition(ERROR, message, details).with_fields(
        continuable=True,
        continue_message=continue_message,
    )
    signalled = with_restart(CONTINUE, lambda _: pure(default), signal(condition))
    return then(pure(default), signalled)


def ignore_errors[S, V](default: V, effect: Effect[S, V]) -> Effect[S, V]:
    """Answer every error condition inside ``effect`` with ``default``."""
    return handle(ERROR, lambda _: pure(default), effect)


__all__ = ("cerror", "error", "ignore_errors", "warn")
