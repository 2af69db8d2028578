"""
Bracket combinators
===================

Комбинаторы для resource management: acquire -> use -> release.

Release runs exactly once: after ``use`` finishes, or when ``use`` is
abandoned by an unwinding failure (``catch``, a fatal exception), after which
the failure keeps propagating. Errors that a handler resumes are not failures
here; ``use`` simply completes.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass

from ..context.algebra import bind_same, defer, map, pure, then
from ..context.fields import rescope
from ..kernel.adapt import Unwinding, intercept, rebase
from ..kernel.effect import Effect, Suspended

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Bracketed[V, C]:
    """Use result together with what release produced."""

    value: V
    cleanup: C


# ============================================================================
# Core
# ============================================================================


def protect[S, V, U](
    effect: Effect[S, V],
    *,
    abandoned: Callable[[], Effect[S, typing.Any]] | None,
    completed: Callable[[V], Effect[S, U]],
) -> Effect[S, U]:
    """
    Generic protection combinator.

    ``completed(value)`` continues a finished ``effect`` in its final state;
    ``abandoned()`` runs when ``effect`` unwinds, before the failure is
    re-raised. It starts from the entry context, or from the state an inner
    release left on the unwind, and its own final state travels on with it.

    A failing ``abandoned()`` is logged and the original failure propagates.
    """

    def on_failure(failure: BaseException, outer: typing.Any) -> Effect[S, U]:
        if abandoned is None:
            raise failure
        start = outer
        if isinstance(failure, Unwinding) and failure.state is not None:
            start = rescope(outer, failure.state)

        def keep_failure(error: BaseException, _outer: typing.Any) -> typing.NoReturn:
            logger.error("release failed while unwinding from %r", failure, exc_info=error)
            raise failure

        return then(_resume(failure), intercept(rebase(start, defer(abandoned)), keep_failure))

    return bind_same(completed, intercept(effect, on_failure))


def _resume(failure: BaseException) -> Effect[typing.Any, typing.Any]:
    def ability(state: typing.Any) -> typing.NoReturn:
        if isinstance(failure, Unwinding):
            failure.state = state
        raise failure

    return Suspended(ability)


# ============================================================================
# Bracket family
# ============================================================================


def bracket[S, R, V, C](
    acquire: Effect[S, R],
    *,
    release: Callable[[R], Effect[S, C]],
    use: Callable[[R], Effect[S, V]],
) -> Effect[S, Bracketed[V, C]]:
    """Resource management: acquire -> use -> release (always)."""

    def with_acquired(resource: R) -> Effect[S, Bracketed[V, C]]:
        return protect(
            use(resource),
            abandoned=lambda: release(resource),
            completed=lambda value: map(lambda cleanup: Bracketed(value, cleanup), release(resource)),
        )

    return bind_same(with_acquired, acquire)


def bracket_[S, R, V](
    acquire: Effect[S, R],
    *,
    release: Callable[[R], Effect[S, typing.Any]],
    use: Callable[[R], Effect[S, V]],
) -> Effect[S, V]:
    """Like bracket, keeping only the use value."""
    return map(lambda outcome: outcome.value, bracket(acquire, release=release, use=use))


def bracket_on_error[S, R, V](
    acquire: Effect[S, R],
    *,
    release: Callable[[R], Effect[S, typing.Any]],
    use: Callable[[R], Effect[S, V]],
) -> Effect[S, V]:
    """Like bracket, but only releases when use is abandoned."""

    def with_acquired(resource: R) -> Effect[S, V]:
        return protect(use(resource), abandoned=lambda: release(resource), completed=pure)

    return bind_same(with_acquired, acquire)


def with_resource[S, R, V](
    resource: R,
    *,
    release: Callable[[R], Effect[S, typing.Any]],
    use: Callable[[R], Effect[S, V]],
) -> Effect[S, V]:
    """Bracket for an already-acquired resource."""
    return bracket_(pure(resource), release=release, use=use)


# ============================================================================
# Finalizers
# ============================================================================


def finalize[S, V](effect: Effect[S, V], cleanup: Effect[S, typing.Any]) -> Effect[S, V]:
    """Run ``cleanup`` after ``effect`` whether it completes or unwinds."""
    return protect(effect, abandoned=lambda: cleanup, completed=lambda value: then(pure(value), cleanup))


def on_error[S, V](effect: Effect[S, V], cleanup: Effect[S, typing.Any]) -> Effect[S, V]:
    """Run ``cleanup`` only when ``effect`` unwinds."""
    return protect(effect, abandoned=lambda: cleanup, completed=pure)


def on_success[S, V](effect: Effect[S, V], action: Effect[S, typing.Any]) -> Effect[S, V]:
    """Run ``action`` only when ``effect`` completes."""
    return bind_same(lambda value: then(pure(value), action), effect)


__all__ = (
    "Bracketed",
    "bracket",
    "bracket_",
    "bracket_on_error",
    "finalize",
    "on_error",
    "on_success",
    "protect",
    "with_resource",
)
