"""
Choice & logic
==============

miniKanren-style non-deterministic search over streams of solutions.

    mzero              no solutions
    mplus(a, b)        fair OR (interleave)
    conj(f, s)         fair AND: every solution of s fed to f, results merged fairly
    guard(c)           prune a branch when c is false
    observe / once     commit to the first solution

Пример: пифагоровы тройки

    def triples(n):
        return conj(lambda a:
            conj(lambda b:
                conj(lambda c:
                    conj(lambda _: singleton((a, b, c)), guard(a * a + b * b == c * c)),
                    from_list(range(b, n))),
                from_list(range(a, n))),
            from_list(range(1, n)))

Search is fair: alternatives interleave, so a branch producing infinitely many
solutions never starves its siblings.
"""

from __future__ import annotations

import functools
import typing
from collections.abc import Callable, Iterable

from ..context.algebra import bind_same, pure
from ..kernel.effect import Effect
from ..stream.combine import interleave
from ..stream.core import done, more, singleton
from ..stream.reduce import to_list
from ..stream.step import Done, More, Step, Stream


class NoSolution:
    """Marker returned by ``observe`` on an empty solution stream."""

    __slots__ = ()
    _instance: typing.ClassVar[NoSolution | None] = None

    def __new__(cls) -> NoSolution:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_SOLUTION"

    def __bool__(self) -> bool:
        return False


NO_SOLUTION: typing.Final = NoSolution()

# Failure
mzero: Stream[typing.Any, typing.Any] = done


def mplus[S, V](first: Stream[S, V], second: Stream[S, V]) -> Stream[S, V]:
    """Fair disjunction."""
    return interleave(first, second)


def or_else[S, V](first: Stream[S, V], second: Stream[S, V]) -> Stream[S, V]:
    """
    ``second`` if ``first`` has no solutions, else both, fairly.

    Only one step of ``first`` is forced to decide; its remainder is then
    interleaved with ``second`` without re-running ``first``.
    """

    def on_step(step: Step[S, V]) -> Stream[S, V]:
        match step:
            case More(value, following):
                return more(value, interleave(second, following))
            case Done():
                return second

    return bind_same(on_step, first)


def choice[S, V](alternatives: Iterable[Stream[S, V]]) -> Stream[S, V]:
    """Left fold of ``mplus``; ``choice([]) is mzero``."""
    return functools.reduce(mplus, alternatives, mzero)


def guard[S](condition: bool) -> Stream[S, None]:
    return singleton(None) if condition else mzero


def conj[S, V, U](f: Callable[[V], Stream[S, U]], stream: Stream[S, V]) -> Stream[S, U]:
    """Fair conjunction: ``f`` applied to every solution, result streams interleaved."""

    def on_step(step: Step[S, V]) -> Stream[S, U]:
        match step:
            case More(value, following):
                return mplus(f(value), conj(f, following))
            case Done():
                return mzero

    return bind_same(on_step, stream)


# ============================================================================
# Committing
# ============================================================================


def observe[S, V](stream: Stream[S, V]) -> Effect[S, V | NoSolution]:
    """First solution, or ``NO_SOLUTION``. The rest of the stream is never forced."""

    def on_step(step: Step[S, V]) -> Effect[S, V | NoSolution]:
        match step:
            case More(value, _):
                return pure(value)
            case Done():
                return pure(NO_SOLUTION)

    return bind_same(on_step, stream)


def observe_all[S, V](stream: Stream[S, V]) -> Effect[S, list[V]]:
    """Every solution. The stream must be finite."""
    return to_list(stream)


def ifte[S, V, U](
    condition: Stream[S, V],
    then: Callable[[V], Stream[S, U]],
    otherwise: Stream[S, U],
) -> Stream[S, U]:
    """
    Soft cut.

    If ``condition`` has a solution, commit to the first one and continue
    with ``then(solution)``; otherwise ``otherwise``. The remaining solutions
    of ``condition`` are discarded.
    """

    def on_step(step: Step[S, V]) -> Stream[S, U]:
        match step:
            case More(value, _):
                return then(value)
            case Done():
                return otherwise

    return bind_same(on_step, condition)


def once[S, V](stream: Stream[S, V]) -> Stream[S, V]:
    """At most the first solution, still framed as a stream."""

    def on_step(step: Step[S, V]) -> Stream[S, V]:
        match step:
            case More(value, _):
                return more(value, mzero)
            case Done():
                return mzero

    return bind_same(on_step, stream)


__all__ = (
    "NO_SOLUTION",
    "NoSolution",
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
)
