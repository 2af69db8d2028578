"""Stream transforms

Lazy element-wise transforms. Use through the namespace (``S.map``), the
names shadow builtins on purpose."""

from __future__ import annotations

from collections.abc import Callable

from .._types import Predicate
from ..context.algebra import bind_same
from .core import done, more
from .step import Done, More, Step, Stream


def map[S, V, U](f: Callable[[V], U], stream: Stream[S, V]) -> Stream[S, U]:
    """Apply ``f`` to every element."""

    def on_step(step: Step[S, V]) -> Stream[S, U]:
        match step:
            case More(value, following):
                return more(f(value), map(f, following))
            case Done():
                return done

    return bind_same(on_step, stream)


def filter[S, V](predicate: Predicate[V], stream: Stream[S, V]) -> Stream[S, V]:
    """
    Keep elements satisfying ``predicate``.

    Forcing one step of the result may force several steps of the source: it
    looks ahead past every rejected element until a match or the end.
    """

    def on_step(step: Step[S, V]) -> Stream[S, V]:
        match step:
            case More(value, following) if predicate(value):
                return more(value, filter(predicate, following))
            case More(_, following):
                return filter(predicate, following)
            case Done():
                return done

    return bind_same(on_step, stream)


__all__ = ("filter", "map")
