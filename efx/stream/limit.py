"""Stream limits

Both operators stop at the cut: nothing past it is forced."""

from __future__ import annotations

from .._types import Predicate
from ..context.algebra import bind_same
from .core import done, more
from .step import Done, More, Step, Stream


def take[S, V](n: int, stream: Stream[S, V]) -> Stream[S, V]:
    """At most ``n`` elements. ``take(0, s)`` does not touch ``s``."""
    if n <= 0:
        return done

    def on_step(step: Step[S, V]) -> Stream[S, V]:
        match step:
            case More(value, following):
                return more(value, take(n - 1, following))
            case Done():
                return done

    return bind_same(on_step, stream)


def take_while[S, V](predicate: Predicate[V], stream: Stream[S, V]) -> Stream[S, V]:
    """Elements up to, not including, the first one failing ``predicate``."""

    def on_step(step: Step[S, V]) -> Stream[S, V]:
        match step:
            case More(value, following) if predicate(value):
                return more(value, take_while(predicate, following))
            case _:
                return done

    return bind_same(on_step, stream)


__all__ = ("take", "take_while")
