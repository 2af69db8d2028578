"""
Stream reductions
=================

Eliminators turning a stream into a single effect. All three force the
whole stream, so the source must be finite (bound it with ``take`` first).

``fold`` is effectful: the accumulator function returns an effect, so each
step may read or write the ambient context.

    count = fold(0, lambda acc, _: pure(acc + 1), from_list("abc"))
    run(count)  # 3
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import const
from ..context.algebra import bind_same, map, pure
from ..kernel.effect import Effect
from .step import Done, More, Step, Stream

type Accumulate[S, A, V] = Callable[[A, V], Effect[S, A]]


def fold[S, A, V](initial: A, f: Accumulate[S, A, V], stream: Stream[S, V]) -> Effect[S, A]:
    """Effectful left fold."""

    def on_step(step: Step[S, V]) -> Effect[S, A]:
        match step:
            case More(value, following):
                return bind_same(lambda acc: fold(acc, f, following), f(initial, value))
            case Done():
                return pure(initial)

    return bind_same(on_step, stream)


def _cons[V](acc: typing.Any, value: V) -> Effect[typing.Any, typing.Any]:
    return pure((value, acc))


def _unwind_cons(cells: typing.Any) -> list[typing.Any]:
    items: list[typing.Any] = []
    while cells is not None:
        value, cells = cells
        items.append(value)
    items.reverse()
    return items


def to_list[S, V](stream: Stream[S, V]) -> Effect[S, list[V]]:
    """Collect every element, in order."""
    return map(_unwind_cons, fold(None, _cons, stream))


def for_each[S, V](f: Callable[[V], Effect[S, typing.Any]], stream: Stream[S, V]) -> Effect[S, None]:
    """Run ``f(value)`` for each element, in order, for its context changes."""
    return fold(None, lambda _acc, value: map(const(None), f(value)), stream)


__all__ = ("Accumulate", "fold", "for_each", "to_list")
