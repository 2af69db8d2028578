"""
Stream combination
==================

``concat`` is sequential and unfair: an infinite left side hides the right
side forever. ``interleave`` swaps sides after every element, so every
element of either source is eventually reached.

    to_list(interleave(from_list([1, 2, 3]), from_list([10, 20, 30])))
    # [1, 10, 2, 20, 3, 30]
"""

from __future__ import annotations

from collections.abc import Callable

from ..context.algebra import bind_same
from .core import done, more
from .step import Done, More, Step, Stream
from .transform import map


def concat[S, V](first: Stream[S, V], second: Stream[S, V]) -> Stream[S, V]:
    """Every element of ``first``, then ``second`` (untouched until ``first`` ends)."""

    def on_step(step: Step[S, V]) -> Stream[S, V]:
        match step:
            case More(value, following):
                return more(value, concat(following, second))
            case Done():
                return second

    return bind_same(on_step, first)


def interleave[S, V](first: Stream[S, V], second: Stream[S, V]) -> Stream[S, V]:
    """Fair merge: one element from ``first``, then the sides swap."""

    def on_step(step: Step[S, V]) -> Stream[S, V]:
        match step:
            case More(value, following):
                return more(value, interleave(second, following))
            case Done():
                return second

    return bind_same(on_step, first)


def flatten[S, V](streams: Stream[S, Stream[S, V]]) -> Stream[S, V]:
    """Concatenate inner streams in encounter order."""

    def on_step(step: Step[S, Stream[S, V]]) -> Stream[S, V]:
        match step:
            case More(inner, following):
                return concat(inner, flatten(following))
            case Done():
                return done

    return bind_same(on_step, streams)


def flat_map[S, V, U](f: Callable[[V], Stream[S, U]], stream: Stream[S, V]) -> Stream[S, U]:
    return flatten(map(f, stream))


def zip[S, A, B](first: Stream[S, A], second: Stream[S, B]) -> Stream[S, tuple[A, B]]:
    """Pairs of elements; stops with the shorter stream."""

    def on_first(left: Step[S, A]) -> Stream[S, tuple[A, B]]:
        match left:
            case More(a, rest_a):

                def on_second(right: Step[S, B]) -> Stream[S, tuple[A, B]]:
                    match right:
                        case More(b, rest_b):
                            return more((a, b), zip(rest_a, rest_b))
                        case Done():
                            return done

                return bind_same(on_second, second)
            case Done():
                return done

    return bind_same(on_first, first)


__all__ = ("concat", "flat_map", "flatten", "interleave", "zip")
