"""Stream constructors

Building streams from values, sequences and generators."""

from __future__ import annotations

import typing
from collections.abc import Callable, Sequence

from ..context.algebra import bind_same, defer, pure
from ..kernel.effect import Effect
from .step import Done, More, Stream

# Terminated stream
done: Stream[typing.Any, typing.Any] = pure(Done())


def more[S, V](value: V, next: Stream[S, V]) -> Stream[S, V]:
    """One element followed by ``next`` (not evaluated here)."""
    return pure(More(value, next))


def singleton[S, V](value: V) -> Stream[S, V]:
    return more(value, done)


def from_list[S, V](items: Sequence[V]) -> Stream[S, V]:
    """Finite stream over ``items``, in order. Restartable: each traversal starts over."""
    stream: Stream[S, V] = done
    for item in reversed(tuple(items)):
        stream = more(item, stream)
    return stream


def repeat[S, V](n: int, effect: Effect[S, V]) -> Stream[S, V]:
    """Run ``effect`` n times, yielding each result."""
    if n <= 0:
        return done
    return bind_same(lambda value: more(value, defer(lambda: repeat(n - 1, effect))), effect)


def iterate[S, V](f: Callable[[V], V], seed: V) -> Stream[S, V]:
    """Infinite stream seed, f(seed), f(f(seed)), ..."""
    return more(seed, defer(lambda: iterate(f, f(seed))))


def unfold[S, V, T](f: Callable[[T], tuple[V, T] | None], seed: T) -> Stream[S, V]:
    """Stream produced by ``f`` until it returns None."""

    def produce() -> Stream[S, V]:
        produced = f(seed)
        if produced is None:
            return done
        value, following = produced
        return more(value, unfold(f, following))

    return defer(produce)


__all__ = (
    "done",
    "from_list",
    "iterate",
    "more",
    "repeat",
    "singleton",
    "unfold",
)
