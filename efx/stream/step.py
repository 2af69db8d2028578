"""
Stream steps
============

A stream is an effect producing a ``Step``:

    Done                  no more elements
    More(value, next)     one element and the rest, still unevaluated

``next`` is itself a stream effect; every traversal re-derives it, nothing is
memoized.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..kernel.effect import Effect


@dataclass(frozen=True, slots=True)
class Done:
    pass


@dataclass(frozen=True, slots=True)
class More[S, V]:
    value: V
    next: Stream[S, V]


type Step[S, V] = Done | More[S, V]

type Stream[S, V] = Effect[S, Step[S, V]]

__all__ = ("Done", "More", "Step", "Stream")
