"""
Effect - the two-case kernel type
=================================

An effect is either already ``Resolved`` (carrying the state it finished in and
its value) or ``Suspended`` on an ability that still needs a context before it
can take the next step.

    Resolved(state, value)    terminal
    Suspended(ability)        ability: context -> Effect
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .._types import Ability


@dataclass(frozen=True, slots=True)
class Resolved[S, V]:
    """Terminal effect: the computation finished in ``state`` with ``value``."""

    state: S
    value: V


@dataclass(frozen=True, slots=True)
class Suspended[S, V]:
    """Effect awaiting context; ``ability`` produces the next step."""

    ability: Ability[S, V]


type Effect[S, V] = Resolved[S, V] | Suspended[S, V]


def resolved[S, V](state: S, value: V) -> Effect[S, V]:
    """Terminal effect constructor."""
    return Resolved(state, value)


def suspended[S, V](ability: Callable[..., Effect[S, V]]) -> Effect[S, V]:
    """Effect that needs a context; ``ability`` is called with it."""
    return Suspended(ability)


def is_effect(value: object) -> bool:
    return isinstance(value, (Resolved, Suspended))


__all__ = (
    "Effect",
    "Resolved",
    "Suspended",
    "is_effect",
    "resolved",
    "suspended",
)
