"""Internal helpers for efx.

Small functions shared by several modules. Not part of the public API."""

from __future__ import annotations

import typing
from collections.abc import Callable


def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def const[T](value: T) -> Callable[..., T]:
    """Function that ignores its arguments and returns value."""

    def constant(*_: typing.Any) -> T:
        return value

    return constant


def keep_outer[O](outer: O, _inner: typing.Any) -> O:
    """Setter that discards the inner state and keeps the outer context."""
    return outer


__all__ = (
    "const",
    "identity",
    "keep_outer",
)
