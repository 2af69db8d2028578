"""Unwind signal raised by ``catch`` to abandon its body."""

from __future__ import annotations

from ..conditions.condition import Condition
from ..kernel.adapt import Unwinding


class Unwind(Unwinding):
    """
    Carries a terminal error condition out to the ``catch`` that raised it.

    Every release run on the way out records its final state, so the catching
    boundary resolves in what the last release left behind.
    """

    def __init__(self, token: object, condition: Condition) -> None:
        self.token = token
        self.condition = condition
        super().__init__(condition.message)


__all__ = ("Unwind",)
