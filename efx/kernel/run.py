"""
Evaluator
=========

Drives an effect to completion by feeding context to each suspension until it
resolves. Iterative: long suspension chains never grow the host call stack.
"""

from __future__ import annotations

import logging
import typing
from dataclasses import dataclass, field

from frozendict import frozendict

from .adapt import step
from .effect import Effect, Resolved, Suspended

logger = logging.getLogger(__name__)

# Closed context handed to effects that should need nothing further
EMPTY: frozendict[str, typing.Any] = frozendict()


def _empty_context() -> typing.Any:
    return EMPTY


@dataclass(frozen=True, slots=True)
class RunPolicy:
    """
    Evaluation configuration.

    ``context`` seeds the driver (``run(e, policy=RunPolicy(context=c))`` is
    ``run(provide(c, e))``); ``trace`` logs every step at DEBUG.
    """

    context: typing.Any = field(default_factory=_empty_context)
    trace: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.trace, bool):
            raise ValueError("RunPolicy.trace must be a bool")


def evaluate[S, V](effect: Effect[S, V], context: typing.Any = EMPTY, *, trace: bool = False) -> tuple[S, V]:
    """
    Drive ``effect`` under a fixed ``context`` until it resolves.

    Returns the final ``(state, value)`` pair. Every suspension receives the
    same context, matching how ``adapt`` re-supplies its outer context.
    """
    steps = 0
    while True:
        match effect:
            case Resolved(state, value):
                if trace:
                    logger.debug("resolved after %d steps", steps)
                return state, value
            case Suspended():
                effect = step(effect, context)
                steps += 1
                if trace:
                    logger.debug("step %d: %s", steps, type(effect).__name__)


def run[V](effect: Effect[typing.Any, V], *, policy: RunPolicy | None = None) -> V:
    """
    Evaluate an effect whose context requirements are all satisfied.

    Suspensions are driven with the empty context; an effect that still needs
    fields fails with ``ContextAccessError`` when its ability reads them.
    """
    policy = policy or RunPolicy()
    if policy.trace:
        logger.debug("run: starting with context %r", policy.context)
    _, value = evaluate(effect, policy.context, trace=policy.trace)
    return value


__all__ = (
    "EMPTY",
    "RunPolicy",
    "evaluate",
    "run",
)
