"""
adapt - the universal combinator
================================

``adapt(effect, context_map, continuation)`` is simultaneously a contravariant
transform of the context an effect needs and a covariant transform of what
happens with its result. Every other operator in efx is a specialization.

Abilities built by ``adapt`` are ``Adaptation`` objects rather than closures,
so the evaluator can walk a nest of them with an explicit frame list instead
of the host call stack (see ``step``). The same frame list doubles as the
exception boundary: ``intercept`` marks a frame that gets a chance to replace
its body when the body raises.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from .._types import ContextMap, Continuation, Rescue
from .effect import Effect, Resolved, Suspended


@dataclass(frozen=True, slots=True)
class Adaptation[O, I, S, V, U]:
    """
    Ability of an adapted effect.

    ``tail`` marks frames built by ``rebase``: a constant context map plus a
    pass-through continuation. Such a frame adds nothing when it wraps another
    tail frame or a resolved effect, and ``step`` drops it there.

    ``rescue`` marks frames built by ``intercept``: when ``effect`` raises
    while being stepped, ``rescue(error, outer)`` supplies the effect that
    takes the whole frame's place.
    """

    effect: Effect[S, V]
    context_map: ContextMap[O, I]
    continuation: Continuation[O, S, V, U]
    tail: bool = False
    rescue: Rescue[O, U] | None = None

    def __call__(self, outer: O) -> Effect[O, U]:
        return step(Suspended(self), outer)


def adapt[O, I, S, V, U](
    effect: Effect[S, V],
    context_map: ContextMap[O, I],
    continuation: Continuation[O, S, V, U],
    *,
    rescue: Rescue[O, U] | None = None,
) -> Effect[O, U]:
    """
    Transform an effect's context requirement and continuation at once.

    On receiving ``outer`` the result computes ``inner = context_map(outer)``.
    A resolved effect continues with ``continuation(outer, state, value)``; a
    suspended one takes a step with ``inner`` and is adapted again, so
    ``context_map`` is reapplied against the same outer context at every
    suspension step.

    ``rescue`` makes the frame an exception boundary, as in ``intercept``.
    """
    return Suspended(Adaptation(effect, context_map, continuation, rescue=rescue))


def _pass_through[S, V](_outer: typing.Any, state: S, value: V) -> Effect[S, V]:
    return Resolved(state, value)


def _same[O](outer: O) -> O:
    return outer


class Unwinding(BaseException):
    """
    Exception that abandons an effect while carrying the state reached so far.

    ``state`` is None until something records one. A frame that changes the
    context level translates a recorded state outward as the exception passes.
    """

    state: typing.Any = None


def intercept[S, V](effect: Effect[S, V], rescue: Rescue[S, V]) -> Effect[S, V]:
    """
    Run ``effect``; an exception raised by any of its steps goes to ``rescue``.

    ``rescue(error, outer)`` gets the context the boundary was entered with
    and returns the effect that replaces the boundary, or raises to pass the
    error outward. Code that runs after the boundary resolved is outside it.
    """
    return Suspended(Adaptation(effect, _same, _pass_through, rescue=rescue))


def rebase[S, V](state: typing.Any, effect: Effect[S, V]) -> Effect[S, V]:
    """
    Run ``effect`` against ``state`` regardless of the context supplied later;
    the effect's final state becomes the result state.

    Equivalent to ``contra_map(lambda _: state, lambda _, s: s, effect)``.
    """
    if _is_tail(effect):
        return effect
    return Suspended(Adaptation(effect, lambda _outer: state, _pass_through, tail=True))


def _is_tail(effect: Effect[typing.Any, typing.Any]) -> bool:
    if isinstance(effect, Resolved):
        return True
    ability = effect.ability
    return isinstance(ability, Adaptation) and ability.tail


type _Frame = Adaptation[typing.Any, typing.Any, typing.Any, typing.Any, typing.Any]


def _rescue(
    error: BaseException,
    frames: list[_Frame],
    outers: list[typing.Any],
) -> Effect[typing.Any, typing.Any]:
    # Unwinds frames in place, innermost first, until a rescue frame answers.
    while frames:
        frame = frames.pop()
        outer = outers.pop()
        if frame.rescue is None:
            continue
        try:
            return frame.rescue(error, outer)
        except BaseException as raised:
            error = raised
    raise error


def step[S, V](effect: Suspended[S, V], context: typing.Any) -> Effect[S, V]:
    """
    Take one evaluation step of a suspended effect under ``context``.

    Descends through nested adaptations iteratively, collecting frames, until
    it reaches either a resolved inner effect (whose frame's continuation
    fires) or a plain ability (which is called). The frames above that point
    are then rebuilt around the result, innermost first.

    An exception raised on the way down is offered to the innermost
    ``intercept`` frame still collected; that frame and everything below it
    are replaced by the rescue effect.
    """
    frames: list[_Frame] = []
    outers: list[typing.Any] = []
    ability = effect.ability

    try:
        while isinstance(ability, Adaptation):
            outer = context
            context = ability.context_map(outer)
            match ability.effect:
                case Resolved(state, value):
                    result = ability.continuation(outer, state, value)
                    break
                case Suspended(inner):
                    frames.append(ability)
                    outers.append(outer)
                    ability = inner
        else:
            result = ability(context)
    except BaseException as error:
        result = _rescue(error, frames, outers)

    for frame in reversed(frames):
        if frame.tail and _is_tail(result):
            continue
        result = Suspended(Adaptation(result, frame.context_map, frame.continuation, frame.tail, frame.rescue))

    return result


__all__ = (
    "Adaptation",
    "Unwinding",
    "adapt",
    "intercept",
    "rebase",
    "step",
)
