"""
Context algebra & sequencing
============================

Value and context transformations, all specializations of ``adapt``.

Laws:
- map identity / composition:  map(id, e) ≡ e;  map(f ∘ g, e) ≡ map(f, map(g, e))
- bind_same left identity:     bind_same(f, pure(x)) ≡ f(x)
- bind_same right identity:    bind_same(pure, e) ≡ e
- bind_same associativity:     bind_same(g, bind_same(f, e)) ≡ bind_same(lambda x: bind_same(g, f(x)), e)
- provide:                     run(provide(s, pure(v))) == v
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import const, identity, keep_outer
from .._types import Getter, Kleisli, Rescue, Setter
from ..kernel.adapt import Unwinding, adapt, rebase
from ..kernel.effect import Effect, Resolved, Suspended
from .fields import Pair, field, first, put, second

# ============================================================================
# Lifting
# ============================================================================


def pure[S, V](value: V) -> Effect[S, V]:
    """Lift a value; the ambient context passes through unchanged."""
    return Suspended(lambda ctx: Resolved(ctx, value))


def defer[S, V](thunk: Callable[[], Effect[S, V]]) -> Effect[S, V]:
    """
    Build the effect only when it is first driven.

    The standard way to write recursive or infinite streams:

        def naturals(n):
            return more(n, defer(lambda: naturals(n + 1)))
    """
    return Suspended(lambda _ctx: thunk())


# ============================================================================
# Functor / contravariant
# ============================================================================


def map[S, V, U](f: Callable[[V], U], effect: Effect[S, V]) -> Effect[S, U]:
    """Transform the value, leave the context alone."""
    return adapt(effect, identity, lambda _outer, state, value: Resolved(state, f(value)))


def contra_map[O, I, V](
    getter: Getter[O, I],
    setter: Setter[O, I],
    effect: Effect[I, V],
) -> Effect[O, V]:
    """
    Run an effect needing ``Inner`` inside an ``Outer`` context.

    ``getter`` extracts the inner context; ``setter`` merges the inner
    effect's final state back into the outer context.
    """
    return adapt(
        effect,
        getter,
        lambda outer, inner, value: Resolved(setter(outer, inner), value),
        rescue=_carry(setter),
    )


def _carry[O, I](setter: Setter[O, I]) -> Rescue[O, typing.Any]:
    # A state recorded while unwinding is merged back as a final state would be.
    def carry(error: BaseException, outer: O) -> typing.NoReturn:
        if isinstance(error, Unwinding) and error.state is not None:
            error.state = setter(outer, error.state)
        raise error

    return carry


# ============================================================================
# Sequencing
# ============================================================================


def bind_same[S, V, U](f: Kleisli[V, S, U], effect: Effect[S, V]) -> Effect[S, U]:
    """
    Monadic bind within one context type.

    ``f(value)`` runs against the state ``effect`` finished in; its own final
    state is authoritative.
    """
    return adapt(effect, identity, lambda _outer, state, value: rebase(state, f(value)))


def then[S, V, U](next: Effect[S, U], effect: Effect[S, V]) -> Effect[S, U]:
    """Run ``effect`` for its context changes, then ``next``; keeps ``next``'s value."""
    return bind_same(const(next), effect)


def bind_cross[S, R, V, U](
    f: Callable[[V], Effect[R, U]],
    effect: Effect[S, V],
) -> Effect[Pair[S, R], U]:
    """
    Bind across different context types.

    ``effect`` needs ``S``, ``f(value)`` needs ``R``; the combination needs
    ``Pair(first=S, second=R)`` and finishes in the pair of both final states.
    """

    def continue_with(_outer: typing.Any, s: S, value: V) -> Effect[Pair[S, R], U]:
        return adapt(
            f(value),
            second,
            lambda _o, r, u: Resolved(Pair(s, r), u),
            rescue=_carry(lambda _o, r: Pair(s, r)),
        )

    return adapt(effect, first, continue_with, rescue=_carry(lambda outer, s: Pair(s, second(outer))))


def sequence[S, V](*effects: Effect[S, V]) -> Effect[S, V]:
    """Run effects left to right, keeping the last value."""
    if not effects:
        raise ValueError("sequence() needs at least one effect")
    head, *rest = effects
    for effect in rest:
        head = then(effect, head)
    return head


# ============================================================================
# Context injection
# ============================================================================


def provide[S, V](value: S, effect: Effect[S, V]) -> Effect[typing.Any, V]:
    """Satisfy the whole context requirement with a constant; the outer context is untouched."""
    return contra_map(const(value), keep_outer, effect)


def provide_left[A, B, V](value: A, effect: Effect[Pair[A, B], V]) -> Effect[B, V]:
    """Provide ``first`` of a pair context; ``second`` comes from the outer context."""
    return contra_map(lambda outer: Pair(value, outer), lambda _outer, inner: second(inner), effect)


def lift[V](name: str, effect: Effect[typing.Any, V]) -> Effect[typing.Any, V]:
    """Zoom into one field of a mapping context and write its final state back."""
    return contra_map(lambda ctx: field(ctx, name), lambda ctx, inner: put(ctx, name, inner), effect)


def func[S, V](f: Callable[[S], V]) -> Effect[S, V]:
    """Value computed from the whole context."""
    return Suspended(lambda ctx: Resolved(ctx, f(ctx)))


def request[S, V](name: str, argument: typing.Any = None) -> Effect[S, V]:
    """
    Request ability ``name`` from the context and apply it to ``argument``.

    The context must bind ``name`` to a function returning an effect.
    """

    def ability(ctx: typing.Any) -> Effect[S, V]:
        return field(ctx, name)(argument)

    return Suspended(ability)


__all__ = (
    "bind_cross",
    "bind_same",
    "contra_map",
    "defer",
    "func",
    "lift",
    "map",
    "provide",
    "provide_left",
    "pure",
    "request",
    "sequence",
    "then",
)
