"""
Fluent AST for effect chaining.

A ``Flow`` records combinator applications as ``Expr`` nodes and lowers them
to a plain ``Effect`` on ``compile()``. Reads top to bottom in the order the
effect runs, instead of inside out:

    result = (
        flow(request("fetch", 42))
        .map(lambda raw: raw["name"])
        .handle("error", lambda c: invoke_restart("use-default"))
        .with_restart("use-default", lambda _: pure("anonymous"))
        .provide(context(fetch=fetch))
        .run()
    )

Порядок методов = порядок обёрток: каждый следующий метод оборачивает всё, что было до него.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Result

from ._types import Getter, Kleisli, Setter
from .conditions.condition import Condition
from .conditions.restart import RestartAction
from .conditions.signal import HandlerAction
from .context.fields import Pair
from .kernel.effect import Effect
from .kernel.run import RunPolicy, run

# ============================================================================
# AST nodes
# ============================================================================


class Expr[S, V]:
    """
    AST node that can be lowered into an executable Effect.
    """

    def lower(self) -> Effect[S, V]:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Base[S, V](Expr[S, V]):
    value: Effect[S, V]

    def lower(self) -> Effect[S, V]:
        return self.value


@dataclass(frozen=True, slots=True)
class Map[S, V, U](Expr[S, U]):
    inner: Expr[S, V]
    f: Callable[[V], U]

    def lower(self) -> Effect[S, U]:
        from .context.algebra import map
        return map(self.f, self.inner.lower())


@dataclass(frozen=True, slots=True)
class Bind[S, V, U](Expr[S, U]):
    inner: Expr[S, V]
    f: Kleisli[V, S, U]

    def lower(self) -> Effect[S, U]:
        from .context.algebra import bind_same
        return bind_same(self.f, self.inner.lower())


@dataclass(frozen=True, slots=True)
class Then[S, V, U](Expr[S, U]):
    inner: Expr[S, V]
    next: Effect[S, U]

    def lower(self) -> Effect[S, U]:
        from .context.algebra import then
        return then(self.next, self.inner.lower())


@dataclass(frozen=True, slots=True)
class BindCross[S, R, V, U](Expr[Pair[S, R], U]):
    inner: Expr[S, V]
    f: Callable[[V], Effect[R, U]]

    def lower(self) -> Effect[Pair[S, R], U]:
        from .context.algebra import bind_cross
        return bind_cross(self.f, self.inner.lower())


@dataclass(frozen=True, slots=True)
class Handle[S, V](Expr[S, V]):
    inner: Expr[S, V]
    pattern: str
    action: HandlerAction

    def lower(self) -> Effect[S, V]:
        from .conditions.signal import handle
        return handle(self.pattern, self.action, self.inner.lower())


@dataclass(frozen=True, slots=True)
class WithRestart[S, V](Expr[S, V]):
    inner: Expr[S, V]
    name: str
    action: RestartAction

    def lower(self) -> Effect[S, V]:
        from .conditions.restart import with_restart
        return with_restart(self.name, self.action, self.inner.lower())


@dataclass(frozen=True, slots=True)
class Provide[S, V](Expr[typing.Any, V]):
    inner: Expr[S, V]
    value: S

    def lower(self) -> Effect[typing.Any, V]:
        from .context.algebra import provide
        return provide(self.value, self.inner.lower())


@dataclass(frozen=True, slots=True)
class Lift[V](Expr[typing.Any, V]):
    inner: Expr[typing.Any, V]
    name: str

    def lower(self) -> Effect[typing.Any, V]:
        from .context.algebra import lift
        return lift(self.name, self.inner.lower())


@dataclass(frozen=True, slots=True)
class ContraMap[O, I, V](Expr[O, V]):
    inner: Expr[I, V]
    getter: Getter[O, I]
    setter: Setter[O, I]

    def lower(self) -> Effect[O, V]:
        from .context.algebra import contra_map
        return contra_map(self.getter, self.setter, self.inner.lower())


@dataclass(frozen=True, slots=True)
class Catch[S, V](Expr[S, Result[V, Condition]]):
    inner: Expr[S, V]

    def lower(self) -> Effect[S, Result[V, Condition]]:
        from .control.result import catch
        return catch(self.inner.lower())


# ============================================================================
# Flow
# ============================================================================


@dataclass(frozen=True, slots=True)
class Flow[S, V]:
    """
    Fluent builder for chaining effect combinators.
    """

    expr: Expr[S, V]

    def map[U](self, f: Callable[[V], U]) -> Flow[S, U]:
        return Flow(Map(self.expr, f=f))

    def bind[U](self, f: Kleisli[V, S, U]) -> Flow[S, U]:
        return Flow(Bind(self.expr, f=f))

    def then[U](self, next: Effect[S, U]) -> Flow[S, U]:
        return Flow(Then(self.expr, next=next))

    def bind_cross[R, U](self, f: Callable[[V], Effect[R, U]]) -> Flow[Pair[S, R], U]:
        return Flow(BindCross(self.expr, f=f))

    def handle(self, pattern: str, action: HandlerAction) -> Flow[S, V]:
        return Flow(Handle(self.expr, pattern=pattern, action=action))

    def with_restart(self, name: str, action: RestartAction) -> Flow[S, V]:
        return Flow(WithRestart(self.expr, name=name, action=action))

    def provide(self, value: S) -> Flow[typing.Any, V]:
        return Flow(Provide(self.expr, value=value))

    def lift(self, name: str) -> Flow[typing.Any, V]:
        return Flow(Lift(self.expr, name=name))

    def contra_map[O](self, getter: Getter[O, S], setter: Setter[O, S]) -> Flow[O, V]:
        return Flow(ContraMap(self.expr, getter=getter, setter=setter))

    def catch(self) -> Flow[S, Result[V, Condition]]:
        return Flow(Catch(self.expr))

    def compile(self) -> Effect[S, V]:
        return self.expr.lower()

    def run(self, *, policy: RunPolicy | None = None) -> V:
        return run(self.compile(), policy=policy)


def flow[S, V](effect: Effect[S, V]) -> Flow[S, V]:
    """Start a fluent chain from an effect."""
    return Flow(Base(effect))


__all__ = (
    "Base",
    "Bind",
    "BindCross",
    "Catch",
    "ContraMap",
    "Expr",
    "Flow",
    "Handle",
    "Lift",
    "Map",
    "Provide",
    "Then",
    "WithRestart",
    "flow",
)
