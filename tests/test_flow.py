from __future__ import annotations

from kungfu import Error, Ok

from efx import (
    Flow,
    Pair,
    RunPolicy,
    context,
    evaluate,
    flow,
    func,
    invoke_restart,
    is_effect,
    pure,
    request,
    signal,
    state,
    throw,
)
from efx.context import put
from efx.flow import Base, Handle, Map


class TestFlowBuilder:
    def test_records_ast(self) -> None:
        chain = flow(pure(1)).map(str).handle("error", pure)
        assert isinstance(chain, Flow)
        assert isinstance(chain.expr, Handle)
        assert isinstance(chain.expr.inner, Map)
        assert isinstance(chain.expr.inner.inner, Base)

    def test_compile_returns_effect(self) -> None:
        assert is_effect(flow(pure(1)).map(str).compile())

    def test_map_and_bind(self) -> None:
        result = flow(pure(2)).map(lambda n: n + 1).bind(lambda n: pure(n * 10)).run()
        assert result == 30

    def test_then(self) -> None:
        assert flow(pure("ignored")).then(pure("kept")).run() == "kept"

    def test_handle_and_restart(self) -> None:
        result = (
            flow(request("fetch", 42))
            .handle("error", lambda _: invoke_restart("use-default"))
            .with_restart("use-default", lambda _: pure("anonymous"))
            .provide(context(fetch=lambda _: signal({"type": "error", "message": "offline"})))
            .run()
        )
        assert result == "anonymous"

    def test_lift_with_run_policy(self) -> None:
        result = (
            flow(state.modify(lambda n: n + 1))
            .lift("count")
            .then(func(lambda ctx: ctx["count"]))
            .run(policy=RunPolicy(context=context(count=1)))
        )
        assert result == 2

    def test_contra_map(self) -> None:
        effect = (
            flow(func(lambda n: n * 2))
            .contra_map(lambda ctx: ctx["n"], lambda ctx, n: put(ctx, "n", n))
            .compile()
        )
        assert evaluate(effect, context(n=4)) == (context(n=4), 8)

    def test_bind_cross(self) -> None:
        effect = flow(func(lambda s: s * 10)).bind_cross(lambda v: func(lambda r: v + r)).compile()
        assert evaluate(effect, Pair(2, 3)) == (Pair(2, 3), 23)

    def test_catch(self) -> None:
        match flow(throw("nope")).catch().run():
            case Error(condition):
                assert condition.message == "nope"
            case Ok(value):
                raise AssertionError(f"expected failure, got {value!r}")

    def test_catch_success(self) -> None:
        match flow(pure(1)).catch().run():
            case Ok(value):
                assert value == 1
            case Error(condition):
                raise AssertionError(f"unexpected {condition!r}")
