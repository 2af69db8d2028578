from __future__ import annotations

import typing

import pytest
from kungfu import Error, Ok, Result

from efx import (
    Condition,
    ContextAccessError,
    bind_same,
    catch,
    context,
    error,
    evaluate,
    func,
    handle,
    pure,
    recover,
    recover_with,
    request,
    resolved,
    run,
    state,
    suspended,
    then,
    throw,
    warn,
)
from efx.context import put


def outcome(result: Result[typing.Any, Condition]) -> tuple[str, typing.Any]:
    match result:
        case Ok(value):
            return "ok", value
        case Error(condition):
            return "error", condition


def record(log: list[str], item: str):
    def ability(ctx: typing.Any):
        log.append(item)
        return resolved(ctx, item)

    return suspended(ability)


class TestCatch:
    def test_success_is_ok(self) -> None:
        assert outcome(run(catch(pure(5)))) == ("ok", 5)

    def test_success_keeps_state(self) -> None:
        effect = catch(then(pure("v"), state.modify(lambda ctx: put(ctx, "n", 2))))
        final, result = evaluate(effect, context(n=1))
        assert final == context(n=2)
        assert outcome(result) == ("ok", "v")

    def test_throw_is_error(self) -> None:
        kind, condition = outcome(run(catch(throw("not_found", {"id": 7}))))
        assert kind == "error"
        assert condition.type == "error"
        assert condition.message == "not_found"
        assert condition["id"] == 7
        assert condition["result"] is True

    def test_throw_abandons_rest(self) -> None:
        log: list[str] = []
        effect = catch(then(record(log, "after"), then(throw("boom"), record(log, "before"))))
        kind, _ = outcome(run(effect))
        assert kind == "error"
        assert log == ["before"]

    def test_plain_error_is_terminal_too(self) -> None:
        kind, condition = outcome(run(catch(error("signalled"))))
        assert (kind, condition.message) == ("error", "signalled")

    def test_abandoned_state_is_discarded(self) -> None:
        effect = catch(then(throw("boom"), state.modify(lambda ctx: put(ctx, "n", 2))))
        final, _ = evaluate(effect, context(n=1))
        assert final == context(n=1)

    def test_inner_handler_resumes_first(self) -> None:
        effect = catch(handle("error", lambda _: pure("resumed"), throw("boom")))
        assert outcome(run(effect)) == ("ok", "resumed")

    def test_other_conditions_pass_through(self) -> None:
        effect = catch(then(pure("done"), warn("careful")))
        assert outcome(run(effect)) == ("ok", "done")

    def test_nested_catch_innermost_wins(self) -> None:
        effect = catch(catch(throw("inner")))
        kind, inner = outcome(run(effect))
        assert kind == "ok"
        assert outcome(inner)[0] == "error"

    def test_outer_catch_after_inner_success(self) -> None:
        effect = catch(bind_same(lambda _: throw("outer"), catch(pure(1))))
        kind, condition = outcome(run(effect))
        assert (kind, condition.message) == ("error", "outer")

    def test_fatal_exceptions_pass_through(self) -> None:
        with pytest.raises(ContextAccessError):
            run(catch(request("missing")))


class TestRecover:
    def test_recover_default(self) -> None:
        assert run(recover(throw("boom"), default="fallback")) == "fallback"

    def test_recover_success(self) -> None:
        assert run(recover(pure(1), default=0)) == 1

    def test_recover_with_handler(self) -> None:
        effect = recover_with(throw("not_found"), handler=lambda c: f"missing: {c.message}")
        assert run(effect) == "missing: not_found"

    def test_recover_reads_context_after(self) -> None:
        effect = then(func(lambda ctx: ctx["n"]), recover(throw("boom"), default=None))
        assert evaluate(effect, context(n=3)) == (context(n=3), 3)
