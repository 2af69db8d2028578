from __future__ import annotations

import logging

import pytest

from efx import (
    Condition,
    RestartNotFoundError,
    cerror,
    error,
    find_restart,
    handle,
    ignore_errors,
    invoke_restart,
    list_restarts,
    pure,
    run,
    sequence,
    signal,
    with_restart,
)


class TestInvokeRestart:
    def test_round_trip_through_handler(self) -> None:
        effect = with_restart(
            "test",
            lambda value: pure(value * 2),
            handle("trigger", lambda _: invoke_restart("test", 21), signal({"type": "trigger"})),
        )
        assert run(effect) == 42

    def test_innermost_restart_wins(self) -> None:
        effect = with_restart(
            "retry",
            lambda _: pure("outer"),
            with_restart("retry", lambda _: pure("inner"), invoke_restart("retry")),
        )
        assert run(effect) == "inner"

    def test_missing_restart_is_fatal(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.ERROR, logger="efx.conditions.restart")
        effect = with_restart("abort", lambda _: pure(None), invoke_restart("retry"))
        with pytest.raises(RestartNotFoundError) as info:
            run(effect)
        assert info.value.name == "retry"
        assert info.value.available == ("abort",)
        assert "retry" in caplog.text

    def test_restart_not_visible_outside_extent(self) -> None:
        effect = sequence(
            with_restart("abort", lambda _: pure("aborted"), pure(0)),
            invoke_restart("abort"),
        )
        with pytest.raises(RestartNotFoundError):
            run(effect)

    def test_handler_chooses_restart_by_condition(self) -> None:
        def choose(condition: Condition):
            return invoke_restart("use-value", condition["fallback"])

        effect = with_restart(
            "use-value",
            pure,
            handle("error", choose, error("missing", {"fallback": "default"})),
        )
        assert run(effect) == "default"


class TestRestartIntrospection:
    def test_find_restart(self) -> None:
        assert run(with_restart("abort", pure, find_restart("abort"))) is True
        assert run(find_restart("abort")) is False

    def test_list_restarts_innermost_first(self) -> None:
        effect = with_restart("a", pure, with_restart("b", pure, list_restarts()))
        assert run(effect) == ("b", "a")


class TestContinuableErrors:
    def test_continue_restart_returns_default(self) -> None:
        def continue_if_possible(condition: Condition):
            if condition.continuable:
                return invoke_restart("continue")
            return pure("not continuable")

        effect = handle("error", continue_if_possible, cerror("use zero", 0, "division by zero"))
        assert run(effect) == 0

    def test_condition_carries_continue_message(self) -> None:
        effect = handle(
            "error",
            lambda c: pure((c.message, c["continue_message"], c.continuable)),
            cerror("use zero", 0, "division by zero"),
        )
        assert run(effect) == ("division by zero", "use zero", True)

    def test_unhandled_cerror_yields_default(self) -> None:
        assert run(cerror("use zero", 0, "division by zero")) == 0

    def test_handled_cerror_still_yields_default(self) -> None:
        seen: list[str] = []

        def remember(condition: Condition):
            seen.append(condition["continue_message"])
            return pure(7)

        effect = handle("error", remember, cerror("use zero", 0, "division by zero"))
        assert run(effect) == 0
        assert seen == ["use zero"]

    def test_continue_restart_yields_default(self) -> None:
        effect = handle("error", lambda _: invoke_restart("continue"), cerror("use zero", 0, "division by zero"))
        assert run(effect) == 0

    def test_continue_restart_scoped_to_cerror(self) -> None:
        effect = sequence(cerror("go on", 1, "first"), find_restart("continue"))
        assert run(effect) is False

    def test_ignore_errors(self) -> None:
        assert run(ignore_errors("fallback", error("boom"))) == "fallback"
