from __future__ import annotations

import typing

import pytest

from efx import context, evaluate, func, pure, run, state, suspended, then
from efx import stream as S
from efx.context import put


def collect(stream: S.Stream[typing.Any, typing.Any]) -> list[typing.Any]:
    return run(S.to_list(stream))


def explode(_ctx: typing.Any) -> typing.NoReturn:
    raise AssertionError("forced past the cut")


def naturals(start: int = 0) -> S.Stream[typing.Any, int]:
    return S.iterate(lambda n: n + 1, start)


class TestConstruction:
    def test_done_step(self) -> None:
        assert run(S.done) == S.Done()
        assert collect(S.done) == []

    def test_more_step(self) -> None:
        step = run(S.more(1, S.done))
        assert isinstance(step, S.More)
        assert step.value == 1

    def test_from_list(self) -> None:
        assert collect(S.from_list([1, 2, 3])) == [1, 2, 3]

    def test_from_list_restartable(self) -> None:
        stream = S.to_list(S.from_list("abc"))
        assert run(stream) == run(stream) == ["a", "b", "c"]

    def test_singleton(self) -> None:
        assert collect(S.singleton("x")) == ["x"]

    def test_repeat_runs_effect_each_time(self) -> None:
        final, values = evaluate(S.to_list(S.repeat(3, state.modify(lambda n: n + 1))), 0)
        assert values == [1, 2, 3]
        assert final == 3

    def test_repeat_zero(self) -> None:
        assert collect(S.repeat(0, suspended(explode))) == []

    def test_iterate_is_lazy(self) -> None:
        assert collect(S.take(4, S.iterate(lambda n: n * 2, 1))) == [1, 2, 4, 8]

    def test_unfold(self) -> None:
        stream = S.unfold(lambda n: None if n > 3 else (n * n, n + 1), 1)
        assert collect(stream) == [1, 4, 9]


class TestTransform:
    def test_map(self) -> None:
        assert collect(S.map(lambda n: n * 10, S.from_list([1, 2]))) == [10, 20]

    def test_filter(self) -> None:
        assert collect(S.filter(lambda n: n % 2 == 0, S.from_list(range(7)))) == [0, 2, 4, 6]

    def test_filter_looks_ahead_over_rejected(self) -> None:
        stream = S.filter(lambda n: n > 1000, naturals())
        assert collect(S.take(1, stream)) == [1001]

    def test_filter_on_empty(self) -> None:
        assert collect(S.filter(bool, S.done)) == []


class TestLimit:
    def test_take(self) -> None:
        assert collect(S.take(2, S.from_list([1, 2, 3]))) == [1, 2]

    def test_take_more_than_available(self) -> None:
        assert collect(S.take(10, S.from_list([1, 2]))) == [1, 2]

    def test_take_zero_does_not_force(self) -> None:
        assert collect(S.take(0, suspended(explode))) == []

    def test_take_stops_at_cut(self) -> None:
        assert collect(S.take(1, S.more(1, suspended(explode)))) == [1]

    def test_take_while(self) -> None:
        assert collect(S.take_while(lambda n: n < 3, naturals())) == [0, 1, 2]

    def test_take_while_stops_at_first_failure(self) -> None:
        stream = S.more(1, S.more(5, S.more(2, suspended(explode))))
        assert collect(S.take_while(lambda n: n < 3, stream)) == [1]


class TestReduce:
    def test_fold(self) -> None:
        total = S.fold(0, lambda acc, n: pure(acc + n), S.from_list([1, 2, 3]))
        assert run(total) == 6

    def test_fold_reads_context(self) -> None:
        total = S.fold(0, lambda acc, n: func(lambda ctx: acc + n * ctx["k"]), S.from_list([1, 2, 3]))
        assert evaluate(total, context(k=10)) == (context(k=10), 60)

    def test_fold_writes_context(self) -> None:
        def count(acc: int, _: str):
            return then(pure(acc + 1), state.modify(lambda ctx: put(ctx, "seen", ctx["seen"] + 1)))

        final, total = evaluate(S.fold(0, count, S.from_list("abc")), context(seen=0))
        assert final["seen"] == total == 3

    def test_fold_empty(self) -> None:
        assert run(S.fold("init", lambda acc, _: pure(acc), S.done)) == "init"

    def test_for_each(self) -> None:
        effect = S.for_each(lambda n: state.modify(lambda ctx: put(ctx, "sum", ctx["sum"] + n)), S.from_list([1, 2, 3]))
        final, value = evaluate(effect, context(sum=0))
        assert final["sum"] == 6
        assert value is None

    def test_to_list_keeps_order(self) -> None:
        assert collect(S.from_list(range(50))) == list(range(50))


class TestCombine:
    def test_concat(self) -> None:
        assert collect(S.concat(S.from_list([1, 2]), S.from_list([3]))) == [1, 2, 3]

    def test_concat_is_unfair(self) -> None:
        stream = S.concat(naturals(), S.from_list([99]))
        assert collect(S.take(1, stream)) == [0]
        assert 99 not in collect(S.take(500, stream))

    def test_concat_leaves_second_untouched(self) -> None:
        assert collect(S.take(2, S.concat(S.from_list([1, 2]), suspended(explode)))) == [1, 2]

    def test_interleave_is_fair(self) -> None:
        stream = S.interleave(S.from_list([1, 2, 3]), S.from_list([10, 20, 30]))
        assert collect(stream) == [1, 10, 2, 20, 3, 30]

    def test_interleave_uneven(self) -> None:
        stream = S.interleave(S.from_list([1]), S.from_list([10, 20, 30]))
        assert collect(stream) == [1, 10, 20, 30]

    def test_interleave_reaches_finite_side_of_infinite(self) -> None:
        stream = S.interleave(naturals(), S.from_list([100, 200]))
        assert collect(S.take(6, stream)) == [0, 100, 1, 200, 2, 3]

    def test_flatten_concatenates_in_order(self) -> None:
        nested = S.from_list([S.from_list([1, 2]), S.done, S.from_list([3])])
        assert collect(S.flatten(nested)) == [1, 2, 3]

    def test_flat_map(self) -> None:
        stream = S.flat_map(lambda n: S.from_list([n, n * 10]), S.from_list([1, 2]))
        assert collect(stream) == [1, 10, 2, 20]

    def test_zip_stops_at_shorter(self) -> None:
        assert collect(S.zip(S.from_list([1, 2, 3]), S.from_list("ab"))) == [(1, "a"), (2, "b")]

    def test_zip_with_infinite(self) -> None:
        assert collect(S.zip(naturals(), S.from_list("xy"))) == [(0, "x"), (1, "y")]


@pytest.mark.parametrize("size", [0, 1, 5])
def test_from_list_sizes(size: int) -> None:
    assert collect(S.from_list(range(size))) == list(range(size))
