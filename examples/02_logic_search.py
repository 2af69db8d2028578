from __future__ import annotations

from _infra import banner

from efx import conj, guard, observe, observe_all, run
from efx import stream as S


def queens(n: int, placed: tuple[int, ...] = ()):
    """All placements of n non-attacking queens, one column per row."""
    if len(placed) == n:
        return S.singleton(placed)

    def place(column: int):
        row = len(placed)
        safe = all(
            column != other and abs(column - other) != row - other_row
            for other_row, other in enumerate(placed)
        )
        return conj(lambda _: queens(n, (*placed, column)), guard(safe))

    return conj(place, S.from_list(range(n)))


def main() -> None:
    banner("02_logic_search: n-queens with fair conjunction")
    print("first 6-queens solution:", run(observe(queens(6))))
    print("8-queens solutions:", len(run(observe_all(queens(8)))))

    banner("fair search over an infinite space")
    squares = conj(lambda n: S.singleton(n * n), S.iterate(lambda n: n + 1, 1))
    print(run(S.to_list(S.take(5, squares))))


if __name__ == "__main__":
    main()
