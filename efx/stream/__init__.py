"""
Lazy streams
============

Use as a namespace; several names shadow builtins:

    from efx import stream as S

    evens = S.filter(lambda n: n % 2 == 0, S.iterate(lambda n: n + 1, 0))
    run(S.to_list(S.take(3, evens)))  # [0, 2, 4]
"""

from .combine import concat, flat_map, flatten, interleave, zip
from .core import done, from_list, iterate, more, repeat, singleton, unfold
from .limit import take, take_while
from .reduce import Accumulate, fold, for_each, to_list
from .step import Done, More, Step, Stream
from .transform import filter, map

__all__ = (
    # Steps
    "Done",
    "More",
    "Step",
    "Stream",
    # Construction
    "done",
    "from_list",
    "iterate",
    "more",
    "repeat",
    "singleton",
    "unfold",
    # Transform
    "filter",
    "map",
    # Limit
    "take",
    "take_while",
    # Reduce
    "Accumulate",
    "fold",
    "for_each",
    "to_list",
    # Combine
    "concat",
    "flat_map",
    "flatten",
    "interleave",
    "zip",
)
