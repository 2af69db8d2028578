"""
Conditions, handlers, restarts
==============================

A condition is a tagged record: ``type`` plus arbitrary payload. Handlers are
bound to a tag (or the ``"*"`` wildcard); restarts are bound to a name. Both
live in immutable tuples on the context, innermost first.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field

from frozendict import frozendict

from .._errors import MalformedConditionError

if typing.TYPE_CHECKING:
    from ..kernel.effect import Effect

WILDCARD = "*"
ERROR = "error"
WARNING = "warning"
CONTINUE = "continue"


def _empty_payload() -> frozendict[str, typing.Any]:
    return frozendict()


@dataclass(frozen=True, slots=True)
class Condition(Mapping[str, typing.Any]):
    """
    Tagged condition record.

    Reads like a mapping over ``type`` plus the payload, so handlers can write
    ``cond["message"]`` or ``cond.get("continuable", False)``.
    """

    type: str
    payload: frozendict[str, typing.Any] = field(default_factory=_empty_payload)

    def __post_init__(self) -> None:
        if not isinstance(self.type, str) or not self.type:
            raise MalformedConditionError(self.type)
        if not isinstance(self.payload, frozendict):
            object.__setattr__(self, "payload", frozendict(self.payload))

    @classmethod
    def of(cls, data: Condition | Mapping[str, typing.Any]) -> Condition:
        """Coerce a record into a Condition; a record without ``type`` is rejected here."""
        if isinstance(data, Condition):
            return data
        if not isinstance(data, Mapping) or "type" not in data:
            raise MalformedConditionError(data)
        payload = {key: value for key, value in data.items() if key != "type"}
        return cls(data["type"], frozendict(payload))

    @property
    def message(self) -> str | None:
        return self.payload.get("message")

    @property
    def continuable(self) -> bool:
        return bool(self.payload.get("continuable", False))

    def with_fields(self, **fields: typing.Any) -> Condition:
        return Condition(self.type, frozendict({**self.payload, **fields}))

    def __getitem__(self, key: str) -> typing.Any:
        if key == "type":
            return self.type
        return self.payload[key]

    def __iter__(self) -> Iterator[str]:
        yield "type"
        yield from self.payload

    def __len__(self) -> int:
        return len(self.payload) + 1


@dataclass(frozen=True, slots=True)
class Handler:
    pattern: str
    action: Callable[[Condition], Effect[typing.Any, typing.Any]]

    def matches(self, condition: Condition) -> bool:
        return self.pattern == condition.type or self.pattern == WILDCARD


@dataclass(frozen=True, slots=True)
class Restart:
    name: str
    action: Callable[[typing.Any], Effect[typing.Any, typing.Any]]


__all__ = (
    "CONTINUE",
    "ERROR",
    "WARNING",
    "WILDCARD",
    "Condition",
    "Handler",
    "Restart",
)
