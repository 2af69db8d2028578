from __future__ import annotations

import typing


class EffectError(Exception):
    """Base class for fatal failures raised while driving an effect."""


class ContextAccessError(EffectError, LookupError):
    """An ability read a field the supplied context does not carry."""

    field: str

    def __init__(self, field: str, context: typing.Any = None) -> None:
        self.field = field
        kind = type(context).__name__
        super().__init__(f"Context has no field {field!r} (got {kind})")


class RestartNotFoundError(EffectError):
    """invoke_restart named a restart absent from the ambient restart stack."""

    name: str
    available: tuple[str, ...]

    def __init__(self, name: str, available: tuple[str, ...] = ()) -> None:
        self.name = name
        self.available = available
        listed = ", ".join(available) if available else "none"
        super().__init__(f"Restart not found: {name} (available: {listed})")


class MalformedConditionError(EffectError, ValueError):
    """Condition constructed without a usable type tag."""

    def __init__(self, data: typing.Any) -> None:
        self.data = data
        super().__init__(f"Condition requires a non-empty string 'type', got {data!r}")


__all__ = (
    "ContextAccessError",
    "EffectError",
    "MalformedConditionError",
    "RestartNotFoundError",
)
