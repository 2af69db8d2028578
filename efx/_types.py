"""
Core type definitions for efx.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

if typing.TYPE_CHECKING:
    from .kernel.effect import Effect

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Ability = what a suspended effect does once context arrives
type Ability[S, V] = Callable[[typing.Any], Effect[S, V]]

# ContextMap = outer context -> inner context (contravariant half of adapt)
type ContextMap[O, I] = Callable[[O], I]

# Continuation = (outer, inner state after, value) -> next effect (covariant half of adapt)
type Continuation[O, S, V, U] = Callable[[O, S, V], Effect[O, U]]

# Getter / Setter pair used by contra_map and lift
type Getter[O, I] = Callable[[O], I]
type Setter[O, I] = Callable[[O, I], O]

# Kleisli = value -> effect, the shape every bind consumes
type Kleisli[V, S, U] = Callable[[V], Effect[S, U]]

# Rescue = (raised error, boundary context) -> replacement effect
type Rescue[O, U] = Callable[[BaseException, O], Effect[O, U]]

__all__ = (
    "Ability",
    "ContextMap",
    "Continuation",
    "Getter",
    "Kleisli",
    "Predicate",
    "Rescue",
    "Setter",
)
