"""Core models: value kinds, capability protocols and errors.

Capability protocols are optional interfaces a value can implement to take over
part of an algorithm for its own subtree, like custom cloning or projection.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Protocol, Self, runtime_checkable


class Kind(Enum):
    """Shape of a value as seen by the recursive algorithms."""

    SCALAR = auto()  # Copied by reference, never recursed into
    SEQUENCE = auto()  # list or plain tuple
    AGGREGATE = auto()  # Mapping or instance with slots


@runtime_checkable
class Cloneable(Protocol):
    """Instance → independent copy of itself."""

    def __clone__(self) -> Self: ...


@runtime_checkable
class Projectable(Protocol):
    """Instance → plain representation (for serialization)."""

    def __project__(self) -> Any: ...


class RecursionLimitExceededError(RecursionError):
    """Raised when a recursive operation nests deeper than its depth limit.

    A structure that trips the limit is almost always cyclic.

    Attributes:
        operation: Name of the operation that gave up.
        limit: Depth limit that was exceeded.
        key: Slot being visited when the limit was hit.
    """

    def __init__(self, operation: str, limit: int, key: Any) -> None:
        self.operation = operation
        self.limit = limit
        self.key = key
        super().__init__(
            f"{operation}() exceeded max depth {limit} at slot {key!r}; "
            f"the structure is probably cyclic"
        )
