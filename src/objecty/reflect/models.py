"""Reflection models: property descriptors and chain levels."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class PropertyDescriptor:
    """How one slot can be read and written at the level that defines it.

    Attributes:
        name: Slot name.
        level: Chain level the descriptor was found at (0 is the instance).
        owner: Class defining the slot, None for instance or mapping state.
        writable: Plain assignment stores the value directly.
        getter: Reads go through a getter.
        setter: Writes go through a setter.
    """

    name: str
    level: int
    owner: type | None = None
    writable: bool = True
    getter: bool = False
    setter: bool = False

    @property
    def assignable(self) -> bool:
        """Assignment takes effect, directly or through a setter."""
        return self.writable or self.setter


@dataclass(slots=True)
class ChainLevel:
    """Descriptors contributed by one definition level, in definition order."""

    level: int
    owner: type | None
    descriptors: dict[str, PropertyDescriptor] = field(default_factory=dict)
