"""Value classification and uniform slot access.

Mappings expose their keys, sequences their indices, and plain instances their
own state (``__dict__`` entries plus filled ``__slots__``).
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from enum import Enum
from typing import Any, Final

from objecty.core.models import Kind


class _Missing:
    """Sentinel type for an absent slot."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()

type Key = str | int
"""A slot name: attribute or mapping key, or a sequence index."""

_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, Enum, set, frozenset, range)


def declared_slots(cls: type) -> tuple[str, ...]:
    """Non-dunder names declared in ``cls.__slots__`` (own class only)."""
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return tuple(s for s in slots if not (s.startswith("__") and s.endswith("__")))


def _has_state(value: Any) -> bool:
    if hasattr(value, "__dict__"):
        return True
    return any(declared_slots(cls) for cls in type(value).__mro__)


def kind_of(value: Any) -> Kind:
    """Classify a value as scalar, sequence or aggregate.

    Args:
        value: Any Python value.

    Returns:
        The Kind the recursive algorithms should treat the value as.
    """
    if value is None or value is MISSING or isinstance(value, _SCALAR_TYPES):
        return Kind.SCALAR
    if isinstance(value, list) or type(value) is tuple:
        return Kind.SEQUENCE
    if isinstance(value, Mapping):
        return Kind.AGGREGATE
    if isinstance(value, type) or callable(value):
        return Kind.SCALAR
    if _has_state(value):
        return Kind.AGGREGATE
    return Kind.SCALAR


def is_nested(value: Any) -> bool:
    """True for sequences and aggregates alike."""
    return kind_of(value) is not Kind.SCALAR


def slot_names(value: Any) -> list[Key]:
    """Own slots of a value in natural iteration order.

    Args:
        value: Mapping, sequence or instance.

    Returns:
        Mapping keys, sequence indices, or instance attribute names. Scalars
        have no slots.
    """
    if isinstance(value, Mapping):
        return list(value)
    if isinstance(value, (list, tuple)):
        return list(range(len(value)))
    if kind_of(value) is not Kind.AGGREGATE:
        return []

    names: list[Key] = list(getattr(value, "__dict__", {}))
    for cls in type(value).__mro__:
        for name in declared_slots(cls):
            if name not in names and hasattr(value, name):
                names.append(name)
    return names


def get_slot(value: Any, key: Key, default: Any = MISSING) -> Any:
    """Read one slot, returning ``default`` when it is absent."""
    if isinstance(value, Mapping):
        return value.get(key, default)
    if isinstance(value, (list, tuple)):
        if isinstance(key, int) and -len(value) <= key < len(value):
            return value[key]
        return default
    if not isinstance(key, str) or value is None:
        return default
    try:
        return getattr(value, key)
    except AttributeError:
        return default


def has_slot(value: Any, key: Key) -> bool:
    """True when ``key`` resolves to something on ``value``."""
    return get_slot(value, key) is not MISSING


def set_slot(target: Any, key: Key, value: Any) -> None:
    """Write one slot in place.

    Lists grow by one when ``key`` is the next free index.

    Raises:
        TypeError: If ``target`` cannot hold the slot (scalar or immutable).
    """
    if isinstance(target, MutableMapping):
        target[key] = value
    elif isinstance(target, list):
        if key == len(target):
            target.append(value)
        else:
            target[key] = value  # type: ignore[index]
    elif kind_of(target) is Kind.AGGREGATE and isinstance(key, str):
        setattr(target, key, value)
    else:
        raise TypeError(f"Cannot set slot {key!r} on {type(target).__name__}")
