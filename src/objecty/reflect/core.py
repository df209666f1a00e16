"""Property reflection over an object's chain of definitions.

The chain of an instance is its own state (level 0) followed by every class in
its MRO, most-derived first. Traversal stops at ``object``, which contributes
no slots. Mappings have a single level made of their keys.

Usage:
    class Base:
        @property
        def label(self) -> str:
            return "base"

    class Child(Base):
        def __init__(self) -> None:
            self.size = 3

    enumerate_props(Child())        # ["size", "label"]
    find_descriptor(Child(), "label").getter  # True
    unwritable_set(Child())         # frozenset({"label"})
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from dataclasses import is_dataclass
from functools import cached_property
from typing import Any

from objecty.core.models import Kind
from objecty.core.types import MISSING, Key, get_slot, kind_of
from objecty.reflect.models import ChainLevel, PropertyDescriptor

logger = logging.getLogger(__name__)


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _is_frozen(obj: Any) -> bool:
    """Frozen dataclass instances reject every assignment."""
    if not is_dataclass(obj):
        return False
    params = getattr(type(obj), "__dataclass_params__", None)
    return bool(params is not None and params.frozen)


def _class_attr(cls: type, name: str) -> Any:
    for base in cls.__mro__:
        if name in base.__dict__:
            return base.__dict__[name]
    return MISSING


def _describe(name: str, attr: Any, level: int, owner: type, frozen: bool) -> PropertyDescriptor:
    """Build the descriptor for one class-level attribute."""
    if isinstance(attr, property):
        return PropertyDescriptor(
            name=name,
            level=level,
            owner=owner,
            writable=False,
            getter=attr.fget is not None,
            setter=attr.fset is not None and not frozen,
        )
    if isinstance(attr, cached_property):
        return PropertyDescriptor(
            name=name, level=level, owner=owner, writable=not frozen, getter=True
        )
    # Slot member descriptors, methods and class constants are plain data
    return PropertyDescriptor(name=name, level=level, owner=owner, writable=not frozen)


def _instance_level(obj: Any, frozen: bool) -> ChainLevel:
    level = ChainLevel(level=0, owner=None)
    state = getattr(obj, "__dict__", None)
    if not isinstance(state, Mapping):
        return level
    cls = type(obj)
    for name in state:
        # A class-level property shadows instance state of the same name
        if _is_dunder(name) or isinstance(_class_attr(cls, name), property):
            continue
        level.descriptors[name] = PropertyDescriptor(name=name, level=0, writable=not frozen)
    return level


def _class_level(cls: type, index: int, frozen: bool) -> ChainLevel:
    level = ChainLevel(level=index, owner=cls)
    for name, attr in cls.__dict__.items():
        if _is_dunder(name):
            continue
        level.descriptors[name] = _describe(name, attr, index, cls, frozen)
    return level


def chain(obj: Any) -> list[ChainLevel]:
    """Definition levels of an object, most-derived first.

    Args:
        obj: Mapping or instance to inspect.

    Returns:
        One ChainLevel per definition level. Scalars, None and classes have
        no chain.
    """
    if obj is None:
        return []
    if isinstance(obj, Mapping):
        writable = isinstance(obj, MutableMapping)
        return [
            ChainLevel(
                level=0,
                owner=None,
                descriptors={
                    k: PropertyDescriptor(name=k, level=0, writable=writable)
                    for k in obj
                    if isinstance(k, str)
                },
            )
        ]
    if kind_of(obj) is not Kind.AGGREGATE:
        return []

    frozen = _is_frozen(obj)
    levels = [_instance_level(obj, frozen)]
    for index, cls in enumerate(type(obj).__mro__, start=1):
        if cls is object:
            break
        levels.append(_class_level(cls, index, frozen))
    return levels


def _is_callable_slot(obj: Any, name: str) -> bool:
    """True when reading ``name`` on the live object yields a callable."""
    value = get_slot(obj, name)
    return value is not MISSING and callable(value)


def enumerate_props(
    obj: Any, include_data: bool = True, include_accessors: bool = True
) -> list[str]:
    """Slot names reachable through an object's chain.

    Names are listed once, in chain order, each reflecting its most-derived
    definition. Slots currently holding a callable are never listed.

    Args:
        obj: Mapping or instance to inspect.
        include_data: Include slots that store a value.
        include_accessors: Include getter-backed slots.

    Returns:
        Ordered, de-duplicated slot names.
    """
    seen: set[str] = set()
    names: list[str] = []
    for level in chain(obj):
        for name, desc in level.descriptors.items():
            if name in seen:
                continue
            seen.add(name)
            if _is_callable_slot(obj, name):
                continue
            if desc.getter:
                if include_accessors:
                    names.append(name)
            elif include_data:
                names.append(name)
            else:
                logger.debug("hiding data slot %r of %s", name, type(obj).__name__)
    return names


def find_descriptor(obj: Any, name: str) -> PropertyDescriptor | None:
    """First descriptor for ``name`` walking from the instance to the root.

    Returns:
        The active descriptor, or None if no level defines ``name``.
    """
    for level in chain(obj):
        desc = level.descriptors.get(name)
        if desc is not None:
            return desc
    return None


def unwritable_set(obj: Any) -> frozenset[str]:
    """Names whose active descriptor is neither writable nor setter-backed."""
    seen: set[str] = set()
    blocked: set[str] = set()
    for level in chain(obj):
        for name, desc in level.descriptors.items():
            if name in seen:
                continue
            seen.add(name)
            if not desc.assignable:
                blocked.add(name)
    return frozenset(blocked)


def accepts_new_slots(obj: Any) -> bool:
    """True when assigning a name no chain level defines would create a slot.

    Mutable mappings and lists grow on assignment. Plain instances grow when
    they carry a ``__dict__``; frozen dataclasses, ``__slots__``-only classes
    and read-only mappings never do.
    """
    if isinstance(obj, (MutableMapping, list)):
        return True
    if isinstance(obj, Mapping) or _is_frozen(obj):
        return False
    return kind_of(obj) is Kind.AGGREGATE and isinstance(getattr(obj, "__dict__", None), dict)


def is_assignable(obj: Any, name: Key) -> bool:
    """True when ``obj`` can store a value under ``name``.

    Declared names follow their active descriptor; undeclared names follow
    accepts_new_slots.
    """
    if isinstance(obj, (MutableMapping, list)):
        return True
    desc = find_descriptor(obj, name) if isinstance(name, str) else None
    if desc is not None:
        return desc.assignable
    return accepts_new_slots(obj)
