"""Writability-aware assignment and projection to plain dicts.

Slots a destination cannot assign (getter-only properties, frozen dataclass
fields, read-only mappings) are skipped without error, and so are new names
on destinations that cannot grow (``__slots__``-only classes, frozen
dataclasses, read-only mappings). ``objecty.reflect.is_assignable`` tells
what would be written.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Any

from objecty.core.models import Projectable
from objecty.core.types import MISSING, get_slot, set_slot, slot_names
from objecty.reflect import (
    accepts_new_slots,
    chain,
    enumerate_props,
    find_descriptor,
    unwritable_set,
)


def assign[T](dest: T, src: Any, exclude: Collection[str] | None = None) -> T:
    """Copy every slot of ``src``'s chain that ``dest`` can assign.

    Args:
        dest: Mapping or instance to write into.
        src: Mapping or instance to read from (properties included).
        exclude: Slot names never copied.

    Returns:
        ``dest``.
    """
    blocked = unwritable_set(dest)
    growable = accepts_new_slots(dest)
    for name in enumerate_props(src):
        if name in blocked or (exclude and name in exclude):
            continue
        if not growable and find_descriptor(dest, name) is None:
            continue
        value = get_slot(src, name)
        if value is not MISSING:
            set_slot(dest, name, value)
    return dest


def assign_own[T](dest: T, src: Any, exclude: Collection[str] | None = None) -> T:
    """Copy ``src``'s own slots into slots ``dest`` already declares.

    Unlike assign, ``src`` is read as plain state (no property walk) and no
    new slot is ever created on ``dest``.

    Args:
        dest: Mapping or instance to write into.
        src: Mapping or instance to read from.
        exclude: Slot names never copied.

    Returns:
        ``dest``.
    """
    for name in slot_names(src):
        if not isinstance(name, str) or (exclude and name in exclude):
            continue
        desc = find_descriptor(dest, name)
        if desc is None or not desc.assignable:
            continue
        set_slot(dest, name, get_slot(src, name))
    return dest


def project(
    obj: Any,
    excludes: Collection[str] | None = None,
    includes: Collection[str] | None = None,
    writable_only: bool = True,
) -> dict[str, Any]:
    """Build a plain dict from an object's slots, ready for ``json.dumps``.

    Slots named in ``includes`` are copied first when the object holds them
    itself, regardless of writability. Then every slot of the chain is copied
    unless excluded, callable, or (with ``writable_only``) not assignable.
    Values implementing Projectable are replaced by their ``__project__()``;
    nested containers are copied as-is, without filtering.

    Args:
        obj: Mapping or instance to project.
        excludes: Slot names left out of the chain walk.
        includes: Own slot names always copied when present.
        writable_only: Skip getter-only and read-only slots.

    Returns:
        A new dict.
    """
    result: dict[str, Any] = {}

    if includes:
        own = set(slot_names(obj))
        for name in includes:
            if name in own:
                result[name] = get_slot(obj, name)

    seen: set[str] = set()
    for level in chain(obj):
        for name, desc in level.descriptors.items():
            if name in seen:
                continue
            seen.add(name)
            if excludes and name in excludes:
                continue
            if writable_only and not desc.assignable:
                continue
            value = get_slot(obj, name)
            if value is MISSING or callable(value):
                continue
            result[name] = value.__project__() if isinstance(value, Projectable) else value
    return result
