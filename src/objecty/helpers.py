"""Small sequence helpers shipped alongside the object utilities."""

from __future__ import annotations

import random
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any

from objecty.core.types import get_slot


def random_elm[T](items: Sequence[T]) -> T | None:
    """Random element of ``items``, or None when it is empty."""
    if not items:
        return None
    return random.choice(items)


def random_where[T](items: Sequence[T], predicate: Callable[[T], bool]) -> T | None:
    """Random element satisfying ``predicate``, or None when none does."""
    return random_elm([item for item in items if predicate(item)])


def partition[T](items: Iterable[T], key: str | Callable[[T], Hashable]) -> dict[Hashable, list[T]]:
    """Group items by a slot name or a key function, keeping input order.

    Args:
        items: Mappings or objects to group.
        key: Slot name read from each item, or a function computing the group.

    Returns:
        Group value → items in that group.
    """
    groups: dict[Hashable, list[T]] = {}
    for item in items:
        group = key(item) if callable(key) else get_slot(item, key, None)
        groups.setdefault(group, []).append(item)
    return groups


def includes_any(items: Iterable[Any], candidates: Iterable[Any]) -> bool:
    """True if any of ``candidates`` is in ``items``."""
    pool = list(items)
    return any(candidate in pool for candidate in candidates)
