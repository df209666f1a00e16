"""Recursive merge policies.

Two policies share one walk over the source's slots:

- ``merge`` overwrites: source scalars replace destination values, nested
  aggregates are merged, sequences are combined with ``merge_arrays``.
- ``merge_safe`` only fills gaps: existing destination values are never
  replaced, and an explicit None in the destination is left alone.

Incompatible slot shapes (say, a dict into a list) are skipped silently so
heterogeneous inputs never raise.

Usage:
    defaults = {"retries": 3, "tags": ["base"], "db": {"port": 5432}}
    merge(defaults, {"tags": ["extra"], "db": {"host": "localhost"}})
    # {"retries": 3, "tags": ["base", "extra"], "db": {"port": 5432, "host": "localhost"}}

    user = {"retries": 1, "db": None}
    merge_safe(user, defaults)
    # {"retries": 1, "db": None, "tags": ["base", "extra"]}
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from objecty.config import resolve_max_depth
from objecty.core.models import Kind, RecursionLimitExceededError
from objecty.core.types import MISSING, get_slot, has_slot, kind_of, set_slot, slot_names
from objecty.graph.clone import copy_subtree
from objecty.reflect import is_assignable

logger = logging.getLogger(__name__)


def _store(dest: Any, key: Any, value: Any) -> None:
    """Write one slot, skipping slots the destination cannot assign."""
    if is_assignable(dest, key):
        set_slot(dest, key, value)
    else:
        logger.debug("merge skipped slot %r: not assignable on %s", key, type(dest).__name__)


def merge_arrays(a1: Sequence[Any], a2: Sequence[Any]) -> list[Any]:
    """Concatenate ``a1`` with the items of ``a2`` not already in ``a1``.

    Duplicates already inside ``a1`` or inside ``a2`` are kept.

    Args:
        a1: Leading items, kept in order.
        a2: Candidate items, appended in order when absent from ``a1``.

    Returns:
        A new list.
    """
    result = list(a1)
    result.extend(item for item in a2 if item not in a1)
    return result


def _append_unique(dest: Any, key: Any, sequence: Any, item: Any) -> None:
    if item in sequence:
        return
    if isinstance(sequence, list):
        sequence.append(item)
    else:
        _store(dest, key, (*sequence, item))


def _merge(dest: Any, src: Any, depth: int, limit: int) -> None:
    for key in slot_names(src):
        value = get_slot(src, key)
        current = get_slot(dest, key)
        src_kind = kind_of(value)
        dest_kind = kind_of(current)

        if dest_kind is Kind.SEQUENCE and value is not None:
            if src_kind is Kind.SEQUENCE:
                _store(dest, key, merge_arrays(current, value))
            elif src_kind is Kind.SCALAR:
                _append_unique(dest, key, current, value)
            else:
                logger.debug("merge skipped slot %r: aggregate into sequence", key)
            continue

        if src_kind is Kind.SCALAR:
            _store(dest, key, value)
        elif current is MISSING or current is None:
            _store(dest, key, copy_subtree(value, depth, limit, key))
        elif src_kind is Kind.AGGREGATE and dest_kind is Kind.AGGREGATE:
            if depth >= limit:
                raise RecursionLimitExceededError("merge", limit, key)
            _merge(current, value, depth + 1, limit)
        else:
            logger.debug(
                "merge skipped slot %r: %s into %s",
                key,
                type(value).__name__,
                type(current).__name__,
            )


def merge(dest: Any, src: Any, *, max_depth: int | None = None) -> None:
    """Merge ``src`` into ``dest`` in place, letting ``src`` win.

    Per slot of ``src``:

    - destination sequence: combined with a source sequence via
      merge_arrays, or extended by a source scalar not yet present.
    - source scalar (callables included): overwrites the destination.
    - destination missing or None: receives a deep clone of the source value.
    - aggregate on both sides: merged recursively.
    - anything else: left as-is.

    Slots ``dest`` cannot assign (getter-only properties, frozen fields, new
    names on objects that cannot grow) are skipped and logged at DEBUG.

    Args:
        dest: Mapping or instance to update.
        src: Mapping or instance providing values.
        max_depth: Nesting limit, defaults to the configured one.

    Raises:
        RecursionLimitExceededError: If the walk nests deeper than the limit.
    """
    _merge(dest, src, 0, resolve_max_depth(max_depth))


def _merge_safe(dest: Any, src: Any, depth: int, limit: int) -> None:
    for key in slot_names(src):
        value = get_slot(src, key)
        if not has_slot(dest, key):
            if is_assignable(dest, key):
                set_slot(dest, key, copy_subtree(value, depth, limit, key))
            else:
                logger.debug("merge_safe skipped slot %r: cannot be added", key)
            continue

        current = get_slot(dest, key)
        if current is None:
            # Explicit None means "no value wanted"
            continue
        if kind_of(current) is Kind.AGGREGATE and kind_of(value) is Kind.AGGREGATE:
            if depth >= limit:
                raise RecursionLimitExceededError("merge_safe", limit, key)
            _merge_safe(current, value, depth + 1, limit)


def merge_safe(dest: Any, src: Any, *, max_depth: int | None = None) -> None:
    """Fill the gaps of ``dest`` from ``src`` without overwriting anything.

    Missing destination slots receive the source value (nested values are
    deep-cloned) when ``dest`` can assign them. Slots explicitly set to None
    are protected. Aggregates on both sides are merged recursively; sequences
    are never combined.

    Args:
        dest: Mapping or instance to update.
        src: Mapping or instance providing defaults.
        max_depth: Nesting limit, defaults to the configured one.

    Raises:
        RecursionLimitExceededError: If the walk nests deeper than the limit.
    """
    _merge_safe(dest, src, 0, resolve_max_depth(max_depth))
