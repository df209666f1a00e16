"""Recursive diff between a modified copy and its original.

Sequences are compared index by index as if they were keyed aggregates; a
sequence diff is a dict keyed by index, not a sequence-level edit script.
"""

from __future__ import annotations

from typing import Any

from objecty.config import resolve_max_depth
from objecty.core.models import RecursionLimitExceededError
from objecty.core.types import MISSING, Key, get_slot, is_nested, slot_names

_FALSY_TYPES = (str, bytes, int, float)


def _falsy(value: Any) -> bool:
    """None, missing, False, zero and empty strings all mean "no value"."""
    if value is None or value is MISSING:
        return True
    return isinstance(value, _FALSY_TYPES) and not value


def _same(a: Any, b: Any) -> bool:
    """Identity for nested values, equality for scalars.

    Booleans only equal booleans, so True and 1 differ.
    """
    if a is b:
        return True
    if is_nested(a) or is_nested(b):
        return False
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return bool(a == b)


def _changes(candidate: Any, original: Any, depth: int, limit: int) -> dict[Key, Any] | None:
    diff: dict[Key, Any] = {}
    for key in slot_names(candidate):
        value = get_slot(candidate, key)
        before = get_slot(original, key)

        if _same(value, before) or (_falsy(value) and _falsy(before)):
            continue

        if not is_nested(value):
            diff[key] = value
        elif not is_nested(before):
            # New or retyped subtree is reported whole
            diff[key] = value
        else:
            if depth >= limit:
                raise RecursionLimitExceededError("changes", limit, key)
            nested = _changes(value, before, depth + 1, limit)
            if nested is not None:
                diff[key] = nested
    return diff or None


def changes(
    candidate: Any, original: Any, *, max_depth: int | None = None
) -> dict[Key, Any] | None:
    """Slots of ``candidate`` that differ from ``original``.

    Per slot of ``candidate``:

    - equal values, or two falsy values (None, 0, "", False, missing), match.
      Booleans never equal numbers, so True against 1 is a change.
    - nested on both sides: compared recursively, kept only if they differ.
    - nested in ``candidate`` only: the whole subtree is reported.
    - otherwise the candidate value is reported.

    Reported values are shared with ``candidate``, not copied.

    Args:
        candidate: Modified mapping, sequence or instance.
        original: Baseline to compare against.
        max_depth: Nesting limit, defaults to the configured one.

    Returns:
        A dict holding only the changed slots, or None if nothing changed.

    Raises:
        RecursionLimitExceededError: If the walk nests deeper than the limit.
    """
    return _changes(candidate, original, 0, resolve_max_depth(max_depth))
