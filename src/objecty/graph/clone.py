"""Deep cloning of nested aggregates.

Usage:
    settings = {"db": {"hosts": ["a", "b"]}, "debug": False}
    copy = clone(settings)
    copy["db"]["hosts"].append("c")  # settings is untouched

    # Custom cloning for one subtree:
    @dataclass
    class Session:
        token: str

        def __clone__(self) -> "Session":
            return Session(token="")

    clone({"session": Session("abc")})  # {"session": Session(token="")}
"""

from __future__ import annotations

import copy
import logging
import warnings
from collections.abc import Mapping
from typing import Any

from objecty.config import resolve_max_depth
from objecty.core.models import Cloneable, Kind, RecursionLimitExceededError
from objecty.core.types import Key, get_slot, kind_of, set_slot, slot_names
from objecty.reflect import is_assignable

logger = logging.getLogger(__name__)


def _empty_like(value: Any) -> Any:
    """Empty container of the same type, built without running ``__init__``."""
    if isinstance(value, Mapping):
        empty = copy.copy(value)
        empty.clear()  # type: ignore[attr-defined]
        return empty
    cls = type(value)
    return cls.__new__(cls)


def copy_subtree(value: Any, depth: int, limit: int, key: Key, keep_type: bool = False) -> Any:
    """Clone one slot value found ``depth`` levels below the root.

    Args:
        value: Value to clone.
        depth: Nesting level of the container holding ``value``.
        limit: Depth limit for the whole operation.
        key: Slot holding ``value`` (for error messages).
        keep_type: Rebuild aggregates as their own type instead of dicts.

    Returns:
        An independent copy of ``value``, or ``value`` itself for scalars.

    Raises:
        RecursionLimitExceededError: If nesting exceeds ``limit``.
    """
    kind = kind_of(value)
    if kind is Kind.SCALAR:
        return value
    if depth >= limit:
        raise RecursionLimitExceededError("clone", limit, key)

    if kind is Kind.SEQUENCE:
        items = _clone_into(value, [], depth + 1, limit, keep_type)
        return tuple(items) if isinstance(value, tuple) else items

    if isinstance(value, Cloneable):
        logger.debug("delegating clone of slot %r to %s.__clone__", key, type(value).__name__)
        result = value.__clone__()
        if result is value:
            warnings.warn(
                f"{type(value).__name__}.__clone__() returned itself; "
                f"slot {key!r} is shared with the source.",
                stacklevel=2,
            )
        return result

    if keep_type:
        return _clone_typed(value, _empty_like(value), depth + 1, limit)
    return _clone_into(value, {}, depth + 1, limit, keep_type)


def _clone_into(source: Any, destination: Any, depth: int, limit: int, keep_type: bool) -> Any:
    for key in slot_names(source):
        value = get_slot(source, key)
        set_slot(destination, key, copy_subtree(value, depth, limit, key, keep_type))
    return destination


def _clone_typed(source: Any, destination: Any, depth: int, limit: int) -> Any:
    for key in slot_names(source):
        if not is_assignable(destination, key):
            logger.debug("clone skipped slot %r: not assignable on the destination", key)
            continue
        value = get_slot(source, key)
        set_slot(destination, key, copy_subtree(value, depth, limit, key, keep_type=True))
    return destination


def clone(source: Any, destination: Any = None, *, max_depth: int | None = None) -> Any:
    """Deep-copy every slot of ``source`` into ``destination``.

    Nested sequences are copied into new sequences and nested aggregates into
    new dicts, unless they implement Cloneable, in which case the result of
    their ``__clone__`` is stored as-is. Scalars are shared.

    Args:
        source: Mapping, sequence or instance to copy.
        destination: Container to copy into. Defaults to a new dict, or a new
            list when ``source`` is a sequence.
        max_depth: Nesting limit, defaults to the configured one.

    Returns:
        ``destination`` with the copied slots (a tuple for tuple sources
        cloned without a destination).

    Raises:
        RecursionLimitExceededError: If ``source`` nests deeper than the limit,
            typically because it contains itself.
    """
    limit = resolve_max_depth(max_depth)
    is_sequence = kind_of(source) is Kind.SEQUENCE
    if destination is None:
        destination = [] if is_sequence else {}
        if isinstance(source, tuple):
            return tuple(_clone_into(source, destination, 0, limit, keep_type=False))
    return _clone_into(source, destination, 0, limit, keep_type=False)


def clone_with_ancestry(
    source: Any, destination: Any = None, *, max_depth: int | None = None
) -> Any:
    """Deep-copy ``source`` into an instance of its own type.

    Unlike clone, nested aggregates keep their types and only slots the
    destination can assign (directly or through a setter) are written.

    Args:
        source: Mapping, sequence or instance to copy.
        destination: Same-kind container to copy into. Defaults to an empty
            instance of ``type(source)`` created without calling ``__init__``.
        max_depth: Nesting limit, defaults to the configured one.

    Returns:
        The populated destination.

    Raises:
        RecursionLimitExceededError: If ``source`` nests deeper than the limit.
    """
    limit = resolve_max_depth(max_depth)
    if kind_of(source) is Kind.SEQUENCE:
        target = [] if destination is None else destination
        items = _clone_into(source, target, 0, limit, keep_type=True)
        return tuple(items) if destination is None and isinstance(source, tuple) else items
    if destination is None:
        destination = _empty_like(source)
    return _clone_typed(source, destination, 0, limit)
