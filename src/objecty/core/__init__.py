"""Core primitives: value kinds, slot access, capability protocols and errors.

Architecture Note:
    core/ holds the stateless building blocks every algorithm shares.
    Reflection lives in reflect/, the recursive algorithms in graph/.
"""

from objecty.core.models import (
    Cloneable,
    Kind,
    Projectable,
    RecursionLimitExceededError,
)
from objecty.core.types import (
    MISSING,
    Key,
    get_slot,
    has_slot,
    is_nested,
    kind_of,
    set_slot,
    slot_names,
)

__all__ = [
    # Models
    "Kind",
    "Cloneable",
    "Projectable",
    "RecursionLimitExceededError",
    # Types
    "MISSING",
    "Key",
    "kind_of",
    "is_nested",
    "slot_names",
    "get_slot",
    "has_slot",
    "set_slot",
]
