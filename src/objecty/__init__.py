"""objecty: clone, merge, diff and reflect over nested Python objects.

Usage:
    from objecty import changes, clone, merge, merge_safe

    defaults = {"db": {"host": "localhost", "port": 5432}, "tags": ["base"]}
    config = clone(defaults)
    merge(config, {"db": {"port": 6543}, "tags": ["extra"]})

    changes(config, defaults)
    # {"db": {"port": 6543}, "tags": {1: "extra"}}

    merge_safe(config, {"db": {"user": "app"}, "debug": False})
    # config["db"]["user"] == "app", existing values untouched
"""

__version__ = "0.1.0"

# Core primitives
from objecty.core import (
    MISSING,
    Cloneable,
    Kind,
    Projectable,
    RecursionLimitExceededError,
    kind_of,
)

# Configuration
from objecty.config import ObjectySettings, get_settings

# Object-graph algorithms
from objecty.graph import (
    assign,
    assign_own,
    changes,
    clone,
    clone_with_ancestry,
    merge,
    merge_arrays,
    merge_safe,
    project,
)

# Sequence helpers
from objecty.helpers import includes_any, partition, random_elm, random_where

# Reflection
from objecty.reflect import (
    PropertyDescriptor,
    enumerate_props,
    find_descriptor,
    is_assignable,
    unwritable_set,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Kind",
    "MISSING",
    "Cloneable",
    "Projectable",
    "RecursionLimitExceededError",
    "kind_of",
    # Config
    "ObjectySettings",
    "get_settings",
    # Reflection
    "PropertyDescriptor",
    "enumerate_props",
    "find_descriptor",
    "is_assignable",
    "unwritable_set",
    # Graph
    "clone",
    "clone_with_ancestry",
    "merge",
    "merge_safe",
    "merge_arrays",
    "changes",
    "assign",
    "assign_own",
    "project",
    # Helpers
    "random_elm",
    "random_where",
    "partition",
    "includes_any",
]
