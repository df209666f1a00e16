"""Reflection: property chains, descriptors and writability queries."""

from objecty.reflect.core import (
    accepts_new_slots,
    chain,
    enumerate_props,
    find_descriptor,
    is_assignable,
    unwritable_set,
)
from objecty.reflect.models import ChainLevel, PropertyDescriptor

__all__ = [
    # Models
    "ChainLevel",
    "PropertyDescriptor",
    # Core
    "accepts_new_slots",
    "chain",
    "enumerate_props",
    "find_descriptor",
    "is_assignable",
    "unwritable_set",
]
