"""Configuration settings using Pydantic Settings.

Usage:
    from objecty.config import ObjectySettings, get_settings

    # Load from environment variables (OBJECTY_*)
    settings = get_settings()

    # Or override with explicit values
    settings = ObjectySettings(max_depth=64)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ObjectySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the recursive object-graph operations.

    Attributes:
        max_depth: Deepest nesting clone, merge and changes will walk before
            raising RecursionLimitExceededError. Kept well below the
            interpreter's own recursion limit.

    Environment Variables:
        OBJECTY_MAX_DEPTH
    """

    model_config = SettingsConfigDict(
        env_prefix="OBJECTY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_depth: int = Field(default=200, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> ObjectySettings:
    """Process-wide settings, read once from the environment.

    Call ``get_settings.cache_clear()`` after changing the environment.
    """
    return ObjectySettings()


def resolve_max_depth(max_depth: int | None) -> int:
    """Explicit depth limit if given, else the configured one."""
    if max_depth is not None:
        if max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {max_depth}")
        return max_depth
    return get_settings().max_depth
