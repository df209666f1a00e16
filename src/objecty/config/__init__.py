"""Configuration module using Pydantic Settings.

Usage:
    from objecty.config import ObjectySettings

    settings = ObjectySettings(max_depth=32)
"""

from objecty.config.settings import ObjectySettings, get_settings, resolve_max_depth

__all__ = [
    "ObjectySettings",
    "get_settings",
    "resolve_max_depth",
]
