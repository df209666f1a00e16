"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from objecty.config import get_settings


class Parent:
    """Base level: one read/write property and one data slot."""

    def __init__(self) -> None:
        self.parent_private = "parent_private"

    @property
    def parent_public(self) -> str | None:
        return getattr(self, "_parent_public", None)

    @parent_public.setter
    def parent_public(self, value: str) -> None:
        self._parent_public = value


class Child(Parent):
    """Derived level: adds a read-only property and a method."""

    def __init__(self) -> None:
        super().__init__()
        self.child_private = "child_private"

    @property
    def child_public(self) -> str:
        return "child_public"

    def greet(self) -> str:
        return "hello"


@pytest.fixture
def sample():
    """Child instance with an extra instance-level slot."""
    obj = Child()
    obj.self_private = "self_private"
    return obj


@pytest.fixture
def nested_config():
    """Nested dict with sequences and falsy leaves."""
    return {
        "name": "service",
        "debug": False,
        "retries": 0,
        "db": {"host": "localhost", "port": 5432, "options": {"ssl": True}},
        "tags": ["a", "b"],
        "matrix": [[1, 2], [3, 4]],
        "empty": None,
    }


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reset cached settings around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def parent_cls():
    return Parent


@pytest.fixture
def child_cls():
    return Child
