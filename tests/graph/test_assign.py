"""Tests for assign, assign_own and project."""

import json
from dataclasses import dataclass
from types import MappingProxyType

from objecty import assign, assign_own, project


class Profile:
    def __init__(self) -> None:
        self.name = "anon"
        self.age = 0

    @property
    def display(self) -> str:
        return self.name.title()

    @property
    def nickname(self) -> str:
        return getattr(self, "_nickname", "")

    @nickname.setter
    def nickname(self, value: str) -> None:
        self._nickname = value

    def reset(self) -> None:
        self.name = "anon"


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


class Pinned:
    __slots__ = ("x",)


class Money:
    def __init__(self, cents: int) -> None:
        self.cents = cents

    def __project__(self) -> str:
        return f"{self.cents / 100:.2f}"


class Wallet:
    def __init__(self) -> None:
        self.owner = "ann"
        self.balance = Money(1250)
        self.history = [Money(1)]


class TestAssign:
    def test_copies_writable_slots(self):
        target = Profile()
        result = assign(target, {"name": "bob", "age": 3, "display": "X", "nickname": "b"})
        assert result is target
        assert target.name == "bob"
        assert target.age == 3
        assert target.display == "Bob"
        assert target.nickname == "b"

    def test_exclude(self):
        target = Profile()
        assign(target, {"name": "bob", "age": 3}, exclude=["age"])
        assert target.age == 0

    def test_creates_new_slots(self):
        target = Profile()
        assign(target, {"extra": 1})
        assert target.extra == 1

    def test_reads_source_properties(self, sample):
        target: dict = {}
        assign(target, sample)
        assert target["child_public"] == "child_public"
        assert target["parent_public"] is None
        assert "greet" not in target

    def test_dict_to_dict(self):
        assert assign({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}

    def test_skips_callables(self):
        assert assign({}, {"fn": len, "x": 1}) == {"x": 1}

    def test_frozen_destination_untouched(self):
        point = Coordinates(1.0, 2.0)
        assign(point, {"lat": 5.0})
        assert point.lat == 1.0

    def test_frozen_destination_gains_no_slots(self):
        point = Coordinates(1.0, 2.0)
        assert assign(point, {"extra": 1}) is point
        assert not hasattr(point, "extra")

    def test_slots_destination_only_fills_declared_slots(self):
        target = Pinned()
        assign(target, {"x": 1, "z": 1})
        assert target.x == 1
        assert not hasattr(target, "z")

    def test_read_only_mapping_untouched(self):
        proxy = MappingProxyType({"a": 1})
        assert assign(proxy, {"a": 5, "b": 2}) is proxy
        assert dict(proxy) == {"a": 1}


class TestAssignOwn:
    def test_only_declared_slots(self):
        target = Profile()
        assign_own(target, {"name": "bob", "extra": 1})
        assert target.name == "bob"
        assert not hasattr(target, "extra")

    def test_setter_backed_slot(self):
        target = Profile()
        assign_own(target, {"nickname": "bobby", "display": "nope"})
        assert target.nickname == "bobby"
        assert target.display == "Anon"

    def test_source_properties_not_walked(self, sample):
        target = {"child_public": "old", "child_private": "old"}
        assign_own(target, sample)
        assert target == {"child_public": "old", "child_private": "child_private"}

    def test_exclude(self):
        target = {"a": 1, "b": 1}
        assert assign_own(target, {"a": 2, "b": 2}, exclude={"b"}) == {"a": 2, "b": 1}


class TestProject:
    def test_writable_slots_only(self):
        profile = Profile()
        profile.nickname = "nick"
        result = project(profile)
        assert result == {"name": "anon", "age": 0, "_nickname": "nick", "nickname": "nick"}

    def test_all_readable_slots(self):
        result = project(Profile(), writable_only=False)
        assert result["display"] == "Anon"
        assert "reset" not in result

    def test_excludes(self):
        assert project(Profile(), excludes=["age", "nickname"]) == {"name": "anon"}

    def test_includes_read_only_own_slots(self):
        point = Coordinates(1.0, 2.0)
        assert project(point) == {}
        assert project(point, includes=["lat", "missing"]) == {"lat": 1.0}

    def test_projection_hook(self):
        result = project(Wallet())
        assert result["balance"] == "12.50"
        assert result["owner"] == "ann"
        # Nested containers are copied as-is
        assert isinstance(result["history"][0], Money)

    def test_serializable(self, sample):
        payload = json.dumps(project(sample, writable_only=False))
        assert json.loads(payload)["child_public"] == "child_public"

    def test_dict_source(self):
        assert project({"a": 1, "fn": len}) == {"a": 1}
