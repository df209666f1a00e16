"""Tests for recursive diffing."""

from dataclasses import dataclass

import pytest

from objecty import RecursionLimitExceededError, changes


@dataclass
class Limits:
    cpu: int
    mem: int


def test_identical_returns_none(nested_config):
    assert changes(nested_config, nested_config) is None


def test_falsy_values_match_each_other():
    assert changes({"a": 0, "b": False, "c": {"d": 1}}, {"a": "", "b": 0, "c": {"d": 1}}) is None


def test_missing_matches_falsy():
    assert changes({"a": None, "b": 0}, {}) is None


def test_bool_differs_from_number():
    assert changes({"a": True, "b": 1}, {"a": 1, "b": True}) == {"a": True, "b": 1}


def test_int_matches_equal_float():
    assert changes({"a": 1.0}, {"a": 1}) is None


def test_changed_scalar_reported():
    assert changes({"a": 1, "b": 2}, {"a": 1, "b": 3}) == {"b": 2}


def test_new_slot_reported():
    assert changes({"a": 1, "new": "x"}, {"a": 1}) == {"new": "x"}


def test_removed_slots_ignored():
    assert changes({"a": 1}, {"a": 1, "gone": 2}) is None


def test_nested_diff_is_minimal():
    candidate = {"db": {"host": "h", "port": 6543, "opts": {"ssl": True}}}
    original = {"db": {"host": "h", "port": 5432, "opts": {"ssl": True}}}
    assert changes(candidate, original) == {"db": {"port": 6543}}


def test_equal_but_distinct_subtrees_match():
    assert changes({"db": {"port": 1}}, {"db": {"port": 1}}) is None


def test_subtree_replacing_scalar_reported_whole():
    subtree = {"x": {"y": 1}}
    result = changes({"a": subtree}, {"a": 5})
    assert result == {"a": subtree}
    assert result["a"] is subtree


def test_subtree_replacing_none_reported_whole():
    assert changes({"a": {"b": 1}}, {"a": None}) == {"a": {"b": 1}}


def test_scalar_replacing_subtree_reported():
    assert changes({"a": 5}, {"a": {"b": 1}}) == {"a": 5}


def test_truthy_replacing_falsy_reported():
    assert changes({"a": 1, "b": "x"}, {"a": 0, "b": ""}) == {"a": 1, "b": "x"}


def test_sequences_compared_index_by_index():
    assert changes({"tags": ["a", "x", "c"]}, {"tags": ["a", "b", "c"]}) == {"tags": {1: "x"}}


def test_longer_sequence_reports_new_indices():
    assert changes({"tags": ["a", "b"]}, {"tags": ["a"]}) == {"tags": {1: "b"}}


def test_top_level_sequences():
    assert changes([1, 2, 3], [1, 2, 4]) == {2: 3}


def test_objects_compared_by_slots():
    assert changes(Limits(cpu=2, mem=1), Limits(cpu=1, mem=1)) == {"cpu": 2}


def test_object_against_dict():
    result = changes({"limits": Limits(2, 1)}, {"limits": {"cpu": 2, "mem": 2}})
    assert result == {"limits": {"mem": 1}}


def test_cycle_raises():
    candidate: dict = {}
    candidate["self"] = candidate
    original: dict = {}
    original["self"] = original
    with pytest.raises(RecursionLimitExceededError) as info:
        changes(candidate, original, max_depth=15)
    assert info.value.operation == "changes"
