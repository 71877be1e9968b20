"""Object Matching: pure tests for filter, equality, and merge rules.

Tests cover:
    - json_equal: JSON data-model equality (bool vs number, nesting)
    - matches_filter: missing keys, extra fields, empty filter
    - merge_shallow: top-level overwrite, nested replacement, copy isolation
    - format_object_id / with_id: id minting helpers
"""

import pytest

from resource_adapters.core.object_matching import (
    format_object_id, json_equal, matches_filter, merge_shallow, with_id,
)


# --- json_equal ---------------------------------------------------------------

def test_json_equal_scalars():
    assert json_equal("a", "a")
    assert json_equal(None, None)
    assert not json_equal("1", 1)
    assert not json_equal(None, 0)


def test_json_equal_integers_and_floats_are_distinct():
    assert json_equal(1, 1)
    assert json_equal(2.5, 2.5)
    assert not json_equal(1, 1.0)
    assert not json_equal(1.0, 1)
    assert not json_equal(1, 2)


def test_json_equal_number_type_applies_inside_containers():
    assert not json_equal({"n": [1]}, {"n": [1.0]})


def test_json_equal_booleans_are_not_numbers():
    assert json_equal(True, True)
    assert not json_equal(True, 1)
    assert not json_equal(0, False)


def test_json_equal_nested_containers():
    left = {"a": [1, {"b": True}], "c": None}
    assert json_equal(left, {"c": None, "a": [1, {"b": True}]})
    assert not json_equal(left, {"a": [1, {"b": 1}], "c": None})
    assert not json_equal(left, {"a": [1, {"b": True}]})


def test_json_equal_list_order_matters():
    assert not json_equal([1, 2], [2, 1])
    assert not json_equal([1], [1, 1])


# --- matches_filter -----------------------------------------------------------

def test_empty_filter_matches_everything():
    assert matches_filter({"id": "1"}, {})
    assert matches_filter({"id": "1"}, None)


def test_filter_ignores_extra_object_fields():
    assert matches_filter({"id": "1", "x": "a", "y": 2}, {"x": "a"})


def test_filter_rejects_differing_value():
    assert not matches_filter({"id": "1", "x": "a"}, {"x": "b"})


def test_filter_rejects_missing_key():
    assert not matches_filter({"id": "1", "x": "a"}, {"x": "a", "y": "z"})


def test_filter_on_null_requires_key_present():
    assert matches_filter({"x": None}, {"x": None})
    assert not matches_filter({}, {"x": None})


def test_filter_rejects_float_for_stored_integer():
    assert not matches_filter({"x": 1}, {"x": 1.0})
    assert matches_filter({"x": 1.0}, {"x": 1.0})


def test_filter_compares_nested_values_structurally():
    obj = {"tags": ["a", "b"], "meta": {"k": 1}}
    assert matches_filter(obj, {"tags": ["a", "b"], "meta": {"k": 1}})
    assert not matches_filter(obj, {"tags": ["a"]})


# --- merge_shallow ------------------------------------------------------------

def test_merge_overwrites_only_given_fields():
    stored = {"id": "1", "a": 1, "b": 2}
    merge_shallow(stored, {"b": 3})
    assert stored == {"id": "1", "a": 1, "b": 3}


def test_merge_adds_new_fields():
    stored = {"id": "1"}
    merge_shallow(stored, {"c": [1]})
    assert stored == {"id": "1", "c": [1]}


def test_merge_replaces_nested_objects_wholesale():
    stored = {"id": "1", "meta": {"x": 1, "y": 2}}
    merge_shallow(stored, {"meta": {"y": 5}})
    assert stored["meta"] == {"y": 5}


def test_merge_copies_values_from_changes():
    changes = {"meta": {"y": 5}}
    stored = merge_shallow({"id": "1"}, changes)
    changes["meta"]["y"] = 99
    assert stored["meta"] == {"y": 5}


# --- id helpers ---------------------------------------------------------------

def test_format_object_id_is_decimal_string():
    assert format_object_id(1) == "1"
    assert format_object_id(120) == "120"


@pytest.mark.parametrize("counter", [0, -3])
def test_format_object_id_rejects_non_positive(counter):
    with pytest.raises(ValueError):
        format_object_id(counter)


def test_with_id_overrides_and_copies():
    data = {"id": "client", "nested": {"a": 1}}
    result = with_id(data, "5")
    assert result == {"id": "5", "nested": {"a": 1}}
    result["nested"]["a"] = 2
    assert data == {"id": "client", "nested": {"a": 1}}
