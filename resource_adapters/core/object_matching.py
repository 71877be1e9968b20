"""Object Matching: filter and merge rules shared by every adapter.

Invariants:
    - matches_filter is exact structural equality per filter field; a missing
      field never matches, extra object fields are ignored
    - json_equal follows the JSON data model: booleans never equal numbers,
      integers never equal floats (1 != 1.0), containers compare element-wise
    - merge_shallow replaces top-level fields only; nested dicts and lists
      are overwritten wholesale, never merged recursively
    - Functions never mutate their inputs except merge_shallow's target
"""

import copy

from resource_adapters.core.domain_types import ID_FIELD, JsonObject, JsonValue, ObjectId


_MISSING = object()


def json_equal(left: JsonValue, right: JsonValue) -> bool:
    """Structural equality of two JSON values."""
    # bool, int and float are distinct JSON scalars even when == says otherwise
    if isinstance(left, (int, float)) or isinstance(right, (int, float)):
        return type(left) is type(right) and left == right
    if isinstance(left, dict):
        if not isinstance(right, dict) or left.keys() != right.keys():
            return False
        return all(json_equal(left[k], right[k]) for k in left)
    if isinstance(left, list):
        if not isinstance(right, list) or len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))
    return left == right


def matches_filter(obj: JsonObject, params: JsonObject | None) -> bool:
    """True when obj has every params key with an equal value."""
    if not params:
        return True
    for key, expected in params.items():
        actual = obj.get(key, _MISSING)
        if actual is _MISSING or not json_equal(actual, expected):
            return False
    return True


def merge_shallow(target: JsonObject, changes: JsonObject) -> JsonObject:
    """Overwrite target's top-level fields with deep copies from changes.

    Returns target (mutated in place).
    """
    # TODO: RFC 7396 merge-patch would recurse into nested objects; stays
    # shallow until the resource layer defines null-as-delete semantics.
    for key, value in changes.items():
        target[key] = copy.deepcopy(value)
    return target


def format_object_id(counter: int) -> ObjectId:
    """Decimal string form of a positive counter value."""
    if counter < 1:
        raise ValueError(f"object ids start at 1, got {counter}")
    return ObjectId(str(counter))


def with_id(data: JsonObject, object_id: str) -> JsonObject:
    """Deep copy of data whose "id" field is object_id."""
    result = copy.deepcopy(data)
    result[ID_FIELD] = object_id
    return result
