"""Tests for sorting helpers."""

from __future__ import annotations

from json_ordering import UNDEFINED, sort_key, sorted_values, values_equal
from json_ordering.primitives import compare_primitives


def test_sorted_values_orders_mixed_json() -> None:
    values = [True, [1], {"a": 1}, "x", 3, None, UNDEFINED, [], {}]
    assert sorted_values(values) == [UNDEFINED, None, 3, "x", {}, {"a": 1}, [], [1], True]


def test_sorted_values_is_stable_for_equal_values() -> None:
    first = {"a": 1, "b": 2}
    second = {"b": 2, "a": 1}
    ordered = sorted_values([second, 0, first])
    assert ordered[0] == 0
    assert ordered[1] is second
    assert ordered[2] is first


def test_sorted_values_accepts_custom_comparator() -> None:
    def _descending(x: int, y: int) -> int:
        return compare_primitives(y, x)

    assert sorted_values([1, 3, 2], compare=_descending) == [3, 2, 1]
    assert sorted_values([1, 3, 2], reverse=True) == [3, 2, 1]


def test_sort_key_plugs_into_builtin_sort() -> None:
    values = [[2], [1, 5], [1]]
    values.sort(key=sort_key())
    assert values == [[1], [1, 5], [2]]


def test_values_equal_uses_ordering_equality() -> None:
    assert values_equal({"a": [1, 2]}, {"a": (1, 2)})
    assert values_equal(float("nan"), float("nan"))
    assert not values_equal(1, True)
