"""Recursive comparison of mappings and sequences."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .json_types import CompareFn
from .predicates import is_array, is_plain_object
from .primitives import compare_primitives

_SHAPE_OTHER = 0
_SHAPE_MAPPING = 1
_SHAPE_SEQUENCE = 2


def compare_objects(
    x: Mapping[Any, Any],
    y: Mapping[Any, Any],
    compare_value: CompareFn,
) -> int:
    """Compare two mappings independently of key insertion order.

    Args:
        x (Mapping[Any, Any]): Left mapping.
        y (Mapping[Any, Any]): Right mapping.
        compare_value (CompareFn): Comparator applied to values under equal keys.

    Returns:
        int: Signed result. Keys are sorted on each side by native order
        (code point for strings, not UTF-16 code unit) and walked in
        lockstep; at each position the key decides before its value, and a
        mapping with fewer keys sorts first when the shared prefix is equal.
    """
    x_keys = sorted(x)
    y_keys = sorted(y)
    for x_key, y_key in zip(x_keys, y_keys):
        result = compare_primitives(x_key, y_key)
        if result != 0:
            return result
        result = compare_value(x[x_key], y[y_key])
        if result != 0:
            return result
    return compare_primitives(len(x_keys), len(y_keys))


def compare_arrays(
    x: Sequence[Any],
    y: Sequence[Any],
    compare_value: CompareFn,
) -> int:
    """Compare two sequences lexicographically; the shorter prefix sorts first."""
    for x_item, y_item in zip(x, y):
        result = compare_value(x_item, y_item)
        if result != 0:
            return result
    return compare_primitives(len(x), len(y))


def compare_structural(x: Any, y: Any, compare_value: CompareFn) -> int:
    """Compare two values by their actual container shape.

    Used for bare type markers and for values no rule classifies. Mixed
    shapes rank as other < mapping < sequence; two non-container values are
    equal.
    """
    x_shape = _shape(x)
    y_shape = _shape(y)
    if x_shape != y_shape:
        return compare_primitives(x_shape, y_shape)
    if x_shape == _SHAPE_MAPPING:
        return compare_objects(x, y, compare_value)
    if x_shape == _SHAPE_SEQUENCE:
        return compare_arrays(x, y, compare_value)
    return 0


def _shape(value: Any) -> int:
    if is_plain_object(value):
        return _SHAPE_MAPPING
    if is_array(value):
        return _SHAPE_SEQUENCE
    return _SHAPE_OTHER
