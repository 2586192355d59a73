"""Helpers for sorting with a compiled comparator."""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable
from typing import Any, Optional

from .defaults import compare as default_compare
from .json_types import CompareFn


def sort_key(compare: Optional[CompareFn] = None) -> Callable[[Any], Any]:
    """Return a ``key=`` adapter for ``sorted`` and ``list.sort``."""
    return functools.cmp_to_key(compare or default_compare)


def sorted_values(
    values: Iterable[Any],
    *,
    compare: Optional[CompareFn] = None,
    reverse: bool = False,
) -> list[Any]:
    """Return a new stably sorted list of ``values``.

    Args:
        values (Iterable[Any]): Values to order.
        compare (Optional[CompareFn]): Comparator; defaults to the BSON-style one.
        reverse (bool): Sort in descending order.

    Returns:
        list[Any]: Sorted values.
    """
    return sorted(values, key=sort_key(compare), reverse=reverse)


def values_equal(x: Any, y: Any, *, compare: Optional[CompareFn] = None) -> bool:
    """Return whether two values are equal for ordering purposes."""
    return (compare or default_compare)(x, y) == 0
