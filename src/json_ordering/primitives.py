"""Leaf comparators for values with a native or derivable ordering."""

from __future__ import annotations

import re
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Any


def compare_primitives(x: Any, y: Any) -> int:
    """Compare two values with the native ordering operators.

    Args:
        x (Any): Left operand.
        y (Any): Right operand.

    Returns:
        int: ``-1`` when ``x < y``, ``1`` when ``x > y`` and ``0`` otherwise.

    Because ``nan < nan`` and ``nan > nan`` are both false, NaN compares
    equal to every number, itself included.
    """
    if x < y:
        return -1
    if x > y:
        return 1
    return 0


def compare_numbers(x: Any, y: Any) -> int:
    """Compare two numbers; NaN on either side compares as zero.

    Decimal NaN raises on ordering operators instead of returning false, so
    it is checked before the native comparison.
    """
    if _is_nan(x) or _is_nan(y):
        return 0
    return compare_primitives(x, y)


def compare_singletons(x: Any, y: Any) -> int:
    """Compare two members of a single-instance category."""
    del x, y
    return 0


def compare_dates(x: date, y: date) -> int:
    """Compare dates and datetimes as instants.

    Naive datetimes are read as UTC and plain dates as midnight UTC, so that
    every pair is comparable.
    """
    return compare_primitives(_as_instant(x), _as_instant(y))


def compare_patterns(x: re.Pattern[Any], y: re.Pattern[Any]) -> int:
    """Compare compiled patterns by source kind, source text, then flags."""
    x_is_bytes = isinstance(x.pattern, bytes)
    y_is_bytes = isinstance(y.pattern, bytes)
    if x_is_bytes != y_is_bytes:
        return compare_primitives(x_is_bytes, y_is_bytes)
    result = compare_primitives(x.pattern, y.pattern)
    if result != 0:
        return result
    return compare_primitives(x.flags, y.flags)


def _is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return bool(value != value)


def _as_instant(value: date) -> datetime:
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value
