"""Total ordering for JSON-like values."""

from __future__ import annotations

from .builder import Builder, Plugin, Rule
from .defaults import DEFAULT_PRECEDENCE, compare, default_builder
from .json_types import UNDEFINED, Undefined
from .primitives import (
    compare_dates,
    compare_numbers,
    compare_patterns,
    compare_primitives,
    compare_singletons,
)
from .sorting import sort_key, sorted_values, values_equal
from .structural import compare_arrays, compare_objects
from .verify import (
    OrderReport,
    OrderViolation,
    TotalOrderError,
    ensure_total_order,
    verify_total_order,
)

__all__ = [
    "Builder",
    "DEFAULT_PRECEDENCE",
    "OrderReport",
    "OrderViolation",
    "Plugin",
    "Rule",
    "TotalOrderError",
    "UNDEFINED",
    "Undefined",
    "compare",
    "compare_arrays",
    "compare_dates",
    "compare_numbers",
    "compare_objects",
    "compare_patterns",
    "compare_primitives",
    "compare_singletons",
    "default_builder",
    "ensure_total_order",
    "sort_key",
    "sorted_values",
    "values_equal",
    "verify_total_order",
]
