"""Default BSON-style category order and the ready-made comparator.

The order mimics the comparison order MongoDB applies across BSON types:
https://www.mongodb.com/docs/manual/reference/bson-type-comparison-order/
"""

from __future__ import annotations

from .builder import Builder
from .json_types import CompareFn
from .predicates import (
    is_absent,
    is_array,
    is_boolean,
    is_date,
    is_null,
    is_number,
    is_pattern,
    is_plain_object,
    is_string,
)
from .primitives import (
    compare_dates,
    compare_numbers,
    compare_patterns,
    compare_primitives,
    compare_singletons,
)

DEFAULT_PRECEDENCE: tuple[str, ...] = (
    "undefined",
    "null",
    "number",
    "string",
    "object",
    "array",
    "boolean",
    "date",
    "pattern",
)

default_builder: Builder = (
    Builder.create()
    .with_rule(is_absent, compare_singletons, name="undefined")
    .with_rule(is_null, compare_singletons, name="null")
    .with_rule(is_number, compare_numbers, name="number")
    .with_rule(is_string, compare_primitives, name="string")
    .with_type_marker(is_plain_object, name="object")
    .with_type_marker(is_array, name="array")
    .with_rule(is_boolean, compare_primitives, name="boolean")
    .with_rule(is_date, compare_dates, name="date")
    .with_rule(is_pattern, compare_patterns, name="pattern")
)

compare: CompareFn = default_builder.build()
