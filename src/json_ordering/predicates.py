"""Category membership predicates for the default value universe."""

from __future__ import annotations

import numbers
import re
from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Any

from .json_types import UNDEFINED, Predicate


def is_exactly(literal: Any) -> Predicate:
    """Build a predicate matching one literal value.

    Args:
        literal (Any): The singleton or scalar to match.

    Returns:
        Predicate: Matches ``literal`` itself, or a value of the exact same
        type that compares equal to it (so ``True`` never matches ``1``).
    """

    def _matches(value: Any) -> bool:
        if value is literal:
            return True
        return type(value) is type(literal) and bool(value == literal)

    return _matches


is_absent = is_exactly(UNDEFINED)
is_null = is_exactly(None)


def is_number(value: Any) -> bool:
    """Return whether a value is a real or decimal number; booleans are excluded."""
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_plain_object(value: Any) -> bool:
    """Return whether a value is a mapping compared key by key."""
    return isinstance(value, Mapping)


def is_array(value: Any) -> bool:
    """Return whether a value is an ordered sequence of items.

    Only lists and tuples qualify; strings and bytes are leaf values.
    """
    return isinstance(value, (list, tuple))


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_date(value: Any) -> bool:
    return isinstance(value, date)


def is_pattern(value: Any) -> bool:
    return isinstance(value, re.Pattern)
