"""JSON-compatible typing aliases and the absent-value marker."""

from __future__ import annotations

import enum
from collections.abc import Callable
from typing import Any, Final, Union


class Undefined(enum.Enum):
    """Marker for a missing value; ranks below ``None`` in the default order."""

    TOKEN = "undefined"

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = Undefined.TOKEN

type JSONPrimitive = Union[str, int, float, bool, None]

type CompareFn = Callable[[Any, Any], int]
type Predicate = Callable[[Any], bool]
type ComparatorFactory = Callable[[CompareFn], CompareFn]
