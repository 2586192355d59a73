"""Check a comparator against the total-order laws over sample values."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

from .defaults import compare as default_compare
from .json_types import CompareFn

logger = logging.getLogger(__name__)

LAW_REFLEXIVITY = "reflexivity"
LAW_ANTISYMMETRY = "antisymmetry"
LAW_TRANSITIVITY = "transitivity"


class TotalOrderError(RuntimeError):
    """Raised when a comparator breaks a total-order law on given values."""


@dataclass(frozen=True)
class OrderViolation:
    """One broken law with the values and comparator results involved."""

    law: str
    values: tuple[Any, ...]
    results: tuple[int, ...]


@dataclass(frozen=True)
class OrderReport:
    """Result of a law check over a value sample."""

    checked_count: int
    violation_count: int
    violations: tuple[OrderViolation, ...]

    @property
    def ok(self) -> bool:
        return self.violation_count == 0


def verify_total_order(
    values: Iterable[Any],
    *,
    compare: Optional[CompareFn] = None,
    limit: Optional[int] = None,
) -> OrderReport:
    """Check reflexivity, antisymmetry and transitivity over ``values``.

    Transitivity covers mixed chains: ``x < y`` with ``y == z`` (or the
    reverse) must give ``x < z``, and two equal steps must give ``x == z``.

    Args:
        values (Iterable[Any]): Sample to check; every pair and triple is visited.
        compare (Optional[CompareFn]): Comparator under test; defaults to the
            BSON-style comparator.
        limit (Optional[int]): Maximum number of violations kept in the report.
            All violations are still counted.

    Returns:
        OrderReport: Counts and the recorded violations.
    """
    compare_fn = compare or default_compare
    sample = list(values)
    violations: list[OrderViolation] = []
    violation_count = 0

    def _record(violation: OrderViolation) -> None:
        nonlocal violation_count
        violation_count += 1
        if limit is None or len(violations) < limit:
            violations.append(violation)

    results: dict[tuple[int, int], int] = {}
    for x_index, x in enumerate(sample):
        for y_index, y in enumerate(sample):
            results[(x_index, y_index)] = compare_fn(x, y)

    for x_index, x in enumerate(sample):
        reflexive = results[(x_index, x_index)]
        if reflexive != 0:
            _record(OrderViolation(law=LAW_REFLEXIVITY, values=(x,), results=(reflexive,)))

    for x_index, y_index in itertools.combinations(range(len(sample)), 2):
        forward = results[(x_index, y_index)]
        backward = results[(y_index, x_index)]
        if _sign(forward) != -_sign(backward):
            _record(
                OrderViolation(
                    law=LAW_ANTISYMMETRY,
                    values=(sample[x_index], sample[y_index]),
                    results=(forward, backward),
                )
            )

    for x_index, y_index, z_index in itertools.permutations(range(len(sample)), 3):
        xy = results[(x_index, y_index)]
        yz = results[(y_index, z_index)]
        if xy > 0 or yz > 0:
            continue
        xz = results[(x_index, z_index)]
        if xy == 0 and yz == 0:
            if xz == 0:
                continue
        elif xz < 0:
            continue
        _record(
            OrderViolation(
                law=LAW_TRANSITIVITY,
                values=(sample[x_index], sample[y_index], sample[z_index]),
                results=(xy, yz, xz),
            )
        )

    if violation_count:
        logger.info(
            "Comparator broke total-order laws %d times over %d values",
            violation_count,
            len(sample),
        )
    return OrderReport(
        checked_count=len(sample),
        violation_count=violation_count,
        violations=tuple(violations),
    )


def ensure_total_order(values: Iterable[Any], *, compare: Optional[CompareFn] = None) -> None:
    """Raise ``TotalOrderError`` when ``compare`` breaks a law on ``values``."""
    report = verify_total_order(values, compare=compare)
    if not report.ok:
        raise TotalOrderError(format_report(report))


def format_report(report: OrderReport) -> str:
    """Render a report as plain text."""
    lines = [
        f"Checked values: {report.checked_count}",
        f"Violations: {report.violation_count}",
    ]
    for violation in report.violations:
        lines.extend(
            [
                f"- {violation.law}",
                f"  values: {', '.join(short_repr(value) for value in violation.values)}",
                f"  results: {', '.join(str(result) for result in violation.results)}",
            ]
        )
    return "\n".join(lines)


def short_repr(value: Any, *, limit: int = 160) -> str:
    """A short representation for violation diagnostics."""
    text = repr(value)
    return text if len(text) <= limit else f"{text[: limit - 3]}..."


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)
