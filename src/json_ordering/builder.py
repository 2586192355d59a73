"""Immutable rule builder that compiles to a total-order comparator."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

from .json_types import ComparatorFactory, CompareFn, Predicate
from .predicates import is_array, is_plain_object
from .primitives import compare_primitives
from .structural import compare_structural

logger = logging.getLogger(__name__)

type Plugin = Callable[[Builder], Builder]


@dataclass(frozen=True)
class Rule:
    """One category: a membership predicate and how to order its members.

    A rule with neither ``comparator`` nor ``derive`` is a bare type marker
    and defers to structural comparison. ``derive`` receives the compiled
    top-level comparator and returns the comparator for this category.
    """

    predicate: Predicate
    comparator: Optional[CompareFn] = None
    derive: Optional[ComparatorFactory] = None
    name: Optional[str] = None

    @property
    def is_type_marker(self) -> bool:
        return self.comparator is None and self.derive is None

    def resolve(self, compare: CompareFn) -> Optional[CompareFn]:
        """Return the comparator to use once the top-level one is known."""
        if self.derive is not None:
            return self.derive(compare)
        return self.comparator


@dataclass(frozen=True, slots=True, repr=False)
class Builder:
    """Accumulates precedence-ordered rules.

    Every rule added sorts after all categories defined so far. When several
    predicates match a value, the rule added last wins its classification.
    Builders never change: each ``with_*`` call returns a new instance.
    """

    rules: tuple[Rule, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", tuple(self.rules))

    @classmethod
    def create(cls) -> Builder:
        """Return a builder holding only the mapping and sequence markers."""
        return (
            cls()
            .with_type_marker(is_plain_object, name="object")
            .with_type_marker(is_array, name="array")
        )

    def __len__(self) -> int:
        return len(self.rules)

    def __repr__(self) -> str:
        names = ", ".join(rule.name or "<rule>" for rule in self.rules)
        return f"Builder([{names}])"

    def with_rule(
        self,
        predicate: Predicate,
        comparator: Optional[CompareFn] = None,
        *,
        name: Optional[str] = None,
    ) -> Builder:
        """Append a category ordered by ``comparator``.

        Args:
            predicate (Predicate): Membership test for the new category.
            comparator (Optional[CompareFn]): Orders two members; ``None``
                declares a bare type marker.
            name (Optional[str]): Label used in ``repr`` output.

        Returns:
            Builder: A new builder with the rule appended.
        """
        return self._append(Rule(predicate=predicate, comparator=comparator, name=name))

    def with_type_marker(self, predicate: Predicate, *, name: Optional[str] = None) -> Builder:
        """Append a category whose members compare structurally."""
        return self.with_rule(predicate, None, name=name)

    def with_recursive_rule(
        self,
        predicate: Predicate,
        derive: ComparatorFactory,
        *,
        name: Optional[str] = None,
    ) -> Builder:
        """Append a category whose comparator needs the top-level comparator.

        ``derive`` is called once per ``build()`` with the comparator being
        built, so nested values are ordered by the final rule set.
        """
        return self._append(Rule(predicate=predicate, derive=derive, name=name))

    def use(self, *plugins: Plugin) -> Builder:
        """Apply plugins left to right and return the resulting builder."""
        builder = self
        for plugin in plugins:
            builder = plugin(builder)
        return builder

    def build(self) -> CompareFn:
        """Compile the rules into a pure comparison function."""
        rules = self.rules
        predicates = tuple(rule.predicate for rule in rules)
        comparators: tuple[Optional[CompareFn], ...] = ()

        def compare(x: Any, y: Any) -> int:
            x_index = _classify(predicates, x)
            y_index = _classify(predicates, y)
            if x_index != y_index:
                return compare_primitives(x_index, y_index)
            if x_index >= 0:
                comparator = comparators[x_index]
                if comparator is not None:
                    return comparator(x, y)
            return compare_structural(x, y, compare)

        comparators = tuple(rule.resolve(compare) for rule in rules)
        logger.debug(
            "Compiled comparator with %d rules (%d type markers)",
            len(rules),
            sum(1 for rule in rules if rule.is_type_marker),
        )
        return compare

    def _append(self, rule: Rule) -> Builder:
        return Builder((*self.rules, rule))


def _classify(predicates: tuple[Predicate, ...], value: Any) -> int:
    for index in range(len(predicates) - 1, -1, -1):
        if predicates[index](value):
            return index
    return -1
