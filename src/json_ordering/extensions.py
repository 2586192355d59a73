"""Ready-made plugins for value kinds outside the default universe.

Each plugin appends one category after everything defined so far::

    compare = default_builder.use(binary(), tagged("$type", "money")).build()
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from .builder import Builder, Plugin
from .json_types import CompareFn, JSONPrimitive
from .predicates import is_exactly
from .primitives import compare_primitives
from .structural import compare_objects


def tagged(tag_key: str, tag: JSONPrimitive) -> Plugin:
    """Rank mappings carrying ``{tag_key: tag}`` after all prior categories.

    Args:
        tag_key (str): Discriminator key, such as ``"$type"``.
        tag (JSONPrimitive): Discriminator value identifying the category.

    Returns:
        Plugin: Adds a recursive rule; two tagged mappings compare key by key
        through the top-level comparator.
    """
    matches_tag = is_exactly(tag)

    def _is_tagged(value: Any) -> bool:
        return isinstance(value, Mapping) and tag_key in value and matches_tag(value[tag_key])

    def _derive(compare: CompareFn) -> CompareFn:
        def _compare_tagged(x: Mapping[str, Any], y: Mapping[str, Any]) -> int:
            return compare_objects(x, y, compare)

        return _compare_tagged

    def _plugin(builder: Builder) -> Builder:
        return builder.with_recursive_rule(_is_tagged, _derive, name=f"{tag_key}={tag!r}")

    return _plugin


def model_instances(model_type: type[BaseModel] = BaseModel) -> Plugin:
    """Rank pydantic model instances after all prior categories.

    Two instances compare by class qualified name, then by their
    ``model_dump()`` payloads through the top-level comparator.
    """

    def _is_model(value: Any) -> bool:
        return isinstance(value, model_type)

    def _derive(compare: CompareFn) -> CompareFn:
        def _compare_models(x: BaseModel, y: BaseModel) -> int:
            result = compare_primitives(type(x).__qualname__, type(y).__qualname__)
            if result != 0:
                return result
            return compare(x.model_dump(), y.model_dump())

        return _compare_models

    def _plugin(builder: Builder) -> Builder:
        return builder.with_recursive_rule(_is_model, _derive, name=model_type.__name__)

    return _plugin


def binary() -> Plugin:
    """Rank binary payloads after all prior categories, shorter first."""

    def _plugin(builder: Builder) -> Builder:
        return builder.with_rule(_is_binary, _compare_binary, name="binary")

    return _plugin


def _is_binary(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray, memoryview))


def _compare_binary(x: bytes | bytearray | memoryview, y: bytes | bytearray | memoryview) -> int:
    x_bytes = bytes(x)
    y_bytes = bytes(y)
    result = compare_primitives(len(x_bytes), len(y_bytes))
    if result != 0:
        return result
    return compare_primitives(x_bytes, y_bytes)
