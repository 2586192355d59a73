"""Shared helpers for fixture-driven ordering tests."""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path
from typing import Any, ParamSpec, TypeVar

import pytest
import yaml
from pydantic import BaseModel, ConfigDict

from json_ordering import UNDEFINED

_FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures" / "orderings"
_P = ParamSpec("_P")
_R = TypeVar("_R")


class OrderingFixture(BaseModel):
    """An ordering fixture: strictly ascending values plus equal pairs."""

    model_config = ConfigDict(extra="forbid")

    description: str
    ascending: list[Any]
    equal: list[tuple[Any, Any]] = []


class _FixtureLoader(yaml.SafeLoader):
    """Safe loader with ``!undefined`` and ``!regex`` tags."""


def _construct_undefined(loader: yaml.SafeLoader, node: yaml.Node) -> Any:
    del loader, node
    return UNDEFINED


def _construct_regex(loader: yaml.SafeLoader, node: yaml.Node) -> Any:
    if isinstance(node, yaml.ScalarNode):
        return re.compile(loader.construct_scalar(node))
    if not isinstance(node, yaml.MappingNode):
        raise yaml.constructor.ConstructorError(None, None, "invalid !regex node", node.start_mark)
    options = loader.construct_mapping(node, deep=True)
    flags = 0
    for flag_name in options.get("flags", []):
        flags |= getattr(re, str(flag_name))
    return re.compile(str(options["pattern"]), flags)


_FixtureLoader.add_constructor("!undefined", _construct_undefined)
_FixtureLoader.add_constructor("!regex", _construct_regex)


def fixture_dir() -> Path:
    """Return the ordering fixtures directory."""
    return _FIXTURE_DIR


def iter_fixture_paths() -> list[Path]:
    """Return all YAML fixture paths sorted by name."""
    paths = sorted(_FIXTURE_DIR.glob("*.yaml")) + sorted(_FIXTURE_DIR.glob("*.yml"))
    return [path for path in paths if path.is_file()]


def load_fixture(path: Path) -> OrderingFixture:
    """Load and validate one ordering fixture."""
    with path.open("r", encoding="utf-8") as handle:
        payload = yaml.load(handle, Loader=_FixtureLoader)
    return OrderingFixture.model_validate(payload)


def parametrize_fixtures() -> Callable[[Callable[_P, _R]], Callable[_P, _R]]:
    """Parametrize a test over all fixture paths."""

    def _decorator(func: Callable[_P, _R]) -> Callable[_P, _R]:
        decorator: Callable[[Callable[_P, _R]], Callable[_P, _R]]
        decorator = pytest.mark.parametrize(
            "fixture_path",
            iter_fixture_paths(),
            ids=lambda path: path.name,
        )
        return decorator(func)

    return _decorator
