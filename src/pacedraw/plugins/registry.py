from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pacedraw.config import DrawingConfig
from pacedraw.parsers import (
    DimacsParser,
    EdgeListParser,
    FileFormat,
    Parser,
    SteinerTreeParser,
    TreeDecompositionParser,
    UnsupportedFormat,
)


@dataclass
class RegisteredComponent:
    kind: str
    name: str
    factory: Callable[..., Any]


class Registry:
    def __init__(self) -> None:
        self._items: dict[str, RegisteredComponent] = {}

    def register(self, kind: str, name: str, factory: Callable[..., Any]) -> None:
        key = f"{kind}:{name}"
        self._items[key] = RegisteredComponent(kind=kind, name=name, factory=factory)

    def get(self, kind: str, name: str) -> RegisteredComponent | None:
        return self._items.get(f"{kind}:{name}")

    def names(self, kind: str) -> list[str]:
        return sorted(item.name for item in self._items.values() if item.kind == kind)

    def create(self, kind: str, name: str, *args: Any, **kwargs: Any) -> Any:
        item = self.get(kind, name)
        if not item:
            raise KeyError(f"Component not found: {kind}:{name}")
        return item.factory(*args, **kwargs)


def build_default_registry() -> Registry:
    registry = Registry()
    registry.register("parser", FileFormat.PACE_GRAPH.value, DimacsParser)
    registry.register("parser", FileFormat.STEINER_TREE.value, SteinerTreeParser)
    registry.register("parser", FileFormat.TREE_DECOMPOSITION.value, TreeDecompositionParser)
    registry.register("parser", FileFormat.EDGE_LIST.value, EdgeListParser)
    return registry


global_registry = build_default_registry()


def create_parser(
    fmt: FileFormat,
    config: DrawingConfig | None = None,
    registry: Registry | None = None,
) -> Parser:
    registry = registry or global_registry
    if registry.get("parser", fmt.value) is None:
        raise UnsupportedFormat(fmt.value, "no parser registered")
    return registry.create("parser", fmt.value, config)
