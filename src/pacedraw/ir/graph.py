from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from pacedraw.errors import PaceDrawError


@dataclass
class Vertex:
    name: str
    styles: list[str] = field(default_factory=list)
    label: str | None = None


@dataclass
class Graph:
    """
    Undirected simple graph with TikZ styles attached to every entity.

    adjacency[u][v] holds the style list of edge {u, v}. Each edge is stored
    once, in the orientation it was first inserted with.
    """

    vertices: dict[str, Vertex] = field(default_factory=dict)
    adjacency: dict[str, dict[str, list[str]]] = field(default_factory=dict)
    styles: list[str] = field(default_factory=list)

    def ensure_vertex(self, name: Any) -> Vertex:
        name = str(name)
        vertex = self.vertices.get(name)
        if vertex is None:
            vertex = Vertex(name=name)
            self.vertices[name] = vertex
        return vertex

    def ensure_edge(self, u: Any, v: Any) -> list[str]:
        """Add edge {u, v} (and both endpoints) if missing; return its styles."""
        u, v = str(u), str(v)
        self.ensure_vertex(u)
        self.ensure_vertex(v)
        existing = self.edge_styles(u, v)
        if existing is not None:
            return existing
        styles: list[str] = []
        self.adjacency.setdefault(u, {})[v] = styles
        return styles

    def edge_styles(self, u: Any, v: Any) -> list[str] | None:
        u, v = str(u), str(v)
        styles = self.adjacency.get(u, {}).get(v)
        if styles is None:
            styles = self.adjacency.get(v, {}).get(u)
        return styles

    def has_edge(self, u: Any, v: Any) -> bool:
        return self.edge_styles(u, v) is not None

    def iter_edges(self) -> Iterator[tuple[str, str, list[str]]]:
        for u, targets in self.adjacency.items():
            for v, styles in targets.items():
                yield u, v, styles

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def num_edges(self) -> int:
        return sum(len(targets) for targets in self.adjacency.values())

    def clear(self) -> None:
        self.vertices.clear()
        self.adjacency.clear()
        self.styles.clear()


class ValidationError(PaceDrawError):
    """Graph invariant violation with optional code and offending edge."""

    def __init__(
        self,
        message: str,
        code: str = "EVALID",
        edge: tuple[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=code)
        self.edge = edge


class GraphValidator:
    """Checks the structural invariants parsers and annotations must keep."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    def validate(self) -> None:
        self._validate_vertex_names()
        self._validate_edge_endpoints()
        self._validate_single_orientation()

    def _validate_vertex_names(self) -> None:
        for name, vertex in self.graph.vertices.items():
            if vertex.name != name:
                raise ValidationError(
                    f"Vertex stored under '{name}' is named '{vertex.name}'",
                    code="EVERTEX_NAME",
                )

    def _validate_edge_endpoints(self) -> None:
        for u, v, _ in self.graph.iter_edges():
            for endpoint in (u, v):
                if endpoint not in self.graph.vertices:
                    raise ValidationError(
                        f"Edge {{{u}, {v}}} endpoint '{endpoint}' is not a vertex",
                        code="EEDGE_ENDPOINT",
                        edge=(u, v),
                    )

    def _validate_single_orientation(self) -> None:
        for u, v, _ in self.graph.iter_edges():
            # self-loops live in a single slot anyway
            if u != v and u in self.graph.adjacency.get(v, {}):
                raise ValidationError(
                    f"Edge {{{u}, {v}}} is stored in both orientations",
                    code="EEDGE_DUPLICATE",
                    edge=(u, v),
                )
