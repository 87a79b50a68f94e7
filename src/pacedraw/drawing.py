from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pacedraw.config import DrawingConfig
from pacedraw.errors import PaceDrawError
from pacedraw.ir import Graph, GraphValidator
from pacedraw.parsers import FileFormat, resolve_file_format
from pacedraw.plugins.registry import Registry, create_parser
from pacedraw.render.tikz import render
from pacedraw.utils import get_logger

logger = get_logger(__name__)

WillGenerateHook = Callable[[Graph], None]
DidGenerateHook = Callable[[Graph, str], None]


class CycleInProgressError(PaceDrawError):
    def __init__(self) -> None:
        super().__init__("A drawing cycle is already running on this graph", code="EREENTRANT")


class PaceDrawing:
    """
    Owns one graph and runs parse -> annotate -> render -> clear cycles on it.

    Styles may be applied before ``load`` (they survive the parse) or between
    ``load`` and ``render``. ``pace`` runs a whole cycle and always leaves the
    graph empty afterwards.
    """

    def __init__(
        self,
        config: DrawingConfig | None = None,
        graph: Graph | None = None,
        registry: Registry | None = None,
    ) -> None:
        self.config = config or DrawingConfig()
        self.graph = graph if graph is not None else Graph()
        self.registry = registry
        self.will_generate_hooks: list[WillGenerateHook] = []
        self.did_generate_hooks: list[DidGenerateHook] = []
        self._active = False

    # Annotation API

    def apply_graph_style(self, style: str) -> None:
        self.graph.styles.append(style)

    def apply_vertex_style(self, vertices: Iterable[Any], style: str) -> None:
        for v in vertices:
            self.graph.ensure_vertex(v).styles.append(style)

    def apply_edge_style(self, edges: Iterable[tuple[Any, Any]], style: str) -> None:
        for u, v in edges:
            self.graph.ensure_edge(u, v).append(style)

    def clear_all(self) -> None:
        self.graph.clear()

    # Hooks

    def add_will_generate_hook(self, hook: WillGenerateHook) -> None:
        self.will_generate_hooks.append(hook)

    def add_did_generate_hook(self, hook: DidGenerateHook) -> None:
        self.did_generate_hooks.append(hook)

    # Cycle

    @contextmanager
    def cycle(self) -> Iterator[Graph]:
        if self._active:
            raise CycleInProgressError()
        self._active = True
        try:
            yield self.graph
        finally:
            self._active = False

    def load(self, filename: str | Path) -> FileFormat:
        """Parse ``filename`` into the owned graph; on failure the graph is cleared."""
        try:
            fmt = resolve_file_format(filename)
            logger.info("Parsing %s as %s", filename, fmt.value)
            parser = create_parser(fmt, self.config, self.registry)
            parser.parse(filename, self.graph)
            GraphValidator(self.graph).validate()
        except Exception:
            self.graph.clear()
            raise
        return fmt

    def render(self, *, pretty: bool = False) -> str:
        return render(self.graph, pretty=pretty)

    def pace(self, filename: str | Path, *, pretty: bool = False) -> str:
        """Run one full cycle on ``filename`` and return the TikZ code."""
        with self.cycle():
            try:
                self.load(filename)
                for hook in self.will_generate_hooks:
                    hook(self.graph)
                tikz = self.render(pretty=pretty)
                for did_hook in self.did_generate_hooks:
                    did_hook(self.graph, tikz)
            finally:
                self.graph.clear()
        return tikz
