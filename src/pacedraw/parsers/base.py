from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from pacedraw.config import DrawingConfig
from pacedraw.errors import PaceDrawError
from pacedraw.ir import Graph, split_fields
from pacedraw.utils import get_logger

logger = get_logger(__name__)


class ParseError(PaceDrawError):
    """Raised when an input file cannot be turned into a graph."""


class MalformedLine(ParseError):
    """A line does not have the shape its directive requires."""

    def __init__(self, message: str, line_no: int, line: str) -> None:
        super().__init__(f"line {line_no}: {message}: {line!r}", code="ELINE")
        self.line_no = line_no
        self.line = line


class Parser(ABC):
    """
    Line-oriented parser for one PACE file format.

    Subclasses set ``marker`` (appended to the graph styles before the first
    line is read) and implement ``handle_line``. Lines are consumed one at a
    time, so files are never held in memory as a whole.
    """

    marker: str = ""
    graph: Graph

    def __init__(self, config: DrawingConfig | None = None) -> None:
        self.config = config or DrawingConfig()

    def parse(self, path: str | Path, graph: Graph | None = None) -> Graph:
        with open(path, encoding="utf-8", errors="surrogateescape") as handle:
            return self.parse_lines(handle, graph)

    def parse_lines(self, lines: Iterable[str], graph: Graph | None = None) -> Graph:
        self.graph = graph if graph is not None else Graph()
        self.graph.styles.append(self.marker)
        for line_no, raw in enumerate(lines, start=1):
            raw = raw.rstrip("\r\n")
            fields = split_fields(raw)
            if not fields:
                continue
            self.handle_line(fields, line_no, raw)
        logger.debug(
            "%s parsed %d vertices, %d edges",
            type(self).__name__,
            self.graph.num_vertices,
            self.graph.num_edges,
        )
        return self.graph

    @abstractmethod
    def handle_line(self, fields: list[str], line_no: int, raw: str) -> None:
        raise NotImplementedError

    # Helpers shared by the concrete parsers

    @staticmethod
    def require(fields: list[str], count: int, line_no: int, raw: str, what: str) -> None:
        if len(fields) < count:
            raise MalformedLine(
                f"{what} expects at least {count} fields, got {len(fields)}",
                line_no,
                raw,
            )

    @staticmethod
    def count_field(value: str, line_no: int, raw: str) -> int:
        try:
            n = int(value)
        except ValueError:
            raise MalformedLine(f"expected a vertex count, got {value!r}", line_no, raw) from None
        if n < 0:
            raise MalformedLine(f"vertex count must not be negative, got {n}", line_no, raw)
        return n

    def add_numbered_vertices(self, n: int) -> None:
        for i in range(1, n + 1):
            self.graph.ensure_vertex(str(i))
