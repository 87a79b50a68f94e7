from __future__ import annotations

from pacedraw.parsers.base import Parser


class EdgeListParser(Parser):
    """Parse a plain edge list (.graph, PACE 2016/17 track B)."""

    marker = "pace/edgelist"

    def handle_line(self, fields: list[str], line_no: int, raw: str) -> None:
        if fields[0].startswith("#"):
            return
        self.require(fields, 2, line_no, raw, "edge line")
        self.graph.ensure_edge(fields[0], fields[1])
