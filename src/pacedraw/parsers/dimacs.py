from __future__ import annotations

from pacedraw.parsers.base import Parser

# comment lines and .dgf metadata
_SKIPPED = frozenset({"c", "n", "d", "v", "x", "b", "l"})


class DimacsParser(Parser):
    """Parse a graph in DIMACS format (or the simpler PACE .gr format)."""

    marker = "pace/dimacs"

    def handle_line(self, fields: list[str], line_no: int, raw: str) -> None:
        head = fields[0]
        if head == "p":
            self.require(fields, 3, line_no, raw, "problem line")
            self.add_numbered_vertices(self.count_field(fields[2], line_no, raw))
        elif head in _SKIPPED:
            return
        elif head == "e":
            self.require(fields, 3, line_no, raw, "edge line")
            self.graph.ensure_edge(fields[1], fields[2])
        else:
            # bare .gr edge line
            self.require(fields, 2, line_no, raw, "edge line")
            self.graph.ensure_edge(fields[0], fields[1])
