from __future__ import annotations

from pacedraw.parsers.base import Parser


def bag_label(elements: list[str]) -> str:
    """TeX label for a bag: ``\\{1{,}3{,}2\\}``, or ``\\{\\}`` when empty."""
    return "\\{" + "{,}".join(elements) + "\\}"


class TreeDecompositionParser(Parser):
    """Parse a tree decomposition in PACE .td format; bags become labeled vertices."""

    marker = "pace/treedecomposition"

    def handle_line(self, fields: list[str], line_no: int, raw: str) -> None:
        head = fields[0]
        if head in ("c", "s"):
            return
        if head == "b":
            self.require(fields, 2, line_no, raw, "bag line")
            self.graph.ensure_vertex(fields[1]).label = bag_label(fields[2:])
        else:
            self.require(fields, 2, line_no, raw, "tree edge line")
            self.graph.ensure_edge(fields[0], fields[1])
