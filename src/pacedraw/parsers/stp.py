from __future__ import annotations

from pacedraw.parsers.base import Parser


class SteinerTreeParser(Parser):
    """
    Parse a Steiner tree instance in STP / PACE 2018 format.

    Only ``Nodes``, ``E`` and ``T`` lines contribute to the graph; section
    headers and counters are skipped. With ``show_edge_weights`` enabled the
    weight of every edge is attached to it as a quoted label.
    """

    marker = "pace/stp"

    def handle_line(self, fields: list[str], line_no: int, raw: str) -> None:
        head = fields[0]
        if head == "Nodes":
            self.require(fields, 2, line_no, raw, "Nodes line")
            self.add_numbered_vertices(self.count_field(fields[1], line_no, raw))
        elif head == "E":
            if self.config.show_edge_weights:
                self.require(fields, 4, line_no, raw, "weighted edge line")
            else:
                self.require(fields, 3, line_no, raw, "edge line")
            styles = self.graph.ensure_edge(fields[1], fields[2])
            if self.config.show_edge_weights:
                styles.append(f'"{fields[3]}"')
        elif head == "T":
            self.require(fields, 2, line_no, raw, "terminal line")
            self.graph.ensure_vertex(fields[1]).styles.append("terminal")
