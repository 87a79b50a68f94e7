from __future__ import annotations

from pacedraw.ir import Graph, sorted_edges, sorted_vertices


def _style_list(styles: list[str]) -> str:
    return ", ".join(styles)


def generate_string(graph: Graph) -> list[str]:
    """
    Turn the graph into the fragments of a TikZ ``\\graph`` statement.

    Vertices come first (shortest name first, then lexicographic), then
    edges (lexicographic by source, then target). The fragments still need
    to be concatenated; see ``render``.
    """
    sb = [f"\\graph[{_style_list(graph.styles)}]{{"]

    for vertex in sorted_vertices(graph):
        if vertex.label is not None:
            sb.append(f"  {vertex.name} / {vertex.label};")
        else:
            sb.append(f"  {vertex.name}[{_style_list(vertex.styles)}];")

    for u, v, styles in sorted_edges(graph):
        sb.append(f"  {u} --[{_style_list(styles)}] {v};")

    sb.append("};")
    return sb


def render(graph: Graph, *, pretty: bool = False) -> str:
    """Return the TikZ code for the graph, one line per fragment if ``pretty``."""
    return ("\n" if pretty else "").join(generate_string(graph))
