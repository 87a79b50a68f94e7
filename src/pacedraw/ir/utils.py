from __future__ import annotations

from pacedraw.ir.graph import Graph, Vertex


def split_fields(line: str) -> list[str]:
    """Split a line into whitespace-delimited fields, dropping empty ones."""
    return line.split()


def vertex_order_key(name: str) -> tuple[int, str]:
    """
    Shorter names first, then lexicographic. Keeps numeric ids in natural
    order ("2" before "10") without assuming they are numbers.
    """
    return len(name), name


def sorted_vertices(graph: Graph) -> list[Vertex]:
    return [graph.vertices[name] for name in sorted(graph.vertices, key=vertex_order_key)]


def sorted_edges(graph: Graph) -> list[tuple[str, str, list[str]]]:
    """
    Edges ordered by source, then target, both in plain lexicographic order.
    This deliberately differs from the vertex order.
    """
    edges: list[tuple[str, str, list[str]]] = []
    for u in sorted(graph.adjacency):
        targets = graph.adjacency[u]
        for v in sorted(targets):
            edges.append((u, v, targets[v]))
    return edges
