"""Graph model and ordering utilities."""

from .graph import Graph, GraphValidator, ValidationError, Vertex
from .utils import sorted_edges, sorted_vertices, split_fields, vertex_order_key

__all__ = [
    "Graph",
    "Vertex",
    "GraphValidator",
    "ValidationError",
    "split_fields",
    "vertex_order_key",
    "sorted_vertices",
    "sorted_edges",
]
