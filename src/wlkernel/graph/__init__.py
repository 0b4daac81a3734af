from .view import GraphView, NetworkXGraphView, as_graph_view
from .adjlist import AdjacencyGraph

__all__ = [
    "GraphView",
    "NetworkXGraphView",
    "as_graph_view",
    "AdjacencyGraph",
]
