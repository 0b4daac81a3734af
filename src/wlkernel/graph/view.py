from __future__ import annotations

from typing import Hashable, Iterator, Protocol, Tuple, runtime_checkable

import networkx as nx


Link = Tuple[Hashable, Hashable]


@runtime_checkable
class GraphView(Protocol):
    """
    Read-only graph capability consumed by the labeling engine.

    Node identities must be hashable with stable equality.
    neighbors(node) reports both link directions.
    """

    def node_count(self) -> int: ...

    def link_count(self) -> int: ...

    def nodes(self) -> Iterator[Hashable]: ...

    def links(self) -> Iterator[Link]: ...

    def neighbors(self, node: Hashable) -> Iterator[Hashable]: ...


class NetworkXGraphView:
    """
    GraphView over a NetworkX graph of any flavour.

    Directed graphs yield successors, then predecessors. A directed
    self-loop yields its node once. Parallel links yield once per link.
    """

    def __init__(self, G: nx.Graph):
        self._G = G

    @property
    def graph(self) -> nx.Graph:
        return self._G

    def node_count(self) -> int:
        return self._G.number_of_nodes()

    def link_count(self) -> int:
        return self._G.number_of_edges()

    def nodes(self) -> Iterator[Hashable]:
        return iter(self._G.nodes())

    def links(self) -> Iterator[Link]:
        for u, v, *_ in self._G.edges():
            yield u, v

    def neighbors(self, node: Hashable) -> Iterator[Hashable]:
        G = self._G
        if node not in G:
            raise ValueError(f"node {node!r} is not in the graph")
        if G.is_directed():
            for _, v in G.out_edges(node):
                yield v
            for u, _ in G.in_edges(node):
                if u != node:
                    yield u
        else:
            for _, v in G.edges(node):
                yield v

    def __repr__(self) -> str:
        return f"NetworkXGraphView(nodes={self.node_count()}, links={self.link_count()})"


def as_graph_view(graph) -> GraphView:
    """Wrap a NetworkX graph; pass GraphView implementations through."""
    if isinstance(graph, nx.Graph):
        return NetworkXGraphView(graph)
    if isinstance(graph, GraphView):
        return graph
    raise TypeError(
        f"expected a networkx graph or a GraphView, got {type(graph).__name__}"
    )
