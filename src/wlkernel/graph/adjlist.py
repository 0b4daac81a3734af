from __future__ import annotations

from typing import Dict, Hashable, Iterable, Iterator, List, Tuple

import networkx as nx


class AdjacencyGraph:
    """
    Integer-indexed arena of adjacency lists.

    Node identities are mapped to 0..n-1 on insertion; adj[i] holds the
    indices of every node linked to i in either direction. Links are kept
    in insertion order as (from, to) index pairs.
    """

    def __init__(self) -> None:
        self._ids: List[Hashable] = []
        self._index: Dict[Hashable, int] = {}
        self._adj: List[List[int]] = []
        self._links: List[Tuple[int, int]] = []

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[Hashable, Hashable]],
        nodes: Iterable[Hashable] = (),
    ) -> "AdjacencyGraph":
        """
        Build from an edge list. Optional *nodes* are added first, which
        allows isolated vertices and fixes iteration order.
        """
        g = cls()
        for v in nodes:
            g.add_node(v)
        for u, v in edges:
            g.add_node(u)
            g.add_node(v)
            g.add_link(u, v)
        return g

    @classmethod
    def from_networkx(cls, G: nx.Graph) -> "AdjacencyGraph":
        return cls.from_edges(((u, v) for u, v, *_ in G.edges()), nodes=G.nodes())

    def add_node(self, node: Hashable) -> int:
        """Return the arena index of *node*, adding it if new."""
        i = self._index.get(node)
        if i is None:
            i = len(self._ids)
            self._index[node] = i
            self._ids.append(node)
            self._adj.append([])
        return i

    def add_link(self, u: Hashable, v: Hashable) -> None:
        """Add a link between two existing nodes."""
        for x in (u, v):
            if x not in self._index:
                raise ValueError(f"link references unknown node {x!r}")
        iu, iv = self._index[u], self._index[v]
        self._links.append((iu, iv))
        self._adj[iu].append(iv)
        # a self-loop is one neighbor entry, not two
        if iu != iv:
            self._adj[iv].append(iu)

    def index_of(self, node: Hashable) -> int:
        return self._index[node]

    def degree(self, node: Hashable) -> int:
        return len(self._adj[self._index[node]])

    def node_count(self) -> int:
        return len(self._ids)

    def link_count(self) -> int:
        return len(self._links)

    def nodes(self) -> Iterator[Hashable]:
        return iter(self._ids)

    def links(self) -> Iterator[Tuple[Hashable, Hashable]]:
        ids = self._ids
        for iu, iv in self._links:
            yield ids[iu], ids[iv]

    def neighbors(self, node: Hashable) -> Iterator[Hashable]:
        i = self._index.get(node)
        if i is None:
            raise ValueError(f"node {node!r} is not in the graph")
        ids = self._ids
        for j in self._adj[i]:
            yield ids[j]

    def __repr__(self) -> str:
        return f"AdjacencyGraph(nodes={self.node_count()}, links={self.link_count()})"
