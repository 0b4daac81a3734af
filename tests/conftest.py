import networkx as nx
import pytest


# a -> {b; c; d}; b -> c; d -> {c; e; f}
FIXTURE_A_EDGES = [
    ("a", "b"), ("a", "c"), ("a", "d"),
    ("b", "c"),
    ("d", "c"), ("d", "e"), ("d", "f"),
]

# a -> {b; c}; b -> {c; d}; d -> {e; c}; c -> f
FIXTURE_B_EDGES = [
    ("a", "b"), ("a", "c"),
    ("b", "c"), ("b", "d"),
    ("d", "e"), ("d", "c"),
    ("c", "f"),
]


@pytest.fixture
def kernel_pair():
    """Two 6-node, 7-link directed graphs with equal degree sequences."""
    return nx.DiGraph(FIXTURE_A_EDGES), nx.DiGraph(FIXTURE_B_EDGES)


@pytest.fixture
def triangle():
    return nx.DiGraph([("A", "B"), ("B", "C"), ("C", "A")])


@pytest.fixture
def renamed_triangle():
    return nx.DiGraph([("Foo", "Bar"), ("Bar", "Baz"), ("Baz", "Foo")])


@pytest.fixture
def open_path():
    return nx.DiGraph([("A", "B"), ("B", "C")])


