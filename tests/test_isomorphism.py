"""Tests for WL-1 isomorphism rejection in both dictionary regimes."""
import networkx as nx
import pytest

from graph_builders import shuffled_copy
from wlkernel import config
from wlkernel.graph import AdjacencyGraph
from wlkernel.wl import (
    maybe_isomorphic,
    maybe_isomorphic_shared,
    wl_isomorphism_test,
    wl_isomorphism_test_shared,
)

REGIMES = [wl_isomorphism_test, wl_isomorphism_test_shared]


@pytest.mark.parametrize("test", REGIMES)
def test_cycle_vs_path_rejected_by_link_count(test, triangle, open_path):
    result = test(triangle, open_path)
    assert result.maybe_isomorphic is False
    assert result.reason == "link_count"
    assert result.rounds == 0


@pytest.mark.parametrize("test", REGIMES)
def test_node_count_rejection(test):
    result = test(nx.path_graph(3), nx.path_graph(4))
    assert not result.maybe_isomorphic
    assert result.reason == "node_count"


@pytest.mark.parametrize("test", REGIMES)
def test_renamed_cycles(test, triangle, renamed_triangle):
    result = test(triangle, renamed_triangle)
    assert result.maybe_isomorphic
    assert result.reason == "converged"
    assert result.rounds == 2


def test_bool_wrappers(triangle, renamed_triangle, open_path):
    assert maybe_isomorphic(triangle, renamed_triangle) is True
    assert maybe_isomorphic_shared(triangle, renamed_triangle) is True
    assert maybe_isomorphic(triangle, open_path) is False
    assert maybe_isomorphic_shared(triangle, open_path) is False


@pytest.mark.parametrize("check", [maybe_isomorphic, maybe_isomorphic_shared])
def test_isomorphic_five_node_pair(check):
    a = nx.DiGraph([
        ("top", "right"), ("top", "middle"), ("top", "bottom"),
        ("right", "right_bottom"), ("right_bottom", "bottom"),
        ("middle", "bottom"),
    ])
    b = nx.DiGraph([
        ("fee", "far"), ("fee", "bar"), ("fee", "baz"),
        ("baz", "bar"), ("baz", "bop"),
        ("bop", "far"),
    ])
    assert check(a, b)


@pytest.mark.parametrize("check", [maybe_isomorphic, maybe_isomorphic_shared])
def test_grids(check):
    assert check(nx.grid_2d_graph(10, 10), nx.grid_2d_graph(10, 10))


@pytest.mark.parametrize("check", [maybe_isomorphic, maybe_isomorphic_shared])
@pytest.mark.parametrize(
    "G",
    [
        nx.petersen_graph(),
        nx.balanced_tree(2, 4),
        nx.gnp_random_graph(25, 0.2, seed=11),
        nx.DiGraph([("a", "b"), ("b", "c"), ("c", "a"), ("c", "d")]),
        nx.Graph(),
    ],
)
def test_graph_is_maybe_isomorphic_to_itself(check, G):
    assert check(G, G)


@pytest.mark.parametrize("check", [maybe_isomorphic, maybe_isomorphic_shared])
def test_shuffled_copies_are_not_rejected(check):
    G = nx.gnp_random_graph(30, 0.15, seed=3)
    for seed in range(5):
        assert check(G, shuffled_copy(G, seed=seed))


@pytest.mark.parametrize("test", REGIMES)
def test_degree_sequences_differ(test):
    # P4 vs K_{1,3}: same counts, different degrees
    result = test(nx.path_graph(4), nx.star_graph(3))
    assert not result.maybe_isomorphic
    assert result.reason == "word_count"
    assert result.rounds == 1
    assert result.witness_label == 1
    assert result.word_count_a != result.word_count_b


@pytest.mark.parametrize("test", REGIMES)
def test_rejected_after_second_round(test, kernel_pair):
    a, b = kernel_pair
    result = test(a, b)
    assert not result.maybe_isomorphic
    assert result.reason == "word_count"
    assert result.rounds == 2


@pytest.mark.parametrize("check", [maybe_isomorphic, maybe_isomorphic_shared])
def test_regular_false_positive(check):
    # C6 and two disjoint triangles are both 2-regular; WL-1 cannot tell them apart
    two_triangles = nx.disjoint_union(nx.cycle_graph(3), nx.cycle_graph(3))
    assert check(nx.cycle_graph(6), two_triangles)
    assert not nx.is_isomorphic(nx.cycle_graph(6), two_triangles)


def test_empty_graphs():
    result = wl_isomorphism_test(nx.Graph(), nx.Graph())
    assert result.maybe_isomorphic
    assert result.rounds == 0
    assert result.reason == "bound"


def test_max_rounds_cap(monkeypatch):
    monkeypatch.setattr(config, "MAX_ROUNDS", 1)
    result = wl_isomorphism_test(nx.grid_2d_graph(4, 4), nx.grid_2d_graph(4, 4))
    assert result.maybe_isomorphic
    assert result.rounds == 1
    assert result.reason == "bound"


def test_accepts_adjacency_graphs():
    a = AdjacencyGraph.from_edges([(0, 1), (1, 2), (2, 0)])
    b = AdjacencyGraph.from_edges([("x", "y"), ("y", "z"), ("z", "x")])
    assert maybe_isomorphic(a, b)
    assert maybe_isomorphic_shared(a, b)
