"""Tests for dgontools.graphs."""
import networkx as nx
import pytest

from dgontools import limits
from dgontools.graphs.graph import Graph, validate, require_searchable
from dgontools.graphs.connectivity import is_connected_adj, connected_components_adj
from dgontools.graphs.subdivide import subdivide


def _cycle(n):
    return Graph.from_edges(n, [(i, (i + 1) % n) for i in range(n)], name=f"C{n}")


# --- model ---

def test_add_edge_records_both_directions():
    G = Graph.empty(3)
    G.add_edge(0, 2)
    assert G.neighbours == [[2], [], [0]]
    assert G.count_edges() == 1


def test_add_edge_rejects_loop():
    G = Graph.empty(2)
    with pytest.raises(ValueError):
        G.add_edge(1, 1)


def test_add_edge_rejects_out_of_range():
    G = Graph.empty(2)
    with pytest.raises(ValueError):
        G.add_edge(0, 2)


def test_parallel_edges_kept():
    G = Graph.from_edges(2, [(0, 1), (0, 1), (1, 0)])
    assert G.count_edges() == 3
    assert G.edges() == [(0, 1), (0, 1), (0, 1)]
    assert G.adjacency_counts() == [[0, 3], [3, 0]]
    assert G.is_valid_undirected_graph()
    assert not G.is_simple()


def test_adjacency_bitsets():
    G = _cycle(4)
    assert G.adjacency_bitsets() == [0b1010, 0b0101, 0b1010, 0b0101]


def test_asymmetric_neighbour_lists_invalid():
    G = Graph(n=2, neighbours=[[1], []])
    assert not G.is_valid_undirected_graph()
    assert not validate(G)


def test_loop_in_neighbour_list_invalid():
    G = Graph(n=2, neighbours=[[0, 0, 1], [0]])
    assert not G.is_valid_undirected_graph()


def test_has_leaf():
    assert Graph.from_edges(3, [(0, 1), (1, 2)]).has_leaf()
    assert not _cycle(5).has_leaf()


def test_networkx_round_trip():
    H = nx.petersen_graph()
    G = Graph.from_networkx(H, name="Petersen")
    assert G.n == 10
    assert G.count_edges() == 15
    assert nx.is_isomorphic(G.to_networkx(), H)


def test_to_networkx_multigraph():
    G = Graph.from_edges(2, [(0, 1), (0, 1)])
    H = G.to_networkx()
    assert isinstance(H, nx.MultiGraph)
    assert H.number_of_edges() == 2


# --- validation ---

def test_require_searchable_accepts_cycle():
    require_searchable(_cycle(4))


def test_require_searchable_rejects_disconnected():
    with pytest.raises(ValueError, match="not connected"):
        require_searchable(Graph.from_edges(4, [(0, 1), (2, 3)]))


def test_require_searchable_rejects_empty():
    with pytest.raises(ValueError):
        require_searchable(Graph.empty(0))


def test_validate_rejects_oversized(monkeypatch):
    monkeypatch.setattr(limits, "MAX_N", 3)
    assert not validate(_cycle(4))
    assert validate(_cycle(3))


# --- connectivity ---

def test_is_connected_adj_degenerate():
    assert is_connected_adj([]) is True
    assert is_connected_adj([[]]) is True
    assert is_connected_adj([[], []]) is False


def test_connected_components_adj():
    G = Graph.from_edges(5, [(0, 3), (1, 2)])
    assert connected_components_adj(G.neighbours) == [[0, 3], [1, 2], [4]]


# --- subdivision ---

def test_subdivide_cycle_gives_longer_cycle():
    H = subdivide(_cycle(4), 2)
    assert H.n == 8
    assert H.count_edges() == 8
    assert all(H.degree(v) == 2 for v in range(H.n))
    assert H.is_connected()


def test_subdivide_vertex_numbering():
    G = Graph.from_edges(3, [(0, 1), (1, 2)])
    H = subdivide(G, 3)
    # edge (0,1) gets 3, 4; edge (1,2) gets 5, 6
    assert sorted(H.edges()) == [(0, 3), (1, 4), (1, 5), (2, 6), (3, 4), (5, 6)]


def test_subdivide_parallel_edges_become_simple():
    G = Graph.from_edges(2, [(0, 1), (0, 1), (0, 1)])
    H = subdivide(G, 2)
    assert H.n == 5
    assert H.is_simple()
    assert H.degree(0) == 3 and H.degree(1) == 3


def test_subdivide_one_is_copy():
    G = _cycle(3)
    H = subdivide(G, 1)
    assert H.neighbours == G.neighbours
    assert H.neighbours is not G.neighbours


def test_subdivide_rejects_bad_k():
    with pytest.raises(ValueError):
        subdivide(_cycle(3), 0)
    with pytest.raises(ValueError):
        subdivide(_cycle(3), limits.MAX_PARTS_PER_EDGE + 1)


# --- limits ---

def test_env_int_default_and_override(monkeypatch):
    monkeypatch.delenv("DGON_TEST_LIMIT", raising=False)
    assert limits._env_int("DGON_TEST_LIMIT", 7) == 7
    monkeypatch.setenv("DGON_TEST_LIMIT", " 42 ")
    assert limits._env_int("DGON_TEST_LIMIT", 7) == 42
    monkeypatch.setenv("DGON_TEST_LIMIT", "")
    assert limits._env_int("DGON_TEST_LIMIT", 7) == 7


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_env_int_rejects_bad_values(monkeypatch, raw):
    monkeypatch.setenv("DGON_TEST_LIMIT", raw)
    with pytest.raises(ValueError, match="DGON_TEST_LIMIT"):
        limits._env_int("DGON_TEST_LIMIT", 7)
