"""Tests for graph6 and plain-format I/O."""
import io

import networkx as nx
import pytest

from dgontools.graphs.graph import Graph
from dgontools.io.graph6 import (
    strip_graph6_header,
    g6_to_graph,
    graph_to_g6,
    read_graph6_lines,
)
from dgontools.io.plain import PlainFormatError, read_plain, write_plain, format_plain


def _nx_g6(H):
    return nx.to_graph6_bytes(H, header=False).decode("ascii").strip()


# --- graph6 ---

def test_strip_graph6_header():
    assert strip_graph6_header(">>graph6<<Bw\n") == "Bw"
    assert strip_graph6_header("  Bw  ") == "Bw"


def test_g6_to_graph_triangle():
    G = g6_to_graph(_nx_g6(nx.complete_graph(3)))
    assert G.n == 3
    assert G.neighbours == [[1, 2], [0, 2], [0, 1]]
    assert G.name == _nx_g6(nx.complete_graph(3))


def test_g6_to_graph_explicit_name():
    G = g6_to_graph(_nx_g6(nx.path_graph(4)), name="P4")
    assert G.name == "P4"
    assert sorted(G.edges()) == [(0, 1), (1, 2), (2, 3)]


def test_graph_to_g6_matches_networkx():
    H = nx.petersen_graph()
    G = Graph.from_networkx(H)
    assert graph_to_g6(G) == _nx_g6(H)


def test_graph6_round_trip_preserves_edges():
    H = nx.gnm_random_graph(9, 17, seed=3)
    G = g6_to_graph(_nx_g6(H))
    assert sorted(G.edges()) == sorted(tuple(sorted(e)) for e in H.edges())
    assert g6_to_graph(graph_to_g6(G)).edges() == G.edges()


def test_graph_to_g6_rejects_multigraph():
    G = Graph.from_edges(2, [(0, 1), (0, 1)])
    with pytest.raises(ValueError, match="parallel edges"):
        graph_to_g6(G)


def test_g6_to_graph_rejects_garbage():
    with pytest.raises(ValueError):
        # n=5 needs two bytes of edge data
        g6_to_graph("D")


def test_read_graph6_lines_skips_blanks():
    lines = ["\n", _nx_g6(nx.cycle_graph(4)) + "\n", "   \n", _nx_g6(nx.complete_graph(4)) + "\n"]
    graphs = list(read_graph6_lines(lines))
    assert [G.n for G in graphs] == [4, 4]
    assert [G.count_edges() for G in graphs] == [4, 6]


# --- plain ---

PLAIN = """\
Triangle
3 3
0 1
1 2
2 0

Banana
2 3
0 1
0 1
1 0
"""


def test_read_plain_multiple_blocks():
    graphs = list(read_plain(io.StringIO(PLAIN)))
    assert [G.name for G in graphs] == ["Triangle", "Banana"]
    assert graphs[0].count_edges() == 3
    assert graphs[1].count_edges() == 3
    assert not graphs[1].is_simple()


def test_read_plain_empty_input():
    assert list(read_plain(io.StringIO("\n\n"))) == []


def test_read_plain_edgeless_graph():
    (G,) = read_plain(["single\n", "1 0\n"])
    assert G.n == 1
    assert G.count_edges() == 0


def test_write_plain_round_trip():
    G = Graph.from_edges(4, [(0, 1), (1, 2), (2, 3), (3, 0), (0, 2)], name="diamond")
    out = io.StringIO()
    write_plain(G, out)
    assert out.getvalue() == format_plain(G)
    (H,) = read_plain(io.StringIO(out.getvalue()))
    assert H.name == "diamond"
    assert sorted(H.edges()) == sorted(G.edges())


def test_format_plain_layout():
    G = Graph.from_edges(3, [(0, 1), (1, 2)], name="P3")
    assert format_plain(G) == "P3\n3 2\n0 1\n1 2\n"


@pytest.mark.parametrize(
    "text, lineno",
    [
        ("name\n", 1),  # no size line
        ("name\nx y\n", 2),  # size line not numeric
        ("name\n0 0\n", 2),  # N too small
        ("name\n2 -1\n", 2),  # negative M
        ("name\n3 2\n0 1\n", 2),  # too few edge lines
        ("name\n3 1\n0 3\n", 3),  # out of range
        ("name\n3 1\n1 1\n", 3),  # loop
        ("name\n3 1\n0\n", 3),  # half an edge
    ],
)
def test_read_plain_errors(text, lineno):
    with pytest.raises(PlainFormatError) as excinfo:
        list(read_plain(io.StringIO(text)))
    assert excinfo.value.lineno == lineno
    assert isinstance(excinfo.value, ValueError)
