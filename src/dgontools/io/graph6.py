from __future__ import annotations

from typing import Iterable, Iterator, Optional, TextIO

import networkx as nx

from dgontools import limits
from dgontools.graphs.graph import Graph


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def g6_to_nx(g6: str) -> nx.Graph:
    """
    Parse a graph6 string into a simple undirected NetworkX Graph.
    """
    s = strip_graph6_header(g6)
    try:
        H = nx.from_graph6_bytes(s.encode("ascii"))
    except (nx.NetworkXError, UnicodeEncodeError, ValueError) as exc:
        raise ValueError(f"invalid graph6 string {g6!r}: {exc}") from exc
    if isinstance(H, (nx.MultiGraph, nx.MultiDiGraph)):
        H = nx.Graph(H)
    return H


def g6_to_graph(g6: str, name: Optional[str] = None) -> Graph:
    """
    Parse a graph6 string into a Graph on 0..n-1.

    The graph is named after the (stripped) g6 string unless *name* is given.
    """
    s = strip_graph6_header(g6)
    H = g6_to_nx(s)
    if H.number_of_nodes() > limits.MAX_N:
        raise ValueError(
            f"graph6 string encodes {H.number_of_nodes()} vertices, more than MAX_N={limits.MAX_N}"
        )
    G = Graph.empty(H.number_of_nodes(), name=s if name is None else name)
    # column order of the upper triangle, as the encoding stores it
    for v in range(G.n):
        for u in range(v):
            if H.has_edge(u, v):
                G.add_edge(u, v)
    return G


def graph_to_g6(G: Graph) -> str:
    """
    Encode a simple Graph as a graph6 string (no header, no newline).

    graph6 only stores simple graphs; parallel edges raise ValueError.
    """
    if not G.is_valid_undirected_graph():
        raise ValueError(f"graph {G.name!r} is not a valid undirected graph")
    if not G.is_simple():
        raise ValueError(
            f"graph {G.name!r} has parallel edges and cannot be stored in graph6 format"
        )
    H = nx.Graph()
    H.add_nodes_from(range(G.n))
    H.add_edges_from(G.edges())
    return nx.to_graph6_bytes(H, header=False).decode("ascii").strip()


def read_graph6_lines(lines: Iterable[str] | TextIO) -> Iterator[Graph]:
    """Yield one Graph per non-blank graph6 line."""
    for line in lines:
        s = line.strip()
        if not s:
            continue
        yield g6_to_graph(s)
