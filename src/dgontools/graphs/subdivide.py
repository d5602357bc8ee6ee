from __future__ import annotations

from dgontools import limits
from dgontools.graphs.graph import Graph


def subdivide(G: Graph, parts_per_edge: int) -> Graph:
    """
    k-regular subdivision: replace every edge by a path of k edges.

    Vertices 0..n-1 keep their index. The k-1 interior vertices of each edge
    are appended in edge order (u ascending, then u's neighbour list), so
    the result has n + m(k-1) vertices. k=1 returns a copy.
    """
    k = parts_per_edge
    if not 1 <= k <= limits.MAX_PARTS_PER_EDGE:
        raise ValueError(
            f"parts_per_edge must be in [1, {limits.MAX_PARTS_PER_EDGE}], got {k}"
        )
    if not G.is_valid_undirected_graph():
        raise ValueError(f"graph {G.name!r} is not a valid undirected graph")
    if k == 1:
        return G.copy()

    m = G.count_edges()
    total = G.n + m * (k - 1)
    if total > limits.MAX_N:
        raise ValueError(
            f"{k}-subdivision has {total} vertices, more than MAX_N={limits.MAX_N}"
        )

    H = Graph.empty(total, name=G.name)
    cur = G.n
    for u in range(G.n):
        for v in G.neighbours[u]:
            if u >= v:
                continue
            path = [u] + list(range(cur, cur + k - 1)) + [v]
            cur += k - 1
            for a, b in zip(path, path[1:]):
                H.add_edge(a, b)

    assert cur == total
    return H
