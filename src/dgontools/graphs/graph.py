from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

import networkx as nx

from dgontools import limits
from dgontools.graphs.connectivity import is_connected_adj


@dataclass
class Graph:
    """
    Undirected multigraph on vertices 0..n-1.

    neighbours[v] lists every neighbour of v once per connecting edge, so
    parallel edges show up as repeated entries. Loops are not allowed.
    """

    n: int
    neighbours: List[List[int]] = field(default_factory=list)
    name: str = ""

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError(f"vertex count must be non-negative, got {self.n}")
        if not self.neighbours:
            self.neighbours = [[] for _ in range(self.n)]
        if len(self.neighbours) != self.n:
            raise ValueError(
                f"expected {self.n} neighbour lists, got {len(self.neighbours)}"
            )

    @classmethod
    def empty(cls, n: int, name: str = "") -> "Graph":
        return cls(n=n, neighbours=[[] for _ in range(n)], name=name)

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Tuple[int, int]], name: str = "") -> "Graph":
        G = cls.empty(n, name=name)
        for a, b in edges:
            G.add_edge(a, b)
        return G

    @classmethod
    def from_networkx(cls, H: nx.Graph, name: str = "") -> "Graph":
        """
        Convert a NetworkX graph, relabelling nodes to 0..n-1 in sorted order.
        MultiGraph edges keep their multiplicity.
        """
        nodes = sorted(H.nodes())
        index = {v: i for i, v in enumerate(nodes)}
        return cls.from_edges(len(nodes), ((index[u], index[v]) for u, v in H.edges()), name=name)

    def add_edge(self, a: int, b: int) -> None:
        if not (0 <= a < self.n and 0 <= b < self.n):
            raise ValueError(f"edge ({a}, {b}) out of range for n={self.n}")
        if a == b:
            raise ValueError(f"loops are not allowed (vertex {a})")
        self.neighbours[a].append(b)
        self.neighbours[b].append(a)

    def degree(self, v: int) -> int:
        return len(self.neighbours[v])

    def count_edges(self) -> int:
        total = sum(len(neigh) for neigh in self.neighbours)
        if total % 2:
            raise ValueError("neighbour lists are not symmetric")
        return total // 2

    def edges(self) -> List[Tuple[int, int]]:
        """
        Undirected edges as (u, v) with u < v, one entry per parallel copy.
        """
        eds: List[Tuple[int, int]] = []
        for u, neigh in enumerate(self.neighbours):
            for v in neigh:
                if v > u:
                    eds.append((u, v))
        return eds

    def adjacency_counts(self) -> List[List[int]]:
        """n x n matrix of edge multiplicities, as recorded from each row's neighbour list."""
        mat = [[0] * self.n for _ in range(self.n)]
        for u, neigh in enumerate(self.neighbours):
            row = mat[u]
            for v in neigh:
                row[v] += 1
        return mat

    def adjacency_bitsets(self) -> List[int]:
        """Bitset adjacency: bit v of adj[u] is set iff u~v."""
        adj = [0] * self.n
        for u, neigh in enumerate(self.neighbours):
            for v in neigh:
                adj[u] |= 1 << v
        return adj

    def is_valid_undirected_graph(self, simple: bool = False) -> bool:
        """
        True iff there are no loops, every neighbour index is in range and
        multiplicities are symmetric. With simple=True, parallel edges are
        rejected as well.
        """
        for neigh in self.neighbours:
            for v in neigh:
                if not 0 <= v < self.n:
                    return False
        mat = self.adjacency_counts()
        for i in range(self.n):
            if mat[i][i] != 0:
                return False
            for j in range(i):
                if mat[i][j] != mat[j][i]:
                    return False
                if simple and mat[i][j] > 1:
                    return False
        return True

    def is_simple(self) -> bool:
        return self.is_valid_undirected_graph(simple=True)

    def has_leaf(self) -> bool:
        """True iff some vertex has degree at most 1."""
        return any(len(neigh) <= 1 for neigh in self.neighbours)

    def is_connected(self) -> bool:
        return is_connected_adj(self.neighbours)

    def copy(self, name: str | None = None) -> "Graph":
        return Graph(
            n=self.n,
            neighbours=[list(neigh) for neigh in self.neighbours],
            name=self.name if name is None else name,
        )

    def to_networkx(self) -> nx.Graph:
        """NetworkX view: a Graph when simple, otherwise a MultiGraph."""
        H: nx.Graph = nx.Graph() if self.is_simple() else nx.MultiGraph()
        H.add_nodes_from(range(self.n))
        H.add_edges_from(self.edges())
        return H


def validate(G: Graph) -> bool:
    """Precondition for every engine call: a valid loop-free graph within MAX_N."""
    return G.n <= limits.MAX_N and G.is_valid_undirected_graph()


def require_searchable(G: Graph) -> None:
    """
    Raise ValueError unless G is valid, non-empty and connected.

    Reduction and the rank test only terminate on connected graphs: firing a
    whole component never changes the divisor.
    """
    if G.n > limits.MAX_N:
        raise ValueError(f"graph has {G.n} vertices, more than MAX_N={limits.MAX_N}")
    if not G.is_valid_undirected_graph():
        raise ValueError(f"graph {G.name!r} is not a valid undirected graph")
    if G.n == 0:
        raise ValueError("graph has no vertices")
    if not G.is_connected():
        raise ValueError(f"graph {G.name!r} is not connected")


def check_divisor_shape(G: Graph, divisor: Sequence[int]) -> None:
    if len(divisor) != G.n:
        raise ValueError(f"divisor has {len(divisor)} entries, graph has {G.n} vertices")
