from dataclasses import dataclass
from typing import List, Tuple

import networkx as nx

from dgontools.conjectures.brill_noether import brill_noether_bound
from dgontools.divisors.search import gonality_with_witness
from dgontools.graphs.graph import Graph
from dgontools.independent_sets.boppana_halldorsson import best_independent_set, popcount


@dataclass
class Row:
    name: str
    n: int
    m: int
    gonality: int
    bound: int
    indep_bound: int
    witness: List[int]


def named_graphs() -> List[Tuple[str, nx.Graph]]:
    return [
        ("K4", nx.complete_graph(4)),
        ("K5", nx.complete_graph(5)),
        ("K_{3,3}", nx.complete_bipartite_graph(3, 3)),
        ("K_{3,4}", nx.complete_bipartite_graph(3, 4)),
        ("Q3", nx.hypercube_graph(3)),
        ("Petersen", nx.petersen_graph()),
        ("Wheel W6", nx.wheel_graph(6)),
        ("Prism C5xK2", nx.circular_ladder_graph(5)),
    ]


def row_for(name: str, H: nx.Graph) -> Row:
    G = Graph.from_networkx(H, name=name)
    gon, witness = gonality_with_witness(G)
    indep = best_independent_set(G, tries=15)
    return Row(
        name=name,
        n=G.n,
        m=G.count_edges(),
        gonality=gon,
        bound=brill_noether_bound(G),
        indep_bound=G.n - popcount(indep),
        witness=witness,
    )


if __name__ == "__main__":
    print(f"{'graph':<14} {'n':>3} {'m':>3} {'gon':>4} {'BN':>3} {'n-a':>4}  witness")
    for name, H in named_graphs():
        r = row_for(name, H)
        print(f"{r.name:<14} {r.n:>3} {r.m:>3} {r.gonality:>4} {r.bound:>3} {r.indep_bound:>4}  {r.witness}")
