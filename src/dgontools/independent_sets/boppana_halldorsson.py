"""
Randomized approximation of maximum independent sets (Boppana–Halldórsson).

Vertex sets are int bitsets: bit v is set iff v is in the set.

An independent set A of a simple graph gives a positive rank divisor of
degree n - |A| (one chip on every vertex outside A), which is a cheap upper
bound on the gonality. This does not hold with parallel edges.

Reference: R. Boppana and M. M. Halldórsson (1992), Approximating Maximum
Independent Sets by Excluding Subgraphs, BIT 32(2):180-196.
"""
from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple

from dgontools import limits
from dgontools.graphs.graph import Graph


def popcount(S: int) -> int:
    return bin(S).count("1")


def bits(S: int) -> List[int]:
    """Members of a bitset in increasing order."""
    out: List[int] = []
    while S:
        lsb = S & -S
        out.append(lsb.bit_length() - 1)
        S ^= lsb
    return out


def to_bitset(vertices: Sequence[int]) -> int:
    S = 0
    for v in vertices:
        S |= 1 << v
    return S


def is_subset(A: int, B: int) -> bool:
    return A & B == A


def check_independent(adj: Sequence[int], S: int) -> bool:
    """True iff no two vertices of S are adjacent."""
    for v in bits(S):
        if adj[v] & S:
            return False
    return True


def check_clique(adj: Sequence[int], S: int) -> bool:
    """True iff every two distinct vertices of S are adjacent."""
    for v in bits(S):
        if (S & ~(1 << v)) & ~adj[v]:
            return False
    return True


def ramsey(adj: Sequence[int], S: int, rng: random.Random) -> Tuple[int, int]:
    """
    Return (independent_set, clique), both subsets of S.

    A random pivot splits the rest of S into its neighbours and
    non-neighbours. The pivot joins the independent set found among the
    non-neighbours and the clique found among the neighbours; the larger
    candidate of each kind wins.

    The recursion runs on an explicit stack (its depth can reach |S|), in
    the same order as the recursive formulation: neighbours first.
    """
    results: List[Tuple[int, int]] = []
    stack: List[Tuple[bool, int]] = [(False, S)]
    while stack:
        combine, x = stack.pop()
        if combine:
            v0 = x
            indep_nn, cliq_nn = results.pop()
            indep_n, cliq_n = results.pop()

            A_indep = indep_n
            B_indep = indep_nn | (1 << v0)
            A_cliq = cliq_n | (1 << v0)
            B_cliq = cliq_nn

            best_indep = A_indep if popcount(A_indep) > popcount(B_indep) else B_indep
            best_cliq = A_cliq if popcount(A_cliq) > popcount(B_cliq) else B_cliq
            results.append((best_indep, best_cliq))
            continue

        if not x:
            results.append((0, 0))
            continue

        v0 = rng.choice(bits(x))
        rest = x & ~(1 << v0)
        stack.append((True, v0))
        stack.append((False, rest & ~adj[v0]))
        stack.append((False, rest & adj[v0]))

    assert len(results) == 1
    return results[0]


def _require_approximable(G: Graph) -> None:
    if G.n > limits.MAX_N:
        raise ValueError(f"graph has {G.n} vertices, more than MAX_N={limits.MAX_N}")
    if not G.is_valid_undirected_graph():
        raise ValueError(f"graph {G.name!r} is not a valid undirected graph")


def approximate_maximum_independent_set(
    G: Graph,
    rng: Optional[random.Random] = None,
) -> int:
    """
    "Clique Removal": run ramsey() on the remaining vertices, delete the
    clique it returns, repeat until no vertex is left. Returns the largest
    independent set seen, as a bitset.

    Every intermediate result is re-checked; a failed check raises
    RuntimeError since downstream bounds rely on it.
    """
    _require_approximable(G)
    rng = rng if rng is not None else random.Random()
    adj = G.adjacency_bitsets()

    S = (1 << G.n) - 1
    best = 0
    while S:
        indep, cliq = ramsey(adj, S, rng)
        if not (is_subset(indep, S) and is_subset(cliq, S)):
            raise RuntimeError("ramsey() returned vertices outside the working set")
        if not check_independent(adj, indep):
            raise RuntimeError(f"ramsey() returned a dependent set {bits(indep)}")
        if not check_clique(adj, cliq) or not cliq:
            raise RuntimeError(f"ramsey() returned an invalid clique {bits(cliq)}")
        S &= ~cliq
        if popcount(indep) > popcount(best):
            best = indep
    return best


def best_independent_set(
    G: Graph,
    tries: int = limits.INDEPENDENT_SET_NUM_TRIES,
    rng: Optional[random.Random] = None,
) -> int:
    """Largest independent set over *tries* independent runs of the approximator."""
    if tries < 1:
        raise ValueError(f"tries must be positive, got {tries}")
    rng = rng if rng is not None else random.Random()
    best = 0
    for _ in range(tries):
        cur = approximate_maximum_independent_set(G, rng)
        if popcount(cur) > popcount(best):
            best = cur
    return best


def independent_set_divisor(G: Graph, indep: int) -> List[int]:
    """
    One chip on every vertex outside *indep*. Has positive rank when G is
    simple and *indep* is independent.
    """
    if not G.is_simple():
        raise ValueError(
            f"graph {G.name!r} has parallel edges; independent sets give no divisor bound"
        )
    if not check_independent(G.adjacency_bitsets(), indep):
        raise ValueError(f"vertex set {bits(indep)} is not independent")
    return [0 if (indep >> v) & 1 else 1 for v in range(G.n)]
