from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from multiprocessing import Pool, cpu_count
from typing import Iterable, Iterator, List, Optional, Tuple

from dgontools import limits
from dgontools.divisors.rank import has_positive_rank
from dgontools.divisors.search import find_gonality
from dgontools.divisors.workspace import Workspace
from dgontools.graphs.graph import Graph, require_searchable
from dgontools.independent_sets.boppana_halldorsson import (
    approximate_maximum_independent_set,
    bits,
    check_independent,
    independent_set_divisor,
)
from dgontools.io.graph6 import g6_to_graph


MIN_N = 3


def brill_noether_bound(G: Graph) -> int:
    """floor((g + 3) / 2) for the first Betti number g = m - n + 1."""
    genus = G.count_edges() - G.n + 1
    return (genus + 3) // 2


@dataclass(frozen=True)
class BrillNoetherResult:
    """
    Outcome of a Brill–Noether test on one graph.

    status:
      "leaf"            - has a vertex of degree <= 1, skipped
      "trivial"         - bound >= n - 2, which every non-complete graph meets
      "independent_set" - an approximate independent set already meets the bound
      "ok"              - exact gonality meets the bound
      "counterexample"  - exact gonality exceeds the bound
    gonality is only computed for the last two.
    """

    name: str
    n: int
    m: int
    bound: int
    gonality: Optional[int]
    status: str

    @property
    def is_counterexample(self) -> bool:
        return self.status == "counterexample"


def check_brill_noether(
    G: Graph,
    *,
    tries: int = limits.INDEPENDENT_SET_NUM_TRIES,
    rng: Optional[random.Random] = None,
) -> BrillNoetherResult:
    """Test gon(G) <= floor((g + 3) / 2) on a simple connected graph, cheapest checks first."""
    require_searchable(G)
    if not G.is_simple():
        raise ValueError(f"graph {G.name!r} is not simple")

    n = G.n
    m = G.count_edges()
    bound = brill_noether_bound(G)

    def result(status: str, gonality: Optional[int] = None) -> BrillNoetherResult:
        return BrillNoetherResult(name=G.name, n=n, m=m, bound=bound, gonality=gonality, status=status)

    if G.has_leaf():
        return result("leaf")
    if bound >= n - 2:
        return result("trivial")

    rng = rng if rng is not None else random.Random()
    adj = G.adjacency_bitsets()
    ws = Workspace.for_graph(G)
    for _ in range(tries):
        indep = approximate_maximum_independent_set(G, rng)
        if not check_independent(adj, indep):
            raise RuntimeError(f"approximator returned a dependent set {bits(indep)} on {G.name!r}")
        divisor = independent_set_divisor(G, indep)
        if not has_positive_rank(G, divisor, ws, check_graph=False):
            raise RuntimeError(
                f"independent set divisor {divisor} on {G.name!r} does not have positive rank"
            )
        if sum(divisor) <= bound:
            return result("independent_set")

    gon = find_gonality(G, ws)
    return result("counterexample" if gon > bound else "ok", gon)


def brill_noether_geng_options(n: int, *, biconnected: bool = False) -> dict:
    """
    geng options for the Brill–Noether search on n vertices.

    Only connected graphs without leaves are needed, and only up to 3n - 9
    edges: beyond that the bound is at least n - 2, which every non-complete
    simple graph meets through an independent set of size 2.
    """
    if n < MIN_N:
        raise ValueError(f"n must be at least {MIN_N}, got {n}")
    return {
        "connected": True,
        "biconnected": biconnected,
        "min_degree": 2,
        "min_edges": n,
        "max_edges": max(n, 3 * n - 9),
    }


@dataclass(frozen=True)
class BrillNoetherSummary:
    tested: int
    problems: int
    counterexamples: Tuple[BrillNoetherResult, ...]


_TRIES = limits.INDEPENDENT_SET_NUM_TRIES


def _worker_init(tries: int) -> None:
    global _TRIES
    _TRIES = tries


def _worker(g6: str) -> BrillNoetherResult:
    return check_brill_noether(g6_to_graph(g6), tries=_TRIES)


def _chunked(it: Iterable[str], size: int) -> Iterator[List[str]]:
    buf: List[str] = []
    for x in it:
        buf.append(x)
        if len(buf) >= size:
            yield buf
            buf = []
    if buf:
        yield buf


def run_brill_noether(
    graphs: Iterable[str],
    *,
    processes: int = max(1, cpu_count() - 1),
    batch_size: int = 200,
    tries: int = limits.INDEPENDENT_SET_NUM_TRIES,
    verbosity: int = 0,
) -> BrillNoetherSummary:
    """
    Check a stream of graph6 strings in a process pool.

    Counterexamples are printed to stdout as they are found; with
    verbosity >= 2 every graph's outcome is printed.
    """
    tested = 0
    found: List[BrillNoetherResult] = []

    with Pool(processes=processes, initializer=_worker_init, initargs=(tries,)) as pool:
        for batch in _chunked(graphs, batch_size):
            for res in pool.imap(_worker, batch, chunksize=1):
                tested += 1
                if res.is_counterexample:
                    found.append(res)
                    print(
                        f'Graph {tested} ("{res.name}") fails Brill–Noether bound! '
                        f"Gonality: {res.gonality}, bound: {res.bound}."
                    )
                elif verbosity >= 2:
                    print(f'Graph {tested} ("{res.name}"): {res.status}.')
            if verbosity >= 1:
                print(f"[tested={tested}] {len(found)} problem(s) so far.", file=sys.stderr)

    return BrillNoetherSummary(tested=tested, problems=len(found), counterexamples=tuple(found))
