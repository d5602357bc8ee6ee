"""
Process-parallel versions of the divisor search.

The search tree is split on the number of chips placed on vertex 0; sibling
branches are independent. Every worker builds its own Workspace, so no
scratch buffer is ever shared. Branches are consumed in enumeration order,
which makes the first accepted divisor identical to the sequential one.
"""
from __future__ import annotations

from multiprocessing import Pool, cpu_count
from typing import List, Optional, Tuple

from dgontools.divisors.search import (
    Visitor,
    find_all_positive_rank_v0_reduced_divisors,
    find_positive_rank_divisor,
)
from dgontools.divisors.workspace import Workspace
from dgontools.graphs.graph import Graph, require_searchable


def _branch_prefixes(degree: int) -> List[Tuple[int]]:
    return [(c0,) for c0 in range(degree, 0, -1)]


def _first_in_branch(job: Tuple[Graph, int, Tuple[int, ...]]) -> Optional[List[int]]:
    G, degree, prefix = job
    return find_positive_rank_divisor(G, degree, Workspace.for_graph(G), prefix=prefix)


def _all_in_branch(job: Tuple[Graph, int, Tuple[int, ...]]) -> List[Tuple[int, ...]]:
    G, degree, prefix = job
    found: List[Tuple[int, ...]] = []
    find_all_positive_rank_v0_reduced_divisors(
        G, degree, found.append, Workspace.for_graph(G), prefix=prefix
    )
    return found


def find_positive_rank_divisor_parallel(
    G: Graph,
    degree: int,
    *,
    processes: int = max(1, cpu_count() - 1),
) -> Optional[List[int]]:
    """Parallel find_positive_rank_divisor; returns the same divisor as the sequential search."""
    require_searchable(G)
    if degree < 0:
        raise ValueError(f"degree must be non-negative, got {degree}")
    jobs = [(G, degree, prefix) for prefix in _branch_prefixes(degree)]
    if not jobs:
        return None

    with Pool(processes=processes) as pool:
        # imap keeps branch order; leaving the block terminates the rest
        for found in pool.imap(_first_in_branch, jobs, chunksize=1):
            if found is not None:
                return found
    return None


def find_all_positive_rank_v0_reduced_divisors_parallel(
    G: Graph,
    degree: int,
    visit: Visitor,
    *,
    processes: int = max(1, cpu_count() - 1),
) -> int:
    """
    Parallel find_all_positive_rank_v0_reduced_divisors.

    visit runs in the calling process; the order of the visits is not
    significant here.
    """
    require_searchable(G)
    if degree < 0:
        raise ValueError(f"degree must be non-negative, got {degree}")
    jobs = [(G, degree, prefix) for prefix in _branch_prefixes(degree)]
    found = 0
    with Pool(processes=processes) as pool:
        for batch in pool.imap_unordered(_all_in_branch, jobs, chunksize=1):
            for divisor in batch:
                found += 1
                visit(divisor)
    return found


def find_gonality_parallel(
    G: Graph,
    *,
    processes: int = max(1, cpu_count() - 1),
) -> Tuple[int, List[int]]:
    """Return (gonality, witness) using the parallel search for every degree."""
    require_searchable(G)
    for deg in range(1, G.n + 1):
        found = find_positive_rank_divisor_parallel(G, deg, processes=processes)
        if found is not None:
            return deg, found
    raise RuntimeError(
        f"no positive rank divisor of degree <= n={G.n} found on {G.name!r}; "
        "the engine is inconsistent"
    )
