"""
Brute-force search for positive rank divisors and gonality.

If a positive rank divisor of degree d exists, so does a v0-reduced one
(v0 = vertex 0), and a v0-reduced divisor of positive rank carries at least
one chip on v0. The search therefore only enumerates effective divisors with
D[0] >= 1, and only calls the rank test on those that are already
v0-reduced.

Candidates come in "most chips first" order: the first vertex starts with
every chip and gives them up one at a time, recursively for the remaining
vertices. All divisors supported on a prefix of the vertices are seen before
a chip moves further out, so a single call for degree d costs no more than
trying every degree up to d in turn.
"""
from __future__ import annotations

from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from dgontools.divisors.burning import burn
from dgontools.divisors.rank import has_positive_rank
from dgontools.divisors.workspace import Workspace, workspace_for
from dgontools.graphs.graph import Graph, require_searchable


Visitor = Callable[[Tuple[int, ...]], None]


def iter_v0_candidates(
    n: int,
    degree: int,
    prefix: Sequence[int] = (),
) -> Iterator[List[int]]:
    """
    Yield every effective divisor on n vertices of exactly *degree* chips
    with at least one chip on vertex 0, in "most chips first" order.

    If *prefix* is given, only divisors starting with it are produced.

    The same list object is yielded each time and mutated in between;
    copy it to keep it.
    """
    k = len(prefix)
    if degree < 0 or k > n:
        return
    mins = [0] * n
    if n:
        mins[0] = 1
    if any(prefix[i] < mins[i] for i in range(k)):
        return
    rest = degree - sum(prefix)
    if rest < 0:
        return
    if k == n:
        if rest == 0:
            yield list(prefix)
        return
    if rest < mins[k]:
        return

    c = list(prefix) + [0] * (n - k)
    c[k] = rest
    while True:
        yield c
        # Successor in decreasing lexicographic order: take one chip off the
        # last free position that can spare it, pile everything after it
        # onto the next vertex.
        i = n - 2
        while i >= k and c[i] <= mins[i]:
            i -= 1
        if i < k:
            return
        carry = sum(c[i + 1 :]) + 1
        c[i] -= 1
        c[i + 1] = carry
        for j in range(i + 2, n):
            c[j] = 0


def _accept(G: Graph, divisor: Sequence[int], ws: Workspace) -> bool:
    # v0-reduced first; the rank test dominates the running time
    return divisor[0] > 0 and not burn(G, divisor, 0, ws) and has_positive_rank(
        G, divisor, ws, check_graph=False
    )


def _check_degree(degree: int) -> None:
    if degree < 0:
        raise ValueError(f"degree must be non-negative, got {degree}")


def find_positive_rank_divisor(
    G: Graph,
    degree: int,
    workspace: Optional[Workspace] = None,
    *,
    prefix: Sequence[int] = (),
) -> Optional[List[int]]:
    """
    Return the first positive rank v0-reduced effective divisor of exactly
    *degree* chips, or None if there is none.

    The result is also kept in workspace.witness.
    """
    require_searchable(G)
    _check_degree(degree)
    ws = workspace_for(G, workspace)
    ws.witness = None
    for cand in iter_v0_candidates(G.n, degree, prefix):
        if _accept(G, cand, ws):
            ws.witness = list(cand)
            return list(cand)
    return None


def find_all_positive_rank_v0_reduced_divisors(
    G: Graph,
    degree: int,
    visit: Visitor,
    workspace: Optional[Workspace] = None,
    *,
    prefix: Sequence[int] = (),
) -> int:
    """
    Call visit(divisor) for every positive rank v0-reduced divisor of exactly
    *degree* chips, in enumeration order. Returns the number of calls.

    The divisor is passed as a tuple. The visitor may run its own searches
    with a separate workspace, never with the one driving this search.
    """
    require_searchable(G)
    _check_degree(degree)
    ws = workspace_for(G, workspace)
    found = 0
    for cand in iter_v0_candidates(G.n, degree, prefix):
        if _accept(G, cand, ws):
            found += 1
            visit(tuple(cand))
    return found


def find_gonality(G: Graph, workspace: Optional[Workspace] = None) -> int:
    """
    Divisorial gonality of G by brute force, trying degrees 1, 2, 3, ...

    A minimal witness is left in workspace.witness. The answer is at most n,
    since one chip on every vertex always has positive rank.
    """
    return gonality_with_witness(G, workspace)[0]


def gonality_with_witness(
    G: Graph,
    workspace: Optional[Workspace] = None,
) -> Tuple[int, List[int]]:
    """Return (gonality, first positive rank v0-reduced divisor of that degree)."""
    require_searchable(G)
    ws = workspace_for(G, workspace)
    for deg in range(1, G.n + 1):
        found = find_positive_rank_divisor(G, deg, ws)
        if found is not None:
            return deg, found
    raise RuntimeError(
        f"no positive rank divisor of degree <= n={G.n} found on {G.name!r}; "
        "the engine is inconsistent"
    )
