"""
Dhar's burning algorithm and reduction of divisors.

A divisor is a sequence of n integers (chips per vertex). Burning from a
vertex s treats s as an unconstrained sink: fire starts at s and a vertex
catches fire once more of its edges are burning than it has chips. The
vertices that never burn form the firing set, the largest set that can fire
simultaneously without any vertex going into debt.
"""
from __future__ import annotations

from collections import deque
from typing import List, Optional, Sequence, Tuple

from dgontools.divisors.workspace import Workspace, workspace_for
from dgontools.graphs.graph import Graph, check_divisor_shape, require_searchable


def burn(
    G: Graph,
    divisor: Sequence[int],
    start: int,
    workspace: Optional[Workspace] = None,
) -> List[int]:
    """
    Return the firing set of *divisor* with respect to *start*, in index order.

    Every entry except divisor[start] must be non-negative; the start vertex's
    own chip count is never read. An empty result means the divisor is
    start-reduced.

    Complexity: O(n + m).
    """
    n = G.n
    if not 0 <= start < n:
        raise ValueError(f"start vertex {start} out of range for n={n}")
    check_divisor_shape(G, divisor)
    for i in range(n):
        if i != start and divisor[i] < 0:
            raise ValueError(f"divisor entry at vertex {i} is negative ({divisor[i]})")

    ws = workspace_for(G, workspace)
    burnt = ws.burnt
    burnt_edges = ws.burnt_edges
    for i in range(n):
        burnt[i] = False
        burnt_edges[i] = 0

    neighbours = G.neighbours
    queue = deque([start])
    burnt[start] = True
    while queue:
        i = queue.popleft()
        for j in neighbours[i]:
            burnt_edges[j] += 1
            if burnt_edges[j] > divisor[j] and not burnt[j]:
                burnt[j] = True
                queue.append(j)

    return [i for i in range(n) if not burnt[i]]


def fire(G: Graph, divisor: List[int], firing_set: Sequence[int]) -> None:
    """Fire every vertex of *firing_set* at once, updating *divisor* in place."""
    neighbours = G.neighbours
    for v in firing_set:
        neigh = neighbours[v]
        divisor[v] -= len(neigh)
        for w in neigh:
            divisor[w] += 1


def is_reduced(
    G: Graph,
    divisor: Sequence[int],
    target: Optional[int] = None,
    workspace: Optional[Workspace] = None,
) -> bool:
    """
    With a target: True iff the divisor is target-reduced.
    Without one: True iff it is reduced with respect to at least one vertex.
    """
    ws = workspace_for(G, workspace)
    if target is not None:
        return not burn(G, divisor, target, ws)
    for v in range(G.n):
        if all(divisor[i] >= 0 for i in range(G.n) if i != v) and not burn(G, divisor, v, ws):
            return True
    return False


def reduce_divisor(
    G: Graph,
    divisor: Sequence[int],
    target: int,
    workspace: Optional[Workspace] = None,
    *,
    check_graph: bool = True,
) -> Tuple[List[int], List[int]]:
    """
    Reduce *divisor* to *target* by repeatedly firing the burning firing set.

    Returns (reduced_divisor, script) where script[v] counts how often v was
    fired; script[target] is always 0. The input is not modified.

    G must be connected (checked unless check_graph=False), otherwise the
    loop does not terminate.
    """
    if check_graph:
        require_searchable(G)
    check_divisor_shape(G, divisor)
    if not 0 <= target < G.n:
        raise ValueError(f"target vertex {target} out of range for n={G.n}")

    ws = workspace_for(G, workspace)
    current = ws.work_divisor
    current[:] = divisor
    script = [0] * G.n
    while True:
        firing_set = burn(G, current, target, ws)
        if not firing_set:
            break
        fire(G, current, firing_set)
        for v in firing_set:
            script[v] += 1

    assert script[target] == 0
    return list(current), script
