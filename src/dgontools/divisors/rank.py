from __future__ import annotations

from typing import Optional, Sequence

from dgontools.divisors.burning import burn, fire
from dgontools.divisors.workspace import Workspace, workspace_for
from dgontools.graphs.graph import Graph, check_divisor_shape, require_searchable


def has_positive_rank(
    G: Graph,
    divisor: Sequence[int],
    workspace: Optional[Workspace] = None,
    *,
    check_graph: bool = True,
) -> bool:
    """
    Test whether an effective divisor has positive rank.

    For every vertex u, a working copy is fired towards u until u holds a
    chip. Every vertex that ever holds a chip along the way is recorded, so
    it does not need its own pass. If burning from u yields an empty firing
    set while u is still chipless, u can never be reached and the answer is
    False.

    The caller's divisor is not modified. Pass check_graph=False from tight
    loops where the graph was validated once up front.
    """
    if check_graph:
        require_searchable(G)
    check_divisor_shape(G, divisor)
    n = G.n
    for i in range(n):
        if divisor[i] < 0:
            raise ValueError(f"divisor entry at vertex {i} is negative ({divisor[i]})")

    ws = workspace_for(G, workspace)
    work = ws.work_divisor
    can_reach = ws.can_reach
    for i in range(n):
        work[i] = divisor[i]
        can_reach[i] = divisor[i] > 0

    for u in range(n):
        while not can_reach[u]:
            firing_set = burn(G, work, u, ws)
            if not firing_set:
                return False
            fire(G, work, firing_set)
            for v in range(n):
                if work[v] > 0:
                    can_reach[v] = True
    return True
