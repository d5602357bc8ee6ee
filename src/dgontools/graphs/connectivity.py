from __future__ import annotations

from typing import Sequence


def is_connected_adj(neighbours: Sequence[Sequence[int]]) -> bool:
    """Check whether an adjacency list on vertices 0..n-1 is connected.

    Semantics for degenerate cases:
      - no vertices -> True  (vacuously connected)
      - one vertex  -> True
    """
    n = len(neighbours)
    if n <= 1:
        return True

    visited = [False] * n
    visited[0] = True
    stack = [0]
    seen = 1
    while stack:
        node = stack.pop()
        for nbr in neighbours[node]:
            if not visited[nbr]:
                visited[nbr] = True
                seen += 1
                stack.append(nbr)
    return seen == n


def connected_components_adj(neighbours: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return connected components as sorted vertex lists, ordered by smallest vertex."""
    n = len(neighbours)
    comp_of = [-1] * n
    components: list[list[int]] = []

    for start in range(n):
        if comp_of[start] != -1:
            continue
        cid = len(components)
        comp_of[start] = cid
        comp = [start]
        stack = [start]
        while stack:
            node = stack.pop()
            for nbr in neighbours[node]:
                if comp_of[nbr] == -1:
                    comp_of[nbr] = cid
                    comp.append(nbr)
                    stack.append(nbr)
        components.append(sorted(comp))

    return components
