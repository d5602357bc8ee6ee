from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from dgontools import limits
from dgontools.graphs.graph import Graph


@dataclass
class Workspace:
    """
    Scratch buffers for one computation on one graph.

    Buffers are sized once and overwritten by every call that receives the
    workspace, so sequential calls may share one. Two searches that run at
    the same time (threads, pool workers, nested callbacks that start a new
    search) must each use their own.
    """

    n: int
    burnt: List[bool] = field(default_factory=list)
    burnt_edges: List[int] = field(default_factory=list)
    work_divisor: List[int] = field(default_factory=list)
    can_reach: List[bool] = field(default_factory=list)
    witness: Optional[List[int]] = None

    def __post_init__(self) -> None:
        if not 0 <= self.n <= limits.MAX_N:
            raise ValueError(f"workspace size must be in [0, {limits.MAX_N}], got {self.n}")
        self.burnt = [False] * self.n
        self.burnt_edges = [0] * self.n
        self.work_divisor = [0] * self.n
        self.can_reach = [False] * self.n

    @classmethod
    def for_graph(cls, G: Graph) -> "Workspace":
        return cls(G.n)

    def fits(self, G: Graph) -> bool:
        return self.n == G.n


def workspace_for(G: Graph, workspace: Optional[Workspace]) -> Workspace:
    """Return *workspace* if it matches G, a fresh one if None was given."""
    if workspace is None:
        return Workspace.for_graph(G)
    if not workspace.fits(G):
        raise ValueError(f"workspace sized for n={workspace.n}, graph has n={G.n}")
    return workspace
