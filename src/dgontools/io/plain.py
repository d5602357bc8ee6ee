"""
Human-readable ("plain") graph format.

A file holds any number of blocks of the form

    <name line>
    N M
    a_1 b_1
    ...
    a_M b_M

with 0 <= a_i, b_i < N. Empty lines are ignored everywhere. Unlike graph6,
parallel edges are allowed.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, TextIO, Tuple

from dgontools import limits
from dgontools.graphs.graph import Graph


class PlainFormatError(ValueError):
    """Malformed plain-format input."""

    def __init__(self, lineno: int, message: str) -> None:
        super().__init__(f"line {lineno}: {message}")
        self.lineno = lineno


def _two_ints(lineno: int, text: str, what: str) -> Tuple[int, int]:
    parts = text.split()
    if len(parts) < 2:
        raise PlainFormatError(lineno, f"expected {what}, got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise PlainFormatError(lineno, f"expected {what}, got {text!r}") from None


def read_plain(lines: Iterable[str] | TextIO) -> Iterator[Graph]:
    """Yield the graphs of a plain-format stream, one per block."""
    numbered: List[Tuple[int, str]] = [
        (i, ln.rstrip("\r\n")) for i, ln in enumerate(lines, start=1) if ln.strip()
    ]
    pos = 0
    while pos < len(numbered):
        if pos + 1 >= len(numbered):
            lineno, _ = numbered[pos]
            raise PlainFormatError(lineno, "graph name without a size line")
        _, name = numbered[pos]
        lineno, size_line = numbered[pos + 1]
        pos += 2

        n, m = _two_ints(lineno, size_line, "'N M'")
        if not 1 <= n <= limits.MAX_N:
            raise PlainFormatError(lineno, f"N must be in [1, {limits.MAX_N}], got {n}")
        if not 0 <= m <= limits.MAX_M:
            raise PlainFormatError(lineno, f"M must be in [0, {limits.MAX_M}], got {m}")
        if pos + m > len(numbered):
            raise PlainFormatError(lineno, f"expected {m} edge lines, input ended early")

        G = Graph.empty(n, name=name)
        for lineno, text in numbered[pos : pos + m]:
            a, b = _two_ints(lineno, text, "an edge 'a b'")
            if not (0 <= a < n and 0 <= b < n):
                raise PlainFormatError(lineno, f"edge ({a}, {b}) out of range for N={n}")
            if a == b:
                raise PlainFormatError(lineno, f"loop at vertex {a}")
            G.add_edge(a, b)
        pos += m
        yield G


def format_plain(G: Graph) -> str:
    """Render one plain-format block (with trailing newline)."""
    eds = G.edges()
    out = [G.name, f"{G.n} {len(eds)}"]
    out.extend(f"{u} {v}" for u, v in eds)
    return "\n".join(out) + "\n"


def write_plain(G: Graph, stream: TextIO) -> None:
    if not G.is_valid_undirected_graph():
        raise ValueError(f"graph {G.name!r} is not a valid undirected graph")
    stream.write(format_plain(G))
