from __future__ import annotations

import argparse
import sys
from typing import Iterator, Sequence, TextIO

from dgontools import limits
from dgontools.graphs.graph import Graph
from dgontools.io.graph6 import read_graph6_lines
from dgontools.io.plain import read_plain


def read_graphs(stream: TextIO, graph6: bool) -> Iterator[Graph]:
    """Graphs from a plain-format stream, or one graph6 string per line."""
    if graph6:
        return read_graph6_lines(stream)
    return read_plain(stream)


def parts_per_edge(lo: int):
    """argparse type for the subdivision order k in [lo, MAX_PARTS_PER_EDGE]."""

    def parse(text: str) -> int:
        try:
            k = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer {text!r}") from None
        if not lo <= k <= limits.MAX_PARTS_PER_EDGE:
            raise argparse.ArgumentTypeError(
                f"invalid value of k (should be between {lo} and {limits.MAX_PARTS_PER_EDGE})"
            )
        return k

    return parse


def format_divisor(divisor: Sequence[int]) -> str:
    return "[" + ", ".join(str(x) for x in divisor) + "]"


def fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1
