"""
Convert between the plain edge-list format and graph6.

    dgon-convert-to-graph6 [k] < plain.in > graphs.g6
    dgon-convert-from-graph6 < graphs.g6 > plain.in

graph6 only stores simple graphs; graphs with parallel edges are reported on
stderr and skipped.
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

from dgontools.cli.common import fail, parts_per_edge
from dgontools.graphs.subdivide import subdivide
from dgontools.io.graph6 import graph_to_g6, read_graph6_lines
from dgontools.io.plain import read_plain, write_plain


def to_graph6_main(
    argv: Optional[List[str]] = None,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> int:
    parser = argparse.ArgumentParser(
        prog="dgon-convert-to-graph6",
        description="Convert plain-format graphs (optionally subdivided) to graph6.",
    )
    parser.add_argument("k", nargs="?", type=parts_per_edge(2), default=None,
                        help="take the k-regular subdivision first")
    args = parser.parse_args(argv)

    try:
        for G in read_plain(stdin):
            H = G if args.k is None else subdivide(G, args.k)
            if not H.is_simple():
                print(
                    f"ERROR: graph must be simple (no parallel edges) to be stored in graph6 "
                    f'format! Skipping graph "{G.name}".',
                    file=sys.stderr,
                )
                continue
            print(graph_to_g6(H), file=stdout)
    except ValueError as exc:
        return fail(str(exc))
    return 0


def from_graph6_main(
    argv: Optional[List[str]] = None,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> int:
    parser = argparse.ArgumentParser(
        prog="dgon-convert-from-graph6",
        description="Convert graph6 strings to the plain format.",
    )
    parser.parse_args(argv)

    try:
        for count, G in enumerate(read_graph6_lines(stdin), start=1):
            G.name = f'Graph {count} ("{G.name}")'
            write_plain(G, stdout)
    except ValueError as exc:
        return fail(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(to_graph6_main())
