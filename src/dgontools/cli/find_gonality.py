"""
Compute the divisorial gonality of every graph read from standard input.

    dgon-find-gonality [-g] [-a] [-v[v]] [k] < infile

With k > 1 every edge is first divided into k parts. Input is the plain
edge-list format unless -g is given (one graph6 string per line).
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, TextIO

from dgontools.cli.common import fail, format_divisor, parts_per_edge, read_graphs
from dgontools.divisors.burning import is_reduced, reduce_divisor
from dgontools.divisors.search import (
    find_all_positive_rank_v0_reduced_divisors,
    gonality_with_witness,
)
from dgontools.divisors.workspace import Workspace
from dgontools.graphs.graph import Graph
from dgontools.graphs.subdivide import subdivide


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dgon-find-gonality",
        description="Find the gonality of the graphs given on standard input.",
    )
    parser.add_argument("k", nargs="?", type=parts_per_edge(1), default=1,
                        help="number of parts into which every edge is divided (default: 1)")
    parser.add_argument("-g", "--graph6", action="store_true",
                        help="use graph6 input instead of plain input")
    parser.add_argument("-a", "--all", action="store_true",
                        help="find (and show) all optimal v0-reduced divisors")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="-v: show the optimal divisor; -vv: also its reduction to every vertex")
    return parser


def describe_divisor(H: Graph, divisor: Sequence[int], verbosity: int, out: TextIO) -> None:
    # a private workspace: this may run inside a search callback
    ws = Workspace.for_graph(H)
    reduced, _ = reduce_divisor(H, divisor, 0, ws, check_graph=False)
    assert is_reduced(H, reduced, 0, ws)
    print(f"  Positive rank divisor: {format_divisor(reduced)}", file=out)
    if verbosity >= 2:
        for target in range(H.n):
            reduced, _ = reduce_divisor(H, divisor, target, ws, check_graph=False)
            assert is_reduced(H, reduced, target, ws)
            pad = "  " if target < 10 else " "
            print(f"    Reduced to vertex {target}:{pad}{format_divisor(reduced)}", file=out)


def solve(G: Graph, k: int, show_all: bool, verbosity: int, out: TextIO) -> int:
    H = G if k == 1 else subdivide(G, k)
    if show_all:
        print(f"{G.name}:", file=out)
        ws = Workspace.for_graph(H)
        for deg in range(1, H.n + 1):
            found = find_all_positive_rank_v0_reduced_divisors(
                H, deg, lambda D: describe_divisor(H, D, verbosity, out), ws
            )
            if found:
                return deg
        raise RuntimeError(f"no positive rank divisor found on {G.name!r}")

    gon, witness = gonality_with_witness(H)
    print(f"{G.name}: {gon}", file=out)
    if verbosity >= 1:
        describe_divisor(H, witness, verbosity, out)
    return gon


def main(argv: Optional[List[str]] = None, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    args = build_parser().parse_args(argv)
    try:
        for G in read_graphs(stdin, args.graph6):
            solve(G, args.k, args.all, args.verbose, stdout)
            stdout.flush()
    except ValueError as exc:
        return fail(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())
