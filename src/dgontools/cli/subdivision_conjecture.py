"""
Compare the gonality of every input graph with that of its k-regular
subdivision, and test the Brill–Noether bound along the way.

    dgon-subdivision-conjecture [-g] [-f] [-v[v]] [k] < infile
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

from dgontools.cli.common import fail, format_divisor, parts_per_edge, read_graphs
from dgontools.conjectures.subdivision import (
    SubdivisionResult,
    check_subdivision_extended,
    check_subdivision_fast,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dgon-subdivision-conjecture",
        description="Compare the gonality of every graph to that of its k-regular subdivision.",
    )
    parser.add_argument("k", nargs="?", type=parts_per_edge(2), default=2,
                        help="number of parts into which every edge is divided (default: 2)")
    parser.add_argument("-g", "--graph6", action="store_true",
                        help="use graph6 input instead of plain input")
    parser.add_argument("-f", "--fast", action="store_true",
                        help="do not compute the gonality of the subdivision; only look "
                             "for a positive rank divisor of smaller degree")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="-v: also report non-counterexamples; -vv: also their divisors")
    return parser


def report_extended(index: int, res: SubdivisionResult, verbosity: int, out: TextIO) -> None:
    if not (res.is_counterexample or verbosity >= 1):
        return
    line = (
        f'Graph {index} ("{res.name}"): (original gonality, subdivided gonality, '
        f"Brill–Noether bound) = ({res.gonality}, {res.gonality_subdivided}, {res.bound})."
    )
    if (res.is_counterexample or verbosity >= 2) and res.divisor is not None:
        line += f" Divisor: {format_divisor(res.divisor)}"
    print(line, file=out)


def report_fast(index: int, res: SubdivisionResult, verbosity: int, out: TextIO) -> None:
    subdiv_bad = res.fails_subdivision
    if res.fails_brill_noether:
        print(
            f'Graph {index} ("{res.name}") fails Brill–Noether bound! '
            f"Gonality: {res.gonality}, bound: {res.bound}.",
            file=out,
        )
    if not (subdiv_bad or verbosity >= 1):
        return
    line = f'Graph {index} ("{res.name}")'
    line += " fails subdivision conjecture!" if subdiv_bad else ": all OK."
    if subdiv_bad or verbosity >= 2:
        if res.divisor is not None:
            line += f" Divisor: {format_divisor(res.divisor)}"
        else:
            line += " (padded divisor does not have positive rank)"
    print(line, file=out)


def main(argv: Optional[List[str]] = None, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    args = build_parser().parse_args(argv)
    check = check_subdivision_fast if args.fast else check_subdivision_extended
    report = report_fast if args.fast else report_extended

    count_graphs = 0
    count_probs = 0
    try:
        for G in read_graphs(stdin, args.graph6):
            count_graphs += 1
            res = check(G, args.k)
            if res.is_counterexample:
                count_probs += 1
            report(count_graphs, res, args.verbose, stdout)
            stdout.flush()
    except ValueError as exc:
        return fail(str(exc))

    print(file=stdout)
    plural = "." if count_probs == 1 else "s."
    print(f"Summary: found {count_probs} counterexample{plural}", file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
