"""
Test the Brill–Noether bound on all relevant graphs with n vertices, as
generated by nauty's geng (connected, minimum degree 2, at most 3n - 9
edges).

    dgon-brill-noether-geng [-C] [-q] [-v[v]] [-j PROCESSES] n [res/mod]

Requires geng in PATH, or NAUTY_GENG pointing at it.
"""
from __future__ import annotations

import argparse
import sys
from multiprocessing import cpu_count
from typing import List, Optional, TextIO, Tuple

from dgontools import limits
from dgontools.cli.common import fail
from dgontools.conjectures.brill_noether import (
    MIN_N,
    brill_noether_geng_options,
    run_brill_noether,
)
from dgontools.external.nauty import geng_g6


MAX_MOD = 1234567


def vertex_count(text: str) -> int:
    try:
        n = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer {text!r}") from None
    if not MIN_N <= n <= limits.MAX_N:
        raise argparse.ArgumentTypeError(f"n must be in [{MIN_N}, {limits.MAX_N}]")
    return n


def res_mod(text: str) -> Tuple[int, int]:
    parts = text.split("/")
    try:
        res, mod = (int(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected res/mod, got {text!r}") from None
    if not 1 <= mod <= MAX_MOD:
        raise argparse.ArgumentTypeError(f"mod must be in the range [1,{MAX_MOD}]")
    if not 0 <= res < mod:
        raise argparse.ArgumentTypeError("res must be in the range [0,mod)")
    return res, mod


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dgon-brill-noether-geng",
        description="Test the Brill–Noether conjecture for all graphs of a given number of vertices.",
    )
    parser.add_argument("n", type=vertex_count, help="the number of vertices")
    parser.add_argument("res_mod", nargs="?", type=res_mod, default=None, metavar="res/mod",
                        help="only generate subset res out of subsets 0..mod-1")
    parser.add_argument("-C", "--biconnected", action="store_true",
                        help="only test biconnected graphs")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="suppress auxiliary output from geng")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="-v: progress on stderr; -vv: the conclusion for every graph")
    parser.add_argument("-j", "--processes", type=int, default=max(1, cpu_count() - 1),
                        help="worker processes (default: cpu count - 1)")
    parser.add_argument("--tries", type=int, default=limits.INDEPENDENT_SET_NUM_TRIES,
                        help="independent set approximation trials per graph")
    return parser


def main(argv: Optional[List[str]] = None, stdout: TextIO = sys.stdout) -> int:
    args = build_parser().parse_args(argv)
    options = brill_noether_geng_options(args.n, biconnected=args.biconnected)
    if args.res_mod is not None:
        options["res"], options["mod"] = args.res_mod
    options["quiet"] = args.quiet

    try:
        graphs = geng_g6(args.n, **options)
        summary = run_brill_noether(
            graphs,
            processes=args.processes,
            tries=args.tries,
            verbosity=args.verbose,
        )
    except RuntimeError as exc:
        return fail(str(exc))
    except KeyboardInterrupt:
        print("\n\nReceived SIGINT; aborting...", file=sys.stderr)
        return 1

    print(file=stdout)
    print(f"Summary: tested {summary.tested} graphs; found {summary.problems} problems.", file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
