"""
Run the fast subdivision check on every connected leafless graph on N
vertices produced by geng, and report the graphs whose padded gonality
witness does not survive subdivision.

    python examples/subdivision_sweep_geng.py 6 2
"""
import sys

from dgontools.conjectures.subdivision import check_subdivision_fast
from dgontools.external.nauty import geng_g6, nauty_available
from dgontools.io.graph6 import g6_to_graph


def sweep(n: int, k: int) -> None:
    tested = 0
    unverified = 0
    counterexamples = 0
    for g6 in geng_g6(n, connected=True, min_degree=2):
        res = check_subdivision_fast(g6_to_graph(g6), k)
        tested += 1
        if res.is_counterexample:
            counterexamples += 1
            print(f"[n={n}] {g6}: counterexample {res}")
        elif not res.padded_witness_verified:
            unverified += 1
            print(f"[n={n}] {g6}: padded witness lost positive rank")
        if tested % 100 == 0:
            print(f"[n={n}] tested {tested}", file=sys.stderr)
    print(f"[n={n}, k={k}] tested={tested} counterexamples={counterexamples} unverified={unverified}")


if __name__ == "__main__":
    if not nauty_available():
        sys.exit("geng not found; set NAUTY_GENG")
    n = int(sys.argv[1]) if len(sys.argv) > 1 else 6
    k = int(sys.argv[2]) if len(sys.argv) > 2 else 2
    sweep(n, k)
