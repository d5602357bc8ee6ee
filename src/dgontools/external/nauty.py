from __future__ import annotations

import os
import shutil
import subprocess
import sys
from typing import Iterator, List


NAUTY_GENG = os.environ.get("NAUTY_GENG", "geng")


def nauty_available() -> bool:
    """Returns True iff geng appears runnable."""
    return shutil.which(NAUTY_GENG) is not None


def geng_command(
    n: int,
    *,
    connected: bool = False,
    biconnected: bool = False,
    min_degree: int | None = None,
    max_degree: int | None = None,
    min_edges: int | None = None,
    max_edges: int | None = None,
    res: int | None = None,
    mod: int | None = None,
    quiet: bool = True,
) -> List[str]:
    """Build the geng argument vector (without running it)."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    if (res is None) != (mod is None):
        raise ValueError("res and mod must be given together")
    if mod is not None and not (mod >= 1 and 0 <= res < mod):  # type: ignore[operator]
        raise ValueError(f"need 0 <= res < mod, got {res}/{mod}")

    cmd = [NAUTY_GENG, "-g"]
    if quiet:
        cmd.append("-q")
    if biconnected:
        cmd.append("-C")
    elif connected:
        cmd.append("-c")
    if min_degree is not None:
        cmd.append(f"-d{min_degree}")
    if max_degree is not None:
        cmd.append(f"-D{max_degree}")

    cmd.append(str(n))
    if min_edges is not None or max_edges is not None:
        lo = str(min_edges) if min_edges is not None else "0"
        hi = str(max_edges) if max_edges is not None else ""
        cmd.append(f"{lo}:{hi}")
    if mod is not None:
        cmd.append(f"{res}/{mod}")
    return cmd


def geng_g6(n: int, **options) -> Iterator[str]:
    """Stream graph6 strings from nauty's geng.

    Parameters
    ----------
    n : int
        Number of vertices.
    connected : bool
        Only connected graphs (-c).
    biconnected : bool
        Only biconnected graphs (-C); implies connected.
    min_degree, max_degree : int, optional
        Degree bounds (-d, -D).
    min_edges, max_edges : int, optional
        Edge count bounds (passed as 'min_edges:max_edges').
    res, mod : int, optional
        Only produce class res of mod disjoint classes.
    quiet : bool
        Suppress geng's auxiliary output (-q).
    """
    if not nauty_available():
        raise RuntimeError(
            "nauty not available (need 'geng' in PATH, or set NAUTY_GENG)."
        )

    cmd = geng_command(n, **options)
    if not options.get("quiet", True):
        print(">A Calling " + " ".join(cmd), file=sys.stderr)

    p = subprocess.Popen(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
    assert p.stdout is not None

    for line in p.stdout:
        s = line.strip()
        if not s or s.startswith(">"):
            continue
        yield s

    err = p.stderr.read() if p.stderr is not None else ""
    p.wait()
    if p.returncode != 0:
        raise RuntimeError(f"geng failed for n={n} with return code {p.returncode}: {err.strip()}")
    if err and not options.get("quiet", True):
        print(err.rstrip(), file=sys.stderr)
