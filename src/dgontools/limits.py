"""
Size limits and tuning constants.

Every value can be overridden through the environment, e.g.

    DGON_MAX_N=40 dgon-brill-noether-geng 10
"""
from __future__ import annotations

import os


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


# Largest vertex count any engine call accepts.
MAX_N = _env_int("DGON_MAX_N", 1500)

# Largest edge count accepted by the plain-format reader.
MAX_M = _env_int("DGON_MAX_M", 100_000)

# Edges may be subdivided into at most this many parts.
MAX_PARTS_PER_EDGE = _env_int("DGON_MAX_PARTS_PER_EDGE", 10)

# Number of independent-set approximation trials before exact search.
# Around 7 is usually enough; extra trials are cheap compared to gonality.
INDEPENDENT_SET_NUM_TRIES = _env_int("DGON_INDEPENDENT_SET_TRIES", 15)
