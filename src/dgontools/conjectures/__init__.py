from .brill_noether import (
    BrillNoetherResult,
    BrillNoetherSummary,
    brill_noether_bound,
    check_brill_noether,
    brill_noether_geng_options,
    run_brill_noether,
)
from .subdivision import (
    SubdivisionResult,
    check_subdivision_extended,
    check_subdivision_fast,
    pad_divisor,
)

__all__ = [
    "BrillNoetherResult",
    "BrillNoetherSummary",
    "brill_noether_bound",
    "check_brill_noether",
    "brill_noether_geng_options",
    "run_brill_noether",
    "SubdivisionResult",
    "check_subdivision_extended",
    "check_subdivision_fast",
    "pad_divisor",
]
