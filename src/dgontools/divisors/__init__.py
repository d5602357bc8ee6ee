from .workspace import Workspace
from .burning import burn, fire, is_reduced, reduce_divisor
from .rank import has_positive_rank
from .search import (
    iter_v0_candidates,
    find_positive_rank_divisor,
    find_all_positive_rank_v0_reduced_divisors,
    find_gonality,
    gonality_with_witness,
)
from .parallel import (
    find_positive_rank_divisor_parallel,
    find_all_positive_rank_v0_reduced_divisors_parallel,
    find_gonality_parallel,
)

__all__ = [
    "Workspace",
    "burn",
    "fire",
    "is_reduced",
    "reduce_divisor",
    "has_positive_rank",
    "iter_v0_candidates",
    "find_positive_rank_divisor",
    "find_all_positive_rank_v0_reduced_divisors",
    "find_gonality",
    "gonality_with_witness",
    "find_positive_rank_divisor_parallel",
    "find_all_positive_rank_v0_reduced_divisors_parallel",
    "find_gonality_parallel",
]
