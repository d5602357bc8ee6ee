from .boppana_halldorsson import (
    popcount,
    bits,
    to_bitset,
    is_subset,
    check_independent,
    check_clique,
    ramsey,
    approximate_maximum_independent_set,
    best_independent_set,
    independent_set_divisor,
)

__all__ = [
    "popcount",
    "bits",
    "to_bitset",
    "is_subset",
    "check_independent",
    "check_clique",
    "ramsey",
    "approximate_maximum_independent_set",
    "best_independent_set",
    "independent_set_divisor",
]
