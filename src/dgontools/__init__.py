"""
dgontools: divisorial gonality of graphs in the chip-firing model.

Dhar's burning algorithm, divisor reduction, positive rank tests, brute
force gonality search, Boppana–Halldórsson independent sets, and checks of
the Brill–Noether and subdivision conjectures.
"""

# Graph model and I/O
from .graphs.graph import Graph, validate
from .graphs.subdivide import subdivide
from .io.graph6 import g6_to_graph, graph_to_g6
from .io.plain import read_plain, write_plain

# Chip-firing engine
from .divisors.workspace import Workspace
from .divisors.burning import burn, is_reduced, reduce_divisor
from .divisors.rank import has_positive_rank
from .divisors.search import (
    find_positive_rank_divisor,
    find_all_positive_rank_v0_reduced_divisors,
    find_gonality,
    gonality_with_witness,
)
from .divisors.parallel import (
    find_positive_rank_divisor_parallel,
    find_all_positive_rank_v0_reduced_divisors_parallel,
    find_gonality_parallel,
)

# Independent sets
from .independent_sets.boppana_halldorsson import (
    approximate_maximum_independent_set,
    best_independent_set,
    independent_set_divisor,
)

# Conjectures
from .conjectures.brill_noether import brill_noether_bound, check_brill_noether
from .conjectures.subdivision import check_subdivision_extended, check_subdivision_fast

# Nauty wrappers
from .external.nauty import nauty_available, geng_g6

__all__ = [
    # Graphs
    "Graph",
    "validate",
    "subdivide",
    # IO
    "g6_to_graph",
    "graph_to_g6",
    "read_plain",
    "write_plain",
    # Engine
    "Workspace",
    "burn",
    "is_reduced",
    "reduce_divisor",
    "has_positive_rank",
    "find_positive_rank_divisor",
    "find_all_positive_rank_v0_reduced_divisors",
    "find_gonality",
    "gonality_with_witness",
    "find_positive_rank_divisor_parallel",
    "find_all_positive_rank_v0_reduced_divisors_parallel",
    "find_gonality_parallel",
    # Independent sets
    "approximate_maximum_independent_set",
    "best_independent_set",
    "independent_set_divisor",
    # Conjectures
    "brill_noether_bound",
    "check_brill_noether",
    "check_subdivision_extended",
    "check_subdivision_fast",
    # Nauty
    "nauty_available",
    "geng_g6",
]
