from .graph import Graph, validate, require_searchable, check_divisor_shape
from .connectivity import is_connected_adj, connected_components_adj
from .subdivide import subdivide

__all__ = [
    "Graph",
    "validate",
    "require_searchable",
    "check_divisor_shape",
    "is_connected_adj",
    "connected_components_adj",
    "subdivide",
]
