from .graph6 import (
    strip_graph6_header,
    g6_to_nx,
    g6_to_graph,
    graph_to_g6,
    read_graph6_lines,
)
from .plain import PlainFormatError, read_plain, format_plain, write_plain

__all__ = [
    "strip_graph6_header",
    "g6_to_nx",
    "g6_to_graph",
    "graph_to_g6",
    "read_graph6_lines",
    "PlainFormatError",
    "read_plain",
    "format_plain",
    "write_plain",
]
