from .codec import (
    EdgeView,
    ViewEdge,
    from_edge_view,
    graph_from_edge_view,
    loads,
    parse,
    parse_list,
    parse_matrix,
    parse_text,
    to_edge_view,
)

__all__ = [
    "EdgeView", "ViewEdge", "loads", "parse", "parse_list", "parse_matrix", "parse_text",
    "to_edge_view", "from_edge_view", "graph_from_edge_view",
]
