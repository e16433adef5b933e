from __future__ import annotations

from typing import Dict, Union

import polars as pl

from ..core.errors import ValidationError
from ..core.graph import Graph
from ..io.codec import EdgeView, from_edge_view, to_edge_view

_EDGE_SCHEMA = {
    "id": pl.Utf8,
    "from": pl.Int64,
    "to": pl.Int64,
    "index": pl.Int64,
    "self_loop": pl.Boolean,
}


def to_dataframes(source: Union[Graph, EdgeView]) -> Dict[str, pl.DataFrame]:
    """
    Export an edge view (or a graph, through ``to_edge_view``) to Polars DataFrames.

    Returns a dictionary with two tables:
    - 'nodes': one ``id`` row per node
    - 'edges': ``id, from, to, index, self_loop`` per edge occurrence, in view order

    Args:
        source: Graph or EdgeView to export

    Returns:
        Dictionary mapping table names to Polars DataFrames
    """
    view = to_edge_view(source) if isinstance(source, Graph) else source

    nodes = pl.DataFrame({"id": list(view.nodes)}, schema={"id": pl.Int64})

    edges_data = [
        {
            "id": e.id,
            "from": e.source,
            "to": e.target,
            "index": e.index,
            "self_loop": e.is_self_loop,
        }
        for e in view.edges
    ]
    edges = pl.DataFrame(edges_data, schema=_EDGE_SCHEMA) if edges_data else pl.DataFrame(
        schema=_EDGE_SCHEMA
    )
    return {"nodes": nodes, "edges": edges}


def from_dataframes(edges: pl.DataFrame):
    """
    Rebuild ``(adj_matrix, adj_list)`` from an edges table with ``from``/``to`` columns.

    Extra columns are ignored; rows are read in table order.
    """
    missing = {"from", "to"} - set(edges.columns)
    if missing:
        raise ValidationError(f"Edges table is missing column(s): {sorted(missing)}")
    if edges.select(pl.col("from").is_null().any() | pl.col("to").is_null().any()).item():
        raise ValidationError("Edges table has null endpoints")
    return from_edge_view(edges.select("from", "to").iter_rows())
