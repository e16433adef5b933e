"""
Set-style operations on simple directed graphs.

Operands are expected to come from strict parsing (no self-loops, no
duplicate neighbours). Every operation works on the edge set of distinct
ordered pairs, so any parallelism left in an operand collapses. Results are
new graphs returned as ``EdgeView``s with edges in ascending ``(from, to)``
order; operands are never modified.
"""
from __future__ import annotations

import logging
from typing import AbstractSet, Iterable

from ..core.errors import ValidationError
from ..core.graph import EdgeKey, Graph
from ..core.structure import SetOperation
from ..io.codec import EdgeView, to_edge_view

logger = logging.getLogger(__name__)


def _require_same_size(a: Graph, b: Graph) -> int:
    if a.n != b.n:
        raise ValidationError(
            f"Graphs must have the same number of nodes (got {a.n} and {b.n})"
        )
    return a.n


def _view(n: int, edges: Iterable[EdgeKey]) -> EdgeView:
    return to_edge_view(Graph.from_edges(n, sorted(edges)))


def union(a: Graph, b: Graph) -> EdgeView:
    n = _require_same_size(a, b)
    return _view(n, a.edge_set() | b.edge_set())


def intersection(a: Graph, b: Graph) -> EdgeView:
    n = _require_same_size(a, b)
    return _view(n, a.edge_set() & b.edge_set())


def complement_edges(n: int, edges: AbstractSet[EdgeKey]) -> set[EdgeKey]:
    """All ordered pairs i != j not in ``edges``; self-loops are never added."""
    return {
        EdgeKey(i, j)
        for i in range(n)
        for j in range(n)
        if i != j and EdgeKey(i, j) not in edges
    }


def complement(graph: Graph) -> EdgeView:
    return _view(graph.n, complement_edges(graph.n, graph.edge_set()))


def cartesian_product(a: Graph, b: Graph) -> EdgeView:
    """
    Directed Cartesian product ``a □ b``.

    Node ``(i, j)`` is numbered ``i * b.n + j``. It has an edge to ``(i', j)``
    for every edge ``i -> i'`` of ``a`` and to ``(i, j')`` for every edge
    ``j -> j'`` of ``b``.
    """
    na, nb = a.n, b.n
    a_neighbors = a.neighbors
    b_neighbors = b.neighbors
    edges = set()
    for i in range(na):
        for j in range(nb):
            u = i * nb + j
            for ip in a_neighbors[i]:
                edges.add(EdgeKey(u, ip * nb + j))
            for jp in b_neighbors[j]:
                edges.add(EdgeKey(u, i * nb + jp))
    logger.debug(f"Cartesian product of {na}- and {nb}-node graphs has {len(edges)} edges")
    return _view(na * nb, edges)


_DISPATCH = {
    SetOperation.UNION: union,
    SetOperation.INTERSECTION: intersection,
    SetOperation.COMPLEMENT: complement,
    SetOperation.CARTESIAN_PRODUCT: cartesian_product,
}


def apply(kind: SetOperation | str, *graphs: Graph) -> EdgeView:
    """Run the operation named by ``kind`` on ``graphs``."""
    try:
        kind = SetOperation(kind)
    except ValueError:
        raise ValidationError(f"Unknown set operation {kind!r}") from None
    if len(graphs) != kind.arity:
        raise ValidationError(
            f"{kind.value} takes {kind.arity} graph(s), got {len(graphs)}"
        )
    return _DISPATCH[kind](*graphs)
