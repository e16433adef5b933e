"""
Structural classification of a single graph.

``classify`` reports edge and node counts, density, whether the graph is
simple or a multigraph, one special-structure tag and the per-node degree and
neighbour summaries. Input graphs are expected to be parsed permissively
(self-loops and parallel edges allowed).
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

import numpy as np
import scipy.sparse as sp
from scipy.sparse.csgraph import connected_components

from ..core.graph import Graph
from ..core.structure import GraphType, SpecialType
from ..io.codec import EdgeView, graph_from_edge_view

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphSummary:
    edges: int
    nodes: int
    density: float
    graph_type: GraphType
    special_type: SpecialType
    adjacency_matrix: list[list[int]] = field(default_factory=list)
    adjacency_list: list[list[int]] = field(default_factory=list)
    node_degrees: list[int] = field(default_factory=list)
    node_neighbors: list[list[int]] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "GraphSummary":
        """Canonical record for a graph without nodes or without edges."""
        return cls(
            edges=0,
            nodes=0,
            density=0,
            graph_type=GraphType.SIMPLE,
            special_type=SpecialType.NONE,
        )

    @property
    def is_empty(self) -> bool:
        return self.nodes == 0

    def to_dict(self) -> dict[str, Any]:
        """Display record, keyed the way the results table labels it."""
        return {
            "Edges": self.edges,
            "Nodes": self.nodes,
            "Graph Density": self.density,
            "Graph Type": self.graph_type.value,
            "Special Type": self.special_type.value,
            "Adjacency Matrix": self.adjacency_matrix,
            "Adjacency List": self.adjacency_list,
            "Node Degrees": self.node_degrees,
            "Node Neighbors": self.node_neighbors,
        }


# ==================== Structure predicates ====================


def _undirected(matrix: np.ndarray) -> np.ndarray:
    """Boolean symmetric matrix: i~j if either direction has an edge, diagonal cleared."""
    und = (matrix + matrix.T) > 0
    np.fill_diagonal(und, False)
    return und


def is_simple(matrix: np.ndarray) -> bool:
    return not (np.diagonal(matrix).any() or (matrix > 1).any())


def is_tree(matrix: np.ndarray) -> bool:
    """Exactly n-1 edges and a connected undirected simplification.

    Edges are counted with multiplicity and per direction, so a digon
    (i->j and j->i) or a doubled edge closes a cycle and is not a tree.
    """
    n = matrix.shape[0]
    if np.diagonal(matrix).any():
        return False
    if int(matrix.sum()) != n - 1:
        return False
    n_components, _ = connected_components(sp.csr_matrix(_undirected(matrix)), directed=False)
    return n_components == 1


def is_bipartite(matrix: np.ndarray) -> bool:
    """2-colour the undirected simplification breadth-first from every uncoloured node."""
    n = matrix.shape[0]
    if np.diagonal(matrix).any():
        return False
    und = _undirected(matrix)
    neighbors = [np.flatnonzero(und[i]).tolist() for i in range(n)]
    colors = [-1] * n
    for start in range(n):
        if colors[start] != -1:
            continue
        colors[start] = 0
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in neighbors[u]:
                if colors[v] == -1:
                    colors[v] = 1 - colors[u]
                    queue.append(v)
                elif colors[v] == colors[u]:
                    return False
    return True


def is_complete(matrix: np.ndarray) -> bool:
    """Every ordered pair i != j has at least one edge; the diagonal is ignored."""
    off_diagonal = ~np.eye(matrix.shape[0], dtype=bool)
    return bool((matrix[off_diagonal] >= 1).all())


# Evaluated in order, first match wins. A graph may satisfy several predicates
# (the 2-node digon is both bipartite and complete); only the earliest is reported.
SPECIAL_TYPE_CHECKS: tuple[tuple[Callable[[np.ndarray], bool], SpecialType], ...] = (
    (is_tree, SpecialType.TREE),
    (is_bipartite, SpecialType.BIPARTITE),
    (is_complete, SpecialType.COMPLETE),
)


def special_type(matrix: np.ndarray) -> SpecialType:
    for predicate, label in SPECIAL_TYPE_CHECKS:
        if predicate(matrix):
            return label
    return SpecialType.NONE


# ==================== Entry points ====================


def classify(graph: Graph) -> GraphSummary:
    """
    Classify ``graph``.

    A graph with no nodes, or whose matrix is all zeros, returns
    ``GraphSummary.empty()``.

    Density divides the edge count by ``n*(n-1)`` for simple graphs and by
    ``n*n`` for multigraphs, where self-loops count as possible edges.
    """
    matrix = graph.matrix
    n = graph.n
    if n == 0 or not matrix.any():
        logger.debug(f"Graph with {n} nodes has no edges, returning empty summary")
        return GraphSummary.empty()

    total_edges = int(matrix.sum())
    simple = is_simple(matrix)
    max_possible = n * (n - 1) if simple else n * n
    density = total_edges / max_possible

    summary = GraphSummary(
        edges=total_edges,
        nodes=n,
        density=density,
        graph_type=GraphType.SIMPLE if simple else GraphType.MULTI,
        special_type=special_type(matrix),
        adjacency_matrix=matrix.tolist(),
        adjacency_list=[list(row) for row in graph.adjacency],
        node_degrees=graph.out_degrees,
        node_neighbors=graph.neighbors,
    )
    logger.debug(
        f"Classified graph: {n} nodes, {total_edges} edges, "
        f"{summary.graph_type.value}, special={summary.special_type.value}"
    )
    return summary


def analyze_edges(edges: EdgeView | Iterable[Any]) -> GraphSummary:
    """Classify a bare edge collection; node count is ``max endpoint + 1``."""
    return classify(graph_from_edge_view(edges))
