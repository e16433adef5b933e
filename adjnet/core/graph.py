"""
Internal graph representation.

A ``Graph`` is a directed multigraph over the node ids ``0..n-1``. The per-node
adjacency tuples are the only stored structure; the adjacency matrix, degree
sequences and neighbour sets are derived from them on demand.
"""
from __future__ import annotations

from collections import Counter
from functools import cached_property
from typing import Iterable, Iterator, NamedTuple

import numpy as np

from ..utils.validation import is_index, unique_iter
from .errors import ValidationError


class EdgeKey(NamedTuple):
    """Ordered ``(source, target)`` pair, usable directly as a set or dict key."""

    source: int
    target: int

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target


class Graph:
    """Immutable directed multigraph on ``0..n-1``.

    Parameters
    ----------
    adjacency : Iterable[Iterable[int]]
        One row of destination ids per node. Repeated ids are parallel edges,
        an id equal to its own row index is a self-loop.

    Raises
    ------
    ValidationError
        If a destination is not an integer in ``[0, n)``.
    """

    def __init__(self, adjacency: Iterable[Iterable[int]] = ()):
        rows = tuple(tuple(row) for row in adjacency)
        n = len(rows)
        for i, row in enumerate(rows):
            for j in row:
                if not is_index(j, n):
                    raise ValidationError(
                        f"Edge {i}->{j!r} has an endpoint outside the node range [0, {n})"
                    )
        self._n = n
        # normalise numpy integers so rows hash and compare like plain ints
        self._adjacency = tuple(tuple(int(j) for j in row) for row in rows)

    # ==================== Constructors ====================

    @classmethod
    def empty(cls, n: int = 0) -> "Graph":
        """Graph with ``n`` nodes and no edges."""
        return cls([()] * n)

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[tuple[int, int]]) -> "Graph":
        """Build a graph from ``(source, target)`` pairs.

        Rows keep the order in which the pairs are given.
        """
        rows: list[list[int]] = [[] for _ in range(n)]
        for source, target in edges:
            if not is_index(source, n):
                raise ValidationError(
                    f"Edge {source!r}->{target!r} has an endpoint outside the node range [0, {n})"
                )
            rows[source].append(target)
        return cls(rows)

    # ==================== Stored structure ====================

    @property
    def n(self) -> int:
        return self._n

    @property
    def adjacency(self) -> tuple[tuple[int, ...], ...]:
        return self._adjacency

    def __len__(self) -> int:
        return self._n

    # ==================== Derived views ====================

    @cached_property
    def matrix(self) -> np.ndarray:
        """Square multiplicity matrix; ``matrix[i, j]`` counts edges i->j (read-only)."""
        m = np.zeros((self._n, self._n), dtype=np.int64)
        for i, row in enumerate(self._adjacency):
            for j in row:
                m[i, j] += 1
        m.setflags(write=False)
        return m

    @property
    def number_of_edges(self) -> int:
        return sum(len(row) for row in self._adjacency)

    @property
    def out_degrees(self) -> list[int]:
        return [len(row) for row in self._adjacency]

    @property
    def in_degrees(self) -> list[int]:
        counts = Counter(j for row in self._adjacency for j in row)
        return [counts.get(i, 0) for i in range(self._n)]

    @property
    def neighbors(self) -> list[list[int]]:
        """Adjacency rows with duplicates removed, first occurrence kept."""
        return [list(unique_iter(row)) for row in self._adjacency]

    def edge_pairs(self) -> Iterator[EdgeKey]:
        """Every edge occurrence, row-major in adjacency order."""
        for i, row in enumerate(self._adjacency):
            for j in row:
                yield EdgeKey(i, j)

    def edge_set(self) -> frozenset[EdgeKey]:
        """Distinct ordered pairs; parallel edges collapse to one key."""
        return frozenset(self.edge_pairs())

    # ==================== Dunder ====================

    def __eq__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        return self._adjacency == other._adjacency

    def __hash__(self):
        return hash(self._adjacency)

    def __repr__(self):
        return f"Graph(n={self._n}, edges={self.number_of_edges})"
