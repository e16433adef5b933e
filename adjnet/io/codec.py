"""
Conversion between external graph encodings and ``adjnet.core.graph.Graph``.

Two external encodings are understood, both JSON arrays:

- adjacency list: ``[[1, 2], [2], []]``, one neighbour array per node;
  repeated neighbours are parallel edges.
- adjacency matrix: ``[[0, 1], [0, 0]]``, square, cell ``[i][j]`` is the
  number of edges ``i -> j``.

How strict the parser is depends only on the ``ParseOptions`` passed in (see
``adjnet.core.config.PERMISSIVE`` and ``adjnet.core.config.STRICT``).

In the other direction ``to_edge_view`` flattens a graph into a node list and
an edge list whose ids stay stable for a given input, and ``from_edge_view``
rebuilds matrix and list form from any collection of ``(from, to)`` pairs.
"""
from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

import numpy as np

from ..core.config import PERMISSIVE, ParseOptions
from ..core.errors import MalformedInputError, ValidationError
from ..core.graph import EdgeKey, Graph
from ..core.structure import EntryDomain, Representation
from ..utils.validation import is_array_of_arrays, is_index, is_non_negative_int, is_sequence

logger = logging.getLogger(__name__)


# ---------------------------
# Edge view
# ---------------------------


@dataclass(frozen=True, order=True)
class ViewEdge:
    """One edge occurrence.

    ``index`` numbers the parallel edges of the same ordered pair (0-based,
    discovery order), which keeps self-loops and parallels individually
    addressable by consumers such as renderers.
    """

    source: int
    target: int
    index: int = 0

    @property
    def id(self) -> str:
        return f"{self.source}-{self.target}-{self.index}"

    @property
    def is_self_loop(self) -> bool:
        return self.key.is_self_loop

    @property
    def key(self) -> EdgeKey:
        return EdgeKey(self.source, self.target)

    def to_dict(self) -> dict:
        return {"id": self.id, "from": self.source, "to": self.target}


@dataclass(frozen=True)
class EdgeView:
    nodes: tuple[int, ...]
    edges: tuple[ViewEdge, ...]

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def edge_keys(self) -> set[EdgeKey]:
        return {e.key for e in self.edges}

    def to_dict(self) -> dict:
        return {
            "nodes": [{"id": i} for i in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }


# ---------------------------
# Helpers
# ---------------------------


def _coerce_representation(representation: Any) -> Representation:
    try:
        return Representation(representation)
    except ValueError:
        raise ValidationError(
            f"Representation must be 'matrix' or 'list', got {representation!r}"
        ) from None


def _require_array_of_arrays(raw: Any, what: str) -> None:
    if not is_array_of_arrays(raw):
        raise MalformedInputError(f"Invalid {what}: must be an array of arrays")


def loads(text: str | bytes) -> list:
    """Decode JSON text that must hold an array of arrays."""
    if not isinstance(text, (str, bytes, bytearray)):
        raise MalformedInputError(f"Expected JSON text, got {type(text).__name__}")
    # JSONDecodeError and UnicodeDecodeError are ValueErrors, as is the
    # int-digit limit; RecursionError comes from very deep nesting
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise MalformedInputError("Input string must be a valid JSON array of arrays") from e
    _require_array_of_arrays(data, "graph data")
    return data


# ---------------------------
# Parsing
# ---------------------------


def parse_list(raw: Sequence[Sequence[int]], n: int | None = None,
               options: ParseOptions = PERMISSIVE) -> Graph:
    """
    Parse an adjacency list.

    Parameters
    ----------
    raw : sequence of sequences of int
        ``raw[i]`` lists the destinations of the edges leaving node ``i``.
    n : int, optional
        Expected node count; defaults to ``len(raw)``.
    options : ParseOptions
        Strictness. With parallel edges disallowed, each row is also sorted.

    Raises
    ------
    MalformedInputError
        ``raw`` is not an array of arrays.
    ValidationError
        Wrong length, out-of-range or non-integer neighbour, self-loop or
        repeated neighbour where the options forbid it.
    """
    _require_array_of_arrays(raw, "adjacency list")
    if n is None:
        n = len(raw)
    elif n != len(raw):
        raise ValidationError(f"Adjacency list has {len(raw)} rows, expected {n}")

    rows = []
    for i, neighbors in enumerate(raw):
        seen = set()
        row = []
        for j in neighbors:
            if not is_index(j, n):
                raise ValidationError(
                    f"Invalid neighbor {j!r} of node {i}: must be an integer in [0, {n})"
                )
            j = int(j)
            if j == i and not options.allow_self_loops:
                raise ValidationError(f"Self-loop on node {i} is not allowed")
            if j in seen and not options.allow_parallel_edges:
                raise ValidationError(f"Duplicate neighbor {j} of node {i} is not allowed")
            seen.add(j)
            row.append(j)
        if not options.allow_parallel_edges:
            row.sort()
        rows.append(row)

    logger.debug(f"Parsed adjacency list with {n} nodes")
    return Graph(rows)


def parse_matrix(raw: Sequence[Sequence[int]] | np.ndarray,
                 options: ParseOptions = PERMISSIVE) -> Graph:
    """
    Parse a square adjacency matrix of edge multiplicities.

    Parameters
    ----------
    raw : sequence of sequences of int or 2-D numpy array
    options : ParseOptions
        ``entry_domain=ZERO_OR_ONE`` restricts cells to 0/1,
        ``allow_self_loops=False`` requires a zero diagonal.

    Raises
    ------
    MalformedInputError
        ``raw`` is not an array of arrays.
    ValidationError
        Non-square shape, or a cell outside the allowed domain.
    """
    if isinstance(raw, np.ndarray):
        raw = raw.tolist()
    _require_array_of_arrays(raw, "adjacency matrix")
    n = len(raw)
    if not all(len(row) == n for row in raw):
        raise ValidationError("Invalid matrix: must be square")

    rows = []
    for i, cells in enumerate(raw):
        row = []
        for j, val in enumerate(cells):
            if not is_non_negative_int(val):
                raise ValidationError(
                    f"Matrix entry [{i}][{j}]={val!r} must be a non-negative integer"
                )
            if val > 1 and options.entry_domain is EntryDomain.ZERO_OR_ONE:
                raise ValidationError(f"Matrix entry [{i}][{j}]={val!r}: entries must be 0 or 1")
            if val > 1 and not options.allow_parallel_edges:
                raise ValidationError(f"Matrix entry [{i}][{j}]={val!r}: parallel edges not allowed")
            if val and i == j and not options.allow_self_loops:
                raise ValidationError(f"Self-loop on node {i} is not allowed")
            row.extend([j] * int(val))
        rows.append(row)

    logger.debug(f"Parsed {n}x{n} adjacency matrix")
    return Graph(rows)


def parse(raw: Any, representation: Representation | str,
          options: ParseOptions = PERMISSIVE) -> Graph:
    """Parse already-decoded data in either representation."""
    representation = _coerce_representation(representation)
    if representation is Representation.MATRIX:
        return parse_matrix(raw, options)
    return parse_list(raw, options=options)


def parse_text(text: str | bytes, representation: Representation | str,
               options: ParseOptions = PERMISSIVE) -> Graph:
    """Decode JSON text and parse it; see ``parse``."""
    representation = _coerce_representation(representation)
    return parse(loads(text), representation, options)


# ---------------------------
# Edge views
# ---------------------------


def to_edge_view(graph: Graph) -> EdgeView:
    """Flatten ``graph`` into nodes ``0..n-1`` and one ``ViewEdge`` per edge occurrence."""
    seen: Counter = Counter()
    edges = []
    for key in graph.edge_pairs():
        edges.append(ViewEdge(key.source, key.target, seen[key]))
        seen[key] += 1
    return EdgeView(nodes=tuple(range(graph.n)), edges=tuple(edges))


def _endpoints(item: Any) -> tuple[int, int]:
    if isinstance(item, ViewEdge):
        return item.source, item.target
    if isinstance(item, dict):
        if "from" not in item or "to" not in item:
            raise ValidationError(f"Edge {item!r} needs 'from' and 'to'")
        pair = (item["from"], item["to"])
    elif is_sequence(item) and len(item) == 2:
        pair = tuple(item)
    else:
        raise ValidationError(f"Edge {item!r} is not a (from, to) pair")
    for endpoint in pair:
        if not is_non_negative_int(endpoint):
            raise ValidationError(f"Edge {item!r}: endpoints must be non-negative integers")
    return int(pair[0]), int(pair[1])


def from_edge_view(edges: EdgeView | Iterable[Any]) -> tuple[list[list[int]], list[list[int]]]:
    """
    Rebuild adjacency matrix and adjacency list from edge occurrences.

    The node count is ``max endpoint + 1``; nodes above the largest endpoint
    cannot be recovered from edges alone. Multiplicity is kept in both
    outputs: matrix cells count occurrences, list rows repeat them.

    Returns
    -------
    (adj_matrix, adj_list)
        Both ``[]`` when there are no edges.
    """
    if isinstance(edges, EdgeView):
        edges = edges.edges
    pairs = [_endpoints(e) for e in edges]
    if not pairs:
        return [], []

    size = max(max(s, t) for s, t in pairs) + 1
    matrix = np.zeros((size, size), dtype=np.int64)
    adj_list: list[list[int]] = [[] for _ in range(size)]
    for s, t in pairs:
        matrix[s, t] += 1
        adj_list[s].append(t)
    return matrix.tolist(), adj_list


def graph_from_edge_view(edges: EdgeView | Iterable[Any]) -> Graph:
    """``Graph`` over ``0..max endpoint`` built from edge occurrences."""
    _, adj_list = from_edge_view(edges)
    return Graph(adj_list)
