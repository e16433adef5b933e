"""
Exhaustive isomorphism test for small directed multigraphs.

Two graphs are isomorphic when some relabelling ``p`` of the nodes makes
``g1.matrix[i, j] == g2.matrix[p[i], p[j]]`` for every pair, multiplicities
included. The search tries all ``n!`` relabellings, so it is only meant for
small graphs; ``Settings.max_isomorphism_nodes`` bounds it and a cancellation
token can stop it early.
"""
from __future__ import annotations

import logging
import math
from typing import Iterator, Optional, Protocol

import numpy as np

from ..core.config import Settings, get_settings
from ..core.errors import SearchCancelledError, ValidationError
from ..core.graph import Graph

logger = logging.getLogger(__name__)


class CancellationToken(Protocol):
    """Anything with ``is_set()``, e.g. ``threading.Event``."""

    def is_set(self) -> bool: ...


class Permutations:
    """Lazy, restartable sequence of the permutations of ``0..n-1``.

    Uses the iterative form of Heap's algorithm: each permutation differs
    from the previous one by a single swap. The identity comes first.
    """

    def __init__(self, n: int):
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n

    def __len__(self) -> int:
        return math.factorial(self.n)

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        n = self.n
        p = list(range(n))
        yield tuple(p)
        c = [0] * n
        i = 1
        while i < n:
            if c[i] < i:
                if i % 2 == 0:
                    p[0], p[i] = p[i], p[0]
                else:
                    p[c[i]], p[i] = p[i], p[c[i]]
                yield tuple(p)
                c[i] += 1
                i = 1
            else:
                c[i] = 0
                i += 1


def permutations(n: int) -> Permutations:
    return Permutations(n)


def degree_profile(graph: Graph) -> list[tuple[int, int]]:
    """``(in_degree, out_degree)`` per node, from column and row sums."""
    matrix = graph.matrix
    return list(zip(matrix.sum(axis=0).tolist(), matrix.sum(axis=1).tolist()))


def degree_signature(graph: Graph) -> list[tuple[int, int]]:
    return sorted(degree_profile(graph))


def find_isomorphism(
    g1: Graph,
    g2: Graph,
    *,
    max_nodes: Optional[int] = None,
    cancel: Optional[CancellationToken] = None,
    settings: Optional[Settings] = None,
) -> Optional[tuple[int, ...]]:
    """
    Return a relabelling ``p`` mapping ``g1`` onto ``g2``, or ``None``.

    Parameters
    ----------
    g1, g2 : Graph
    max_nodes : int, optional
        Largest node count searched exhaustively. Defaults to
        ``settings.max_isomorphism_nodes``.
    cancel : CancellationToken, optional
        Polled every ``settings.cancel_check_interval`` permutations.
    settings : Settings, optional
        Defaults to ``get_settings()``.

    Raises
    ------
    ValidationError
        The graphs pass the cheap checks but are larger than ``max_nodes``.
    SearchCancelledError
        ``cancel`` was set during the search.
    """
    settings = settings or get_settings()
    if max_nodes is None:
        max_nodes = settings.max_isomorphism_nodes

    if g1.n != g2.n:
        logger.debug(f"Node counts differ ({g1.n} vs {g2.n}), not isomorphic")
        return None
    if degree_signature(g1) != degree_signature(g2):
        logger.debug("Degree signatures differ, not isomorphic")
        return None

    n = g1.n
    if n > max_nodes:
        raise ValidationError(
            f"Graph too large for exhaustive isomorphism check: {n} nodes (limit {max_nodes})"
        )

    m1 = g1.matrix
    m2 = g2.matrix
    interval = settings.cancel_check_interval
    checked = 0
    for p in permutations(n):
        if cancel is not None and checked % interval == 0 and cancel.is_set():
            raise SearchCancelledError(checked)
        checked += 1
        idx = np.asarray(p, dtype=np.intp)
        if np.array_equal(m1, m2[np.ix_(idx, idx)]):
            logger.debug(f"Found isomorphism after {checked} permutations")
            return p

    logger.debug(f"No isomorphism among {checked} permutations")
    return None


def is_isomorphic(g1: Graph, g2: Graph, **kwargs) -> bool:
    """True if ``g1`` and ``g2`` are isomorphic; see ``find_isomorphism``."""
    return find_isomorphism(g1, g2, **kwargs) is not None
