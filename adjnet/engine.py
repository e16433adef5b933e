"""
Text-level entry points.

These take the raw JSON text a user typed plus its representation
(``"list"`` or ``"matrix"``), parse it with the strictness each operation
needs, and run the computation. Classification and isomorphism parse
permissively; set operations parse strictly.

Example:
    >>> from adjnet import engine
    >>> engine.analyze("[[0,1],[0,0]]", "matrix").special_type.value
    'Tree'
    >>> [e.id for e in engine.union("list", "[[1],[]]", "[[],[0]]").edges]
    ['0-1-0', '1-0-0']
"""
from __future__ import annotations

from typing import Optional

from .algorithms import classify as _classify
from .algorithms import isomorphism as _isomorphism
from .algorithms import operations as _operations
from .algorithms.classify import GraphSummary
from .core.config import PERMISSIVE, STRICT
from .core.structure import Representation
from .io.codec import EdgeView, parse_text


def analyze(text: str, representation: Representation | str) -> GraphSummary:
    return _classify.classify(parse_text(text, representation, PERMISSIVE))


def union(representation: Representation | str, a: str, b: str) -> EdgeView:
    ga = parse_text(a, representation, STRICT)
    gb = parse_text(b, representation, STRICT)
    return _operations.union(ga, gb)


def intersection(representation: Representation | str, a: str, b: str) -> EdgeView:
    ga = parse_text(a, representation, STRICT)
    gb = parse_text(b, representation, STRICT)
    return _operations.intersection(ga, gb)


def complement(representation: Representation | str, g: str) -> EdgeView:
    return _operations.complement(parse_text(g, representation, STRICT))


def cartesian_product(representation: Representation | str, a: str, b: str) -> EdgeView:
    ga = parse_text(a, representation, STRICT)
    gb = parse_text(b, representation, STRICT)
    return _operations.cartesian_product(ga, gb)


def isomorphic(
    a: str,
    b: str,
    representation: Representation | str,
    representation_b: Optional[Representation | str] = None,
    **kwargs,
) -> bool:
    """Whether two graphs given as text are isomorphic.

    ``representation_b`` defaults to ``representation``. Both inputs are
    parsed and validated before any comparison. Extra keyword arguments go to
    ``adjnet.algorithms.isomorphism.is_isomorphic``.
    """
    ga = parse_text(a, representation, PERMISSIVE)
    gb = parse_text(b, representation_b or representation, PERMISSIVE)
    return _isomorphism.is_isomorphic(ga, gb, **kwargs)
