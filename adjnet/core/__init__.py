from . import errors, structure
from .structure import *
from .errors import *
from .config import PERMISSIVE, STRICT, ParseOptions, Settings, get_settings
from .graph import EdgeKey, Graph

__all__ = [
    "structure", "errors", "config", "graph",
    "Graph", "EdgeKey", "ParseOptions", "Settings", "PERMISSIVE", "STRICT", "get_settings",
    *structure.__all__,
    *errors.__all__,
]

"""
Immutable directed multigraph on 0..n-1; every matrix, degree and neighbour
view is derived from the per-node adjacency tuples.
"""
