# adjnet/__init__.py
"""adjnet: graph classification, set operations and isomorphism on adjacency lists and matrices."""
from __future__ import annotations

import logging
from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    # namespaces
    "adapters": "adjnet.adapters",
    "algorithms": "adjnet.algorithms",
    "core": "adjnet.core",
    "io": "adjnet.io",
    "utils": "adjnet.utils",
    "engine": "adjnet.engine",
    # adapter modules (direct convenience)
    "networkx": "adjnet.adapters.networkx",
    "dataframe": "adjnet.adapters.dataframe_adapter",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "Graph": ("adjnet.core.graph", "Graph"),
    "EdgeKey": ("adjnet.core.graph", "EdgeKey"),
    "ParseOptions": ("adjnet.core.config", "ParseOptions"),
    "PERMISSIVE": ("adjnet.core.config", "PERMISSIVE"),
    "STRICT": ("adjnet.core.config", "STRICT"),
    "Settings": ("adjnet.core.config", "Settings"),
    "Representation": ("adjnet.core.structure", "Representation"),

    # Errors
    "AdjnetError": ("adjnet.core.errors", "AdjnetError"),
    "ValidationError": ("adjnet.core.errors", "ValidationError"),
    "MalformedInputError": ("adjnet.core.errors", "MalformedInputError"),
    "SearchCancelledError": ("adjnet.core.errors", "SearchCancelledError"),

    # Codec
    "parse_list": ("adjnet.io.codec", "parse_list"),
    "parse_matrix": ("adjnet.io.codec", "parse_matrix"),
    "parse_text": ("adjnet.io.codec", "parse_text"),
    "to_edge_view": ("adjnet.io.codec", "to_edge_view"),
    "from_edge_view": ("adjnet.io.codec", "from_edge_view"),
    "EdgeView": ("adjnet.io.codec", "EdgeView"),

    # Algorithms
    "classify": ("adjnet.algorithms.classify", "classify"),
    "GraphSummary": ("adjnet.algorithms.classify", "GraphSummary"),
    "union": ("adjnet.algorithms.operations", "union"),
    "intersection": ("adjnet.algorithms.operations", "intersection"),
    "complement": ("adjnet.algorithms.operations", "complement"),
    "cartesian_product": ("adjnet.algorithms.operations", "cartesian_product"),
    "is_isomorphic": ("adjnet.algorithms.isomorphism", "is_isomorphic"),

    # Polars / NetworkX
    "to_dataframes": ("adjnet.adapters.dataframe_adapter", "to_dataframes"),
    "to_nx": ("adjnet.adapters.networkx", "to_nx"),
    "from_nx": ("adjnet.adapters.networkx", "from_nx"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("adjnet")
except PackageNotFoundError:
    __version__ = "0.0.0"
