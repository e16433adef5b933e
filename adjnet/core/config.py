"""
Parsing options and engine limits.

Parsing strictness is a value, not a code path: both presets below feed the
same parser in ``adjnet.io.codec``.

Engine limits can be overridden through the environment:

- ``ADJNET_MAX_ISOMORPHISM_NODES``: largest node count accepted by the
  exhaustive isomorphism search (default 10).
- ``ADJNET_CANCEL_CHECK_INTERVAL``: number of permutations tried between two
  polls of the cancellation token (default 1024).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from .structure import EntryDomain

logger = logging.getLogger(__name__)

ENV_PREFIX = "ADJNET_"

DEFAULT_MAX_ISOMORPHISM_NODES = 10
DEFAULT_CANCEL_CHECK_INTERVAL = 1024


@dataclass(frozen=True)
class ParseOptions:
    """Validation strictness for the graph parser.

    Attributes:
        allow_self_loops: Accept edges from a node to itself
        allow_parallel_edges: Accept repeated neighbours / matrix entries > 1
        entry_domain: Values accepted in adjacency matrix cells
    """

    allow_self_loops: bool = True
    allow_parallel_edges: bool = True
    entry_domain: EntryDomain = EntryDomain.ANY_NON_NEGATIVE


# classification, display, isomorphism
PERMISSIVE = ParseOptions()

# set operations
STRICT = ParseOptions(
    allow_self_loops=False,
    allow_parallel_edges=False,
    entry_domain=EntryDomain.ZERO_OR_ONE,
)


def _positive_int_from_env(name: str, default: int) -> int:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {ENV_PREFIX}{name}={raw!r}: not an integer, using {default}")
        return default
    if value <= 0:
        logger.warning(f"Ignoring {ENV_PREFIX}{name}={raw!r}: must be positive, using {default}")
        return default
    return value


@dataclass(frozen=True)
class Settings:
    max_isomorphism_nodes: int = DEFAULT_MAX_ISOMORPHISM_NODES
    cancel_check_interval: int = DEFAULT_CANCEL_CHECK_INTERVAL

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            max_isomorphism_nodes=_positive_int_from_env(
                "MAX_ISOMORPHISM_NODES", DEFAULT_MAX_ISOMORPHISM_NODES
            ),
            cancel_check_interval=_positive_int_from_env(
                "CANCEL_CHECK_INTERVAL", DEFAULT_CANCEL_CHECK_INTERVAL
            ),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read from the environment on first use."""
    return Settings.from_env()
