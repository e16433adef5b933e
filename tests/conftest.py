# tests/conftest.py
import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from adjnet.core.config import STRICT
from adjnet.io.codec import parse_list, parse_matrix


@pytest.fixture
def single_edge():
    """0 -> 1 on two nodes."""
    return parse_matrix([[0, 1], [0, 0]])


@pytest.fixture
def digon():
    """0 <-> 1."""
    return parse_matrix([[0, 1], [1, 0]])


@pytest.fixture
def triangle():
    """Complete directed graph on three nodes."""
    return parse_matrix([[0, 1, 1], [1, 0, 1], [1, 1, 0]])


@pytest.fixture
def multigraph():
    """Self-loop on 0, two parallel edges 0 -> 1, one edge 1 -> 2."""
    return parse_list([[0, 1, 1], [2], []])


@pytest.fixture
def strict_pair():
    """Two strict 4-node graphs sharing the edge 0 -> 1."""
    a = parse_list([[1, 2], [3], [], []], options=STRICT)
    b = parse_list([[1], [], [0], [2]], options=STRICT)
    return a, b
