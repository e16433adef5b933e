# tests/test_isomorphism.py
import itertools
import math
import os
import random
import sys
import threading
import unittest
from unittest import mock

import networkx as nx
import numpy as np

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from adjnet.adapters.networkx import to_nx
from adjnet.algorithms import isomorphism as iso
from adjnet.core.config import Settings
from adjnet.core.errors import SearchCancelledError, ValidationError
from adjnet.core.graph import Graph
from adjnet.io.codec import parse_list, parse_matrix


def _relabel(graph: Graph, p) -> Graph:
    """Graph whose node p[i] plays the role of node i in ``graph``."""
    rows = [[] for _ in range(graph.n)]
    for s, t in graph.edge_pairs():
        rows[p[s]].append(p[t])
    return Graph(rows)


def _random_multigraph(rng: random.Random, n: int, m: int) -> Graph:
    return Graph.from_edges(n, [(rng.randrange(n), rng.randrange(n)) for _ in range(m)])


class TestPermutations(unittest.TestCase):
    def test_all_distinct_and_complete(self):
        for n in range(0, 6):
            with self.subTest(n=n):
                perms = list(iso.permutations(n))
                self.assertEqual(len(perms), math.factorial(n))
                self.assertEqual(set(perms), set(itertools.permutations(range(n))))

    def test_identity_first_and_restartable(self):
        perms = iso.permutations(4)
        self.assertEqual(next(iter(perms)), (0, 1, 2, 3))
        self.assertEqual(list(perms), list(perms))
        self.assertEqual(len(perms), 24)

    def test_lazy(self):
        it = iter(iso.permutations(12))
        self.assertEqual(len([next(it) for _ in range(5)]), 5)

    def test_negative(self):
        with self.assertRaises(ValueError):
            iso.permutations(-1)


class TestDegreeProfile(unittest.TestCase):
    def test_profile_and_signature(self):
        g = parse_list([[1, 1], [2], [2]])
        self.assertEqual(iso.degree_profile(g), [(0, 2), (2, 1), (2, 1)])
        self.assertEqual(iso.degree_signature(g), [(0, 2), (2, 1), (2, 1)])


class TestIsomorphism(unittest.TestCase):
    def test_edgeless_graphs_of_equal_size(self):
        for n in range(0, 5):
            with self.subTest(n=n):
                self.assertTrue(iso.is_isomorphic(Graph.empty(n), Graph.empty(n)))

    def test_different_node_counts_skip_search(self):
        with mock.patch.object(iso, "permutations") as perms:
            self.assertFalse(iso.is_isomorphic(Graph.empty(2), Graph.empty(3)))
            perms.assert_not_called()

    def test_degree_signature_mismatch_skips_search(self):
        g1 = parse_list([[1], [2], []])
        g2 = parse_list([[1, 2], [], []])
        with mock.patch.object(iso, "permutations") as perms:
            self.assertFalse(iso.is_isomorphic(g1, g2))
            perms.assert_not_called()

    def test_relabelled_graph(self):
        g = parse_matrix([[0, 2, 0, 1], [0, 1, 1, 0], [1, 0, 0, 0], [0, 0, 3, 0]])
        p = (2, 0, 3, 1)
        h = _relabel(g, p)
        found = iso.find_isomorphism(g, h)
        self.assertIsNotNone(found)
        m1, m2 = g.matrix, h.matrix
        for i in range(g.n):
            for j in range(g.n):
                self.assertEqual(m1[i, j], m2[found[i], found[j]])

    def test_same_signature_but_not_isomorphic(self):
        # two 3-cycles vs one 6-cycle: every node has (in, out) = (1, 1)
        two_triangles = parse_list([[1], [2], [0], [4], [5], [3]])
        hexagon = parse_list([[1], [2], [3], [4], [5], [0]])
        self.assertEqual(iso.degree_signature(two_triangles), iso.degree_signature(hexagon))
        self.assertFalse(iso.is_isomorphic(two_triangles, hexagon))

    def test_direction_matters(self):
        # in-star vs out-star on the same undirected shape
        self.assertFalse(iso.is_isomorphic(parse_list([[1], [], [1]]), parse_list([[], [0, 2], []])))

    def test_multiplicities_must_match(self):
        g1 = parse_matrix([[0, 2, 0], [0, 0, 1], [1, 0, 0]])
        g2 = parse_matrix([[0, 1, 0], [0, 0, 2], [1, 0, 0]])
        self.assertTrue(iso.is_isomorphic(g1, _relabel(g1, (1, 2, 0))))
        # same degree signature is not required to match here; result must be exact
        self.assertEqual(
            iso.is_isomorphic(g1, g2),
            nx.is_isomorphic(to_nx(g1), to_nx(g2)),
        )

    def test_agrees_with_networkx(self):
        rng = random.Random(7)
        for _ in range(60):
            n = rng.randint(1, 5)
            m = rng.randint(0, 8)
            g1 = _random_multigraph(rng, n, m)
            if rng.random() < 0.5:
                g2 = _relabel(g1, rng.sample(range(n), n))
            else:
                g2 = _random_multigraph(rng, n, m)
            with self.subTest(g1=g1.adjacency, g2=g2.adjacency):
                self.assertEqual(
                    iso.is_isomorphic(g1, g2),
                    nx.is_isomorphic(to_nx(g1), to_nx(g2)),
                )

    def test_size_limit(self):
        cycle = Graph.from_edges(5, [(i, (i + 1) % 5) for i in range(5)])
        with self.assertRaises(ValidationError):
            iso.is_isomorphic(cycle, cycle, max_nodes=4)
        self.assertTrue(iso.is_isomorphic(cycle, cycle, max_nodes=5))

    def test_size_limit_from_settings(self):
        cycle = Graph.from_edges(5, [(i, (i + 1) % 5) for i in range(5)])
        with self.assertRaises(ValidationError):
            iso.is_isomorphic(cycle, cycle, settings=Settings(max_isomorphism_nodes=3))

    def test_cheap_rejection_ignores_size_limit(self):
        self.assertFalse(iso.is_isomorphic(Graph.empty(20), Graph.empty(21), max_nodes=3))

    def test_cancelled_search(self):
        cancel = threading.Event()
        cancel.set()
        g = Graph.from_edges(4, [(0, 1), (1, 2), (2, 3)])
        with self.assertRaises(SearchCancelledError) as ctx:
            iso.is_isomorphic(g, g, cancel=cancel)
        self.assertEqual(ctx.exception.checked, 0)

    def test_unset_token_does_not_interfere(self):
        g = parse_matrix(np.eye(3, k=1, dtype=int))
        self.assertTrue(
            iso.is_isomorphic(g, g, cancel=threading.Event(), settings=Settings(cancel_check_interval=1))
        )


if __name__ == "__main__":
    unittest.main()
