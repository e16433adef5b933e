import os
import sys
import unittest
from unittest import mock

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from adjnet.core.config import (
    DEFAULT_CANCEL_CHECK_INTERVAL,
    DEFAULT_MAX_ISOMORPHISM_NODES,
    PERMISSIVE,
    STRICT,
    Settings,
)
from adjnet.core.structure import EntryDomain


class TestParseOptions(unittest.TestCase):
    def test_presets(self):
        self.assertTrue(PERMISSIVE.allow_self_loops and PERMISSIVE.allow_parallel_edges)
        self.assertIs(PERMISSIVE.entry_domain, EntryDomain.ANY_NON_NEGATIVE)
        self.assertFalse(STRICT.allow_self_loops or STRICT.allow_parallel_edges)
        self.assertIs(STRICT.entry_domain, EntryDomain.ZERO_OR_ONE)


class TestSettings(unittest.TestCase):
    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            s = Settings.from_env()
        self.assertEqual(s.max_isomorphism_nodes, DEFAULT_MAX_ISOMORPHISM_NODES)
        self.assertEqual(s.cancel_check_interval, DEFAULT_CANCEL_CHECK_INTERVAL)

    def test_env_override(self):
        env = {"ADJNET_MAX_ISOMORPHISM_NODES": "7", "ADJNET_CANCEL_CHECK_INTERVAL": "16"}
        with mock.patch.dict(os.environ, env, clear=True):
            s = Settings.from_env()
        self.assertEqual(s, Settings(max_isomorphism_nodes=7, cancel_check_interval=16))

    def test_bad_values_fall_back_with_warning(self):
        env = {"ADJNET_MAX_ISOMORPHISM_NODES": "many", "ADJNET_CANCEL_CHECK_INTERVAL": "0"}
        with mock.patch.dict(os.environ, env, clear=True):
            with self.assertLogs("adjnet.core.config", level="WARNING") as logs:
                s = Settings.from_env()
        self.assertEqual(s, Settings())
        self.assertEqual(len(logs.records), 2)


if __name__ == "__main__":
    unittest.main()
