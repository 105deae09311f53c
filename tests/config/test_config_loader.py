#!/usr/bin/env python3
"""
Tests for the environment-aware configuration loader.

This module tests precedence between defaults, .env.local files,
environment variables and command-line flags.
"""

import os
import tempfile
import unittest
from unittest.mock import patch

from netburst.config.loader import ConfigLoader
from netburst.config.parser import ConfigParser
from netburst.models import ParseError, ParseErrorKind, TestKind as OperationKind, Topology


class TestFromEnvironment(unittest.TestCase):
    """Test cases for ConfigLoader.from_environment."""

    def setUp(self):
        self.parser = ConfigParser()

    def test_empty_environment_gives_defaults(self):
        config = ConfigLoader.from_environment(self.parser, {})
        self.assertEqual(config.test_kind, OperationKind.READ)
        self.assertEqual(config.message_size, 4096)

    def test_environment_values_applied(self):
        environ = {
            "NETBURST_TESTNAME": "write",
            "NETBURST_HOSTNAMES": "a, b",
            "NETBURST_TOPOLOGY": "pairs",
            "NETBURST_MSIZE": "64K",
            "NETBURST_PORT": ",9000",
            "NETBURST_VERBOSE": "true",
        }
        config = ConfigLoader.from_environment(self.parser, environ)

        self.assertEqual(config.test_kind, OperationKind.WRITE)
        self.assertEqual(config.host_names, ["a", "b"])
        self.assertEqual(config.topology, Topology.PAIRS)
        self.assertEqual(config.message_size, 65536)
        self.assertEqual(config.port_master, 20208)
        self.assertEqual(config.port_slave, 9000)
        self.assertTrue(config.verbose)

    def test_blank_values_ignored(self):
        config = ConfigLoader.from_environment(self.parser, {"NETBURST_MSIZE": "  "})
        self.assertEqual(config.message_size, 4096)

    def test_help_variable_ignored(self):
        config = ConfigLoader.from_environment(self.parser, {"NETBURST_HELP": "1"})
        self.assertFalse(config.verbose)

    def test_invalid_value_names_variable(self):
        with self.assertRaises(ParseError) as cm:
            ConfigLoader.from_environment(self.parser, {"NETBURST_INSTANCES": "many"})
        self.assertEqual(cm.exception.kind, ParseErrorKind.MALFORMED_NUMBER)
        self.assertEqual(cm.exception.flag, "NETBURST_INSTANCES")

    def test_invalid_boolean(self):
        with self.assertRaises(ParseError) as cm:
            ConfigLoader.from_environment(self.parser, {"NETBURST_VERBOSE": "maybe"})
        self.assertEqual(cm.exception.kind, ParseErrorKind.INVALID_CHOICE)


class TestLoad(unittest.TestCase):
    """Test cases for ConfigLoader.load precedence."""

    def test_flags_override_environment(self):
        environ = {"NETBURST_TESTNAME": "write", "NETBURST_INSTANCES": "4"}
        with self.assertLogs("netburst", level="INFO"):
            result = ConfigLoader.load(["-n", "read"], environ=environ)

        self.assertEqual(result.configuration.test_kind, OperationKind.READ)
        self.assertEqual(result.configuration.instances, 4)

    def test_help_with_environment(self):
        result = ConfigLoader.load(["-h"], environ={"NETBURST_MSIZE": "1K"})
        self.assertTrue(result.help_requested)
        self.assertIsNone(result.configuration)

    def test_help_ignores_invalid_environment(self):
        result = ConfigLoader.load(["-h"], environ={"NETBURST_MSIZE": "abc"})
        self.assertTrue(result.help_requested)
        self.assertIsNone(result.configuration)

    def test_invalid_environment_fails_without_help(self):
        with self.assertRaises(ParseError) as cm:
            ConfigLoader.load(["-n", "write"], environ={"NETBURST_MSIZE": "abc"})
        self.assertEqual(cm.exception.flag, "NETBURST_MSIZE")

    def test_dotenv_file_loaded(self):
        with tempfile.TemporaryDirectory() as tmp:
            env_path = os.path.join(tmp, ".env.local")
            with open(env_path, "w") as f:
                f.write("NETBURST_REGIONSIZE=1M\n")
                f.write("NETBURST_INFLIGHT=32\n")

            with patch.dict(os.environ, {"NETBURST_INFLIGHT": "64"}, clear=True):
                with self.assertLogs("netburst", level="INFO"):
                    result = ConfigLoader.load([], env_file=env_path)

        self.assertEqual(result.configuration.region_size, 1048576)
        # The real environment wins over the dotenv file
        self.assertEqual(result.configuration.in_flight, 64)

    def test_missing_dotenv_file_skipped(self):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertLogs("netburst", level="INFO"):
                result = ConfigLoader.load([], env_file="/nonexistent/.env.local")
        self.assertEqual(result.configuration.region_size, 4096)


if __name__ == "__main__":
    unittest.main()
