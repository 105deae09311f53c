#!/usr/bin/env python3
"""
Tests for the configuration display formatter.
"""

import logging
import unittest

from netburst.core.display import format_configuration, show_configuration
from netburst.models import Configuration, TestKind as OperationKind, Topology


class TestFormatConfiguration(unittest.TestCase):
    """Test cases for format_configuration."""

    def test_default_summary(self):
        lines = format_configuration(Configuration())
        self.assertEqual(lines, [
            " testName      : read",
            " hostNames     : null",
            " Topology      : allToAll",
            " Instances     : 1",
            " Message size  : 4096",
            " Region size   : 4096",
            " Inflight      : 8",
            " Poll          : False",
            " Port          : 20208,20209",
        ])

    def test_populated_summary(self):
        config = Configuration(
            test_kind=OperationKind.WRITE,
            host_names=["host1", "host2"],
            topology=Topology.PAIRS,
            poll=True,
            port_master=7000,
        )
        lines = format_configuration(config)
        self.assertIn(" testName      : write", lines)
        self.assertIn(" hostNames     : { host1, host2 }", lines)
        self.assertIn(" Topology      : pairs", lines)
        self.assertIn(" Poll          : True", lines)
        self.assertIn(" Port          : 7000,20209", lines)


class TestShowConfiguration(unittest.TestCase):
    """Test cases for show_configuration."""

    def test_logs_every_line_at_info(self):
        with self.assertLogs("netburst.core.display", level="INFO") as cm:
            show_configuration(Configuration())
        messages = [record.getMessage() for record in cm.records]
        self.assertIn("BENCHMARK CONFIGURATION", messages)
        for line in format_configuration(Configuration()):
            self.assertIn(line, messages)
        self.assertTrue(all(record.levelno == logging.INFO for record in cm.records))

    def test_custom_logger(self):
        custom = logging.getLogger("benchmark.engine")
        with self.assertLogs("benchmark.engine", level="INFO") as cm:
            show_configuration(Configuration(), logger=custom)
        self.assertTrue(cm.records)


if __name__ == "__main__":
    unittest.main()
