#!/usr/bin/env python3
"""
Tests for the logging setup helper.
"""

import logging
import unittest
from unittest.mock import patch

from netburst.utils.logging import setup_logging


class TestSetupLogging(unittest.TestCase):
    """Test cases for setup_logging."""

    def setUp(self):
        self.original_level = logging.getLogger().level

    def tearDown(self):
        logging.getLogger().setLevel(self.original_level)

    @patch("logging.basicConfig")
    def test_default_level_is_info(self, mock_basic_config):
        setup_logging()
        self.assertEqual(mock_basic_config.call_args.kwargs["level"], logging.INFO)
        self.assertEqual(logging.getLogger().level, logging.INFO)

    @patch("logging.basicConfig")
    def test_verbose_level_is_debug(self, mock_basic_config):
        setup_logging(verbose=True)
        self.assertEqual(mock_basic_config.call_args.kwargs["level"], logging.DEBUG)
        self.assertEqual(logging.getLogger().level, logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
