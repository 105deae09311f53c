"""
Logging utilities for NetBurst.

This module provides centralized logging configuration so the CLI and
library callers get consistent output.
"""

import logging


def setup_logging(verbose: bool = False):
    """Setup logging configuration with appropriate level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    format_string = "%(asctime)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")

    # A later --verbose has to win over an earlier basicConfig call
    logging.getLogger().setLevel(level)
