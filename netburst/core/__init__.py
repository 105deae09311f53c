"""
Core module for NetBurst.

This module contains the presentation logic that sits next to the
configuration parser.
"""

from .display import format_configuration, show_configuration

__all__ = [
    "format_configuration",
    "show_configuration",
]
