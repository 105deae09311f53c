"""
Utilities module for NetBurst.

This module provides shared utility functions organized by concern:
- Logging utilities for consistent logging setup
- Value conversion for size strings, integers and choice lists
"""

# Logging utilities
from .logging import setup_logging

# Value conversion utilities
from .sizes import (
    SizeSuffixError,
    expand_string_array,
    get_matching_index,
    parse_decimal_int,
    size_str_to_bytes,
)

__all__ = [
    "setup_logging",
    "SizeSuffixError",
    "expand_string_array",
    "get_matching_index",
    "parse_decimal_int",
    "size_str_to_bytes",
]
