#!/usr/bin/env python3
"""
NetBurst Configuration Package

The configuration model and command-line parser for the NetBurst RDMA
network micro-benchmark. It turns textual flags into a validated, typed
Configuration that benchmark engines consume.

Size flags (-m, -M, -i) use case-sensitive suffixes: k, m, g are powers
of 1000 while K, M, G are powers of 1024.
"""

__version__ = "1.0.0"
__author__ = "NetBurst"
__description__ = "Configuration model and command-line parser for the NetBurst RDMA benchmark"
__license__ = "Apache-2.0"

# Import models for public API
from .models import (
    Configuration,
    TestKind,
    Topology,
    OptionSpec,
    ParseError,
    ParseErrorKind,
    ParseResult,
)

# Import constants for public API
from .constants import (
    EXIT_SUCCESS,
    EXIT_USAGE_ERROR,
    EXIT_UNEXPECTED_ERROR,
)

# Import configuration functionality for public API
from .config import (
    ConfigLoader,
    ConfigParser,
    define_schema,
)

# Import display functions for public API
from .core import (
    format_configuration,
    show_configuration,
)

# Import CLI functionality for public API
from .cli import (
    main,
    create_config_parser,
)

# Import utilities for public API
from .utils import (
    setup_logging,
    size_str_to_bytes,
    get_matching_index,
    expand_string_array,
)

# Public API exports
__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Data models
    "Configuration",
    "TestKind",
    "Topology",
    "OptionSpec",
    "ParseError",
    "ParseErrorKind",
    "ParseResult",
    # Constants
    "EXIT_SUCCESS",
    "EXIT_USAGE_ERROR",
    "EXIT_UNEXPECTED_ERROR",
    # Configuration
    "ConfigLoader",
    "ConfigParser",
    "define_schema",
    # Display
    "format_configuration",
    "show_configuration",
    # CLI functions
    "main",
    "create_config_parser",
    # Utilities
    "setup_logging",
    "size_str_to_bytes",
    "get_matching_index",
    "expand_string_array",
]
