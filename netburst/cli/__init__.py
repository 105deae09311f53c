"""
CLI package for NetBurst.

This package provides the command-line interface components: the parser
factory and the entry point that maps parse outcomes to exit codes.
"""

from .parser import (
    create_config_parser,
)

from .main import (
    main,
)

__all__ = [
    # Argument parsing
    "create_config_parser",
    # Main application flow
    "main",
]
