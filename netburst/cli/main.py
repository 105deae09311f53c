"""
CLI main application module.

This module is the only place where parse outcomes become process exit
codes: help exits 0, any parse error prints usage and exits non-zero.
"""

import json
import logging
import sys
from typing import Optional, Sequence

from ..config import ConfigLoader
from ..constants import EXIT_SUCCESS, EXIT_UNEXPECTED_ERROR, EXIT_USAGE_ERROR
from ..models import ParseError
from ..utils import setup_logging
from .parser import create_config_parser

logger = logging.getLogger(__name__)


def _verbose_requested(argv: Sequence[str]) -> bool:
    """Check for -v/--verbose before parsing so DEBUG output covers the parse."""
    for arg in argv:
        if arg == "--":
            break
        if arg == "--verbose":
            return True
        if arg.startswith("-") and not arg.startswith("--"):
            cluster = arg[1:]
            # -v, -vm4K, or switches grouped together such as -hv
            if cluster.startswith("v") or ("v" in cluster and set(cluster) <= {"v", "h"}):
                return True
    return False


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the script."""
    argv = list(sys.argv[1:] if argv is None else argv)
    verbose = _verbose_requested(argv)
    setup_logging(verbose=verbose)
    parser = create_config_parser()

    try:
        result = ConfigLoader.load(argv, parser=parser)
    except ParseError as e:
        logger.error(f"Failed to parse command line properties: {e}")
        parser.print_help(sys.stderr)
        sys.exit(EXIT_USAGE_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(EXIT_UNEXPECTED_ERROR)

    if result.help_requested:
        parser.print_help(sys.stdout)
        sys.exit(EXIT_SUCCESS)

    config = result.configuration
    if config.verbose and not verbose:
        # Enabled through NETBURST_VERBOSE rather than a flag
        setup_logging(verbose=True)
    if config.verbose:
        logger.debug(f"Configuration: {json.dumps(config.to_dict())}")
