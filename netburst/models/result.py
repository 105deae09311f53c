#!/usr/bin/env python3
"""
Parse Result Model

This module contains the successful outcome of a configuration parse.
"""

from typing import NamedTuple, Optional

from .configuration import Configuration


class ParseResult(NamedTuple):
    """
    Result of parsing command-line arguments.

    Attributes:
        configuration: The populated configuration, or None when help was requested
        help_requested: True if -h/--help was given; no other flag is applied then
    """

    configuration: Optional[Configuration]
    help_requested: bool = False
