#!/usr/bin/env python3
"""
Option Schema Models

This module contains the record describing a single command-line flag.
"""

from typing import NamedTuple, Optional


class OptionSpec(NamedTuple):
    """
    Describes one flag accepted by the configuration parser.

    Attributes:
        short: Single-letter flag without the leading dash (e.g. "m")
        long: Long flag without the leading dashes (e.g. "mSize")
        takes_value: Whether the flag consumes the following token
        help: Help text shown in the usage message
        metavar: Placeholder shown for the value in the usage message
    """

    short: str
    long: str
    takes_value: bool
    help: str
    metavar: Optional[str] = None

    @property
    def short_flag(self) -> str:
        return f"-{self.short}"

    @property
    def long_flag(self) -> str:
        return f"--{self.long}"
