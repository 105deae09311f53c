#!/usr/bin/env python3
"""
Data Models Module

This module contains the data structures shared by the parser, the
environment loader and the CLI adapter.
"""

from .configuration import Configuration, TestKind, Topology
from .errors import ParseError, ParseErrorKind
from .options import OptionSpec
from .result import ParseResult

__all__ = [
    "Configuration",
    "TestKind",
    "Topology",
    "ParseError",
    "ParseErrorKind",
    "OptionSpec",
    "ParseResult",
]
