#!/usr/bin/env python3
"""
Parse Error Models

This module contains the error raised when command-line flags or
environment values cannot be turned into a valid configuration.
"""

from enum import Enum
from typing import Optional


class ParseErrorKind(Enum):
    """Classification of configuration parse failures."""

    UNKNOWN_FLAG = "unknown_flag"
    MISSING_VALUE = "missing_value"
    INVALID_CHOICE = "invalid_choice"
    MALFORMED_NUMBER = "malformed_number"
    MALFORMED_SIZE_SUFFIX = "malformed_size_suffix"
    MALFORMED_PAIR = "malformed_pair"
    NUMERIC_OVERFLOW = "numeric_overflow"
    OUT_OF_RANGE = "out_of_range"

    @property
    def is_syntax(self) -> bool:
        """True for errors raised while tokenizing, before any value is checked."""
        return self in (ParseErrorKind.UNKNOWN_FLAG, ParseErrorKind.MISSING_VALUE)


class ParseError(Exception):
    """
    Raised when the arguments cannot be parsed into a Configuration.

    Attributes:
        kind: What went wrong
        flag: The offending flag (e.g. "-m") or environment variable, if known
        message: Human-readable description
    """

    def __init__(self, kind: ParseErrorKind, message: str, flag: Optional[str] = None):
        self.kind = kind
        self.flag = flag
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.flag:
            return f"{self.flag}: {self.message}"
        return self.message
