"""
Value conversion utilities for command-line flags.

This module turns the raw strings given on the command line into numbers
and choice indices. Size strings follow a case-sensitive convention:

    k, m, g  -> powers of 1000 (10^3, 10^6, 10^9)
    K, M, G  -> powers of 1024 (2^10, 2^20, 2^30)

so "4k" is 4000 bytes while "4K" is 4096 bytes.
"""

import re
from typing import Optional, Sequence

from ..constants import MAX_SIZE_BYTES, SIZE_MULTIPLIERS

_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")


class SizeSuffixError(ValueError):
    """Raised when a size string ends in a letter that is not a known suffix."""
    pass


def expand_string_array(items: Optional[Sequence[str]]) -> str:
    """Render a sequence as "{ a, b, c }", or "null" when there is none."""
    if items is None:
        return "null"
    return "{ " + ", ".join(items) + " }"


def parse_decimal_int(text: str) -> int:
    """
    Parse a plain base-10 integer with an optional sign.

    Unlike int(), underscores and non-ASCII digits are rejected.

    Raises:
        ValueError: If the text is not a base-10 integer
    """
    stripped = text.strip()
    if not _DECIMAL_INT.fullmatch(stripped):
        raise ValueError(f"invalid base-10 integer: '{text}'")
    return int(stripped)


def size_str_to_bytes(text: str) -> int:
    """
    Convert a size string such as "64", "4k" or "2M" to a byte count.

    Args:
        text: Decimal integer with an optional single suffix letter

    Returns:
        The size in bytes

    Raises:
        SizeSuffixError: If the trailing letter is not one of k, m, g, K, M, G
        ValueError: If the numeric part is not a base-10 integer
        OverflowError: If the result does not fit in a signed 64-bit integer
    """
    stripped = text.strip()
    multiplier = 1
    number = stripped
    if stripped and stripped[-1].isalpha():
        suffix = stripped[-1]
        if suffix not in SIZE_MULTIPLIERS:
            raise SizeSuffixError(
                f"unknown size suffix '{suffix}' in '{text}'; "
                f"use one of {', '.join(SIZE_MULTIPLIERS)}"
            )
        multiplier = SIZE_MULTIPLIERS[suffix]
        number = stripped[:-1]

    value = parse_decimal_int(number) * multiplier
    if abs(value) > MAX_SIZE_BYTES:
        raise OverflowError(f"size '{text}' exceeds {MAX_SIZE_BYTES} bytes")
    return value


def get_matching_index(candidates: Sequence[str], name: str) -> int:
    """
    Return the position of the first candidate equal to name, ignoring case.

    Raises:
        ValueError: If no candidate matches; the message lists all candidates
    """
    wanted = name.casefold()
    for index, candidate in enumerate(candidates):
        if candidate.casefold() == wanted:
            return index
    raise ValueError(f"{name} not found in {expand_string_array(candidates)}")
