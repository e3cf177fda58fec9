"""Validation of the integer arguments and helpers on the parsed values."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, List, Sequence

from pushswap.transform import atoi, split

_INT_MAX = 2147483647
_INT_MIN_MAGNITUDE = 2147483648


class ParseError(ValueError):
    """Raised when an argument is not a valid 32-bit integer."""


def is_number(text: str) -> bool:
    """True if ``text`` is an optional sign and digits fitting in 32 bits."""
    if not text:
        return False
    digits = text
    limit = _INT_MAX
    if digits[0] in "+-":
        if digits[0] == "-":
            limit = _INT_MIN_MAGNITUDE
        digits = digits[1:]
    if not digits or any(not "0" <= ch <= "9" for ch in digits):
        return False
    return int(digits) <= limit


def _parse_token(token: str) -> int:
    if not is_number(token):
        raise ParseError(f"not a valid integer: {token!r}")
    return atoi(token)


def parse_args(text: str) -> List[int]:
    """Parse the space-separated integers of a single argument."""
    return [_parse_token(token) for token in split(text, " ")]


def parse_argv(args: Iterable[str]) -> List[int]:
    """Parse one integer from each argument."""
    return [_parse_token(arg) for arg in args]


def has_duplicate(values: Iterable[int]) -> bool:
    """True if some value occurs more than once."""
    seen = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def is_sorted(values: Sequence[int]) -> bool:
    """True if the values are in non-decreasing order."""
    return all(x <= y for x, y in zip(values, values[1:]))


def index_values(values: Sequence[int]) -> List[int]:
    """For each value, the number of values strictly smaller than it."""
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]