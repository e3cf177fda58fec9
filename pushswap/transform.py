"""Whole-string transformations and conversions between text and integers."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

from pushswap.strings import strdup

_WHITESPACE = " \t\n\v\f\r"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer with two's-complement wrap."""
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    text = strdup(s)
    chars = strdup(charset)
    if not chars:
        return text
    return text.lstrip(chars).rstrip(chars)


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in strdup(s).split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character of ``s``."""
    return "".join(func(index, char) for index, char in enumerate(strdup(s)))


def striteri(
    s: Union[MutableSequence[str], bytearray],
    func: Callable[[int, Union[str, int]], Optional[Union[str, int]]],
) -> None:
    """Call ``func(index, item)`` on each element of a mutable buffer in place.

    Iteration stops at the first terminator (a NUL character, or a zero
    byte in a bytearray). When ``func`` returns something other than None,
    that value replaces the element.
    """
    terminator: Union[str, int] = 0 if isinstance(s, bytearray) else "\0"
    for index, item in enumerate(s):
        if item == terminator:
            break
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement


def atoi(s: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed int.

    Leading whitespace is skipped, one sign is accepted, and parsing
    stops at the first non-digit. Text with no digits yields 0; values
    beyond the 32-bit range wrap around.
    """
    text = strdup(s).lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = []
    for char in text:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return _wrap_int32(value * sign)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {n!r}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)