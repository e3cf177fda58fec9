"""String helpers with terminated-string semantics.

A NUL character ends a string, as it would in a character buffer.
Positions are returned as indices, or None where nothing is found.
Functions that fill a bounded buffer return the resulting text together
with the length they report.
"""

from __future__ import annotations

from typing import Optional, Tuple

_NUL = "\0"


def _cstr(s: str) -> str:
    """Return the part of ``s`` before its first NUL character."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Number of characters before the terminating NUL."""
    return len(_cstr(s))


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL finds the end."""
    text = _cstr(s)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL finds the end."""
    text = _cstr(s)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    _check_size("n", n)
    a = _cstr(s1)[:n]
    b = _cstr(s2)[:n]
    for x, y in zip(a + _NUL, b + _NUL):
        if x != y:
            return ord(x) - ord(y)
        if x == _NUL:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``."""
    _check_size("length", length)
    target = _cstr(needle)
    if not target:
        return 0
    index = _cstr(haystack)[:length].find(target)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Copy of ``s`` up to its terminator."""
    return _cstr(s)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _check_size("start", start)
    _check_size("length", length)
    text = _cstr(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of the two strings."""
    return _cstr(s1) + _cstr(s2)


def strlcpy(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` characters including the terminator.

    Returns the buffer's new text and the length of ``src``.
    """
    _check_size("dstsize", dstsize)
    source = _cstr(src)
    if dstsize == 0:
        return dst, len(source)
    return source[:dstsize - 1], len(source)


def strlcat(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``dstsize`` characters.

    Returns the buffer's new text and the length the full result would
    have had, as the bounded append reports it.
    """
    _check_size("dstsize", dstsize)
    source = _cstr(src)
    if dstsize == 0:
        return dst, len(source)
    dst_len = min(len(_cstr(dst)), dstsize)
    if dst_len >= dstsize:
        return dst, dstsize + len(source)
    head = _cstr(dst)
    room = dstsize - dst_len
    if len(source) < room:
        return head + source, dst_len + len(source)
    return head + source[:room - 1], dst_len + len(source)