"""Searching and comparing strings and byte sequences.

String functions treat the text as ending at its first NUL character,
the way a terminated character string does. Positions are returned as
indices into the text, or ``None`` where nothing is found.
"""

from __future__ import annotations

from itertools import islice
from typing import Iterator, Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

_NUL = "\0"


def _terminated(text: str) -> str:
    return text.split(_NUL, 1)[0]


def _codes(text: str) -> Iterator[int]:
    """Character codes of ``text`` up to and including the terminator."""
    yield from map(ord, _terminated(text))
    yield 0


def _single(ch: Union[str, int]) -> str:
    if isinstance(ch, int):
        return chr(ch & 0xFF)
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def strchr(text: str, ch: Union[str, int]) -> Optional[int]:
    """Index of the first ``ch`` in ``text``.

    Searching for NUL gives the index of the terminator, i.e. the length
    of the text.
    """
    body = _terminated(text)
    target = _single(ch)
    if target == _NUL:
        return len(body)
    index = body.find(target)
    return None if index < 0 else index


def strrchr(text: str, ch: Union[str, int]) -> Optional[int]:
    """Index of the last ``ch`` in ``text``; NUL gives the terminator's index."""
    body = _terminated(text)
    target = _single(ch)
    if target == _NUL:
        return len(body)
    index = body.rfind(target)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``; an empty needle gives 0."""
    index = _terminated(haystack).find(_terminated(needle))
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Like :func:`strstr`, but the match must lie within the first ``length`` characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    body = _terminated(haystack)
    pattern = _terminated(needle)
    if not pattern:
        return 0
    index = body.find(pattern, 0, length)
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; the result is the difference of the first differing codes."""
    for a, b in zip(_codes(s1), _codes(s2)):
        if a != b or a == 0:
            return a - b
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in islice(zip(_codes(s1), _codes(s2)), n):
        if a != b or a == 0:
            return a - b
    return 0


def strequ(s1: Optional[str], s2: Optional[str]) -> bool:
    """True when both strings are given and equal."""
    if s1 is None or s2 is None:
        return False
    return strcmp(s1, s2) == 0


def strnequ(s1: Optional[str], s2: Optional[str], n: int) -> bool:
    """True when both strings are given and their first ``n`` characters agree."""
    if s1 is None or s2 is None:
        return False
    return strncmp(s1, s2, n) == 0


def _prefix(data: BytesLike, n: int) -> bytes:
    if n < 0:
        raise ValueError("n must not be negative")
    view = bytes(data)
    if n > len(view):
        raise ValueError(f"n ({n}) exceeds the data length ({len(view)})")
    return view[:n]


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (taken modulo 256) within ``n`` bytes."""
    index = _prefix(data, n).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare ``n`` bytes; the result is the difference of the first differing bytes."""
    for x, y in zip(_prefix(a, n), _prefix(b, n)):
        if x != y:
            return x - y
    return 0