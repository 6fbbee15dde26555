"""Integer parsing and formatting with fixed-width integer semantics."""

from __future__ import annotations

import math
from typing import Tuple, TypeVar

from fractview.ctype import isspace

T = TypeVar("T")

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_LONG_MAX = 2**63 - 1
_MAX_DIGITS = 19
_SQRT_LIMIT = 46340


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, returning a 32-bit signed result.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. Values wrap to 32 bits. When the digits exceed the
    64-bit signed range (or number more than 19), the result is -1 for a
    positive number and 0 for a negative one.
    """
    pos = 0
    length = len(text)
    while pos < length and ord(text[pos]) < 256 and isspace(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    digits = 0
    while pos < length and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - ord("0"))
        digits += 1
        pos += 1
    if value <= _LONG_MAX and digits <= _MAX_DIGITS:
        return _wrap_int32(_wrap_int32(value) * sign)
    return -1 if sign > 0 else 0


def itoa(n: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def exact_sqrt(n: int) -> int:
    """Return the integer square root of ``n`` if it is exact, else 0.

    Only roots up to 46340 (the largest whose square fits in 32 bits)
    are found; zero and negative numbers give 0.
    """
    if n <= 0:
        return 0
    root = math.isqrt(n)
    if root <= _SQRT_LIMIT and root * root == n:
        return root
    return 0


def swap(a: T, b: T) -> Tuple[T, T]:
    """Return the two values in reverse order."""
    return b, a