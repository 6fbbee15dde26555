"""Writing characters, strings and integers to a text stream.

Each function writes to ``stream``, or to standard output when no
stream is given.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from fractview.numbers import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(ch: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a string or a character code."""
    if isinstance(ch, int):
        ch = chr(ch)
    elif len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    _target(stream).write(ch)


def putstr(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; nothing is written for ``None``."""
    if text is not None:
        _target(stream).write(text.split("\0", 1)[0])


def putendl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; nothing is written for ``None``."""
    if text is not None:
        _target(stream).write(text.split("\0", 1)[0] + "\n")


def putnbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _target(stream).write(itoa(n))