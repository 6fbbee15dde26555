"""Locating substrings and splitting text into words.

Text is read up to its first NUL character. Positions are indices
into the text, or ``None`` where nothing is found.
"""

from __future__ import annotations

import re
from typing import List, Optional

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _body(text: str) -> str:
    return text.split("\0", 1)[0]


def _pattern_length(pattern: str) -> int:
    if not pattern:
        raise ValueError("pattern must not be empty")
    return len(pattern)


def find(text: str, pattern: str, length: int) -> Optional[int]:
    """Index of the first ``pattern`` in ``text``.

    ``length`` is the size of the region searched; a pattern longer than
    that is never found.
    """
    if _pattern_length(pattern) > length:
        return None
    index = _body(text).find(pattern)
    return None if index < 0 else index


def find_unquoted(text: str, pattern: str, length: int) -> Optional[int]:
    """Index of the first ``pattern`` in ``text`` outside double-quoted runs.

    Each double quote toggles the quoted state before the match at its
    own position is tried, so a pattern starting with a quote can only
    match at a closing quote.
    """
    size = _pattern_length(pattern)
    if size > length:
        return None
    body = _body(text)
    quoted = False
    for pos in range(len(body) - size + 1):
        if body[pos] == '"':
            quoted = not quoted
        if not quoted and body.startswith(pattern, pos):
            return pos
    return None


def split_words(text: str) -> List[str]:
    """The words of ``text``, separated by runs of spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(_body(text)) if word]