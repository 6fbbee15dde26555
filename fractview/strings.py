"""Building, copying, trimming and splitting character strings.

Every input string is read up to its first NUL character, as a
terminated character string is. Each function returns a new string
and leaves its inputs alone. Where the caller may pass a missing
string, ``None`` in gives ``None`` back.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

_NUL = "\0"
_TRIM_CHARS = " \n\t"


def _body(text: str) -> str:
    return text.split(_NUL, 1)[0]


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strlen(text: str) -> int:
    """Number of characters before the first NUL."""
    return len(_body(text))


def strnew(size: int) -> str:
    """A string of ``size`` NUL characters, which reads as empty."""
    _check_count("size", size)
    return _NUL * size


def strdup(text: str) -> str:
    """A copy of ``text`` up to its terminator."""
    return _body(text)


def strcat(dst: str, append: str) -> str:
    """``dst`` followed by ``append``."""
    return _body(dst) + _body(append)


def strncat(dst: str, append: str, n: int) -> str:
    """``dst`` followed by at most ``n`` characters of ``append``."""
    _check_count("n", n)
    return _body(dst) + _body(append)[:n]


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting string, which never exceeds ``size - 1``
    characters beyond what ``dst`` already held, together with the
    length the full concatenation would have had: ``len(dst) + len(src)``
    when ``size`` exceeds the length of ``dst``, otherwise
    ``size + len(src)``.
    """
    _check_count("size", size)
    head = _body(dst)
    tail = _body(src)
    total = len(head) + len(tail) if size > len(head) else size + len(tail)
    room = max(0, size - len(head) - 1)
    return head + tail[:room], total


def strncpy(src: str, n: int) -> str:
    """Exactly ``n`` characters: ``src`` cut to ``n``, padded with NULs."""
    _check_count("n", n)
    return _body(src)[:n].ljust(n, _NUL)


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """The two strings joined, or ``None`` when either is missing."""
    if s1 is None or s2 is None:
        return None
    return _body(s1) + _body(s2)


def strsub(text: Optional[str], start: int, length: int) -> Optional[str]:
    """The ``length`` characters of ``text`` starting at ``start``.

    Raises ``IndexError`` when the range reaches past the end of ``text``.
    """
    if text is None:
        return None
    _check_count("start", start)
    _check_count("length", length)
    if start + length > len(text):
        raise IndexError(
            f"range {start}..{start + length} is outside a string of length {len(text)}"
        )
    return _body(text[start:start + length])


def strtrim(text: Optional[str]) -> Optional[str]:
    """``text`` without leading and trailing spaces, newlines and tabs."""
    if text is None:
        return None
    return _body(text).strip(_TRIM_CHARS)


def strsplit(text: Optional[str], sep: str) -> Optional[List[str]]:
    """The non-empty pieces of ``text`` between occurrences of ``sep``."""
    if text is None:
        return None
    if len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    body = _body(text)
    if sep == _NUL:
        return [body] if body else []
    return [word for word in body.split(sep) if word]


def strmap(text: Optional[str], func: Optional[Callable[[str], str]]) -> Optional[str]:
    """A new string of ``func`` applied to each character."""
    if text is None or func is None:
        return None
    return "".join(func(ch) for ch in _body(text))


def strmapi(
    text: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """A new string of ``func(index, character)`` for each character."""
    if text is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(_body(text)))


def striter(text: Optional[str], func: Optional[Callable[[str], object]]) -> None:
    """Call ``func`` on each character of ``text`` in order."""
    if text is None or func is None:
        return
    for ch in _body(text):
        func(ch)


def striteri(
    text: Optional[str], func: Optional[Callable[[int, str], object]]
) -> None:
    """Call ``func(index, character)`` on each character of ``text`` in order."""
    if text is None or func is None:
        return
    for index, ch in enumerate(_body(text)):
        func(index, ch)