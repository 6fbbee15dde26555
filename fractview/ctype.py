"""Character classification in the plain ASCII sense.

Every classifier accepts either an integer character code or a
one-character string. The results follow the ASCII ranges exactly and
never take locale or Unicode categories into account.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[int, str]

_SPACE_CODES = frozenset(map(ord, "\t\n\v\f\r "))


def _code(ch: CharLike) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    return int(ch)


def isalpha(ch: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(ch)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(ch: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(ch) <= ord("9")


def isalnum(ch: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(ch) or isdigit(ch)


def isascii(ch: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(ch) <= 127


def islower(ch: CharLike) -> bool:
    """True for the lower-case ASCII letters."""
    return 97 <= _code(ch) <= 122


def isprint(ch: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(ch) <= 126


def iscntrl(ch: CharLike) -> bool:
    """True for anything that is not printable ASCII."""
    return not isprint(ch)


def isspace(ch: CharLike) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space.

    Integer codes are reduced to their low byte first.
    """
    return (_code(ch) & 0xFF) in _SPACE_CODES


def _convert(ch: CharLike, low: int, high: int, shift: int) -> CharLike:
    code = _code(ch)
    result = code + shift if low <= code <= high else code
    return chr(result) if isinstance(ch, str) else result


def tolower(ch: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    return _convert(ch, 65, 90, 32)


def toupper(ch: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    return _convert(ch, 97, 122, -32)


def is_printable(text: Optional[str]) -> bool:
    """True when every character of ``text`` is printable ASCII.

    ``None`` is not printable; the empty string is.
    """
    if text is None:
        return False
    return all(isprint(ch) for ch in text)