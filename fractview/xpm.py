"""Reading images in the XPM text format.

An XPM image is a sequence of strings: a header giving width, height,
number of colours and characters per pixel, then one string per colour
definition, then one string per pixel row. Pixels come out as 32-bit
0xAARRGGBB values; transparent pixels (colour ``None``) are
``0xFF000000``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from fractview.colors import text_to_rgb
from fractview.numbers import atoi
from fractview.words import find, find_unquoted, split_words

TRANSPARENT = 0xFF000000
_DIRECT_TABLE_CPP = 2
_COLOR_KEYWORD = "c"


class XpmError(ValueError):
    """Raised when XPM data is malformed or incomplete."""


@dataclass
class XpmImage:
    """A decoded XPM image; ``pixels`` holds ``height`` rows of ``width`` values."""

    width: int
    height: int
    pixels: List[List[int]]


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def color_key(text: str, cpp: int) -> int:
    """Pack the first ``cpp`` characters of ``text`` into an integer key.

    Each character contributes one signed byte, most significant first;
    missing characters count as zero. The key wraps to 32 bits.
    """
    if cpp <= 0:
        raise ValueError("cpp must be positive")
    key = 0
    for ch in text[:cpp].ljust(cpp, "\0"):
        code = ord(ch) & 0xFF
        if code > 127:
            code -= 256
        key = _wrap_int32((key << 8) + code)
    return key


def _blank(text: str, begin: int, span: int) -> str:
    stop = min(len(text), begin + span)
    return text[:begin] + " " * (stop - begin) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside quotes with spaces.

    The result has the same length as ``text``. A block comment without
    its end blanks only the opener and the character after it; a line
    comment without a newline blanks only its opener.
    """
    while (begin := find_unquoted(text, "/*", len(text))) is not None:
        rest = text[begin + 2:]
        end = find(rest, "*/", len(rest))
        text = _blank(text, begin, 3 if end is None else end + 4)
    while (begin := find_unquoted(text, "//", len(text))) is not None:
        rest = text[begin + 2:]
        end = find(rest, "\n", len(rest))
        text = _blank(text, begin, 2 if end is None else end + 3)
    return text


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _parse_header(line: str) -> Tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"header needs four values, got {line!r}")
    width, height, ncolors, cpp = (atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"header values must be positive, got {line!r}")
    return width, height, ncolors, cpp


def _parse_color(line: str, cpp: int) -> int:
    words = split_words(line[cpp:])
    try:
        index = words.index(_COLOR_KEYWORD) + 1
    except ValueError:
        raise XpmError(f"colour definition without 'c': {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour definition without a value: {line!r}")
    end: Optional[str] = words[index + 1] if index + 1 < len(words) else None
    return text_to_rgb(words[index], end)


def _read_palette(lines: Iterator[str], ncolors: int, cpp: int) -> Dict[int, int]:
    palette: Dict[int, int] = {}
    later_wins = cpp <= _DIRECT_TABLE_CPP
    for number in range(ncolors):
        line = _next_line(lines, f"colour definition {number + 1}")
        value = _parse_color(line, cpp)
        key = color_key(line, cpp)
        if later_wins:
            palette[key] = value
        else:
            palette.setdefault(key, value)
    return palette


def _decode_row(line: str, width: int, cpp: int, palette: Dict[int, int]) -> List[int]:
    row = []
    for x in range(width):
        value = palette.get(color_key(line[cpp * x:], cpp), 0)
        row.append(TRANSPARENT if value == -1 else value & 0xFFFFFFFF)
    return row


def _parse(lines: Iterator[str]) -> XpmImage:
    width, height, ncolors, cpp = _parse_header(_next_line(lines, "header"))
    palette = _read_palette(lines, ncolors, cpp)
    pixels = [
        _decode_row(_next_line(lines, f"pixel row {y + 1}"), width, cpp, palette)
        for y in range(height)
    ]
    return XpmImage(width, height, pixels)


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings, header first."""
    return _parse(iter(lines))


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        yield text[start + 1:end]
        pos = end + 1


def parse_xpm_file(path: Union[str, os.PathLike]) -> XpmImage:
    """Decode an XPM file; its quoted strings outside comments are the data."""
    text = Path(path).read_bytes().decode("latin-1")
    return _parse(_quoted_strings(strip_comments(text)))