import string

import pytest

from fractview.ctype import (
    isalnum,
    isalpha,
    isascii,
    iscntrl,
    isdigit,
    islower,
    isprint,
    isspace,
    is_printable,
    tolower,
    toupper,
)

ALL_CODES = range(-5, 300)


def test_isalpha_matches_ascii_letters():
    letters = {ord(c) for c in string.ascii_letters}
    assert {c for c in ALL_CODES if isalpha(c)} == letters


def test_isdigit_matches_ascii_digits():
    assert {c for c in ALL_CODES if isdigit(c)} == {ord(c) for c in string.digits}


def test_isalnum_is_alpha_or_digit():
    for code in ALL_CODES:
        assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_islower_matches_lowercase():
    lowers = {ord(c) for c in string.ascii_lowercase}
    assert {c for c in ALL_CODES if islower(c)} == lowers


def test_isprint_range():
    assert isprint(" ") is True
    assert isprint("~") is True
    assert isprint(31) is False
    assert isprint(127) is False


def test_iscntrl_is_negation_of_isprint():
    for code in ALL_CODES:
        assert iscntrl(code) == (not isprint(code))


@pytest.mark.parametrize("ch", ["\t", "\n", "\v", "\f", "\r", " "])
def test_isspace_whitespace(ch):
    assert isspace(ch) is True


@pytest.mark.parametrize("ch", ["a", "0", "\x00", "_"])
def test_isspace_non_whitespace(ch):
    assert isspace(ch) is False


def test_isspace_uses_low_byte():
    assert isspace(256 + ord(" ")) is True
    assert isspace(256 + ord("a")) is False


def test_case_conversion_round_trip():
    for upper, lower in zip(string.ascii_uppercase, string.ascii_lowercase):
        assert tolower(upper) == lower
        assert toupper(lower) == upper
        assert tolower(ord(upper)) == ord(lower)
        assert toupper(ord(lower)) == ord(upper)


def test_case_conversion_leaves_others():
    for ch in "0@[`{~ ":
        assert tolower(ch) == ch
        assert toupper(ch) == ch


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")


def test_is_printable():
    assert is_printable("Hello, world!") is True
    assert is_printable("") is True
    assert is_printable("tab\there") is False
    assert is_printable("caf\u00e9") is False
    assert is_printable(None) is False