import pytest

from fractview.search import (
    memchr,
    memcmp,
    strchr,
    strcmp,
    strequ,
    strncmp,
    strnequ,
    strnstr,
    strrchr,
    strstr,
)


@pytest.mark.parametrize("text,ch", [("hello", "l"), ("abcabc", "c"), ("x", "x")])
def test_strchr_finds_first(text, ch):
    idx = strchr(text, ch)
    assert text[idx] == ch
    assert ch not in text[:idx]


def test_strchr_missing():
    assert strchr("hello", "z") is None


def test_strchr_nul_gives_length():
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", 0) == len("hello")


def test_strchr_stops_at_nul():
    assert strchr("ab\0c", "c") is None


@pytest.mark.parametrize("text,ch", [("hello", "l"), ("abcabc", "a"), ("x", "x")])
def test_strrchr_finds_last(text, ch):
    idx = strrchr(text, ch)
    assert text[idx] == ch
    assert ch not in text[idx + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("hello", "q") is None
    assert strrchr("hello", "\0") == len("hello")


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


@pytest.mark.parametrize(
    "haystack,needle", [("hello world", "world"), ("aaab", "ab"), ("abc", "abc")]
)
def test_strstr_match(haystack, needle):
    idx = strstr(haystack, needle)
    assert haystack[idx:idx + len(needle)] == needle
    assert needle not in haystack[:idx + len(needle) - 1]


def test_strstr_empty_needle_and_missing():
    assert strstr("abc", "") == 0
    assert strstr("", "") == 0
    assert strstr("abc", "abd") is None


def test_strnstr_within_limit():
    haystack, needle = "hello world", "world"
    assert strnstr(haystack, needle, len(haystack)) == strstr(haystack, needle)


def test_strnstr_cut_by_limit():
    haystack, needle = "hello world", "world"
    assert strnstr(haystack, needle, len(haystack) - 1) is None


def test_strnstr_empty_needle_and_negative():
    assert strnstr("abc", "", 0) == 0
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strcmp_equal_and_order():
    assert strcmp("abc", "abc") == 0
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0
    assert strcmp("a", "b") == ord("a") - ord("b")


def test_strcmp_prefix():
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("abc", "ab") == ord("c")


def test_strcmp_antisymmetric():
    for a, b in [("hello", "help"), ("x", ""), ("same", "same")]:
        assert strcmp(a, b) == -strcmp(b, a)


def test_strncmp():
    assert strncmp("abcx", "abcy", len("abc")) == 0
    assert strncmp("abcx", "abcy", len("abcx")) == ord("x") - ord("y")
    assert strncmp("a", "b", 0) == 0
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strequ_and_strnequ():
    assert strequ("abc", "abc") is True
    assert strequ("abc", "abd") is False
    assert strequ(None, "abc") is False
    assert strnequ("abcx", "abcy", len("abc")) is True
    assert strnequ("abcx", "abcy", len("abcx")) is False
    assert strnequ("a", None, 1) is False


def test_memchr():
    data = b"abc\x00def"
    idx = memchr(data, ord("d"), len(data))
    assert data[idx] == ord("d")
    assert memchr(data, 0, len(data)) == data.index(0)
    assert memchr(data, ord("d"), data.index(0)) is None


def test_memchr_masks_value():
    data = b"\x01\x02"
    assert memchr(data, 0x102, len(data)) == data.index(2)


def test_memchr_rejects_overrun():
    with pytest.raises(ValueError):
        memchr(b"ab", ord("a"), 3)


def test_memcmp():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"\xff", b"\x00", 1) == 0xFF


def test_memcmp_rejects_overrun():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)