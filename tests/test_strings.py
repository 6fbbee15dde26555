import pytest

from fractview.strings import (
    strcat,
    strdup,
    striter,
    striteri,
    strjoin,
    strlcat,
    strlen,
    strmap,
    strmapi,
    strncat,
    strncpy,
    strnew,
    strsplit,
    strsub,
    strtrim,
)


def test_strlen_stops_at_nul():
    assert strlen("ab\0cd") == 2
    assert strlen("") == 0
    assert strlen("hello") == len("hello")


def test_strnew_reads_as_empty():
    buffer = strnew(5)
    assert len(buffer) == 5
    assert strlen(buffer) == 0


def test_strnew_negative_raises():
    with pytest.raises(ValueError):
        strnew(-1)


def test_strdup_copies_up_to_terminator():
    assert strdup("abc\0def") == "abc"
    assert strdup("fractol") == "fractol"


def test_strcat_joins_bodies():
    result = strcat("abc\0zz", "def")
    assert result.startswith("abc")
    assert result.endswith("def")
    assert len(result) == 6


@pytest.mark.parametrize("n", [0, 1, 2, 3, 10])
def test_strncat_limits_appended_part(n):
    result = strncat("abc", "def", n)
    assert result.startswith("abc")
    assert len(result) == 3 + min(n, 3)
    assert "def".startswith(result[3:])


def test_strncat_negative_raises():
    with pytest.raises(ValueError):
        strncat("a", "b", -1)


def test_strlcat_with_room():
    text, total = strlcat("abc", "defgh", 20)
    assert total == 8
    assert text == strcat("abc", "defgh")


def test_strlcat_truncates_to_size():
    text, total = strlcat("abc", "defgh", 6)
    assert total == 8
    assert len(text) == 5
    assert strcat("abc", "defgh").startswith(text)


def test_strlcat_size_not_above_dst_length():
    text, total = strlcat("abcdef", "xyz", 4)
    assert text == "abcdef"
    assert total == 4 + 3


def test_strncpy_pads_with_nul():
    result = strncpy("ab", 5)
    assert len(result) == 5
    assert strlen(result) == 2
    assert result[2:] == "\0\0\0"


def test_strncpy_truncates():
    result = strncpy("abcdef", 3)
    assert len(result) == 3
    assert "abcdef".startswith(result)


def test_strjoin_missing_operand():
    assert strjoin(None, "a") is None
    assert strjoin("a", None) is None


def test_strjoin_combines():
    joined = strjoin("foo", "bar")
    assert joined[:3] == "foo"
    assert joined[3:] == "bar"


def test_strsub_extracts_range():
    assert strsub("mandelbrot", 0, 6) == "mandel"
    assert strsub("mandelbrot", 6, 4) == "brot"
    assert strsub("mandelbrot", 3, 0) == ""
    assert strsub(None, 0, 1) is None


def test_strsub_out_of_range_raises():
    with pytest.raises(IndexError):
        strsub("abc", 2, 5)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  hello  ", "hello"),
        ("\t\nhello world\n ", "hello world"),
        ("hello", "hello"),
        (" \n\t", ""),
        ("", ""),
    ],
)
def test_strtrim(text, expected):
    assert strtrim(text) == expected


def test_strtrim_keeps_other_whitespace():
    assert strtrim("\rhi\r") == "\rhi\r"
    assert strtrim(None) is None


def test_strsplit_skips_empty_pieces():
    assert strsplit("*hello*fellow***students*", "*") == ["hello", "fellow", "students"]
    assert strsplit("***", "*") == []
    assert strsplit("", "*") == []
    assert strsplit(None, "*") is None


def test_strsplit_invariant_rejoin():
    text = "  a b  cd   e "
    words = strsplit(text, " ")
    assert " ".join(words) == " ".join(text.split())
    assert all(words)


def test_strsplit_bad_separator():
    with pytest.raises(ValueError):
        strsplit("a,b", ",,")


def test_strmap_applies_function():
    assert strmap("abc", str.upper) == "ABC"
    assert strmap(None, str.upper) is None
    assert strmap("abc", None) is None


def test_strmapi_passes_index():
    result = strmapi("aaaa", lambda i, ch: ch if i % 2 == 0 else ch.upper())
    assert result == "aAaA"
    assert strmapi(None, lambda i, ch: ch) is None


def test_striter_visits_every_character():
    seen = []
    striter("fract\0ol", seen.append)
    assert seen == list("fract")


def test_striteri_visits_with_index():
    seen = []
    striteri("xyz", lambda i, ch: seen.append((i, ch)))
    assert seen == list(enumerate("xyz"))
    striteri(None, lambda i, ch: seen.append((i, ch)))
    assert len(seen) == 3