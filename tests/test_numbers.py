import pytest

from fractview.numbers import INT_MAX, INT_MIN, atoi, exact_sqrt, itoa, swap


@pytest.mark.parametrize("n", [0, 7, -7, 12345, -98765, INT_MAX, INT_MIN])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_matches_str():
    for n in (0, 1, -1, 100, -2048, INT_MAX, INT_MIN):
        assert itoa(n) == str(n)


def test_itoa_rejects_out_of_range():
    with pytest.raises(OverflowError):
        itoa(INT_MAX + 1)
    with pytest.raises(OverflowError):
        itoa(INT_MIN - 1)


def test_atoi_skips_whitespace_and_trailing_text():
    assert atoi(" \t\n\v\f\r123abc") == atoi("123")
    assert atoi("+55") == atoi("55")
    assert atoi("  -9x9") == -atoi("9")


def test_atoi_rejects_double_sign():
    assert atoi("+-5") == atoi("")
    assert atoi("--5") == atoi("abc")


def test_atoi_empty_is_zero():
    assert atoi("") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("4294967297") == atoi("1")
    assert atoi("2147483648") == atoi("-2147483648")


def test_atoi_overflow_sentinels():
    assert atoi("9223372036854775808") == -1
    assert atoi("-9223372036854775808") == 0
    assert atoi("12345678901234567890") == -1


def test_exact_sqrt_of_perfect_squares():
    for root in (1, 2, 10, 1000, 46340):
        assert exact_sqrt(root * root) == root


def test_exact_sqrt_non_square_and_edges():
    for n in (0, -4, 2, 15, 46341 * 46341):
        assert exact_sqrt(n) == 0


def test_swap():
    assert swap(1, 2) == (2, 1)
    a, b = swap("x", "y")
    assert (a, b) == ("y", "x")
    assert swap(*swap(3, 4)) == (3, 4)