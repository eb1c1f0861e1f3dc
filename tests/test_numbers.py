import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.numbers import fib, is_palindrome_number, reverse_integer

int32 = st.integers(min_value=-2147483648, max_value=2147483647)


def test_is_palindrome_number_examples():
    assert is_palindrome_number(121)
    assert is_palindrome_number(0)
    assert not is_palindrome_number(-121)
    assert not is_palindrome_number(10)


@given(st.integers(min_value=0, max_value=2147483647))
def test_is_palindrome_number_matches_digits(x):
    digits = str(x)
    assert is_palindrome_number(x) == (digits == digits[::-1])


@given(st.integers(min_value=-2147483648, max_value=-1))
def test_negative_is_never_palindrome(x):
    assert not is_palindrome_number(x)


@pytest.mark.parametrize("x", [2147483648, -2147483649])
def test_out_of_range_raises(x):
    with pytest.raises(ValueError):
        is_palindrome_number(x)
    with pytest.raises(ValueError):
        reverse_integer(x)


def test_reverse_integer_examples():
    assert reverse_integer(123) == 321
    assert reverse_integer(-123) == -321


def test_reverse_integer_overflow_gives_zero():
    assert reverse_integer(2147483647) == 0
    assert reverse_integer(-2147483648) == 0


@given(st.integers(min_value=-999999999, max_value=999999999))
def test_reverse_integer_round_trip(x):
    if x % 10 == 0:
        x += 1 if x >= 0 else -1
    assert reverse_integer(reverse_integer(x)) == x


@given(int32)
def test_reverse_integer_keeps_sign(x):
    result = reverse_integer(x)
    assert result * x >= 0


def test_fib_base_cases():
    assert fib(0) == 0
    assert fib(1) == 1
    assert fib(-3) == -3


def test_fib_ten():
    assert fib(10) == 55


@given(st.integers(min_value=2, max_value=200))
def test_fib_recurrence(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)