"""Integer problems on 32-bit signed values, plus Fibonacci numbers."""

INT32_MIN = -2147483648
INT32_MAX = 2147483647


def _check_int32(x: int) -> None:
    if not INT32_MIN <= x <= INT32_MAX:
        raise ValueError(f"{x} is outside the 32-bit signed range")


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal digits of ``x`` read the same both ways."""
    _check_int32(x)
    if x < 0 or (x % 10 == 0 and x != 0):
        return False
    reversed_half = 0
    while x > reversed_half:
        reversed_half = reversed_half * 10 + x % 10
        x //= 10
    return x == reversed_half or x == reversed_half // 10


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign; 0 if that overflows 32 bits."""
    _check_int32(x)
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if not INT32_MIN <= result <= INT32_MAX:
        return 0
    return result


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number; values of ``n`` below 2 are returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current