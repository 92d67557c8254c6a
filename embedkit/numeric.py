"""Small integer helpers: base conversion, digits, factorials, bits and interest."""

from __future__ import annotations

import math
from collections.abc import Iterable

_UINT32_MASK = 0xFFFFFFFF


def _split_sign(n: int) -> tuple[int, int]:
    return (-1 if n < 0 else 1), abs(n)


def dec_to_bin(n: int) -> int:
    """Return an integer whose decimal digits spell the binary form of ``n``.

    ``dec_to_bin(15)`` gives ``1111``. The sign of ``n`` is kept.
    """
    sign, n = _split_sign(n)
    result = 0
    place = 1
    while n:
        n, bit = divmod(n, 2)
        result += bit * place
        place *= 10
    return sign * result


def bin_to_dec(n: int) -> int:
    """Read the decimal digits of ``n`` as binary digits and return the value.

    ``bin_to_dec(1101)`` gives ``13``. Each digit is weighted by a power of two
    as written, and the sign of ``n`` is kept.
    """
    sign, n = _split_sign(n)
    result = 0
    weight = 1
    while n:
        n, digit = divmod(n, 10)
        result += digit * weight
        weight *= 2
    return sign * result


def factorial(num: int) -> int:
    """Return ``num!`` computed iteratively; values below one give ``1``."""
    return math.prod(range(1, num + 1))


def factorial_recursive(num: int) -> int:
    """Return ``num!`` computed by recursion; ``num`` must be at least one."""
    if num < 1:
        raise ValueError("factorial_recursive needs a number of at least 1")
    if num == 1:
        return 1
    return num * factorial_recursive(num - 1)


def _require_positive(a: int, b: int) -> None:
    if a < 1 or b < 1:
        raise ValueError("both numbers must be positive")


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of two positive integers."""
    _require_positive(a, b)
    step = max(a, b)
    candidate = step
    while candidate % a or candidate % b:
        candidate += step
    return candidate


def hcf(a: int, b: int) -> int:
    """Return the highest common factor of two positive integers."""
    _require_positive(a, b)
    while a != b:
        if a > b:
            a -= b
        else:
            b -= a
    return a


def _digits(num: int) -> Iterable[int]:
    """Yield the decimal digits of ``abs(num)``, least significant first."""
    num = abs(num)
    while num:
        num, digit = divmod(num, 10)
        yield digit


def num_of_digits(num: int) -> int:
    """Return the number of decimal digits in ``num``; zero has one digit."""
    return max(1, sum(1 for _ in _digits(num)))


def reverse_digits(num: int) -> int:
    """Return ``num`` with its decimal digits in reverse order, sign kept."""
    sign, _ = _split_sign(num)
    reversed_value = 0
    for digit in _digits(num):
        reversed_value = reversed_value * 10 + digit
    return sign * reversed_value


def sum_of_digits(num: int) -> int:
    """Return the sum of the decimal digits of ``num``, sign kept."""
    sign, _ = _split_sign(num)
    return sign * sum(_digits(num))


def is_palindrome(num: int) -> bool:
    """Return whether ``num`` reads the same with its digits reversed."""
    return reverse_digits(num) == num


def count_set_bits(num: int) -> int:
    """Return how many of the low 32 bits of ``num`` are set."""
    return bin(num & _UINT32_MASK).count("1")


def set_bit(num: int, pos: int, val: int) -> int:
    """Return the 32-bit ``num`` with bit ``pos`` cleared if ``val`` is 0, else set."""
    if not 0 <= pos < 32:
        raise ValueError(f"bit position {pos} is outside 0..31")
    mask = 1 << pos
    num &= _UINT32_MASK
    return num & ~mask & _UINT32_MASK if val == 0 else num | mask


def simple_interest(amount: int, rate: int, years: int) -> float:
    """Return ``amount * rate * years / 100`` with the division truncated toward zero."""
    product = amount * rate * years
    quotient = abs(product) // 100
    return float(-quotient if product < 0 else quotient)


def top_two(values: Iterable[int]) -> tuple[int, int]:
    """Scan ``values`` keeping a running maximum that starts at zero.

    Return the final maximum and the maximum it last displaced. Values that do
    not raise the running maximum never become the second result.
    """
    first = second = 0
    for value in values:
        if value > first:
            second, first = first, value
    return first, second