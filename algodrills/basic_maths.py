"""Number drills: digits, divisors, primes, bits."""

from __future__ import annotations

import math

_WORD_BITS = 32


def count_digits(number: int) -> int:
    """Return the number of decimal digits; zero has none."""
    count = 0
    remaining = abs(number)
    while remaining:
        remaining //= 10
        count += 1
    return count


def divisors(number: int) -> list[int]:
    """Return the positive divisors of ``number`` in ascending order."""
    return [candidate for candidate in range(1, number + 1) if number % candidate == 0]


def hcf(first: int, second: int) -> int:
    """Return the highest common factor, or 1 when either value is not positive."""
    if min(first, second) < 1:
        return 1
    return math.gcd(first, second)


def reverse_digits(number: int) -> int:
    """Reverse the decimal digits of ``number``, keeping its sign."""
    sign = -1 if number < 0 else 1
    return sign * int(str(abs(number))[::-1])


def is_palindrome_number(number: int) -> bool:
    """Return True when ``number`` reads the same reversed."""
    return reverse_digits(number) == number


def is_prime(number: int) -> bool:
    """Return True for prime numbers."""
    if number < 2:
        return False
    return all(number % factor for factor in range(2, math.isqrt(number) + 1))


def reverse_bits(number: int) -> int:
    """Reverse the bits of a 32-bit unsigned integer."""
    if not 0 <= number < 1 << _WORD_BITS:
        raise ValueError("number must fit in 32 unsigned bits")
    return int(format(number, f"0{_WORD_BITS}b")[::-1], 2)


def sum_of_divisors_up_to(limit: int) -> int:
    """Return the sum, over 1..limit, of every number's divisors."""
    return sum(divisor * (limit // divisor) for divisor in range(1, limit + 1))


def is_armstrong(number: int) -> bool:
    """Return True when ``number`` equals the sum of its digits raised to the digit count."""
    sign = -1 if number < 0 else 1
    digits = [sign * int(char) for char in str(abs(number))] if number else []
    power = len(digits)
    return sum(digit**power for digit in digits) == number