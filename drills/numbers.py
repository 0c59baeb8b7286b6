"""Integer exercises: coins, factors, guessing, digits and bits."""

from __future__ import annotations

from collections.abc import Callable
from math import isqrt

INT32_MAX = 2**31 - 1
_WORD_MASK = (1 << 64) - 1


def arrange_coins(n: int) -> int:
    """Return how many complete staircase rows ``n`` coins fill.

    Row ``i`` needs ``i`` coins. A negative ``n`` is returned unchanged.
    """
    left, right = 0, n
    while left <= right:
        mid = left + (right - left) // 2
        used = mid * (mid + 1) // 2
        if used == n:
            return mid
        if used > n:
            right = mid - 1
        else:
            left = mid + 1
    return right


def factors_of_3_or_5(n: int) -> list[int]:
    """Return the divisors of ``n`` that are multiples of 3 or 5, ascending.

    Non-positive ``n`` has none.
    """
    if n <= 0:
        return []
    return [d for d in range(1, n + 1) if n % d == 0 and (d % 3 == 0 or d % 5 == 0)]


def guess_number(n: int, guess: Callable[[int], int]) -> int:
    """Find the secret number in ``1..n`` by binary search.

    ``guess(m)`` must be positive if the secret is above ``m``, negative if it
    is below and zero if it is ``m``. Raises ValueError if no number matches.
    """
    left, right = 1, n
    while left <= right:
        mid = left + (right - left) // 2
        answer = guess(mid)
        if answer > 0:
            left = mid + 1
        elif answer < 0:
            right = mid - 1
        else:
            return mid
    raise ValueError(f"no number in 1..{n} matches the guesses")


def _digit_square_sum(n: int) -> int:
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit * digit
    return total


def is_happy(n: int) -> bool:
    """Tell whether repeatedly summing squared digits reaches 1."""
    seen: set[int] = set()
    while n != 1:
        n = _digit_square_sum(n)
        if n in seen:
            return False
        seen.add(n)
    return True


def hamming_weight(x: int) -> int:
    """Count the set bits of ``x``; negatives are taken as 64-bit two's complement."""
    if x < 0:
        x &= _WORD_MASK
    return bin(x).count("1")


def _trunc_divmod(x: int, d: int) -> tuple[int, int]:
    q = abs(x) // d
    if x < 0:
        q = -q
    return q, x - q * d


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``.

    Returns 0 as soon as a partial result exceeds ``2**31 - 1`` while positive
    digits remain, and for negative numbers of more than one digit.
    """
    result = 0
    while x != 0:
        x, rem = _trunc_divmod(x, 10)
        result = result * 10 + rem
        if (result > INT32_MAX and x > 0) or (result < INT32_MAX and x < 0):
            return 0
    return result


def is_ugly(n: int) -> bool:
    """Tell whether ``n`` is positive with no prime factors beyond 2, 3 and 5."""
    if n <= 0:
        return False
    for p in (2, 3, 5):
        while n % p == 0:
            n //= p
    return n == 1


def is_perfect_square(n: int) -> bool:
    """Tell whether ``n`` is the square of a positive integer."""
    return n >= 1 and isqrt(n) ** 2 == n