"""Solutions to problems 21 to 30."""

from __future__ import annotations

import itertools
from collections.abc import Sequence
from math import factorial
from os import PathLike
from typing import TypeVar

from eulersolve.primes import is_prime, prime_sieve

T = TypeVar("T")

_QUADRATIC_SIEVE_SIZE = 1_000_000


def divisor_sum(n: int) -> int:
    """Sum of the proper divisors of ``n`` (1 is always counted)."""
    total = 1
    divisor = 2
    while divisor * divisor < n:
        if n % divisor == 0:
            total += divisor + n // divisor
        divisor += 1
    if divisor * divisor == n:
        total += divisor
    return total


def solve_21(limit: int = 10000) -> int:
    """Sum of the amicable numbers below ``limit``."""
    sums = [0] + [divisor_sum(x) for x in range(1, limit)]
    return sum(
        x
        for x in range(1, limit)
        if (partner := sums[x]) != x and partner < len(sums) and sums[partner] == x
    )


def _first_word(chunk: str) -> str:
    rest = itertools.dropwhile(lambda c: not c.isalpha(), chunk)
    return "".join(itertools.takewhile(str.isalpha, rest))


def extract_names(text: str) -> list[str]:
    """Split comma-separated text into names, keeping the first run of letters of each field."""
    return [_first_word(chunk) for chunk in text.split(",")]


def name_score(name: str) -> int:
    """Alphabetical value of an upper-case name, with A worth 1."""
    if not all("A" <= c <= "Z" for c in name):
        raise ValueError(f"bad name {name!r}")
    return sum(ord(c) - ord("A") + 1 for c in name)


def total_name_score(text: str) -> int:
    """Sum of position-weighted name scores after sorting the names."""
    names = sorted(extract_names(text))
    return sum(position * name_score(name) for position, name in enumerate(names, start=1))


def solve_22(path: str | PathLike[str] = "names.txt") -> int:
    """Total name score of the names stored in ``path``."""
    with open(path, encoding="utf-8") as handle:
        return total_name_score(handle.read())


def is_abundant(n: int) -> bool:
    """True when the proper divisors of ``n`` sum to more than ``n``."""
    return n >= 1 and divisor_sum(n) > n


def solve_23(limit: int = 28200) -> int:
    """Sum of the numbers below ``limit`` that are not a sum of two abundant numbers."""
    abundants = [n for n in range(limit) if is_abundant(n)]
    abundant_mask = sum(1 << a for a in abundants)
    reachable = 0
    for a in abundants:
        reachable |= abundant_mask << a
    bits = f"{reachable:b}"[::-1]
    return sum(n for n in range(limit) if n >= len(bits) or bits[n] == "0")


def nth_permutation(items: Sequence[T], n: int) -> list[T]:
    """Return the ``n``-th (1-based) permutation of ``items`` in lexicographic order."""
    pool = list(items)
    if not 1 <= n <= factorial(len(pool)):
        raise ValueError(f"permutation index {n} out of range for {len(pool)} items")
    index = n - 1
    result: list[T] = []
    while pool:
        position, index = divmod(index, factorial(len(pool) - 1))
        result.append(pool.pop(position))
    return result


def solve_24(n: int = 1_000_000) -> str:
    """The ``n``-th lexicographic permutation of the digits 0 to 9."""
    return "".join(nth_permutation("0123456789", n))


def first_fibonacci_with_digits(digits: int) -> int:
    """Index of the first Fibonacci term exceeding ``10 ** (digits - 1)``."""
    if digits < 1:
        raise ValueError(f"digit count must be positive, got {digits}")
    limit = 10 ** (digits - 1)
    previous, current = 1, 1
    index = 1
    while True:
        previous, current = current, previous + current
        index += 1
        if previous > limit:
            return index


def solve_25(digits: int = 1000) -> int:
    """Index of the first Fibonacci term with ``digits`` digits."""
    return first_fibonacci_with_digits(digits)


def reciprocal_cycle_length(divisor: int) -> int:
    """Length of the recurring cycle of ``1 / divisor``; 0 if the expansion terminates."""
    if divisor < 1:
        raise ValueError(f"divisor must be positive, got {divisor}")
    remainder = 10 % divisor
    for _ in range(divisor):
        remainder = remainder * 10 % divisor
    if remainder == 0:
        return 0
    start = remainder
    remainder = remainder * 10 % divisor
    length = 1
    while remainder != start:
        remainder = remainder * 10 % divisor
        length += 1
    return length


def solve_26(limit: int = 1000) -> int:
    """Divisor below ``limit`` whose reciprocal has the longest recurring cycle."""
    if limit < 2:
        raise ValueError(f"limit must be at least 2, got {limit}")
    return max(range(1, limit), key=reciprocal_cycle_length)


def solve_27(limit: int = 1000) -> int:
    """Product ``a*b`` of the quadratic ``n*n + a*n + b`` giving the most consecutive primes.

    ``|a| < limit`` and ``|b| <= limit``.
    """
    sieve = prime_sieve(_QUADRATIC_SIEVE_SIZE)

    def prime(q: int) -> bool:
        if q < 0:
            return False
        return sieve[q] if q < len(sieve) else is_prime(q)

    # A non-prime b fails already at n = 0 and can never beat the best run.
    candidates_b = [b for b in range(2, limit + 1) if prime(b)]
    best_count = 0
    best_product = 0
    for a in range(-limit + 1, limit):
        for b in candidates_b:
            run = next(n for n in itertools.count() if not prime(n * n + a * n + b))
            if run > best_count:
                best_count = run
                best_product = a * b
    return best_product


def spiral_diagonal_sum(size: int) -> int:
    """Sum of the diagonals of a ``size`` by ``size`` number spiral."""
    if size < 1 or size % 2 == 0:
        raise ValueError(f"spiral size must be a positive odd number, got {size}")
    total = 1
    corner = 1
    for step in range(2, size, 2):
        for _ in range(4):
            corner += step
            total += corner
    return total


def solve_28(size: int = 1001) -> int:
    """Diagonal sum of the ``size`` spiral."""
    return spiral_diagonal_sum(size)


def solve_29(limit: int = 100) -> int:
    """Count of distinct ``a ** b`` for ``2 <= a, b <= limit``."""
    bases = range(2, limit + 1)
    return len({a**b for a in bases for b in bases})


def digit_power_sum(n: int, power: int) -> int:
    """Sum of the decimal digits of ``n`` each raised to ``power``."""
    if n == 0:
        return 0
    return sum(int(d) ** power for d in str(n))


def solve_30(power: int = 5) -> int:
    """Sum of the numbers of two or more digits equal to their digit power sum."""
    top = 9**power
    digits = 1
    while 10 ** (digits - 1) <= digits * top:
        digits += 1
    bound = (digits - 1) * top
    return sum(n for n in range(10, bound) if n == digit_power_sum(n, power))