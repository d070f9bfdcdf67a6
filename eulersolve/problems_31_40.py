"""Solutions to problems 31 to 40."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterable, Iterator, Sequence
from fractions import Fraction

from eulersolve.primes import is_prime, prime_sieve

_BRITISH_COINS = (1, 2, 5, 10, 20, 50, 100, 200)
_PANDIGITS = "123456789"
_DIGIT_FACTORIALS = tuple(math.factorial(d) for d in range(10))
_RIGHT_APPEND_DIGITS = (1, 3, 7, 9)
_SEED_PRIMES = (2, 3, 5, 7)


def coin_combinations(target: int, coins: Iterable[int] = _BRITISH_COINS) -> int:
    """Number of ways to make ``target`` from any number of the given coins."""
    if target < 0:
        raise ValueError(f"target must not be negative, got {target}")
    denominations = sorted(set(coins))
    if any(c < 1 for c in denominations):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * target
    for coin in denominations:
        for amount in range(coin, target + 1):
            ways[amount] += ways[amount - coin]
    return ways[target]


def solve_31(target: int = 200) -> int:
    """Ways to make ``target`` pence from British coins."""
    return coin_combinations(target, _BRITISH_COINS)


def is_pandigital_product(a: int, b: int) -> bool:
    """True when ``a``, ``b`` and ``a * b`` together use each digit 1 to 9 exactly once."""
    text = f"{a}{b}{a * b}"
    return "".join(sorted(text)) == _PANDIGITS


def solve_32() -> int:
    """Sum of all products whose identity ``a * b = c`` is 1 to 9 pandigital."""
    pairs = itertools.chain(
        itertools.product(range(1, 9), range(1000, 9999)),
        itertools.product(range(10, 99), range(100, 999)),
    )
    products = {
        a * b
        for a, b in pairs
        if 1000 < a * b < 10000 and is_pandigital_product(a, b)
    }
    return sum(products)


def solve_33() -> int:
    """Denominator of the product of the four digit-cancelling fractions, in lowest terms."""
    product = Fraction(1)
    for a in range(1, 10):
        for d in range(a + 1, 10):
            for b in range(1, 10):
                if Fraction(10 * a + b, 10 * b + d) == Fraction(a, d):
                    product *= Fraction(a, d)
    return product.denominator


def digit_factorial_sum(n: int) -> int:
    """Sum of the factorials of the decimal digits of ``n`` (0 gives 0)."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    if n == 0:
        return 0
    return sum(_DIGIT_FACTORIALS[int(d)] for d in str(n))


def solve_34() -> int:
    """Sum of the numbers of two or more digits equal to their digit factorial sum."""
    upper = 7 * _DIGIT_FACTORIALS[9]
    found = set()
    # A digit multiset fixes the factorial sum, so only the multisets need visiting.
    for length in range(2, len(str(upper - 1)) + 1):
        for combo in itertools.combinations_with_replacement("0123456789", length):
            total = sum(_DIGIT_FACTORIALS[int(d)] for d in combo)
            if 10 <= total < upper and tuple(sorted(str(total))) == combo:
                found.add(total)
    return sum(found)


def is_circular_prime(n: int, sieve: Sequence[bool]) -> bool:
    """True when every rotation of the digits of ``n`` is prime according to ``sieve``."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    text = str(n)
    for shift in range(len(text)):
        rotation = int(text[shift:] + text[:shift])
        if rotation >= len(sieve):
            raise ValueError(f"sieve of size {len(sieve)} is too small for {rotation}")
        if not sieve[rotation]:
            return False
    return True


def solve_35(limit: int = 1_000_000) -> int:
    """Count of circular primes below ``limit``."""
    if limit < 2:
        return 0
    sieve = prime_sieve(10 ** len(str(limit - 1)))
    return sum(1 for n in range(1, limit) if sieve[n] and is_circular_prime(n, sieve))


def binary_palindromes(max_bits: int) -> Iterator[int]:
    """Yield, in ascending order, the positive binary palindromes of at most ``max_bits`` bits."""
    for length in range(1, max_bits + 1):
        half = (length + 1) // 2
        for head in range(1 << (half - 1), 1 << half):
            text = f"{head:b}"
            yield int(text + text[: length // 2][::-1], 2)


def is_decimal_palindrome(n: int) -> bool:
    """True when the decimal digits of ``n`` read the same both ways."""
    text = str(n)
    return text == text[::-1]


def solve_36(limit: int = 1_000_000) -> int:
    """Sum of the numbers below ``limit`` palindromic in both base 10 and base 2."""
    if limit < 2:
        return 0
    return sum(
        n
        for n in binary_palindromes((limit - 1).bit_length())
        if n < limit and is_decimal_palindrome(n)
    )


def _is_left_truncatable(n: int) -> bool:
    text = str(n)
    return all(is_prime(int(text[i:])) for i in range(len(text)))


def truncatable_primes() -> list[int]:
    """All primes above 10 that stay prime when truncated from either side, ascending."""
    right_truncatable = set(_SEED_PRIMES)
    edge = set(_SEED_PRIMES)
    while edge:
        edge = {
            candidate
            for prime in edge
            for last in _RIGHT_APPEND_DIGITS
            if is_prime(candidate := 10 * prime + last)
        }
        right_truncatable |= edge
    return sorted(p for p in right_truncatable if p > 10 and _is_left_truncatable(p))


def solve_37() -> int:
    """Sum of the eleven primes truncatable from both sides."""
    return sum(truncatable_primes())


def pandigital_multiple(n: int) -> int:
    """Concatenated product of ``n`` with 1, 2, ... if it is 1 to 9 pandigital, else 0."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    text = ""
    for multiplier in itertools.count(1):
        text += str(n * multiplier)
        if len(text) >= 9:
            break
    return int(text) if "".join(sorted(text)) == _PANDIGITS else 0


def solve_38() -> int:
    """Largest 1 to 9 pandigital number formed as a concatenated product."""
    return max(pandigital_multiple(n) for n in range(1, 10000))


def perimeter_solution_counts(limit: int) -> list[int]:
    """Entry ``p`` counts integer right triangles with perimeter ``p``, for ``0 <= p <= limit``."""
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    counts = [0] * (limit + 1)
    n = 1
    while 2 * (n + 1) * (2 * n + 1) <= limit:
        m = n + 1
        while (primitive := 2 * m * (m + n)) <= limit:
            if math.gcd(m, n) == 1:
                for perimeter in range(primitive, limit + 1, primitive):
                    counts[perimeter] += 1
            m += 2
        n += 1
    return counts


def solve_39(limit: int = 1000) -> int:
    """Perimeter up to ``limit`` with the most right-triangle solutions (latest on ties)."""
    counts = perimeter_solution_counts(limit)
    return max(range(limit + 1), key=lambda p: (counts[p], p))


def _champernowne_digit(position: int) -> int:
    digits, count, start = 1, 9, 1
    while position > digits * count:
        position -= digits * count
        digits += 1
        count *= 10
        start *= 10
    number = start + (position - 1) // digits
    return int(str(number)[(position - 1) % digits])


def solve_40(limit: int = 10_000_000) -> int:
    """Product of the Champernowne digits at positions 1, 10, 100, ... below ``limit``."""
    positions = itertools.takewhile(lambda p: p < limit, (10**k for k in itertools.count()))
    return math.prod(_champernowne_digit(p) for p in positions)