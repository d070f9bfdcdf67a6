"""Solutions to problems 1 to 10."""

from __future__ import annotations

import math
from collections.abc import Iterator
from functools import reduce

from eulersolve.primes import primes_below

_THOUSAND_DIGITS = """
73167176531330624919225119674426574742355349194934
96983520312774506326239578318016984801869478851843
85861560789112949495459501737958331952853208805511
12540698747158523863050715693290963295227443043557
66896648950445244523161731856403098711121722383113
62229893423380308135336276614282806444486645238749
30358907296290491560440772390713810515859307960866
70172427121883998797908792274921901699720888093776
65727333001053367881220235421809751254540594752243
52584907711670556013604839586446706324415722155397
53697817977846174064955149290862569321978468622482
83972241375657056057490261407972968652414535100474
82166370484403199890008895243450658541227588666881
16427171479924442928230863465674813919123162824586
17866458359124566529476545682848912883142607690042
24219022671055626321111109370544217506941658960408
07198403850962455444362981230987879927244284909188
84580156166097919133875499200524063689912560717606
05886116467109405077541002256983155200055935729725
71636269561882670428252483600823257530420752963450
"""

_DECIMAL_DIGITS = frozenset("0123456789")


def solve_1(limit: int = 1000) -> int:
    """Sum of the natural numbers below ``limit`` that are multiples of 3 or 5."""
    return sum(n for n in range(limit) if n % 3 == 0 or n % 5 == 0)


def _even_fibonacci(limit: int) -> Iterator[int]:
    current, previous = 2, 1
    while current < limit:
        yield current
        current, previous = 3 * current + 2 * previous, 2 * current + previous


def solve_2(limit: int = 4_000_000) -> int:
    """Sum of the even Fibonacci numbers below ``limit``."""
    return sum(_even_fibonacci(limit))


def smallest_prime_factor(n: int) -> int:
    """Return the smallest prime factor of ``n``, or ``n`` itself when it is prime or 1."""
    if n < 1:
        raise ValueError(f"expected a positive integer, got {n}")
    if n % 2 == 0:
        return 2
    if n % 3 == 0:
        return 3
    factor = 5
    while factor * factor <= n:
        if n % factor == 0:
            return factor
        if n % (factor + 2) == 0:
            return factor + 2
        factor += 6
    return n


def largest_prime_factor(n: int) -> int:
    """Return the largest prime factor of ``n``."""
    while (factor := smallest_prime_factor(n)) != n:
        n //= factor
    return n


def solve_3(n: int = 600851475143) -> int:
    """Largest prime factor of ``n``."""
    return largest_prime_factor(n)


def is_palindrome(n: int) -> bool:
    """True when the decimal digits of ``n`` read the same both ways."""
    text = str(n)
    return text == text[::-1]


def solve_4() -> int:
    """Largest palindrome made from the product of two three-digit numbers.

    Factor pairs are visited by decreasing sum so the search can stop early.
    """
    factor_sum = 999 + 999
    best = 0
    while True:
        factor_diff = factor_sum % 2
        while factor_sum + factor_diff < 2000:
            a = (factor_sum + factor_diff) // 2
            b = (factor_sum - factor_diff) // 2
            product = a * b
            if product < best:
                if factor_diff < 2:
                    return best
                break
            if is_palindrome(product):
                best = product
            factor_diff += 1
        factor_sum -= 1


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two positive integers."""
    if a < b:
        a, b = b, a
    while b > 1:
        a, b = b, a % b
        if b == 0:
            return a
    return b


def lcm(a: int, b: int) -> int:
    """Least common multiple of two positive integers."""
    return a * (b // gcd(a, b))


def solve_5(n: int = 20) -> int:
    """Smallest positive number divisible by every number from 1 to ``n``."""
    return reduce(lcm, range(1, n + 1), 1)


def solve_6(n: int = 100) -> int:
    """Square of the sum minus the sum of squares of 1 to ``n``."""
    numbers = range(1, n + 1)
    return sum(numbers) ** 2 - sum(k * k for k in numbers)


def nth_prime(n: int) -> int:
    """Return the ``n``-th prime, counting 2 as the first."""
    if n < 1:
        raise ValueError(f"prime index must be positive, got {n}")
    size = 50_000
    while len(primes := primes_below(size)) < n:
        size *= 2
    return primes[n - 1]


def solve_7(n: int = 10001) -> int:
    """The ``n``-th prime number."""
    return nth_prime(n)


def max_adjacent_product(digits: str, span: int) -> int:
    """Largest product of ``span`` adjacent decimal digits in ``digits``.

    Characters other than ASCII digits are skipped; too few digits give 0.
    """
    if span < 1:
        raise ValueError(f"span must be positive, got {span}")
    values = [int(c) for c in digits if c in _DECIMAL_DIGITS]
    windows = zip(*(values[offset:] for offset in range(span)))
    return max(map(math.prod, windows), default=0)


def solve_8(span: int = 13) -> int:
    """Largest product of ``span`` adjacent digits in the thousand-digit number."""
    return max_adjacent_product(_THOUSAND_DIGITS, span)


def pythagorean_triplet_product(perimeter: int) -> int:
    """Product ``a*b*c`` of a Pythagorean triplet with ``a + b + c == perimeter``."""
    if perimeter < 1:
        raise ValueError(f"perimeter must be positive, got {perimeter}")
    m = 2
    while 2 * m * m + 2 * m <= perimeter:
        for n in range(1, m):
            a = m * m - n * n
            b = 2 * m * n
            c = m * m + n * n
            total = a + b + c
            if perimeter % total == 0:
                k = perimeter // total
                return (k * a) * (k * b) * (k * c)
        m += 1
    raise ValueError(f"no Pythagorean triplet has perimeter {perimeter}")


def solve_9(perimeter: int = 1000) -> int:
    """Product of the Pythagorean triplet whose sum is ``perimeter``."""
    return pythagorean_triplet_product(perimeter)


def solve_10(limit: int = 2_000_000) -> int:
    """Sum of all primes below ``limit``."""
    return sum(primes_below(limit))