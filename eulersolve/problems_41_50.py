"""Solutions to problems 41 to 50."""

from __future__ import annotations

import heapq
import itertools
import math
from collections import defaultdict
from collections.abc import Iterator
from os import PathLike

from eulersolve.primes import is_prime, prime_sieve, primes_below
from eulersolve.problems_21_30 import extract_names, name_score

_SUBSTRING_DIVISORS = (2, 3, 5, 7, 11, 13, 17)
_TEN_DIGITS_MODULUS = 10**10
_FACTOR_SEARCH_START = 1000
_FACTOR_SEARCH_LIMIT = 1_000_000
_KNOWN_SEQUENCE_START = 1487


def largest_pandigital_prime(n_digits: int) -> int | None:
    """Largest prime using each digit 1 to ``n_digits`` exactly once, or None if there is none."""
    if not 1 <= n_digits <= 9:
        raise ValueError(f"digit count must be between 1 and 9, got {n_digits}")
    digits = "".join(str(d) for d in range(n_digits, 0, -1))
    # Permutations of a descending string come out in descending numeric order.
    for perm in itertools.permutations(digits):
        value = int("".join(perm))
        if is_prime(value):
            return value
    return None


def solve_41() -> int:
    """Largest pandigital prime.

    Pandigital numbers of 8 or 9 digits are divisible by 3, so 7 digits are tried first.
    """
    result = largest_pandigital_prime(7)
    if result is None:
        result = largest_pandigital_prime(4)
    if result is None:
        raise ValueError("no pandigital prime found")
    return result


def is_perfect_square(n: int) -> bool:
    """True when ``n`` is the square of an integer."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    root = math.isqrt(n)
    return root * root == n


def triangle_word_count(text: str) -> int:
    """Number of comma-separated words whose letter score is a triangular number."""
    if not text:
        return 0
    return sum(1 for word in extract_names(text) if is_perfect_square(8 * name_score(word) + 1))


def solve_42(path: str | PathLike[str] = "words.txt") -> int:
    """Count of triangle words in the file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return triangle_word_count(handle.read())


def _divisible_extensions(prefix: tuple[int, ...], remaining: frozenset[int]) -> Iterator[int]:
    if not remaining:
        yield int("".join(map(str, prefix)))
        return
    for digit in sorted(remaining, reverse=True):
        candidate = prefix + (digit,)
        if len(candidate) >= 4:
            a, b, c = candidate[-3:]
            if (100 * a + 10 * b + c) % _SUBSTRING_DIVISORS[len(candidate) - 4]:
                continue
        yield from _divisible_extensions(candidate, remaining - {digit})


def substring_divisible_pandigitals() -> list[int]:
    """All 0 to 9 pandigital numbers with the sub-string divisibility property, descending."""
    return list(_divisible_extensions((), frozenset(range(10))))


def solve_43() -> int:
    """Sum of the pandigital numbers with the sub-string divisibility property."""
    return sum(substring_divisible_pandigitals())


def is_pentagonal(n: int) -> bool:
    """True when ``n`` is a pentagonal number ``k * (3k - 1) / 2`` with ``k >= 1``."""
    if n < 0:
        return False
    target = 1 + 24 * n
    root = math.isqrt(target)
    return root * root == target and root % 6 == 5


def _pentagonal(k: int) -> int:
    return k * (3 * k - 1) // 2


def solve_44() -> int:
    """Smallest difference of two pentagonal numbers whose sum and difference are pentagonal.

    Pairs ``(P(n), P(n + k))`` are visited in order of increasing difference.
    """
    # Ties on the difference favour larger n, then larger k.
    heap: list[tuple[int, int, int]] = [(_pentagonal(2) - _pentagonal(1), -1, -1)]
    while heap:
        _, neg_n, neg_k = heapq.heappop(heap)
        n, k = -neg_n, -neg_k
        pn = _pentagonal(n)
        pk = _pentagonal(n + k)
        difference = pk - pn
        if is_pentagonal(difference) and is_pentagonal(pn + pk):
            return difference
        pk_next = _pentagonal(n + k + 1)
        if n == 1:
            heapq.heappush(heap, (pk_next - pn, -n, -(k + 1)))
        heapq.heappush(heap, (pk_next - _pentagonal(n + 1), -(n + 1), -k))
    raise ValueError("search exhausted")


def solve_45(start: int = 144) -> int:
    """First hexagonal number ``H(n)`` with ``n >= start`` that is also pentagonal."""
    if start < 1:
        raise ValueError(f"start index must be positive, got {start}")
    for n in itertools.count(start):
        hexagonal = n * (2 * n - 1)
        if is_pentagonal(hexagonal):
            return hexagonal
    raise AssertionError("unreachable")


def solve_46(limit: int = 1_000_000) -> int:
    """Smallest odd composite below ``limit`` that is not a prime plus twice a square."""
    if limit < 3:
        raise ValueError(f"limit must be at least 3, got {limit}")
    sieve = prime_sieve(limit)
    for n in range(3, limit, 2):
        if sieve[n]:
            continue
        squares = itertools.takewhile(lambda s: s < n, (2 * k * k for k in itertools.count(1)))
        if not any(sieve[n - s] for s in squares):
            return n
    raise ValueError(f"no counterexample below {limit}")


def distinct_prime_factor_counts(size: int) -> list[int]:
    """Entry ``i`` is the number of distinct prime factors of ``i``, for ``0 <= i < size``."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    counts = [0] * size
    for p in range(2, size):
        if counts[p] == 0:
            for multiple in range(p, size, p):
                counts[multiple] += 1
    return counts


def solve_47(run: int = 4) -> int:
    """First of ``run`` consecutive integers each having ``run`` distinct prime factors."""
    if run < 1:
        raise ValueError(f"run length must be positive, got {run}")
    size = _FACTOR_SEARCH_START
    while True:
        size = min(size, _FACTOR_SEARCH_LIMIT)
        counts = distinct_prime_factor_counts(size)
        streak = 0
        for n in range(2, size):
            streak = streak + 1 if counts[n] == run else 0
            if streak == run:
                return n - run + 1
        if size == _FACTOR_SEARCH_LIMIT:
            raise ValueError(f"no run of {run} found below {_FACTOR_SEARCH_LIMIT}")
        size *= 2


def last_digits_pow(base: int, exponent: int) -> int:
    """Last ten decimal digits of ``base ** exponent``."""
    if exponent < 0:
        raise ValueError(f"exponent must not be negative, got {exponent}")
    return pow(base, exponent, _TEN_DIGITS_MODULUS)


def solve_48(limit: int = 1000) -> int:
    """Last ten digits of ``1**1 + 2**2 + ... + limit**limit``."""
    return sum(last_digits_pow(n, n) for n in range(1, limit + 1)) % _TEN_DIGITS_MODULUS


def prime_permutation_sequences() -> list[tuple[int, int, int]]:
    """Arithmetic sequences of three four-digit primes that are digit permutations of each other."""
    groups: defaultdict[tuple[str, ...], list[int]] = defaultdict(list)
    for p in primes_below(10000):
        if p >= 1000:
            groups[tuple(sorted(str(p)))].append(p)
    return sorted(
        (a, b, c)
        for members in groups.values()
        for a, b, c in itertools.combinations(members, 3)
        if a + c == 2 * b
    )


def solve_49() -> str:
    """Concatenation of the prime permutation sequence other than the one starting at 1487."""
    for a, b, c in prime_permutation_sequences():
        if a != _KNOWN_SEQUENCE_START:
            return f"{a}{b}{c}"
    raise ValueError("no other sequence found")


def solve_50(limit: int = 1_000_000) -> int:
    """Prime below ``limit`` written as the sum of the most consecutive primes (two or more)."""
    if limit < 3:
        raise ValueError(f"limit must be at least 3, got {limit}")
    sieve = prime_sieve(limit)
    primes = [n for n, prime in enumerate(sieve) if prime]
    prefix = [0, *itertools.accumulate(primes)]
    best_count = 1
    best_sum = 0
    for start in range(len(primes)):
        first_end = start + best_count + 1
        if first_end > len(primes) or prefix[first_end] - prefix[start] >= limit:
            break
        for end in range(first_end, len(primes) + 1):
            total = prefix[end] - prefix[start]
            if total >= limit:
                break
            if sieve[total]:
                best_count = end - start
                best_sum = total
    if best_sum == 0:
        raise ValueError(f"no prime below {limit} is a sum of consecutive primes")
    return best_sum