"""Solutions to problems 51 to 60."""

from __future__ import annotations

import bisect
import heapq
import itertools
import math
from collections import Counter, defaultdict
from collections.abc import Mapping, Sequence
from os import PathLike

from eulersolve.primes import is_prime_by_trial, primes_below
from eulersolve.problems_11_20 import digit_sum

_FAMILY_SIEVE_SIZE = 1_000_000
_BINOMIAL_ROWS = 100
_LYCHREL_ITERATIONS = 50
_CONCAT_SIEVE_SIZE = 100_000
_MILLER_RABIN_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)

_ENGLISH_FREQUENCIES = {
    ord("e"): 12702,
    ord("t"): 9056,
    ord("a"): 8167,
    ord("o"): 7507,
    ord("i"): 6966,
    ord("n"): 6749,
    ord("s"): 6327,
    ord("h"): 6094,
    ord("r"): 5987,
    ord("d"): 4253,
}
_COMMON_LETTERS = frozenset(_ENGLISH_FREQUENCIES)
_KEY_LENGTH = 3
_KEY_ALPHABET = range(ord("a"), ord("z") + 1)
_NO_KEY_CHAR = ord("@")
_WORST_SCORE = 99999.0


def replacement_signatures(pattern: str, digit: str) -> list[str]:
    """All variants of ``pattern`` where some, but not all, of its ``*`` are replaced by ``digit``.

    The pattern itself comes first; a pattern without ``*`` has no signatures.
    """
    positions = [i for i, c in enumerate(pattern) if c == "*"]
    choices = list(itertools.product(("*", digit), repeat=len(positions)))[:-1]
    signatures = []
    for choice in choices:
        chars = list(pattern)
        for position, char in zip(positions, choice):
            chars[position] = char
        signatures.append("".join(chars))
    return signatures


def solve_51(family_size: int = 8) -> int:
    """Smallest prime belonging to a family of ``family_size`` primes made by replacing digits."""
    if family_size < 1:
        raise ValueError(f"family size must be positive, got {family_size}")
    buckets: defaultdict[str, set[int]] = defaultdict(set)
    for prime in primes_below(_FAMILY_SIEVE_SIZE):
        text = str(prime)
        for digit in set(text):
            for signature in replacement_signatures(text.replace(digit, "*"), digit):
                buckets[signature].add(prime)
    smallest = [min(members) for members in buckets.values() if len(members) >= family_size]
    if not smallest:
        raise ValueError(f"no prime family of size {family_size} found")
    return min(smallest)


def digit_signature(n: int) -> tuple[int, ...]:
    """Count of each decimal digit 0 to 9 in ``n``."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    counts = Counter(str(n))
    return tuple(counts[d] for d in "0123456789")


def solve_52() -> int:
    """Smallest ``n`` such that ``2n`` to ``6n`` all contain the same digits as ``n``."""
    base = 10
    while True:
        # Such an n is a multiple of 9 and 6n must keep the digit count of n.
        for n in range(base + 8, 10 * base // 6, 9):
            signature = digit_signature(n)
            if all(digit_signature(k * n) == signature for k in (6, 2, 3, 4, 5)):
                return n
        base *= 10


def solve_53(limit: int = 1_000_000) -> int:
    """Count of ``C(n, r)`` for ``1 <= n <= 100`` that are greater than ``limit``."""
    return sum(
        1
        for n in range(1, _BINOMIAL_ROWS + 1)
        for r in range(n + 1)
        if math.comb(n, r) > limit
    )


def reverse_digits(n: int) -> int:
    """The number read from the decimal digits of ``n`` in reverse order."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    return int(str(n)[::-1])


def is_lychrel(n: int) -> bool:
    """True when ``n`` reaches no palindrome within fifty reverse-and-add steps."""
    value = n + reverse_digits(n)
    for _ in range(1, _LYCHREL_ITERATIONS):
        reverse = reverse_digits(value)
        if value == reverse:
            return False
        value += reverse
    return True


def solve_55(limit: int = 10000) -> int:
    """Count of Lychrel numbers below ``limit``."""
    return sum(1 for n in range(1, limit) if is_lychrel(n))


def max_digit_sum_power(limit: int) -> int:
    """Largest digit sum of ``a ** b`` for ``1 <= a, b < limit``."""
    if limit < 2:
        raise ValueError(f"limit must be at least 2, got {limit}")
    numbers = range(1, limit)
    return max(digit_sum(a**b) for a in numbers for b in numbers)


def solve_56(limit: int = 100) -> int:
    """Maximum digit sum of ``a ** b`` for ``a, b < limit``."""
    return max_digit_sum_power(limit)


def solve_57(expansions: int = 1000) -> int:
    """Expansions of the square-root-of-two fraction whose numerator has more digits."""
    if expansions < 0:
        raise ValueError(f"expansion count must not be negative, got {expansions}")
    numerator, denominator = 3, 2
    count = 0
    for _ in range(expansions):
        numerator, denominator = numerator + 2 * denominator, numerator + denominator
        if len(str(numerator)) > len(str(denominator)):
            count += 1
    return count


def _is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin test, exact for all n below 3.3e24."""
    if n < 2:
        return False
    for p in _MILLER_RABIN_BASES:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _MILLER_RABIN_BASES:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def solve_58() -> int:
    """Side length of the spiral at which primes on the diagonals first fall below 10%."""
    corners, prime_corners = 1, 0
    corner, step = 1, 2
    while True:
        for _ in range(4):
            corner += step
            if _is_prime(corner):
                prime_corners += 1
        corners += 4
        step += 2
        if 10 * prime_corners < corners:
            return step - 1


def parse_cipher(text: str) -> list[int]:
    """Parse comma-separated byte values."""
    values = []
    for field in text.strip().split(","):
        token = field.strip()
        digits = token[1:] if token.startswith("+") else token
        if not (digits.isascii() and digits.isdigit()) or int(digits) > 255:
            raise ValueError(f"Invalid u8: {field!r}")
        values.append(int(digits))
    return values


def normalize_frequencies(counts: Mapping[int, int]) -> dict[int, float]:
    """Relative frequencies of the ten most common English letters, case-folded."""
    totals: Counter[int] = Counter()
    for byte, count in counts.items():
        letter = byte + 32 if ord("A") <= byte <= ord("Z") else byte
        if letter in _COMMON_LETTERS and count:
            totals[letter] += count
    total = sum(totals.values())
    return {letter: count / total for letter, count in totals.items()}


def l2_distance(counts1: Mapping[int, int], counts2: Mapping[int, int]) -> float:
    """Euclidean distance between the normalised common-letter frequencies of two counts."""
    map1 = normalize_frequencies(counts1)
    map2 = normalize_frequencies(counts2)
    return math.sqrt(
        sum((map1.get(k, 0.0) - map2.get(k, 0.0)) ** 2 for k in map1.keys() | map2.keys())
    )


def find_key(data: Sequence[int]) -> bytes:
    """Guess the three lower-case letter XOR key of English text by letter frequencies."""
    key = bytearray()
    for position in range(_KEY_LENGTH):
        counts = Counter(data[position::_KEY_LENGTH])
        best_char, best_score = _NO_KEY_CHAR, _WORST_SCORE
        for candidate in _KEY_ALPHABET:
            decoded = {byte ^ candidate: n for byte, n in counts.items()}
            score = l2_distance(decoded, _ENGLISH_FREQUENCIES)
            if score < best_score:
                best_char, best_score = candidate, score
        key.append(best_char)
    return bytes(key)


def decrypted_sum(data: Sequence[int], key: bytes) -> int:
    """Sum of the byte values of ``data`` decrypted with the repeating XOR ``key``."""
    if not key:
        raise ValueError("key must not be empty")
    return sum(byte ^ k for byte, k in zip(data, itertools.cycle(key)))


def solve_59(path: str | PathLike[str] = "0059_cipher.txt") -> int:
    """Sum of the decrypted bytes of the cipher text stored in ``path``."""
    with open(path, encoding="utf-8") as handle:
        data = parse_cipher(handle.read())
    return decrypted_sum(data, find_key(data))


def concatenates_to_primes(a: int, b: int, primes: Sequence[int]) -> bool:
    """True when both concatenations of ``a`` and ``b`` are prime.

    Primality is tested by trial division over ``primes``; ValueError is raised
    when they do not reach far enough.
    """
    return is_prime_by_trial(int(f"{b}{a}"), primes) and is_prime_by_trial(
        int(f"{a}{b}"), primes
    )


def solve_60(set_size: int = 5) -> int:
    """Lowest sum of ``set_size`` primes any two of which concatenate to a prime."""
    if set_size < 1:
        raise ValueError(f"set size must be positive, got {set_size}")
    primes = primes_below(_CONCAT_SIEVE_SIZE)
    compatible: dict[tuple[int, int], bool] = {}

    def fits(a: int, b: int) -> bool:
        pair = (a, b)
        if pair not in compatible:
            compatible[pair] = concatenates_to_primes(a, b, primes)
        return compatible[pair]

    # Members are kept smallest first; new members are always smaller than all others.
    heap: list[tuple[int, tuple[int, ...]]] = [(p, (p,)) for p in primes]
    heapq.heapify(heap)
    while heap:
        cost, members = heapq.heappop(heap)
        if len(members) >= set_size:
            return cost
        end = bisect.bisect_left(primes, members[0])
        for p in primes[1:end]:
            if all(fits(p, member) for member in members):
                heapq.heappush(heap, (cost + p, (p, *members)))
    raise ValueError(f"no set of {set_size} primes found")