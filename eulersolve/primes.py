"""Prime sieves and primality tests."""

from __future__ import annotations

from collections.abc import Iterable

_SMALL_PRIMES = (2, 3, 5, 7, 11)
_WHEEL_OFFSETS = (1, 5, 7, 11)


def prime_sieve(size: int) -> list[bool]:
    """Return a list whose entry ``i`` is True exactly when ``i`` is prime, for ``0 <= i < size``."""
    if size < 2:
        raise ValueError(f"sieve size must be at least 2, got {size}")
    sieve = [True] * size
    sieve[0] = sieve[1] = False
    factor = 2
    while factor * factor < size:
        if sieve[factor]:
            multiples = range(factor * factor, size, factor)
            sieve[factor * factor :: factor] = [False] * len(multiples)
        factor += 1
    return sieve


def primes_below(size: int) -> list[int]:
    """Return all primes smaller than ``size`` in ascending order."""
    return [n for n, prime in enumerate(prime_sieve(size)) if prime]


def is_prime(n: int) -> bool:
    """Test primality by trial division over a wheel of twelve."""
    if n < 13:
        return n in _SMALL_PRIMES
    if any(n % p == 0 for p in _SMALL_PRIMES):
        return False
    base = 12
    while base * base < n:
        if any(n % (base + offset) == 0 for offset in _WHEEL_OFFSETS):
            return False
        base += 12
    return True


def is_prime_by_trial(n: int, primes: Iterable[int]) -> bool:
    """Test primality of ``n`` by dividing by the ascending ``primes``.

    Raises ValueError when the primes run out before reaching ``sqrt(n)``.
    """
    if n < 2:
        return False
    for p in primes:
        if p * p > n:
            return True
        if n % p == 0:
            return False
    raise ValueError(f"not enough primes to check primality of {n}")