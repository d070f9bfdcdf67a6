import itertools

import pytest

from eulersolve.primes import is_prime, prime_sieve
from eulersolve.problems_41_50 import (
    distinct_prime_factor_counts,
    is_pentagonal,
    is_perfect_square,
    largest_pandigital_prime,
    last_digits_pow,
    prime_permutation_sequences,
    solve_41,
    solve_42,
    solve_43,
    solve_45,
    solve_46,
    solve_47,
    solve_48,
    solve_49,
    solve_50,
    substring_divisible_pandigitals,
    triangle_word_count,
)


def test_largest_pandigital_prime_four_digits():
    result = largest_pandigital_prime(4)
    assert is_prime(result)
    assert "".join(sorted(str(result))) == "1234"
    larger = [int("".join(p)) for p in itertools.permutations("1234")]
    assert not any(is_prime(v) for v in larger if v > result)


@pytest.mark.parametrize("n_digits", [1, 2, 3, 5, 6])
def test_largest_pandigital_prime_none(n_digits):
    assert largest_pandigital_prime(n_digits) is None


@pytest.mark.parametrize("n_digits", [0, 10])
def test_largest_pandigital_prime_rejects_bad_count(n_digits):
    with pytest.raises(ValueError):
        largest_pandigital_prime(n_digits)


def test_solve_41_is_seven_digit_pandigital_prime():
    result = solve_41()
    assert is_prime(result)
    assert "".join(sorted(str(result))) == "1234567"
    assert result == largest_pandigital_prime(7)


def test_is_perfect_square():
    assert all(is_perfect_square(k * k) for k in range(200))
    assert not any(is_perfect_square(k * k + 1) for k in range(1, 200))
    with pytest.raises(ValueError):
        is_perfect_square(-4)


def test_triangle_word_count():
    # A scores 1 and C scores 3 (triangular); B scores 2 (not).
    assert triangle_word_count('"A","B","C"') == triangle_word_count('"A","C"')
    assert triangle_word_count('"B"') == 0
    assert triangle_word_count("") == 0


def test_solve_42_reads_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text('"A","B","C"', encoding="utf-8")
    assert solve_42(path) == triangle_word_count('"A","B","C"')


def test_substring_divisible_pandigitals_properties():
    values = substring_divisible_pandigitals()
    assert values
    assert values == sorted(values, reverse=True)
    for value in values:
        text = f"{value:010d}"
        assert "".join(sorted(text)) == "0123456789"
        for offset, divisor in enumerate((2, 3, 5, 7, 11, 13, 17), start=1):
            assert int(text[offset : offset + 3]) % divisor == 0
    assert solve_43() == sum(values)


def test_is_pentagonal():
    pentagonals = {k * (3 * k - 1) // 2 for k in range(1, 60)}
    for n in range(0, max(pentagonals) + 1):
        assert is_pentagonal(n) == (n in pentagonals)


def test_solve_45_starting_at_one():
    assert solve_45(1) == 1


def test_solve_45_is_triangle_pentagonal_hexagonal():
    result = solve_45(2)
    assert result > 1
    assert is_pentagonal(result)
    assert is_perfect_square(8 * result + 1)
    assert (1 + (1 + 8 * result) ** 0.5) % 4 == 0


def test_solve_46_counterexample():
    result = solve_46()
    sieve = prime_sieve(result + 1)
    assert result % 2 == 1 and not sieve[result]
    assert not any(sieve[result - 2 * k * k] for k in range(1, result) if 2 * k * k < result)
    for n in range(9, result, 2):
        if not sieve[n]:
            assert any(sieve[n - 2 * k * k] for k in range(1, n) if 2 * k * k < n)


def test_solve_46_raises_when_limit_too_small():
    with pytest.raises(ValueError):
        solve_46(100)


def test_distinct_prime_factor_counts():
    counts = distinct_prime_factor_counts(100)
    assert counts[0] == 0 and counts[1] == 0
    assert all(counts[p] == 1 for p in range(2, 100) if is_prime(p))
    assert counts[2 * 3 * 5] == 3
    assert counts[64] == 1


def test_solve_47_pairs():
    assert solve_47(2) == 14


def test_solve_47_triples_invariant():
    result = solve_47(3)
    counts = distinct_prime_factor_counts(result + 3)
    assert all(counts[result + i] == 3 for i in range(3))
    assert not any(all(counts[n + i] == 3 for i in range(3)) for n in range(2, result))


def test_solve_47_rejects_bad_run():
    with pytest.raises(ValueError):
        solve_47(0)


def test_last_digits_pow():
    assert last_digits_pow(2, 40) == int(str(2**40)[-10:])
    assert last_digits_pow(7, 3) == 7 * 7 * 7
    with pytest.raises(ValueError):
        last_digits_pow(2, -1)


def test_solve_48_small():
    total = sum(n**n for n in range(1, 11))
    assert solve_48(10) == int(str(total)[-10:])


def test_prime_permutation_sequences():
    sequences = prime_permutation_sequences()
    assert any(a == 1487 for a, _, _ in sequences)
    for a, b, c in sequences:
        assert a < b < c and a + c == 2 * b
        assert all(is_prime(v) and 1000 <= v < 10000 for v in (a, b, c))
        assert sorted(str(a)) == sorted(str(b)) == sorted(str(c))


def test_solve_49():
    result = solve_49()
    assert len(result) == 12
    triple = (int(result[:4]), int(result[4:8]), int(result[8:]))
    assert triple in prime_permutation_sequences()
    assert triple[0] != 1487


def test_solve_50_small():
    assert solve_50(100) == 41


def test_solve_50_invariant():
    result = solve_50(1000)
    assert is_prime(result) and result < 1000
    assert solve_50(1000) >= solve_50(100)
    with pytest.raises(ValueError):
        solve_50(2)