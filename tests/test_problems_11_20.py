import pytest

from eulersolve.problems_11_20 import (
    digit_sum,
    lattice_paths,
    longest_collatz_start,
    max_line_product,
    max_path_sum,
    parse_grid,
    solve_11,
    solve_12,
    solve_13,
    solve_14,
    solve_15,
    solve_16,
    solve_17,
    solve_18,
    solve_19,
    solve_20,
    to_english,
    triangle_with_divisors,
)


def _divisor_count(n):
    return sum(1 for d in range(1, n + 1) if n % d == 0)


def _collatz_length(n):
    length = 1
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        length += 1
    return length


def test_parse_grid_reads_rows():
    assert parse_grid("1 2\n 03 4 \n") == [[1, 2], [3, 4]]


def test_parse_grid_rejects_non_numbers():
    with pytest.raises(ValueError):
        parse_grid("1 x\n2 3")


def test_max_line_product_uniform_grid():
    grid = [[3] * 5 for _ in range(5)]
    assert max_line_product(grid, 4) == 3**4


def test_max_line_product_length_one_is_max_element():
    grid = [[1, 9, 2], [4, 5, 6]]
    assert max_line_product(grid, 1) == 9


def test_max_line_product_transpose_invariant():
    grid = parse_grid("1 5 2 8\n7 3 9 4\n6 2 5 1\n3 8 4 7")
    transposed = [list(col) for col in zip(*grid)]
    assert max_line_product(grid, 3) == max_line_product(transposed, 3)


def test_max_line_product_isolated_value_gives_zero():
    grid = [[0, 0, 0], [0, 7, 0], [0, 0, 0]]
    assert max_line_product(grid, 2) == 0


def test_max_line_product_rejects_bad_length():
    with pytest.raises(ValueError):
        max_line_product([[1]], 0)


def test_solve_11_bounds():
    assert 0 < solve_11() <= 99**4


@pytest.mark.parametrize("k", [1, 5, 10, 20])
def test_triangle_with_divisors_is_first(k):
    result = triangle_with_divisors(k)
    n = 1
    triangle = 1
    while triangle < result:
        assert _divisor_count(triangle) <= k
        n += 1
        triangle += n
    assert triangle == result
    assert _divisor_count(result) > k


def test_solve_12_matches_search():
    assert solve_12(30) == triangle_with_divisors(30)


def test_triangle_with_divisors_not_found():
    with pytest.raises(ValueError):
        triangle_with_divisors(10**6)


def test_solve_13_prefix_consistency():
    assert solve_13(10) == solve_13(15)[:10]
    assert len(solve_13(10)) == 10
    assert solve_13(10).isdigit()


def test_solve_13_rejects_bad_digits():
    with pytest.raises(ValueError):
        solve_13(0)
    with pytest.raises(ValueError):
        solve_13(1000)


def test_longest_collatz_start_is_longest():
    best = longest_collatz_start(100)
    best_length = _collatz_length(best)
    for n in range(1, 100):
        length = _collatz_length(n)
        assert length <= best_length
        if length == best_length:
            assert n >= best


def test_solve_14_matches_helper():
    assert solve_14(500) == longest_collatz_start(500)


def test_longest_collatz_rejects_small_limit():
    with pytest.raises(ValueError):
        longest_collatz_start(1)


def test_lattice_paths_small_grid():
    assert lattice_paths(2) == 6


@pytest.mark.parametrize("n", range(1, 12))
def test_lattice_paths_ratio(n):
    assert lattice_paths(n + 1) * (n + 1) == lattice_paths(n) * 2 * (2 * n + 1)


def test_solve_15_matches_helper():
    assert solve_15(7) == lattice_paths(7)


def test_lattice_paths_rejects_negative():
    with pytest.raises(ValueError):
        lattice_paths(-1)


@pytest.mark.parametrize("n", [0, 7, 1234, 98765, 10**20 + 3])
def test_digit_sum_casting_out_nines(n):
    assert digit_sum(n) % 9 == n % 9


def test_digit_sum_ignores_trailing_zeros():
    assert digit_sum(4571 * 1000) == digit_sum(4571)
    assert digit_sum(10**50) == 1


def test_digit_sum_rejects_negative():
    with pytest.raises(ValueError):
        digit_sum(-5)


@pytest.mark.parametrize("exponent", [1, 15, 100, 1000])
def test_solve_16_congruence(exponent):
    assert solve_16(exponent) % 9 == pow(2, exponent, 9)


@pytest.mark.parametrize(
    "n, words",
    [
        (0, "zero"),
        (7, "seven"),
        (19, "nineteen"),
        (40, "forty"),
        (42, "forty-two"),
        (300, "three hundred"),
        (342, "three hundred and forty-two"),
        (115, "one hundred and fifteen"),
        (1000, "one thousand"),
        (2005, "two thousand, five"),
    ],
)
def test_to_english(n, words):
    assert to_english(n) == words


def test_to_english_rejects_negative():
    with pytest.raises(ValueError):
        to_english(-1)


def test_solve_17_small():
    assert solve_17(5) == len("onetwothreefourfive")


def test_solve_17_adds_each_number():
    words = to_english(1000).replace(" ", "")
    assert solve_17(1000) - solve_17(999) == len(words)


def test_max_path_sum_example():
    assert max_path_sum([[3], [7, 4], [2, 4, 6], [8, 5, 9, 3]]) == 23


def test_max_path_sum_single_row():
    assert max_path_sum([[5]]) == 5


def test_max_path_sum_at_least_any_path():
    rows = parse_grid("5\n1 9\n8 2 3\n4 4 7 1")
    assert max_path_sum(rows) >= 5 + 9 + 3 + 7
    assert max_path_sum(rows) >= 5 + 1 + 8 + 4


def test_max_path_sum_errors():
    with pytest.raises(ValueError):
        max_path_sum([])
    with pytest.raises(ValueError):
        max_path_sum([[1, 2, 3]])


def test_solve_18_bounds():
    assert 75 < solve_18() <= 15 * 99


def test_solve_19_close_to_one_in_seven():
    assert abs(solve_19() - 1200 / 7) < 20


@pytest.mark.parametrize("n", [6, 10, 50, 100])
def test_solve_20_divisible_by_nine(n):
    assert solve_20(n) % 9 == 0


def test_solve_20_rejects_negative():
    with pytest.raises(ValueError):
        solve_20(-1)