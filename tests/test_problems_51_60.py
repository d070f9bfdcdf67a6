import pytest

from eulersolve.primes import primes_below
from eulersolve.problems_11_20 import digit_sum
from eulersolve.problems_51_60 import (
    concatenates_to_primes,
    decrypted_sum,
    digit_signature,
    find_key,
    is_lychrel,
    l2_distance,
    max_digit_sum_power,
    normalize_frequencies,
    parse_cipher,
    replacement_signatures,
    reverse_digits,
    solve_51,
    solve_52,
    solve_53,
    solve_55,
    solve_56,
    solve_57,
    solve_58,
    solve_59,
    solve_60,
)

PLAINTEXT = (
    "it was the best of times, it was the worst of times, it was the age of wisdom, "
    "it was the age of foolishness, it was the epoch of belief, it was the epoch of "
    "incredulity, it was the season of light, it was the season of darkness, it was "
    "the spring of hope, it was the winter of despair, we had everything before us, "
    "we had nothing before us, we were all going direct to heaven, we were all going "
    "direct the other way. in short, the period was so far like the present period, "
    "that some of its noisiest authorities insisted on its being received, for good "
    "or for evil, in the superlative degree of comparison only."
)
KEY = b"key"


def _encrypt(text: str, key: bytes) -> list[int]:
    return [b ^ key[i % len(key)] for i, b in enumerate(text.encode("ascii"))]


def test_replacement_signatures_keep_at_least_one_star():
    signatures = replacement_signatures("**3*", "5")
    assert signatures[0] == "**3*"
    assert set(signatures) == {"**3*", "**35", "*53*", "*535", "5*3*", "5*35", "553*"}
    assert len(signatures) == 7
    assert all("*" in s for s in signatures)


def test_replacement_signatures_single_and_no_star():
    assert replacement_signatures("1*3", "7") == ["1*3"]
    assert replacement_signatures("123", "1") == []


def test_solve_51_family_of_seven():
    assert solve_51(7) == 56003


def test_solve_51_rejects_impossible_family():
    with pytest.raises(ValueError):
        solve_51(50)
    with pytest.raises(ValueError):
        solve_51(0)


def test_digit_signature():
    signature = digit_signature(1123)
    assert signature[1] == 2
    assert sum(signature) == 4
    assert digit_signature(0)[0] == 1
    assert digit_signature(125874) == digit_signature(251748)
    with pytest.raises(ValueError):
        digit_signature(-1)


def test_solve_52():
    answer = solve_52()
    assert answer == 142857
    assert all(digit_signature(k * answer) == digit_signature(answer) for k in range(2, 7))


def test_solve_53_thresholds():
    assert solve_53(10**30) == 0
    assert solve_53(0) == sum(n + 1 for n in range(1, 101))
    assert solve_53(10**6) <= solve_53(10**5)


def test_reverse_digits():
    assert reverse_digits(1234) == 4321
    assert reverse_digits(reverse_digits(98761)) == 98761
    assert reverse_digits(0) == 0
    with pytest.raises(ValueError):
        reverse_digits(-5)


def test_is_lychrel_examples():
    assert is_lychrel(47) is False
    assert is_lychrel(349) is False
    assert is_lychrel(196) is True
    assert is_lychrel(4994) is True


def test_solve_55_counts_lychrel_numbers():
    assert solve_55(197) - solve_55(196) == 1
    assert solve_55(196) - solve_55(195) == int(is_lychrel(195))
    assert solve_55(1) == 0


def test_max_digit_sum_power():
    assert max_digit_sum_power(2) == 1
    assert max_digit_sum_power(10) >= digit_sum(9**9)
    assert max_digit_sum_power(20) >= max_digit_sum_power(10)
    assert solve_56(10) == max_digit_sum_power(10)
    with pytest.raises(ValueError):
        max_digit_sum_power(1)


def test_solve_57():
    assert solve_57(7) == 1
    assert solve_57(0) == 0
    assert solve_57(100) <= solve_57(200) <= 200
    with pytest.raises(ValueError):
        solve_57(-1)


def test_solve_58():
    answer = solve_58()
    assert answer == 26241
    assert answer % 2 == 1


def test_parse_cipher():
    assert parse_cipher(" 1, 2,3\n") == [1, 2, 3]
    with pytest.raises(ValueError):
        parse_cipher("256")
    with pytest.raises(ValueError):
        parse_cipher("1,x")
    with pytest.raises(ValueError):
        parse_cipher("")


def test_normalize_frequencies():
    result = normalize_frequencies({ord("e"): 2, ord("T"): 2, ord("z"): 5})
    assert result == {ord("e"): 0.5, ord("t"): 0.5}
    assert normalize_frequencies({ord("z"): 3}) == {}


def test_l2_distance():
    counts = {ord("e"): 3, ord("a"): 1}
    assert l2_distance(counts, counts) == 0.0
    assert l2_distance(counts, {ord("E"): 6, ord("A"): 2}) == 0.0
    assert l2_distance({ord("e"): 1}, {ord("a"): 1}) == pytest.approx(2**0.5)


def test_find_key_recovers_key():
    assert find_key(_encrypt(PLAINTEXT, KEY)) == KEY


def test_decrypted_sum_round_trip():
    data = _encrypt(PLAINTEXT, KEY)
    assert decrypted_sum(data, KEY) == sum(PLAINTEXT.encode("ascii"))
    with pytest.raises(ValueError):
        decrypted_sum(data, b"")


def test_solve_59(tmp_path):
    path = tmp_path / "cipher.txt"
    path.write_text(",".join(map(str, _encrypt(PLAINTEXT, KEY))), encoding="utf-8")
    assert solve_59(path) == sum(PLAINTEXT.encode("ascii"))


def test_concatenates_to_primes():
    primes = primes_below(100)
    assert concatenates_to_primes(3, 7, primes) is True
    assert concatenates_to_primes(3, 5, primes) is False
    with pytest.raises(ValueError):
        concatenates_to_primes(1, 1, [2])


def test_solve_60_small_sets():
    assert solve_60(1) == 2
    assert solve_60(2) == 10
    assert solve_60(4) == 792
    with pytest.raises(ValueError):
        solve_60(0)