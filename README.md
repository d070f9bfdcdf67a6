# eulersolve

Solutions to Project Euler problems 1 through 60, written as plain Python
functions. Alongside them are the small helpers they are built on: prime
sieves, primality tests, digit manipulation, palindromes, pandigital checks,
poker hand scoring and more.

Only the standard library is used.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

The `eulersolve` command prints the answer to one problem:

```
eulersolve 1
eulersolve 25
```

Problems 22, 42, 54 and 59 read a data file. By default they look in the
current working directory for `names.txt`, `words.txt`, `./p054_poker.txt` and
`0059_cipher.txt`. Another file can be named as a second argument:

```
eulersolve 22 data/names.txt
```

A second argument is refused for any other problem, and so is a problem
number outside 1 to 60. If the file cannot be read or its contents are
invalid, the command prints the error to standard error and exits with
status 1.

Some problems take a while. The sieve-heavy ones, for example 10, 14, 27,
35, 46, 47 and 50, go through a million numbers.

## Library use

Each group of ten problems lives in its own module, and every problem has a
`solve_N` function. Where a `solve_N` takes parameters, their defaults are the
values in the problem statement, and other values may be passed:

```python
from eulersolve.problems_01_10 import solve_1, largest_prime_factor
from eulersolve.problems_11_20 import to_english
from eulersolve.primes import is_prime, primes_below

solve_1(1000)                 # 233168
largest_prime_factor(13195)   # 29
to_english(342)               # 'three hundred and forty-two'
is_prime(97)                  # True
primes_below(20)              # [2, 3, 5, 7, 11, 13, 17, 19]
```

The modules are:

- `eulersolve.primes`: `prime_sieve`, `primes_below`, `is_prime` and
  `is_prime_by_trial`. `is_prime_by_trial` raises `ValueError` when the primes
  it is given run out too early.
- `eulersolve.problems_01_10`, `problems_11_20`, `problems_21_30`,
  `problems_31_40`, `problems_41_50` and `problems_51_60`: the solutions,
  together with the helpers each one needs (for example `nth_prime`,
  `max_path_sum`, `nth_permutation`, `coin_combinations`,
  `is_pentagonal`, `is_lychrel` and `find_key`). The `problems_51_60` module
  has no `solve_54`; that problem is in `eulersolve.poker`.
- `eulersolve.poker`: card parsing with `Card.parse`, hand scoring with
  `sort_hand`, `score_hand`, `HandCategory` and `HandScore`, and the problem 54
  tally with `player_one_wins`, `count_player_one_wins` and `solve_54`.
- `eulersolve.cli`: `solve(number)` returns the answer to one problem using its
  default inputs, and `main` backs the `eulersolve` command.

Invalid input raises an exception; no sentinel value is returned.
`eulersolve.poker.ParseCardError`, a subclass of `ValueError`, is raised for
cards that cannot be parsed.

## What it does not do

The data files for problems 22, 42, 54 and 59 are not included. Download
them from the problem pages and place them where the command or the
`solve_N` function will look for them.