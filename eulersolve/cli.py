"""Command line entry point that prints the answer to a numbered problem."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from eulersolve import poker
from eulersolve import problems_01_10 as _p01
from eulersolve import problems_11_20 as _p11
from eulersolve import problems_21_30 as _p21
from eulersolve import problems_31_40 as _p31
from eulersolve import problems_41_50 as _p41
from eulersolve import problems_51_60 as _p51

_SOLVERS: dict[int, Callable[[], object]] = {
    1: _p01.solve_1, 2: _p01.solve_2, 3: _p01.solve_3, 4: _p01.solve_4,
    5: _p01.solve_5, 6: _p01.solve_6, 7: _p01.solve_7, 8: _p01.solve_8,
    9: _p01.solve_9, 10: _p01.solve_10,
    11: _p11.solve_11, 12: _p11.solve_12, 13: _p11.solve_13, 14: _p11.solve_14,
    15: _p11.solve_15, 16: _p11.solve_16, 17: _p11.solve_17, 18: _p11.solve_18,
    19: _p11.solve_19, 20: _p11.solve_20,
    21: _p21.solve_21, 22: _p21.solve_22, 23: _p21.solve_23, 24: _p21.solve_24,
    25: _p21.solve_25, 26: _p21.solve_26, 27: _p21.solve_27, 28: _p21.solve_28,
    29: _p21.solve_29, 30: _p21.solve_30,
    31: _p31.solve_31, 32: _p31.solve_32, 33: _p31.solve_33, 34: _p31.solve_34,
    35: _p31.solve_35, 36: _p31.solve_36, 37: _p31.solve_37, 38: _p31.solve_38,
    39: _p31.solve_39, 40: _p31.solve_40,
    41: _p41.solve_41, 42: _p41.solve_42, 43: _p41.solve_43, 44: _p41.solve_44,
    45: _p41.solve_45, 46: _p41.solve_46, 47: _p41.solve_47, 48: _p41.solve_48,
    49: _p41.solve_49, 50: _p41.solve_50,
    51: _p51.solve_51, 52: _p51.solve_52, 53: _p51.solve_53, 54: poker.solve_54,
    55: _p51.solve_55, 56: _p51.solve_56, 57: _p51.solve_57, 58: _p51.solve_58,
    59: _p51.solve_59, 60: _p51.solve_60,
}

_FILE_SOLVERS: dict[int, Callable[[str], object]] = {
    22: _p21.solve_22,
    42: _p41.solve_42,
    54: poker.solve_54,
    59: _p51.solve_59,
}


def solve(number: int) -> object:
    """Answer to problem ``number`` computed with its default inputs."""
    solver = _SOLVERS.get(number)
    if solver is None:
        raise ValueError(f"no solution for problem {number}")
    return solver()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the answer to the problem named on the command line."""
    parser = argparse.ArgumentParser(
        prog="eulersolve", description="Print the answer to a numbered problem."
    )
    parser.add_argument("problem", type=int, help="problem number")
    parser.add_argument("path", nargs="?", help="input file, for problems that read one")
    args = parser.parse_args(argv)

    if args.problem not in _SOLVERS:
        parser.error(f"no solution for problem {args.problem}")
    if args.path is not None and args.problem not in _FILE_SOLVERS:
        parser.error(f"problem {args.problem} does not read an input file")

    try:
        if args.path is not None:
            result = _FILE_SOLVERS[args.problem](args.path)
        else:
            result = solve(args.problem)
    except (OSError, ValueError) as exc:
        print(f"eulersolve: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0