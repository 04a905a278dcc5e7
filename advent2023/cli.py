"""Run any day's puzzle solver on an input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from advent2023 import day01, day02, day03, day04, day05, day06, day07, day08, day09
from advent2023.common import read_input


@dataclass(frozen=True)
class _Day:
    solvers: Mapping[str, Callable[[str], int]]
    default_input: str = "./input/input"


_DAYS: dict[int, _Day] = {
    1: _Day(
        {
            "1": day01.part01,
            "2": day01.part02,
            "2v2": day01.part02_v2,
            "2v3": day01.part02_v3,
        },
        "./input/input1",
    ),
    2: _Day({"1": day02.part01, "2": day02.part02}),
    3: _Day({"1": day03.part01, "2": day03.part02}),
    4: _Day({"1": day04.part01, "2": day04.part02}),
    5: _Day({"1": day05.part01, "2": day05.part02, "2batch": day05.part02_batch}),
    6: _Day({"1": day06.part01, "2": day06.part02}),
    7: _Day({"1": day07.part01, "2": day07.part02}),
    8: _Day({"1": day08.part01, "2": day08.part02}),
    9: _Day({"1": day09.part01}),
}


def solve(day: int, part: str, content: str) -> int:
    """Answer one part of one day's puzzle for the given input text."""
    try:
        solvers = _DAYS[day].solvers
    except KeyError:
        raise ValueError(f"no puzzle for day {day}") from None
    try:
        solver = solvers[part]
    except KeyError:
        known = ", ".join(solvers)
        raise ValueError(f"day {day} has no part {part!r} (known: {known})") from None
    return solver(content)


def main(argv: list[str] | None = None) -> int:
    """Solve the chosen day and part for an input file and print the result."""
    parser = argparse.ArgumentParser(prog="advent2023", description=__doc__)
    parser.add_argument("day", type=int, choices=sorted(_DAYS))
    parser.add_argument("--part", default="1")
    parser.add_argument("input", nargs="?", default=None)
    args = parser.parse_args(argv)
    path = args.input if args.input is not None else _DAYS[args.day].default_input
    try:
        content = read_input(path)
    except OSError as exc:
        print(f"failed to read input: {exc}", file=sys.stderr)
        return 1
    try:
        result = solve(args.day, args.part, content)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(f"the result: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())