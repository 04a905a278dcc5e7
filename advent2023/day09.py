"""Day 9: extrapolating the next value of each history."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence

from advent2023.common import read_input

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def _parse_int64(text: str) -> int | None:
    if _INT_RE.fullmatch(text):
        value = int(text)
        if _INT64_MIN <= value <= _INT64_MAX:
            return value
    return None


def _parse_content(content: str) -> list[list[int]]:
    return [
        [value for value in map(_parse_int64, line.split(" ")) if value is not None]
        for line in content.split("\n")
    ]


def deltas(values: Sequence[int]) -> list[int]:
    """Absolute differences between neighbouring values."""
    return [abs(upper - lower) for lower, upper in zip(values, values[1:])]


def _levels(history: list[int]) -> list[list[int]]:
    levels = [history]
    delta = deltas(history)
    levels.append(delta)
    while sum(delta) != 0:
        delta = deltas(delta)
        levels.append(delta)
    return levels


def _next_value(levels: list[list[int]]) -> int:
    # The history and a single difference level alone extrapolate to nothing.
    if len(levels) <= 2:
        return 0
    return sum(level[-1] for level in levels[:-1])


def part01(content: str) -> int:
    """Sum the extrapolated next value of every history."""
    return sum(_next_value(_levels(history)) for history in _parse_content(content))


def main(argv: list[str] | None = None) -> int:
    """Solve day 9 for the input file given on the command line."""
    parser = argparse.ArgumentParser(prog="advent2023-day09", description=__doc__)
    parser.add_argument("input", nargs="?", default="./input/input")
    args = parser.parse_args(argv)
    try:
        content = read_input(args.input)
    except OSError as exc:
        print(f"failed to read input: {exc}", file=sys.stderr)
        return 1
    print(f"the result: {part01(content)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())