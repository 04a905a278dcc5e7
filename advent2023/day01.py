"""Day 1: calibration values hidden in lines of text."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable
from concurrent.futures import Executor, ThreadPoolExecutor

from advent2023.common import read_input

_DIGITS = "0123456789"
_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}
_NUMBER_NAMES = (
    "0", "zero",
    "1", "one",
    "2", "two",
    "3", "three",
    "4", "four",
    "5", "five",
    "6", "six",
    "7", "seven",
    "8", "eight",
    "9", "nine",
)
_NUMBER_RE = re.compile(r"[0-9]|(one|two|three|four|five|six|seven|eight|nine)")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _conv_num_str(value: str) -> int:
    if value in _WORDS:
        return _WORDS[value]
    if _INT_RE.fullmatch(value):
        return int(value)
    return 0


def _combine(first: int, last: int) -> int:
    return int(f"{first}{last}")


def part01(content: str) -> int:
    """Sum the two-digit values formed from the first and last digits of each line."""
    total = 0
    for line in content.split("\n"):
        first = second = 0
        for char in line:
            if char in _DIGITS:
                num = int(char)
                if first == 0:
                    first = num
                second = num
        total += _combine(first, second)
    return total


def part02(content: str) -> int:
    """Like part01 but spelled-out digits count too; matched with a regular expression."""
    total = 0
    for line in content.split("\n"):
        match = _NUMBER_RE.search(line)
        first_match = match.group(0) if match else ""
        last_match = ""
        for start in reversed(range(len(line))):
            found = _NUMBER_RE.search(line[start:])
            if found:
                last_match = found.group(0)
                break
        total += _combine(_conv_num_str(first_match), _conv_num_str(last_match))
    return total


def _number_in_line(text: str, test: Callable[[str, str], bool]) -> int:
    for name in _NUMBER_NAMES:
        if test(text, name):
            return _conv_num_str(name)
    return 0


def _first_number(line: str) -> int:
    for start in range(len(line)):
        found = _number_in_line(line[start:], str.startswith)
        if found > 0:
            return found
    return 0


def _last_number(line: str) -> int:
    for end in range(len(line), -1, -1):
        found = _number_in_line(line[:end], str.endswith)
        if found > 0:
            return found
    return 0


def part02_v2(content: str) -> int:
    """Like part02 but scanning prefixes and suffixes; zeros are skipped."""
    return sum(
        _combine(_first_number(line), _last_number(line))
        for line in content.split("\n")
    )


def _total_line_concurrent(pool: Executor, line: str) -> int:
    first = pool.submit(_first_number, line)
    last = pool.submit(_last_number, line)
    return _combine(first.result(), last.result())


def part02_v3(content: str) -> int:
    """Like part02_v2 but finding each line's first and last number concurrently."""
    with ThreadPoolExecutor(max_workers=2) as pool:
        return sum(_total_line_concurrent(pool, line) for line in content.split("\n"))


_SOLVERS: dict[str, Callable[[str], int]] = {
    "1": part01,
    "2": part02,
    "2v2": part02_v2,
    "2v3": part02_v3,
}


def main(argv: list[str] | None = None) -> int:
    """Solve day 1 for the input file given on the command line."""
    parser = argparse.ArgumentParser(prog="advent2023-day01", description=__doc__)
    parser.add_argument("--part", choices=sorted(_SOLVERS), default="1")
    parser.add_argument("input", nargs="?", default="./input/input1")
    args = parser.parse_args(argv)
    try:
        content = read_input(args.input)
    except OSError as exc:
        print(f"failed to open file {exc}", file=sys.stderr)
        return 1
    print(f"Combined value is: {_SOLVERS[args.part](content)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())