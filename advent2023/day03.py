"""Day 3: part numbers and gears in an engine schematic."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterator

from advent2023.common import debug_log, read_input

_NUMBER_RE = re.compile(r"[0-9]+")
_SYMBOL_RE = re.compile(r"[#$%&*+\-/=@]")
_INT_RE = re.compile(r"[+-]?[0-9]+")
_DIGITS = frozenset("0123456789")
_EMPTY = "."
_GEAR = "*"
_EDGE = "\0"


def _to_int(text: str) -> int:
    return int(text) if _INT_RE.fullmatch(text) else 0


def _window(line: str, start: int, end: int) -> str:
    if end > len(line):
        raise ValueError(f"line {line!r} is too short for columns {start}:{end}")
    return line[start:end]


def part01(content: str) -> int:
    """Sum every number that has a symbol in the cells around it."""
    lines = content.split("\n")
    total = 0
    for row, line in enumerate(lines):
        for match in _NUMBER_RE.finditer(line):
            begin, finish = match.span()
            start = begin - 1 if begin > 1 else 0
            end = finish + 1
            if end > len(line):
                end = len(line) - 1

            above = _window(lines[row - 1], start, end) if row > 0 else ""
            inline = line[start:end]
            below = _window(lines[row + 1], start, end) if row + 1 < len(lines) else ""

            has_match = any(_SYMBOL_RE.search(text) for text in (above, inline, below))
            debug_log(
                line, begin, finish, match.group(),
                "above", above, "inline", inline, "below", below,
                "hasMatch", has_match,
            )
            if has_match:
                total += int(match.group())
    return total


def _build_grid(content: str) -> list[str]:
    rows = content.split("\n")
    blank = _EMPTY * (max(len(row) for row in rows) + 2)
    return [blank, *(f"{_EDGE}{row}{_EDGE}" for row in rows), blank]


def _value_at(row: str, x: int) -> str:
    """Join the characters of the run around column x, stopping at empty cells."""
    left: list[str] = []
    pos = x
    while pos > 0:
        char = row[pos]
        if pos < x and char == _EMPTY:
            break
        if char not in (_EMPTY, _GEAR, _EDGE):
            left.append(char)
        pos -= 1

    right: list[str] = []
    for char in row[x + 1:]:
        if char == _EMPTY:
            break
        if char != _EDGE:
            right.append(char)

    return "".join(reversed(left)) + "".join(right)


def _has_digit(cells: str) -> bool:
    return any(char in _DIGITS for char in cells)


def _gear_ratios(grid: list[str]) -> Iterator[int]:
    # Columns are scanned over the same span as rows.
    span = range(1, len(grid) - 1)
    for y in span:
        for x in span:
            if grid[y][x] != _GEAR:
                continue
            upper, inline, lower = (
                _has_digit(grid[row][x - 1:x + 2]) for row in (y - 1, y, y + 1)
            )
            if not ((upper and lower) or (upper and inline) or (inline and lower)):
                continue

            upper_value = _value_at(grid[y - 1], x)
            lower_value = _value_at(grid[y + 1], x)
            if inline:
                inline_value = _value_at(grid[y], x)
                debug_log(f"{inline_value.strip()}\t{upper_value.strip()}\t{lower_value.strip()}")

            yield _to_int(upper_value) * _to_int(lower_value)


def part02(content: str) -> int:
    """Sum the products of the numbers above and below each gear."""
    return sum(_gear_ratios(_build_grid(content)))


_SOLVERS: dict[str, Callable[[str], int]] = {"1": part01, "2": part02}


def main(argv: list[str] | None = None) -> int:
    """Solve day 3 for the input file given on the command line."""
    parser = argparse.ArgumentParser(prog="advent2023-day03", description=__doc__)
    parser.add_argument("--part", choices=sorted(_SOLVERS), default="1")
    parser.add_argument("input", nargs="?", default="./input/input")
    args = parser.parse_args(argv)
    try:
        content = read_input(args.input)
    except OSError as exc:
        print(f"failed to open file: {exc}", file=sys.stderr)
        return 1
    print(f"the result: {_SOLVERS[args.part](content)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())