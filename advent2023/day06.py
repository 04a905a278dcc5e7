"""Day 6: boat races won by holding the button long enough."""

from __future__ import annotations

import argparse
import bisect
import math
import re
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from advent2023.common import read_input

_UINT64 = 1 << 64
_UINT_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class _Race:
    time: int
    distance: int


def _parse_uint(text: str) -> int | None:
    if _UINT_RE.fullmatch(text):
        value = int(text)
        if value < _UINT64:
            return value
    return None


def _numbers(line: str) -> list[int]:
    return [value for value in map(_parse_uint, line.split(" ")) if value is not None]


def _parse_races(content: str) -> list[_Race]:
    table: list[list[int]] = [[], []]
    for index, line in enumerate(content.split("\n")):
        numbers = _numbers(line)
        if not numbers:
            continue
        if index > 1:
            raise ValueError(f"unexpected numbers on line {index + 1}")
        table[index] = numbers
    times, distances = table
    if len(distances) < len(times):
        raise ValueError("fewer distances than times")
    return [_Race(time, distance) for time, distance in zip(times, distances)]


def _concat_line(line: str) -> int:
    digits = "".join(line.split(" ")[1:]).strip()
    value = _parse_uint(digits)
    return 0 if value is None else value


def _parse_single_race(content: str) -> list[_Race]:
    lines = content.split("\n")
    if len(lines) < 2:
        raise ValueError("expected a time line and a distance line")
    return [_Race(_concat_line(lines[0]), _concat_line(lines[1]))]


def calculate_distance_travelled(ms_held: int, race_length: int) -> int:
    """Distance covered when the button is held ms_held of race_length milliseconds."""
    return (ms_held * (race_length - ms_held)) % _UINT64


def _count_winners(race: _Race) -> int:
    """Count the hold times in [0, time) that beat the record distance."""
    half = race.time // 2
    if half < 1 or calculate_distance_travelled(half, race.time) <= race.distance:
        return 0
    holds = range(1, half + 1)
    first = holds[
        bisect.bisect_right(
            holds, race.distance, key=lambda held: calculate_distance_travelled(held, race.time)
        )
    ]
    return race.time - 2 * first + 1


def _calculate_winners(races: Iterable[_Race]) -> int:
    return math.prod(_count_winners(race) for race in races) % _UINT64


def part01(content: str) -> int:
    """Multiply together the number of winning hold times of each race."""
    return _calculate_winners(_parse_races(content))


def part02(content: str) -> int:
    """Count winning hold times for the single race formed by joining the digits."""
    return _calculate_winners(_parse_single_race(content))


_SOLVERS: dict[str, Callable[[str], int]] = {"1": part01, "2": part02}


def main(argv: list[str] | None = None) -> int:
    """Solve day 6 for the input file given on the command line."""
    parser = argparse.ArgumentParser(prog="advent2023-day06", description=__doc__)
    parser.add_argument("--part", choices=sorted(_SOLVERS), default="1")
    parser.add_argument("input", nargs="?", default="./input/input")
    args = parser.parse_args(argv)
    try:
        content = read_input(args.input)
    except OSError as exc:
        print(f"failed to read input: {exc}", file=sys.stderr)
        return 1
    print(f"the result: {_SOLVERS[args.part](content)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())