"""Day 2: games of coloured cubes drawn from a bag."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from collections.abc import Callable
from dataclasses import dataclass

from advent2023.common import read_input

RED_CUBES = 12
GREEN_CUBES = 13
BLUE_CUBES = 14

_log = logging.getLogger(__name__)
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _to_int(text: str) -> int:
    return int(text) if _INT_RE.fullmatch(text) else 0


@dataclass
class Game:
    """The largest count of each colour seen in one game."""

    id: int
    name: str
    red: int = 0
    green: int = 0
    blue: int = 0

    @property
    def power(self) -> int:
        return self.red * self.green * self.blue

    @property
    def possible(self) -> bool:
        return self.red <= RED_CUBES and self.green <= GREEN_CUBES and self.blue <= BLUE_CUBES


def _parse_game(line: str) -> Game:
    name, sep, rest = line.partition(":")
    if not sep:
        raise ValueError(f"malformed game line: {line!r}")
    rest = rest.split(":", 1)[0]
    name_id = name.strip().split(" ")
    if len(name_id) < 2:
        raise ValueError(f"malformed game name: {name!r}")
    game = Game(id=_to_int(name_id[1]), name=name)

    for round_ in rest.split(";"):
        for draw in round_.split(","):
            count_colour = draw.strip().split(" ")
            if len(count_colour) < 2:
                raise ValueError(f"malformed draw: {draw!r}")
            count = _to_int(count_colour[0])
            colour = count_colour[1].lower()
            if colour in ("red", "green", "blue"):
                if count > getattr(game, colour):
                    setattr(game, colour, count)
            else:
                _log.warning("unexpected colour: %s", count_colour[1])
    return game


def build_games(content: str) -> list[Game]:
    """Parse every line of the game record."""
    return [_parse_game(line) for line in content.split("\n")]


def part01(content: str) -> int:
    """Sum the ids of games possible with the bag's cube counts."""
    return sum(game.id for game in build_games(content) if game.possible)


def part02(content: str) -> int:
    """Sum the powers of the minimal cube sets of every game."""
    return sum(game.power for game in build_games(content))


_SOLVERS: dict[str, Callable[[str], int]] = {"1": part01, "2": part02}


def main(argv: list[str] | None = None) -> int:
    """Solve day 2 for the input file given on the command line."""
    parser = argparse.ArgumentParser(prog="advent2023-day02", description=__doc__)
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