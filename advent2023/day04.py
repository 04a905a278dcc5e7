"""Day 4: scratchcards with winning numbers."""

from __future__ import annotations

import argparse
import re
import sys
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field

from advent2023.common import debug_log, read_input

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _extract_numbers(text: str) -> list[int]:
    return [int(part) for part in text.split(" ") if _INT_RE.fullmatch(part)]


def _intersect(first: list[int], second: list[int]) -> list[int]:
    return [number for number in first if number in second]


@dataclass
class Card:
    """One scratchcard: its winning numbers and the numbers it holds."""

    id: int = 0
    winners: list[int] = field(default_factory=list)
    selected: list[int] = field(default_factory=list)
    count: int = 0

    @property
    def matches(self) -> list[int]:
        return _intersect(self.winners, self.selected)


def _parse_card(line: str) -> Card:
    parts = line.split(":")
    if len(parts) < 2:
        raise ValueError(f"malformed card line: {line!r}")
    label = parts[0].split(" ")[-1]
    numbers = parts[1].split("|")
    if len(numbers) < 2:
        raise ValueError(f"malformed card numbers: {parts[1]!r}")
    card = Card(
        id=int(label) if _INT_RE.fullmatch(label) else 0,
        winners=_extract_numbers(numbers[0]),
        selected=_extract_numbers(numbers[1]),
    )
    card.count = len(card.matches)
    return card


def parse_cards(content: str) -> dict[int, Card]:
    """Parse every line into a card, keyed by card id."""
    return {card.id: card for card in map(_parse_card, content.split("\n"))}


def part01(content: str) -> int:
    """Sum each card's points: one for the first match, doubled for each further one."""
    total = 0
    for card in parse_cards(content).values():
        matches = card.matches
        line_total = 1 << (len(matches) - 1) if matches else 0
        total += line_total
        debug_log(
            f"{{ID: {card.id}, Winners: {card.winners}, Selected: {card.selected}, "
            f"Intersect: {matches}, lineTotal: {line_total}, runningTotal: {total}}}"
        )
    return total


def part02(content: str) -> int:
    """Count all cards held once winning cards copy the cards that follow them."""
    cards = parse_cards(content)
    copies: Counter[int] = Counter()
    for card_id in range(1, len(cards) + 1):
        card = cards.get(card_id, Card())
        copies[card.id] += 1
        for offset in range(1, card.count + 1):
            copies[card.id + offset] += copies[card.id]
    return sum(copies.values())


_SOLVERS: dict[str, Callable[[str], int]] = {"1": part01, "2": part02}


def main(argv: list[str] | None = None) -> int:
    """Solve day 4 for the input file given on the command line."""
    parser = argparse.ArgumentParser(prog="advent2023-day04", description=__doc__)
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