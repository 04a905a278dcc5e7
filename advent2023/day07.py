"""Day 7: ranking camel card hands."""

from __future__ import annotations

import argparse
import re
import sys
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass

from advent2023.common import read_input

_CARD_VALUES = {
    "A": 14, "K": 13, "Q": 12, "J": 11, "T": 10, "9": 9,
    "8": 8, "7": 7, "6": 6, "5": 5, "4": 4, "3": 3, "2": 2,
}
_JOKER_VALUES = {**_CARD_VALUES, "J": 1}
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _must_int(text: str) -> int:
    return int(text) if _INT_RE.fullmatch(text) else 0


def hand_value(cards: str, jokers: bool) -> int:
    """Sort key of a hand: its type first, then its cards from left to right."""
    if len(cards) < 5:
        raise ValueError(f"a hand needs five cards: {cards!r}")
    values = _JOKER_VALUES if jokers else _CARD_VALUES
    jacks = cards.count("J") if jokers else 0
    freqs = Counter(card for card in cards if not (jokers and card == "J"))
    highest = max(freqs.values(), default=0)
    kinds = len(freqs) or 1

    value = (((highest + jacks) << 3) - kinds) << 20
    for shift, card in zip((16, 12, 8, 4, 0), cards):
        value |= values.get(card, 0) << shift
    return value


@dataclass(frozen=True)
class _Hand:
    cards: str
    bid: int
    value: int


def _parse_hands(content: str, jokers: bool) -> list[_Hand]:
    hands = []
    for line in content.split("\n"):
        parts = line.split(" ")
        if len(parts) < 2:
            raise ValueError(f"malformed hand line: {line!r}")
        hands.append(_Hand(parts[0], _must_int(parts[1]), hand_value(parts[0], jokers)))
    return hands


def _winnings(content: str, jokers: bool) -> int:
    ranked = sorted(_parse_hands(content, jokers), key=lambda hand: hand.value)
    return sum(rank * hand.bid for rank, hand in enumerate(ranked, 1))


def part01(content: str) -> int:
    """Total winnings with J as a jack."""
    return _winnings(content, jokers=False)


def part02(content: str) -> int:
    """Total winnings with J as a joker that is wild and lowest in value."""
    return _winnings(content, jokers=True)


_SOLVERS: dict[str, Callable[[str], int]] = {"1": part01, "2": part02}


def main(argv: list[str] | None = None) -> int:
    """Solve day 7 for the input file given on the command line."""
    parser = argparse.ArgumentParser(prog="advent2023-day07", description=__doc__)
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