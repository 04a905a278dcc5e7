"""Day 8: walking a desert map of left/right nodes."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from advent2023.common import read_input

START = "AAA"
TARGET = "ZZZ"


def _parse_line(line: str) -> tuple[str, list[str]]:
    parts = line.split("=")
    key = parts[0].strip()
    following = parts[-1].replace("(", "", 1).replace(")", "", 1).replace(" ", "")
    return key, following.split(",")


def parse_content(content: str) -> tuple[list[str], dict[str, list[str]]]:
    """Split the document into its instructions and its node table."""
    blocks = content.split("\n\n")
    if len(blocks) < 2:
        raise ValueError("expected instructions, a blank line and a node table")
    instructions = list(blocks[0])
    nodes = dict(_parse_line(line) for line in blocks[1].split("\n"))
    return instructions, nodes


def _step(nodes: dict[str, list[str]], node: str, instruction: str) -> str:
    if instruction == "L":
        side = 0
    elif instruction == "R":
        side = 1
    else:
        return node
    try:
        return nodes[node][side]
    except KeyError:
        raise ValueError(f"unknown node: {node!r}") from None
    except IndexError:
        raise ValueError(f"node {node!r} has no {instruction} branch") from None


def _run_pass(
    nodes: dict[str, list[str]], node: str, instructions: Sequence[str]
) -> str:
    for instruction in instructions:
        node = _step(nodes, node, instruction)
    return node


def part01(content: str) -> int:
    """Steps taken from AAA, counted in whole passes, until ZZZ has been reached."""
    instructions, nodes = parse_content(content)
    node = START
    steps = 0
    seen: set[str] = set()
    while True:
        if node in seen:
            raise ValueError(f"{TARGET} is never reached from {START}")
        seen.add(node)
        found = False
        for instruction in instructions:
            steps += 1
            node = _step(nodes, node, instruction)
            if node == TARGET:
                found = True
        if found:
            return steps


def part02(content: str) -> int:
    """Instruction length times the passes each A-node needs to land on a Z-node."""
    instructions, nodes = parse_content(content)
    count = len(instructions)
    for node in (key for key in nodes if key.endswith("A")):
        cycles = 0
        seen: set[str] = set()
        while not node.endswith("Z"):
            if node in seen:
                raise ValueError(f"no node ending in Z is reached from {node!r}")
            seen.add(node)
            node = _run_pass(nodes, node, instructions)
            cycles += 1
        count *= cycles
    return count


_SOLVERS: dict[str, Callable[[str], int]] = {"1": part01, "2": part02}


def main(argv: list[str] | None = None) -> int:
    """Solve day 8 for the input file given on the command line."""
    parser = argparse.ArgumentParser(prog="advent2023-day08", description=__doc__)
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