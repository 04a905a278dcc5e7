"""Day 5: seeds routed through a chain of range mappings."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from advent2023.common import Spinner, read_input

MAX_UINT64 = (1 << 64) - 1
BATCH_SIZE = 1000

_UINT64 = 1 << 64
_UINT_RE = re.compile(r"[0-9]+")
_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Mapping:
    """One range of a mapping block: source numbers shifted onto destination numbers."""

    source_start: int
    source_end: int
    destination_start: int
    length: int

    def contains(self, needle: int) -> bool:
        """Whether needle lies within the source range, both ends included."""
        return self.source_start <= needle <= self.source_end

    def _translate(self, needle: int) -> int:
        return (self.destination_start + needle - self.source_start) % _UINT64


def must_uint64(target: str) -> int:
    """Parse an unsigned 64-bit decimal number, or return 0 when it is not one."""
    if _UINT_RE.fullmatch(target):
        value = int(target)
        if value < _UINT64:
            return value
    return 0


def _parse_seeds(block: str) -> list[int]:
    text = block.removeprefix("seeds:")
    return [must_uint64(part) for part in text.split(" ") if must_uint64(part) or part == "0" * len(part) != ""]


def _parse_mapping(line: str) -> Mapping:
    parts = line.split(" ")
    if len(parts) < 3:
        raise ValueError(f"malformed mapping line: {line!r}")
    source = must_uint64(parts[1])
    destination = must_uint64(parts[0])
    length = must_uint64(parts[2])
    return Mapping(
        source_start=source,
        source_end=(source + length - 1) % _UINT64,
        destination_start=destination,
        length=length,
    )


def build_map(content: str) -> tuple[list[int], list[list[Mapping]]]:
    """Parse the almanac into its seed numbers and its ordered mapping blocks."""
    blocks = content.split("\n\n")
    mappings = [
        [_parse_mapping(line) for line in block.split("\n")[1:]] for block in blocks
    ]
    if not mappings[0]:
        mappings = mappings[1:]
    return _parse_seeds(blocks[0]), mappings


def _walk(block: Sequence[Mapping], needle: int) -> int:
    for mapping in block:
        if mapping.contains(needle):
            return mapping._translate(needle)
    return needle


def _locate(blocks: Iterable[Sequence[Mapping]], seed: int) -> int:
    for block in blocks:
        seed = _walk(block, seed)
    return seed


def _seed_ranges(seeds: Sequence[int]) -> list[tuple[int, int]]:
    if len(seeds) % 2:
        raise ValueError("seed ranges need a start and a length for every entry")
    return list(zip(seeds[::2], seeds[1::2]))


def part01(content: str) -> int:
    """Lowest location reached by any of the listed seeds."""
    seeds, blocks = build_map(content)
    return min((_locate(blocks, seed) for seed in seeds), default=MAX_UINT64)


def _map_intervals(
    block: Sequence[Mapping], intervals: Iterable[tuple[int, int]]
) -> list[tuple[int, int]]:
    """Send half-open intervals through one block, the first matching range winning."""
    pending = list(intervals)
    mapped: list[tuple[int, int]] = []
    for mapping in block:
        low_bound, high_bound = mapping.source_start, mapping.source_end + 1
        remaining: list[tuple[int, int]] = []
        for start, end in pending:
            low, high = max(start, low_bound), min(end, high_bound)
            if low >= high:
                remaining.append((start, end))
                continue
            mapped.append(
                (
                    mapping.destination_start + low - low_bound,
                    mapping.destination_start + high - low_bound,
                )
            )
            if start < low:
                remaining.append((start, low))
            if high < end:
                remaining.append((high, end))
        pending = remaining
    return mapped + pending


def part02(content: str) -> int:
    """Lowest location reached by any seed in the listed start/length ranges."""
    seeds, blocks = build_map(content)
    ranges = _seed_ranges(seeds)
    lowest = MAX_UINT64
    for number, (start, length) in enumerate(ranges, 1):
        _log.info("seed: %d/%d\tstart: %d\trange: %d", number, len(ranges), start, length)
        intervals = [(start, start + length)]
        for block in blocks:
            intervals = _map_intervals(block, intervals)
        lowest = min([lowest, *(low for low, high in intervals if low < high)])
    return lowest


def part02_batch(content: str) -> int:
    """Seed ranges walked in batches; zero locations are ignored and 0 means failure."""
    spinner = Spinner(sys.stderr)
    try:
        seeds, blocks = build_map(content)
        ranges = _seed_ranges(seeds)
        _log.info("batch size %d", BATCH_SIZE)
        seed_lowest: list[int] = []
        for number, (start, length) in enumerate(ranges, 1):
            _log.info("seed: %d/%d\tstart: %d\trange: %d", number, len(ranges), start, length)
            lowest = MAX_UINT64
            batch = min(BATCH_SIZE, length)
            seed = start
            while seed < start + length:
                spinner.next_frame()
                batch_lowest = min(_locate(blocks, s) for s in range(seed, seed + batch))
                if 0 < batch_lowest < lowest:
                    lowest = batch_lowest
                # Each batch also steps over the seed that follows it.
                seed += batch + 1
            seed_lowest.append(lowest)
        return min(seed_lowest)
    except ValueError as exc:
        _log.error("panic occurred: %s", exc)
        return 0


_SOLVERS: dict[str, Callable[[str], int]] = {
    "1": part01,
    "2": part02,
    "2batch": part02_batch,
}


def main(argv: list[str] | None = None) -> int:
    """Solve day 5 for the input file given on the command line."""
    parser = argparse.ArgumentParser(prog="advent2023-day05", description=__doc__)
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