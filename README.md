# advent2023

Solutions to the 2023 Advent of Code puzzles, days 1 to 9. Each day is a module with one function per puzzle part. Every function takes the puzzle input as a string and returns the answer as an integer.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Command line

The `advent2023` command solves one part of one day from an input file and prints `the result: <answer>`:

```
advent2023 DAY [--part PART] [INPUT]
```

- `DAY` is a number from 1 to 9.
- `--part` defaults to `1`. Day 1 also accepts `2v2` and `2v3`, day 5 accepts `2batch`, and day 9 accepts only `1`.
- `INPUT` defaults to `./input/input`, or `./input/input1` for day 1.

For example:

```
advent2023 5 --part 2 puzzle.txt
```

If the file cannot be read, or the day has no such part, or the input is malformed, a message goes to standard error and the command exits with status 1.

Set `DEBUG=1` in the environment to have days 3 and 4 print diagnostic lines to standard error. The `2batch` solver for day 5 draws a spinner on standard error while it runs.

## Library use

```python
from advent2023 import day01, day06
from advent2023.cli import solve

day01.part01("1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet")   # 142
day06.calculate_distance_travelled(3, 7)                       # 12
solve(2, "1", open("input").read())
```

`solve(day, part, content)` takes the day as an integer and the part as one of the strings accepted by `--part`; it raises `ValueError` for an unknown day or part.

| Module | Entry points |
| --- | --- |
| `advent2023.day01` | `part01`, `part02`, `part02_v2`, `part02_v3` |
| `advent2023.day02` | `Game`, `build_games`, `part01`, `part02` |
| `advent2023.day03` | `part01`, `part02` |
| `advent2023.day04` | `Card`, `parse_cards`, `part01`, `part02` |
| `advent2023.day05` | `Mapping`, `build_map`, `must_uint64`, `part01`, `part02`, `part02_batch` |
| `advent2023.day06` | `calculate_distance_travelled`, `part01`, `part02` |
| `advent2023.day07` | `hand_value`, `part01`, `part02` |
| `advent2023.day08` | `parse_content`, `part01`, `part02` |
| `advent2023.day09` | `deltas`, `part01` |
| `advent2023.cli` | `solve`, `main` |
| `advent2023.common` | `read_input`, `debug_log`, `dump_as_json`, `Spinner` |

Each day module also has its own `main(argv=None)` and can be run with `python -m advent2023.dayNN`.

Notes on particular days:

- Day 1 offers four ways to reach the answer. `part02_v2` and `part02_v3` skip zeros; `part02_v3` looks for each line's first and last number on two worker threads.
- Day 3 `part02` sums, for each qualifying `*`, the product of the numbers directly above and below it.
- Day 5 `part02` maps whole seed ranges through each block at once and is fast. `part02_batch` instead walks the seeds in batches of 1000, ignores locations of 0, and returns 0 if the seed list does not come in start/length pairs.
- Day 8 `part02` multiplies the instruction length by the number of whole passes each `A` node needs to land on a `Z` node; it raises `ValueError` if one never does.
- `common.dump_as_json(data, filename)` writes indented JSON to `../../out/<filename>.json`, relative to the current directory.

## What it does not do

Day 9 has only part 1; there is no solver for extrapolating backwards. The package neither fetches puzzle inputs nor submits answers: it reads input files that are already on disk.