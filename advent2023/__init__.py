"""Solutions to the 2023 Advent of Code puzzles, days 1 to 9, with a command to run them."""

__version__ = "0.1.0"