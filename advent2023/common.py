"""Helpers shared by the daily puzzle solvers."""

from __future__ import annotations

import dataclasses
import json
import os
import sys
from pathlib import Path
from typing import Any, TextIO

SPINNER_FRAMES = ("/", "─", "\\", "│")


class Spinner:
    """A one-character progress spinner drawn in reverse video."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._frame = 0

    def next_frame(self) -> str:
        """Draw the next frame and return the character drawn."""
        if self._frame >= len(SPINNER_FRAMES):
            self._frame = 0
        frame = SPINNER_FRAMES[self._frame]
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"\033[1m\033[7m\r{frame}\r\033[0m")
        stream.flush()
        self._frame += 1
        return frame


def debug_log(*args: Any) -> None:
    """Print the arguments to stderr when the DEBUG environment variable is "1"."""
    if os.environ.get("DEBUG") == "1":
        print(*args, file=sys.stderr)


def _json_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    raise TypeError(f"cannot serialise {type(value).__name__} as JSON")


def dump_as_json(data: Any, filename: str) -> Path:
    """Write data as indented JSON to ../../out/<filename>.json relative to the cwd."""
    target = Path.cwd() / ".." / ".." / "out" / f"{filename}.json"
    text = json.dumps(data, indent=2, default=_json_default, ensure_ascii=False)
    target.write_text(text, encoding="utf-8")
    return target


def read_input(path: str | os.PathLike[str]) -> str:
    """Return the whole content of a puzzle input file, line endings untouched."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()