import io
import json

import pytest

from advent2023.common import Spinner, debug_log, dump_as_json, read_input


def test_spinner_cycles_through_frames():
    stream = io.StringIO()
    spinner = Spinner(stream)
    frames = [spinner.next_frame() for _ in range(5)]
    assert frames == ["/", "─", "\\", "│", "/"]


def test_spinner_writes_escape_sequences():
    stream = io.StringIO()
    spinner = Spinner(stream)
    frame = spinner.next_frame()
    assert stream.getvalue() == f"\033[1m\033[7m\r{frame}\r\033[0m"


def test_debug_log_prints_when_enabled(monkeypatch, capsys):
    monkeypatch.setenv("DEBUG", "1")
    debug_log("alpha", 7)
    assert "alpha 7" in capsys.readouterr().err


def test_debug_log_silent_when_disabled(monkeypatch, capsys):
    monkeypatch.delenv("DEBUG", raising=False)
    debug_log("alpha", 7)
    captured = capsys.readouterr()
    assert captured.err == "" and captured.out == ""


def test_dump_as_json_round_trip(tmp_path, monkeypatch):
    work = tmp_path / "a" / "b"
    work.mkdir(parents=True)
    (tmp_path / "out").mkdir()
    monkeypatch.chdir(work)
    data = {"seeds": [1, 2, 3], "name": "map"}
    dump_as_json(data, "dump")
    loaded = json.loads((tmp_path / "out" / "dump.json").read_text(encoding="utf-8"))
    assert loaded == data


def test_dump_as_json_missing_directory(tmp_path, monkeypatch):
    work = tmp_path / "a" / "b"
    work.mkdir(parents=True)
    monkeypatch.chdir(work)
    with pytest.raises(FileNotFoundError):
        dump_as_json({"x": 1}, "dump")


def test_read_input_round_trip(tmp_path):
    path = tmp_path / "input"
    text = "line one\r\nline two\n"
    path.write_bytes(text.encode("utf-8"))
    assert read_input(path) == text


def test_read_input_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_input(tmp_path / "absent")