import pytest

from advent2023.day03 import main, part01, part02

TEST_DATA = """467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598.."""


def test_part01_example():
    assert part01(TEST_DATA) == 4361


def test_part02_example():
    assert part02(TEST_DATA) == 467835


def test_part01_empty_input():
    assert part01("") == 0


def test_part02_empty_input():
    assert part02("") == 0


def test_part02_vertical_gear():
    assert part02("1.\n*.\n2.") == 2


def test_part02_single_neighbour_is_not_a_gear():
    assert part02("617*......\n..........\n..........") == 0


def test_part01_short_neighbour_line_raises():
    with pytest.raises(ValueError):
        part01("..12\n.")


def test_part01_debug_output(monkeypatch, capsys):
    monkeypatch.setenv("DEBUG", "1")
    assert part01("1*") == 1
    assert "hasMatch" in capsys.readouterr().err


def test_main_prints_result(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text(TEST_DATA, encoding="utf-8")
    assert main(["--part", "2", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "the result: 467835"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    assert "failed to open file" in capsys.readouterr().err