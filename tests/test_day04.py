import pytest

from advent2023.day04 import main, parse_cards, part01, part02

TEST_DATA = """Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11"""


def test_part01():
    assert part01(TEST_DATA) == 13


def test_part02():
    assert part02(TEST_DATA) == 30


def test_parse_cards_keys_and_matches():
    cards = parse_cards(TEST_DATA)
    assert sorted(cards) == [1, 2, 3, 4, 5, 6]
    assert cards[1].winners == [41, 48, 83, 86, 17]
    assert cards[1].count == len(cards[1].matches)
    assert cards[6].count == 0


def test_part02_at_least_one_of_each_card():
    assert part02(TEST_DATA) >= len(parse_cards(TEST_DATA))


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        parse_cards("Card 1 41 48")


def test_main_prints_result(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text(TEST_DATA, encoding="utf-8")
    assert main(["--part", "1", str(path)]) == 0
    assert "the result: 13" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent")]) == 1