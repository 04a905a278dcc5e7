import pytest

from advent2023 import day07

TEST_DATA = """32T3K 765
T55J5 684
KK677 28
KTJJT 220
QQQJA 483"""


def test_part01():
    assert day07.part01(TEST_DATA) == 6440


def test_part02():
    assert day07.part02(TEST_DATA) == 5905


def test_part01_unchanged_after_part02():
    day07.part02(TEST_DATA)
    assert day07.part01(TEST_DATA) == 6440


def test_five_of_a_kind_beats_four_of_a_kind():
    assert day07.hand_value("22222", False) > day07.hand_value("AAAAK", False)


def test_full_house_beats_three_of_a_kind():
    assert day07.hand_value("22233", False) > day07.hand_value("AAAKQ", False)


def test_same_type_compares_cards_left_to_right():
    assert day07.hand_value("KK677", False) > day07.hand_value("KTJJT", False)


def test_all_jokers_is_five_of_a_kind():
    assert day07.hand_value("JJJJJ", True) > day07.hand_value("AAAAK", True)
    assert day07.hand_value("JJJJJ", True) < day07.hand_value("AAAAA", True)


def test_short_hand_raises():
    with pytest.raises(ValueError):
        day07.hand_value("AKQ", False)


def test_missing_bid_raises():
    with pytest.raises(ValueError):
        day07.part01("32T3K")


def test_main_prints_result(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text(TEST_DATA, encoding="utf-8")
    assert day07.main(["--part", "2", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "the result: 5905"