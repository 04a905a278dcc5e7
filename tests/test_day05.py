import pytest

from advent2023 import day05

TEST_DATA = """seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4"""


def test_part01():
    assert day05.part01(TEST_DATA) == 35


def test_part02():
    assert day05.part02(TEST_DATA) == 46


def test_part02_batch():
    assert day05.part02_batch(TEST_DATA) == 46


def test_build_map_seeds_and_blocks():
    seeds, blocks = day05.build_map(TEST_DATA)
    assert seeds == [79, 14, 55, 13]
    assert len(blocks) == 7
    assert [m.length for m in blocks[0]] == [2, 48]


def test_mapping_contains_bounds():
    _, blocks = day05.build_map(TEST_DATA)
    first = blocks[0][0]
    assert first.source_start == 98
    assert first.source_end == 99
    assert first.destination_start == 50
    assert first.contains(98)
    assert first.contains(99)
    assert not first.contains(100)
    assert not first.contains(97)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("0", 0),
        ("-1", 0),
        ("abc", 0),
        ("", 0),
        ("18446744073709551615", 18446744073709551615),
        ("18446744073709551616", 0),
    ],
)
def test_must_uint64(text, expected):
    assert day05.must_uint64(text) == expected


def test_part02_matches_part01_over_expanded_seeds():
    header, rest = TEST_DATA.split("\n\n", 1)
    seeds = list(range(79, 93)) + list(range(55, 68))
    expanded = "seeds: " + " ".join(map(str, seeds)) + "\n\n" + rest
    assert day05.part01(expanded) == day05.part02(TEST_DATA)


def test_unmapped_seed_keeps_its_number():
    content = "seeds: 5 3\n\nx map:\n100 200 10"
    assert day05.part01(content) == 3


def test_part01_without_seeds_is_max():
    assert day05.part01("seeds:\n\nx map:\n1 2 3") == day05.MAX_UINT64


def test_part02_odd_seed_count_raises():
    with pytest.raises(ValueError):
        day05.part02("seeds: 1 2 3\n\nx map:\n1 2 3")


def test_part02_batch_without_seeds_returns_zero():
    assert day05.part02_batch("seeds:\n\nx map:\n1 2 3") == 0


def test_malformed_mapping_line_raises():
    with pytest.raises(ValueError):
        day05.build_map("seeds: 1 2\n\nx map:\n1 2")


def test_main_prints_result(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text(TEST_DATA, encoding="utf-8")
    assert day05.main(["--part", "2", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "the result: 46"


def test_main_missing_file(tmp_path):
    assert day05.main([str(tmp_path / "absent")]) == 1