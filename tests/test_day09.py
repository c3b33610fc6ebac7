import pytest

from aoc2024.solutions.day09 import (
    calc_checksum,
    compact,
    make_fragments,
    parse_nums,
    part_one,
    part_two,
)

EXAMPLE = "23331331214141314020"


def _render(blocks):
    return "".join("." if b is None else str(b) for b in blocks)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123450", "0..111....22222"),
        ("23331331214141314020", "00...111...2...333.44.5555.6666.777.888899"),
    ],
)
def test_make_fragments(text, expected):
    assert _render(make_fragments(parse_nums(text))) == expected


def test_calc_checksum():
    assert calc_checksum(parse_nums("0099811188827773336446555566")) == 1928


def test_calc_checksum_skips_free_blocks():
    assert calc_checksum([0, None, 2, None, 1]) == 2 * 2 + 4 * 1


@pytest.mark.parametrize(
    "text, compacted",
    [
        ("123450", "022111222"),
        ("23331331214141314020", "0099811188827773336446555566"),
    ],
)
def test_part_one_small(text, compacted):
    assert part_one(text) == calc_checksum(parse_nums(compacted))


def test_compact_small():
    nums = parse_nums("123450")
    result = list(compact(make_fragments(nums), sum(nums)))
    assert "".join(map(str, result)) == "022111222"


def test_part_one():
    assert part_one(EXAMPLE) == 1928


def test_part_one_ignores_trailing_newline():
    assert part_one(EXAMPLE + "\n") == 1928


def test_part_two():
    assert part_two(EXAMPLE) == 2858


def test_parse_nums_rejects_non_digits():
    with pytest.raises(ValueError):
        parse_nums("12a4")