import pytest

from aoc2024.solutions.day17_2023 import part_one, part_two


def test_part_one_two_by_two():
    assert part_one("11\n11\n") == 2


def test_part_one_three_by_three():
    assert part_one("111\n111\n111\n") == 4


def test_part_one_single_column_is_out_of_bounds():
    with pytest.raises(ValueError):
        part_one("1\n1\n")


def test_part_one_rejects_non_digits():
    with pytest.raises(ValueError):
        part_one("1a\n11\n")


def test_part_two_is_unsolved():
    assert part_two("11\n11\n") is None