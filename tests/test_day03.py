from aoc2024.solutions.day03 import part_one, part_two

EXAMPLE = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE_2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part_one():
    assert part_one(EXAMPLE) == 161


def test_part_two():
    assert part_two(EXAMPLE_2) == 48


def test_part_two_without_toggles_matches_part_one():
    assert part_two(EXAMPLE) == part_one(EXAMPLE)


def test_four_digit_numbers_are_ignored():
    assert part_one("mul(1234,2)") == 0


def test_disabled_from_start_counts_nothing():
    assert part_two("don't()" + EXAMPLE) == 0