import pytest

from aoc2024.solutions.day05 import (
    correct_order,
    get_middle_page,
    parse_input,
    part_one,
    part_two,
    sort_update,
)

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


@pytest.mark.parametrize(
    "pages, expected",
    [([75, 47, 61, 53, 29], 61), ([97, 61, 53, 29, 13], 53), ([75, 29, 13], 29)],
)
def test_middle_page(pages, expected):
    assert get_middle_page(pages) == expected


def test_middle_page_even_raises():
    with pytest.raises(ValueError):
        get_middle_page([1, 2])


def test_part_one():
    assert part_one(EXAMPLE) == 143


def test_part_two():
    assert part_two(EXAMPLE) == 123


def test_parse_input():
    orderings, updates = parse_input(EXAMPLE)
    assert len(orderings) == 21
    assert orderings[0] == (47, 53)
    assert updates[2] == [75, 29, 13]
    assert len(updates) == 6


def test_correct_order():
    orderings, updates = parse_input(EXAMPLE)
    assert correct_order(updates[0], orderings) is True
    assert correct_order(updates[3], orderings) is False


def test_sort_update():
    orderings, _ = parse_input(EXAMPLE)
    assert sort_update([75, 97, 47, 61, 53], orderings) == [97, 75, 47, 61, 53]
    assert sort_update([61, 13, 29], orderings) == [61, 29, 13]


def test_sort_update_missing_order_raises():
    with pytest.raises(ValueError):
        sort_update([1, 2], [(3, 4)])


def test_parse_without_separator_raises():
    with pytest.raises(ValueError):
        parse_input("1|2\n3,4,5")