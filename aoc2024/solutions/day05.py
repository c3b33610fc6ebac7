"""Day 5: ordering pages of safety manual updates."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Sequence

from aoc2024.day import Day
from aoc2024.runner import solution_main

DAY = Day(5)

Ordering = tuple[int, int]


def parse_input(text: str) -> tuple[list[Ordering], list[list[int]]]:
    """Split the input into ordering rules and updates."""
    if "\n\n" not in text:
        raise ValueError("expected a blank line between rules and updates")
    rules_text, updates_text = text.split("\n\n", 1)

    orderings: list[Ordering] = []
    for line in rules_text.splitlines():
        before, sep, after = line.partition("|")
        if not sep:
            raise ValueError(f"malformed ordering rule: {line!r}")
        orderings.append((int(before), int(after)))

    updates = [
        [int(page) for page in line.split(",")] for line in updates_text.splitlines()
    ]
    return orderings, updates


def correct_order(update: Sequence[int], orderings: Sequence[Ordering]) -> bool:
    """Every rule whose two pages both appear is respected."""
    index = {}
    for position, page in enumerate(update):
        index.setdefault(page, position)
    return all(
        index[a] < index[b] for a, b in orderings if a in index and b in index
    )


def get_middle_page(pages: Sequence[int]) -> int:
    if len(pages) % 2 != 1:
        raise ValueError("an update needs an odd number of pages")
    return pages[len(pages) // 2]


def sort_update(update: Sequence[int], orderings: Sequence[Ordering]) -> list[int]:
    """Sort pages so that every pair follows its ordering rule."""
    relation: dict[Ordering, int] = {}
    for a, b in orderings:
        relation.setdefault((a, b), -1)
        relation.setdefault((b, a), 1)

    def compare(a: int, b: int) -> int:
        try:
            return relation[(a, b)]
        except KeyError:
            raise ValueError(f"Order missing for pages {a} and {b}") from None

    return sorted(update, key=cmp_to_key(compare))


def part_one(puzzle_input: str) -> int:
    orderings, updates = parse_input(puzzle_input)
    return sum(
        get_middle_page(update)
        for update in updates
        if correct_order(update, orderings)
    )


def part_two(puzzle_input: str) -> int:
    orderings, updates = parse_input(puzzle_input)
    return sum(
        get_middle_page(sort_update(update, orderings))
        for update in updates
        if not correct_order(update, orderings)
    )


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()