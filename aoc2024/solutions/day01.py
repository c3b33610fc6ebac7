"""Day 1: comparing two lists of location ids."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from aoc2024.day import Day
from aoc2024.runner import solution_main

DAY = Day(1)


def _parse_lists(text: str) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        parts = line.split("   ", 1)
        if len(parts) != 2:
            raise ValueError(f"malformed line: {line!r}")
        left.append(int(parts[0]))
        right.append(int(parts[1]))
    return sorted(left), sorted(right)


def part_one(puzzle_input: str) -> int:
    left, right = _parse_lists(puzzle_input)
    return sum(abs(a - b) for a, b in zip(left, right))


def part_two(puzzle_input: str) -> int:
    left, right = _parse_lists(puzzle_input)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()