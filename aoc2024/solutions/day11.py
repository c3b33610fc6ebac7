"""Day 11: counting stones that split as you blink."""

from __future__ import annotations

from functools import cache
from typing import Sequence

from aoc2024.day import Day
from aoc2024.runner import solution_main

DAY = Day(11)


@cache
def count_stones(stone: int, blinks: int) -> int:
    """The number of stones a single stone becomes after ``blinks`` blinks."""
    if blinks == 0:
        return 1
    if stone == 0:
        return count_stones(1, blinks - 1)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return count_stones(int(digits[:half]), blinks - 1) + count_stones(
            int(digits[half:]), blinks - 1
        )
    return count_stones(stone * 2024, blinks - 1)


def solve(puzzle_input: str, num_blinks: int) -> int:
    return sum(count_stones(int(stone), num_blinks) for stone in puzzle_input.split())


def part_one(puzzle_input: str) -> int:
    return solve(puzzle_input, 25)


def part_two(puzzle_input: str) -> int:
    return solve(puzzle_input, 75)


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()