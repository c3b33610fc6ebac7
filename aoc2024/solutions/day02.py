"""Day 2: checking reactor reports for safe level changes."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, Sequence

from aoc2024.day import Day
from aoc2024.runner import solution_main

DAY = Day(2)


def is_safe(levels: Iterable[int]) -> bool:
    """Levels change monotonically by one to three at every step."""
    diffs = [b - a for a, b in pairwise(levels)]
    if not diffs:
        raise ValueError("a report needs at least two levels")
    low, high = min(diffs), max(diffs)
    too_low = low < -3
    too_high = high > 3
    has_zero = 0 in diffs
    not_monotonic = low * high < 0
    return not (too_low or too_high or has_zero or not_monotonic)


def _reports(text: str) -> Iterable[list[int]]:
    for line in text.splitlines():
        yield [int(x) for x in line.split()]


def _safe_with_one_removed(levels: list[int]) -> bool:
    return any(
        is_safe(levels[:skip] + levels[skip + 1 :]) for skip in range(len(levels))
    )


def part_one(puzzle_input: str) -> int:
    return sum(1 for levels in _reports(puzzle_input) if is_safe(levels))


def part_two(puzzle_input: str) -> int:
    return sum(1 for levels in _reports(puzzle_input) if _safe_with_one_removed(levels))


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()