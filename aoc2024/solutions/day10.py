"""Day 10: hiking trails on a topographic map."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Sequence

from aoc2024.day import Day
from aoc2024.grid import Pos, PosLike, get_adjacent_positions, parse_int_matrix
from aoc2024.runner import solution_main

DAY = Day(10)

SUMMIT = 9

Matrix = list[list[int]]


def _bounds(matrix: Matrix) -> tuple[int, int]:
    return len(matrix), len(matrix[0])


def _climb(current: Pos, height: int, matrix: Matrix) -> Iterator[Pos]:
    for p in get_adjacent_positions(current, _bounds(matrix)):
        if matrix[p.row][p.col] == height + 1:
            yield p


def count_summits(start: PosLike, matrix: Matrix) -> int:
    """The number of distinct summits reachable from ``start``."""
    origin = Pos(*start)
    seen = {origin}
    queue = deque([(origin, 0)])
    summits = 0
    while queue:
        current, height = queue.popleft()
        if height == SUMMIT:
            summits += 1
            continue
        for p in _climb(current, height, matrix):
            if p not in seen:
                seen.add(p)
                queue.append((p, height + 1))
    return summits


def count_trails(start: PosLike, matrix: Matrix) -> int:
    """The number of distinct trails from ``start`` to any summit."""
    queue = deque([(Pos(*start), 0)])
    trails = 0
    while queue:
        current, height = queue.popleft()
        if height == SUMMIT:
            trails += 1
            continue
        queue.extend((p, height + 1) for p in _climb(current, height, matrix))
    return trails


def _trailheads(matrix: Matrix) -> Iterator[Pos]:
    for r, row in enumerate(matrix):
        for c, height in enumerate(row):
            if height == 0:
                yield Pos(r, c)


def part_one(puzzle_input: str) -> int:
    matrix = parse_int_matrix(puzzle_input)
    return sum(count_summits(start, matrix) for start in _trailheads(matrix))


def part_two(puzzle_input: str) -> int:
    matrix = parse_int_matrix(puzzle_input)
    return sum(count_trails(start, matrix) for start in _trailheads(matrix))


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()