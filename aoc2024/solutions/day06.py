"""Day 6: following a patrolling guard and trapping it in loops."""

from __future__ import annotations

from typing import Sequence

from aoc2024.day import Day
from aoc2024.grid import Direction, Pos, parse_char_matrix
from aoc2024.runner import solution_main

DAY = Day(6)

Matrix = list[list[str]]


def _bounds(matrix: Matrix) -> tuple[int, int]:
    return len(matrix), len(matrix[0])


def find_start_pos(matrix: Matrix) -> Pos:
    for r, row in enumerate(matrix):
        for c, char in enumerate(row):
            if char == "^":
                return Pos(r, c)
    raise ValueError("no guard start position in the map")


def trace_path(pos: Pos, direction: Direction, matrix: Matrix) -> set[Pos]:
    """The set of positions the guard visits before leaving the map."""
    bounds = _bounds(matrix)
    seen = {pos}
    while True:
        next_pos = (pos + direction).in_bounds(bounds)
        if next_pos is None:
            return seen
        cell = matrix[next_pos.row][next_pos.col]
        if cell == "#":
            direction = direction.turn_right()
        elif cell in ".^":
            pos = next_pos
        else:
            raise ValueError(f"unexpected map character: {cell!r}")
        seen.add(pos)


def is_loop(start: Pos, direction: Direction, matrix: Matrix) -> bool:
    """Whether the guard walks in a loop forever instead of leaving the map."""
    bounds = _bounds(matrix)
    pos = start
    seen: set[tuple[Pos, Direction]] = set()
    while True:
        seen.add((pos, direction))
        next_pos = (pos + direction).in_bounds(bounds)
        if next_pos is None:
            return False
        cell = matrix[next_pos.row][next_pos.col]
        if cell in "#O":
            direction = direction.turn_right()
        elif cell in ".^|-":
            pos = next_pos
        else:
            raise ValueError(f"unexpected map character: {cell!r}")
        if (pos, direction) in seen:
            return True


def part_one(puzzle_input: str) -> int:
    matrix = parse_char_matrix(puzzle_input)
    start = find_start_pos(matrix)
    return len(trace_path(start, Direction.NORTH, matrix))


def _with_obstacle(matrix: Matrix, pos: Pos) -> Matrix:
    blocked = [list(row) for row in matrix]
    blocked[pos.row][pos.col] = "O"
    return blocked


def part_two(puzzle_input: str) -> int:
    matrix = parse_char_matrix(puzzle_input)
    start = find_start_pos(matrix)
    candidates = trace_path(start, Direction.NORTH, matrix) - {start}
    return sum(
        1
        for pos in candidates
        if is_loop(start, Direction.NORTH, _with_obstacle(matrix, pos))
    )


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()