"""Least heat loss path for a crucible that may not go straight more than three blocks."""

from __future__ import annotations

from collections import deque
from typing import Sequence

from aoc2024.day import Day
from aoc2024.grid import DIRECTIONS, Direction, Pos, parse_int_matrix
from aoc2024.runner import solution_main

DAY = Day(17)

MAX_STRAIGHT = 3

Key = tuple[Pos, Direction, int]


def _get_heat(matrix: list[list[int]], pos: Pos) -> int:
    if pos.in_bounds((len(matrix), len(matrix[0]))) is None:
        raise ValueError(f"position {pos} is outside the map")
    return matrix[pos.row][pos.col]


def part_one(puzzle_input: str) -> int:
    heat_matrix = parse_int_matrix(puzzle_input)
    rows, cols = len(heat_matrix), len(heat_matrix[0])
    for row in heat_matrix:
        print("".join(str(h) for h in row))

    end = Pos(rows - 1, cols - 1)
    min_heat: dict[Key, int] = {}

    start_east: Key = (Pos(0, 1), Direction.EAST, 1)
    min_heat[start_east] = _get_heat(heat_matrix, Pos(0, 1))
    start_south: Key = (Pos(1, 0), Direction.SOUTH, 1)
    min_heat[start_south] = _get_heat(heat_matrix, Pos(1, 0))

    queue: deque[Key] = deque([start_east, start_south])

    while queue:
        key = queue.popleft()
        pos, direction, straight_steps = key
        heat_so_far = min_heat[key]
        for next_dir in DIRECTIONS:
            next_pos = (pos + next_dir).in_bounds((rows, cols))
            if next_pos is None:
                continue
            if next_dir is direction.opposite():
                continue

            next_straight = straight_steps + 1 if next_dir is direction else 1
            if next_straight > MAX_STRAIGHT:
                continue

            tentative = heat_so_far + _get_heat(heat_matrix, next_pos)
            if next_pos == end:
                return tentative
            next_key: Key = (next_pos, next_dir, next_straight)
            old = min_heat.get(next_key)
            if old is None or tentative < old:
                min_heat[next_key] = tentative
                queue.append(next_key)

    raise ValueError("No path found")


def part_two(puzzle_input: str) -> int | None:
    return None


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()