"""Day 12: fencing garden plot regions."""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass
from typing import Iterator, Sequence

from aoc2024.day import Day
from aoc2024.grid import DIRECTIONS, Pos, PosLike, parse_char_matrix
from aoc2024.runner import solution_main

DAY = Day(12)

Matrix = list[list[str]]


@dataclass(frozen=True)
class Region:
    area: int
    perimeter: int


@dataclass(frozen=True)
class Region2:
    area: int
    sides: int


def _bounds(matrix: Matrix) -> tuple[int, int]:
    return len(matrix), len(matrix[0])


def _neighbours(pos: Pos, bounds: tuple[int, int]) -> Iterator[tuple[Pos, object]]:
    for direction in DIRECTIONS:
        neighbour = (pos + direction).in_bounds(bounds)
        if neighbour is not None:
            yield neighbour, direction


def _flood(matrix: Matrix, start: Pos, seen: set[Pos], plant: str) -> Iterator[Pos]:
    """Yield the cells of a region in breadth-first order, marking them as seen."""
    bounds = _bounds(matrix)
    queue = deque([start])
    seen.add(start)
    while queue:
        pos = queue.popleft()
        yield pos
        for neighbour, _ in _neighbours(pos, bounds):
            if matrix[neighbour.row][neighbour.col] == plant and neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)


def get_region(matrix: Matrix, pos: PosLike, seen: set[Pos], plant: str) -> Region:
    """Measure the region of ``plant`` containing ``pos``; its cells join ``seen``."""
    bounds = _bounds(matrix)
    region: set[Pos] = set()
    area = perimeter = 0
    for cell in _flood(matrix, Pos(*pos), seen, plant):
        region.add(cell)
        neighbours = sum(1 for n, _ in _neighbours(cell, bounds) if n in region)
        perimeter += 4 - 2 * neighbours
        area += 1
    return Region(area=area, perimeter=perimeter)


def get_region_2(matrix: Matrix, pos: PosLike, seen: set[Pos], plant: str) -> Region2:
    """Measure area and number of straight sides of the region containing ``pos``."""
    bounds = _bounds(matrix)
    region: set[Pos] = set()
    area = sides = 0
    for cell in _flood(matrix, Pos(*pos), seen, plant):
        region.add(cell)
        adjacent = [(n, d) for n, d in _neighbours(cell, bounds) if n in region]

        diagonals: Counter[Pos] = Counter()
        for neighbour, direction in adjacent:
            for turned in (direction.turn_left(), direction.turn_right()):
                diagonal = (neighbour + turned).in_bounds(bounds)
                if diagonal is not None:
                    diagonals[diagonal] += 1
        corners = sum(1 for p, n in diagonals.items() if n > 1 or p in region)

        sides += 4 - 4 * len(adjacent) + 2 * corners
        area += 1
    return Region2(area=area, sides=sides)


def part_one(puzzle_input: str) -> int:
    matrix = parse_char_matrix(puzzle_input)
    seen: set[Pos] = set()
    total = 0
    for r, row in enumerate(matrix):
        for c, plant in enumerate(row):
            if Pos(r, c) in seen:
                continue
            region = get_region(matrix, Pos(r, c), seen, plant)
            total += region.area * region.perimeter
    return total


def part_two(puzzle_input: str) -> int:
    matrix = parse_char_matrix(puzzle_input)
    seen: set[Pos] = set()
    total = 0
    for r, row in enumerate(matrix):
        for c, plant in enumerate(row):
            if Pos(r, c) in seen:
                continue
            region = get_region_2(matrix, Pos(r, c), seen, plant)
            total += region.area * region.sides
    return total


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()