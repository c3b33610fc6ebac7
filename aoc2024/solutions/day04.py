"""Day 4: a word search for XMAS."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Iterator, Sequence

from aoc2024.day import Day
from aoc2024.grid import parse_char_matrix
from aoc2024.runner import solution_main

DAY = Day(4)

_TARGETS = (tuple("XMAS"), tuple("SAMX"))
_MAS = ("MAS", "SAM")


def count_xmas_in_line(line: Iterable[str]) -> int:
    """Count XMAS written forwards or backwards in a line, overlaps included."""
    chars = tuple(line)
    windows = zip(chars, chars[1:], chars[2:], chars[3:])
    return sum(1 for window in windows if window in _TARGETS)


def _all_lines(matrix: list[list[str]]) -> Iterator[Sequence[str]]:
    yield from matrix
    yield from zip(*matrix)

    diagonals: defaultdict[int, list[str]] = defaultdict(list)
    anti_diagonals: defaultdict[int, list[str]] = defaultdict(list)
    for r, row in enumerate(matrix):
        for c, char in enumerate(row):
            diagonals[r - c].append(char)
            anti_diagonals[r + c].append(char)
    yield from diagonals.values()
    yield from anti_diagonals.values()


def part_one(puzzle_input: str) -> int:
    matrix = parse_char_matrix(puzzle_input)
    return sum(count_xmas_in_line(line) for line in _all_lines(matrix))


def _has_x(matrix: list[list[str]], r: int, c: int) -> bool:
    main = matrix[r][c] + matrix[r + 1][c + 1] + matrix[r + 2][c + 2]
    anti = matrix[r][c + 2] + matrix[r + 1][c + 1] + matrix[r + 2][c]
    return main in _MAS and anti in _MAS


def part_two(puzzle_input: str) -> int:
    matrix = parse_char_matrix(puzzle_input)
    rows, cols = len(matrix), len(matrix[0])
    return sum(
        1
        for r in range(rows - 2)
        for c in range(cols - 2)
        if _has_x(matrix, r, c)
    )


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()