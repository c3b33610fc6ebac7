"""Day 8: antinodes of resonating antennas."""

from __future__ import annotations

from collections import defaultdict
from itertools import combinations, count
from typing import Iterator, Sequence

from aoc2024.day import Day
from aoc2024.grid import Pos
from aoc2024.runner import solution_main

DAY = Day(8)

AntennaMap = dict[str, list[Pos]]
Bounds = tuple[int, int]


def get_antenna_map(text: str) -> AntennaMap:
    """Positions of every antenna, grouped by frequency."""
    antennas: defaultdict[str, list[Pos]] = defaultdict(list)
    for r, line in enumerate(text.splitlines()):
        for c, char in enumerate(line):
            if char != ".":
                antennas[char].append(Pos(r, c))
    return dict(antennas)


def _pairs(antennas: AntennaMap) -> Iterator[tuple[Pos, Pos]]:
    for positions in antennas.values():
        yield from combinations(positions, 2)


def get_antinodes(antennas: AntennaMap, bounds: Bounds) -> set[Pos]:
    antinodes: set[Pos] = set()
    for a, b in _pairs(antennas):
        for candidate in (a * 2 - b, b * 2 - a):
            if candidate.in_bounds(bounds) is not None:
                antinodes.add(candidate)
    return antinodes


def _ray(start: Pos, step: Pos, bounds: Bounds) -> Iterator[Pos]:
    for n in count():
        pos = (start + step * n).in_bounds(bounds)
        if pos is None:
            return
        yield pos


def get_resonant_antinodes(antennas: AntennaMap, bounds: Bounds) -> set[Pos]:
    antinodes: set[Pos] = set()
    for a, b in _pairs(antennas):
        antinodes.update(_ray(a, b - a, bounds))
        antinodes.update(_ray(b, a - b, bounds))
    return antinodes


def _bounds(text: str) -> Bounds | None:
    lines = text.splitlines()
    if not lines:
        return None
    return len(lines), len(lines[0])


def part_one(puzzle_input: str) -> int | None:
    bounds = _bounds(puzzle_input)
    if bounds is None:
        return None
    return len(get_antinodes(get_antenna_map(puzzle_input), bounds))


def part_two(puzzle_input: str) -> int | None:
    bounds = _bounds(puzzle_input)
    if bounds is None:
        return None
    return len(get_resonant_antinodes(get_antenna_map(puzzle_input), bounds))


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()