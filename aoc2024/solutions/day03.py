"""Day 3: summing multiplication instructions in corrupted memory."""

from __future__ import annotations

import re
from typing import Sequence

from aoc2024.day import Day
from aoc2024.runner import solution_main

DAY = Day(3)

_MUL = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")
_INSTRUCTION = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)|do\(\)|don't\(\)")


def part_one(puzzle_input: str) -> int:
    return sum(int(a) * int(b) for a, b in _MUL.findall(puzzle_input))


def part_two(puzzle_input: str) -> int:
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(puzzle_input):
        instruction = match.group(0)
        if instruction == "do()":
            enabled = True
        elif instruction == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()