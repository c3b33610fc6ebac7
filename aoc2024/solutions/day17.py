"""Day 17: a three-bit computer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from aoc2024.day import Day
from aoc2024.runner import solution_main

DAY = Day(17)

_U128_MAX = 2**128 - 1


@dataclass
class Registers:
    a: int
    b: int
    c: int


def parse_input(text: str) -> tuple[list[int], Registers]:
    """Read the three registers and the program."""
    regs_text, sep, program_text = text.partition("\n\n")
    if not sep:
        raise ValueError("expected a blank line between registers and program")

    values = []
    for line in regs_text.splitlines():
        _, found, value = line.partition(": ")
        if not found:
            raise ValueError(f"malformed register line: {line!r}")
        values.append(int(value))
    if len(values) != 3:
        raise ValueError("expected exactly three registers")

    _, found, codes = program_text.rstrip("\r\n").partition(": ")
    if not found:
        raise ValueError("malformed program line")
    program = [int(code) for code in codes.split(",")]
    if any(not 0 <= code <= 255 for code in program):
        raise ValueError("program values must fit in a byte")

    return program, Registers(*values)


def _combo(operand: int, regs: Registers) -> int:
    if 0 <= operand <= 3:
        return operand
    if operand == 4:
        return regs.a
    if operand == 5:
        return regs.b
    if operand == 6:
        return regs.c
    raise ValueError("Invalid combo")


def run(program: Sequence[int], regs: Registers) -> list[int]:
    """Execute ``program`` on ``regs``, which it updates; return the output values."""
    output: list[int] = []
    pointer = 0
    while pointer + 2 <= len(program):
        opcode, operand = program[pointer], program[pointer + 1]
        if opcode == 0:
            regs.a >>= _combo(operand, regs)
        elif opcode == 1:
            regs.b = (regs.b & 0xFF) ^ operand
        elif opcode == 2:
            regs.b = _combo(operand, regs) & 0xFF % 8 if False else _combo(operand, regs) % 8
        elif opcode == 3:
            if regs.a != 0:
                pointer = operand
                continue
        elif opcode == 4:
            regs.b ^= regs.c
        elif opcode == 5:
            output.append(_combo(operand, regs) % 8)
        elif opcode == 6:
            regs.b = regs.a >> _combo(operand, regs)
        elif opcode == 7:
            regs.c = regs.a >> _combo(operand, regs)
        else:
            raise ValueError("Invalid opcode")
        pointer += 2
    return output


def part_one(puzzle_input: str) -> int | None:
    program, regs = parse_input(puzzle_input)
    joined = "".join(str(value) for value in run(program, regs))
    if not joined:
        return None
    value = int(joined)
    return value if value <= _U128_MAX else None


def part_two(puzzle_input: str) -> int | None:
    return None


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()