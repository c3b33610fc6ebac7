"""Day 7: finding operators that make calibration equations true."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Sequence

from aoc2024.day import Day
from aoc2024.runner import solution_main

DAY = Day(7)

_U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class Equation:
    value: int
    numbers: list[int]


class Operator(Enum):
    ADD = "+"
    MULTIPLY = "*"
    CONCATENATE = "||"

    def apply(self, result: int, number: int) -> int | None:
        """Combine two values; None if the result overflows 64 bits."""
        if self is Operator.ADD:
            combined = result + number
        elif self is Operator.MULTIPLY:
            combined = result * number
        else:
            if number <= 0:
                raise ValueError("cannot concatenate a non-positive number")
            combined = result * 10 ** len(str(number)) + number
        return combined if combined <= _U64_MAX else None


PART_ONE_OPERATORS = (Operator.ADD, Operator.MULTIPLY)
PART_TWO_OPERATORS = (Operator.ADD, Operator.MULTIPLY, Operator.CONCATENATE)


def parse_equations(text: str) -> Iterator[Equation]:
    for line in text.splitlines():
        head, sep, tail = line.partition(":")
        if not sep:
            raise ValueError(f"malformed equation: {line!r}")
        yield Equation(value=int(head), numbers=[int(n) for n in tail.split()])


def is_solvable(equation: Equation, operators: Iterable[Operator]) -> bool:
    """Whether some left-to-right choice of operators yields the equation's value."""
    numbers = equation.numbers
    if not numbers:
        raise ValueError("an equation needs at least one number")
    ops = tuple(operators)
    target = equation.value
    # With only non-zero numbers left, no operator can make the result smaller.
    last_zero = max((i for i, n in enumerate(numbers) if n == 0), default=-1)

    def search(acc: int, index: int) -> bool:
        if index == len(numbers):
            return acc == target
        if acc > target and index > last_zero:
            return False
        for op in ops:
            combined = op.apply(acc, numbers[index])
            if combined is not None and search(combined, index + 1):
                return True
        return False

    return search(numbers[0], 1)


def _solve(puzzle_input: str, operators: Sequence[Operator]) -> int:
    return sum(
        equation.value
        for equation in parse_equations(puzzle_input)
        if is_solvable(equation, operators)
    )


def part_one(puzzle_input: str) -> int:
    return _solve(puzzle_input, PART_ONE_OPERATORS)


def part_two(puzzle_input: str) -> int:
    return _solve(puzzle_input, PART_TWO_OPERATORS)


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()