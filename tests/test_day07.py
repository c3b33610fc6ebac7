import pytest

from aoc2024.solutions.day07 import (
    Equation,
    Operator,
    is_solvable,
    parse_equations,
    part_one,
    part_two,
)

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""

BASIC = (Operator.ADD, Operator.MULTIPLY)
ALL = (Operator.ADD, Operator.MULTIPLY, Operator.CONCATENATE)


def test_part_one():
    assert part_one(EXAMPLE) == 3749


def test_part_two():
    assert part_two(EXAMPLE) == 11387


def test_parse_equations():
    equations = list(parse_equations(EXAMPLE))
    assert len(equations) == 9
    assert equations[1] == Equation(value=3267, numbers=[81, 40, 27])


def test_is_solvable_basic():
    assert is_solvable(Equation(190, [10, 19]), BASIC) is True
    assert is_solvable(Equation(83, [17, 5]), BASIC) is False


def test_is_solvable_needs_concatenation():
    assert is_solvable(Equation(156, [15, 6]), BASIC) is False
    assert is_solvable(Equation(156, [15, 6]), ALL) is True


def test_is_solvable_with_zero_after_overshoot():
    assert is_solvable(Equation(5, [100, 0, 5]), BASIC) is True


def test_concatenate():
    assert Operator.CONCATENATE.apply(12, 345) == 12345


def test_overflow_gives_none():
    assert Operator.ADD.apply(2**64 - 1, 1) is None
    assert Operator.MULTIPLY.apply(2**63, 2) is None


def test_empty_numbers_raise():
    with pytest.raises(ValueError):
        is_solvable(Equation(1, []), BASIC)