"""Day 15: a robot pushing boxes around a warehouse."""

from __future__ import annotations

from typing import Iterable, Sequence

from aoc2024.day import Day
from aoc2024.grid import Direction, Pos, parse_char_matrix
from aoc2024.runner import solution_main

DAY = Day(15)

Matrix = list[list[str]]

_WIDE_TILES = {"#": "##", ".": "..", "@": "@.", "O": "[]"}


def _split_sections(text: str) -> tuple[str, str]:
    if "\n\n" not in text:
        raise ValueError("expected a blank line between the map and the moves")
    matrix_text, moves_text = text.split("\n\n", 1)
    return matrix_text, moves_text


def _parse_moves(moves_text: str) -> list[Direction]:
    directions = []
    for c in moves_text:
        if c == "\n":
            continue
        direction = Direction.from_char(c)
        if direction is None:
            raise ValueError(f"invalid move character: {c!r}")
        directions.append(direction)
    return directions


def parse_input(text: str) -> tuple[Matrix, list[Direction]]:
    """Read the warehouse map and the robot's moves."""
    matrix_text, moves_text = _split_sections(text)
    return parse_char_matrix(matrix_text), _parse_moves(moves_text)


def _widen(matrix: Matrix) -> Matrix:
    wide = []
    for row in matrix:
        wide_row: list[str] = []
        for c in row:
            if c not in _WIDE_TILES:
                raise ValueError(f"invalid map character: {c!r}")
            wide_row.extend(_WIDE_TILES[c])
        wide.append(wide_row)
    return wide


def parse_input_2(text: str) -> tuple[Matrix, list[Direction]]:
    """Read the map at double width, with boxes drawn as ``[]``."""
    matrix_text, moves_text = _split_sections(text)
    return _widen(parse_char_matrix(matrix_text)), _parse_moves(moves_text)


def _at(matrix: Matrix, pos: Pos) -> str:
    if pos.row < 0 or pos.col < 0:
        raise IndexError(f"position {pos} is outside the map")
    return matrix[pos.row][pos.col]


def _put(matrix: Matrix, pos: Pos, c: str) -> None:
    if pos.row < 0 or pos.col < 0:
        raise IndexError(f"position {pos} is outside the map")
    matrix[pos.row][pos.col] = c


def _find_robot(matrix: Matrix) -> Pos:
    for r, row in enumerate(matrix):
        for c, char in enumerate(row):
            if char == "@":
                return Pos(r, c)
    raise ValueError("no robot in the map")


def _step_robot(matrix: Matrix, robot: Pos, direction: Direction) -> Pos:
    _put(matrix, robot, ".")
    robot = robot + direction
    _put(matrix, robot, "@")
    return robot


def _ray(matrix: Matrix, start: Pos, direction: Direction) -> Iterable[Pos]:
    rows, cols = len(matrix), len(matrix[0])
    pos = start
    while pos.in_bounds((rows, cols)) is not None:
        yield pos
        pos = pos + direction


def navigate_robot(directions: Iterable[Direction], matrix: Matrix, robot: Pos) -> Pos:
    """Move the robot through ``matrix``, pushing ``O`` boxes; return where it ends."""
    for direction in directions:
        ahead = _at(matrix, robot + direction)
        if ahead == ".":
            robot = _step_robot(matrix, robot, direction)
        elif ahead == "#":
            continue
        elif ahead == "O":
            stop = next(
                (p for p in _ray(matrix, robot, direction) if _at(matrix, p) in ".#"),
                None,
            )
            if stop is not None and _at(matrix, stop) == ".":
                _put(matrix, stop, "O")
                robot = _step_robot(matrix, robot, direction)
        else:
            raise ValueError("Invalid robot position")
    return robot


def box_moved(matrix: Matrix, box_left: Pos, direction: Direction) -> list[Pos] | None:
    """Left halves of every box moved if the box at ``box_left`` is pushed, or None."""
    box_right = box_left + Direction.EAST

    def then_this(moved: list[Pos] | None) -> list[Pos] | None:
        return None if moved is None else [*moved, box_left]

    if direction in (Direction.NORTH, Direction.SOUTH):
        pair = (_at(matrix, box_left + direction), _at(matrix, box_right + direction))
        if pair == (".", "."):
            return [box_left]
        if pair[0] == "#" or pair[1] == "#":
            return None
        if pair == ("[", "]"):
            return then_this(box_moved(matrix, box_left + direction, direction))
        if pair == ("]", "."):
            return then_this(
                box_moved(matrix, box_left + direction + Direction.WEST, direction)
            )
        if pair == (".", "["):
            return then_this(box_moved(matrix, box_right + direction, direction))
        if pair == ("]", "["):
            left_box = box_moved(matrix, box_left + direction + Direction.WEST, direction)
            if left_box is None:
                return None
            right_box = box_moved(matrix, box_right + direction, direction)
            if right_box is None:
                return None
            return [*left_box, *right_box, box_left]
        raise ValueError(f"Invalid character: {pair!r}")

    if direction is Direction.EAST:
        ahead = _at(matrix, box_right + direction)
        if ahead == ".":
            return [box_left]
        if ahead == "#":
            return None
        if ahead == "[":
            return then_this(box_moved(matrix, box_right + direction, direction))
        raise ValueError(f"Invalid character: {ahead!r}")

    ahead = _at(matrix, box_left + direction)
    if ahead == ".":
        return [box_left]
    if ahead == "#":
        return None
    if ahead == "]":
        return then_this(box_moved(matrix, box_left + direction + direction, direction))
    raise ValueError(f"Invalid character: {ahead!r}")


def navigate_robot_2(directions: Iterable[Direction], matrix: Matrix, robot: Pos) -> Pos:
    """Move the robot through a wide map, pushing ``[]`` boxes; return where it ends."""
    for direction in directions:
        ahead = _at(matrix, robot + direction)
        if ahead == ".":
            robot = _step_robot(matrix, robot, direction)
        elif ahead == "#":
            continue
        elif ahead in "[]":
            if ahead == "[":
                box_left = robot + direction
            else:
                box_left = robot + direction + Direction.WEST
            moved = box_moved(matrix, box_left, direction)
            if moved is None:
                continue
            for left in dict.fromkeys(moved):
                right = left + Direction.EAST
                if ahead == "[":
                    _put(matrix, right + direction, "]")
                    _put(matrix, right, ".")
                    _put(matrix, left + direction, "[")
                    _put(matrix, left, ".")
                else:
                    _put(matrix, left + direction, "[")
                    _put(matrix, left, ".")
                    _put(matrix, right + direction, "]")
                    _put(matrix, right, ".")
            robot = _step_robot(matrix, robot, direction)
        else:
            raise ValueError(f"Invalid character: {ahead!r}")
    return robot


def _gps_sum(matrix: Matrix, box: str) -> int:
    return sum(
        r * 100 + c
        for r, row in enumerate(matrix)
        for c, char in enumerate(row)
        if char == box
    )


def part_one(puzzle_input: str) -> int:
    matrix, directions = parse_input(puzzle_input)
    navigate_robot(directions, matrix, _find_robot(matrix))
    return _gps_sum(matrix, "O")


def part_two(puzzle_input: str) -> int:
    matrix, directions = parse_input_2(puzzle_input)
    navigate_robot_2(directions, matrix, _find_robot(matrix))
    return _gps_sum(matrix, "[")


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()