import pytest

from aoc2024.grid import Direction, Pos, parse_char_matrix
from aoc2024.solutions.day15 import (
    box_moved,
    navigate_robot,
    navigate_robot_2,
    parse_input,
    parse_input_2,
    part_one,
    part_two,
)

SMALL_EXAMPLE = """########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<"""

SMALL_EXAMPLE_2 = """#######
#...#.#
#.....#
#..OO@#
#..O..#
#.....#
#######

<vv<<^^<<^^"""


def test_part_one_small():
    assert part_one(SMALL_EXAMPLE) == 2028


def test_part_two_small():
    assert part_two(SMALL_EXAMPLE_2) == 618


def test_parse_input_reads_moves():
    matrix, directions = parse_input(SMALL_EXAMPLE)
    assert len(matrix) == 8
    assert len(directions) == 15
    assert directions[:3] == [Direction.WEST, Direction.NORTH, Direction.NORTH]


def test_parse_input_requires_blank_line():
    with pytest.raises(ValueError):
        parse_input("#@.#\n<")


def test_parse_input_rejects_bad_move():
    with pytest.raises(ValueError):
        parse_input("#@.#\n\n<x")


def test_parse_input_2_widens_map():
    matrix, _ = parse_input_2(SMALL_EXAMPLE_2)
    assert "".join(matrix[0]) == "##############"
    assert "".join(matrix[3]) == "##....[][]@.##"


def test_navigate_robot_pushes_and_stops_at_wall():
    matrix = [list("#.O.@#")]
    robot = navigate_robot([Direction.WEST] * 3, matrix, Pos(0, 4))
    assert robot == Pos(0, 2)
    assert "".join(matrix[0]) == "#O@..#"


def test_navigate_robot_2_pushes_box_east():
    matrix = [list("#@[]..#")]
    robot = navigate_robot_2([Direction.EAST], matrix, Pos(0, 1))
    assert robot == Pos(0, 2)
    assert "".join(matrix[0]) == "#.@[].#"


def test_box_moved_free_above():
    matrix = parse_char_matrix("########\n#......#\n#..[]..#\n#..@...#\n")
    assert box_moved(matrix, Pos(2, 3), Direction.NORTH) == [Pos(2, 3)]


def test_box_moved_blocked_by_wall():
    matrix = parse_char_matrix("########\n#..[]..#\n#..@...#\n")
    assert box_moved(matrix, Pos(1, 3), Direction.NORTH) is None


def test_box_moved_chain_of_boxes():
    matrix = parse_char_matrix("########\n#......#\n#..[]..#\n#.[][].#\n#......#\n")
    moved = box_moved(matrix, Pos(3, 2), Direction.NORTH)
    assert moved == [Pos(2, 3), Pos(3, 2)]