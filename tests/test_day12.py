from aoc2024.grid import parse_char_matrix
from aoc2024.solutions.day12 import get_region, get_region_2, part_one, part_two

SMALL = "AAAA\nBBCD\nBBCC\nEEEC\n"

INPUT = """RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE"""


def test_part_two_get_region():
    matrix = parse_char_matrix(SMALL)
    seen = set()
    region = get_region_2(matrix, (0, 0), seen, "A")
    assert (region.area, region.sides) == (4, 4)
    region = get_region_2(matrix, (1, 0), seen, "B")
    assert (region.area, region.sides) == (4, 4)
    region = get_region_2(matrix, (3, 0), seen, "E")
    assert (region.area, region.sides) == (3, 4)
    region = get_region_2(matrix, (1, 2), seen, "C")
    assert (region.area, region.sides) == (4, 8)
    region = get_region_2(matrix, (1, 3), seen, "D")
    assert (region.area, region.sides) == (1, 4)


def test_part_two_get_region2():
    matrix = parse_char_matrix("EEEEE\nEXXXX\nEEEEE\nEXXXX\nEEEEE\n")
    seen = set()
    region = get_region_2(matrix, (0, 0), seen, "E")
    assert (region.area, region.sides) == (17, 12)
    region = get_region_2(matrix, (1, 1), seen, "X")
    assert (region.area, region.sides) == (4, 4)


def test_get_region_perimeter():
    matrix = parse_char_matrix(SMALL)
    seen = set()
    region = get_region(matrix, (0, 0), seen, "A")
    assert (region.area, region.perimeter) == (4, 10)
    assert len(seen) == 4


def test_part_one_small():
    assert part_one(SMALL) == 140


def test_part_two_small():
    assert part_two(SMALL) == 80


def test_part_one():
    assert part_one(INPUT) == 1930


def test_part_two():
    assert part_two(INPUT) == 1206