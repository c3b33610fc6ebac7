"""Grid helpers: directions, positions and character/digit matrices."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")


class Direction(Enum):
    """A compass direction on a grid whose rows grow southwards."""

    NORTH = "^"
    EAST = ">"
    SOUTH = "v"
    WEST = "<"

    def _step(self, offset: int) -> Direction:
        return DIRECTIONS[(DIRECTIONS.index(self) + offset) % len(DIRECTIONS)]

    def turn_right(self) -> Direction:
        return self._step(1)

    def turn_left(self) -> Direction:
        return self._step(-1)

    def opposite(self) -> Direction:
        return self._step(2)

    @classmethod
    def from_char(cls, c: str) -> Direction | None:
        """The direction drawn as ``^``, ``>``, ``v`` or ``<``, else None."""
        try:
            return cls(c)
        except ValueError:
            return None

    @property
    def delta(self) -> Pos:
        """The (row, column) offset of one step in this direction."""
        return Pos(*_DELTAS[self])


DIRECTIONS: tuple[Direction, ...] = tuple(Direction)

_DELTAS = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}


@dataclass(frozen=True, order=True)
class Pos:
    """A (row, column) position; components may be negative."""

    row: int
    col: int

    def __iter__(self) -> Iterator[int]:
        yield self.row
        yield self.col

    def __add__(self, other: PosLike) -> Pos:
        o = _as_pos(other)
        return Pos(self.row + o.row, self.col + o.col)

    __radd__ = __add__

    def __sub__(self, other: PosLike) -> Pos:
        o = _as_pos(other)
        return Pos(self.row - o.row, self.col - o.col)

    def __mul__(self, factor: object) -> Pos:
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        return Pos(self.row * factor, self.col * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Pos:
        return Pos(-self.row, -self.col)

    def in_bounds(self, bounds: PosLike) -> Pos | None:
        """Return this position if it lies within zero and ``bounds``, else None."""
        b = _as_pos(bounds)
        if 0 <= self.row < b.row and 0 <= self.col < b.col:
            return self
        return None

    def add_checked_with_bounds(self, other: PosLike, bounds: PosLike) -> Pos | None:
        return (self + other).in_bounds(bounds)

    def add_saturating(self, other: PosLike) -> Pos:
        """Add ``other``, clamping each component at zero."""
        o = _as_pos(other)
        return Pos(max(0, self.row + o.row), max(0, self.col + o.col))


PosLike = Union[Pos, Direction, Tuple[int, int], Sequence[int]]


def _as_pos(value: PosLike) -> Pos:
    if isinstance(value, Pos):
        return value
    if isinstance(value, Direction):
        return value.delta
    row, col = value
    return Pos(int(row), int(col))


def get_adjacent_positions(pos: PosLike, bounds: PosLike) -> Iterator[Pos]:
    """Yield the in-bounds neighbours of ``pos``, without diagonals."""
    origin = _as_pos(pos)
    for direction in DIRECTIONS:
        neighbour = (origin + direction).in_bounds(bounds)
        if neighbour is not None:
            yield neighbour


def print_matrix(matrix: Iterable[Iterable[str]]) -> None:
    for row in matrix:
        print("".join(row))


def transpose(rows: Sequence[Sequence[T]]) -> list[list[T]]:
    """Swap rows and columns; the first row sets the number of columns."""
    if not rows:
        raise ValueError("cannot transpose an empty sequence")
    width = len(rows[0])
    if any(len(row) < width for row in rows):
        raise ValueError("a row is shorter than the first row")
    return [list(column) for column in zip(*(row[:width] for row in rows))]


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _rectangular_lines(text: str) -> list[str]:
    lines = _lines(text)
    if not lines:
        raise ValueError("matrix input is empty")
    width = len(lines[0])
    for line in lines:
        if len(line) != width:
            raise ValueError(f"Inconsistent row lengths: {width} != {len(line)}")
    return lines


def parse_char_matrix(text: str) -> list[list[str]]:
    """Parse lines of equal length into a mutable matrix of characters."""
    return [list(line) for line in _rectangular_lines(text)]


def _digit(c: str) -> int:
    if c not in "0123456789" or len(c) != 1:
        raise ValueError(f"Invalid digit: {c}")
    return int(c)


def parse_int_matrix(text: str) -> list[list[int]]:
    """Parse lines of equal length made of decimal digits into a matrix of ints."""
    return [[_digit(c) for c in line] for line in _rectangular_lines(text)]