"""Day 9: compacting an amphipod's disk map."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from aoc2024.day import Day
from aoc2024.runner import solution_main

DAY = Day(9)

Block = Optional[int]


def parse_nums(text: str) -> list[int]:
    """Read a dense disk map of decimal digits."""
    digits = text.rstrip("\r\n")
    nums = []
    for c in digits:
        if c not in "0123456789":
            raise ValueError(f"Invalid digit: {c!r}")
        nums.append(int(c))
    return nums


def _chunks(nums: Sequence[int]) -> Iterator[tuple[int, int]]:
    """Pairs of (file size, free size); a trailing file has no free space."""
    for start in range(0, len(nums), 2):
        pair = nums[start : start + 2]
        yield pair[0], (pair[1] if len(pair) > 1 else 0)


def make_fragments(nums: Sequence[int]) -> list[Block]:
    """Expand a disk map into blocks: a file id, or None for free space."""
    blocks: list[Block] = []
    for file_id, (file_size, free_size) in enumerate(_chunks(nums)):
        blocks.extend([file_id] * file_size)
        blocks.extend([None] * free_size)
    return blocks


def compact(fragments: Iterable[Block], total_size: int) -> Iterator[int]:
    """Move file blocks one at a time from the end into the leftmost free space."""
    blocks = list(fragments)
    backwards = iter(
        (total_size - index, file_id)
        for index, file_id in enumerate(reversed(blocks))
        if file_id is not None
    )
    next_back = next(backwards, None)

    for pos, file_id in enumerate(blocks):
        if next_back is None or next_back[0] <= pos:
            return
        if file_id is not None:
            yield file_id
        else:
            yield next_back[1]
            next_back = next(backwards, None)


def calc_checksum(compacted: Iterable[Block]) -> int:
    """Sum of position times file id over all occupied blocks."""
    return sum(pos * file_id for pos, file_id in enumerate(compacted) if file_id is not None)


def part_one(puzzle_input: str) -> int:
    nums = parse_nums(puzzle_input)
    fragments = make_fragments(nums)
    return calc_checksum(compact(fragments, sum(nums)))


def part_two(puzzle_input: str) -> int:
    nums = parse_nums(puzzle_input)

    files: list[tuple[int, int, int]] = []
    free: list[tuple[int, int]] = []
    position = 0
    for file_id, (file_size, free_size) in enumerate(_chunks(nums)):
        files.append((file_id, position, file_size))
        position += file_size
        if free_size:
            free.append((position, free_size))
        position += free_size

    checksum = 0
    for file_id, start, size in reversed(files):
        if size == 0:
            continue
        new_start = start
        for index, (span_pos, span_size) in enumerate(free):
            if span_pos >= start:
                break
            if span_size >= size:
                new_start = span_pos
                if span_size > size:
                    free[index] = (span_pos + size, span_size - size)
                else:
                    del free[index]
                break
        checksum += file_id * sum(range(new_start, new_start + size))
    return checksum


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()