"""Update the benchmark table in the README with timing information."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from aoc2024.day import Day
from aoc2024.timings import Timings

MARKER = "<!--- benchmarking table --->"


class ReadmeError(Exception):
    """Raised when the README's benchmark table cannot be located."""


@dataclass(frozen=True)
class TablePosition:
    pos_start: int
    pos_end: int


def get_path_for_bin(day: Day) -> str:
    return f"./aoc2024/solutions/day{day}.py"


def locate_table(readme: str) -> TablePosition:
    matches = [m.start() for m in re.finditer(re.escape(MARKER), readme)]
    if len(matches) > 2:
        raise ReadmeError("too many occurrences of marker in README.")
    if not matches:
        raise ReadmeError("Could not find table start position.")
    return TablePosition(pos_start=matches[0], pos_end=matches[-1] + len(MARKER))


def construct_table(prefix: str, timings: Timings, total_millis: float) -> str:
    lines = [
        MARKER,
        f"{prefix} Benchmarks",
        "",
        "| Day | Part 1 | Part 2 |",
        "| :---: | :---: | :---:  |",
    ]
    lines.extend(
        f"| [Day {timing.day.value}]({get_path_for_bin(timing.day)}) "
        f"| `{timing.part_1 or '-'}` | `{timing.part_2 or '-'}` |"
        for timing in timings.data
    )
    lines.extend(["", f"**Total: {total_millis:.2f}ms**", MARKER])
    return "\n".join(lines)


def update_content(text: str, timings: Timings, total_millis: float) -> str:
    """Return ``text`` with its benchmark table replaced."""
    position = locate_table(text)
    table = construct_table("##", timings, total_millis)
    return text[: position.pos_start] + table + text[position.pos_end :]


def update(timings: Timings, path: str | Path = "README.md") -> None:
    """Rewrite the benchmark table of the README at ``path``."""
    readme_path = Path(path)
    readme = readme_path.read_bytes().decode("utf-8", errors="replace")
    readme = update_content(readme, timings, timings.total_millis())
    readme_path.write_text(readme, encoding="utf-8")