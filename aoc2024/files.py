"""Reading puzzle data files from the working directory."""

from __future__ import annotations

from pathlib import Path

from aoc2024.day import Day


def _data_path(folder: str, name: str) -> Path:
    return Path.cwd() / "data" / folder / name


def read_file(folder: str, day: Day) -> str:
    """Read ``data/<folder>/<day>.txt`` to a string."""
    return _data_path(folder, f"{day}.txt").read_text(encoding="utf-8")


def read_file_part(folder: str, day: Day, part: int) -> str:
    """Read ``data/<folder>/<day>-<part>.txt`` to a string, e.g. ``01-2.txt``."""
    return _data_path(folder, f"{day}-{part}.txt").read_text(encoding="utf-8")