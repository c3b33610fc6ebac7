"""Wrapper around the ``aoc`` command-line tool."""

from __future__ import annotations

import os
import re
import subprocess

from aoc2024.day import Day

_U16_MAX = 65535


class AocCommandError(Exception):
    """Base class for failures of the ``aoc`` tool."""


class CommandNotFound(AocCommandError):
    def __init__(self) -> None:
        super().__init__("aoc-cli is not present in environment.")


class CommandNotCallable(AocCommandError):
    def __init__(self) -> None:
        super().__init__("aoc-cli could not be called.")


class BadExitStatus(AocCommandError):
    def __init__(self, output: subprocess.CompletedProcess) -> None:
        super().__init__("aoc-cli exited with a non-zero status.")
        self.output = output


def check() -> None:
    """Raise CommandNotFound unless the ``aoc`` tool can be started."""
    try:
        subprocess.run(["aoc", "-V"], capture_output=True, check=False)
    except OSError:
        raise CommandNotFound() from None


def read(day: Day) -> subprocess.CompletedProcess:
    args = build_args(
        "read",
        ["--description-only", "--puzzle-file", get_puzzle_path(day)],
        day,
    )
    return _call_aoc_cli(args)


def download(day: Day) -> subprocess.CompletedProcess:
    input_path = get_input_path(day)
    puzzle_path = get_puzzle_path(day)
    args = build_args(
        "download",
        ["--overwrite", "--input-file", input_path, "--puzzle-file", puzzle_path],
        day,
    )
    output = _call_aoc_cli(args)
    print("---")
    print(f'🎄 Successfully wrote input to "{input_path}".')
    print(f'🎄 Successfully wrote puzzle to "{puzzle_path}".')
    return output


def submit(day: Day, part: int, result: str) -> subprocess.CompletedProcess:
    # The tool expects part and answer after the subcommand.
    args = build_args("submit", [], day)
    args.extend([str(part), str(result)])
    return _call_aoc_cli(args)


def get_input_path(day: Day) -> str:
    return f"data/inputs/{day}.txt"


def get_puzzle_path(day: Day) -> str:
    return f"data/puzzles/{day}.md"


def get_year() -> int | None:
    """The year from ``AOC_YEAR``, or None if unset or not a valid year number."""
    raw = os.environ.get("AOC_YEAR")
    if raw is None or not re.fullmatch(r"\+?[0-9]+", raw):
        return None
    year = int(raw)
    return year if year <= _U16_MAX else None


def build_args(command: str, args: list[str], day: Day) -> list[str]:
    cmd_args = list(args)
    year = get_year()
    if year is not None:
        cmd_args.extend(["--year", str(year)])
    cmd_args.extend(["--day", str(day), command])
    return cmd_args


def _call_aoc_cli(args: list[str]) -> subprocess.CompletedProcess:
    try:
        completed = subprocess.run(["aoc", *args], check=False)
    except OSError:
        raise CommandNotCallable() from None
    if completed.returncode != 0:
        raise BadExitStatus(completed)
    return completed