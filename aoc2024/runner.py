"""Running and timing solution functions."""

from __future__ import annotations

import re
import subprocess
import sys
import time
from typing import Any, Callable, Sequence, TypeVar

from aoc2024 import aoc_cli
from aoc2024.day import Day
from aoc2024.files import read_file

ANSI_ITALIC = "\x1b[3m"
ANSI_BOLD = "\x1b[1m"
ANSI_RESET = "\x1b[0m"

_SUBMIT_USAGE = "Unexpected command-line input. Format: solve 1 --submit 1"
_NANOS_PER_SECOND = 1_000_000_000

I = TypeVar("I")
T = TypeVar("T")


def run_part(
    func: Callable[[Any], Any],
    puzzle_input: Any,
    day: Day,
    part: int,
    argv: Sequence[str] | None = None,
) -> None:
    """Run one part, print its result and time, and submit it if asked to."""
    args = list(sys.argv[1:] if argv is None else argv)
    part_str = f"Part {part}"

    result, duration, samples = run_timed(
        func,
        puzzle_input,
        lambda r: print_result(r, part_str, ""),
        "--time" in args,
    )
    print_result(result, part_str, format_duration(duration, samples))

    if result is not None:
        try:
            submit_result(result, day, part, args)
        except aoc_cli.AocCommandError as err:
            print(err, file=sys.stderr)


def run_timed(
    func: Callable[[I], T],
    puzzle_input: I,
    hook: Callable[[T], Any],
    timed: bool = False,
) -> tuple[T, int, int]:
    """Run ``func`` once, then bench it if ``timed``; return (result, nanos, samples)."""
    start = time.perf_counter_ns()
    result = func(puzzle_input)
    base_time = time.perf_counter_ns() - start

    hook(result)

    if timed:
        duration, samples = bench(func, puzzle_input, base_time)
    else:
        duration, samples = base_time, 1
    return result, duration, samples


def bench(func: Callable[[I], Any], puzzle_input: I, base_time: int) -> tuple[int, int]:
    """Run ``func`` repeatedly for about a second; return (average nanos, iterations)."""
    print(f" > {ANSI_ITALIC}benching{ANSI_RESET}", end="", flush=True)

    iterations = min(max(_NANOS_PER_SECOND // max(base_time, 10), 10), 10_000)
    timers = []
    for _ in range(iterations):
        start = time.perf_counter_ns()
        func(puzzle_input)
        timers.append(time.perf_counter_ns() - start)

    return sum(timers) // len(timers), iterations


def _format_nanos(nanos: int) -> str:
    if nanos >= 1_000_000_000:
        divisor, unit = 1_000_000_000, "s"
    elif nanos >= 1_000_000:
        divisor, unit = 1_000_000, "ms"
    elif nanos >= 1_000:
        divisor, unit = 1_000, "µs"
    else:
        divisor, unit = 1, "ns"
    tenths = (nanos * 10 + divisor // 2) // divisor
    return f"{tenths // 10}.{tenths % 10}{unit}"


def format_duration(duration: int, samples: int) -> str:
    """Format a duration in nanoseconds, with the sample count when benched."""
    text = _format_nanos(duration)
    if samples == 1:
        return f" ({text})"
    return f" ({text} @ {samples} samples)"


def print_result(result: Any, part: str, duration_str: str) -> None:
    """Print a result; an empty ``duration_str`` marks an intermediate line."""
    intermediate = not duration_str

    if result is None:
        if intermediate:
            print(f"{part}: ✖", end="", flush=True)
        else:
            print("\r", end="")
            print(f"{part}: ✖             ")
        return

    text = str(result)
    if "\n" in text:
        line = f"{part}: ▼ {duration_str}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print("\r", end="")
            print(line)
            print(text)
    else:
        line = f"{part}: {ANSI_BOLD}{text}{ANSI_RESET}{duration_str}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print("\r", end="")
            print(line)


def _exit_with(message: str) -> None:
    print(message, file=sys.stderr)
    raise SystemExit(1)


def submit_result(
    result: Any, day: Day, part: int, argv: Sequence[str] | None = None
) -> subprocess.CompletedProcess | None:
    """Submit ``result`` through the aoc tool if ``--submit <part>`` was given for this part."""
    args = list(sys.argv[1:] if argv is None else argv)

    if "--submit" not in args:
        return None

    if len(args) < 2:
        _exit_with(_SUBMIT_USAGE)

    part_index = args.index("--submit") + 1
    if part_index >= len(args) or not re.fullmatch(r"\+?[0-9]+", args[part_index]):
        _exit_with(_SUBMIT_USAGE)
    part_submit = int(args[part_index])
    if part_submit > 255:
        _exit_with(_SUBMIT_USAGE)

    if part_submit != part:
        return None

    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        _exit_with(
            'command "aoc" not found or not callable. '
            'Try running "cargo install aoc-cli" to install it.'
        )

    print("Submitting result via aoc-cli...")
    return aoc_cli.submit(day, part, str(result))


def solution_main(
    day: Day,
    part_one: Callable[[str], Any] | None = None,
    part_two: Callable[[str], Any] | None = None,
    argv: Sequence[str] | None = None,
) -> None:
    """Read the day's input and run the given parts on it."""
    args = list(sys.argv[1:] if argv is None else argv)
    puzzle_input = read_file("inputs", day)
    for part, func in ((1, part_one), (2, part_two)):
        if func is not None:
            run_part(func, puzzle_input, day, part, args)