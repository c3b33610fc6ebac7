"""Running several days' solutions as child processes and collecting their timings."""

from __future__ import annotations

import subprocess
import sys
import threading
from pathlib import Path
from typing import IO, Collection, Sequence

from aoc2024.day import Day, all_days
from aoc2024.readme_benchmarks import get_path_for_bin
from aoc2024.runner import ANSI_BOLD, ANSI_ITALIC, ANSI_RESET
from aoc2024.timings import Timing, Timings


def run_multi(
    days_to_run: Collection[Day], is_release: bool, is_timed: bool
) -> Timings | None:
    """Run the given days in order; return their timings when ``is_timed``."""
    timings: list[Timing] = []
    need_space = False

    for day in all_days():
        if day not in days_to_run:
            continue
        if need_space:
            print()
        need_space = True

        print(f"{ANSI_BOLD}Day {day}{ANSI_RESET}")
        print("------")

        output = run_solution(day, is_timed, is_release)
        if not output:
            print("Not solved.")
        else:
            timings.append(parse_exec_time(output, day))

    if not is_timed:
        return None

    result = Timings(data=timings)
    total_millis = result.total_millis()
    print(f"\n{ANSI_BOLD}Total (Run):{ANSI_RESET} {ANSI_ITALIC}{total_millis:.2f}ms{ANSI_RESET}")
    return result


def _forward(stream: IO[str], target: IO[str]) -> None:
    for line in stream:
        print(line.rstrip("\r\n"), file=target)


def run_solution(day: Day, is_timed: bool, is_release: bool) -> list[str]:
    """Run a day's solution module, echoing its output and returning its stdout lines."""
    if not Path(get_path_for_bin(day)).exists():
        return []

    cmd = [sys.executable]
    if is_release:
        cmd.append("-O")
    cmd.extend(["-m", f"aoc2024.solutions.day{day}"])
    if is_timed:
        cmd.append("--time")

    process = subprocess.Popen(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
    )
    if process.stdout is None or process.stderr is None:
        raise BrokenPipeError("child process has no output pipes")

    forwarder = threading.Thread(target=_forward, args=(process.stderr, sys.stderr))
    forwarder.start()

    output = []
    for raw in process.stdout:
        line = raw.rstrip("\r\n")
        print(line)
        output.append(line)

    forwarder.join()
    process.wait()
    return output


def parse_exec_time(output: Sequence[str], day: Day) -> Timing:
    """Collect the per-part timings printed by a benched solution."""
    timing = Timing(day=day, part_1=None, part_2=None, total_nanos=0.0)

    for line in output:
        if " samples)" not in line:
            continue
        parsed = parse_time(line)
        if parsed is None:
            print(f"Could not parse timings from line: {line}", file=sys.stderr)
            continue
        timing_str, nanos = parsed
        part = line.split(":", 1)[0]
        if "Part 1" in part:
            timing.part_1 = timing_str
        elif "Part 2" in part:
            timing.part_2 = timing_str
        timing.total_nanos += nanos

    return timing


def _parse_float(text: str) -> float | None:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _scaled(text: str, postfix: str, factor: float) -> float | None:
    value = _parse_float(text.split(postfix, 1)[0])
    return None if value is None else value * factor


def parse_time(line: str) -> tuple[str, float] | None:
    """Extract the timing text and its value in nanoseconds from a result line."""
    str_timing = line.split(" samples)", 1)[0].split("(")[-1].split("@", 1)[0].strip()

    if "ns" in str_timing:
        nanos = _scaled(str_timing, "ns", 1.0)
    elif "µs" in str_timing:
        nanos = _scaled(str_timing, "µs", 1_000.0)
    elif "ms" in str_timing:
        nanos = _scaled(str_timing, "ms", 1_000_000.0)
    else:
        nanos = _scaled(str_timing, "s", 1_000_000_000.0)

    if nanos is None:
        return None
    return str_timing, nanos