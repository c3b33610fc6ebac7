"""Command line for downloading, reading, solving and timing puzzles."""

from __future__ import annotations

import argparse
import re
import subprocess
import sys
from typing import Sequence

from aoc2024 import aoc_cli, readme_benchmarks
from aoc2024.day import Day, DayFromStrError, all_days
from aoc2024.run_multi import run_multi
from aoc2024.timings import Timings

COMMANDS = ("all", "time", "download", "read", "solve")

_AOC_MISSING = (
    'command "aoc" not found or not callable. '
    'Try running "cargo install aoc-cli" to install it.'
)


def _day(text: str) -> Day:
    try:
        return Day.parse(text)
    except DayFromStrError as err:
        raise argparse.ArgumentTypeError(str(err)) from None


def _part(text: str) -> int:
    if not re.fullmatch(r"\+?[0-9]+", text) or int(text) > 255:
        raise argparse.ArgumentTypeError(f"invalid part number: {text}")
    return int(text)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aoc2024")
    commands = parser.add_subparsers(dest="command")

    run_all = commands.add_parser("all", help="run every day")
    run_all.add_argument("--release", action="store_true")

    timing = commands.add_parser("time", help="benchmark solutions")
    timing.add_argument("--all", dest="run_all", action="store_true")
    timing.add_argument("--store", action="store_true")
    timing.add_argument("day", nargs="?", type=_day, default=None)

    download = commands.add_parser("download", help="download input and puzzle")
    download.add_argument("day", type=_day)

    read = commands.add_parser("read", help="print the puzzle description")
    read.add_argument("day", type=_day)

    solve = commands.add_parser("solve", help="run one day's solution")
    solve.add_argument("day", type=_day)
    solve.add_argument("--release", action="store_true")
    solve.add_argument("--dhat", action="store_true")
    solve.add_argument("--submit", type=_part, default=None)

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line; unknown extra arguments only produce a warning."""
    args = list(sys.argv[1:] if argv is None else argv)

    if not args or args[0].startswith("-"):
        print("No command specified.", file=sys.stderr)
        raise SystemExit(1)
    if args[0] not in COMMANDS:
        print(f"Unknown command: {args[0]}", file=sys.stderr)
        raise SystemExit(1)

    namespace, remaining = _build_parser().parse_known_args(args)
    if remaining:
        print(f"Warning: unknown argument(s): {remaining}.", file=sys.stderr)
    return namespace


def _require_aoc_cli() -> None:
    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        print(_AOC_MISSING, file=sys.stderr)
        raise SystemExit(1) from None


def handle_all(is_release: bool) -> None:
    run_multi(set(all_days()), is_release, False)


def handle_download(day: Day) -> None:
    _require_aoc_cli()
    try:
        aoc_cli.download(day)
    except aoc_cli.AocCommandError as err:
        print(f"failed to call aoc-cli: {err}", file=sys.stderr)
        raise SystemExit(1) from None


def handle_read(day: Day) -> None:
    _require_aoc_cli()
    try:
        aoc_cli.read(day)
    except aoc_cli.AocCommandError as err:
        print(f"failed to call aoc-cli: {err}", file=sys.stderr)
        raise SystemExit(1) from None


def handle_solve(day: Day, release: bool, dhat: bool, submit_part: int | None) -> int:
    """Run a day's solution in a child interpreter; return its exit status."""
    cmd = [sys.executable]
    if dhat:
        cmd.extend(["-X", "tracemalloc"])
    elif release:
        cmd.append("-O")
    cmd.extend(["-m", f"aoc2024.solutions.day{day}"])
    if submit_part is not None:
        cmd.extend(["--submit", str(submit_part)])
    return subprocess.run(cmd, check=False).returncode


def handle_time(day: Day | None, run_all: bool, store: bool) -> None:
    stored_timings = Timings.read_from_file()

    if day is not None:
        days_to_run = {day}
    elif run_all:
        days_to_run = set(all_days())
    else:
        days_to_run = {d for d in all_days() if not stored_timings.is_day_complete(d)}

    timings = run_multi(days_to_run, True, True) or Timings()

    if store:
        merged = stored_timings.merge(timings)
        merged.store_file()

        print()
        try:
            readme_benchmarks.update(merged)
        except (readme_benchmarks.ReadmeError, OSError):
            print("Failed to store updated benchmarks.", file=sys.stderr)
        else:
            print("Stored updated benchmarks.")


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    if args.command == "all":
        handle_all(args.release)
    elif args.command == "time":
        handle_time(args.day, args.run_all, args.store)
    elif args.command == "download":
        handle_download(args.day)
    elif args.command == "read":
        handle_read(args.day)
    elif args.command == "solve":
        handle_solve(args.day, args.release, args.dhat, args.submit)


if __name__ == "__main__":
    main()