import json
import subprocess
from unittest import mock

import pytest

from aoc2024.cli import (
    handle_all,
    handle_download,
    handle_read,
    handle_solve,
    handle_time,
    main,
    parse_args,
)
from aoc2024.day import Day
from aoc2024.readme_benchmarks import MARKER


def _completed(returncode=0):
    return subprocess.CompletedProcess(args=[], returncode=returncode)


def test_parse_solve():
    args = parse_args(["solve", "5", "--release", "--submit", "2"])
    assert args.command == "solve"
    assert args.day == Day(5)
    assert args.release is True
    assert args.dhat is False
    assert args.submit == 2


def test_parse_time_flags():
    args = parse_args(["time", "--all", "--store"])
    assert args.day is None
    assert args.run_all is True
    assert args.store is True


def test_parse_time_with_day():
    args = parse_args(["time", "7"])
    assert args.day == Day(7)
    assert args.run_all is False


def test_parse_no_command(capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args([])
    assert exc.value.code == 1
    assert "No command specified." in capsys.readouterr().err


def test_parse_unknown_command(capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args(["frobnicate"])
    assert exc.value.code == 1
    assert "Unknown command: frobnicate" in capsys.readouterr().err


def test_parse_invalid_day():
    with pytest.raises(SystemExit) as exc:
        parse_args(["download", "26"])
    assert exc.value.code != 0


def test_parse_warns_on_extra_arguments(capsys):
    args = parse_args(["read", "3", "--bogus"])
    assert args.day == Day(3)
    assert "Warning: unknown argument(s)" in capsys.readouterr().err


def test_handle_solve_release_and_submit():
    with mock.patch("aoc2024.cli.subprocess.run", return_value=_completed()) as run:
        status = handle_solve(Day(5), True, False, 2)
    cmd = run.call_args.args[0]
    assert status == 0
    assert "-O" in cmd
    assert cmd[cmd.index("-m") + 1] == "aoc2024.solutions.day05"
    assert cmd[-2:] == ["--submit", "2"]


def test_handle_solve_dhat_ignores_release():
    with mock.patch("aoc2024.cli.subprocess.run", return_value=_completed()) as run:
        status = handle_solve(Day(1), True, True, None)
    cmd = run.call_args.args[0]
    assert status == 0
    assert "-O" not in cmd
    assert "--submit" not in cmd
    assert "tracemalloc" in cmd


def test_main_dispatches_solve():
    with mock.patch(
        "aoc2024.cli.subprocess.run", side_effect=RuntimeError("child failed")
    ) as run:
        with pytest.raises(RuntimeError, match="child failed"):
            main(["solve", "3"])
    cmd = run.call_args.args[0]
    assert cmd[cmd.index("-m") + 1] == "aoc2024.solutions.day03"


@pytest.mark.parametrize("handler", [handle_download, handle_read])
def test_handlers_exit_without_aoc_tool(handler, capsys):
    with mock.patch("aoc2024.aoc_cli.subprocess.run", side_effect=OSError):
        with pytest.raises(SystemExit) as exc:
            handler(Day(1))
    assert exc.value.code == 1
    assert 'command "aoc" not found' in capsys.readouterr().err


def test_handle_all_without_solutions(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    handle_all(False)
    out = capsys.readouterr().out
    assert out.count("Not solved.") == 25


def test_handle_time_store_without_readme(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "data").mkdir()
    handle_time(Day(1), False, True)
    stored = json.loads((tmp_path / "data" / "timings.json").read_text())
    assert stored == {"data": []}
    assert "Failed to store updated benchmarks." in capsys.readouterr().err


def test_handle_time_store_updates_readme(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "data").mkdir()
    (tmp_path / "README.md").write_text(f"intro\n{MARKER}{MARKER}\n")
    handle_time(Day(2), False, True)
    assert "## Benchmarks" in (tmp_path / "README.md").read_text()
    assert "Stored updated benchmarks." in capsys.readouterr().out