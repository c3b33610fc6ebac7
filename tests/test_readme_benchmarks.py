import pytest

from aoc2024.day import Day
from aoc2024.readme_benchmarks import (
    MARKER,
    ReadmeError,
    TablePosition,
    construct_table,
    get_path_for_bin,
    locate_table,
    update,
    update_content,
)
from aoc2024.timings import Timing, Timings


def mock_timings():
    return Timings(
        data=[
            Timing(Day(1), "10ms", "20ms", 3e10),
            Timing(Day(2), "30ms", "40ms", 7e10),
            Timing(Day(4), "40ms", "50ms", 9e10),
        ]
    )


def test_errors_if_marker_not_present():
    with pytest.raises(ReadmeError):
        update_content("# readme", mock_timings(), 190.0)


def test_errors_if_too_many_markers_present():
    with pytest.raises(ReadmeError, match="too many"):
        update_content(f"{MARKER} {MARKER} {MARKER}", mock_timings(), 190.0)


def test_updates_empty_benchmarks():
    text = update_content(f"foo\nbar\n{MARKER}{MARKER}\nbaz", mock_timings(), 190.0)
    assert "## Benchmarks" in text


def test_updates_existing_benchmarks():
    text = update_content(f"foo\nbar\n{MARKER}{MARKER}\nbaz", mock_timings(), 190.0)
    text = update_content(text, mock_timings(), 190.0)
    assert text.count(MARKER) == 2
    assert text.count("## Benchmarks") == 1


def test_format_benchmarks():
    text = update_content(f"foo\nbar\n{MARKER}\n{MARKER}\nbaz", mock_timings(), 190.0)
    expected = "\n".join(
        [
            "foo",
            "bar",
            "<!--- benchmarking table --->",
            "## Benchmarks",
            "",
            "| Day | Part 1 | Part 2 |",
            "| :---: | :---: | :---:  |",
            "| [Day 1](./aoc2024/solutions/day01.py) | `10ms` | `20ms` |",
            "| [Day 2](./aoc2024/solutions/day02.py) | `30ms` | `40ms` |",
            "| [Day 4](./aoc2024/solutions/day04.py) | `40ms` | `50ms` |",
            "",
            "**Total: 190.00ms**",
            "<!--- benchmarking table --->",
            "baz",
        ]
    )
    assert text == expected


def test_locate_table_positions():
    text = f"ab{MARKER}cd{MARKER}ef"
    assert locate_table(text) == TablePosition(2, 2 + 2 * len(MARKER) + 2)


def test_missing_part_shows_dash():
    timings = Timings(data=[Timing(Day(3), "1ms", None, 0.0)])
    table = construct_table("##", timings, 0.0)
    assert "| [Day 3](./aoc2024/solutions/day03.py) | `1ms` | `-` |" in table.splitlines()


def test_get_path_for_bin():
    assert get_path_for_bin(Day(7)) == "./aoc2024/solutions/day07.py"


def test_update_rewrites_file(tmp_path):
    readme = tmp_path / "README.md"
    readme.write_text(f"intro\n{MARKER}{MARKER}\n", encoding="utf-8")
    update(mock_timings(), readme)
    content = readme.read_text(encoding="utf-8")
    assert "**Total: 190000.00ms**" in content
    assert content.startswith("intro\n")
    assert content.count(MARKER) == 2