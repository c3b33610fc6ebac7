# aoc2024

Solutions to Advent of Code 2024 puzzles, with a command-line tool that runs
them, times them, and calls the external `aoc` program (aoc-cli) to fetch
puzzles and submit answers.

## Installation

```
pip install .
```

This installs the `aoc2024` command. Downloading puzzles, reading descriptions
and submitting answers need the separate `aoc` program (aoc-cli) on your
`PATH`, configured with your session as aoc-cli expects. If the `AOC_YEAR`
environment variable holds a year number, it is passed to aoc-cli as
`--year`.

## Puzzle data

All paths are relative to the directory the tool is run from:

- `data/inputs/DD.txt` – your puzzle input for day `DD`
- `data/examples/DD.txt` – example input (read by `aoc2024.files.read_file("examples", day)`)
- `data/puzzles/DD.md` – the puzzle description
- `data/timings.json` – stored benchmark results

Days are written as two digits (`01` … `25`); on the command line a plain
number such as `7` is accepted.

## Commands

Fetch the input and description of a day (written to `data/inputs/DD.txt`
and `data/puzzles/DD.md`, overwriting them):

```
aoc2024 download 1
```

Print a day's description in the terminal:

```
aoc2024 read 1
```

Solve a day. This runs `python -m aoc2024.solutions.dayDD` in a child
interpreter, which reads `data/inputs/DD.txt` and prints each part's answer
and run time:

```
aoc2024 solve 1
aoc2024 solve 1 --release
aoc2024 solve 1 --dhat
aoc2024 solve 1 --submit 2
```

`--release` starts the child with `python -O`; `--dhat` starts it with
`-X tracemalloc` instead. `--submit N` sends the answer of part `N` through
aoc-cli once it is computed.

Run every day in turn:

```
aoc2024 all
aoc2024 all --release
```

Benchmark solutions (each part is repeated for about a second, between 10 and
10,000 times):

```
aoc2024 time            # days not yet fully benchmarked in data/timings.json
aoc2024 time --all      # every day
aoc2024 time 5          # just day 5
aoc2024 time --store    # also save the results
```

`all` and `time` run a day only if `aoc2024/solutions/dayDD.py` exists under
the current directory, so run them from the project checkout; other days are
reported as "Not solved.". With `--store`, the new results are merged into
`data/timings.json` and a table is written into `README.md` between two
`<!--- benchmarking table --->` markers, which must already be in that file.

Unknown extra arguments produce a warning and are otherwise ignored.

A single solution can also be run directly, e.g.
`python -m aoc2024.solutions.day05`, optionally with `--time` to benchmark
it or `--submit N` to submit part `N`.

## Solutions

The `aoc2024.solutions` package holds modules `day01` to `day12`, `day15`
and `day17` for 2024, plus `day17_2023`, the crucible puzzle of 2023 day 17
(its `part_one` also prints the heat map). Each module has `part_one` and
`part_two`, taking the puzzle input as a string and returning the answer, or
`None` where a part is not solved (part two of `day17` and `day17_2023`).
`day17_2023` is not picked up by `all` or `time`.

## Library

- `aoc2024.day` – `Day`, a validated day number 1–25 (`Day.parse`,
  `Day.today`), and `all_days()`.
- `aoc2024.grid` – `Direction`, `Pos`, `get_adjacent_positions`,
  `parse_char_matrix`, `parse_int_matrix`, `transpose`, `print_matrix`.
- `aoc2024.timings` – `Timing` and `Timings`, read from and written to JSON.
- `aoc2024.readme_benchmarks` – writes the benchmark table into a README.
- `aoc2024.aoc_cli` – calls to the `aoc` program.
- `aoc2024.runner` and `aoc2024.run_multi` – running and timing solutions.

## What it does not do

There is no command to start a new day: create the solution module and the
input and example files yourself. There is no command that picks today's date
on its own; pass the day number.