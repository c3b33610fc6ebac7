"""Advent of Code 2024 solutions with a runner, benchmarking and aoc-cli helpers."""

__version__ = "0.1.0"