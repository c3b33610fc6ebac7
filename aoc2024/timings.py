"""Benchmark timings per day, stored as JSON."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from aoc2024.day import Day, DayFromStrError

TIMINGS_FILE_PATH = "./data/timings.json"


class TimingsError(ValueError):
    """Raised when timings cannot be read from JSON."""


def _optional_part(json_obj: dict[str, Any], key: str) -> str | None:
    if key not in json_obj:
        raise TimingsError(f"Expected timing.{key} to be null or string.")
    value = json_obj[key]
    return value if isinstance(value, str) else None


@dataclass
class Timing:
    """Benchmark times for a single day."""

    day: Day
    part_1: str | None
    part_2: str | None
    total_nanos: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "day": str(self.day),
            "total_nanos": self.total_nanos,
            "part_1": self.part_1,
            "part_2": self.part_2,
        }

    @classmethod
    def from_dict(cls, value: Any) -> Timing:
        if not isinstance(value, dict):
            raise TimingsError("Expected timing to be a JSON object.")

        day_str = value.get("day")
        try:
            if not isinstance(day_str, str):
                raise DayFromStrError()
            day = Day.parse(day_str)
        except DayFromStrError:
            raise TimingsError("Expected timing.day to be a day number.") from None

        part_1 = _optional_part(value, "part_1")
        part_2 = _optional_part(value, "part_2")

        total = value.get("total_nanos")
        if isinstance(total, bool) or not isinstance(total, (int, float)):
            raise TimingsError("Expected timing.total_nanos to be a number.")

        return cls(day=day, part_1=part_1, part_2=part_2, total_nanos=float(total))


@dataclass
class Timings:
    """Benchmark times for a set of days."""

    data: list[Timing] = field(default_factory=list)

    def to_json(self) -> str:
        return json.dumps({"data": [t.to_dict() for t in self.data]}, indent=2)

    @classmethod
    def from_json(cls, text: str) -> Timings:
        try:
            document = json.loads(text)
        except json.JSONDecodeError:
            raise TimingsError("not valid JSON file.") from None
        if not isinstance(document, dict):
            raise TimingsError("expected JSON document to be an object.")
        if "data" not in document:
            raise TimingsError("expected JSON document to have key `data`.")
        entries = document["data"]
        if not isinstance(entries, list):
            raise TimingsError("expected `json.data` to be an array.")
        return cls(data=[Timing.from_dict(entry) for entry in entries])

    def store_file(self, path: str | Path = TIMINGS_FILE_PATH) -> None:
        """Write the timings to a JSON file."""
        Path(path).write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def read_from_file(cls, path: str | Path = TIMINGS_FILE_PATH) -> Timings:
        """Read timings from a JSON file; empty timings if it is missing or invalid."""
        try:
            return cls.from_json(Path(path).read_text(encoding="utf-8"))
        except (OSError, TimingsError) as err:
            print(err, file=sys.stderr)
            return cls()

    def merge(self, new: Timings) -> Timings:
        """Merge two sets of timings; entries of ``new`` win over ``self``."""
        data = list(new.data)
        new_days = {t.day for t in data}
        data.extend(t for t in self.data if t.day not in new_days)
        data.sort(key=lambda t: t.day)
        return Timings(data=data)

    def total_millis(self) -> float:
        return sum(t.total_nanos for t in self.data) / 1_000_000

    def is_day_complete(self, day: Day) -> bool:
        return any(
            t.day == day and t.part_1 is not None and t.part_2 is not None
            for t in self.data
        )