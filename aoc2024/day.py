"""Advent day numbers: a validated integer between 1 and 25."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import total_ordering
from typing import Iterator

FIRST_DAY = 1
LAST_DAY = 25
SERVER_UTC_OFFSET_HOURS = -5


class DayFromStrError(ValueError):
    """Raised when a value is not a valid day of advent."""

    def __init__(self, message: str = "expecting a day number between 1 and 25") -> None:
        super().__init__(message)


@total_ordering
@dataclass(frozen=True, eq=False)
class Day:
    """A day of advent; displays as a two digit number."""

    value: int

    def __post_init__(self) -> None:
        if (
            isinstance(self.value, bool)
            or not isinstance(self.value, int)
            or not FIRST_DAY <= self.value <= LAST_DAY
        ):
            raise DayFromStrError()

    @classmethod
    def parse(cls, text: str) -> Day:
        """Parse a day number such as ``"8"`` or ``"08"``."""
        digits = text[1:] if text.startswith("+") else text
        if not digits or any(c not in "0123456789" for c in digits):
            raise DayFromStrError()
        return cls(int(digits))

    @classmethod
    def today(cls) -> Day | None:
        """Return the current day if it is between the 1st and 25th of December."""
        now = datetime.now(timezone(timedelta(hours=SERVER_UTC_OFFSET_HOURS)))
        if now.month == 12 and now.day <= LAST_DAY:
            return cls(now.day)
        return None

    def __str__(self) -> str:
        return f"{self.value:02d}"

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __hash__(self) -> int:
        return hash(self.value)

    @staticmethod
    def _other_value(other: object) -> int | None:
        if isinstance(other, Day):
            return other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        value = self._other_value(other)
        if value is None:
            return NotImplemented
        return self.value == value

    def __lt__(self, other: object) -> bool:
        value = self._other_value(other)
        if value is None:
            return NotImplemented
        return self.value < value


def all_days() -> Iterator[Day]:
    """Yield every day of advent from the 1st to the 25th."""
    for number in range(FIRST_DAY, LAST_DAY + 1):
        yield Day(number)