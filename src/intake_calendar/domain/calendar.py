"""Calendar month helpers."""

import calendar
import re
from dataclasses import dataclass
from datetime import date

from intake_calendar.domain.errors import IllegalDateFormatError

_YEAR_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")
_DAY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DECEMBER = 12


@dataclass(frozen=True, order=True)
class YearMonth:
    """A calendar month of a specific year."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= DECEMBER:
            raise ValueError(f"month must be in 1..12, got {self.month}")

    @classmethod
    def parse(cls, raw: str) -> "YearMonth":
        """Parse a strict YYYY-MM string."""
        match = _YEAR_MONTH_PATTERN.match(raw.strip())
        if match is None:
            raise IllegalDateFormatError(raw, "YYYY-MM")
        try:
            return cls(year=int(match.group(1)), month=int(match.group(2)))
        except ValueError as exc:
            raise IllegalDateFormatError(raw, "YYYY-MM") from exc

    @classmethod
    def from_date(cls, day: date) -> "YearMonth":
        """Return the month a date belongs to."""
        return cls(year=day.year, month=day.month)

    def length_of_month(self) -> int:
        """Return the number of days in the month."""
        return calendar.monthrange(self.year, self.month)[1]

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def last_day(self) -> date:
        return date(self.year, self.month, self.length_of_month())

    def days(self) -> list[date]:
        """Return every date of the month in ascending order."""
        return [
            date(self.year, self.month, day)
            for day in range(1, self.length_of_month() + 1)
        ]

    def contains(self, day: date) -> bool:
        return day.year == self.year and day.month == self.month

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


def parse_day(raw: str) -> date:
    """Parse a strict YYYY-MM-DD string."""
    cleaned = raw.strip()
    if not _DAY_PATTERN.match(cleaned):
        raise IllegalDateFormatError(raw, "YYYY-MM-DD")
    try:
        return date.fromisoformat(cleaned)
    except ValueError as exc:
        raise IllegalDateFormatError(raw, "YYYY-MM-DD") from exc
