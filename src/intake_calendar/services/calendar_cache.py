"""Per-month cache of calendar day summaries."""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from pydantic import TypeAdapter, ValidationError

from intake_calendar.domain.calendar import YearMonth
from intake_calendar.domain.intake import DaySummary
from intake_calendar.services.cache import HashCache

CALENDAR_INTAKE_KEY = "calendar:intake:{user_id}:{year_month}"
CALENDAR_TTL = timedelta(days=7)

_logger = logging.getLogger(__name__)
_summary_adapter = TypeAdapter(DaySummary)


@dataclass
class IntakeCalendarCache:
    """Stores day summaries as fields of one hash per user and month.

    Every read or write pushes the whole month's expiry out to the full TTL.
    """

    cache: HashCache
    ttl: timedelta = CALENDAR_TTL

    def get_cached_month(
        self, user_id: UUID, year_month: YearMonth
    ) -> dict[date, DaySummary]:
        """Return whichever days of the month are cached."""
        key = build_key(user_id, year_month)
        entries = self.cache.get_all(key)
        result: dict[date, DaySummary] = {}
        for field, raw in entries.items():
            decoded = _decode_field(year_month, field, raw)
            if decoded is None:
                _logger.warning(
                    "Skipping undecodable calendar cache field: key=%s field=%s",
                    key,
                    field,
                )
                continue
            result[decoded.day] = decoded
        self.cache.expire(key, self._ttl_seconds)
        return result

    def put_day(
        self, user_id: UUID, year_month: YearMonth, day: date, summary: DaySummary
    ) -> None:
        """Store one day's summary and refresh the month's TTL."""
        if not year_month.contains(day):
            raise ValueError(f"{day} is not in {year_month}")
        key = build_key(user_id, year_month)
        value = _summary_adapter.dump_json(summary).decode()
        self.cache.set_field(key, day.isoformat(), value)
        self.cache.expire(key, self._ttl_seconds)

    @property
    def _ttl_seconds(self) -> int:
        return int(self.ttl.total_seconds())


def build_key(user_id: UUID, year_month: YearMonth) -> str:
    """Return the cache key shared by every day of a month."""
    return CALENDAR_INTAKE_KEY.format(user_id=user_id, year_month=year_month)


def _decode_field(year_month: YearMonth, field: str, raw: str) -> DaySummary | None:
    try:
        day = date.fromisoformat(field)
        summary = _summary_adapter.validate_json(raw)
    except (ValueError, ValidationError):
        return None
    if not year_month.contains(day) or summary.day != day:
        return None
    return summary
