"""Effective-date lookups over a user's profile snapshot history."""

from bisect import bisect_right
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from intake_calendar.domain.models import ProfileSnapshot


@dataclass(frozen=True)
class SnapshotTimeline:
    """Snapshots ordered by effective date, one per date."""

    dates: tuple[date, ...]
    snapshots: tuple[ProfileSnapshot, ...]

    @classmethod
    def build(cls, snapshots: Iterable[ProfileSnapshot]) -> "SnapshotTimeline":
        """Build a timeline; a later snapshot replaces one with the same date."""
        by_date: dict[date, ProfileSnapshot] = {}
        for snapshot in snapshots:
            by_date[snapshot.effective_date] = snapshot
        ordered = sorted(by_date)
        return cls(
            dates=tuple(ordered),
            snapshots=tuple(by_date[day] for day in ordered),
        )

    def effective_at(self, day: date) -> ProfileSnapshot | None:
        """Return the snapshot in effect on a day, if any.

        That is the snapshot dated exactly on ``day`` or, failing that, the
        latest one dated before it.
        """
        index = bisect_right(self.dates, day) - 1
        if index < 0:
            return None
        return self.snapshots[index]

    def __len__(self) -> int:
        return len(self.dates)
