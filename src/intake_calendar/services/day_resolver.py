"""Resolution of a single calendar day."""

from collections.abc import Mapping
from datetime import date

from intake_calendar.domain.goals import TargetCalculator, calculate_goal_kcal
from intake_calendar.domain.intake import DayRecord, DaySummary
from intake_calendar.domain.models import ActivityLevel, UserRecord
from intake_calendar.services.timeline import SnapshotTimeline


def resolve_day(  # noqa: PLR0913
    day: date,
    user: UserRecord,
    record: DayRecord | None,
    timeline: SnapshotTimeline,
    activity_levels: Mapping[int, ActivityLevel],
    calculate_target: TargetCalculator = calculate_goal_kcal,
) -> DaySummary:
    """Return the logged intake for a day, or the target in effect that day.

    Missing profile context yields a zero target instead of an error.
    """
    if record is not None:
        return DaySummary.from_record(record)

    goal_kcal = 0.0
    snapshot = timeline.effective_at(day)
    if snapshot is not None:
        activity_level = activity_levels.get(snapshot.activity_level_id)
        if activity_level is not None:
            goal_kcal = calculate_target(user, snapshot, activity_level)
    return DaySummary.from_target(goal_kcal, day)
