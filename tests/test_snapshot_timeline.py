"""Tests for snapshot timeline lookups and day resolution."""

from datetime import date
from uuid import uuid4

from intake_calendar.domain.intake import DaySummary
from intake_calendar.services.day_resolver import resolve_day
from intake_calendar.services.timeline import SnapshotTimeline
from tests.conftest import MODERATE, make_record, make_snapshot


def test_floor_lookup_returns_latest_earlier_snapshot() -> None:
    user_id = uuid4()
    early = make_snapshot(user_id, date(2025, 7, 1), snapshot_id=1)
    late = make_snapshot(user_id, date(2025, 7, 15), snapshot_id=2)
    timeline = SnapshotTimeline.build([late, early])

    assert timeline.effective_at(date(2025, 7, 10)) == early
    assert timeline.effective_at(date(2025, 7, 1)) == early
    assert timeline.effective_at(date(2025, 7, 15)) == late
    assert timeline.effective_at(date(2025, 8, 1)) == late
    assert timeline.effective_at(date(2025, 6, 30)) is None


def test_empty_timeline_has_no_snapshot() -> None:
    timeline = SnapshotTimeline.build([])

    assert len(timeline) == 0
    assert timeline.effective_at(date(2025, 7, 1)) is None


def test_same_date_keeps_last_inserted() -> None:
    user_id = uuid4()
    first = make_snapshot(user_id, date(2025, 7, 1), weight_kg=70, snapshot_id=1)
    second = make_snapshot(user_id, date(2025, 7, 1), weight_kg=75, snapshot_id=2)

    timeline = SnapshotTimeline.build([first, second])

    assert len(timeline) == 1
    assert timeline.effective_at(date(2025, 7, 2)) == second


def test_resolve_day_prefers_record(user) -> None:
    day = date(2025, 7, 5)
    record = make_record(user.id, day)
    timeline = SnapshotTimeline.build([make_snapshot(user.id, day)])

    summary = resolve_day(day, user, record, timeline, {MODERATE.id: MODERATE})

    assert summary == DaySummary.from_record(record)


def test_resolve_day_computes_target(user) -> None:
    day = date(2025, 7, 5)
    timeline = SnapshotTimeline.build([make_snapshot(user.id, date(2025, 7, 1))])

    summary = resolve_day(day, user, None, timeline, {MODERATE.id: MODERATE})

    assert summary == DaySummary.from_target(2517, day)


def test_resolve_day_without_context_is_zero(user) -> None:
    day = date(2025, 7, 5)
    timeline = SnapshotTimeline.build([make_snapshot(user.id, date(2025, 7, 1))])

    no_levels = resolve_day(day, user, None, timeline, {})
    no_snapshot = resolve_day(
        day, user, None, SnapshotTimeline.build([]), {MODERATE.id: MODERATE}
    )

    assert no_levels == DaySummary.from_target(0, day)
    assert no_snapshot == DaySummary.from_target(0, day)


def test_resolve_day_uses_injected_calculator(user) -> None:
    day = date(2025, 7, 5)
    timeline = SnapshotTimeline.build([make_snapshot(user.id, date(2025, 7, 1))])

    summary = resolve_day(
        day,
        user,
        None,
        timeline,
        {MODERATE.id: MODERATE},
        lambda _user, snapshot, level: snapshot.weight_kg * level.factor,
    )

    assert summary.goal_kcal == 70 * 1.55
