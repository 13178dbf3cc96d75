"""Intake log service: monthly calendar, daily lookups and meal recording."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from intake_calendar.domain.calendar import YearMonth
from intake_calendar.domain.errors import (
    ActivityLevelNotFoundError,
    MemberStatusNotFoundError,
    NutrientPlanNotFoundError,
)
from intake_calendar.domain.goals import (
    NutrientGoal,
    TargetCalculator,
    calculate_goal_kcal,
    nutrient_goal_for,
)
from intake_calendar.domain.intake import (
    DayRecord,
    DaySummary,
    IntakeDetail,
    MealIntake,
)
from intake_calendar.domain.models import (
    ActivityLevel,
    NutrientPlan,
    ProfileSnapshot,
    UserRecord,
)
from intake_calendar.services.calendar_cache import IntakeCalendarCache
from intake_calendar.services.day_resolver import resolve_day
from intake_calendar.services.timeline import SnapshotTimeline

_logger = logging.getLogger(__name__)


class IntakeLogRepository(Protocol):
    """Persistence interface for daily intake records."""

    def get_by_day(self, user_id: UUID, day: date) -> DayRecord | None:
        """Return the record for a user and day, if present."""

    def list_between(self, user_id: UUID, start: date, end: date) -> list[DayRecord]:
        """Return records with start <= day <= end."""

    def save(self, record: DayRecord) -> DayRecord:
        """Insert or update a record and return the stored row."""


class ProfileSnapshotRepository(Protocol):
    """Persistence interface for profile snapshots."""

    def list_between(
        self, user_id: UUID, start: date, end: date
    ) -> list[ProfileSnapshot]:
        """Return snapshots effective within [start, end], oldest first."""

    def get_latest(self, user_id: UUID) -> ProfileSnapshot | None:
        """Return the most recent snapshot for a user."""


class ActivityLevelRepository(Protocol):
    """Persistence interface for activity levels."""

    def list_all(self) -> list[ActivityLevel]:
        """Return every activity level."""

    def get(self, activity_level_id: int) -> ActivityLevel | None:
        """Return an activity level by id."""


class NutrientPlanRepository(Protocol):
    """Persistence interface for nutrient plans."""

    def get(self, nutrient_plan_id: int) -> NutrientPlan | None:
        """Return a nutrient plan by id."""


@dataclass
class IntakeLogService:
    """Service combining logged intake with profile-derived daily targets."""

    intake_log_repository: IntakeLogRepository
    snapshot_repository: ProfileSnapshotRepository
    activity_level_repository: ActivityLevelRepository
    nutrient_plan_repository: NutrientPlanRepository
    calendar_cache: IntakeCalendarCache
    calculate_target: TargetCalculator = calculate_goal_kcal

    def record_meal(self, user: UserRecord, meal: MealIntake) -> DaySummary:
        """Add a meal to its day's record and refresh that day in the cache."""
        day = meal.logged_at.date()
        record = self.intake_log_repository.get_by_day(user.id, day)
        if record is None:
            record = self._create_record(user, day)
        saved = self.intake_log_repository.save(record.with_meal(meal))

        summary = DaySummary.from_record(saved)
        self.calendar_cache.put_day(user.id, YearMonth.from_date(day), day, summary)
        return summary

    def get_calendar(self, user: UserRecord, year_month: YearMonth) -> list[DaySummary]:
        """Return one summary per day of the month, in date order.

        Days missing from the cache are computed in one batch and written back.
        """
        all_days = year_month.days()
        cached = self.calendar_cache.get_cached_month(user.id, year_month)
        missing_days = [day for day in all_days if day not in cached]

        computed: dict[date, DaySummary] = {}
        if missing_days:
            _logger.info(
                "Calendar cache miss: user=%s month=%s missing_days=%s",
                user.id,
                year_month,
                len(missing_days),
            )
            computed = self._compute_missing_days(user, year_month, missing_days)

        summaries = []
        for day in all_days:
            summary = cached[day] if day in cached else computed.get(day)
            if summary is None:
                raise RuntimeError(f"No summary resolved for {day}")
            summaries.append(summary)
        return summaries

    def get_daily_summary(self, user: UserRecord, day: date) -> DaySummary:
        """Return the logged intake for a day, or the current target."""
        record = self.intake_log_repository.get_by_day(user.id, day)
        if record is not None:
            return DaySummary.from_record(record)
        snapshot = self._latest_snapshot(user)
        activity_level = self._activity_level(snapshot.activity_level_id)
        goal_kcal = self.calculate_target(user, snapshot, activity_level)
        return DaySummary.from_target(goal_kcal, day)

    def get_daily_detail(self, user: UserRecord, day: date) -> IntakeDetail:
        """Return a day's nutrient goal together with the logged intake."""
        record = self.intake_log_repository.get_by_day(user.id, day)
        snapshot = self._latest_snapshot(user)
        plan = self._nutrient_plan(snapshot.nutrient_plan_id)
        if record is not None:
            goal = NutrientGoal.from_kcal(record.goal_kcal, plan)
            return IntakeDetail.from_record(goal, record)

        activity_level = self._activity_level(snapshot.activity_level_id)
        goal = nutrient_goal_for(
            user, snapshot, activity_level, plan, self.calculate_target
        )
        return IntakeDetail.from_goal(goal, day)

    def _compute_missing_days(
        self, user: UserRecord, year_month: YearMonth, missing_days: list[date]
    ) -> dict[date, DaySummary]:
        timeline = SnapshotTimeline.build(
            self.snapshot_repository.list_between(
                user.id, user.created_at.date(), year_month.last_day()
            )
        )
        activity_levels = {
            level.id: level for level in self.activity_level_repository.list_all()
        }
        records = {
            record.day: record
            for record in self.intake_log_repository.list_between(
                user.id, year_month.first_day(), year_month.last_day()
            )
        }

        computed: dict[date, DaySummary] = {}
        for day in missing_days:
            summary = resolve_day(
                day,
                user,
                records.get(day),
                timeline,
                activity_levels,
                self.calculate_target,
            )
            computed[day] = summary
            self.calendar_cache.put_day(user.id, year_month, day, summary)
        return computed

    def _create_record(self, user: UserRecord, day: date) -> DayRecord:
        snapshot = self._latest_snapshot(user)
        activity_level = self._activity_level(snapshot.activity_level_id)
        goal_kcal = self.calculate_target(user, snapshot, activity_level)
        return DayRecord.empty(user.id, day, goal_kcal)

    def _latest_snapshot(self, user: UserRecord) -> ProfileSnapshot:
        snapshot = self.snapshot_repository.get_latest(user.id)
        if snapshot is None:
            raise MemberStatusNotFoundError(user.id)
        return snapshot

    def _activity_level(self, activity_level_id: int) -> ActivityLevel:
        activity_level = self.activity_level_repository.get(activity_level_id)
        if activity_level is None:
            raise ActivityLevelNotFoundError(activity_level_id)
        return activity_level

    def _nutrient_plan(self, nutrient_plan_id: int) -> NutrientPlan:
        plan = self.nutrient_plan_repository.get(nutrient_plan_id)
        if plan is None:
            raise NutrientPlanNotFoundError(nutrient_plan_id)
        return plan
