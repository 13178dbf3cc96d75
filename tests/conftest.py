"""Shared test fixtures."""

import logging
from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from intake_calendar.config import Settings
from intake_calendar.containers import AppContainer
from intake_calendar.domain.intake import DayRecord
from intake_calendar.domain.models import (
    ActivityLevel,
    NutrientPlan,
    ProfileSnapshot,
    UserRecord,
)
from intake_calendar.services.cache import InMemoryHashCache
from intake_calendar.services.calendar_cache import IntakeCalendarCache
from intake_calendar.services.intake import (
    ActivityLevelRepository,
    IntakeLogRepository,
    IntakeLogService,
    NutrientPlanRepository,
    ProfileSnapshotRepository,
)
from intake_calendar.services.users import UserRepository, UserService

MODERATE = ActivityLevel(id=2, name="moderate", factor=1.55)
BALANCED = NutrientPlan(
    id=1, name="balanced", carbs_ratio=0.5, protein_ratio=0.3, fat_ratio=0.2
)


def make_snapshot(  # noqa: PLR0913
    user_id: UUID,
    effective_date: date,
    weight_kg: float = 70,
    height_cm: float = 175,
    activity_level_id: int = MODERATE.id,
    nutrient_plan_id: int = BALANCED.id,
    snapshot_id: int = 1,
) -> ProfileSnapshot:
    return ProfileSnapshot(
        id=snapshot_id,
        user_id=user_id,
        effective_date=effective_date,
        height_cm=height_cm,
        weight_kg=weight_kg,
        activity_level_id=activity_level_id,
        nutrient_plan_id=nutrient_plan_id,
    )


def make_record(user_id: UUID, day: date, intake_kcal: float = 1800) -> DayRecord:
    return DayRecord(
        id=uuid4(),
        user_id=user_id,
        day=day,
        goal_kcal=2100.0,
        intake_kcal=intake_kcal,
        carbs_g=200.0,
        protein_g=90.0,
        fat_g=60.0,
    )


@dataclass
class InMemoryIntakeLogRepository(IntakeLogRepository):
    """In-memory intake log repository for tests."""

    records: dict[tuple[UUID, date], DayRecord] = field(default_factory=dict)
    get_calls: int = 0
    list_calls: int = 0
    saved: list[DayRecord] = field(default_factory=list)

    def add(self, record: DayRecord) -> None:
        self.records[(record.user_id, record.day)] = record

    def get_by_day(self, user_id: UUID, day: date) -> DayRecord | None:
        self.get_calls += 1
        return self.records.get((user_id, day))

    def list_between(self, user_id: UUID, start: date, end: date) -> list[DayRecord]:
        self.list_calls += 1
        return sorted(
            (
                record
                for (owner, day), record in self.records.items()
                if owner == user_id and start <= day <= end
            ),
            key=lambda record: record.day,
        )

    def save(self, record: DayRecord) -> DayRecord:
        stored = record if record.id is not None else replace(record, id=uuid4())
        self.records[(stored.user_id, stored.day)] = stored
        self.saved.append(stored)
        return stored


@dataclass
class InMemoryProfileSnapshotRepository(ProfileSnapshotRepository):
    """In-memory snapshot repository keeping insertion order."""

    snapshots: list[ProfileSnapshot] = field(default_factory=list)
    list_calls: int = 0
    latest_calls: int = 0

    def list_between(
        self, user_id: UUID, start: date, end: date
    ) -> list[ProfileSnapshot]:
        self.list_calls += 1
        matching = [
            snapshot
            for snapshot in self.snapshots
            if snapshot.user_id == user_id
            and start <= snapshot.effective_date <= end
        ]
        return sorted(matching, key=lambda snapshot: snapshot.effective_date)

    def get_latest(self, user_id: UUID) -> ProfileSnapshot | None:
        self.latest_calls += 1
        latest = None
        for snapshot in self.snapshots:
            if snapshot.user_id != user_id:
                continue
            if latest is None or snapshot.effective_date >= latest.effective_date:
                latest = snapshot
        return latest


@dataclass
class InMemoryActivityLevelRepository(ActivityLevelRepository):
    """In-memory activity level repository for tests."""

    levels: dict[int, ActivityLevel] = field(default_factory=dict)
    list_calls: int = 0
    get_calls: int = 0

    def list_all(self) -> list[ActivityLevel]:
        self.list_calls += 1
        return list(self.levels.values())

    def get(self, activity_level_id: int) -> ActivityLevel | None:
        self.get_calls += 1
        return self.levels.get(activity_level_id)


@dataclass
class InMemoryNutrientPlanRepository(NutrientPlanRepository):
    """In-memory nutrient plan repository for tests."""

    plans: dict[int, NutrientPlan] = field(default_factory=dict)
    get_calls: int = 0

    def get(self, nutrient_plan_id: int) -> NutrientPlan | None:
        self.get_calls += 1
        return self.plans.get(nutrient_plan_id)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def get(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)


@pytest.fixture(autouse=True)
def package_logger_state():
    """Restore the package logger after tests that configure logging."""
    logger = logging.getLogger("intake_calendar")
    handlers = list(logger.handlers)
    propagate = logger.propagate
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.propagate = propagate
    logger.setLevel(level)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def user() -> UserRecord:
    return UserRecord(
        id=uuid4(),
        created_at=datetime(2025, 1, 1, 9, 30, tzinfo=UTC),
        gender="MALE",
        birth_date=date(1990, 5, 20),
    )


@pytest.fixture
def intake_log_repository() -> InMemoryIntakeLogRepository:
    return InMemoryIntakeLogRepository()


@pytest.fixture
def snapshot_repository() -> InMemoryProfileSnapshotRepository:
    return InMemoryProfileSnapshotRepository()


@pytest.fixture
def activity_level_repository() -> InMemoryActivityLevelRepository:
    return InMemoryActivityLevelRepository(levels={MODERATE.id: MODERATE})


@pytest.fixture
def nutrient_plan_repository() -> InMemoryNutrientPlanRepository:
    return InMemoryNutrientPlanRepository(plans={BALANCED.id: BALANCED})


@pytest.fixture
def hash_cache() -> InMemoryHashCache:
    return InMemoryHashCache()


@pytest.fixture
def calendar_cache(hash_cache: InMemoryHashCache) -> IntakeCalendarCache:
    return IntakeCalendarCache(hash_cache)


@pytest.fixture
def intake_service(  # noqa: PLR0913
    intake_log_repository: InMemoryIntakeLogRepository,
    snapshot_repository: InMemoryProfileSnapshotRepository,
    activity_level_repository: InMemoryActivityLevelRepository,
    nutrient_plan_repository: InMemoryNutrientPlanRepository,
    calendar_cache: IntakeCalendarCache,
) -> IntakeLogService:
    return IntakeLogService(
        intake_log_repository=intake_log_repository,
        snapshot_repository=snapshot_repository,
        activity_level_repository=activity_level_repository,
        nutrient_plan_repository=nutrient_plan_repository,
        calendar_cache=calendar_cache,
    )


@pytest.fixture
def container(
    settings: Settings, user: UserRecord, intake_service: IntakeLogService
) -> AppContainer:
    user_service = UserService(InMemoryUserRepository(users={user.id: user}))

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=user_service,
        intake_log_service=intake_service,
        close_resources=close_resources,
    )
