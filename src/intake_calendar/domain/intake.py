"""Domain models for daily intake."""

from dataclasses import dataclass, replace
from datetime import date, datetime
from uuid import UUID

from intake_calendar.domain.goals import NutrientGoal


@dataclass(frozen=True)
class MealIntake:
    """Totals of a single eaten meal."""

    logged_at: datetime
    kcal: float
    carbs_g: float
    protein_g: float
    fat_g: float


@dataclass(frozen=True)
class DayRecord:
    """Logged intake for one user and one day."""

    id: UUID | None
    user_id: UUID
    day: date
    goal_kcal: float
    intake_kcal: float
    carbs_g: float
    protein_g: float
    fat_g: float

    @classmethod
    def empty(cls, user_id: UUID, day: date, goal_kcal: float) -> "DayRecord":
        """Create a record with no intake yet."""
        return cls(
            id=None,
            user_id=user_id,
            day=day,
            goal_kcal=goal_kcal,
            intake_kcal=0.0,
            carbs_g=0.0,
            protein_g=0.0,
            fat_g=0.0,
        )

    def with_meal(self, meal: MealIntake) -> "DayRecord":
        """Return a copy with the meal totals added."""
        return replace(
            self,
            intake_kcal=self.intake_kcal + meal.kcal,
            carbs_g=self.carbs_g + meal.carbs_g,
            protein_g=self.protein_g + meal.protein_g,
            fat_g=self.fat_g + meal.fat_g,
        )


@dataclass(frozen=True)
class DaySummary:
    """Calendar cell: actual intake when logged, otherwise the day's target."""

    day: date
    has_intake_log: bool
    goal_kcal: float
    intake_kcal: float | None = None
    carbs_g: float | None = None
    protein_g: float | None = None
    fat_g: float | None = None

    @classmethod
    def from_record(cls, record: DayRecord) -> "DaySummary":
        return cls(
            day=record.day,
            has_intake_log=True,
            goal_kcal=record.goal_kcal,
            intake_kcal=record.intake_kcal,
            carbs_g=record.carbs_g,
            protein_g=record.protein_g,
            fat_g=record.fat_g,
        )

    @classmethod
    def from_target(cls, goal_kcal: float, day: date) -> "DaySummary":
        return cls(day=day, has_intake_log=False, goal_kcal=float(goal_kcal))


@dataclass(frozen=True)
class IntakeDetail:
    """Daily goal breakdown with the logged intake, if any."""

    day: date
    has_intake_log: bool
    goal: NutrientGoal
    intake_kcal: float | None = None
    carbs_g: float | None = None
    protein_g: float | None = None
    fat_g: float | None = None

    @classmethod
    def from_record(cls, goal: NutrientGoal, record: DayRecord) -> "IntakeDetail":
        return cls(
            day=record.day,
            has_intake_log=True,
            goal=goal,
            intake_kcal=record.intake_kcal,
            carbs_g=record.carbs_g,
            protein_g=record.protein_g,
            fat_g=record.fat_g,
        )

    @classmethod
    def from_goal(cls, goal: NutrientGoal, day: date) -> "IntakeDetail":
        return cls(day=day, has_intake_log=False, goal=goal)
