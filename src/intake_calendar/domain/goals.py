"""Daily calorie and macronutrient goal calculations."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from intake_calendar.domain.models import (
    ActivityLevel,
    NutrientPlan,
    ProfileSnapshot,
    UserRecord,
)

KCAL_PER_G_CARBS = 4
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_FAT = 9

# Mifflin-St Jeor sex constants.
_GENDER_OFFSETS = {
    "MALE": 5.0,
    "FEMALE": -161.0,
}

TargetCalculator = Callable[[UserRecord, ProfileSnapshot, ActivityLevel], float]


@dataclass(frozen=True)
class NutrientGoal:
    """Daily calorie goal split into macronutrient grams."""

    kcal: float
    carbs_g: float
    protein_g: float
    fat_g: float

    @classmethod
    def from_kcal(cls, goal_kcal: float, plan: NutrientPlan) -> "NutrientGoal":
        """Split a calorie goal by the plan's macronutrient ratios."""
        return cls(
            kcal=goal_kcal,
            carbs_g=round(goal_kcal * plan.carbs_ratio / KCAL_PER_G_CARBS, 1),
            protein_g=round(goal_kcal * plan.protein_ratio / KCAL_PER_G_PROTEIN, 1),
            fat_g=round(goal_kcal * plan.fat_ratio / KCAL_PER_G_FAT, 1),
        )


def calculate_goal_kcal(
    user: UserRecord, snapshot: ProfileSnapshot, activity_level: ActivityLevel
) -> float:
    """Return the daily calorie goal for a user as of a profile snapshot."""
    gender = user.gender.upper()
    if gender not in _GENDER_OFFSETS:
        raise ValueError(f"Unsupported gender: {user.gender}")
    age = _age_on(user.birth_date, snapshot.effective_date)
    bmr = (
        10 * snapshot.weight_kg
        + 6.25 * snapshot.height_cm
        - 5 * age
        + _GENDER_OFFSETS[gender]
    )
    return float(round(bmr * activity_level.factor))


def nutrient_goal_for(
    user: UserRecord,
    snapshot: ProfileSnapshot,
    activity_level: ActivityLevel,
    plan: NutrientPlan,
    calculate_target: TargetCalculator = calculate_goal_kcal,
) -> NutrientGoal:
    """Return the full nutrient goal for a snapshot."""
    goal_kcal = calculate_target(user, snapshot, activity_level)
    return NutrientGoal.from_kcal(goal_kcal, plan)


def _age_on(birth_date: date, day: date) -> int:
    had_birthday = (day.month, day.day) >= (birth_date.month, birth_date.day)
    return day.year - birth_date.year - (0 if had_birthday else 1)
