"""Domain models for users and their profile history."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    created_at: datetime
    gender: str
    birth_date: date


@dataclass(frozen=True)
class ProfileSnapshot:
    """Point-in-time capture of a user's body and plan settings."""

    id: int
    user_id: UUID
    effective_date: date
    height_cm: float
    weight_kg: float
    activity_level_id: int
    nutrient_plan_id: int


@dataclass(frozen=True)
class ActivityLevel:
    """Named activity multiplier applied to basal metabolic rate."""

    id: int
    name: str
    factor: float


@dataclass(frozen=True)
class NutrientPlan:
    """Macronutrient split of the daily calorie goal."""

    id: int
    name: str
    carbs_ratio: float
    protein_ratio: float
    fat_ratio: float
