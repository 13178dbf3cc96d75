"""Supabase repositories for activity levels and nutrient plans."""

from dataclasses import dataclass

from supabase import Client

from intake_calendar.domain.models import ActivityLevel, NutrientPlan
from intake_calendar.services.intake import (
    ActivityLevelRepository,
    NutrientPlanRepository,
)


@dataclass
class SupabaseActivityLevelRepository(ActivityLevelRepository):
    """Supabase implementation for activity levels."""

    client: Client

    def list_all(self) -> list[ActivityLevel]:
        """Return every activity level."""
        response = (
            self.client.table("activity_levels").select("id, name, factor").execute()
        )
        return [_parse_activity_level(row) for row in response.data or []]

    def get(self, activity_level_id: int) -> ActivityLevel | None:
        """Return an activity level by id."""
        response = (
            self.client.table("activity_levels")
            .select("id, name, factor")
            .eq("id", activity_level_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_activity_level(response.data[0])


@dataclass
class SupabaseNutrientPlanRepository(NutrientPlanRepository):
    """Supabase implementation for nutrient plans."""

    client: Client

    def get(self, nutrient_plan_id: int) -> NutrientPlan | None:
        """Return a nutrient plan by id."""
        response = (
            self.client.table("nutrient_plans")
            .select("id, name, carbs_ratio, protein_ratio, fat_ratio")
            .eq("id", nutrient_plan_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return NutrientPlan(
            id=int(row["id"]),
            name=str(row.get("name", "")),
            carbs_ratio=float(row.get("carbs_ratio", 0.0)),
            protein_ratio=float(row.get("protein_ratio", 0.0)),
            fat_ratio=float(row.get("fat_ratio", 0.0)),
        )


def _parse_activity_level(row: dict[str, object]) -> ActivityLevel:
    return ActivityLevel(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        factor=float(row.get("factor", 1.0)),
    )
