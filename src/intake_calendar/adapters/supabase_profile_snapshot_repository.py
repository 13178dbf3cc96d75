"""Supabase repository for profile snapshots."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from intake_calendar.domain.models import ProfileSnapshot
from intake_calendar.services.intake import ProfileSnapshotRepository

_COLUMNS = (
    "id, user_id, effective_date, height_cm, weight_kg, "
    "activity_level_id, nutrient_plan_id"
)


@dataclass
class SupabaseProfileSnapshotRepository(ProfileSnapshotRepository):
    """Supabase implementation for profile snapshot queries."""

    client: Client

    def list_between(
        self, user_id: UUID, start: date, end: date
    ) -> list[ProfileSnapshot]:
        """Return snapshots in the range, oldest first and by insertion order."""
        response = (
            self.client.table("profile_snapshots")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("effective_date", start.isoformat())
            .lte("effective_date", end.isoformat())
            .order("effective_date", desc=False)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def get_latest(self, user_id: UUID) -> ProfileSnapshot | None:
        """Return the newest snapshot for a user."""
        response = (
            self.client.table("profile_snapshots")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("effective_date", desc=True)
            .order("id", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> ProfileSnapshot:
    return ProfileSnapshot(
        id=int(row["id"]),
        user_id=UUID(str(row["user_id"])),
        effective_date=date.fromisoformat(str(row["effective_date"])[:10]),
        height_cm=float(row.get("height_cm", 0.0)),
        weight_kg=float(row.get("weight_kg", 0.0)),
        activity_level_id=int(row["activity_level_id"]),
        nutrient_plan_id=int(row["nutrient_plan_id"]),
    )
