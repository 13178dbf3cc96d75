"""Supabase repository for daily intake records."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from intake_calendar.domain.intake import DayRecord
from intake_calendar.services.intake import IntakeLogRepository

_COLUMNS = "id, user_id, date, goal_kcal, intake_kcal, carbs_g, protein_g, fat_g"


@dataclass
class SupabaseIntakeLogRepository(IntakeLogRepository):
    """Supabase implementation for intake log persistence."""

    client: Client

    def get_by_day(self, user_id: UUID, day: date) -> DayRecord | None:
        """Return the intake log for a user and day."""
        response = (
            self.client.table("intake_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def list_between(self, user_id: UUID, start: date, end: date) -> list[DayRecord]:
        """Return intake logs for an inclusive date range."""
        response = (
            self.client.table("intake_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def save(self, record: DayRecord) -> DayRecord:
        """Upsert the intake log for its user and day."""
        payload: dict[str, object] = {
            "user_id": str(record.user_id),
            "date": record.day.isoformat(),
            "goal_kcal": record.goal_kcal,
            "intake_kcal": record.intake_kcal,
            "carbs_g": record.carbs_g,
            "protein_g": record.protein_g,
            "fat_g": record.fat_g,
        }
        if record.id is not None:
            payload["id"] = str(record.id)
        response = (
            self.client.table("intake_logs")
            .upsert(payload, on_conflict="user_id,date")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save intake log in Supabase")
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> DayRecord:
    return DayRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["date"])),
        goal_kcal=float(row.get("goal_kcal") or 0.0),
        intake_kcal=float(row.get("intake_kcal") or 0.0),
        carbs_g=float(row.get("carbs_g") or 0.0),
        protein_g=float(row.get("protein_g") or 0.0),
        fat_g=float(row.get("fat_g") or 0.0),
    )
