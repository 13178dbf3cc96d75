"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from intake_calendar.domain.models import UserRecord
from intake_calendar.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user lookups."""

    client: Client

    def get(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = (
            self.client.table("users")
            .select("id, created_at, gender, birth_date")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserRecord(
            id=UUID(row["id"]),
            created_at=datetime.fromisoformat(row["created_at"]),
            gender=str(row["gender"]),
            birth_date=date.fromisoformat(row["birth_date"]),
        )
