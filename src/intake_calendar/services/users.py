"""User lookup."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from intake_calendar.domain.errors import UserNotFoundError
from intake_calendar.domain.models import UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get(self, user_id: UUID) -> UserRecord | None:
        """Return the user with this id, if present."""


@dataclass
class UserService:
    """Application service for user lookups."""

    repository: UserRepository

    def get_user(self, user_id: UUID) -> UserRecord:
        """Return the user or raise if it does not exist."""
        user = self.repository.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
