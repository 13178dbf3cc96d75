"""Domain errors with HTTP status codes and machine-readable codes."""

from http import HTTPStatus
from uuid import UUID


class IntakeCalendarError(Exception):
    """Base class for application-level errors."""

    http_status: int = HTTPStatus.INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, object] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, object]:
        """Return the JSON error envelope."""
        payload: dict[str, object] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class IllegalDateFormatError(IntakeCalendarError):
    """Raised when a month or day string cannot be parsed."""

    http_status = HTTPStatus.BAD_REQUEST
    code = "ILLEGAL_DATE_FORMAT"

    def __init__(self, raw: str, expected: str):
        super().__init__(
            message=f"Invalid date {raw!r}, expected {expected}.",
            details={"value": raw, "expected": expected},
        )


class MemberStatusNotFoundError(IntakeCalendarError):
    """Raised when a user has never recorded a profile snapshot."""

    http_status = HTTPStatus.BAD_REQUEST
    code = "MEMBER_STATUS_NOT_FOUND"

    def __init__(self, user_id: UUID):
        super().__init__(
            message="User has no profile status; onboarding is incomplete.",
            details={"user_id": str(user_id)},
        )


class NutrientPlanNotFoundError(IntakeCalendarError):
    """Raised when a snapshot references a missing nutrient plan."""

    http_status = HTTPStatus.NOT_FOUND
    code = "NUTRIENT_PLAN_NOT_FOUND"

    def __init__(self, nutrient_plan_id: int):
        super().__init__(
            message=f"Nutrient plan {nutrient_plan_id} does not exist.",
            details={"nutrient_plan_id": nutrient_plan_id},
        )


class ActivityLevelNotFoundError(IntakeCalendarError):
    """Raised when a snapshot references a missing activity level."""

    http_status = HTTPStatus.NOT_FOUND
    code = "ACTIVITY_LEVEL_NOT_FOUND"

    def __init__(self, activity_level_id: int):
        super().__init__(
            message=f"Activity level {activity_level_id} does not exist.",
            details={"activity_level_id": activity_level_id},
        )


class UserNotFoundError(IntakeCalendarError):
    """Raised when a user id is unknown."""

    http_status = HTTPStatus.NOT_FOUND
    code = "USER_NOT_FOUND"

    def __init__(self, user_id: UUID):
        super().__init__(
            message="User not found.",
            details={"user_id": str(user_id)},
        )
