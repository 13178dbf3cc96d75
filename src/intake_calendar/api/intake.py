"""Intake log API endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, status

from intake_calendar.api.schemas import MealIntakeRequest  # noqa: TC001
from intake_calendar.domain.calendar import YearMonth, parse_day

if TYPE_CHECKING:
    from intake_calendar.containers import AppContainer

router = APIRouter(prefix="/users/{user_id}/intake-logs", tags=["intake-logs"])


@router.get("/calendar")
async def intake_calendar(
    user_id: UUID, month: str, request: Request
) -> dict[str, object]:
    """Return one summary per day of a YYYY-MM month."""
    container: AppContainer = request.app.state.container
    year_month = YearMonth.parse(month)
    user = container.user_service.get_user(user_id)
    days = container.intake_log_service.get_calendar(user, year_month)
    return {"month": str(year_month), "days": [asdict(day) for day in days]}


@router.get("/{day}")
async def intake_detail(user_id: UUID, day: str, request: Request) -> dict[str, object]:
    """Return the nutrient goal and logged intake for a day."""
    container: AppContainer = request.app.state.container
    target_day = parse_day(day)
    user = container.user_service.get_user(user_id)
    return asdict(container.intake_log_service.get_daily_detail(user, target_day))


@router.get("/{day}/summary")
async def intake_summary(
    user_id: UUID, day: str, request: Request
) -> dict[str, object]:
    """Return the calendar summary for a single day."""
    container: AppContainer = request.app.state.container
    target_day = parse_day(day)
    user = container.user_service.get_user(user_id)
    return asdict(container.intake_log_service.get_daily_summary(user, target_day))


@router.post("", status_code=status.HTTP_201_CREATED)
async def record_meal(
    user_id: UUID, payload: MealIntakeRequest, request: Request
) -> dict[str, object]:
    """Add a meal to the user's intake log."""
    container: AppContainer = request.app.state.container
    user = container.user_service.get_user(user_id)
    summary = container.intake_log_service.record_meal(user, payload.to_domain())
    return asdict(summary)
