"""Pydantic models for intake log requests."""

from datetime import datetime

from pydantic import BaseModel, Field

from intake_calendar.domain.intake import MealIntake


class MealIntakeRequest(BaseModel):
    """Totals of a meal to add to its day's intake log."""

    logged_at: datetime
    kcal: float = Field(ge=0)
    carbs_g: float = Field(default=0, ge=0)
    protein_g: float = Field(default=0, ge=0)
    fat_g: float = Field(default=0, ge=0)

    def to_domain(self) -> MealIntake:
        """Convert the payload into a domain meal."""
        return MealIntake(
            logged_at=self.logged_at,
            kcal=self.kcal,
            carbs_g=self.carbs_g,
            protein_g=self.protein_g,
            fat_g=self.fat_g,
        )
