from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field, computed_field

from domain.enums import DayOfWeek
from domain.schemas.meal_schemas import Meal, total_calories, total_cost


def _now() -> datetime:
    return datetime.now(timezone.utc)


class PlannerDay(BaseModel):
    """Meals planned for one day of the week"""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    date: datetime = Field(default_factory=_now)
    day_of_week: DayOfWeek
    meals: List[Meal] = Field(default_factory=list)

    @computed_field
    @property
    def day_label(self) -> str:
        return self.day_of_week.value

    @computed_field
    @property
    def total_calories(self) -> int:
        return total_calories(self.meals)

    @computed_field
    @property
    def total_cost(self) -> float:
        return total_cost(self.meals)

    @computed_field
    @property
    def header(self) -> str:
        return f"{self.day_label} • {self.total_calories} cal • ${self.total_cost:.2f}"


class PlannerSummary(BaseModel):
    """Weekly totals compared against the user's budget and calorie goal"""

    planned_days: int
    planned_meals: int
    total_calories: int
    total_cost: float
    weekly_budget: float
    remaining_budget: float
    over_budget: bool
    calorie_goal: int
    average_daily_calories: float
