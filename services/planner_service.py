from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, ServiceValidationError
from domain.enums import DayOfWeek
from domain.schemas import Meal, PlannerDay, PlannerSummary, total_calories, total_cost
from repositories import PlannerRepository, SettingsRepository

logger = logging.getLogger("platepilot.planner")

TODAY = "today"


def parse_day(value: str, today: Optional[date] = None) -> DayOfWeek:
    """
    Resolve a day name from a URL or request body.

    Accepts any casing of a weekday name, or ``today``.

    Raises:
        ServiceValidationError: If the value is not a weekday
    """
    if value.strip().lower() == TODAY:
        return DayOfWeek.from_date(today or date.today())
    try:
        return DayOfWeek(value)
    except ValueError:
        raise ServiceValidationError(
            f"Unknown day '{value}'",
            details={"allowed": [d.value for d in DayOfWeek] + [TODAY]},
        )


class PlannerService:
    """
    Weekly planner:
    - one PlannerDay per weekday, created on first use
    - days are listed Monday to Sunday
    - a day with no meals left is dropped
    """

    def __init__(self, db: Session):
        self.repository = PlannerRepository(db)
        self.settings_repository = SettingsRepository(db)

    def list_days(self) -> List[PlannerDay]:
        return sorted(self.repository.load(), key=lambda d: d.day_of_week.order)

    def get_day(self, day: DayOfWeek) -> PlannerDay:
        for planner_day in self.repository.load():
            if planner_day.day_of_week == day:
                return planner_day
        raise NotFoundError(f"Nothing planned for {day.value}")

    def add_meal(self, meal: Meal, day: DayOfWeek) -> PlannerDay:
        """Append ``meal`` to ``day``, creating the day if needed."""
        days = self.repository.load()
        for planner_day in days:
            if planner_day.day_of_week == day:
                planner_day.meals.append(meal)
                target = planner_day
                break
        else:
            target = PlannerDay(
                date=datetime.now(timezone.utc), day_of_week=day, meals=[meal]
            )
            days.append(target)

        self.repository.save(days)
        logger.info("Planned %s on %s (%d meals that day)", meal.id, day.value, len(target.meals))
        return target

    def remove_meal(self, day: DayOfWeek, index: int) -> Optional[PlannerDay]:
        """
        Remove the meal at ``index`` on ``day``.

        Returns:
            The updated day, or None if the day became empty and was removed

        Raises:
            NotFoundError: If nothing is planned that day or index is out of range
        """
        days = self.repository.load()
        position = next(
            (i for i, d in enumerate(days) if d.day_of_week == day), None
        )
        if position is None:
            raise NotFoundError(f"Nothing planned for {day.value}")

        planner_day = days[position]
        if not 0 <= index < len(planner_day.meals):
            raise NotFoundError(
                f"No meal at position {index} on {day.value}",
                details={"meals": len(planner_day.meals)},
            )

        removed = planner_day.meals.pop(index)
        logger.info("Removed %s from %s", removed.id, day.value)

        if not planner_day.meals:
            days.pop(position)
            self.repository.save(days)
            return None

        self.repository.save(days)
        return planner_day

    def clear(self) -> None:
        self.repository.save([])
        logger.info("Planner cleared")

    def planned_meals(self) -> List[Meal]:
        """All planned meals, Monday first."""
        return [meal for day in self.list_days() for meal in day.meals]

    def summary(self) -> PlannerSummary:
        days = [d for d in self.list_days() if d.meals]
        meals = [meal for d in days for meal in d.meals]
        user_settings = self.settings_repository.load()

        calories = total_calories(meals)
        cost = total_cost(meals)
        return PlannerSummary(
            planned_days=len(days),
            planned_meals=len(meals),
            total_calories=calories,
            total_cost=round(cost, 2),
            weekly_budget=user_settings.weekly_budget,
            remaining_budget=round(user_settings.weekly_budget - cost, 2),
            over_budget=cost > user_settings.weekly_budget,
            calorie_goal=user_settings.calorie_goal,
            average_daily_calories=round(calories / len(days), 1) if days else 0.0,
        )
