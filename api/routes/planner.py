from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.responses import DeletedResponse
from domain.schemas import Meal, PlannerDay, PlannerSummary
from services.planner_service import PlannerService, parse_day

router = APIRouter(prefix="/planner", tags=["Meal Planning"])
logger = logging.getLogger("platepilot.api.planner")


@router.get("", response_model=List[PlannerDay])
def list_planner_days(db: Session = Depends(get_db)):
    """Planned days, Monday to Sunday. Days without meals are not listed."""
    return PlannerService(db).list_days()


@router.get("/summary", response_model=PlannerSummary)
def planner_summary(db: Session = Depends(get_db)):
    """
    Weekly totals against the saved settings:
    - total calories and cost of all planned meals
    - remaining weekly budget and whether it is exceeded
    - average calories per planned day next to the daily goal
    """
    return PlannerService(db).summary()


@router.post(
    "/{day}/meals",
    response_model=List[PlannerDay],
    status_code=status.HTTP_201_CREATED,
)
def add_meal_to_day(
    meal: Meal,
    day: str = Path(..., description="Weekday name (any case) or 'today'"),
    db: Session = Depends(get_db),
):
    """Add a meal to a day of the planner. Returns the whole planner."""
    service = PlannerService(db)
    service.add_meal(meal, parse_day(day))
    return service.list_days()


@router.delete("/{day}/meals/{index}", response_model=List[PlannerDay])
def remove_meal_from_day(
    day: str,
    index: int = Path(..., ge=0, description="Position of the meal within the day"),
    db: Session = Depends(get_db),
):
    """Remove one planned meal. A day left without meals disappears."""
    service = PlannerService(db)
    service.remove_meal(parse_day(day), index)
    return service.list_days()


@router.delete("", response_model=DeletedResponse)
def clear_planner(db: Session = Depends(get_db)):
    PlannerService(db).clear()
    return DeletedResponse(deleted="planner")
