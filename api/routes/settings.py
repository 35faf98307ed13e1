"""User settings and data reset routes"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.responses import DeletedResponse
from domain.schemas import UserSettings, UserSettingsUpdate
from services.settings_service import SettingsService

router = APIRouter(tags=["Settings"])
logger = logging.getLogger("platepilot.api.settings")


@router.get("/settings", response_model=UserSettings)
def get_settings(db: Session = Depends(get_db)):
    """Saved settings, or the defaults ($50.00/week, 2000 cal/day)."""
    return SettingsService(db).get_settings()


@router.put("/settings", response_model=UserSettings)
def update_settings(changes: UserSettingsUpdate, db: Session = Depends(get_db)):
    """Update any of weekly_budget, calorie_goal, notifications_enabled."""
    return SettingsService(db).update_settings(changes)


@router.delete("/settings", response_model=UserSettings)
def reset_settings(db: Session = Depends(get_db)):
    return SettingsService(db).reset_settings()


@router.delete("/data", response_model=DeletedResponse)
def clear_all_data(db: Session = Depends(get_db)):
    """Remove favorites, planner, grocery list and settings."""
    count = SettingsService(db).clear_all_data()
    logger.warning("All stored data cleared (%d collections)", count)
    return DeletedResponse(deleted="all", count=count)
