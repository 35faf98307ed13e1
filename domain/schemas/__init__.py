"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.meal_schemas import (
    Ingredient,
    Meal,
    FavoriteStatus,
    total_calories,
    total_cost,
)
from domain.schemas.planner_schemas import PlannerDay, PlannerSummary
from domain.schemas.grocery_schemas import (
    DEFAULT_CATEGORY,
    GroceryItem,
    GroceryItemCreate,
    GroceryItemUpdate,
    GroceryAddResult,
)
from domain.schemas.settings_schemas import UserSettings, UserSettingsUpdate

__all__ = [
    # Meals
    "Ingredient",
    "Meal",
    "FavoriteStatus",
    "total_calories",
    "total_cost",
    # Planner
    "PlannerDay",
    "PlannerSummary",
    # Grocery
    "DEFAULT_CATEGORY",
    "GroceryItem",
    "GroceryItemCreate",
    "GroceryItemUpdate",
    "GroceryAddResult",
    # Settings
    "UserSettings",
    "UserSettingsUpdate",
]
