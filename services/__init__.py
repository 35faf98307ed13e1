"""Services package - Business logic layer"""

from services.recipe_service import RecipeService
from services.favorites_service import FavoritesService
from services.planner_service import PlannerService, parse_day
from services.grocery_service import GroceryService
from services.settings_service import SettingsService

__all__ = [
    "RecipeService",
    "FavoritesService",
    "PlannerService",
    "parse_day",
    "GroceryService",
    "SettingsService",
]
