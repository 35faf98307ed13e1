"""Recipe browsing and search on top of TheMealDB"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from adapters import mealdb_adapter
from app.config import settings
from domain.schemas import Meal
from repositories import FavoritesRepository

logger = logging.getLogger("platepilot.recipes")


class RecipeService:
    """Home feed and search results, with favorites marked."""

    def __init__(self, db: Session):
        self.db = db
        self.favorites = FavoritesRepository(db)

    def browse(self, count: Optional[int] = None) -> List[Meal]:
        """Random meals for the home feed."""
        count = count or settings.home_feed_size
        logger.info("Loading home feed with %d random meals", count)
        return self._mark_favorites(mealdb_adapter.fetch_random_meals(count))

    def search(self, query: str) -> List[Meal]:
        """Meals whose name matches ``query``."""
        query = query.strip()
        logger.info("Searching meals for %r", query)
        return self._mark_favorites(mealdb_adapter.search_meals(query))

    def _mark_favorites(self, meals: List[Meal]) -> List[Meal]:
        favorite_ids = {meal.id for meal in self.favorites.load()}
        return [
            meal.model_copy(update={"is_favorite": meal.id in favorite_ids})
            for meal in meals
        ]
