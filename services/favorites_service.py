import logging
from typing import List

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from domain.schemas import Meal
from repositories import FavoritesRepository

logger = logging.getLogger("platepilot.favorites")


class FavoritesService:
    """Add, remove and toggle favorite meals."""

    def __init__(self, db: Session):
        self.repository = FavoritesRepository(db)

    def list_favorites(self) -> List[Meal]:
        return self.repository.load()

    def is_favorite(self, meal_id: str) -> bool:
        return any(meal.id == meal_id for meal in self.repository.load())

    def add_favorite(self, meal: Meal) -> Meal:
        """
        Store ``meal`` as a favorite.

        Adding a meal that is already a favorite leaves the list unchanged.

        Returns:
            The stored favorite
        """
        favorites = self.repository.load()
        for existing in favorites:
            if existing.id == meal.id:
                logger.info("Meal %s already a favorite", meal.id)
                return existing

        favorite = meal.model_copy(update={"is_favorite": True})
        favorites.append(favorite)
        self.repository.save(favorites)
        logger.info("Added favorite %s (%s)", meal.id, meal.name)
        return favorite

    def remove_favorite(self, meal_id: str) -> None:
        """
        Remove every favorite with ``meal_id``.

        Raises:
            NotFoundError: If the meal is not a favorite
        """
        favorites = self.repository.load()
        remaining = [meal for meal in favorites if meal.id != meal_id]
        if len(remaining) == len(favorites):
            raise NotFoundError(f"Meal {meal_id} is not a favorite")
        self.repository.save(remaining)
        logger.info("Removed favorite %s", meal_id)

    def toggle_favorite(self, meal: Meal) -> bool:
        """Flip the favorite state of ``meal``. Returns the new state."""
        if self.is_favorite(meal.id):
            self.remove_favorite(meal.id)
            return False
        self.add_favorite(meal)
        return True
