"""Grocery list service"""

import logging
from typing import Iterable, List
from uuid import UUID

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from domain.schemas import DEFAULT_CATEGORY, GroceryItem, Meal
from repositories import GroceryRepository
from services.planner_service import PlannerService

logger = logging.getLogger("platepilot.grocery")


class GroceryService:
    """Business logic for the grocery list."""

    def __init__(self, db: Session):
        self.db = db
        self.repository = GroceryRepository(db)

    def list_items(self) -> List[GroceryItem]:
        return self.repository.load()

    def add_item(self, name: str, quantity: str = "", category: str = DEFAULT_CATEGORY) -> GroceryItem:
        """Add a manual entry. Duplicates are allowed here."""
        items = self.repository.load()
        item = GroceryItem(name=name, quantity=quantity, category=category)
        items.append(item)
        self.repository.save(items)
        logger.info("Added grocery item %s (%s)", item.name, item.id)
        return item

    def add_from_meal(self, meal: Meal) -> List[GroceryItem]:
        """
        Add a meal's ingredients to the list.

        Ingredients whose name (case-insensitive) is already on the list are
        skipped, so adding the same meal twice is a no-op.

        Returns:
            The items that were added
        """
        return self._add_ingredients_of([meal])

    def build_from_planner(self) -> List[GroceryItem]:
        """Add the ingredients of every planned meal. Returns the added items."""
        meals = PlannerService(self.db).planned_meals()
        logger.info("Building grocery list from %d planned meals", len(meals))
        return self._add_ingredients_of(meals)

    def _add_ingredients_of(self, meals: Iterable[Meal]) -> List[GroceryItem]:
        items = self.repository.load()
        seen = {item.name.lower() for item in items}
        added: List[GroceryItem] = []

        for meal in meals:
            for ingredient in meal.ingredients:
                key = ingredient.name.lower()
                if key in seen:
                    continue
                seen.add(key)
                added.append(
                    GroceryItem(
                        name=ingredient.name,
                        quantity=ingredient.quantity_description,
                        category=DEFAULT_CATEGORY,
                    )
                )

        if added:
            self.repository.save(items + added)
        logger.info("Added %d grocery items", len(added))
        return added

    def set_purchased(self, item_id: UUID, is_purchased: bool) -> GroceryItem:
        items = self.repository.load()
        item = self._find(items, item_id)
        item.is_purchased = is_purchased
        self.repository.save(items)
        return item

    def toggle_purchased(self, item_id: UUID) -> GroceryItem:
        items = self.repository.load()
        item = self._find(items, item_id)
        item.is_purchased = not item.is_purchased
        self.repository.save(items)
        return item

    def remove_item(self, item_id: UUID) -> None:
        items = self.repository.load()
        item = self._find(items, item_id)
        self.repository.save([i for i in items if i.id != item.id])
        logger.info("Removed grocery item %s", item_id)

    def clear_completed(self) -> int:
        """Drop purchased items. Returns how many were removed."""
        items = self.repository.load()
        remaining = [item for item in items if not item.is_purchased]
        self.repository.save(remaining)
        removed = len(items) - len(remaining)
        logger.info("Cleared %d purchased grocery items", removed)
        return removed

    def clear_all(self) -> None:
        self.repository.save([])
        logger.info("Grocery list cleared")

    @staticmethod
    def _find(items: List[GroceryItem], item_id: UUID) -> GroceryItem:
        for item in items:
            if item.id == item_id:
                return item
        raise NotFoundError(f"Grocery item {item_id} not found")
