"""
Repositories for the four persisted collections.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from repositories.base import CollectionRepository
from domain.models import StoredCollection
from domain.schemas import GroceryItem, Meal, PlannerDay, UserSettings

logger = logging.getLogger("platepilot.repositories")


class FavoritesRepository(CollectionRepository[List[Meal]]):
    """Favorite meals, in the order they were added"""

    key = "favorites"
    collection_type = List[Meal]
    default_factory = list


class PlannerRepository(CollectionRepository[List[PlannerDay]]):
    """Planner days as stored (not sorted)"""

    key = "plannerDays"
    collection_type = List[PlannerDay]
    default_factory = list


class GroceryRepository(CollectionRepository[List[GroceryItem]]):
    key = "groceryItems"
    collection_type = List[GroceryItem]
    default_factory = list


class SettingsRepository(CollectionRepository[UserSettings]):
    key = "userSettings"
    collection_type = UserSettings
    default_factory = UserSettings


COLLECTION_KEYS = (
    FavoritesRepository.key,
    PlannerRepository.key,
    GroceryRepository.key,
    SettingsRepository.key,
)


def clear_all_data(db: Session) -> int:
    """Remove every stored collection. Returns the number of documents deleted."""
    rows = (
        db.query(StoredCollection)
        .filter(StoredCollection.key.in_(COLLECTION_KEYS))
        .all()
    )
    for row in rows:
        db.delete(row)
    db.commit()
    deleted = len(rows)
    logger.info("Cleared %d stored collections", deleted)
    return deleted
