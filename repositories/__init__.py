"""
Repositories package - Data access layer.
"""

from repositories.base import CollectionRepository
from repositories.collection_repository import (
    FavoritesRepository,
    PlannerRepository,
    GroceryRepository,
    SettingsRepository,
    COLLECTION_KEYS,
    clear_all_data,
)

__all__ = [
    "CollectionRepository",
    "FavoritesRepository",
    "PlannerRepository",
    "GroceryRepository",
    "SettingsRepository",
    "COLLECTION_KEYS",
    "clear_all_data",
]
