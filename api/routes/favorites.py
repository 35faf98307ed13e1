"""Favorite meal routes"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.responses import DeletedResponse
from domain.schemas import FavoriteStatus, Meal
from services.favorites_service import FavoritesService

router = APIRouter(prefix="/favorites", tags=["Favorites"])
logger = logging.getLogger("platepilot.api.favorites")


@router.get("", response_model=List[Meal])
def list_favorites(db: Session = Depends(get_db)):
    return FavoritesService(db).list_favorites()


@router.post("", response_model=Meal, status_code=status.HTTP_201_CREATED)
def add_favorite(meal: Meal, db: Session = Depends(get_db)):
    """
    Mark a meal as favorite.

    The full meal is stored so favorites can be shown without calling
    TheMealDB again. Posting a meal that is already a favorite is a no-op.
    """
    return FavoritesService(db).add_favorite(meal)


@router.post("/toggle", response_model=FavoriteStatus)
def toggle_favorite(meal: Meal, db: Session = Depends(get_db)):
    is_favorite = FavoritesService(db).toggle_favorite(meal)
    return FavoriteStatus(meal_id=meal.id, is_favorite=is_favorite)


@router.get("/{meal_id}", response_model=FavoriteStatus)
def favorite_status(meal_id: str, db: Session = Depends(get_db)):
    return FavoriteStatus(meal_id=meal_id, is_favorite=FavoritesService(db).is_favorite(meal_id))


@router.delete("/{meal_id}", response_model=DeletedResponse)
def remove_favorite(meal_id: str, db: Session = Depends(get_db)):
    FavoritesService(db).remove_favorite(meal_id)
    return DeletedResponse(deleted=meal_id)
