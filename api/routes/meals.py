"""Recipe browsing and search routes"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from api.dependencies import get_db
from domain.schemas import Meal
from services.recipe_service import RecipeService

router = APIRouter(prefix="/meals", tags=["Meals"])
logger = logging.getLogger("platepilot.api.meals")


@router.get("/random", response_model=List[Meal])
def random_meals(
    count: Optional[int] = Query(None, ge=1, le=50, description="Number of meals (default: home feed size)"),
    db: Session = Depends(get_db),
):
    """
    Home feed: a batch of random meals from TheMealDB.

    If any single fetch fails the whole batch fails with 502.
    """
    return RecipeService(db).browse(count)


@router.get("/search", response_model=List[Meal])
def search_meals(
    q: str = Query(..., max_length=100, description="Meal name to search for"),
    db: Session = Depends(get_db),
):
    """Search meals by name. Returns an empty list when nothing matches."""
    meals = RecipeService(db).search(q)
    logger.info("Search %r: %d results", q, len(meals))
    return meals
