"""API routes for the grocery list."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID
import logging

from api.dependencies import get_db
from api.responses import DeletedResponse
from domain.schemas import (
    GroceryAddResult,
    GroceryItem,
    GroceryItemCreate,
    GroceryItemUpdate,
    Meal,
)
from services.grocery_service import GroceryService

router = APIRouter(prefix="/grocery", tags=["Grocery List"])
logger = logging.getLogger("platepilot.api.grocery")


@router.get("", response_model=List[GroceryItem])
def list_grocery_items(db: Session = Depends(get_db)):
    return GroceryService(db).list_items()


@router.post("", response_model=GroceryItem, status_code=status.HTTP_201_CREATED)
def add_grocery_item(request: GroceryItemCreate, db: Session = Depends(get_db)):
    """
    Add an item by hand.

    Example request:
    ```json
    {
        "name": "Olive oil",
        "quantity": "1 bottle",
        "category": "Pantry"
    }
    ```
    """
    return GroceryService(db).add_item(request.name, request.quantity, request.category)


@router.post("/from-meal", response_model=GroceryAddResult)
def add_meal_ingredients(meal: Meal, db: Session = Depends(get_db)):
    """Add a meal's ingredients, skipping names already on the list."""
    service = GroceryService(db)
    added = service.add_from_meal(meal)
    return GroceryAddResult(added=added, items=service.list_items())


@router.post("/from-planner", response_model=GroceryAddResult)
def add_planner_ingredients(db: Session = Depends(get_db)):
    """
    Derive the grocery list from the planner.

    Every ingredient of every planned meal is added once; names already on
    the list (case-insensitive) are skipped.
    """
    service = GroceryService(db)
    added = service.build_from_planner()
    return GroceryAddResult(added=added, items=service.list_items())


# Declared before /{item_id} so "completed" is not parsed as an item id
@router.delete("/completed", response_model=DeletedResponse)
def clear_completed_items(db: Session = Depends(get_db)):
    removed = GroceryService(db).clear_completed()
    return DeletedResponse(deleted="completed", count=removed)


@router.patch("/{item_id}", response_model=GroceryItem)
def update_grocery_item(
        item_id: UUID,
        update: GroceryItemUpdate,
        db: Session = Depends(get_db)
):
    """
    Mark an item purchased or not.

    Example request:
    ```json
    {
        "is_purchased": true
    }
    ```
    """
    return GroceryService(db).set_purchased(item_id, update.is_purchased)


@router.post("/{item_id}/toggle", response_model=GroceryItem)
def toggle_grocery_item(item_id: UUID, db: Session = Depends(get_db)):
    return GroceryService(db).toggle_purchased(item_id)


@router.delete("/{item_id}", response_model=DeletedResponse)
def delete_grocery_item(item_id: UUID, db: Session = Depends(get_db)):
    GroceryService(db).remove_item(item_id)
    return DeletedResponse(deleted=str(item_id))


@router.delete("", response_model=DeletedResponse)
def clear_grocery_list(db: Session = Depends(get_db)):
    GroceryService(db).clear_all()
    return DeletedResponse(deleted="grocery")
