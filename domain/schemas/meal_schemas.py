"""Schemas for meals and their ingredients"""

from typing import Iterable, List, Optional

from pydantic import BaseModel, Field, computed_field


class Ingredient(BaseModel):
    """One ingredient line of a recipe"""

    name: str = Field(..., min_length=1)
    quantity_description: str = Field(default="To taste")
    is_checked_for_grocery: bool = False


class Meal(BaseModel):
    """A recipe as shown in the feed, on the planner and in favorites"""

    id: str = Field(..., min_length=1, description="TheMealDB idMeal")
    name: str
    image_url: Optional[str] = None
    instructions: str = "No instructions available."
    ingredients: List[Ingredient] = Field(default_factory=list)
    calories: int = Field(default=0, ge=0)
    estimated_cost: float = Field(default=0.0, ge=0)
    cook_time_minutes: int = Field(default=0, ge=0)
    is_favorite: bool = False

    @computed_field
    @property
    def calories_label(self) -> str:
        return f"{self.calories} cal"

    @computed_field
    @property
    def cost_label(self) -> str:
        return f"${self.estimated_cost:.2f}"

    @computed_field
    @property
    def cook_time_label(self) -> str:
        return f"{self.cook_time_minutes} min"


class FavoriteStatus(BaseModel):
    meal_id: str
    is_favorite: bool


def total_calories(meals: Iterable[Meal]) -> int:
    return sum(meal.calories for meal in meals)


def total_cost(meals: Iterable[Meal]) -> float:
    return sum((meal.estimated_cost for meal in meals), 0.0)
