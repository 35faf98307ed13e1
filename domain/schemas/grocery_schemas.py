"""Schemas for the grocery list"""

import uuid
from typing import List
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

DEFAULT_CATEGORY = "Other"


class GroceryItem(BaseModel):
    id: UUID = Field(default_factory=uuid.uuid4)
    name: str = Field(..., min_length=1)
    quantity: str = ""
    category: str = DEFAULT_CATEGORY
    is_purchased: bool = False


class GroceryItemCreate(BaseModel):
    """Manual entry on the grocery list"""

    name: str = Field(..., min_length=1, max_length=200)
    quantity: str = Field(default="", max_length=100)
    category: str = Field(default=DEFAULT_CATEGORY, max_length=100)

    @field_validator("name", "category")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class GroceryItemUpdate(BaseModel):
    is_purchased: bool


class GroceryAddResult(BaseModel):
    """Items appended by a bulk add, plus the resulting list"""

    added: List[GroceryItem]
    items: List[GroceryItem]
