from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class RecipeCreate(BaseModel):
    """A validated, normalized recipe as accepted by POST and PUT."""

    title: str = Field(..., json_schema_extra={"example": "Café Crème"})
    category: str = Field(..., json_schema_extra={"example": "Drinks"})
    subcategory: str = Field(
        "", json_schema_extra={"example": "Nicht-alkoholische Getränke"}
    )
    servings: int = Field(1, ge=1, json_schema_extra={"example": 2})
    prep: str = Field(..., json_schema_extra={"example": "5 min"})
    total: str = Field(..., json_schema_extra={"example": "10 min"})
    ingredients: List[str] = Field(
        ..., min_length=1, json_schema_extra={"example": ["espresso", "milk"]}
    )
    steps: List[str] = Field(
        ...,
        min_length=1,
        json_schema_extra={"example": ["Brew espresso", "Add foamed milk"]},
    )


class Recipe(BaseModel):
    """A stored row as it is in the table; lists stay JSON-encoded and
    every column but ``id`` may be NULL."""

    id: str
    title: Optional[str] = None
    category: Optional[str] = None
    subcategory: Optional[str] = None
    servings: Optional[int] = None
    prep: Optional[str] = None
    total: Optional[str] = None
    ingredients_json: Optional[str] = None
    steps_json: Optional[str] = None
    created_at: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)


class Saved(BaseModel):
    ok: bool = True
    id: str


class Deleted(BaseModel):
    ok: bool = True
