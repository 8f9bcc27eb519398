"""
Recipe App shared data models.

These models define the JSON bodies accepted and returned by the REST API.
Field names on the wire are camelCase. Recipe documents accept fields beyond
the declared ones and keep them as sent.
"""

from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Enums


class RecipeUnit(str, Enum):
    """Measurement unit of a recipe item."""

    PCS = "pcs"
    KG = "kg"
    GRAMS = "g"
    CUP = "cup(s)"
    TEA_SPOON = "tsp"


# Request Models (API Input)


class AuthRequest(BaseModel):
    """Credentials for login and signup."""

    username: Optional[str] = None
    password: Optional[str] = None


class IngredientRequest(BaseModel):
    """Ingredient names to look up or create."""

    model_config = ConfigDict(populate_by_name=True)

    ingredient_names: Optional[List[str]] = Field(None, alias="ingredientNames")


class IngredientModel(BaseModel):
    """Ingredient as sent and returned over the API."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str


class RecipeItem(BaseModel):
    """Single item of a recipe."""

    model_config = ConfigDict(extra="allow")

    ordinal: int
    ingredient: IngredientModel
    amount: Union[int, float]
    unit: RecipeUnit


class RecipePhase(BaseModel):
    """A single preparation phase on recipe."""

    model_config = ConfigDict(extra="allow")

    name: str
    items: List[RecipeItem] = Field(default_factory=list)


class Recipe(BaseModel):
    """Full recipe document."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    name: str
    description: str = ""
    image_url: str = Field("", alias="imageUrl")
    phases: List[RecipePhase] = Field(default_factory=list)


# Response Models (API Output)


class AuthResponse(BaseModel):
    """Bearer token issued on login or signup."""

    token: str


class GenericResponse(BaseModel):
    """Uniform status body for acknowledgements and errors."""

    status: Literal["OK", "ERROR"]
    error: Optional[str] = None


class UserResponse(BaseModel):
    """User record without secret fields."""

    id: int
    username: str
