"""
API Module - Black Box Interface

Purpose: HTTP request and response models
Interface: Pydantic models for REST API bodies
Hidden: Wire field naming, validation rules

The API layer only orchestrates - it contains no business logic.
All logic is delegated to appropriate modules.
"""

from .models import (
    AuthRequest,
    AuthResponse,
    GenericResponse,
    IngredientModel,
    IngredientRequest,
    Recipe,
    RecipeItem,
    RecipePhase,
    RecipeUnit,
    UserResponse,
)

__all__ = [
    "AuthRequest",
    "AuthResponse",
    "GenericResponse",
    "IngredientModel",
    "IngredientRequest",
    "Recipe",
    "RecipeItem",
    "RecipePhase",
    "RecipeUnit",
    "UserResponse",
]
