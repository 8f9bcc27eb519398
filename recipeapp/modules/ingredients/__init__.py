"""
Ingredients Module - Black Box Interface

Purpose: Deduplicate ingredients by name
Interface: get_or_add(), get(), list()
Hidden: Record layout, id assignment

Replaceable with any ingredient backend without affecting other modules.
"""

from .ingredients import Ingredient, IngredientModule, IngredientService

__all__ = ["Ingredient", "IngredientModule", "IngredientService"]
