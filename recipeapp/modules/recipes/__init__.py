"""
Recipes Module - Black Box Interface

Purpose: Hold the recipe collection
Interface: replace_all(), list(), get()
Hidden: Storage layout

Replaceable with any recipe backend without affecting other modules.
"""

from .recipes import RecipeModule, RecipeService

__all__ = ["RecipeModule", "RecipeService"]
