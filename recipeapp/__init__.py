"""
Recipe App - Recipe Management Backend

A small backend for managing users, recipes and ingredients.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are completely replaceable
- No module knows the internals of another
- All communication through defined interfaces

Modules:
- auth: Password hashing, token issuance and verification
- storage: Document store abstraction
- users: User directory
- ingredients: Ingredient directory (get-or-add)
- recipes: Recipe collection
- middleware: Bearer token enforcement
- api: REST API models and application
"""

__version__ = "1.0.0"
