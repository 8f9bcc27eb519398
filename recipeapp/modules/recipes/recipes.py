import logging
from typing import Any, Dict, List, Optional, Protocol

from ..storage import DocumentStore

logger = logging.getLogger(__name__)

RECIPES_COLLECTION = "recipes"


class RecipeService(Protocol):
    """Protocol for recipe collections."""

    def replace_all(self, recipes: List[Dict[str, Any]]) -> None:
        ...

    def list(self) -> List[Dict[str, Any]]:
        ...

    def get(self, recipe_id: str) -> Optional[Dict[str, Any]]:
        ...


class RecipeModule:
    """Recipe collection kept as the plain records the client sends."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def replace_all(self, recipes: List[Dict[str, Any]]) -> None:
        """Replace the whole recipe collection and persist the store."""
        self.store.set(RECIPES_COLLECTION, recipes)
        self.store.write()
        logger.info(f"Stored {len(recipes)} recipes")

    def list(self) -> List[Dict[str, Any]]:
        return list(self.store.get(RECIPES_COLLECTION))

    def get(self, recipe_id: str) -> Optional[Dict[str, Any]]:
        for record in self.store.get(RECIPES_COLLECTION):
            if record.get("id") == recipe_id:
                return record
        return None
