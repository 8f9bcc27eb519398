import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from ..storage import DocumentStore

logger = logging.getLogger(__name__)

INGREDIENTS_COLLECTION = "ingredients"


@dataclass(frozen=True)
class Ingredient:
    """Stored ingredient record."""

    id: int
    name: str

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Ingredient":
        return cls(id=record["id"], name=record["name"])

    def to_record(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}


class IngredientService(Protocol):
    """Protocol for ingredient directories."""

    def get_or_add(self, name: str) -> Ingredient:
        ...

    def get(self, ingredient_id: int) -> Optional[Ingredient]:
        ...

    def list(self) -> List[Ingredient]:
        ...


class IngredientModule:
    def __init__(self, store: DocumentStore):
        """
        Initialize ingredient module.

        Args:
            store: Document store holding the ``ingredients`` collection
        """
        self.store = store

    def _ingredients(self) -> List[Dict[str, Any]]:
        return self.store.get(INGREDIENTS_COLLECTION)

    def get_or_add(self, name: str) -> Ingredient:
        """
        Look up an ingredient by exact name, creating it when absent.

        Args:
            name: Ingredient name (case and whitespace sensitive)

        Returns:
            The existing ingredient, or the newly created one

        Logic:
        1. Return the first record whose name matches exactly
        2. Otherwise assign id as max(existing ids) + 1, or 1 when empty
        3. Append the record and persist the store
        """
        ingredients = self._ingredients()
        for record in ingredients:
            if record.get("name") == name:
                return Ingredient.from_record(record)

        next_id = max((record["id"] for record in ingredients), default=0) + 1
        ingredient = Ingredient(id=next_id, name=name)

        ingredients.append(ingredient.to_record())
        self.store.write()

        logger.info(f"Created ingredient '{name}' with id {next_id}")
        return ingredient

    def get(self, ingredient_id: int) -> Optional[Ingredient]:
        for record in self._ingredients():
            if record.get("id") == ingredient_id:
                return Ingredient.from_record(record)
        return None

    def list(self) -> List[Ingredient]:
        return [Ingredient.from_record(record) for record in self._ingredients()]
