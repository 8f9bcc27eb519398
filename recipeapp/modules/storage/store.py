"""
Document store implementations.

The whole document is held in memory and rewritten wholesale on every
``write()``. Collections are plain lists of dicts; callers mutate the list
returned by ``get()`` and then call ``write()`` to persist.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

logger = logging.getLogger(__name__)

COLLECTIONS = ("users", "ingredients", "recipes")


def empty_document() -> Dict[str, List[Dict[str, Any]]]:
    """Return a document with every known collection present and empty."""
    return {name: [] for name in COLLECTIONS}


class DocumentStore(Protocol):
    """Protocol for key-value collection stores."""

    def get(self, collection: str) -> List[Dict[str, Any]]:
        """
        Get a collection by name.

        Returns:
            The live list of records; mutations are visible to later calls
        """
        ...

    def set(self, collection: str, records: List[Dict[str, Any]]) -> None:
        """Replace a collection in memory (call ``write()`` to persist)."""
        ...

    def write(self) -> None:
        """Flush the whole document to durable storage."""
        ...


class InMemoryStore:
    """Document store that never touches the filesystem."""

    def __init__(self, document: Optional[Dict[str, List[Dict[str, Any]]]] = None):
        self._data = empty_document()
        if document:
            self._data.update(copy.deepcopy(document))
        self.write_count = 0

    def get(self, collection: str) -> List[Dict[str, Any]]:
        return self._data.setdefault(collection, [])

    def set(self, collection: str, records: List[Dict[str, Any]]) -> None:
        self._data[collection] = list(records)

    def write(self) -> None:
        self.write_count += 1

    def snapshot(self) -> Dict[str, List[Dict[str, Any]]]:
        """Deep copy of the current document."""
        return copy.deepcopy(self._data)


class JsonFileStore:
    """
    Document store backed by a single JSON file.

    The file is loaded once at construction and rewritten in full by every
    ``write()``. A missing file is created with empty collections.
    """

    def __init__(self, path: str):
        """
        Initialize store.

        Args:
            path: Location of the JSON document

        Raises:
            ValueError: If the file does not hold a JSON object
        """
        self.path = Path(path)
        self._data = self._load()

    def _load(self) -> Dict[str, List[Dict[str, Any]]]:
        """Load the document from disk, creating it if absent."""
        if not self.path.exists():
            logger.info(f"Document store {self.path} not found, creating empty document")
            self._data = empty_document()
            self.write()
            return self._data

        with self.path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)

        if not isinstance(data, dict):
            raise ValueError(f"Document store {self.path} must contain a JSON object")

        for name in COLLECTIONS:
            data.setdefault(name, [])

        logger.info(
            f"Loaded document store {self.path} "
            f"({', '.join(f'{name}={len(data[name])}' for name in COLLECTIONS)})"
        )
        return data

    def get(self, collection: str) -> List[Dict[str, Any]]:
        return self._data.setdefault(collection, [])

    def set(self, collection: str, records: List[Dict[str, Any]]) -> None:
        self._data[collection] = list(records)

    def write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump(self._data, handle, indent=2)
        logger.debug(f"Wrote document store {self.path}")
