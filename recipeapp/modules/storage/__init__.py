"""
Storage Module - Black Box Interface

Purpose: Abstract all data persistence
Interface: get(), set(), write()
Hidden: File format, load/flush mechanics

Can be replaced with any storage backend without affecting other modules.
"""

from .store import COLLECTIONS, DocumentStore, InMemoryStore, JsonFileStore, empty_document

__all__ = ["COLLECTIONS", "DocumentStore", "InMemoryStore", "JsonFileStore", "empty_document"]
