"""Durable storage for the notes collection.

Updates:
  v0.2.0 - 2026-10-14 - Export NoteStorage persistence adapter.
  v0.1.0 - 2026-10-12 - Add key-value stores and repository error hierarchy.
"""

from __future__ import annotations

from .base import RepositoryError, StoreQuotaExceededError
from .kv_store import (
    KeyValueStore,
    MemoryKeyValueStore,
    SQLiteKeyValueStore,
    UnavailableKeyValueStore,
)
from .notes import DEFAULT_STORAGE_KEY, NoteStorage

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "NoteStorage",
    "RepositoryError",
    "SQLiteKeyValueStore",
    "StoreQuotaExceededError",
    "UnavailableKeyValueStore",
]
