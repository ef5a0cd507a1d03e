"""Factories for constructing NoteManager instances from validated settings.

Updates:
  v0.2.0 - 2026-10-16 - Honour storage quota and compaction settings.
  v0.1.0 - 2026-10-13 - Build store, persistence adapter, and manager from settings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .note_manager import NoteManager
from .repository import (
    KeyValueStore,
    MemoryKeyValueStore,
    NoteStorage,
    RepositoryError,
    SQLiteKeyValueStore,
    UnavailableKeyValueStore,
)

if TYPE_CHECKING:  # pragma: no cover - typing only
    from config import ListahanSettings
else:  # pragma: no cover - typing only
    ListahanSettings = Any

factory_logger = logging.getLogger("listahan.factory")


def build_key_value_store(settings: ListahanSettings) -> KeyValueStore:
    """Return the durable store configured by *settings*.

    A SQLite store that cannot be opened degrades to an unavailable store so the
    workspace still starts with an empty collection.
    """
    quota = settings.storage_quota_bytes
    if settings.storage_backend == "memory":
        return MemoryKeyValueStore(quota_bytes=quota)
    try:
        return SQLiteKeyValueStore(settings.db_path, quota_bytes=quota)
    except (RepositoryError, OSError) as exc:
        factory_logger.warning(
            "Durable store unavailable at %s: %s", settings.db_path, exc
        )
        return UnavailableKeyValueStore()


def build_note_manager(
    settings: ListahanSettings,
    *,
    store: KeyValueStore | None = None,
) -> NoteManager:
    """Return a NoteManager wired from *settings* with its collection loaded."""
    resolved_store = store if store is not None else build_key_value_store(settings)
    storage = NoteStorage(
        resolved_store,
        key=settings.storage_key,
        compact_on_load=settings.compact_on_load,
    )
    manager = NoteManager(storage, default_title=settings.default_note_title)
    manager.load()
    return manager


__all__ = ["build_key_value_store", "build_note_manager"]
