"""Key-value stores backing the notes slot.

The notes collection lives under a single key as one serialised string. Stores
expose an explicit availability check so callers never probe the runtime to
decide whether durable storage exists.

Updates:
  v0.2.0 - 2026-10-13 - Enforce optional byte quotas on writes.
  v0.1.0 - 2026-10-12 - Add SQLite, in-memory, and unavailable stores.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Protocol, runtime_checkable

from .base import (
    RepositoryError,
    StoreQuotaExceededError,
    connect as _connect,
    encoded_size as _encoded_size,
    ensure_directory as _ensure_directory,
    logger,
)


@runtime_checkable
class KeyValueStore(Protocol):
    """String key-value slot storage."""

    def is_available(self) -> bool:
        """Return True when the store can be read from and written to."""
        ...

    def get_item(self, key: str) -> str | None:
        """Return the value stored under *key*, or None when absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove *key* when present."""
        ...


def _check_quota(quota_bytes: int | None, other_bytes: int, value: str, key: str) -> None:
    if quota_bytes is None:
        return
    required = other_bytes + _encoded_size(key) + _encoded_size(value)
    if required > quota_bytes:
        raise StoreQuotaExceededError(
            f"Writing {key!r} needs {required} bytes; quota is {quota_bytes} bytes"
        )


class SQLiteKeyValueStore:
    """Persist key-value pairs in a single SQLite table."""

    def __init__(self, db_path: str | Path, *, quota_bytes: int | None = None) -> None:
        """Initialise the database file and ensure the schema exists."""
        self._db_path = Path(db_path)
        self._quota_bytes = quota_bytes
        _ensure_directory(self._db_path)
        try:
            with _connect(self._db_path) as conn:
                conn.execute(
                    "CREATE TABLE IF NOT EXISTS kv_items ("
                    "key TEXT PRIMARY KEY, value TEXT NOT NULL);"
                )
        except sqlite3.Error as exc:
            raise RepositoryError(f"Failed to initialise key-value store at {db_path}") from exc

    @property
    def db_path(self) -> Path:
        """Return the SQLite database location."""
        return self._db_path

    def is_available(self) -> bool:
        return self._db_path.exists()

    def get_item(self, key: str) -> str | None:
        try:
            with _connect(self._db_path) as conn:
                row = conn.execute(
                    "SELECT value FROM kv_items WHERE key = ?;", (key,)
                ).fetchone()
        except sqlite3.Error as exc:
            raise RepositoryError(f"Failed to read key {key!r}") from exc
        return None if row is None else str(row["value"])

    def set_item(self, key: str, value: str) -> None:
        try:
            with _connect(self._db_path) as conn:
                if self._quota_bytes is not None:
                    (other_bytes,) = conn.execute(
                        "SELECT COALESCE(SUM(LENGTH(CAST(key AS BLOB)) "
                        "+ LENGTH(CAST(value AS BLOB))), 0) FROM kv_items WHERE key != ?;",
                        (key,),
                    ).fetchone()
                    _check_quota(self._quota_bytes, int(other_bytes), value, key)
                conn.execute(
                    "INSERT INTO kv_items (key, value) VALUES (?, ?) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value;",
                    (key, value),
                )
        except sqlite3.Error as exc:
            raise RepositoryError(f"Failed to write key {key!r}") from exc
        logger.debug("KV_WRITE key=%s bytes=%d", key, _encoded_size(value))

    def remove_item(self, key: str) -> None:
        try:
            with _connect(self._db_path) as conn:
                conn.execute("DELETE FROM kv_items WHERE key = ?;", (key,))
        except sqlite3.Error as exc:
            raise RepositoryError(f"Failed to remove key {key!r}") from exc


class MemoryKeyValueStore:
    """Process-local key-value store for ephemeral sessions and tests."""

    def __init__(self, *, quota_bytes: int | None = None) -> None:
        self._items: dict[str, str] = {}
        self._quota_bytes = quota_bytes

    def is_available(self) -> bool:
        return True

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        other_bytes = sum(
            _encoded_size(item_key) + _encoded_size(item_value)
            for item_key, item_value in self._items.items()
            if item_key != key
        )
        _check_quota(self._quota_bytes, other_bytes, value, key)
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class UnavailableKeyValueStore:
    """Stand-in used when no durable store is present."""

    def is_available(self) -> bool:
        return False

    def get_item(self, key: str) -> str | None:
        return None

    def set_item(self, key: str, value: str) -> None:
        raise RepositoryError("No durable store is available")

    def remove_item(self, key: str) -> None:
        raise RepositoryError("No durable store is available")


__all__ = [
    "KeyValueStore",
    "MemoryKeyValueStore",
    "SQLiteKeyValueStore",
    "UnavailableKeyValueStore",
]
