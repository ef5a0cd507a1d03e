"""Key-value store tests.

Updates: v0.1.0 - 2026-10-13 - Cover SQLite/memory stores and byte quotas.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from core.repository import (
    KeyValueStore,
    MemoryKeyValueStore,
    RepositoryError,
    SQLiteKeyValueStore,
    StoreQuotaExceededError,
    UnavailableKeyValueStore,
)


def test_sqlite_store_roundtrip(tmp_path: Path) -> None:
    store = SQLiteKeyValueStore(tmp_path / "nested" / "kv.db")
    assert store.is_available()
    assert store.get_item("notes") is None

    store.set_item("notes", "[]")
    store.set_item("notes", '[{"title": "Ünïcödé"}]')
    assert store.get_item("notes") == '[{"title": "Ünïcödé"}]'

    store.remove_item("notes")
    assert store.get_item("notes") is None


def test_sqlite_store_persists_across_instances(tmp_path: Path) -> None:
    db_path = tmp_path / "kv.db"
    SQLiteKeyValueStore(db_path).set_item("notes", "payload")
    assert SQLiteKeyValueStore(db_path).get_item("notes") == "payload"


def test_sqlite_store_enforces_quota(tmp_path: Path) -> None:
    store = SQLiteKeyValueStore(tmp_path / "kv.db", quota_bytes=20)
    store.set_item("notes", "x" * 10)
    with pytest.raises(StoreQuotaExceededError):
        store.set_item("notes", "x" * 30)
    assert store.get_item("notes") == "x" * 10


def test_memory_store_quota_counts_other_keys() -> None:
    store = MemoryKeyValueStore(quota_bytes=16)
    store.set_item("a", "1234567")
    store.set_item("b", "123456")
    with pytest.raises(StoreQuotaExceededError):
        store.set_item("c", "1")
    # Replacing an existing key only counts the new value.
    store.set_item("a", "12")
    store.set_item("c", "1")


def test_quota_error_is_repository_error() -> None:
    assert issubclass(StoreQuotaExceededError, RepositoryError)


def test_unavailable_store_rejects_writes() -> None:
    store = UnavailableKeyValueStore()
    assert not store.is_available()
    assert store.get_item("notes") is None
    with pytest.raises(RepositoryError):
        store.set_item("notes", "[]")
    with pytest.raises(RepositoryError):
        store.remove_item("notes")


@pytest.mark.parametrize(
    "store_factory",
    [MemoryKeyValueStore, UnavailableKeyValueStore],
)
def test_stores_satisfy_protocol(store_factory) -> None:
    assert isinstance(store_factory(), KeyValueStore)
