"""Shared repository helpers and error hierarchy.

Updates:
  v0.2.0 - 2026-10-13 - Add quota error for key-value stores.
  v0.1.0 - 2026-10-12 - Extract logger, connection helper, and exceptions.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger("listahan.repository")


class RepositoryError(Exception):
    """Base exception for repository failures."""


class StoreQuotaExceededError(RepositoryError):
    """Raised when a write would grow the store past its byte quota."""


def ensure_directory(path: Path) -> None:
    """Ensure the directory for the SQLite database exists."""
    path.parent.mkdir(parents=True, exist_ok=True)


def connect(db_path: Path) -> sqlite3.Connection:
    """Return a configured SQLite connection."""
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode = WAL;")
    conn.execute("PRAGMA synchronous = NORMAL;")
    return conn


def encoded_size(value: str) -> int:
    """Return the UTF-8 size of *value* in bytes."""
    return len(value.encode("utf-8"))


__all__ = [
    "RepositoryError",
    "StoreQuotaExceededError",
    "connect",
    "encoded_size",
    "ensure_directory",
    "logger",
]
