"""Note data model definitions.

Updates:
  v0.2.1 - 2026-10-19 - Reject NaN and infinite timestamps in stored records.
  v0.2.0 - 2026-10-14 - Add strict record validation for persisted note payloads.
  v0.1.0 - 2026-10-12 - Add Note dataclass with epoch-millisecond timestamps.
"""
from __future__ import annotations

import math
import time
from dataclasses import dataclass, replace
from typing import Any


def now_ms() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def _is_timestamp(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_valid_note_record(data: object) -> bool:
    """Return True when *data* has the persisted note shape."""
    if not isinstance(data, dict):
        return False
    last_saved = data.get("lastSaved", ...)
    return (
        isinstance(data.get("id"), str)
        and isinstance(data.get("title"), str)
        and isinstance(data.get("content"), str)
        and _is_timestamp(data.get("lastModified"))
        and (last_saved is None or _is_timestamp(last_saved))
    )


@dataclass(slots=True, frozen=True)
class Note:
    """Single note persisted in the notes collection."""

    id: str
    title: str
    content: str
    last_modified: int
    last_saved: int | None = None

    @property
    def is_saved(self) -> bool:
        """Return True once the note has been durably written by an explicit save."""
        return self.last_saved is not None

    def with_changes(self, **changes: Any) -> Note:
        """Return a copy of the note with *changes* applied."""
        return replace(self, **changes)

    def to_record(self) -> dict[str, Any]:
        """Return the mapping stored in the notes slot."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "lastModified": self.last_modified,
            "lastSaved": self.last_saved,
        }

    @classmethod
    def from_record(cls, data: dict[str, Any]) -> Note:
        """Hydrate a Note from a validated stored mapping."""
        last_saved = data.get("lastSaved")
        return cls(
            id=data["id"],
            title=data["title"],
            content=data["content"],
            last_modified=int(data["lastModified"]),
            last_saved=None if last_saved is None else int(last_saved),
        )


__all__ = ["Note", "is_valid_note_record", "now_ms"]
