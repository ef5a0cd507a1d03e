"""Session state held by the note manager.

Updates:
  v0.1.0 - 2026-10-13 - Extract workspace state from the manager façade.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from models.note import Note

__all__ = ["WorkspaceState"]


@dataclass(slots=True)
class WorkspaceState:
    """In-memory mirror of the collection plus the selected note's working copy."""

    notes: list[Note] = field(default_factory=list)
    selected_id: str | None = None
    working_title: str = ""
    working_content: str = ""
    dirty: bool = False
    search_query: str = ""

    def find(self, note_id: str) -> Note | None:
        """Return the note with *note_id* when present."""
        for note in self.notes:
            if note.id == note_id:
                return note
        return None

    def load_working_copy(self, note: Note) -> None:
        """Select *note* with a clean working copy."""
        self.selected_id = note.id
        self.working_title = note.title
        self.working_content = note.content
        self.dirty = False

    def clear_selection(self) -> None:
        self.selected_id = None
        self.working_title = ""
        self.working_content = ""
        self.dirty = False
