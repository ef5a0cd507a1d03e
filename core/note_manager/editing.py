"""Create, edit, and save workflows for the note manager.

Updates:
  v0.2.0 - 2026-10-15 - Keep in-memory state untouched when a write fails.
  v0.1.0 - 2026-10-13 - Extract note editing APIs into mixin.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from models.note import Note

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..repository import NoteStorage
    from .state import WorkspaceState

logger = logging.getLogger("listahan.notes")

__all__ = ["NoteEditingMixin"]


class NoteEditingMixin:
    """Working-copy edits and explicit saves for the selected note."""

    _state: WorkspaceState
    _storage: NoteStorage
    _clock: Callable[[], int]
    _id_factory: Callable[[], str]
    _default_title: str

    def create_note(self) -> Note:
        """Create, persist, and select a new empty note.

        The note is prepended to the collection and starts unsaved
        (``last_saved`` is ``None``). Raises ``NoteStorageError`` when the write
        fails, leaving the collection and selection unchanged.
        """
        timestamp = self._clock()
        note = Note(
            id=self._unique_id(),
            title=self._default_title,
            content="",
            last_modified=timestamp,
            last_saved=None,
        )
        notes = [note, *self._state.notes]
        self._storage.save_all(notes)
        self._state.notes = notes
        self._state.load_working_copy(note)
        logger.info("Created note %s", note.id)
        return note

    def edit_title(self, text: str) -> None:
        """Update the working title of the selected note."""
        if self._state.selected_id is None:
            return
        self._state.working_title = text
        self._state.dirty = True

    def edit_content(self, text: str) -> None:
        """Update the working content of the selected note."""
        if self._state.selected_id is None:
            return
        self._state.working_content = text
        self._state.dirty = True

    def save_selected(self) -> Note | None:
        """Persist the working copy of the selected note.

        Returns the saved note, or ``None`` when nothing is selected. Raises
        ``NoteStorageError`` when the write fails; the note then stays dirty.
        """
        selected_id = self._state.selected_id
        if selected_id is None:
            return None
        current = self._state.find(selected_id)
        if current is None:
            self._state.clear_selection()
            return None
        timestamp = max(self._clock(), current.last_modified)
        updated = current.with_changes(
            title=self._state.working_title,
            content=self._state.working_content,
            last_modified=timestamp,
            last_saved=timestamp,
        )
        notes = [updated if note.id == updated.id else note for note in self._state.notes]
        self._storage.save_all(notes)
        self._state.notes = notes
        self._state.dirty = False
        logger.info("Saved note %s", updated.id)
        return updated

    def _unique_id(self) -> str:
        existing = {note.id for note in self._state.notes}
        candidate = self._id_factory()
        while candidate in existing:
            candidate = self._id_factory()
        return candidate
