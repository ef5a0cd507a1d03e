"""Note manager façade and session state orchestration.

Updates:
  v0.3.0 - 2026-10-16 - Compose search and confirmation mixins.
  v0.2.0 - 2026-10-14 - Inject clock and identifier factory for deterministic tests.
  v0.1.0 - 2026-10-13 - Introduce NoteManager over the notes persistence adapter.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from models.note import Note, now_ms

from ..confirmation import ConfirmationGate
from .confirmation import NoteConfirmationMixin
from .editing import NoteEditingMixin
from .search import NoteSearchMixin
from .selection import NoteSelectionMixin
from .state import WorkspaceState

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..repository import NoteStorage

logger = logging.getLogger("listahan.notes")

DEFAULT_NOTE_TITLE = "Untitled Note"

__all__ = ["DEFAULT_NOTE_TITLE", "NoteManager"]


def _new_note_id() -> str:
    return uuid.uuid4().hex


class NoteManager(
    NoteSelectionMixin,
    NoteEditingMixin,
    NoteSearchMixin,
    NoteConfirmationMixin,
):
    """Own the note collection, the selection and its working copy, and pending confirmations."""

    def __init__(
        self,
        storage: NoteStorage,
        *,
        default_title: str = DEFAULT_NOTE_TITLE,
        clock: Callable[[], int] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._storage = storage
        self._default_title = default_title
        self._clock = clock or now_ms
        self._id_factory = id_factory or _new_note_id
        self._state = WorkspaceState()
        self._gate = ConfirmationGate()

    @property
    def storage(self) -> NoteStorage:
        return self._storage

    @property
    def notes(self) -> tuple[Note, ...]:
        """Return the session collection in stored order."""
        return tuple(self._state.notes)

    @property
    def selected_id(self) -> str | None:
        return self._state.selected_id

    @property
    def selected_note(self) -> Note | None:
        """Return the stored version of the selected note."""
        if self._state.selected_id is None:
            return None
        return self._state.find(self._state.selected_id)

    @property
    def working_title(self) -> str:
        return self._state.working_title

    @property
    def working_content(self) -> str:
        return self._state.working_content

    @property
    def has_unsaved_changes(self) -> bool:
        return self._state.dirty

    @property
    def save_label(self) -> str:
        """Return the label of the save action."""
        return "Save" if self._state.dirty else "Saved"

    def get_note(self, note_id: str) -> Note:
        """Return the note with *note_id* from the session collection."""
        return self._resolve_note(note_id)

    def load(self) -> list[Note]:
        """Refresh the session collection from storage."""
        notes = self._storage.load()
        self._state.notes = notes
        selected_id = self._state.selected_id
        if selected_id is not None and self._state.find(selected_id) is None:
            self._state.clear_selection()
        logger.info("Loaded %d note(s)", len(notes))
        return list(notes)

    def close(self) -> None:
        """Drop any pending confirmation before shutdown."""
        self._gate.clear()
