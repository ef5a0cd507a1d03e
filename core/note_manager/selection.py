"""Note selection helpers for the note manager.

Updates:
  v0.1.0 - 2026-10-13 - Extract selection switching into mixin.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from models.note import Note

from ..confirmation import ConfirmationGate, ConfirmationIntent, PendingConfirmation
from ..exceptions import NoteNotFoundError

if TYPE_CHECKING:
    from .state import WorkspaceState

logger = logging.getLogger("listahan.notes")

__all__ = ["NoteSelectionMixin"]


class NoteSelectionMixin:
    """Switch the selected note, routing through the gate when edits are unsaved."""

    _state: WorkspaceState
    _gate: ConfirmationGate

    def select_note(self, target: Note | str) -> PendingConfirmation | None:
        """Select *target* or hold a ``switch`` confirmation when edits are unsaved.

        Returns the pending confirmation when the switch was blocked, otherwise
        ``None``. The working copy and selection are untouched while blocked.
        """
        note = self._resolve_note(target)
        if self._state.selected_id is not None and self._state.dirty:
            logger.debug("Blocking switch to note %s: unsaved changes", note.id)
            return self._gate.request(note, ConfirmationIntent.SWITCH)
        self._state.load_working_copy(note)
        return None

    def _resolve_note(self, target: Note | str) -> Note:
        note_id = target.id if isinstance(target, Note) else target
        note = self._state.find(note_id)
        if note is None:
            raise NoteNotFoundError(f"Note {note_id} not found")
        return note
