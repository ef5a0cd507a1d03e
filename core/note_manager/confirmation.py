"""Confirmation workflows for the note manager.

Updates:
  v0.2.1 - 2026-10-19 - Keep the note when storage cannot be read before deleting.
  v0.2.0 - 2026-10-16 - Return the gate to idle even when a confirmed delete fails.
  v0.1.0 - 2026-10-13 - Route delete and discard decisions through the gate.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..confirmation import ConfirmationGate, ConfirmationIntent, PendingConfirmation

if TYPE_CHECKING:
    from models.note import Note

    from ..repository import NoteStorage
    from .state import WorkspaceState

logger = logging.getLogger("listahan.notes")

__all__ = ["NoteConfirmationMixin"]


class NoteConfirmationMixin:
    """Raise, confirm, and cancel pending confirmations."""

    _state: WorkspaceState
    _storage: NoteStorage
    _gate: ConfirmationGate

    @property
    def pending_confirmation(self) -> PendingConfirmation | None:
        return self._gate.pending

    def request_delete(self, target: Note | str) -> PendingConfirmation:
        """Hold a ``delete`` confirmation for *target*."""
        note = self._resolve_note(target)  # type: ignore[attr-defined]
        return self._gate.request(note, ConfirmationIntent.DELETE)

    def cancel(self) -> PendingConfirmation | None:
        """Dismiss the pending confirmation without touching notes or selection."""
        return self._gate.clear()

    def confirm(self) -> PendingConfirmation | None:
        """Carry out the pending action and return it, or ``None`` when idle.

        Raises ``NoteStorageError`` when a confirmed delete cannot read or write
        the notes slot; the note then stays in the collection. The gate returns
        to idle either way.
        """
        pending = self._gate.clear()
        if pending is None:
            return None
        if pending.intent is ConfirmationIntent.DELETE:
            self._delete_confirmed(pending.target)
        else:
            self._switch_confirmed(pending.target)
        return pending

    def _delete_confirmed(self, target: Note) -> None:
        removed = self._storage.delete_one(target.id)
        if not removed:
            logger.info("Note %s was not in storage; removing from session only", target.id)
        self._state.notes = [note for note in self._state.notes if note.id != target.id]
        if self._state.selected_id == target.id:
            self._state.clear_selection()
        logger.info("Deleted note %s", target.id)

    def _switch_confirmed(self, target: Note) -> None:
        stored = self._state.find(target.id)
        if stored is None:
            logger.info("Note %s disappeared before switching; clearing selection", target.id)
            self._state.clear_selection()
            return
        self._state.load_working_copy(stored)
