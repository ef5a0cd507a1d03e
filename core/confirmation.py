"""Single-slot confirmation gate for discarding and destructive actions.

Updates:
  v0.1.1 - 2026-10-16 - Let a new request replace the pending one.
  v0.1.0 - 2026-10-13 - Introduce pending confirmation and dialog prompt models.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from models.note import Note

logger = logging.getLogger("listahan.confirmation")

__all__ = [
    "ConfirmationGate",
    "ConfirmationIntent",
    "ConfirmationPrompt",
    "PendingConfirmation",
]


class ConfirmationIntent(str, Enum):
    """Action held until the user confirms or cancels."""

    SWITCH = "switch"
    DELETE = "delete"


@dataclass(slots=True, frozen=True)
class ConfirmationPrompt:
    """Text shown by the confirmation dialog."""

    title: str
    message: str
    confirm_text: str
    cancel_text: str = "Cancel"


_PROMPTS: dict[ConfirmationIntent, ConfirmationPrompt] = {
    ConfirmationIntent.DELETE: ConfirmationPrompt(
        title="Delete Note",
        message="Are you sure you want to delete this note? This action cannot be undone.",
        confirm_text="Delete",
    ),
    ConfirmationIntent.SWITCH: ConfirmationPrompt(
        title="Unsaved Changes",
        message="You have unsaved changes. Do you want to discard them?",
        confirm_text="Discard",
    ),
}


@dataclass(slots=True, frozen=True)
class PendingConfirmation:
    """A held user decision targeting a single note."""

    target: Note
    intent: ConfirmationIntent

    def prompt(self) -> ConfirmationPrompt:
        """Return the dialog text for this confirmation."""
        return _PROMPTS[self.intent]


class ConfirmationGate:
    """Hold at most one pending confirmation."""

    def __init__(self) -> None:
        self._pending: PendingConfirmation | None = None

    @property
    def pending(self) -> PendingConfirmation | None:
        return self._pending

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    @property
    def state(self) -> str:
        """Return ``"pending"`` or ``"idle"``."""
        return "pending" if self._pending is not None else "idle"

    def request(self, target: Note, intent: ConfirmationIntent) -> PendingConfirmation:
        """Hold *intent* for *target*; a newer request replaces an older one."""
        if self._pending is not None:
            logger.debug(
                "Replacing pending %s confirmation for note %s",
                self._pending.intent.value,
                self._pending.target.id,
            )
        self._pending = PendingConfirmation(target=target, intent=intent)
        return self._pending

    def clear(self) -> PendingConfirmation | None:
        """Drop and return the pending confirmation."""
        pending, self._pending = self._pending, None
        return pending
