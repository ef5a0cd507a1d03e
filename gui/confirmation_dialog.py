"""Confirmation dialog for discarding edits and deleting notes.

Updates:
  v0.1.0 - 2026-10-16 - Render confirmation prompts with custom button labels.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QMessageBox, QPushButton, QWidget

if TYPE_CHECKING:
    from core import ConfirmationPrompt


class ConfirmationDialog(QMessageBox):
    """Modal yes/no dialog driven by a :class:`~core.ConfirmationPrompt`.

    Escape and the close button resolve to cancel, so every appearance ends in
    exactly one of confirm or cancel.
    """

    def __init__(self, prompt: ConfirmationPrompt, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setIcon(QMessageBox.Icon.Warning)
        self.setWindowTitle(prompt.title)
        self.setText(prompt.title)
        self.setInformativeText(prompt.message)
        self._confirm_button: QPushButton = self.addButton(
            prompt.confirm_text, QMessageBox.ButtonRole.DestructiveRole
        )
        self._cancel_button: QPushButton = self.addButton(
            prompt.cancel_text, QMessageBox.ButtonRole.RejectRole
        )
        self.setDefaultButton(self._cancel_button)
        self.setEscapeButton(self._cancel_button)

    @property
    def confirm_button(self) -> QPushButton:
        return self._confirm_button

    @property
    def cancel_button(self) -> QPushButton:
        return self._cancel_button

    def ask(self) -> bool:
        """Show the dialog modally and return True when the user confirmed."""
        self.exec()
        return self.clickedButton() is self._confirm_button


def ask_confirmation(prompt: ConfirmationPrompt, parent: QWidget | None = None) -> bool:
    """Return True when the user confirms *prompt*."""
    return ConfirmationDialog(prompt, parent).ask()


__all__ = ["ConfirmationDialog", "ask_confirmation"]
