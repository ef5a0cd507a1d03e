"""Main window composing the notes sidebar, the editor pane, and confirmations.

The window holds no note state of its own: every intent is forwarded to the
:class:`~core.NoteManager` and the widgets are re-rendered from its properties.

Updates:
  v0.3.0 - 2026-10-17 - Add export action sharing the CLI export format.
  v0.2.0 - 2026-10-16 - Drive sidebar visibility through SidebarLayoutPolicy.
  v0.1.0 - 2026-10-15 - Initial notes window with create, save, delete, and search.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSplitter,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from core import ConfirmationIntent, NoteNotFoundError, NoteStorageError
from core.export import export_notes

from .confirmation_dialog import ask_confirmation
from .layout_policy import DEFAULT_COMPACT_WIDTH, SidebarLayoutPolicy, is_compact_width
from .notes_sidebar import NotesSidebar
from .rich_text_editor import RichTextEditor

if TYPE_CHECKING:
    from collections.abc import Callable

    from PySide6.QtGui import QResizeEvent

    from config import ListahanSettings
    from core import ConfirmationPrompt, NoteManager, PendingConfirmation

    ConfirmCallback = Callable[[ConfirmationPrompt, QWidget | None], bool]

logger = logging.getLogger("listahan.gui.main_window")

__all__ = ["NotesWindow"]

_EMPTY_PAGE = 0
_EDITOR_PAGE = 1


class NotesWindow(QMainWindow):
    """Top-level window for browsing and editing notes."""

    def __init__(
        self,
        manager: NoteManager,
        settings: ListahanSettings | None = None,
        *,
        confirm_callback: ConfirmCallback | None = None,
    ) -> None:
        super().__init__()
        self._manager = manager
        self._settings = settings
        self._confirm = confirm_callback or ask_confirmation
        self._compact_width = (
            settings.compact_layout_width if settings is not None else DEFAULT_COMPACT_WIDTH
        )
        self._layout_policy = SidebarLayoutPolicy()
        self._loading_editor = False
        self.setWindowTitle("Listahan")
        self.resize(1100, 720)
        self._build_ui()
        self._refresh_list()
        self._render_editor()

    # Widgets ------------------------------------------------------------------

    @property
    def sidebar(self) -> NotesSidebar:
        return self._sidebar

    @property
    def title_field(self) -> QLineEdit:
        return self._title_field

    @property
    def content_editor(self) -> RichTextEditor:
        return self._content_editor

    @property
    def save_button(self) -> QPushButton:
        return self._save_button

    @property
    def delete_button(self) -> QPushButton:
        return self._delete_button

    @property
    def layout_policy(self) -> SidebarLayoutPolicy:
        return self._layout_policy

    def is_editor_visible(self) -> bool:
        return self._stack.currentIndex() == _EDITOR_PAGE

    def _build_ui(self) -> None:
        self._sidebar = NotesSidebar(self)
        self._sidebar.create_requested.connect(self._on_create_requested)  # type: ignore[arg-type]
        self._sidebar.note_activated.connect(self._on_note_activated)  # type: ignore[arg-type]
        self._sidebar.query_changed.connect(self._on_query_changed)  # type: ignore[arg-type]
        self._sidebar.search_field.setText(self._manager.search_query)

        self._stack = QStackedWidget(self)
        self._stack.addWidget(self._build_empty_page())
        self._stack.addWidget(self._build_editor_page())

        splitter = QSplitter(Qt.Orientation.Horizontal, self)
        splitter.addWidget(self._sidebar)
        splitter.addWidget(self._stack)
        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 3)
        splitter.setChildrenCollapsible(False)
        self.setCentralWidget(splitter)

    def _build_empty_page(self) -> QWidget:
        page = QWidget(self)
        layout = QVBoxLayout(page)
        layout.addStretch(1)
        label = QLabel("No listahan selected", page)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(label)
        create_button = QPushButton("Create a listahan", page)
        create_button.clicked.connect(self._on_create_requested)  # type: ignore[arg-type]
        layout.addWidget(create_button, 0, Qt.AlignmentFlag.AlignHCenter)
        layout.addStretch(1)
        return page

    def _build_editor_page(self) -> QWidget:
        page = QWidget(self)
        layout = QVBoxLayout(page)
        layout.setContentsMargins(12, 12, 12, 12)

        header = QHBoxLayout()
        self._sidebar_toggle = QPushButton("Notes", page)
        self._sidebar_toggle.setCheckable(True)
        self._sidebar_toggle.setChecked(True)
        self._sidebar_toggle.clicked.connect(self._on_sidebar_toggled)  # type: ignore[arg-type]
        header.addWidget(self._sidebar_toggle)

        self._title_field = QLineEdit(page)
        self._title_field.setPlaceholderText("Title")
        self._title_field.textEdited.connect(self._on_title_edited)  # type: ignore[arg-type]
        header.addWidget(self._title_field, 1)

        self._save_button = QPushButton("Saved", page)
        self._save_button.clicked.connect(self._on_save_clicked)  # type: ignore[arg-type]
        header.addWidget(self._save_button)
        self._delete_button = QPushButton("Delete", page)
        self._delete_button.clicked.connect(self._on_delete_clicked)  # type: ignore[arg-type]
        header.addWidget(self._delete_button)
        self._export_button = QPushButton("Export", page)
        self._export_button.clicked.connect(self._on_export_clicked)  # type: ignore[arg-type]
        header.addWidget(self._export_button)
        layout.addLayout(header)

        self._content_editor = RichTextEditor(page)
        self._content_editor.content_changed.connect(self._on_content_edited)  # type: ignore[arg-type]
        layout.addWidget(self._content_editor, 1)
        return page

    # Rendering ----------------------------------------------------------------

    def _refresh_list(self) -> None:
        self._sidebar.populate(
            self._manager.filtered_view(),
            query=self._manager.search_query,
            selected_id=self._manager.selected_id,
        )

    def _render_editor(self) -> None:
        """Load the working copy into the editor widgets."""
        if self._manager.selected_id is None:
            self._stack.setCurrentIndex(_EMPTY_PAGE)
            self._update_save_state()
            return
        self._loading_editor = True
        try:
            self._title_field.setText(self._manager.working_title)
            self._content_editor.set_content(self._manager.working_content)
        finally:
            self._loading_editor = False
        self._stack.setCurrentIndex(_EDITOR_PAGE)
        self._update_save_state()

    def _update_save_state(self) -> None:
        self._save_button.setText(self._manager.save_label)
        self._save_button.setEnabled(self._manager.has_unsaved_changes)
        self._delete_button.setEnabled(self._manager.selected_id is not None)

    def _apply_sidebar_visibility(self, visible: bool) -> None:
        self._sidebar.setVisible(visible)
        self._sidebar_toggle.setChecked(visible)

    # Intents ------------------------------------------------------------------

    def _on_create_requested(self) -> None:
        try:
            note = self._manager.create_note()
        except NoteStorageError as exc:
            QMessageBox.critical(self, "Unable to create note", str(exc))
            return
        self._refresh_list()
        self._render_editor()
        self._apply_sidebar_visibility(self._layout_policy.note_opened())
        self._title_field.setFocus()
        self._show_status(f"Created {note.title}.")

    def _on_note_activated(self, note_id: str) -> None:
        if note_id == self._manager.selected_id:
            self._apply_sidebar_visibility(self._layout_policy.note_opened())
            return
        try:
            pending = self._manager.select_note(note_id)
        except NoteNotFoundError as exc:
            logger.warning("Ignoring selection of missing note: %s", exc)
            self._refresh_list()
            return
        if pending is not None:
            self._resolve_pending(pending)
            return
        self._render_editor()
        self._apply_sidebar_visibility(self._layout_policy.note_opened())

    def _on_query_changed(self, text: str) -> None:
        self._manager.set_search_query(text)
        self._refresh_list()

    def _on_title_edited(self, text: str) -> None:
        if self._loading_editor:
            return
        self._manager.edit_title(text)
        self._update_save_state()

    def _on_content_edited(self, html: str) -> None:
        if self._loading_editor:
            return
        self._manager.edit_content(html)
        self._update_save_state()

    def _on_save_clicked(self) -> None:
        try:
            saved = self._manager.save_selected()
        except NoteStorageError as exc:
            QMessageBox.critical(self, "Unable to save note", str(exc))
            self._update_save_state()
            return
        self._refresh_list()
        self._update_save_state()
        if saved is not None:
            self._show_status("Note saved.")

    def _on_delete_clicked(self) -> None:
        selected = self._manager.selected_note
        if selected is None:
            return
        self._resolve_pending(self._manager.request_delete(selected))

    def _on_export_clicked(self) -> None:
        notes = self._manager.notes
        if not notes:
            QMessageBox.information(self, "Export notes", "There are no notes to export yet.")
            return
        path, _ = QFileDialog.getSaveFileName(
            self,
            "Export notes",
            "listahan.txt",
            "Text Files (*.txt);;All Files (*.*)",
        )
        if not path:
            return
        try:
            export_notes(notes, Path(path))
        except OSError as exc:
            QMessageBox.critical(self, "Export failed", str(exc))
            return
        self._show_status(f"Exported {len(notes)} notes.")

    def _on_sidebar_toggled(self) -> None:
        self._apply_sidebar_visibility(self._layout_policy.toggle())

    def _resolve_pending(self, pending: PendingConfirmation) -> None:
        """Ask the user about *pending* and forward the decision to the manager."""
        if not self._confirm(pending.prompt(), self):
            self._manager.cancel()
            # The list may already show the blocked target as current.
            self._refresh_list()
            return
        try:
            self._manager.confirm()
        except NoteStorageError as exc:
            QMessageBox.critical(self, "Unable to delete note", str(exc))
            self._refresh_list()
            return
        self._refresh_list()
        self._render_editor()
        if pending.intent is ConfirmationIntent.DELETE:
            self._show_status("Note deleted.")
        if self._manager.selected_id is None:
            self._apply_sidebar_visibility(self._layout_policy.selection_cleared())
        else:
            self._apply_sidebar_visibility(self._layout_policy.note_opened())

    # Qt events ----------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:  # noqa: N802 - Qt override
        super().resizeEvent(event)
        compact = is_compact_width(event.size().width(), self._compact_width)
        if compact == self._layout_policy.compact:
            return
        visible = self._layout_policy.update_layout(
            compact, has_selection=self._manager.selected_id is not None
        )
        self._apply_sidebar_visibility(visible)

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        if self._manager.has_unsaved_changes:
            logger.info("Closing with unsaved changes to note %s", self._manager.selected_id)
        self._manager.close()
        super().closeEvent(event)

    def _show_status(self, message: str, duration_ms: int = 3000) -> None:
        self.statusBar().showMessage(message, duration_ms)
