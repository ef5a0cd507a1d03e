"""Sidebar listing notes with a create action and a search box.

Updates:
  v0.2.1 - 2026-10-19 - Activate notes from current-item changes only.
  v0.2.0 - 2026-10-17 - Highlight query matches in list item tooltips.
  v0.1.0 - 2026-10-15 - Initial list, search field, and create button.
"""

from __future__ import annotations

import html
from typing import TYPE_CHECKING

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cli.utils import format_timestamp
from core import match_spans

if TYPE_CHECKING:
    from collections.abc import Iterable

    from models.note import Note

__all__ = ["NotesSidebar", "highlight_html"]

_NOTE_ID_ROLE = Qt.ItemDataRole.UserRole


def highlight_html(text: str, query: str) -> str:
    """Return escaped *text* with every match of *query* wrapped in ``<b>``."""
    spans = match_spans(text, query)
    if not spans:
        return html.escape(text)
    parts: list[str] = []
    cursor = 0
    for start, end in spans:
        parts.append(html.escape(text[cursor:start]))
        parts.append(f"<b>{html.escape(text[start:end])}</b>")
        cursor = end
    parts.append(html.escape(text[cursor:]))
    return "".join(parts)


class NotesSidebar(QWidget):
    """Note list panel; emits intents rather than touching the manager."""

    create_requested = Signal()
    note_activated = Signal(str)
    query_changed = Signal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._populating = False
        self._list = QListWidget(self)
        self._search = QLineEdit(self)
        self._empty_label = QLabel(self)
        self._build_ui()

    @property
    def list_widget(self) -> QListWidget:
        return self._list

    @property
    def search_field(self) -> QLineEdit:
        return self._search

    @property
    def empty_label(self) -> QLabel:
        return self._empty_label

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        header = QHBoxLayout()
        title = QLabel("Listahan", self)
        title.setObjectName("sidebarTitle")
        header.addWidget(title)
        header.addStretch(1)
        self._create_button = QPushButton("Create", self)
        self._create_button.clicked.connect(self.create_requested.emit)  # type: ignore[arg-type]
        header.addWidget(self._create_button)
        layout.addLayout(header)

        self._search.setPlaceholderText("Search notes...")
        self._search.setClearButtonEnabled(True)
        self._search.textChanged.connect(self.query_changed.emit)  # type: ignore[arg-type]
        layout.addWidget(self._search)

        self._list.setAlternatingRowColors(True)
        self._list.currentItemChanged.connect(self._on_current_item_changed)  # type: ignore[arg-type]
        layout.addWidget(self._list, 1)

        self._empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._empty_label.setWordWrap(True)
        layout.addWidget(self._empty_label)

    def populate(self, notes: Iterable[Note], *, query: str, selected_id: str | None) -> None:
        """Replace the list with *notes* in the given order."""
        self._populating = True
        try:
            self._list.clear()
            for note in notes:
                title = note.title or "Untitled"
                item = QListWidgetItem(f"{title}\n{format_timestamp(note.last_modified)}")
                item.setData(_NOTE_ID_ROLE, note.id)
                if query:
                    item.setToolTip(highlight_html(title, query))
                self._list.addItem(item)
                if note.id == selected_id:
                    self._list.setCurrentItem(item)
        finally:
            self._populating = False
        empty = self._list.count() == 0
        self._empty_label.setText(
            ("No listahan found" if query else "No listahan yet") if empty else ""
        )
        self._empty_label.setVisible(empty)

    def note_ids(self) -> list[str]:
        return [
            str(self._list.item(row).data(_NOTE_ID_ROLE)) for row in range(self._list.count())
        ]

    def _on_current_item_changed(
        self, current: QListWidgetItem | None, _previous: QListWidgetItem | None
    ) -> None:
        if self._populating or current is None:
            return
        self.note_activated.emit(str(current.data(_NOTE_ID_ROLE)))
