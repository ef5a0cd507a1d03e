"""Rich-text editor widget emitting HTML content.

The HTML produced by ``QTextEdit.toHtml`` is treated as an opaque string by the
rest of the application.

Updates:
  v0.1.1 - 2026-10-17 - Suppress change signals while loading stored content.
  v0.1.0 - 2026-10-15 - Add formatting toolbar for bold, italic, underline, headings, alignment.
"""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont, QTextBlockFormat, QTextCharFormat, QTextCursor
from PySide6.QtWidgets import (
    QHBoxLayout,
    QTextEdit,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

_HEADING_SIZES = {1: 2.0, 2: 1.5, 3: 1.17}
_BOLD_WEIGHT = QFont.Weight.Bold.value
_NORMAL_WEIGHT = QFont.Weight.Normal.value


class RichTextEditor(QWidget):
    """Formatting toolbar plus a ``QTextEdit`` body."""

    content_changed = Signal(str)

    def __init__(self, parent: QWidget | None = None, *, placeholder: str = "Type here...") -> None:
        super().__init__(parent)
        self._loading = False
        self._editor = QTextEdit(self)
        self._editor.setAcceptRichText(True)
        self._editor.setPlaceholderText(placeholder)
        self._editor.textChanged.connect(self._on_text_changed)  # type: ignore[arg-type]
        self._buttons: dict[str, QToolButton] = {}
        self._build_ui()

    @property
    def text_edit(self) -> QTextEdit:
        return self._editor

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        toolbar = QHBoxLayout()
        toolbar.setSpacing(4)
        self._add_button(toolbar, "bold", "B", self._toggle_bold, checkable=True)
        self._add_button(toolbar, "italic", "I", self._toggle_italic, checkable=True)
        self._add_button(toolbar, "underline", "U", self._toggle_underline, checkable=True)
        for level in _HEADING_SIZES:
            self._add_button(
                toolbar, f"h{level}", f"H{level}", lambda lvl=level: self._apply_heading(lvl)
            )
        self._add_button(toolbar, "left", "Left", lambda: self._align(Qt.AlignmentFlag.AlignLeft))
        self._add_button(
            toolbar, "center", "Center", lambda: self._align(Qt.AlignmentFlag.AlignHCenter)
        )
        self._add_button(
            toolbar, "right", "Right", lambda: self._align(Qt.AlignmentFlag.AlignRight)
        )
        toolbar.addStretch(1)
        layout.addLayout(toolbar)
        layout.addWidget(self._editor, 1)
        self._editor.cursorPositionChanged.connect(self._sync_toolbar)  # type: ignore[arg-type]

    def _add_button(self, layout: QHBoxLayout, key: str, label: str, slot, *, checkable: bool = False) -> None:
        button = QToolButton(self)
        button.setText(label)
        button.setCheckable(checkable)
        button.clicked.connect(lambda _checked=False: slot())  # type: ignore[arg-type]
        layout.addWidget(button)
        self._buttons[key] = button

    def set_content(self, content: str) -> None:
        """Load stored *content* without emitting ``content_changed``."""
        self._loading = True
        try:
            self._editor.setHtml(content)
        finally:
            self._loading = False

    def content(self) -> str:
        return self._editor.toHtml()

    def _on_text_changed(self) -> None:
        if self._loading:
            return
        self.content_changed.emit(self._editor.toHtml())

    def _merge_format(self, fmt: QTextCharFormat) -> None:
        cursor = self._editor.textCursor()
        if not cursor.hasSelection():
            cursor.select(QTextCursor.SelectionType.WordUnderCursor)
        cursor.mergeCharFormat(fmt)
        self._editor.mergeCurrentCharFormat(fmt)

    def _toggle_bold(self) -> None:
        fmt = QTextCharFormat()
        bold = self._editor.fontWeight() < _BOLD_WEIGHT
        fmt.setFontWeight(_BOLD_WEIGHT if bold else _NORMAL_WEIGHT)
        self._merge_format(fmt)

    def _toggle_italic(self) -> None:
        fmt = QTextCharFormat()
        fmt.setFontItalic(not self._editor.fontItalic())
        self._merge_format(fmt)

    def _toggle_underline(self) -> None:
        fmt = QTextCharFormat()
        fmt.setFontUnderline(not self._editor.fontUnderline())
        self._merge_format(fmt)

    def _apply_heading(self, level: int) -> None:
        cursor = self._editor.textCursor()
        block_format = QTextBlockFormat()
        block_format.setHeadingLevel(level)
        cursor.mergeBlockFormat(block_format)
        cursor.select(QTextCursor.SelectionType.BlockUnderCursor)
        char_format = QTextCharFormat()
        char_format.setFontWeight(_BOLD_WEIGHT)
        base_size = self._editor.font().pointSizeF()
        char_format.setFontPointSize(base_size * _HEADING_SIZES[level])
        cursor.mergeCharFormat(char_format)

    def _align(self, alignment: Qt.AlignmentFlag) -> None:
        self._editor.setAlignment(alignment)

    def _sync_toolbar(self) -> None:
        self._buttons["bold"].setChecked(self._editor.fontWeight() >= _BOLD_WEIGHT)
        self._buttons["italic"].setChecked(self._editor.fontItalic())
        self._buttons["underline"].setChecked(self._editor.fontUnderline())


__all__ = ["RichTextEditor"]
