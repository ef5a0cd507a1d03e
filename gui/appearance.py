"""Light and dark palettes for the Listahan window.

Updates:
  v0.1.0 - 2026-10-15 - Apply configured theme mode to the application palette.
"""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

from config import DEFAULT_THEME_MODE

__all__ = ["apply_theme", "normalise_theme_mode"]

_SIDEBAR_TITLE_STYLE = "QLabel#sidebarTitle { font-size: 18px; font-weight: 600; }"


def normalise_theme_mode(mode: str | None) -> str:
    """Return ``light`` or ``dark``, falling back to the default mode."""
    theme = str(mode or DEFAULT_THEME_MODE).strip().lower()
    return theme if theme in {"light", "dark"} else DEFAULT_THEME_MODE


def _dark_palette() -> QPalette:
    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor(31, 41, 51))
    palette.setColor(QPalette.ColorRole.WindowText, Qt.GlobalColor.white)
    palette.setColor(QPalette.ColorRole.Base, QColor(24, 31, 41))
    palette.setColor(QPalette.ColorRole.AlternateBase, QColor(37, 46, 59))
    palette.setColor(QPalette.ColorRole.ToolTipBase, QColor(45, 55, 68))
    palette.setColor(QPalette.ColorRole.ToolTipText, Qt.GlobalColor.white)
    palette.setColor(QPalette.ColorRole.Text, QColor(232, 235, 244))
    palette.setColor(QPalette.ColorRole.Button, QColor(45, 55, 68))
    palette.setColor(QPalette.ColorRole.ButtonText, Qt.GlobalColor.white)
    palette.setColor(QPalette.ColorRole.Highlight, QColor(99, 102, 241))
    palette.setColor(QPalette.ColorRole.HighlightedText, Qt.GlobalColor.white)
    palette.setColor(QPalette.ColorRole.PlaceholderText, QColor(156, 163, 175))
    palette.setColor(
        QPalette.ColorGroup.Disabled, QPalette.ColorRole.ButtonText, QColor(110, 115, 125)
    )
    return palette


def apply_theme(mode: str | None = None) -> str:
    """Apply *mode* to the running application and return the active mode."""
    theme = normalise_theme_mode(mode)
    app = QApplication.instance()
    if app is None:
        return theme
    if theme == "dark":
        app.setPalette(_dark_palette())
        app.setStyleSheet(
            "QToolTip { color: #f9fafc; background-color: #1f2933; border: 1px solid #3b4252; }"
            + _SIDEBAR_TITLE_STYLE
        )
    else:
        app.setPalette(app.style().standardPalette())
        app.setStyleSheet(_SIDEBAR_TITLE_STYLE)
    return theme
