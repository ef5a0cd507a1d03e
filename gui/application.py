"""Qt application helpers for the Listahan GUI.

Updates:
  v0.1.1 - 2026-10-16 - Detect display server before forcing offscreen backend.
  v0.1.0 - 2026-10-15 - Provide QApplication factory and launch routine.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, cast

from PySide6.QtWidgets import QApplication, QStyleFactory

from .appearance import apply_theme
from .main_window import NotesWindow

if TYPE_CHECKING:
    from collections.abc import MutableMapping, Sequence

    from config import ListahanSettings
    from core import NoteManager

_DISPLAY_ENV_VARS = ("DISPLAY", "WAYLAND_DISPLAY", "MIR_SOCKET")
logger = logging.getLogger("listahan.gui.application")


def _should_force_offscreen(env: MutableMapping[str, str]) -> bool:
    """Return True when we should default Qt to the offscreen platform plugin."""
    if env.get("QT_QPA_PLATFORM"):
        return False

    if sys.platform.startswith(("win", "cygwin")) or sys.platform == "darwin":
        return False

    return not any(env.get(var) for var in _DISPLAY_ENV_VARS)


def create_qapplication(argv: Sequence[str] | None = None) -> QApplication:
    """Return an existing QApplication or create a new one with sensible defaults."""
    existing = QApplication.instance()
    if existing is not None:
        return cast(QApplication, existing)

    if _should_force_offscreen(os.environ):
        # Headless sessions fall back to the offscreen plugin.
        os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

    app = QApplication(list(argv or []))
    app.setApplicationName("Listahan")
    fusion = QStyleFactory.create("Fusion")
    if fusion is not None:
        app.setStyle(fusion)
    logger.debug("GUI_STYLE active_style=%s", app.style().metaObject().className())
    return app


def launch_listahan(manager: NoteManager, settings: ListahanSettings | None = None) -> int:
    """Create the Qt event loop, show the notes window, and enter the GUI."""
    app = create_qapplication()
    theme = apply_theme(settings.theme_mode if settings is not None else None)
    logger.debug("GUI_THEME mode=%s", theme)

    window = NotesWindow(manager, settings=settings)
    window.show()
    return app.exec()


__all__ = ["create_qapplication", "launch_listahan"]
