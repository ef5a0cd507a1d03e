"""GUI module namespace for Listahan.

Updates: v0.2.0 - 2026-10-15 - Expose the PySide6 notes window launcher.
Updates: v0.1.0 - 2026-10-12 - Handle missing PySide6 dependency with friendly error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

if TYPE_CHECKING:
    from collections.abc import Sequence

    from config import ListahanSettings
    from core import NoteManager


class GuiDependencyError(RuntimeError):
    """Raised when the GUI cannot start because optional dependencies are absent."""


_MISSING_PYSIDE6_MESSAGE = (
    "PySide6 is not installed. Install dependencies with `pip install -e .` "
    "before launching the GUI, or rerun with --no-gui."
)

try:
    from .application import create_qapplication, launch_listahan
except ModuleNotFoundError as exc:  # pragma: no cover - exercised via main unit tests
    if exc.name != "PySide6":
        raise

    def _raise_create_qapplication(_: Sequence[str] | None = None) -> NoReturn:
        raise GuiDependencyError(_MISSING_PYSIDE6_MESSAGE)

    def _raise_launch_listahan(
        _: NoteManager,
        __: ListahanSettings | None = None,
    ) -> NoReturn:
        raise GuiDependencyError(_MISSING_PYSIDE6_MESSAGE)

    create_qapplication = _raise_create_qapplication
    launch_listahan = _raise_launch_listahan


__all__ = ["create_qapplication", "launch_listahan", "GuiDependencyError"]
