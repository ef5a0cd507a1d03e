"""Plain-text export of the notes collection.

Updates:
  v0.1.0 - 2026-10-17 - Share the export format between the CLI and the notes window.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from models.note import Note

__all__ = ["export_notes", "render_notes_export"]


def _iso(value: int | None) -> str:
    if value is None:
        return "never"
    return datetime.fromtimestamp(value / 1000).astimezone().isoformat(timespec="seconds")


def render_notes_export(notes: Iterable[Note]) -> str:
    """Return the export text for *notes*; content is written verbatim."""
    lines: list[str] = []
    for note in notes:
        lines.append("---")
        lines.append(f"Id: {note.id}")
        lines.append(f"Title: {note.title}")
        lines.append(f"Last modified: {_iso(note.last_modified)}")
        lines.append(f"Last saved: {_iso(note.last_saved)}")
        lines.append("Content:")
        lines.append(note.content)
        lines.append("")
    return "\n".join(lines).strip() + "\n"


def export_notes(notes: Iterable[Note], path: Path) -> Path:
    """Write the export text for *notes* to *path* and return the resolved path."""
    resolved = path.expanduser()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    resolved.write_text(render_notes_export(notes), encoding="utf-8")
    return resolved.resolve()
