"""CLI command handlers for Listahan.

Updates:
  v0.2.0 - 2026-10-17 - Add plain-text export command.
  v0.1.0 - 2026-10-14 - Add list and show handlers with a dispatch table.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from core import NoteNotFoundError
from core.export import export_notes

from .utils import format_timestamp, print_and_log, truncate

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from core import NoteManager
else:  # pragma: no cover - runtime placeholders for type-only imports
    NoteManager = object

CommandHandler = Callable[[NoteManager | None, argparse.Namespace, logging.Logger], int]


@dataclass(frozen=True)
class CommandSpec:
    """Metadata for dispatching CLI command handlers."""

    handler: CommandHandler
    requires_manager: bool = True


def run_list(
    manager: NoteManager | None,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    if manager is None:
        raise ValueError("Note manager is required to list notes.")
    query = getattr(args, "query", "") or ""
    view = manager.filtered_view(query)
    if not view:
        print(f"No listahan found matching '{query}'." if query else "No listahan yet.")
        return 0

    print(f"{'ID':<34} {'Title':<40} {'Modified':<16}")
    print("-" * 92)
    count = 0
    for note in view:
        title = truncate(note.title or "(Untitled)", 40)
        modified = format_timestamp(note.last_modified)
        print(f"{note.id:<34} {title:<40} {modified:<16}")
        count += 1
    summary = f"Found: {count} notes matching '{query}'" if query else f"Total: {count} notes"
    print(f"\n{summary}")
    logger.debug("Listed %d note(s) for query %r", count, query)
    return 0


def run_show(
    manager: NoteManager | None,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    if manager is None:
        raise ValueError("Note manager is required to show a note.")
    try:
        note = manager.get_note(args.note_id)
    except NoteNotFoundError as exc:
        print_and_log(logger, logging.ERROR, str(exc))
        return 5
    print(f"Title: {note.title or '(Untitled)'}")
    print(f"Modified: {format_timestamp(note.last_modified)}")
    print(f"Saved: {format_timestamp(note.last_saved)}")
    print("-" * 40)
    print(note.content if note.content else "(No content)")
    return 0


def run_export(
    manager: NoteManager | None,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    if manager is None:
        raise ValueError("Note manager is required for export.")
    notes = manager.notes
    if not notes:
        print_and_log(logger, logging.INFO, "There are no notes to export yet.")
        return 0
    try:
        resolved = export_notes(notes, Path(args.path))
    except OSError as exc:
        print_and_log(logger, logging.ERROR, f"Failed to export notes: {exc}")
        return 6
    print_and_log(logger, logging.INFO, f"Exported {len(notes)} notes to {resolved}")
    return 0


COMMAND_SPECS: dict[str, CommandSpec] = {
    "list": CommandSpec(run_list),
    "show": CommandSpec(run_show),
    "export": CommandSpec(run_export),
}

__all__ = ["COMMAND_SPECS", "CommandSpec", "run_export", "run_list", "run_show"]
