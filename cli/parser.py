"""Argument parser for Listahan CLI.

Updates:
  v0.2.0 - 2026-10-17 - Add notes export subcommand.
  v0.1.0 - 2026-10-14 - Add list and show subcommands alongside GUI toggles.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the Listahan launcher."""
    parser = argparse.ArgumentParser(description="Listahan notes launcher")
    parser.add_argument(
        "--logging-config",
        type=Path,
        default=None,
        help="Path to logging configuration file (INI format)",
    )
    parser.add_argument(
        "--print-settings",
        action="store_true",
        help="Print resolved settings and exit",
    )
    parser.add_argument(
        "--gui",
        dest="gui",
        action="store_true",
        default=None,
        help="Launch the PySide6 interface after services are initialised (default behaviour).",
    )
    parser.add_argument(
        "--no-gui",
        dest="gui",
        action="store_false",
        help="Skip launching the GUI and exit once services are initialised.",
    )

    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="List notes, newest first.")
    list_parser.add_argument(
        "--query",
        "-q",
        type=str,
        default="",
        help="Only list notes whose title or content contains QUERY (case-insensitive).",
    )

    show_parser = subparsers.add_parser("show", help="Show a note's metadata and content.")
    show_parser.add_argument("note_id", type=str, help="Identifier of the note to show.")

    export_parser = subparsers.add_parser(
        "export",
        help="Export every note to a plain-text file.",
    )
    export_parser.add_argument("path", type=Path, help="Destination file path.")

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return parsed CLI arguments for the Listahan launcher."""
    return build_parser().parse_args(argv)
