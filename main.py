"""Application entry point for Listahan.

Updates:
  v0.2.0 - 2026-10-17 - Dispatch list/show/export subcommands before GUI launch.
  v0.1.0 - 2026-10-14 - Wire settings, logging, note manager, and GUI launcher.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from cli.commands import COMMAND_SPECS
from cli.gui_launcher import run_default_mode
from cli.parser import parse_args
from cli.runtime import setup_logging
from cli.settings_summary import print_settings_summary
from config import SettingsError, load_settings
from core import ListahanError, RepositoryError, build_note_manager

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from collections.abc import Sequence

    from config import ListahanSettings
    from core import NoteManager


def _initialise_manager(
    settings: ListahanSettings,
    logger: logging.Logger,
) -> NoteManager | None:
    try:
        return build_note_manager(settings)
    except (ListahanError, RepositoryError, OSError) as exc:
        logger.error("Failed to initialise services: %s", exc)
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Entrypoint that wires settings, services, and CLI commands."""
    args = parse_args(argv)
    setup_logging(args.logging_config)

    logger = logging.getLogger("listahan.main")
    try:
        settings = load_settings()
    except SettingsError as exc:
        cause = f" ({exc.__cause__})" if exc.__cause__ is not None else ""
        logger.error("Failed to load settings: %s%s", exc, cause)
        return 2

    if args.print_settings:
        print_settings_summary(settings)
        return 0

    manager = _initialise_manager(settings, logger)
    if manager is None:
        return 3

    try:
        spec = COMMAND_SPECS.get(getattr(args, "command", None) or "")
        if spec is not None:
            return spec.handler(manager, args, logger)
        return run_default_mode(manager, settings, args, logger)
    finally:
        manager.close()


if __name__ == "__main__":
    sys.exit(main())
