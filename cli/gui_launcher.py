"""Default CLI behaviour for launching the Listahan GUI."""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, cast

from .utils import print_and_log

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from collections.abc import Callable


def run_default_mode(
    manager,
    settings,
    args,
    logger: logging.Logger,
) -> int:
    """Print readiness messages and optionally launch the GUI."""
    if manager is None:
        raise ValueError("Note manager must be initialised before launching GUI mode.")

    location = settings.db_path if settings.storage_backend == "sqlite" else "memory"
    print_and_log(
        logger,
        logging.INFO,
        f"Listahan ready with {len(manager.notes)} notes. Storage at {location}",
    )
    launch_requested = args.gui if args.gui is not None else True
    if not launch_requested:
        return 0

    try:
        gui_module = importlib.import_module("gui")
    except ModuleNotFoundError as exc:  # pragma: no cover - import failure path
        logger.error(
            "GUI launch requested but dependency %s is missing. Install the package "
            "with `pip install -e .` or rerun with --no-gui.",
            exc.name,
        )
        return 4
    launch_gui_callable = getattr(gui_module, "launch_listahan", None)
    if not callable(launch_gui_callable):  # pragma: no cover - misconfigured entrypoint
        logger.error("GUI module is missing a callable launch_listahan entry point.")
        return 4
    launch_callable = cast("Callable[[object, object | None], int]", launch_gui_callable)

    dependency_error_type = getattr(gui_module, "GuiDependencyError", RuntimeError)
    try:
        return launch_callable(manager, settings)
    except dependency_error_type as exc:
        logger.error("Unable to start GUI: %s", exc)
        return 4
