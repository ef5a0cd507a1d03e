"""Shared CLI utility functions for Listahan commands.

Updates:
  v0.1.0 - 2026-10-14 - Extract stdout logging, date formatting, and path helpers.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from logging import Logger
else:  # pragma: no cover - runtime placeholders for type-only imports
    Logger = Any


def print_and_log(logger: Logger, level: int, message: str) -> None:
    """Log *message* at *level* and mirror it to stdout."""
    logger.log(level, message)
    print(message)


def format_timestamp(value: int | None, *, placeholder: str = "never") -> str:
    """Return a local ``YYYY-MM-DD HH:MM`` string for an epoch-millisecond value."""
    if value is None:
        return placeholder
    try:
        return datetime.fromtimestamp(value / 1000).strftime("%Y-%m-%d %H:%M")
    except (OverflowError, OSError, ValueError):
        return "unknown"


def truncate(text: str, width: int) -> str:
    """Return *text* shortened to *width* characters with a trailing ellipsis."""
    if len(text) <= width:
        return text
    return text[: max(width - 2, 0)] + ".."


def describe_path(path_value: object) -> str:
    """Return a readable path description including whether it exists."""
    if path_value in (None, ""):
        return "not set"
    path = Path(str(path_value)).expanduser()
    state = "exists" if path.exists() else "missing"
    return f"{path} ({state})"
