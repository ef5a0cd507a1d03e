"""Printable summaries for Listahan configuration.

Updates:
  v0.1.0 - 2026-10-14 - Extract CLI settings summary rendering.
"""

from __future__ import annotations

from config import ListahanSettings

from .utils import describe_path


def print_settings_summary(settings: ListahanSettings) -> None:
    """Emit a readable summary of storage and layout configuration."""
    backend = getattr(settings, "storage_backend", "sqlite")
    quota = getattr(settings, "storage_quota_bytes", None)
    lines = [
        "Listahan configuration",
        "----------------------",
        f"Storage backend: {backend}",
    ]
    if backend == "sqlite":
        lines.append(f"Database path: {describe_path(settings.db_path)}")
    lines.extend(
        [
            f"Storage key: {settings.storage_key}",
            f"Storage quota: {f'{quota} bytes' if quota else 'unlimited'}",
            f"Compact slot on load: {'yes' if settings.compact_on_load else 'no'}",
            f"Default note title: {settings.default_note_title}",
            f"Compact layout below: {settings.compact_layout_width}px",
            f"Theme: {settings.theme_mode}",
        ]
    )
    print("\n".join(lines))
