"""Configuration helpers for Listahan.

Updates: v0.2.0 - 2026-10-16 - Expose storage and layout defaults.
Updates: v0.1.0 - 2026-10-12 - Expose settings loader and configuration error types.
"""

from .settings import (
    DEFAULT_COMPACT_LAYOUT_WIDTH,
    DEFAULT_DB_PATH,
    DEFAULT_NOTE_TITLE,
    DEFAULT_STORAGE_KEY,
    DEFAULT_THEME_MODE,
    ListahanSettings,
    SettingsError,
    load_settings,
)

__all__ = [
    "DEFAULT_COMPACT_LAYOUT_WIDTH",
    "DEFAULT_DB_PATH",
    "DEFAULT_NOTE_TITLE",
    "DEFAULT_STORAGE_KEY",
    "DEFAULT_THEME_MODE",
    "ListahanSettings",
    "SettingsError",
    "load_settings",
]
