"""Settings management utilities for Listahan configuration.

Updates:
  v0.2.1 - 2026-10-17 - Read .env values through python-dotenv without mutating os.environ.
  v0.2.0 - 2026-10-16 - Add storage quota and compact layout width settings.
  v0.1.0 - 2026-10-12 - Add JSON/env settings sources for storage and layout.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal, cast

from dotenv import dotenv_values
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

_DOTENV_FALLBACK_PATH = ".env"

DEFAULT_DB_PATH = Path("data") / "listahan.db"
DEFAULT_STORAGE_KEY = "notes"
DEFAULT_NOTE_TITLE = "Untitled Note"
DEFAULT_COMPACT_LAYOUT_WIDTH = 768
DEFAULT_THEME_MODE = "dark"
_THEME_CHOICES = {"light", "dark"}
_STORAGE_BACKENDS = {"sqlite", "memory"}

# Field name -> accepted environment keys (prefixed with LISTAHAN_ on lookup).
_ENV_ALIASES: dict[str, list[str]] = {
    "db_path": ["DB_PATH", "DATABASE_PATH", "db_path", "database_path"],
    "storage_backend": ["STORAGE_BACKEND", "storage_backend"],
    "storage_key": ["STORAGE_KEY", "storage_key"],
    "storage_quota_bytes": ["STORAGE_QUOTA_BYTES", "storage_quota_bytes"],
    "compact_on_load": ["COMPACT_ON_LOAD", "compact_on_load"],
    "default_note_title": ["DEFAULT_NOTE_TITLE", "default_note_title"],
    "compact_layout_width": ["COMPACT_LAYOUT_WIDTH", "compact_layout_width"],
    "theme_mode": ["THEME_MODE", "theme_mode"],
}

_JSON_KEYS = tuple(_ENV_ALIASES)


def _read_dotenv_values() -> dict[str, str]:
    """Load ``.env`` entries into a mapping without mutating ``os.environ``."""
    env_file_override = os.getenv("LISTAHAN_ENV_FILE")
    if env_file_override is not None:
        candidate = env_file_override.strip()
        if not candidate:
            return {}
        path = Path(candidate).expanduser()
    else:
        path = Path(_DOTENV_FALLBACK_PATH).expanduser()
    if not path.is_file():
        return {}
    raw_values = dotenv_values(str(path))
    return {str(key): str(value) for key, value in raw_values.items() if value is not None}


class SettingsError(Exception):
    """Raised when Listahan configuration cannot be loaded or validated."""


class ListahanSettings(BaseSettings):
    """Application configuration sourced from environment variables or JSON files."""

    db_path: Path = Field(
        default=DEFAULT_DB_PATH,
        validate_default=True,
        description="SQLite database holding the notes key-value slot.",
    )
    storage_backend: Literal["sqlite", "memory"] = Field(
        default="sqlite",
        description="Durable store backend ('sqlite' or ephemeral 'memory').",
    )
    storage_key: str = Field(
        default=DEFAULT_STORAGE_KEY,
        description="Key of the slot holding the serialised notes collection.",
    )
    storage_quota_bytes: int | None = Field(
        default=None,
        description="Optional byte quota enforced on store writes.",
    )
    compact_on_load: bool = Field(
        default=True,
        description="Rewrite the notes slot when invalid entries are dropped on load.",
    )
    default_note_title: str = Field(
        default=DEFAULT_NOTE_TITLE,
        description="Title given to newly created notes.",
    )
    compact_layout_width: int = Field(
        default=DEFAULT_COMPACT_LAYOUT_WIDTH,
        description="Window width (px) below which the sidebar uses the compact layout.",
    )
    theme_mode: Literal["light", "dark"] = Field(
        default=DEFAULT_THEME_MODE,
        description="Preferred UI theme mode (light or dark).",
    )

    model_config = cast(
        "SettingsConfigDict",
        {
            "env_prefix": "LISTAHAN_",
            "case_sensitive": False,
            "populate_by_name": True,
        },
    )

    @field_validator("db_path", mode="before")
    def _normalise_path(cls, value: Any) -> Path:
        """Expand user-relative paths and coerce values to Path instances."""
        if value is None or str(value).strip() == "":
            raise ValueError("a filesystem path is required")
        path = Path(str(value)).expanduser()
        return path.resolve()

    @field_validator("storage_backend", mode="before")
    def _normalise_storage_backend(cls, value: object | None) -> str:
        if value is None:
            return "sqlite"
        backend = str(value).strip().lower()
        if backend in {"", "default", "sqlite3"}:
            return "sqlite"
        if backend not in _STORAGE_BACKENDS:
            raise ValueError("storage_backend must be 'sqlite' or 'memory'")
        return backend

    @field_validator("storage_key", mode="before")
    def _validate_storage_key(cls, value: object | None) -> str:
        if value is None:
            return DEFAULT_STORAGE_KEY
        key = str(value).strip()
        if not key:
            raise ValueError("storage_key cannot be empty")
        return key

    @field_validator("storage_quota_bytes", mode="before")
    def _normalise_quota(cls, value: object | None) -> int | None:
        if value in (None, "", 0, "0"):
            return None
        try:
            quota = int(str(value).strip())
        except ValueError as exc:
            raise ValueError("storage_quota_bytes must be an integer") from exc
        if quota < 0:
            raise ValueError("storage_quota_bytes must be positive")
        return quota

    @field_validator("default_note_title", mode="before")
    def _normalise_default_title(cls, value: object | None) -> str:
        if value is None:
            return DEFAULT_NOTE_TITLE
        return str(value).strip() or DEFAULT_NOTE_TITLE

    @field_validator("compact_layout_width")
    def _validate_compact_width(cls, value: int) -> int:
        """Ensure the compact layout threshold is a positive width."""
        if value <= 0:
            raise ValueError("compact_layout_width must be greater than zero")
        return value

    @field_validator("theme_mode", mode="before")
    def _normalise_theme_mode(cls, value: str | None) -> str:
        if value is None:
            return DEFAULT_THEME_MODE
        text = str(value).strip().lower()
        if text not in _THEME_CHOICES:
            return DEFAULT_THEME_MODE
        return text

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
    ]:
        """Define configuration source precedence.

        Order (highest → lowest):
            1. Explicit keyword arguments (e.g. load_settings(storage_backend="memory")).
            2. JSON configuration file.
            3. Environment variables / aliases (including ``.env`` values).
            4. File secrets.
        """

        def env_with_aliases(_: BaseSettings | None = None) -> dict[str, Any]:
            data: dict[str, Any] = {}
            config_dict = cast("dict[str, Any]", cls.model_config)
            prefix = str(config_dict.get("env_prefix", ""))
            dotenv_values_map = _read_dotenv_values()

            def _lookup(candidate: str) -> str | None:
                value = os.getenv(candidate)
                if value is None:
                    value = dotenv_values_map.get(candidate)
                if value is None:
                    return None
                stripped_value = str(value).strip()
                return stripped_value or None

            for field, keys in _ENV_ALIASES.items():
                for key in keys:
                    candidates = [f"{prefix}{key}", f"{prefix}{key.upper()}"]
                    value = next(
                        (found for found in map(_lookup, candidates) if found is not None),
                        None,
                    )
                    if value is not None:
                        data[field] = value
                        break
            return data

        return (
            init_settings,
            cls._json_config_settings_source(settings_cls),
            cast("PydanticBaseSettingsSource", env_with_aliases),
            file_secret_settings,
        )

    @classmethod
    def _json_config_settings_source(
        cls,
        _: type[BaseSettings],
    ) -> PydanticBaseSettingsSource:
        """Return settings extracted from an optional JSON config file."""

        def _loader(_: BaseSettings | None = None) -> dict[str, Any]:
            explicit_path = os.getenv("LISTAHAN_CONFIG_JSON")
            candidates: list[Path] = []
            if explicit_path:
                candidates.append(Path(explicit_path).expanduser())
            candidates.append((Path("config") / "config.json").expanduser())

            for path in candidates:
                if not path.exists():
                    if explicit_path and path == candidates[0]:
                        raise SettingsError(f"Configuration file not found: {path}")
                    continue
                try:
                    raw_contents = path.read_text(encoding="utf-8")
                except OSError as exc:  # pragma: no cover - filesystem failure is env-specific
                    raise SettingsError(f"Unable to read configuration file: {path}") from exc
                try:
                    data = json.loads(raw_contents)
                except json.JSONDecodeError as exc:
                    raise SettingsError(f"Invalid JSON in configuration file: {path}") from exc
                if not isinstance(data, dict):
                    message = f"Configuration file {path} must contain a JSON object"
                    raise SettingsError(message)
                mapping_data = cast("Mapping[object, Any]", data)
                data_dict: dict[str, Any] = {str(key): value for key, value in mapping_data.items()}
                mapped: dict[str, Any] = {}
                if "database_path" in data_dict and "db_path" not in data_dict:
                    mapped["db_path"] = data_dict["database_path"]
                for key in _JSON_KEYS:
                    if key in data_dict:
                        mapped[key] = data_dict[key]
                unknown = sorted(set(data_dict) - set(_JSON_KEYS) - {"database_path"})
                if unknown:
                    logger.warning(
                        "Ignoring unknown key(s) %s in configuration file %s",
                        ", ".join(unknown),
                        path,
                    )
                return mapped
            return {}

        return cast("PydanticBaseSettingsSource", _loader)


def load_settings(**overrides: Any) -> ListahanSettings:
    """Return validated settings, raising SettingsError on failure."""
    try:
        return ListahanSettings(**overrides)
    except SettingsError:
        raise
    except ValidationError as exc:
        raise SettingsError("Invalid Listahan configuration") from exc


logger = logging.getLogger("listahan.settings")
