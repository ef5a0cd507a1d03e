"""Tests for configuration loading and validation logic.

Updates:
  v0.1.1 - 2026-10-17 - Cover .env lookups through python-dotenv.
  v0.1.0 - 2026-10-12 - Cover JSON/env precedence and validation errors.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from pytest import LogCaptureFixture, MonkeyPatch

from config import (
    DEFAULT_COMPACT_LAYOUT_WIDTH,
    DEFAULT_NOTE_TITLE,
    DEFAULT_STORAGE_KEY,
    ListahanSettings,
    SettingsError,
    load_settings,
)

_ENV_VARS = (
    "LISTAHAN_CONFIG_JSON",
    "LISTAHAN_DB_PATH",
    "LISTAHAN_DATABASE_PATH",
    "LISTAHAN_STORAGE_BACKEND",
    "LISTAHAN_STORAGE_KEY",
    "LISTAHAN_STORAGE_QUOTA_BYTES",
    "LISTAHAN_COMPACT_ON_LOAD",
    "LISTAHAN_DEFAULT_NOTE_TITLE",
    "LISTAHAN_COMPACT_LAYOUT_WIDTH",
    "LISTAHAN_THEME_MODE",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("LISTAHAN_ENV_FILE", "")
    monkeypatch.chdir(tmp_path)


def _write_config(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_defaults(tmp_path: Path) -> None:
    settings = load_settings()

    assert isinstance(settings, ListahanSettings)
    assert settings.db_path == (tmp_path / "data" / "listahan.db").resolve()
    assert settings.storage_backend == "sqlite"
    assert settings.storage_key == DEFAULT_STORAGE_KEY
    assert settings.storage_quota_bytes is None
    assert settings.compact_on_load is True
    assert settings.default_note_title == DEFAULT_NOTE_TITLE
    assert settings.compact_layout_width == DEFAULT_COMPACT_LAYOUT_WIDTH
    assert settings.theme_mode == "dark"


def test_load_settings_reads_json_and_env(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    """JSON configuration wins over environment values for overlapping keys."""
    config_path = _write_config(
        tmp_path / "settings.json",
        {"database_path": str(tmp_path / "from_json.db"), "storage_key": "from-json"},
    )
    monkeypatch.setenv("LISTAHAN_CONFIG_JSON", str(config_path))
    monkeypatch.setenv("LISTAHAN_STORAGE_KEY", "from-env")
    monkeypatch.setenv("LISTAHAN_THEME_MODE", "light")

    settings = load_settings()

    assert settings.db_path == (tmp_path / "from_json.db").resolve()
    assert settings.storage_key == "from-json"
    assert settings.theme_mode == "light"


def test_overrides_take_precedence(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("LISTAHAN_STORAGE_BACKEND", "sqlite")
    settings = load_settings(storage_backend="memory")
    assert settings.storage_backend == "memory"


def test_default_config_json_is_picked_up(tmp_path: Path) -> None:
    (tmp_path / "config").mkdir()
    _write_config(tmp_path / "config" / "config.json", {"compact_layout_width": 640})
    assert load_settings().compact_layout_width == 640


def test_missing_explicit_config_raises(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LISTAHAN_CONFIG_JSON", str(tmp_path / "absent.json"))
    with pytest.raises(SettingsError):
        load_settings()


def test_invalid_json_raises(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    monkeypatch.setenv("LISTAHAN_CONFIG_JSON", str(bad))
    with pytest.raises(SettingsError):
        load_settings()


def test_non_object_json_raises(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    config_path = _write_config(tmp_path / "list.json", ["db_path"])
    monkeypatch.setenv("LISTAHAN_CONFIG_JSON", str(config_path))
    with pytest.raises(SettingsError):
        load_settings()


def test_unknown_json_keys_are_logged(
    monkeypatch: MonkeyPatch, tmp_path: Path, caplog: LogCaptureFixture
) -> None:
    config_path = _write_config(tmp_path / "extra.json", {"litellm_model": "gpt"})
    monkeypatch.setenv("LISTAHAN_CONFIG_JSON", str(config_path))

    with caplog.at_level(logging.WARNING, logger="listahan.settings"):
        load_settings()

    assert "litellm_model" in caplog.text


def test_env_quota_zero_means_unlimited(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("LISTAHAN_STORAGE_QUOTA_BYTES", "0")
    assert load_settings().storage_quota_bytes is None


def test_env_quota_parsed(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("LISTAHAN_STORAGE_QUOTA_BYTES", "4096")
    assert load_settings().storage_quota_bytes == 4096


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("storage_quota_bytes", -1),
        ("storage_quota_bytes", "lots"),
        ("compact_layout_width", 0),
        ("storage_backend", "redis"),
        ("storage_key", "   "),
    ],
)
def test_invalid_values_raise_settings_error(field: str, value: object) -> None:
    with pytest.raises(SettingsError):
        load_settings(**{field: value})


def test_unknown_theme_falls_back_to_default() -> None:
    assert load_settings(theme_mode="sepia").theme_mode == "dark"


def test_blank_default_title_falls_back() -> None:
    assert load_settings(default_note_title="  ").default_note_title == DEFAULT_NOTE_TITLE


def test_dotenv_values_are_used(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    env_file = tmp_path / "custom.env"
    env_file.write_text("LISTAHAN_STORAGE_BACKEND=memory\n", encoding="utf-8")
    monkeypatch.setenv("LISTAHAN_ENV_FILE", str(env_file))

    assert load_settings().storage_backend == "memory"


def test_environment_beats_dotenv(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    env_file = tmp_path / "custom.env"
    env_file.write_text("LISTAHAN_DEFAULT_NOTE_TITLE=From dotenv\n", encoding="utf-8")
    monkeypatch.setenv("LISTAHAN_ENV_FILE", str(env_file))
    monkeypatch.setenv("LISTAHAN_DEFAULT_NOTE_TITLE", "From env")

    assert load_settings().default_note_title == "From env"
