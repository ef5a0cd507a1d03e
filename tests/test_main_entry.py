"""Lightweight integration checks for main module.

Updates:
  v0.2.0 - 2026-10-17 - Cover subcommand dispatch and export exit codes.
  v0.1.0 - 2026-10-14 - Cover settings failures and GUI dependency fallback.
"""

from __future__ import annotations

import logging
import sys
import types
from pathlib import Path
from typing import Any, cast

import pytest

import main
from config import SettingsError, load_settings
from core import ListahanError, MemoryKeyValueStore, NoteManager, NoteStorage


def _patch_main(monkeypatch: pytest.MonkeyPatch, name: str, value: object) -> None:
    monkeypatch.setattr(cast(Any, main), name, value)


class _ClosingManager(NoteManager):
    def __init__(self) -> None:
        super().__init__(NoteStorage(MemoryKeyValueStore()))
        self.closed = False

    def close(self) -> None:
        self.closed = True
        super().close()


@pytest.fixture()
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LISTAHAN_ENV_FILE", "")
    monkeypatch.delenv("LISTAHAN_CONFIG_JSON", raising=False)
    return load_settings(storage_backend="memory", db_path=tmp_path / "notes.db")


@pytest.fixture()
def manager(monkeypatch: pytest.MonkeyPatch, settings) -> _ClosingManager:
    result = _ClosingManager()
    _patch_main(monkeypatch, "setup_logging", lambda _path: None)
    _patch_main(monkeypatch, "load_settings", lambda: settings)
    _patch_main(monkeypatch, "build_note_manager", lambda _settings: result)
    return result


def test_main_returns_error_when_settings_fail(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    _patch_main(monkeypatch, "setup_logging", lambda _path: None)

    def _raise() -> None:
        raise SettingsError("invalid config")

    _patch_main(monkeypatch, "load_settings", _raise)

    with caplog.at_level(logging.ERROR, logger="listahan.main"):
        assert main.main(["--no-gui"]) == 2
    assert "invalid config" in caplog.text


def test_main_print_settings_exits_before_manager(
    manager: _ClosingManager, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main.main(["--print-settings"]) == 0
    output = capsys.readouterr().out
    assert "Listahan configuration" in output
    assert "Storage backend: memory" in output
    assert manager.closed is False


def test_main_returns_error_when_manager_init_fails(
    monkeypatch: pytest.MonkeyPatch, settings
) -> None:
    _patch_main(monkeypatch, "setup_logging", lambda _path: None)
    _patch_main(monkeypatch, "load_settings", lambda: settings)

    def _boom(_settings: object) -> NoteManager:
        raise ListahanError("storage offline")

    _patch_main(monkeypatch, "build_note_manager", _boom)

    assert main.main(["--no-gui"]) == 3


def test_main_no_gui_reports_ready(
    manager: _ClosingManager, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main.main(["--no-gui"]) == 0
    assert "Listahan ready with 0 notes. Storage at memory" in capsys.readouterr().out
    assert manager.closed is True


def test_main_dispatches_subcommands(
    manager: _ClosingManager, capsys: pytest.CaptureFixture[str]
) -> None:
    manager.create_note()
    assert main.main(["list"]) == 0
    assert "Total: 1 notes" in capsys.readouterr().out
    assert main.main(["show", "missing"]) == 5
    assert manager.closed is True


def test_main_launches_gui_by_default(
    monkeypatch: pytest.MonkeyPatch, manager: _ClosingManager, settings
) -> None:
    called: dict[str, object] = {}

    def _fake_launch(launched_manager: object, launched_settings: object | None = None) -> int:
        called["manager"] = launched_manager
        called["settings"] = launched_settings
        return 7

    monkeypatch.setitem(sys.modules, "gui", types.SimpleNamespace(launch_listahan=_fake_launch))

    assert main.main([]) == 7
    assert called["manager"] is manager
    assert called["settings"] is settings
    assert manager.closed is True


def test_main_returns_error_when_gui_dependency_missing(
    monkeypatch: pytest.MonkeyPatch,
    manager: _ClosingManager,
    caplog: pytest.LogCaptureFixture,
) -> None:
    class _GuiError(RuntimeError):
        pass

    def _raise(_: object, __: object | None = None) -> int:
        raise _GuiError("PySide6 is not installed")

    gui_stub = types.SimpleNamespace(launch_listahan=_raise, GuiDependencyError=_GuiError)
    monkeypatch.setitem(sys.modules, "gui", gui_stub)

    with caplog.at_level(logging.ERROR, logger="listahan.main"):
        assert main.main(["--gui"]) == 4
    assert "Unable to start GUI" in caplog.text
    assert manager.closed is True
