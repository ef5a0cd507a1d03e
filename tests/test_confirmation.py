"""Confirmation gate and discard/delete workflow tests.

Updates:
  v0.2.1 - 2026-10-19 - Cover deletes when the store cannot be read.
  v0.2.0 - 2026-10-16 - Cover failed deletes returning the gate to idle.
  v0.1.0 - 2026-10-13 - Cover switch and delete confirmations.
"""

from __future__ import annotations

import itertools

import pytest

from core import (
    ConfirmationGate,
    ConfirmationIntent,
    MemoryKeyValueStore,
    Note,
    NoteManager,
    NoteStorage,
    NoteStorageError,
    NoteWriteError,
)
from core.repository import RepositoryError


class _FlakyStore(MemoryKeyValueStore):
    def __init__(self) -> None:
        super().__init__()
        self.fail_reads = False
        self.fail_writes = False

    def get_item(self, key: str) -> str | None:
        if self.fail_reads:
            raise RepositoryError("locked")
        return super().get_item(key)

    def set_item(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise RepositoryError("read-only")
        super().set_item(key, value)


@pytest.fixture()
def store() -> _FlakyStore:
    return _FlakyStore()


@pytest.fixture()
def manager(store: _FlakyStore) -> NoteManager:
    counter = itertools.count(1)
    ticks = itertools.count(1_000, 1_000)
    return NoteManager(
        NoteStorage(store),
        clock=lambda: next(ticks),
        id_factory=lambda: f"n{next(counter)}",
    )


def _two_notes(manager: NoteManager) -> tuple[Note, Note]:
    """Create A then B; A ends up selected with an unsaved title edit."""
    note_a = manager.create_note()
    note_b = manager.create_note()
    manager.select_note(note_a.id)
    manager.edit_title("Draft")
    return note_a, note_b


def test_gate_starts_idle() -> None:
    gate = ConfirmationGate()
    assert gate.state == "idle"
    assert not gate.is_pending
    assert gate.clear() is None


def test_gate_last_request_wins() -> None:
    gate = ConfirmationGate()
    first = Note(id="a", title="A", content="", last_modified=1)
    second = Note(id="b", title="B", content="", last_modified=2)

    gate.request(first, ConfirmationIntent.SWITCH)
    held = gate.request(second, ConfirmationIntent.DELETE)

    assert gate.pending is held
    assert gate.pending.target.id == "b"
    assert gate.state == "pending"


def test_prompts_describe_each_intent() -> None:
    note = Note(id="a", title="A", content="", last_modified=1)
    gate = ConfirmationGate()

    delete_prompt = gate.request(note, ConfirmationIntent.DELETE).prompt()
    switch_prompt = gate.request(note, ConfirmationIntent.SWITCH).prompt()

    assert delete_prompt.title == "Delete Note"
    assert delete_prompt.confirm_text == "Delete"
    assert "cannot be undone" in delete_prompt.message
    assert switch_prompt.title == "Unsaved Changes"
    assert switch_prompt.confirm_text == "Discard"
    assert switch_prompt.cancel_text == "Cancel"


def test_switch_with_unsaved_changes_is_blocked(manager: NoteManager) -> None:
    note_a, note_b = _two_notes(manager)

    pending = manager.select_note(note_b.id)

    assert pending is not None
    assert pending.intent is ConfirmationIntent.SWITCH
    assert pending.target.id == note_b.id
    assert manager.selected_id == note_a.id
    assert manager.working_title == "Draft"
    assert manager.has_unsaved_changes


def test_cancel_switch_keeps_working_copy(manager: NoteManager) -> None:
    note_a, note_b = _two_notes(manager)
    manager.select_note(note_b.id)

    manager.cancel()

    assert manager.pending_confirmation is None
    assert manager.selected_id == note_a.id
    assert manager.working_title == "Draft"
    assert manager.has_unsaved_changes


def test_confirm_switch_discards_edits(manager: NoteManager, store: _FlakyStore) -> None:
    note_a, note_b = _two_notes(manager)
    manager.select_note(note_b.id)

    resolved = manager.confirm()

    assert resolved is not None and resolved.intent is ConfirmationIntent.SWITCH
    assert manager.selected_id == note_b.id
    assert manager.working_title == note_b.title
    assert not manager.has_unsaved_changes
    # The discarded draft never reached storage.
    stored = {note.id: note for note in NoteStorage(store).load()}
    assert stored[note_a.id].title == note_a.title


def test_confirm_when_idle_is_noop(manager: NoteManager) -> None:
    manager.create_note()
    assert manager.confirm() is None


def test_delete_selected_clears_selection_and_storage(
    manager: NoteManager, store: _FlakyStore
) -> None:
    note = manager.create_note()

    pending = manager.request_delete(note)
    assert pending.intent is ConfirmationIntent.DELETE
    assert [n.id for n in manager.notes] == [note.id]

    manager.confirm()

    assert manager.notes == ()
    assert manager.selected_id is None
    assert manager.pending_confirmation is None
    assert NoteStorage(store).load() == []


def test_delete_other_note_keeps_selection(manager: NoteManager) -> None:
    note_a, note_b = _two_notes(manager)

    manager.request_delete(note_b.id)
    manager.confirm()

    assert [note.id for note in manager.notes] == [note_a.id]
    assert manager.selected_id == note_a.id
    assert manager.working_title == "Draft"


def test_cancel_delete_changes_nothing(manager: NoteManager, store: _FlakyStore) -> None:
    note = manager.create_note()
    before = store.get_item("notes")

    manager.request_delete(note.id)
    manager.cancel()

    assert [n.id for n in manager.notes] == [note.id]
    assert manager.selected_id == note.id
    assert store.get_item("notes") == before


def test_failed_delete_keeps_note_and_returns_to_idle(
    manager: NoteManager, store: _FlakyStore
) -> None:
    note = manager.create_note()
    manager.request_delete(note.id)
    store.fail_writes = True

    with pytest.raises(NoteWriteError):
        manager.confirm()

    assert manager.pending_confirmation is None
    assert [n.id for n in manager.notes] == [note.id]
    assert manager.selected_id == note.id


def test_delete_with_unreadable_store_keeps_note_everywhere(
    manager: NoteManager, store: _FlakyStore
) -> None:
    note = manager.create_note()
    manager.request_delete(note.id)
    store.fail_reads = True

    with pytest.raises(NoteStorageError):
        manager.confirm()

    assert manager.pending_confirmation is None
    assert [n.id for n in manager.notes] == [note.id]
    assert manager.selected_id == note.id
    store.fail_reads = False
    assert [n.id for n in NoteStorage(store).load()] == [note.id]


def test_newer_request_replaces_pending(manager: NoteManager) -> None:
    note_a, note_b = _two_notes(manager)
    manager.select_note(note_b.id)

    manager.request_delete(note_b.id)
    manager.confirm()

    assert [note.id for note in manager.notes] == [note_a.id]
    assert manager.selected_id == note_a.id
    assert manager.has_unsaved_changes


def test_close_clears_pending(manager: NoteManager) -> None:
    note = manager.create_note()
    manager.request_delete(note.id)
    manager.close()
    assert manager.pending_confirmation is None
