"""Sidebar search ordering tests.

Updates: v0.1.0 - 2026-10-16 - Cover match tiers, recency ordering, and highlight spans.
"""

from __future__ import annotations

import pytest

from core import MemoryKeyValueStore, Note, NoteManager, NoteStorage, NoteView, match_spans
from core.search import filter_notes


def _note(note_id: str, title: str, content: str = "", *, modified: int) -> Note:
    return Note(id=note_id, title=title, content=content, last_modified=modified)


@pytest.fixture()
def notes() -> list[Note]:
    return [
        _note("content-new", "Errands", "<p>buy milk</p>", modified=900),
        _note("exact-old", "Milk", modified=100),
        _note("title-new", "Milk run", modified=800),
        _note("other", "Taxes", "<p>receipts</p>", modified=1_000),
        _note("exact-new", "MILK", modified=200),
        _note("title-old", "Oat milk recipe", modified=300),
    ]


def test_empty_query_orders_by_recency(notes: list[Note]) -> None:
    ordered = [note.id for note in filter_notes(notes, "")]
    assert ordered == [
        "other",
        "content-new",
        "title-new",
        "title-old",
        "exact-new",
        "exact-old",
    ]


def test_query_ranks_exact_title_then_title_then_content(notes: list[Note]) -> None:
    ordered = [note.id for note in filter_notes(notes, "milk")]
    assert ordered == [
        "exact-new",
        "exact-old",
        "title-new",
        "title-old",
        "content-new",
    ]


def test_query_matching_nothing_is_empty(notes: list[Note]) -> None:
    view = NoteView(notes, "zebra")
    assert list(view) == []
    assert len(view) == 0
    assert not view


def test_equal_timestamps_keep_collection_order() -> None:
    notes = [
        _note("first", "Same", modified=5),
        _note("second", "Same", modified=5),
        _note("third", "Same", modified=5),
    ]
    assert [note.id for note in filter_notes(notes, "")] == ["first", "second", "third"]
    assert [note.id for note in filter_notes(notes, "same")] == ["first", "second", "third"]


def test_view_is_restartable(notes: list[Note]) -> None:
    view = NoteView(notes, "milk")
    assert list(view) == list(view)
    assert len(view) == 5
    assert view.query == "milk"


def test_view_snapshot_ignores_later_mutation(notes: list[Note]) -> None:
    view = NoteView(notes)
    notes.clear()
    assert len(view) == 6


def test_manager_view_follows_session_query() -> None:
    manager = NoteManager(NoteStorage(MemoryKeyValueStore()))
    created = manager.create_note()
    manager.edit_title("Grocery list")
    manager.save_selected()

    manager.set_search_query("grocery")
    assert [note.id for note in manager.filtered_view()] == [created.id]
    assert list(manager.filtered_view("absent")) == []
    assert manager.search_query == "grocery"


@pytest.mark.parametrize(
    ("text", "query", "expected"),
    [
        ("Milk and milk", "milk", [(0, 4), (9, 13)]),
        ("aaaa", "aa", [(0, 2), (2, 4)]),
        ("Anything", "", []),
        ("Taxes", "milk", []),
    ],
)
def test_match_spans(text: str, query: str, expected: list[tuple[int, int]]) -> None:
    assert match_spans(text, query) == expected
