"""Filtering and ordering for the sidebar note list.

Ordering contract:

* an empty query keeps every note, newest ``last_modified`` first;
* otherwise matches are grouped into tiers (title equals the query, title
  contains the query, content-only match) and each tier is ordered newest
  ``last_modified`` first;
* equal timestamps keep collection order.

Matching is a case-insensitive substring test on the raw title and content
strings; rich-text content is never parsed.

Updates:
  v0.2.0 - 2026-10-16 - Rank exact and partial title matches ahead of content matches.
  v0.1.0 - 2026-10-13 - Extract note filtering into a restartable view.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from models.note import Note

__all__ = ["NoteView", "filter_notes", "match_spans", "match_tier"]

TIER_EXACT_TITLE = 0
TIER_TITLE = 1
TIER_CONTENT = 2


def match_tier(note: Note, needle: str) -> int | None:
    """Return the ranking tier of *note* for a casefolded *needle*, or None."""
    title = note.title.casefold()
    if title == needle:
        return TIER_EXACT_TITLE
    if needle in title:
        return TIER_TITLE
    if needle in note.content.casefold():
        return TIER_CONTENT
    return None


def filter_notes(notes: Iterable[Note], query: str) -> Iterator[Note]:
    """Yield notes matching *query* in display order."""
    if not query:
        yield from sorted(notes, key=lambda note: -note.last_modified)
        return
    needle = query.casefold()
    ranked: list[tuple[int, int, Note]] = []
    for note in notes:
        tier = match_tier(note, needle)
        if tier is not None:
            ranked.append((tier, -note.last_modified, note))
    ranked.sort(key=lambda entry: (entry[0], entry[1]))
    for _, _, note in ranked:
        yield note


class NoteView:
    """Lazy, restartable view over a snapshot of notes filtered by a query."""

    __slots__ = ("_notes", "_query")

    def __init__(self, notes: Iterable[Note], query: str = "") -> None:
        self._notes = tuple(notes)
        self._query = query

    @property
    def query(self) -> str:
        return self._query

    def __iter__(self) -> Iterator[Note]:
        return filter_notes(self._notes, self._query)

    def __len__(self) -> int:
        if not self._query:
            return len(self._notes)
        needle = self._query.casefold()
        return sum(1 for note in self._notes if match_tier(note, needle) is not None)

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"NoteView(query={self._query!r}, total={len(self._notes)})"


def match_spans(text: str, query: str) -> list[tuple[int, int]]:
    """Return non-overlapping ``(start, end)`` spans where *query* occurs in *text*."""
    if not query:
        return []
    haystack = text.casefold()
    needle = query.casefold()
    if len(haystack) != len(text):
        # casefold changed the length (e.g. "ß" -> "ss"); fall back to lower()
        haystack = text.lower()
        needle = query.lower()
        if len(haystack) != len(text):
            return []
    spans: list[tuple[int, int]] = []
    start = haystack.find(needle)
    while start != -1:
        end = start + len(needle)
        spans.append((start, end))
        start = haystack.find(needle, end)
    return spans
