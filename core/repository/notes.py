"""Persistence adapter for the notes collection.

The whole collection is serialised as one JSON array under a single key of a
:class:`~core.repository.kv_store.KeyValueStore`. Reads never fail the caller:
missing, unreadable, or corrupt data resets the slot to an empty collection.
Writes raise :class:`~core.exceptions.NoteStorageError` subclasses, and so do
the reads backing the single-note update helpers.

Updates:
  v0.3.1 - 2026-10-19 - Fail single-note updates when the slot cannot be read.
  v0.3.0 - 2026-10-15 - Drop duplicate identifiers and compact the slot on load.
  v0.2.0 - 2026-10-14 - Add read-modify-write helpers for single notes.
  v0.1.0 - 2026-10-12 - Extract notes slot load/save from the workspace.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from models.note import Note, is_valid_note_record

from ..exceptions import (
    CorruptNoteDataError,
    NoteNotFoundError,
    NoteWriteError,
    StorageUnavailableError,
)
from .base import RepositoryError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .kv_store import KeyValueStore

logger = logging.getLogger("listahan.storage")

DEFAULT_STORAGE_KEY = "notes"
_EMPTY_COLLECTION = "[]"


def encode_notes(notes: Iterable[Note]) -> str:
    """Serialise *notes* into the stored JSON array."""
    return json.dumps([note.to_record() for note in notes], ensure_ascii=False)


def decode_records(raw: str) -> list[Any]:
    """Return the raw entries of a stored notes array."""
    try:
        parsed: object = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CorruptNoteDataError("Stored notes are not valid JSON") from exc
    if not isinstance(parsed, list):
        raise CorruptNoteDataError("Stored notes are not in array format")
    return parsed


class NoteStorage:
    """Load and persist the ordered notes collection."""

    def __init__(
        self,
        store: KeyValueStore,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        compact_on_load: bool = True,
    ) -> None:
        self._store = store
        self._key = key
        self._compact_on_load = compact_on_load

    @property
    def key(self) -> str:
        """Return the slot key holding the collection."""
        return self._key

    def is_available(self) -> bool:
        """Return True when the underlying durable store is present."""
        return self._store.is_available()

    def load(self) -> list[Note]:
        """Return stored notes in order, recovering from missing or corrupt data."""
        if not self._store.is_available():
            logger.info("Durable store unavailable; starting with an empty collection")
            return []
        try:
            raw = self._store.get_item(self._key)
        except RepositoryError:
            logger.warning("Unable to read notes slot %r", self._key, exc_info=True)
            return []
        if raw is None:
            self._reset()
            return []
        try:
            records = decode_records(raw)
        except CorruptNoteDataError as exc:
            logger.warning("Resetting notes slot %r: %s", self._key, exc)
            self._reset()
            return []

        notes = self._valid_notes(records)
        dropped = len(records) - len(notes)
        if dropped:
            logger.warning("Dropped %d invalid note(s) from slot %r", dropped, self._key)
            if self._compact_on_load:
                self._rewrite(encode_notes(notes), "compact")
        return notes

    def save_all(self, notes: Iterable[Note]) -> None:
        """Persist the full ordered collection."""
        self._write(encode_notes(notes))

    def save_one(self, note: Note) -> None:
        """Replace the stored entry sharing ``note.id`` and persist the collection.

        Raises:
            NoteNotFoundError: No stored entry has ``note.id``.
            NoteStorageError: The slot could not be read or written.
        """
        notes = self._load_for_update()
        for index, existing in enumerate(notes):
            if existing.id == note.id:
                notes[index] = note
                break
        else:
            raise NoteNotFoundError(f"Note {note.id} not found")
        self.save_all(notes)

    def delete_one(self, note_id: str) -> bool:
        """Remove the stored entry for *note_id*; return whether one was removed.

        Unlike :meth:`load`, a failed read raises instead of reporting an empty
        collection, so a missing entry always means the slot does not hold it.
        """
        notes = self._load_for_update()
        remaining = [note for note in notes if note.id != note_id]
        if len(remaining) == len(notes):
            return False
        self.save_all(remaining)
        return True

    def _load_for_update(self) -> list[Note]:
        if not self._store.is_available():
            raise StorageUnavailableError("No durable store is available for notes")
        try:
            raw = self._store.get_item(self._key)
        except RepositoryError as exc:
            logger.error("Failed to read notes slot %r before writing: %s", self._key, exc)
            raise NoteWriteError(f"Failed to read notes: {exc}") from exc
        if raw is None:
            return []
        try:
            records = decode_records(raw)
        except CorruptNoteDataError as exc:
            logger.error("Refusing to overwrite notes slot %r: %s", self._key, exc)
            raise NoteWriteError(f"Stored notes are unreadable: {exc}") from exc
        return self._valid_notes(records)

    @staticmethod
    def _valid_notes(records: list[Any]) -> list[Note]:
        notes: list[Note] = []
        seen: set[str] = set()
        for record in records:
            if not is_valid_note_record(record) or record["id"] in seen:
                continue
            seen.add(record["id"])
            notes.append(Note.from_record(record))
        return notes

    def _write(self, payload: str) -> None:
        if not self._store.is_available():
            raise StorageUnavailableError("No durable store is available for notes")
        try:
            self._store.set_item(self._key, payload)
        except RepositoryError as exc:
            logger.error("Failed to write notes slot %r: %s", self._key, exc)
            raise NoteWriteError(f"Failed to write notes: {exc}") from exc

    def _reset(self) -> None:
        self._rewrite(_EMPTY_COLLECTION, "reset")

    def _rewrite(self, payload: str, reason: str) -> None:
        try:
            self._store.set_item(self._key, payload)
        except RepositoryError:
            logger.warning("Unable to %s notes slot %r", reason, self._key, exc_info=True)


__all__ = ["DEFAULT_STORAGE_KEY", "NoteStorage", "decode_records", "encode_notes"]
