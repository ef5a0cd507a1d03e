"""Core service layer for Listahan.

Updates:
  v0.3.0 - 2026-10-16 - Export search view and confirmation gate helpers.
  v0.2.0 - 2026-10-14 - Export build_note_manager factory for shared bootstrap.
  v0.1.0 - 2026-10-12 - Surface NoteStorage and the initial NoteManager API.
"""

from models.note import Note

from .confirmation import (
    ConfirmationGate,
    ConfirmationIntent,
    ConfirmationPrompt,
    PendingConfirmation,
)
from .exceptions import (
    CorruptNoteDataError,
    ListahanError,
    NoteError,
    NoteNotFoundError,
    NoteStorageError,
    NoteWriteError,
    StorageUnavailableError,
)
from .factory import build_key_value_store, build_note_manager
from .note_manager import DEFAULT_NOTE_TITLE, NoteManager
from .repository import (
    KeyValueStore,
    MemoryKeyValueStore,
    NoteStorage,
    RepositoryError,
    SQLiteKeyValueStore,
    UnavailableKeyValueStore,
)
from .search import NoteView, filter_notes, match_spans

__all__ = [
    "ConfirmationGate",
    "ConfirmationIntent",
    "ConfirmationPrompt",
    "CorruptNoteDataError",
    "DEFAULT_NOTE_TITLE",
    "KeyValueStore",
    "ListahanError",
    "MemoryKeyValueStore",
    "Note",
    "NoteError",
    "NoteManager",
    "NoteNotFoundError",
    "NoteStorage",
    "NoteStorageError",
    "NoteView",
    "NoteWriteError",
    "PendingConfirmation",
    "RepositoryError",
    "SQLiteKeyValueStore",
    "StorageUnavailableError",
    "UnavailableKeyValueStore",
    "build_key_value_store",
    "build_note_manager",
    "filter_notes",
    "match_spans",
]
