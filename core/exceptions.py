"""Common exception classes for core package.

All exceptions ultimately inherit from :class:`ListahanError`, allowing
callers to catch a single base class for any workspace failure while still
distinguishing individual error categories when needed.

Storage failures reach callers as :class:`NoteStorageError` subclasses. The
persistence adapter recovers from unreadable or corrupt data on its own, so
:class:`CorruptNoteDataError` never escapes ``NoteStorage.load``.

Updates:
  v0.2.0 - 2026-10-15 - Split write failures from unavailable storage.
  v0.1.0 - 2026-10-12 - Created module with note error hierarchy.
"""

from __future__ import annotations


class ListahanError(Exception):
    """Base exception for Listahan failures."""


class NoteError(ListahanError):
    """Base class for note workflow failures."""


class NoteNotFoundError(NoteError):
    """Raised when a note cannot be found in the collection."""


class NoteStorageError(NoteError):
    """Raised when persistence for notes fails."""


class NoteWriteError(NoteStorageError):
    """Raised when the durable store rejects a write (for example, quota exceeded)."""


class StorageUnavailableError(NoteStorageError):
    """Raised when a write is attempted without a durable store present."""


class CorruptNoteDataError(NoteError):
    """Raised when the stored notes slot cannot be decoded."""


__all__ = [
    "CorruptNoteDataError",
    "ListahanError",
    "NoteError",
    "NoteNotFoundError",
    "NoteStorageError",
    "NoteWriteError",
    "StorageUnavailableError",
]
