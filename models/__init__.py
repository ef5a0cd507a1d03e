"""Data models for Listahan.

Updates: v0.1.0 - 2026-10-12 - Export Note dataclass.
"""

from .note import Note, is_valid_note_record, now_ms

__all__ = ["Note", "is_valid_note_record", "now_ms"]
