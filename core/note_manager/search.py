"""Sidebar search helpers for the note manager.

Updates:
  v0.1.0 - 2026-10-16 - Expose filtered note view from the manager.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..search import NoteView

if TYPE_CHECKING:
    from .state import WorkspaceState

__all__ = ["NoteSearchMixin"]


class NoteSearchMixin:
    """Search query state and the derived note list."""

    _state: WorkspaceState

    @property
    def search_query(self) -> str:
        return self._state.search_query

    def set_search_query(self, query: str) -> None:
        """Store the sidebar search query."""
        self._state.search_query = query

    def filtered_view(self, query: str | None = None) -> NoteView:
        """Return notes matching *query* (default: the session query) in display order."""
        resolved = self._state.search_query if query is None else query
        return NoteView(self._state.notes, resolved)
