"""Sidebar visibility policy for compact and wide window layouts.

The shell computes the ``compact`` flag from the window width and feeds it in;
the note manager never sees viewport state.

Updates:
  v0.1.0 - 2026-10-16 - Extract sidebar visibility rules from the notes window.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_COMPACT_WIDTH = 768

__all__ = ["DEFAULT_COMPACT_WIDTH", "SidebarLayoutPolicy", "is_compact_width"]


def is_compact_width(width: int, threshold: int = DEFAULT_COMPACT_WIDTH) -> bool:
    """Return True when *width* pixels calls for the compact layout."""
    return width < threshold


@dataclass(slots=True)
class SidebarLayoutPolicy:
    """Track whether the note list sidebar is shown.

    Wide layouts always show the sidebar. Compact layouts show either the
    sidebar or the editor: the sidebar while nothing is selected, the editor
    once a note is opened.
    """

    compact: bool = False
    sidebar_visible: bool = True

    def update_layout(self, compact: bool, *, has_selection: bool) -> bool:
        """Apply a new compact flag and return the sidebar visibility."""
        self.compact = compact
        self.sidebar_visible = not has_selection if compact else True
        return self.sidebar_visible

    def toggle(self) -> bool:
        self.sidebar_visible = not self.sidebar_visible
        return self.sidebar_visible

    def note_opened(self) -> bool:
        """Hide the sidebar in compact mode after selecting or creating a note."""
        if self.compact:
            self.sidebar_visible = False
        return self.sidebar_visible

    def selection_cleared(self) -> bool:
        """Show the sidebar in compact mode once the open note is gone."""
        if self.compact:
            self.sidebar_visible = True
        return self.sidebar_visible
