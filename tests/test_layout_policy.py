"""Sidebar layout policy tests.

Updates: v0.1.0 - 2026-10-16 - Cover compact and wide sidebar visibility rules.
"""

from __future__ import annotations

import pytest

from gui.layout_policy import DEFAULT_COMPACT_WIDTH, SidebarLayoutPolicy, is_compact_width


@pytest.mark.parametrize(
    ("width", "expected"),
    [(320, True), (DEFAULT_COMPACT_WIDTH - 1, True), (DEFAULT_COMPACT_WIDTH, False), (1280, False)],
)
def test_is_compact_width(width: int, expected: bool) -> None:
    assert is_compact_width(width) is expected


def test_custom_threshold() -> None:
    assert is_compact_width(900, 1024)
    assert not is_compact_width(900, 640)


def test_wide_layout_always_shows_sidebar() -> None:
    policy = SidebarLayoutPolicy()
    assert policy.update_layout(False, has_selection=True)
    assert policy.note_opened()
    assert policy.selection_cleared()


def test_compact_layout_hides_sidebar_when_note_open() -> None:
    policy = SidebarLayoutPolicy()
    assert policy.update_layout(True, has_selection=True) is False
    assert policy.update_layout(True, has_selection=False) is True


def test_compact_layout_follows_selection_changes() -> None:
    policy = SidebarLayoutPolicy()
    policy.update_layout(True, has_selection=False)

    assert policy.note_opened() is False
    assert policy.selection_cleared() is True


def test_toggle_flips_visibility() -> None:
    policy = SidebarLayoutPolicy(compact=True, sidebar_visible=False)
    assert policy.toggle() is True
    assert policy.toggle() is False
