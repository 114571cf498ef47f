"""Tests for picker frame rendering."""

from __future__ import annotations

from prompt_toolkit.formatted_text import fragment_list_to_text
from prompt_toolkit.utils import get_cwidth

from snip.picker import PickerState
from snip.render import HELP_TEXT, render, visible_window
from snip.store import Snippet


def _state(*commands, query="", selected=0):
    state = PickerState([Snippet(id=idx + 1, command=cmd, created_at="") for idx, cmd in enumerate(commands)])
    state.query = query
    state.selected = selected
    state.refresh()
    return state


def _lines(fragments):
    return fragment_list_to_text(fragments).split("\n")


def test_frame_has_list_search_box_and_help():
    frame = render(_state("git status", "git log", query="git", selected=1), height=6, width=40)
    lines = _lines(frame)
    assert lines[0] == "  git status"
    assert lines[1] == "> git log"
    assert lines[-2].startswith("search: git")
    assert lines[-2].endswith("2/2")
    assert lines[-1] == HELP_TEXT
    assert len(lines) == 6


def test_selected_row_uses_highlight_style():
    frame = render(_state("a", "b", selected=1), height=5)
    selected = [text for style, text in frame if style == "class:selected"]
    assert selected == ["> b"]


def test_no_matches_placeholder():
    frame = render(_state("git status", query="zzz"), height=5)
    text = fragment_list_to_text(frame)
    assert "no matches" in text
    assert "0/1" in text


def test_long_commands_are_clipped():
    frame = render(_state("x" * 100), height=4, width=20)
    first = _lines(frame)[0]
    assert len(first) == 20
    assert first.endswith("…")


def test_list_scrolls_to_keep_selection_visible():
    commands = [f"cmd{idx}" for idx in range(10)]
    frame = render(_state(*commands, selected=7), height=5, width=40)
    lines = _lines(frame)
    assert lines[:3] == ["  cmd5", "  cmd6", "> cmd7"]


def test_visible_window():
    assert visible_window(3, 2, 10) == 0
    assert visible_window(10, 0, 3) == 0
    assert visible_window(10, 5, 3) == 3
    assert visible_window(10, 9, 3) == 7


def test_wide_characters_are_clipped_by_columns():
    frame = render(_state("echo " + "日本語" * 20), height=5, width=30)
    first = _lines(frame)[0]
    assert get_cwidth(first) <= 30
    assert first.endswith("…")
    assert first.startswith("> echo 日本")


def test_wide_characters_that_fit_are_untouched():
    frame = render(_state("echo 日本語"), height=5, width=30)
    assert _lines(frame)[0] == "> echo 日本語"


def test_frame_never_exceeds_height():
    state = _state("a", "b")
    for height in range(1, 6):
        assert len(_lines(render(state, height=height))) == height


def test_short_terminal_drops_help_then_list():
    state = _state("a", "b")
    assert _lines(render(state, height=2)) == ["> a", "search:   2/2"]
    assert _lines(render(state, height=1)) == ["search:   2/2"]
