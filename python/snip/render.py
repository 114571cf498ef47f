"""Frame rendering for the picker."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import Style
from prompt_toolkit.utils import get_cwidth

if TYPE_CHECKING:  # pragma: no cover
    from .picker import PickerState

PICKER_STYLE = Style.from_dict(
    {
        "item": "",
        "selected": "reverse bold",
        "empty": "italic ansibrightblack",
        "prompt": "bold ansicyan",
        "query": "",
        "counter": "ansibrightblack",
        "help": "ansibrightblack",
    }
)

HELP_TEXT = "up/down move  enter run  ctrl-d delete  esc quit"
SELECTED_MARKER = "> "
ITEM_MARKER = "  "

ELLIPSIS = "…"


def visible_window(total: int, selected: int, rows: int) -> int:
    """Return the index of the first list row shown so *selected* stays visible."""
    if rows <= 0 or total <= rows:
        return 0
    start = max(0, selected - rows + 1)
    return min(start, total - rows)


def _clip(text: str, width: int) -> str:
    """Cut *text* to at most *width* terminal columns."""
    text = text.replace("\n", " ")
    if width <= 0:
        return ""
    if get_cwidth(text) <= width:
        return text
    limit = width - get_cwidth(ELLIPSIS)
    used = 0
    kept = []
    for ch in text:
        ch_width = get_cwidth(ch)
        if used + ch_width > limit:
            break
        kept.append(ch)
        used += ch_width
    return "".join(kept) + ELLIPSIS


def render(state: "PickerState", height: int = 24, width: int = 80) -> FormattedText:
    """Project *state* onto a full frame: list, search box and help line.

    The frame never exceeds *height* lines: on very short terminals the help
    line goes first, then the list, and the search box is always kept.
    """
    show_help = height >= 3
    rows = max(0, height - 1 - int(show_help))
    item_width = width - len(SELECTED_MARKER)
    lines = []
    if rows:
        start = visible_window(len(state.filtered), state.selected, rows)
        shown = state.filtered[start : start + rows]
        if not shown:
            lines.append([("class:empty", _clip(ITEM_MARKER + "no matches", width))])
        for offset, index in enumerate(shown):
            command = _clip(state.snippets[index].command, item_width)
            if start + offset == state.selected:
                lines.append([("class:selected", SELECTED_MARKER + command)])
            else:
                lines.append([("class:item", ITEM_MARKER + command)])
        lines.extend([] for _ in range(rows - len(lines)))
    lines.append(
        [
            ("class:prompt", "search: "),
            ("class:query", state.query),
            ("class:counter", f"  {len(state.filtered)}/{len(state.snippets)}"),
        ]
    )
    if show_help:
        lines.append([("class:help", _clip(HELP_TEXT, width))])
    fragments = []
    for number, line in enumerate(lines):
        if number:
            fragments.append(("", "\n"))
        fragments.extend(line)
    return FormattedText(fragments)


__all__ = ["PICKER_STYLE", "HELP_TEXT", "render", "visible_window"]
