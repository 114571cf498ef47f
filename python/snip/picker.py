"""Interactive snippet picker.

The picker is a small state machine: every key press is translated into a
:class:`~snip.keys.KeyEvent`, applied to :class:`PickerState`, and the frame
is redrawn from scratch.  A session ends with either :class:`Selected` or
:class:`Cancelled`.  Only the delete key touches the store; a committed
selection just hands the snippet back to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Union

from prompt_toolkit.input import Input
from prompt_toolkit.output import Output

from .filtering import filter_indices
from .keys import EventKind, KeyEvent, translate_key
from .render import PICKER_STYLE, render
from .terminal import draw, interactive_terminal, open_input, open_output, read_key_presses

if TYPE_CHECKING:  # pragma: no cover
    from .store import Snippet, SnippetStore

LOGGER = logging.getLogger("snip.picker")

# Navigation aliases, only honoured while the query is empty.
VIM_KEYS = {"j": EventKind.DOWN, "k": EventKind.UP}


@dataclass(frozen=True)
class Selected:
    snippet: "Snippet"


@dataclass(frozen=True)
class Cancelled:
    pass


Outcome = Union[Selected, Cancelled]


@dataclass
class PickerState:
    """Mutable picker session state.

    ``snippets`` is the caller's list and is edited in place. ``filtered`` is
    derived from ``snippets`` and ``query`` after every transition.
    """

    snippets: List["Snippet"]
    query: str = ""
    selected: int = 0
    filtered: List[int] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.refresh()

    def refresh(self) -> None:
        self.filtered = filter_indices(self.snippets, self.query)
        if not self.filtered:
            self.selected = 0
        else:
            self.selected = max(0, min(self.selected, len(self.filtered) - 1))

    @property
    def current(self) -> Optional["Snippet"]:
        if not self.filtered:
            return None
        return self.snippets[self.filtered[self.selected]]

    def apply(self, event: KeyEvent, store: "SnippetStore") -> Optional[Outcome]:
        """Apply *event*; return the outcome when the session ends."""
        kind = event.kind
        if kind is EventKind.CHAR and not self.query and event.text in VIM_KEYS:
            kind = VIM_KEYS[event.text]

        outcome: Optional[Outcome] = None
        if kind is EventKind.CHAR:
            self.query += event.text
            self.selected = 0
        elif kind is EventKind.BACKSPACE:
            self.query = self.query[:-1]
            self.selected = 0
        elif kind is EventKind.UP:
            self.selected = max(self.selected - 1, 0)
        elif kind is EventKind.DOWN:
            self.selected = min(self.selected + 1, len(self.filtered) - 1)
        elif kind is EventKind.COMMIT:
            if self.filtered:
                outcome = Selected(self.snippets.pop(self.filtered[self.selected]))
        elif kind is EventKind.DELETE:
            if self.filtered:
                outcome = self._delete_current(store)
        elif kind is EventKind.CANCEL:
            outcome = Cancelled()
        else:  # pragma: no cover - exhaustive over EventKind
            raise AssertionError(f"unhandled event kind {kind!r}")
        self.refresh()
        return outcome

    def _delete_current(self, store: "SnippetStore") -> Optional[Outcome]:
        index = self.filtered[self.selected]
        store.delete(self.snippets[index].id)
        del self.snippets[index]
        if not self.snippets:
            return Cancelled()
        return None


def run_picker(
    store: "SnippetStore",
    snippets: List["Snippet"],
    *,
    input: Optional[Input] = None,
    output: Optional[Output] = None,
) -> Outcome:
    """Run one interactive picker session over *snippets*."""
    if not snippets:
        raise ValueError("picker needs at least one snippet")
    if input is None:
        input = open_input()
    if output is None:
        output = open_output()
    state = PickerState(snippets)
    with interactive_terminal(input, output):
        outcome = _loop(state, store, input, output)
    LOGGER.info("picker finished: %s", outcome)
    return outcome


def _loop(state: PickerState, store: "SnippetStore", input: Input, output: Output) -> Outcome:
    while True:
        size = output.get_size()
        draw(output, render(state, size.rows, size.columns), PICKER_STYLE)
        presses = read_key_presses(input)
        if not presses:
            # input closed
            return Cancelled()
        for press in presses:
            event = translate_key(press)
            if event is None:
                continue
            outcome = state.apply(event, store)
            if outcome is not None:
                return outcome


__all__ = ["PickerState", "Selected", "Cancelled", "Outcome", "run_picker", "VIM_KEYS"]
