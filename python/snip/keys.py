"""Picker input events and their mapping from prompt_toolkit key presses."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Optional

from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys


class EventKind(enum.Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    COMMIT = "commit"
    DELETE = "delete"
    CANCEL = "cancel"


@dataclass(frozen=True)
class KeyEvent:
    kind: EventKind
    text: str = ""

    @classmethod
    def char(cls, text: str) -> "KeyEvent":
        return cls(EventKind.CHAR, text)


_KEY_EVENTS: Dict[str, EventKind] = {
    Keys.ControlH: EventKind.BACKSPACE,
    Keys.Up: EventKind.UP,
    Keys.ControlP: EventKind.UP,
    Keys.Down: EventKind.DOWN,
    Keys.ControlN: EventKind.DOWN,
    Keys.ControlM: EventKind.COMMIT,
    Keys.ControlJ: EventKind.COMMIT,
    Keys.ControlD: EventKind.DELETE,
    Keys.Delete: EventKind.DELETE,
    Keys.Escape: EventKind.CANCEL,
    Keys.ControlC: EventKind.CANCEL,
}


def translate_key(press: KeyPress) -> Optional[KeyEvent]:
    """Map a key press to a picker event, or None for keys the picker ignores."""
    key = press.key
    if isinstance(key, Keys):
        if key == Keys.BracketedPaste:
            text = "".join(ch for ch in press.data if ch.isprintable())
            return KeyEvent.char(text) if text else None
        kind = _KEY_EVENTS.get(key)
        return KeyEvent(kind) if kind else None
    if len(key) == 1 and key.isprintable():
        return KeyEvent.char(key)
    return None


__all__ = ["EventKind", "KeyEvent", "translate_key"]
