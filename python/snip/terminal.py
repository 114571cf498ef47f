"""Terminal session handling for the picker.

``interactive_terminal`` switches the terminal into raw mode on the alternate
screen and always puts it back, whatever way the wrapped block exits.
"""

from __future__ import annotations

import logging
import select
import sys
from contextlib import ExitStack, contextmanager
from typing import Iterator, List

from prompt_toolkit.formatted_text import AnyFormattedText
from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.output import Output, create_output
from prompt_toolkit.renderer import print_formatted_text
from prompt_toolkit.styles import BaseStyle

from .errors import TerminalInitError

try:
    import termios
except ImportError:  # pragma: no cover - non-POSIX platform
    termios = None  # type: ignore

LOGGER = logging.getLogger("snip.terminal")

# How long a lone escape byte waits for the rest of a sequence.
ESCAPE_TIMEOUT = 0.05

_INIT_ERRORS = (OSError, ValueError) + ((termios.error,) if termios is not None else ())


def open_input() -> Input:
    try:
        return create_input(always_prefer_tty=True)
    except _INIT_ERRORS as exc:
        raise TerminalInitError(f"cannot read from terminal: {exc}") from exc


def open_output() -> Output:
    try:
        return create_output(stdout=sys.stdout, always_prefer_tty=True)
    except _INIT_ERRORS as exc:
        raise TerminalInitError(f"cannot write to terminal: {exc}") from exc


def _restore(output: Output) -> None:
    output.reset_attributes()
    output.quit_alternate_screen()
    output.show_cursor()
    output.flush()


@contextmanager
def interactive_terminal(input: Input, output: Output) -> Iterator[None]:
    """Hold raw mode and the alternate screen for the duration of the block."""
    with ExitStack() as stack:
        try:
            stack.enter_context(input.raw_mode())
        except _INIT_ERRORS as exc:
            raise TerminalInitError(f"cannot enter raw mode: {exc}") from exc
        stack.callback(_restore, output)
        output.enter_alternate_screen()
        output.hide_cursor()
        output.flush()
        LOGGER.debug("entered interactive terminal mode")
        yield


def read_key_presses(input: Input) -> List[KeyPress]:
    """Block until at least one key press is available.

    Returns an empty list once the input is closed.
    """
    fileno = input.fileno()
    while not input.closed:
        ready, _, _ = select.select([fileno], [], [], ESCAPE_TIMEOUT)
        if ready:
            presses = input.read_keys()
        else:
            # Nothing new arrived: a buffered lone escape is the Escape key.
            presses = input.flush_keys()
            if not presses:
                select.select([fileno], [], [])
                continue
        if presses:
            return presses
    return []


def draw(output: Output, fragments: AnyFormattedText, style: BaseStyle) -> None:
    """Redraw the whole screen with *fragments*."""
    output.erase_screen()
    output.cursor_goto(0, 0)
    print_formatted_text(output, fragments, style)


__all__ = [
    "ESCAPE_TIMEOUT",
    "draw",
    "interactive_terminal",
    "open_input",
    "open_output",
    "read_key_presses",
]
