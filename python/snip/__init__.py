"""
snip command recorder.

Records shell commands in a small SQLite store and brings them back through
an interactive terminal picker.  Use ``snip <command...>`` to record and run
a command, or plain ``snip`` to pick one of the recorded commands.
"""

from __future__ import annotations

from .cli import main

__all__ = ["main"]
__version__ = "0.1.0"
