"""Pick a snippet through an external ``fzf`` process."""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING, Optional, Sequence

from .errors import ExecutorSpawnError

if TYPE_CHECKING:  # pragma: no cover
    from .store import Snippet

LOGGER = logging.getLogger("snip.fzf")


def pick_with_fzf(snippets: Sequence["Snippet"], fzf: str = "fzf") -> Optional["Snippet"]:
    """Feed the commands to fzf and return the chosen snippet.

    Returns None when fzf exits non-zero, which is how it reports a cancel.
    """
    payload = "\n".join(snippet.command for snippet in snippets)
    try:
        completed = subprocess.run(
            [fzf],
            input=payload,
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise ExecutorSpawnError(f"failed to launch {fzf}, is it installed? ({exc})") from exc
    if completed.returncode != 0:
        LOGGER.debug("fzf exited with %s", completed.returncode)
        return None
    chosen = completed.stdout.rstrip("\n")
    for snippet in snippets:
        if snippet.command == chosen:
            return snippet
    return None


__all__ = ["pick_with_fzf"]
