"""Run a recorded command through the user's shell."""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Optional

from .errors import ExecutorSpawnError

LOGGER = logging.getLogger("snip.executor")

DEFAULT_SHELL = "/bin/sh"


def resolve_shell(shell: Optional[str] = None) -> str:
    return shell or os.environ.get("SHELL") or DEFAULT_SHELL


def run_command(command: str, shell: Optional[str] = None) -> int:
    """Run *command* with ``<shell> -i -c`` and wait for it; return the exit code."""
    program = resolve_shell(shell)
    argv = [program, "-i", "-c", command]
    LOGGER.debug("spawning %s", argv)
    try:
        completed = subprocess.run(argv, check=False)
    except OSError as exc:
        raise ExecutorSpawnError(f"failed to launch {program}: {exc}") from exc
    LOGGER.info("command %r exited with %s", command, completed.returncode)
    return completed.returncode


__all__ = ["DEFAULT_SHELL", "resolve_shell", "run_command"]
