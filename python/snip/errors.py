"""Error types shared by the snip modules."""

from __future__ import annotations


class SnipError(RuntimeError):
    """Base class for failures reported to the user by the CLI."""


class StorageInitError(SnipError):
    """Raised when the snippet database cannot be created or opened."""


class StoreError(SnipError):
    """Raised when a store operation fails."""


class SnippetNotFoundError(StoreError):
    """Raised when deleting an id that is not in the store."""

    def __init__(self, snippet_id: int) -> None:
        super().__init__(f"no snippet found with id {snippet_id}")
        self.snippet_id = snippet_id


class TerminalInitError(SnipError):
    """Raised when the terminal cannot be switched into interactive mode."""


class ExecutorSpawnError(SnipError):
    """Raised when a child process (shell or fzf) cannot be launched."""


__all__ = [
    "SnipError",
    "StorageInitError",
    "StoreError",
    "SnippetNotFoundError",
    "TerminalInitError",
    "ExecutorSpawnError",
]
