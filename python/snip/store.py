"""SQLite-backed snippet store."""

from __future__ import annotations

import logging
import os
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .errors import SnippetNotFoundError, StorageInitError, StoreError
from .filtering import filter_snippets

LOGGER = logging.getLogger("snip.store")

DB_FILENAME = "snip.db"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS snippets (
    id         INTEGER PRIMARY KEY AUTOINCREMENT,
    command    TEXT NOT NULL UNIQUE,
    created_at TEXT DEFAULT (datetime('now'))
);
"""

_SIDE_SUFFIXES = ("-journal", "-wal", "-shm")


@dataclass
class Snippet:
    id: int
    command: str
    created_at: str


def default_data_dir() -> Path:
    """Resolve the directory holding the snippet database.

    ``$SNIP_HOME`` wins, then ``$XDG_DATA_HOME/snip``, then
    ``~/.local/share/snip``.
    """
    override = os.environ.get("SNIP_HOME")
    if override:
        return Path(override).expanduser()
    xdg = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg).expanduser() if xdg else Path.home() / ".local" / "share"
    return base / "snip"


def default_store_path() -> Path:
    return default_data_dir() / DB_FILENAME


class SnippetStore:
    """Single-owner handle on the snippet database."""

    def __init__(self, conn: sqlite3.Connection, path: Path) -> None:
        self._conn = conn
        self.path = path

    @classmethod
    def open(cls, path: Optional[Path | str] = None) -> "SnippetStore":
        """Open (creating if needed) the store at *path*."""
        db_path = Path(path).expanduser() if path else default_store_path()
        conn: Optional[sqlite3.Connection] = None
        try:
            db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(db_path))
            conn.row_factory = sqlite3.Row
            with conn:
                conn.executescript(_SCHEMA)
        except (OSError, sqlite3.Error) as exc:
            if conn is not None:
                conn.close()
            raise StorageInitError(f"cannot open snippet store at {db_path}: {exc}") from exc
        LOGGER.debug("opened store %s", db_path)
        return cls(conn, db_path)

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "SnippetStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ----------------------------------------------------------------- public API

    def save(self, command: str) -> bool:
        """Insert *command*; an existing identical command is left alone.

        Returns True when a new row was written.
        """
        try:
            with self._conn:
                cursor = self._conn.execute(
                    "INSERT OR IGNORE INTO snippets (command) VALUES (?)",
                    (command,),
                )
        except sqlite3.Error as exc:
            raise StoreError(f"failed to save snippet: {exc}") from exc
        inserted = cursor.rowcount > 0
        LOGGER.info("save %r (%s)", command, "new" if inserted else "duplicate")
        return inserted

    def list(self) -> List[Snippet]:
        """All snippets, most recent first."""
        try:
            rows = self._conn.execute(
                "SELECT id, command, created_at FROM snippets ORDER BY created_at DESC, id DESC"
            ).fetchall()
        except sqlite3.Error as exc:
            raise StoreError(f"failed to list snippets: {exc}") from exc
        return [Snippet(id=row["id"], command=row["command"], created_at=row["created_at"]) for row in rows]

    def search(self, query: str) -> List[Snippet]:
        return filter_snippets(self.list(), query)

    def delete(self, snippet_id: int) -> None:
        try:
            with self._conn:
                cursor = self._conn.execute("DELETE FROM snippets WHERE id = ?", (int(snippet_id),))
        except sqlite3.Error as exc:
            raise StoreError(f"failed to delete snippet {snippet_id}: {exc}") from exc
        if cursor.rowcount == 0:
            raise SnippetNotFoundError(snippet_id)
        LOGGER.debug("deleted snippet %s", snippet_id)

    def count(self) -> int:
        return int(self._conn.execute("SELECT COUNT(*) FROM snippets").fetchone()[0])


def open_store(path: Optional[Path | str] = None) -> SnippetStore:
    return SnippetStore.open(path)


def reset_store(path: Optional[Path | str] = None) -> bool:
    """Remove the database file at *path*.

    Returns True when a store existed.  Calling it again is a no-op.
    """
    db_path = Path(path).expanduser() if path else default_store_path()
    existed = db_path.exists()
    try:
        for candidate in [db_path] + [db_path.with_name(db_path.name + suffix) for suffix in _SIDE_SUFFIXES]:
            candidate.unlink(missing_ok=True)
    except OSError as exc:
        raise StoreError(f"failed to remove {db_path}: {exc}") from exc
    LOGGER.info("reset store %s (existed=%s)", db_path, existed)
    return existed


__all__ = [
    "Snippet",
    "SnippetStore",
    "default_data_dir",
    "default_store_path",
    "open_store",
    "reset_store",
]
