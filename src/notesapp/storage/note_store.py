# NotesApp
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""
SQLite-backed note storage for NotesApp.

:class:`NoteStore` owns exactly one connection to the notes file. The handle is
opened on first use, reused by every later call, and released by
:meth:`NoteStore.close`. The application builds one store at start-up and
passes it to whatever needs it; nothing here is a module-level singleton.
"""

from __future__ import annotations

import enum
import logging
import os
import sqlite3
from datetime import datetime
from pathlib import Path

from notesapp.core.note import Note, UnsavedNote, new_note, note_from_row
from notesapp.storage.sqlite import schema as _schema
from notesapp.storage.sqlite.utils import MEMORY_PATH, db_cursor, open_db

log = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value
_SQLITE_INT_MIN = -(2**63)
_SQLITE_INT_MAX = 2**63 - 1

__all__ = [
    "NoteStore",
    "NoteStoreError",
    "StorageUnavailable",
    "StoreState",
    "WriteFailed",
]


class NoteStoreError(RuntimeError):
    """Base class for note storage failures."""


class StorageUnavailable(NoteStoreError):
    """Raised when the notes file cannot be opened or the store is closed."""

    def __init__(self, path: str | os.PathLike[str], reason: str):
        self.path = path if str(path) == MEMORY_PATH else Path(path)
        self.reason = reason
        super().__init__(f"Notes storage at {self.path} is unavailable: {reason}")


class WriteFailed(NoteStoreError):
    """Raised when an insert or delete fails at the storage layer."""


class StoreState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    OPENING = "opening"
    READY = "ready"
    CLOSED = "closed"


class NoteStore:
    """Create, list and delete notes in a single-table SQLite file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path: str | Path = MEMORY_PATH if str(path) == MEMORY_PATH else Path(path)
        self.state = StoreState.UNINITIALIZED
        self._conn: sqlite3.Connection | None = None

    # ------------------------------------------------------------------ #
    # Lifecycle                                                          #
    # ------------------------------------------------------------------ #
    @property
    def is_ready(self) -> bool:
        return self.state is StoreState.READY

    def initialize(self) -> sqlite3.Connection:
        """Return the open connection, opening the file on first call."""

        if self.state is StoreState.READY and self._conn is not None:
            return self._conn
        if self.state is StoreState.CLOSED:
            raise StorageUnavailable(self.path, "store has been closed")

        self.state = StoreState.OPENING
        conn: sqlite3.Connection | None = None
        try:
            if isinstance(self.path, Path):
                self.path.parent.mkdir(parents=True, exist_ok=True)
                conn = open_db(self.path.as_posix())
            else:
                conn = open_db(MEMORY_PATH)
            _schema.apply_default_pragmas(conn)
            created = _schema.ensure_schema(conn)
        except (OSError, sqlite3.Error) as exc:
            self.state = StoreState.UNINITIALIZED
            if conn is not None:
                conn.close()
            log.error("Could not open notes storage at %s: %s", self.path, exc)
            raise StorageUnavailable(self.path, str(exc)) from exc

        self._conn = conn
        self.state = StoreState.READY
        log.info(
            "Opened notes storage at %s%s",
            self.path,
            " (new schema)" if created else "",
        )
        return conn

    def close(self) -> None:
        """Release the connection. The store cannot be reopened afterwards."""

        if self.state is StoreState.CLOSED:
            return
        conn, self._conn = self._conn, None
        self.state = StoreState.CLOSED
        if conn is not None:
            conn.close()
            log.info("Closed notes storage at %s", self.path)

    def __enter__(self) -> NoteStore:
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # Notes                                                              #
    # ------------------------------------------------------------------ #
    def create(self, note: UnsavedNote) -> Note:
        """Insert ``note`` and return it with the id assigned by SQLite."""

        conn = self.initialize()
        row = note.to_row()
        try:
            cur = conn.execute(
                f"INSERT INTO {_schema.NOTES_TABLE} (content, createdTime) VALUES (?, ?)",
                (row["content"], row["createdTime"]),
            )
        except sqlite3.Error as exc:
            log.error("Failed to insert note: %s", exc)
            raise WriteFailed(f"Could not save note: {exc}") from exc

        note_id = cur.lastrowid
        if note_id is None:
            raise WriteFailed("Insert did not return a row id")
        log.debug("Inserted note %d", note_id)
        return Note.from_unsaved(note, note_id)

    def add(self, content: str, created_time: datetime | None = None) -> Note:
        """Persist ``content`` as a new note stamped ``created_time`` (default: now)."""

        return self.create(new_note(content, created_time))

    def list_all(self) -> list[Note]:
        """Return every note, newest ``createdTime`` first.

        Notes sharing a timestamp come back newest id first, so repeated calls
        without writes in between return the same order.
        """

        conn = self.initialize()
        try:
            with db_cursor(conn) as cur:
                cur.execute(
                    f"SELECT id, content, createdTime FROM {_schema.NOTES_TABLE} "
                    "ORDER BY createdTime DESC, id DESC"
                )
                rows = cur.fetchall()
        except sqlite3.Error as exc:
            log.error("Failed to read notes: %s", exc)
            raise StorageUnavailable(self.path, str(exc)) from exc
        return [note_from_row(row) for row in rows]

    def count(self) -> int:
        conn = self.initialize()
        try:
            (total,) = conn.execute(f"SELECT COUNT(*) FROM {_schema.NOTES_TABLE}").fetchone()
        except sqlite3.Error as exc:
            raise StorageUnavailable(self.path, str(exc)) from exc
        return int(total)

    def delete(self, note_id: int) -> int:
        """Delete the note with ``note_id``; returns rows removed (0 or 1).

        Ids that SQLite cannot hold match no row and return 0.
        """

        if isinstance(note_id, bool) or not isinstance(note_id, int):
            raise TypeError(f"note id must be an int, not {type(note_id).__name__}")
        conn = self.initialize()
        if not _SQLITE_INT_MIN <= note_id <= _SQLITE_INT_MAX:
            log.debug("Delete of note %s matched no rows", note_id)
            return 0
        try:
            cur = conn.execute(
                f"DELETE FROM {_schema.NOTES_TABLE} WHERE id = ?",
                (note_id,),
            )
        except sqlite3.Error as exc:
            log.error("Failed to delete note %s: %s", note_id, exc)
            raise WriteFailed(f"Could not delete note {note_id}: {exc}") from exc

        removed = cur.rowcount
        if removed:
            log.debug("Deleted note %s", note_id)
        else:
            log.debug("Delete of note %s matched no rows", note_id)
        return removed
