# NotesApp
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""
Schema and pragma helpers for the notes database.
"""

from __future__ import annotations

import logging
import sqlite3

from .utils import set_pragmas, transaction

log = logging.getLogger(__name__)

__all__ = [
    "SCHEMA_VERSION",
    "NOTES_TABLE",
    "DEFAULT_PRAGMAS",
    "apply_default_pragmas",
    "table_exists",
    "ensure_schema",
    "get_user_version",
    "set_user_version",
]

SCHEMA_VERSION = 1
NOTES_TABLE = "notes"

DEFAULT_PRAGMAS = {
    "journal_mode": "WAL",
    "synchronous": "NORMAL",
    "temp_store": "MEMORY",
    "busy_timeout_ms": 5000,
}

_CREATE_NOTES = f"""
    CREATE TABLE IF NOT EXISTS {NOTES_TABLE} (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        content TEXT NOT NULL,
        createdTime TEXT NOT NULL
    )
"""


def apply_default_pragmas(conn: sqlite3.Connection) -> None:
    """
    Apply default pragmas for a local notes file.

    WAL with NORMAL synchronous keeps single inserts cheap; the notes file is
    only ever written by one connection.
    """
    set_pragmas(conn, DEFAULT_PRAGMAS)


def table_exists(conn: sqlite3.Connection, name: str) -> bool:
    row = conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?",
        (name,),
    ).fetchone()
    return row is not None


def get_user_version(conn: sqlite3.Connection) -> int:
    (version,) = conn.execute("PRAGMA user_version").fetchone()
    return int(version)


def set_user_version(conn: sqlite3.Connection, version: int) -> None:
    conn.execute(f"PRAGMA user_version = {int(version)}")


def ensure_schema(conn: sqlite3.Connection) -> bool:
    """
    Create the notes table when it is missing.

    Returns True when the schema was created by this call. An existing table
    is left untouched, so calling this on every open is safe.
    """

    if table_exists(conn, NOTES_TABLE):
        return False

    with transaction(conn):
        conn.execute(_CREATE_NOTES)
        set_user_version(conn, SCHEMA_VERSION)
    log.info("Created %s table (schema v%d)", NOTES_TABLE, SCHEMA_VERSION)
    return True
