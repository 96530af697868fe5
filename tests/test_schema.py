import sqlite3

import pytest

from notesapp.storage.sqlite import schema
from notesapp.storage.sqlite.utils import db_cursor, open_db, transaction


def _columns(conn: sqlite3.Connection) -> dict[str, tuple[str, int, int]]:
    rows = conn.execute(f"PRAGMA table_info({schema.NOTES_TABLE})").fetchall()
    # name -> (type, notnull, pk)
    return {row["name"]: (row["type"], row["notnull"], row["pk"]) for row in rows}


def test_ensure_schema_creates_notes_table():
    conn = open_db(":memory:")
    assert not schema.table_exists(conn, schema.NOTES_TABLE)

    assert schema.ensure_schema(conn) is True

    assert schema.table_exists(conn, schema.NOTES_TABLE)
    assert schema.get_user_version(conn) == schema.SCHEMA_VERSION
    assert _columns(conn) == {
        "id": ("INTEGER", 0, 1),
        "content": ("TEXT", 1, 0),
        "createdTime": ("TEXT", 1, 0),
    }
    sql = conn.execute(
        "SELECT sql FROM sqlite_master WHERE name = ?", (schema.NOTES_TABLE,)
    ).fetchone()[0]
    assert "AUTOINCREMENT" in sql.upper()


def test_ensure_schema_is_idempotent_and_keeps_rows(tmp_path):
    conn = open_db((tmp_path / "notes.db").as_posix())
    schema.ensure_schema(conn)
    conn.execute(
        "INSERT INTO notes (content, createdTime) VALUES (?, ?)",
        ("kept", "2024-01-01T10:00:00.000000"),
    )

    assert schema.ensure_schema(conn) is False
    assert conn.execute("SELECT COUNT(*) FROM notes").fetchone()[0] == 1
    conn.close()


def test_existing_table_is_not_recreated_on_reopen(tmp_path):
    path = (tmp_path / "notes.db").as_posix()
    conn = open_db(path)
    schema.ensure_schema(conn)
    conn.close()

    reopened = open_db(path)
    assert schema.ensure_schema(reopened) is False
    reopened.close()


def test_transaction_rolls_back_on_error():
    conn = open_db(":memory:")
    schema.ensure_schema(conn)

    with pytest.raises(RuntimeError):
        with transaction(conn):
            conn.execute(
                "INSERT INTO notes (content, createdTime) VALUES ('x', '2024-01-01T00:00:00')"
            )
            raise RuntimeError("boom")

    assert conn.execute("SELECT COUNT(*) FROM notes").fetchone()[0] == 0


def test_db_cursor_closes_cursor():
    conn = open_db(":memory:")
    with db_cursor(conn) as cur:
        cur.execute("SELECT 1")
        assert cur.fetchone()[0] == 1

    with pytest.raises(sqlite3.ProgrammingError):
        cur.execute("SELECT 1")


def test_open_db_read_only_mode_rejects_missing_file(tmp_path):
    with pytest.raises(sqlite3.OperationalError):
        open_db((tmp_path / "missing.db").as_posix(), mode="ro")
