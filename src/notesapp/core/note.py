# NotesApp
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Note value types and their storage representation.

A note exists in two shapes. :class:`UnsavedNote` is what the input form
builds before anything touches the database; :class:`Note` is what the store
hands back once a row exists, so only persisted notes carry an ``id``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

__all__ = [
    "DISPLAY_TIME_FORMAT",
    "EmptyNoteError",
    "Note",
    "UnsavedNote",
    "format_timestamp",
    "new_note",
    "note_from_row",
    "parse_timestamp",
    "validate_content",
]

DISPLAY_TIME_FORMAT = "%Y-%m-%d %H:%M"
REQUIRED_MESSAGE = "Value is required"


class EmptyNoteError(ValueError):
    """Raised when note text is empty or whitespace only."""

    def __init__(self, message: str = REQUIRED_MESSAGE):
        super().__init__(message)


def validate_content(text: str | None) -> str:
    """Return ``text`` unchanged when it has visible characters."""

    if text is None or not text.strip():
        raise EmptyNoteError()
    return text


def format_timestamp(value: datetime) -> str:
    """Serialize ``value`` to fixed-width ISO-8601 text.

    Aware datetimes are converted to UTC first so that every stored value sorts
    lexically in chronological order.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="microseconds")


def parse_timestamp(text: str) -> datetime:
    return datetime.fromisoformat(text)


@dataclass(frozen=True)
class UnsavedNote:
    """A note that has not been written to the store yet."""

    content: str
    created_time: datetime

    def to_row(self) -> dict[str, str]:
        return {
            "content": self.content,
            "createdTime": format_timestamp(self.created_time),
        }


@dataclass(frozen=True)
class Note:
    """A persisted note; ``id`` is assigned by the store and never reused."""

    id: int
    content: str
    created_time: datetime

    @classmethod
    def from_unsaved(cls, note: UnsavedNote, note_id: int) -> Note:
        return cls(id=int(note_id), content=note.content, created_time=note.created_time)

    def display_time(self) -> str:
        return self.created_time.strftime(DISPLAY_TIME_FORMAT)


def note_from_row(row: Mapping[str, Any]) -> Note:
    """Build a :class:`Note` from a ``notes`` row (``sqlite3.Row`` or dict)."""

    return Note(
        id=int(row["id"]),
        content=row["content"],
        created_time=parse_timestamp(row["createdTime"]),
    )


def new_note(content: str, created_time: datetime | None = None) -> UnsavedNote:
    """Build an :class:`UnsavedNote`, stamping local time when none is given."""

    return UnsavedNote(
        content=content,
        created_time=created_time if created_time is not None else datetime.now(),
    )
