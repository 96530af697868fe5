"""Service interfaces and typing helpers."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from notesapp.core.note import Note, UnsavedNote

__all__ = ["NoteRepository"]


@runtime_checkable
class NoteRepository(Protocol):
    """Capability to persist, list and delete notes.

    :class:`notesapp.storage.note_store.NoteStore` is the concrete
    implementation; the UI depends only on this interface.
    """

    def initialize(self) -> Any: ...

    def create(self, note: UnsavedNote) -> Note: ...

    def add(self, content: str, created_time: datetime | None = None) -> Note: ...

    def list_all(self) -> Sequence[Note]: ...

    def delete(self, note_id: int) -> int: ...

    def close(self) -> None: ...
