"""Persistence layer: the SQLite note store and its helpers."""

from notesapp.storage.note_store import (
    NoteStore,
    NoteStoreError,
    StorageUnavailable,
    StoreState,
    WriteFailed,
)

__all__ = ["NoteStore", "NoteStoreError", "StorageUnavailable", "StoreState", "WriteFailed"]
