# NotesApp
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Public package interface for the NotesApp application."""

from importlib import import_module

from notesapp.core.note import EmptyNoteError, Note, UnsavedNote, new_note, validate_content
from notesapp.storage.note_store import (
    NoteStore,
    NoteStoreError,
    StorageUnavailable,
    StoreState,
    WriteFailed,
)

__version__ = "1.0.0"

_UI_EXPORTS = {
    "NotesWindow": ("notesapp.ui.notes_window", "NotesWindow"),
    "NotesLauncher": ("notesapp.app.launcher", "NotesLauncher"),
}


def __getattr__(name: str):
    if name in _UI_EXPORTS:
        module_name, attr = _UI_EXPORTS[name]
        module = import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module 'notesapp' has no attribute {name!r}")


__all__ = [
    "EmptyNoteError",
    "Note",
    "NoteStore",
    "NoteStoreError",
    "NotesLauncher",
    "NotesWindow",
    "StorageUnavailable",
    "StoreState",
    "UnsavedNote",
    "WriteFailed",
    "new_note",
    "validate_content",
]
