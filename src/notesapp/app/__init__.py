"""Application bootstrap helpers."""

from importlib import import_module

__all__ = ["NotesLauncher", "resolve_database_path"]


def __getattr__(name: str):
    if name == "NotesLauncher":
        module = import_module("notesapp.app.launcher")
        value = module.NotesLauncher
    elif name == "resolve_database_path":
        module = import_module("notesapp.app.config")
        value = module.resolve_database_path
    else:
        raise AttributeError(f"module 'notesapp.app' has no attribute {name!r}")
    globals()[name] = value
    return value
