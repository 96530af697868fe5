"""Application identity and storage location settings."""

from __future__ import annotations

import os
from pathlib import Path

from notesapp import __version__
from notesapp.core.paths import user_data_dir

APP_NAME = "NotesApp"
APP_VERSION = __version__
ORGANIZATION = "NotesApp"

DATABASE_FILENAME = "notes.db"
DATA_DIR_ENV = "NOTESAPP_DATA_DIR"


def data_directory(base_dir: str | os.PathLike[str] | None = None) -> Path:
    """Resolve the storage base directory.

    Precedence: ``base_dir`` argument, then ``$NOTESAPP_DATA_DIR``, then the
    platform data directory.
    """
    if base_dir is not None:
        return Path(base_dir).expanduser()
    env_value = os.environ.get(DATA_DIR_ENV, "").strip()
    if env_value:
        return Path(env_value).expanduser()
    return user_data_dir(APP_NAME)


def resolve_database_path(base_dir: str | os.PathLike[str] | None = None) -> Path:
    return data_directory(base_dir) / DATABASE_FILENAME
