"""Application bootstrap utilities for the NotesApp desktop app."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from PyQt5.QtCore import QCoreApplication, QSettings, Qt
from PyQt5.QtWidgets import QApplication

from notesapp.app.config import APP_NAME, APP_VERSION, ORGANIZATION, resolve_database_path
from notesapp.storage.note_store import NoteStore
from notesapp.ui.notes_window import NotesWindow

log = logging.getLogger(__name__)

# Ensure HiDPI scaling is enabled before the QApplication is instantiated
os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")
os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")


class NotesLauncher:
    """Create the Qt application, open the note store and show the main window.

    The launcher owns the store: it is opened before the window is shown and
    closed once the event loop returns.
    """

    def __init__(self, database_path: str | os.PathLike[str] | None = None) -> None:
        self.database_path = (
            Path(database_path) if database_path is not None else resolve_database_path()
        )

        QCoreApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
        QCoreApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)
        QCoreApplication.setOrganizationName(ORGANIZATION)
        QCoreApplication.setApplicationName(APP_NAME)
        QCoreApplication.setApplicationVersion(APP_VERSION)

        self.app = QApplication.instance() or QApplication(sys.argv)
        self.store = NoteStore(self.database_path)
        self.window: NotesWindow | None = None

    # ------------------------------------------------------------------
    def _start_main_window(self) -> NotesWindow:
        # StorageUnavailable propagates: without a notes file there is nothing to show.
        self.store.initialize()
        window = NotesWindow(self.store, settings=QSettings(ORGANIZATION, APP_NAME))
        window.show()
        self.window = window
        return window

    def run(self) -> int:
        log.info("Using notes database %s", self.database_path)
        try:
            self._start_main_window()
            return self.app.exec_()
        finally:
            self.store.close()
