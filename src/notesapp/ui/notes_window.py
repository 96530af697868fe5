# NotesApp
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Main window: note entry form above a newest-first list of notes."""

from __future__ import annotations

import logging

from PyQt5.QtCore import QSettings, Qt, pyqtSignal
from PyQt5.QtGui import QCloseEvent
from PyQt5.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from notesapp.core.note import EmptyNoteError, Note, validate_content
from notesapp.services.types import NoteRepository
from notesapp.storage.note_store import NoteStoreError

log = logging.getLogger(__name__)

EMPTY_LIST_TEXT = "No notes yet"
STATUS_TIMEOUT_MS = 8000


class NoteRow(QWidget):
    """One list entry: bold content, creation time, delete button."""

    delete_requested = pyqtSignal(int)

    def __init__(self, note: Note, parent=None) -> None:
        super().__init__(parent)
        self.note = note

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 6, 8, 6)

        text_col = QVBoxLayout()
        text_col.setSpacing(2)
        self.content_label = QLabel(note.content)
        self.content_label.setWordWrap(True)
        self.content_label.setStyleSheet("font-weight: bold;")
        self.time_label = QLabel(note.display_time())
        self.time_label.setStyleSheet("color: #757575;")
        text_col.addWidget(self.content_label)
        text_col.addWidget(self.time_label)
        layout.addLayout(text_col, 1)

        self.delete_button = QPushButton("Delete")
        self.delete_button.setToolTip("Delete this note")
        self.delete_button.setStyleSheet("color: #d32f2f;")
        self.delete_button.clicked.connect(lambda: self.delete_requested.emit(self.note.id))
        layout.addWidget(self.delete_button, 0, Qt.AlignVCenter)


class NotesWindow(QMainWindow):
    """Single-screen notes editor backed by an injected :class:`NoteRepository`."""

    def __init__(
        self,
        store: NoteRepository,
        settings: QSettings | None = None,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self.store = store
        self.settings = settings
        self.notes: list[Note] = []

        self.setWindowTitle("Notes")
        self.resize(480, 640)

        self._build_ui()
        self._restore_geometry()
        self.refresh_notes()

    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        form = QWidget()
        form_layout = QVBoxLayout(form)
        form_layout.setContentsMargins(16, 16, 16, 12)
        form_layout.setSpacing(4)

        input_row = QHBoxLayout()
        self.input = QLineEdit()
        self.input.setPlaceholderText("Write a note")
        self.input.returnPressed.connect(self.add_note)
        self.input.textEdited.connect(lambda _text: self.error_label.hide())
        input_row.addWidget(self.input, 1)

        self.add_button = QPushButton("Add")
        self.add_button.setDefault(True)
        self.add_button.clicked.connect(self.add_note)
        input_row.addWidget(self.add_button)
        form_layout.addLayout(input_row)

        self.error_label = QLabel()
        self.error_label.setStyleSheet("color: #d32f2f;")
        self.error_label.hide()
        form_layout.addWidget(self.error_label)
        layout.addWidget(form)

        divider = QFrame()
        divider.setFrameShape(QFrame.HLine)
        divider.setFrameShadow(QFrame.Sunken)
        layout.addWidget(divider)

        self.note_list = QListWidget()
        self.note_list.setSelectionMode(QListWidget.NoSelection)
        layout.addWidget(self.note_list, 1)

        self.empty_label = QLabel(EMPTY_LIST_TEXT)
        self.empty_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.empty_label, 1)

        self.setCentralWidget(central)

    # ------------------------------------------------------------------
    def refresh_notes(self) -> None:
        """Reload the list from the store."""

        try:
            notes = self.store.list_all()
        except NoteStoreError as exc:
            self._report_error("Could not load notes", exc)
            return
        self.notes = list(notes)
        self._render_notes()

    def _render_notes(self) -> None:
        self.note_list.clear()
        for note in self.notes:
            row = NoteRow(note)
            row.delete_requested.connect(self.delete_note)
            item = QListWidgetItem()
            item.setData(Qt.UserRole, note.id)
            item.setSizeHint(row.sizeHint())
            self.note_list.addItem(item)
            self.note_list.setItemWidget(item, row)

        has_notes = bool(self.notes)
        self.note_list.setVisible(has_notes)
        self.empty_label.setVisible(not has_notes)

    def add_note(self) -> None:
        text = self.input.text()
        try:
            validate_content(text)
        except EmptyNoteError as exc:
            self.error_label.setText(str(exc))
            self.error_label.show()
            return
        self.error_label.hide()

        try:
            note = self.store.add(text)
        except NoteStoreError as exc:
            self._report_error("Could not save note", exc)
            return
        log.debug("Added note %d from the input form", note.id)

        self.input.clear()
        self.refresh_notes()

    def delete_note(self, note_id: int) -> None:
        try:
            self.store.delete(note_id)
        except NoteStoreError as exc:
            self._report_error("Could not delete note", exc)
            return
        self.refresh_notes()

    def _report_error(self, message: str, exc: Exception) -> None:
        log.error("%s: %s", message, exc)
        self.statusBar().showMessage(f"{message}: {exc}", STATUS_TIMEOUT_MS)

    # ------------------------------------------------------------------
    def _restore_geometry(self) -> None:
        if self.settings is None:
            return
        geometry = self.settings.value("window/geometry")
        if geometry is not None:
            self.restoreGeometry(geometry)

    def closeEvent(self, event: QCloseEvent) -> None:
        if self.settings is not None:
            self.settings.setValue("window/geometry", self.saveGeometry())
        super().closeEvent(event)
