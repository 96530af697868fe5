import os

import pytest

from notesapp.storage.note_store import NoteStore

# Qt widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def store(tmp_path):
    note_store = NoteStore(tmp_path / "notes.db")
    yield note_store
    note_store.close()


@pytest.fixture(scope="session")
def qapp():
    widgets = pytest.importorskip("PyQt5.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app
