from datetime import datetime

import pytest

pytest.importorskip("PyQt5.QtWidgets")

from notesapp.storage.note_store import NoteStore, WriteFailed  # noqa: E402
from notesapp.ui.notes_window import EMPTY_LIST_TEXT, NoteRow, NotesWindow  # noqa: E402


class _FailingStore(NoteStore):
    """Store whose writes always fail, for exercising error notices."""

    def create(self, note):
        raise WriteFailed("disk full")

    def delete(self, note_id):
        raise WriteFailed("disk full")


def _rows(window: NotesWindow) -> list[NoteRow]:
    return [
        window.note_list.itemWidget(window.note_list.item(i))
        for i in range(window.note_list.count())
    ]


def _make_window(store: NoteStore) -> NotesWindow:
    return NotesWindow(store)


def test_empty_store_shows_placeholder(qapp, store):
    window = _make_window(store)

    assert window.notes == []
    assert window.note_list.count() == 0
    assert not window.empty_label.isHidden()
    assert window.empty_label.text() == EMPTY_LIST_TEXT
    assert window.note_list.isHidden()
    window.close()


def test_add_note_persists_and_clears_input(qapp, store):
    window = _make_window(store)

    window.input.setText("Buy milk")
    window.add_note()

    assert window.input.text() == ""
    assert [n.content for n in store.list_all()] == ["Buy milk"]
    assert [row.content_label.text() for row in _rows(window)] == ["Buy milk"]
    assert window.empty_label.isHidden()
    window.close()


def test_blank_input_is_rejected_before_the_store(qapp, store):
    window = _make_window(store)

    window.input.setText("   ")
    window.add_button.click()

    assert not window.error_label.isHidden()
    assert window.error_label.text() == "Value is required"
    assert store.list_all() == []
    window.close()


def test_list_renders_newest_first_with_time(qapp, store):
    store.add("Buy milk", datetime(2024, 1, 1, 10, 0))
    store.add("Call bank", datetime(2024, 1, 1, 11, 0))
    window = _make_window(store)

    rows = _rows(window)
    assert [row.content_label.text() for row in rows] == ["Call bank", "Buy milk"]
    assert rows[0].time_label.text() == "2024-01-01 11:00"
    window.close()


def test_delete_button_removes_note(qapp, store):
    keep = store.add("keep", datetime(2024, 1, 1, 10, 0))
    drop = store.add("drop", datetime(2024, 1, 1, 11, 0))
    window = _make_window(store)

    (drop_row,) = [row for row in _rows(window) if row.note.id == drop.id]
    drop_row.delete_button.click()

    assert [n.id for n in store.list_all()] == [keep.id]
    assert [row.note.id for row in _rows(window)] == [keep.id]
    window.close()


def test_store_failure_is_reported_without_losing_state(qapp, tmp_path):
    failing = _FailingStore(tmp_path / "notes.db")
    window = _make_window(failing)

    window.input.setText("will fail")
    window.add_note()

    assert "Could not save note" in window.statusBar().currentMessage()
    assert window.input.text() == "will fail"
    assert window.notes == []

    window.delete_note(1)
    assert "Could not delete note" in window.statusBar().currentMessage()
    window.close()
    failing.close()


def test_launcher_owns_store_lifecycle(qapp, tmp_path):
    from notesapp.app.launcher import NotesLauncher
    from notesapp.storage.note_store import StoreState

    launcher = NotesLauncher(database_path=tmp_path / "launch" / "notes.db")
    window = launcher._start_main_window()

    assert launcher.store.state is StoreState.READY
    assert window.store is launcher.store
    assert (tmp_path / "launch" / "notes.db").exists()

    window.close()
    launcher.store.close()
    assert launcher.store.state is StoreState.CLOSED
