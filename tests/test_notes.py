#!/usr/bin/env python3
"""Tests for NotesStore - add/delete, validation, and the notes file on disk.

Run with: pytest tests/test_notes.py -v
"""

import json
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from chem_tui.notes import (
    Note, NotesStore, ValidationError, PersistenceError, ParseError, parse_notes,
)
from chem_tui.storage import FileStorage


class FailingWriteStorage(FileStorage):
    """FileStorage whose writes fail while `failing` is set"""

    def __init__(self):
        self.failing = False

    def write_text(self, path, content):
        if self.failing:
            raise OSError("disk full")
        super().write_text(path, content)


def make_ids():
    counter = iter(range(1, 1000))
    return lambda: f"note-{next(counter)}"


@pytest.fixture
def store(tmp_path):
    s = NotesStore(data_dir=tmp_path, id_factory=make_ids())
    s.initialize()
    return s


def reload(store: NotesStore) -> NotesStore:
    """Open a fresh store on the same directory"""
    fresh = NotesStore(data_dir=store.notes_dir.parent)
    fresh.initialize()
    return fresh


class TestInitialize:
    """Test loading saved notes."""

    def test_creates_notes_directory(self, tmp_path):
        store = NotesStore(data_dir=tmp_path)
        store.initialize()
        assert (tmp_path / "notes").is_dir()

    def test_existing_directory_is_fine(self, tmp_path):
        (tmp_path / "notes").mkdir()
        store = NotesStore(data_dir=tmp_path)
        store.initialize()
        store.initialize()
        assert store.list() == []
        assert store.load_warning is None

    def test_no_file_means_no_notes(self, store):
        assert store.list() == []
        assert store.load_warning is None
        assert not store.notes_file.exists()

    def test_corrupt_file_starts_empty_with_warning(self, tmp_path):
        notes_dir = tmp_path / "notes"
        notes_dir.mkdir()
        notes_file = notes_dir / "chemistry_notes.json"
        notes_file.write_text("{not json")

        store = NotesStore(data_dir=tmp_path)
        store.initialize()

        assert store.list() == []
        assert store.load_warning is not None
        # File is left alone for the user to recover
        assert notes_file.read_text() == "{not json"

    def test_wrong_shape_is_treated_as_corrupt(self, tmp_path):
        notes_dir = tmp_path / "notes"
        notes_dir.mkdir()
        (notes_dir / "chemistry_notes.json").write_text('{"id": "1", "text": "hi"}')

        store = NotesStore(data_dir=tmp_path)
        store.initialize()
        assert store.list() == []
        assert store.load_warning is not None

    def test_corrupt_file_replaced_on_next_save(self, tmp_path):
        notes_dir = tmp_path / "notes"
        notes_dir.mkdir()
        (notes_dir / "chemistry_notes.json").write_text("garbage")

        store = NotesStore(data_dir=tmp_path)
        store.initialize()
        store.add("Water is H2O")

        assert [n.text for n in reload(store).list()] == ["Water is H2O"]

    def test_loads_older_notes_without_timestamp(self, tmp_path):
        notes_dir = tmp_path / "notes"
        notes_dir.mkdir()
        (notes_dir / "chemistry_notes.json").write_text(json.dumps([
            {"id": "1697000000000", "text": "Noble gases are inert", "date": "10/11/2023"},
        ]))

        store = NotesStore(data_dir=tmp_path)
        store.initialize()

        notes = store.list()
        assert len(notes) == 1
        assert notes[0].id == "1697000000000"
        assert notes[0].date == "10/11/2023"
        assert notes[0].created_at is None


class TestAdd:
    """Test adding notes."""

    def test_add_returns_trimmed_note(self, store):
        note = store.add("  Iron rusts in moist air  \n")
        assert note.text == "Iron rusts in moist air"
        assert note.id == "note-1"

    def test_newest_first(self, store):
        store.add("first")
        store.add("second")
        store.add("third")
        assert [n.text for n in store.list()] == ["third", "second", "first"]

    def test_sets_date_and_timestamp(self, tmp_path):
        fixed = datetime(2024, 3, 14, 9, 30)
        store = NotesStore(data_dir=tmp_path, clock=lambda: fixed)
        store.initialize()

        note = store.add("Pi day titration")
        assert note.created_at == fixed
        assert note.date == fixed.strftime("%x")

    def test_ids_are_unique(self, tmp_path):
        store = NotesStore(data_dir=tmp_path)
        store.initialize()
        ids = {store.add(f"note {i}").id for i in range(20)}
        assert len(ids) == 20

    @pytest.mark.parametrize("text", ["", "   ", "\n\t "])
    def test_empty_text_rejected(self, store, text):
        store.add("keep me")
        with pytest.raises(ValidationError):
            store.add(text)
        assert [n.text for n in store.list()] == ["keep me"]

    def test_add_writes_file(self, store):
        store.add("Sodium reacts with water")
        data = json.loads(store.notes_file.read_text())
        assert data[0]["text"] == "Sodium reacts with water"
        assert set(data[0]) == {"id", "text", "date", "created_at"}

    def test_write_failure_keeps_note_in_memory(self, tmp_path):
        storage = FailingWriteStorage()
        store = NotesStore(data_dir=tmp_path, storage=storage)
        store.initialize()

        storage.failing = True
        with pytest.raises(PersistenceError) as exc_info:
            store.add("unsaved thought")

        assert exc_info.value.note is not None
        assert exc_info.value.note.text == "unsaved thought"
        assert [n.text for n in store.list()] == ["unsaved thought"]

    def test_lone_surrogate_is_saved_and_reloaded(self, store):
        # Text pasted from a broken clipboard can hold unpaired surrogates
        note = store.add("bad \udc80 paste")
        store.add("clean note")

        assert [n.text for n in reload(store).list()] == ["clean note", note.text]

    def test_encoding_failure_is_a_persistence_error(self, tmp_path):
        class UnencodableStorage(FileStorage):
            def write_text(self, path, content):
                raise UnicodeEncodeError("utf-8", content, 0, 1, "surrogates not allowed")

        store = NotesStore(data_dir=tmp_path, storage=UnencodableStorage())
        store.initialize()
        with pytest.raises(PersistenceError):
            store.add("anything")
        assert len(store) == 1

    def test_next_successful_write_catches_up(self, tmp_path):
        storage = FailingWriteStorage()
        store = NotesStore(data_dir=tmp_path, storage=storage)
        store.initialize()

        storage.failing = True
        with pytest.raises(PersistenceError):
            store.add("one")
        storage.failing = False
        store.add("two")

        assert [n.text for n in reload(store).list()] == ["two", "one"]


class TestDelete:
    """Test deleting notes."""

    def test_delete_existing(self, store):
        keep = store.add("keep")
        gone = store.add("gone")
        assert store.delete(gone.id) is True
        assert store.list() == [keep]

    def test_delete_missing_is_noop(self, store):
        store.add("only note")
        before = store.list()
        assert store.delete("no-such-id") is False
        assert store.list() == before

    def test_delete_persists(self, store):
        a = store.add("a")
        store.add("b")
        store.delete(a.id)
        assert [n.text for n in reload(store).list()] == ["b"]

    def test_delete_write_failure_keeps_removal(self, tmp_path):
        storage = FailingWriteStorage()
        store = NotesStore(data_dir=tmp_path, storage=storage)
        store.initialize()
        note = store.add("doomed")

        storage.failing = True
        with pytest.raises(PersistenceError):
            store.delete(note.id)
        assert store.list() == []


class TestRoundTrip:
    """The file on disk always reproduces the in-memory list."""

    def test_mixed_operations(self, store):
        notes = [store.add(f"observation {i}") for i in range(5)]
        store.delete(notes[1].id)
        store.delete(notes[3].id)
        store.add("conclusion")

        assert reload(store).list() == store.list()

    def test_list_is_a_copy(self, store):
        store.add("original")
        snapshot = store.list()
        snapshot.clear()
        assert len(store.list()) == 1


class TestParseNotes:
    """Test parsing the notes file format."""

    def test_parse_valid(self):
        notes = parse_notes('[{"id": "a", "text": "b", "date": "c"}]')
        assert notes == [Note(id="a", text="b", date="c")]

    def test_parse_missing_text(self):
        with pytest.raises(ParseError):
            parse_notes('[{"id": "a"}]')

    def test_parse_bad_timestamp(self):
        with pytest.raises(ParseError):
            parse_notes('[{"id": "a", "text": "b", "created_at": "yesterday"}]')


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
