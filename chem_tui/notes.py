"""
Quick Notes storage for Chem Companion

Notes are kept in memory, newest first, and the whole list is written to a
single JSON file after every change:

    [{"id": "...", "text": "...", "date": "10/19/26", "created_at": "2026-10-19T..."}, ...]

The file is only read once, when the store is initialized.
"""

import json
import logging
import threading
import uuid
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .constants import DATA_DIR, NOTES_DIR_NAME, NOTES_FILENAME, NOTE_DATE_FORMAT
from .storage import FileStorage

logger = logging.getLogger(__name__)


class NotesError(Exception):
    """Base class for notes errors"""


class ValidationError(NotesError):
    """Note text was empty after trimming whitespace"""


class PersistenceError(NotesError):
    """The notes file could not be written. In-memory notes are kept."""

    def __init__(self, message: str, note: Optional["Note"] = None):
        super().__init__(message)
        self.note = note


class ParseError(NotesError):
    """The notes file exists but does not hold a JSON array of notes"""


@dataclass(frozen=True)
class Note:
    """A saved note. Never edited in place."""
    id: str
    text: str
    date: str                               # Display string, e.g. "10/19/26"
    created_at: Optional[datetime] = None   # Missing for notes saved by older versions

    def to_dict(self) -> dict:
        data = {"id": self.id, "text": self.text, "date": self.date}
        if self.created_at is not None:
            data["created_at"] = self.created_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Note":
        if not isinstance(data, dict):
            raise ParseError(f"Expected a note object, got {type(data).__name__}")
        note_id = data.get("id")
        text = data.get("text")
        if not isinstance(note_id, str) or not isinstance(text, str):
            raise ParseError("Note is missing a string 'id' or 'text'")

        created_at = None
        raw_created = data.get("created_at")
        if isinstance(raw_created, str):
            try:
                created_at = datetime.fromisoformat(raw_created)
            except ValueError:
                raise ParseError(f"Bad created_at timestamp: {raw_created!r}")

        date = data.get("date")
        if not isinstance(date, str):
            date = created_at.strftime(NOTE_DATE_FORMAT) if created_at else ""

        return cls(id=note_id, text=text, date=date, created_at=created_at)


def _new_note_id() -> str:
    return uuid.uuid4().hex


def parse_notes(content: str) -> list[Note]:
    """Parse the notes file contents. Raises ParseError if it is not a list of notes."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(f"Notes file is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise ParseError(f"Notes file should hold a list, got {type(data).__name__}")
    return [Note.from_dict(item) for item in data]


def dump_notes(notes: list[Note]) -> str:
    return json.dumps([note.to_dict() for note in notes])


class NotesStore:
    """
    Owns the list of notes and keeps the notes file in sync with it.

    Every add/delete rewrites the whole file. A lock makes sure only one
    load-modify-persist sequence runs at a time.
    """

    def __init__(
        self,
        data_dir: Optional[Path] = None,
        storage: Optional[FileStorage] = None,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = _new_note_id,
    ):
        self.notes_dir = Path(data_dir or DATA_DIR) / NOTES_DIR_NAME
        self.notes_file = self.notes_dir / NOTES_FILENAME
        self.storage = storage or FileStorage()
        self._clock = clock
        self._id_factory = id_factory
        self._notes: list[Note] = []
        self._lock = threading.Lock()
        self.load_warning: Optional[str] = None

    def initialize(self) -> None:
        """
        Make sure the notes directory exists, then load saved notes.

        A missing file means no notes yet. An unreadable or corrupt file is
        left alone on disk; the store starts empty and sets load_warning.
        """
        with self._lock:
            self.load_warning = None
            self._notes = []
            try:
                self.storage.mkdir(self.notes_dir, recursive=True)
                if not self.storage.exists(self.notes_file):
                    logger.info(f"No notes file at {self.notes_file}, starting empty")
                    return
                content = self.storage.read_text(self.notes_file)
                self._notes = parse_notes(content)
            except ParseError as e:
                self.load_warning = f"Saved notes could not be read: {e}"
                logger.warning(f"Ignoring corrupt notes file {self.notes_file}: {e}")
                return
            except OSError as e:
                self.load_warning = f"Saved notes could not be loaded: {e}"
                logger.warning(f"Failed to load notes from {self.notes_file}: {e}")
                return
        logger.info(f"Loaded {len(self._notes)} notes")

    def add(self, raw_text: str) -> Note:
        """
        Save a new note at the front of the list.

        Raises:
            ValidationError: text is empty or whitespace only (nothing changes)
            PersistenceError: the note was added but could not be written to disk
        """
        text = (raw_text or "").strip()
        if not text:
            raise ValidationError("Please write something before saving.")

        now = self._clock()
        note = Note(
            id=self._id_factory(),
            text=text,
            date=now.strftime(NOTE_DATE_FORMAT),
            created_at=now,
        )
        with self._lock:
            self._notes = [note] + self._notes
            self._persist(note)
        return note

    def delete(self, note_id: str) -> bool:
        """
        Remove a note by id. Returns False (and writes nothing) if no such note.

        Raises:
            PersistenceError: the note was removed but the file could not be written
        """
        with self._lock:
            remaining = [note for note in self._notes if note.id != note_id]
            if len(remaining) == len(self._notes):
                return False
            self._notes = remaining
            self._persist()
        return True

    def get(self, note_id: str) -> Optional[Note]:
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def __len__(self) -> int:
        return len(self._notes)

    def _persist(self, note: Optional[Note] = None) -> None:
        """Write the full list. Caller holds the lock."""
        try:
            self.storage.mkdir(self.notes_dir, recursive=True)
            self.storage.write_text(self.notes_file, dump_notes(self._notes))
        except (OSError, ValueError) as e:
            logger.error(f"Failed to save notes to {self.notes_file}: {e}")
            raise PersistenceError(
                "Could not save notes due to a file system issue.", note=note
            ) from e

    def list(self) -> list[Note]:
        """Current notes, newest first. Never touches the disk."""
        return list(self._notes)
