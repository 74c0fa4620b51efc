"""
Quick Notes Screen

Write down observations and concepts, keep them on disk, and have them
read aloud. Which note is being read comes straight from the
SpeechController, so the Read/Stop buttons can never disagree with it.
"""

import logging

from textual.app import ComposeResult
from textual.screen import Screen, ModalScreen
from textual.widgets import Static, Button, TextArea
from textual.containers import Container, Horizontal, Vertical, VerticalScroll
from textual.binding import Binding

from ..constants import ICON_SAVE, ICON_TRASH, ICON_VOLUME_ON, ICON_VOLUME_OFF
from ..notes import Note, NotesStore, ValidationError, PersistenceError
from ..speech import SpeechController, SpeechService
from ..widgets import ScreenTitle, BackHint

logger = logging.getLogger(__name__)


class NoteButton(Button):
    """A Read/Stop or Delete button that knows its note"""

    def __init__(self, label: str, note_id: str, role: str, **kwargs):
        super().__init__(label, **kwargs)
        self.note_id = note_id
        self.role = role  # "read" or "delete"


class NoteCard(Vertical):
    """One saved note with its actions"""

    DEFAULT_CSS = """
    NoteCard {
        height: auto;
        padding: 1 2;
        margin-bottom: 1;
        background: $panel;
    }

    NoteCard.reading {
        border-left: thick $warning;
    }

    .note-text {
        width: 100%;
        margin-bottom: 1;
    }

    .note-date {
        width: 100%;
        color: $text-muted;
    }

    .note-actions {
        height: 3;
        margin-top: 1;
    }

    .note-actions Button {
        margin-right: 2;
    }
    """

    def __init__(self, note: Note, reading: bool = False, **kwargs):
        super().__init__(**kwargs)
        self.note = note
        self.reading = reading

    def compose(self) -> ComposeResult:
        yield Static(self.note.text, classes="note-text", markup=False)
        yield Static(f"Saved on: {self.note.date}", classes="note-date")
        with Horizontal(classes="note-actions"):
            yield NoteButton("", self.note.id, "read", classes="read-button")
            yield NoteButton(f"{ICON_TRASH}  Delete", self.note.id, "delete", variant="error")

    def on_mount(self) -> None:
        self.set_reading(self.reading)

    def set_reading(self, reading: bool) -> None:
        self.reading = reading
        self.set_class(reading, "reading")
        button = self.query_one(".read-button", NoteButton)
        if reading:
            button.label = f"{ICON_VOLUME_OFF}  Stop Reading"
            button.variant = "warning"
        else:
            button.label = f"{ICON_VOLUME_ON}  Read Note"
            button.variant = "primary"


class ConfirmDelete(ModalScreen[bool]):
    """Are you sure? dialog. Dismisses with True to delete."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    DEFAULT_CSS = """
    ConfirmDelete {
        align: center middle;
        background: rgba(0, 0, 0, 0.7);
    }

    #confirm-dialog {
        width: 50;
        height: auto;
        padding: 1 3;
        background: $surface;
        border: heavy $error;
    }

    #confirm-title {
        width: 100%;
        text-align: center;
        text-style: bold;
    }

    #confirm-message {
        width: 100%;
        text-align: center;
        margin: 1 0;
    }

    #confirm-buttons {
        width: 100%;
        height: 3;
        align: center middle;
    }

    #confirm-buttons Button {
        margin: 0 2;
    }
    """

    def compose(self) -> ComposeResult:
        with Container(id="confirm-dialog"):
            yield Static("Confirm Delete", id="confirm-title")
            yield Static("Are you sure you want to delete this note?", id="confirm-message")
            with Horizontal(id="confirm-buttons"):
                yield Button("Cancel", id="confirm-no")
                yield Button("Delete", id="confirm-yes", variant="error")

    def on_mount(self) -> None:
        self.query_one("#confirm-no", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.id == "confirm-yes")

    def action_cancel(self) -> None:
        self.dismiss(False)


class NotesScreen(Screen):
    """Note editor, saved notes list and read-aloud controls"""

    DEFAULT_CSS = """
    NotesScreen {
        background: $surface;
    }

    #notes-subtitle {
        width: 100%;
        text-align: center;
        color: $text-muted;
        margin-bottom: 1;
    }

    #note-input {
        height: 6;
    }

    #save-note {
        width: 100%;
        margin: 1 0;
    }

    #notes-count {
        text-style: bold;
        margin-bottom: 1;
    }

    #notes-empty {
        color: $text-muted;
        display: none;
    }

    #notes-empty.visible {
        display: block;
    }

    #notes-list {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("ctrl+s", "save_note", "Save note", show=False),
    ]

    def __init__(self, store: NotesStore, speech_service: SpeechService, **kwargs):
        super().__init__(**kwargs)
        self.store = store
        self.speech = SpeechController(
            speech_service,
            on_change=self._refresh_reading,
            on_error=self._on_speech_error,
        )

    def compose(self) -> ComposeResult:
        yield ScreenTitle("notes")
        yield Static("Saved on this computer: your chemistry concepts and observations.",
                     id="notes-subtitle")
        yield TextArea(id="note-input")
        yield Button(f"{ICON_SAVE}  Save Note", id="save-note", variant="success")
        yield Static("", id="notes-count")
        yield Static("No notes found. Start writing!", id="notes-empty")
        yield VerticalScroll(id="notes-list")
        yield BackHint("Ctrl+S: save  •  Escape: back")

    async def on_mount(self) -> None:
        await self._render_notes()
        self.query_one("#note-input", TextArea).focus()

    def on_unmount(self) -> None:
        """Leaving the screen stops any narration"""
        self.speech.on_change = None
        self.speech.on_error = None
        self.speech.stop_all()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        button = event.button
        if button.id == "save-note":
            await self.action_save_note()
        elif isinstance(button, NoteButton) and button.role == "read":
            self._toggle_reading(button.note_id)
        elif isinstance(button, NoteButton) and button.role == "delete":
            self._confirm_delete(button.note_id)

    async def action_save_note(self) -> None:
        text_area = self.query_one("#note-input", TextArea)
        try:
            self.store.add(text_area.text)
        except ValidationError as e:
            self.app.notify(str(e), title="Empty Note", severity="warning")
            return
        except PersistenceError as e:
            # The note stays in the list; only durability failed
            self.app.notify(str(e), title="Save Error", severity="error")
        else:
            self.app.notify("Your note has been saved.", title="Note Saved!")

        text_area.clear()
        await self._render_notes()

    def _toggle_reading(self, note_id: str) -> None:
        note = self.store.get(note_id)
        if note is not None:
            self.speech.toggle(note)

    def _confirm_delete(self, note_id: str) -> None:
        def handle_result(confirmed: bool | None) -> None:
            if confirmed:
                self.call_later(self._delete_note, note_id)

        self.app.push_screen(ConfirmDelete(), handle_result)

    async def _delete_note(self, note_id: str) -> None:
        # Stop reading a note before it disappears
        self.speech.forget(note_id)
        try:
            removed = self.store.delete(note_id)
        except PersistenceError as e:
            self.app.notify(str(e), title="Save Error", severity="error")
            removed = True
        if removed:
            self.app.notify("The note has been permanently removed.", title="Note Deleted")
        await self._render_notes()

    async def _render_notes(self) -> None:
        notes = self.store.list()
        self.query_one("#notes-count", Static).update(f"Your Saved Notes ({len(notes)})")
        self.query_one("#notes-empty", Static).set_class(not notes, "visible")

        notes_list = self.query_one("#notes-list", VerticalScroll)
        await notes_list.remove_children()
        await notes_list.mount_all(
            NoteCard(note, reading=self.speech.is_reading(note.id)) for note in notes
        )

    def _refresh_reading(self) -> None:
        """Re-derive every card's Read/Stop state from the controller"""
        for card in self.query(NoteCard):
            card.set_reading(self.speech.is_reading(card.note.id))

    def _on_speech_error(self, error: Exception) -> None:
        self.app.notify("Could not read the note.", title="TTS Error", severity="error")
