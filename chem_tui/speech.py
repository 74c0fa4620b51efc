"""
Read-aloud controller for Quick Notes

Tracks which note (if any) is being read aloud and talks to a speech
service that works with fire-and-forget commands:

    service.speak(text, options, callbacks)   # callbacks fire later
    service.stop()

State machine:

    Idle --toggle(note)--> Starting(note) --on_start--> Speaking(note)
    Speaking(note) --toggle(note) / on_done / on_error--> Idle
    Speaking(a) --toggle(b)--> stop(a), then Starting(b)

Each narration gets its own session token. Callbacks carry the token they
were issued with, so a late on_done from a stopped narration can never
clear the state of a newer one.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from .constants import SPEECH_LANGUAGE, SPEECH_PITCH, SPEECH_RATE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpeechOptions:
    language: str = SPEECH_LANGUAGE
    pitch: float = SPEECH_PITCH
    rate: float = SPEECH_RATE


@dataclass
class SpeechCallbacks:
    """Lifecycle callbacks for one narration"""
    on_start: Callable[[], None]
    on_done: Callable[[], None]
    on_error: Callable[[Exception], None]


class SpeechService(Protocol):
    def speak(self, text: str, options: SpeechOptions, callbacks: SpeechCallbacks) -> None: ...

    def stop(self) -> None: ...


class SpeechController:
    """
    Owns the read-aloud state for a list of notes.

    The UI should derive "is this note being read?" from is_reading() rather
    than keeping its own copy. on_change fires after every state change.
    """

    def __init__(
        self,
        service: SpeechService,
        options: Optional[SpeechOptions] = None,
        on_change: Optional[Callable[[], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ):
        self.service = service
        self.options = options or SpeechOptions()
        self.on_change = on_change
        self.on_error = on_error

        self.active_note_id: Optional[str] = None   # Confirmed by on_start
        self.pending_note_id: Optional[str] = None  # Requested, not started yet
        self._session: Optional[int] = None
        self._tokens = itertools.count(1)

    @property
    def is_speaking(self) -> bool:
        return self.active_note_id is not None

    @property
    def is_busy(self) -> bool:
        """True while a narration is requested or playing"""
        return self._session is not None

    def is_reading(self, note_id: str) -> bool:
        return self.active_note_id == note_id

    def toggle(self, note) -> None:
        """Start reading a note, or stop if it is the one being read."""
        current = self.active_note_id or self.pending_note_id
        if self.is_busy and current == note.id:
            self._stop()
            self._changed()
            return

        if self.is_busy:
            self._stop()

        token = next(self._tokens)
        self._session = token
        self.pending_note_id = note.id
        logger.debug(f"Reading note {note.id} (session {token})")
        self.service.speak(note.text, self.options, self._callbacks_for(token, note.id))
        self._changed()

    def stop_all(self) -> None:
        """Stop any narration and return to Idle. Safe to call at any time."""
        was_busy = self.is_busy
        self.service.stop()
        self._reset()
        if was_busy:
            self._changed()

    def forget(self, note_id: str) -> None:
        """Stop speech if it belongs to a note that is about to be deleted."""
        if note_id in (self.active_note_id, self.pending_note_id):
            self._stop()
            self._changed()

    def _stop(self) -> None:
        self.service.stop()
        self._reset()

    def _reset(self) -> None:
        self._session = None
        self.active_note_id = None
        self.pending_note_id = None

    def _callbacks_for(self, token: int, note_id: str) -> SpeechCallbacks:
        def on_start() -> None:
            if token != self._session:
                return
            self.active_note_id = note_id
            self.pending_note_id = None
            self._changed()

        def on_done() -> None:
            if token != self._session:
                return
            self._reset()
            self._changed()

        def on_error(error: Exception) -> None:
            if token != self._session:
                return
            logger.warning(f"Speech failed for note {note_id}: {error}")
            self._reset()
            self._changed()
            if self.on_error:
                self.on_error(error)

        return SpeechCallbacks(on_start=on_start, on_done=on_done, on_error=on_error)

    def _changed(self) -> None:
        if self.on_change:
            self.on_change()
