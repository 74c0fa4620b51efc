"""
Text-to-Speech service using Piper TTS

Piper is a fast, local, neural TTS system.
https://github.com/rhasspy/piper

Audio is synthesized and played on a background thread. Lifecycle events
(start, done, error) are reported through SpeechCallbacks, handed to a
dispatch function so the UI can run them on its own thread.
"""

import logging
import os
import tempfile
import threading
import wave
from pathlib import Path
from typing import Callable, Optional

# Suppress pygame welcome message
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
import pygame.mixer

from .speech import SpeechCallbacks, SpeechOptions

logger = logging.getLogger(__name__)

# Voice model per language
VOICE_MODELS = {
    "en-US": "en_US-libritts-high",
    "en-GB": "en_GB-alba-medium",
}
DEFAULT_VOICE_MODEL = VOICE_MODELS["en-US"]
VOICE_SPEAKER = 166  # p6006, only used by multi-speaker models


class SpeechUnavailable(RuntimeError):
    """No voice model or audio device could be found"""


def _get_voice_search_paths() -> list[Path]:
    """Get list of paths to search for voice models."""
    paths = [
        Path.home() / ".local" / "share" / "piper-voices",
        Path.home() / ".cache" / "piper",
        Path("/opt/piper"),
    ]
    extra = os.environ.get("CHEM_PIPER_VOICES")
    if extra:
        paths.insert(0, Path(extra))
    return paths


def find_voice_model(language: str) -> Optional[Path]:
    """Find the .onnx model for a language, or None if not installed."""
    model_name = VOICE_MODELS.get(language, DEFAULT_VOICE_MODEL)
    for base_path in _get_voice_search_paths():
        candidate = base_path / f"{model_name}.onnx"
        if candidate.exists():
            return candidate
    return None


def _ensure_mixer() -> bool:
    """Initialize the pygame mixer if nobody has yet"""
    if pygame.mixer.get_init():
        return True
    # Use larger buffer (1024) to prevent audio clipping at start
    try:
        pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=1024)
        return True
    except pygame.error as e:
        logger.warning(f"Audio mixer unavailable: {e}")
        return False


class PiperSpeechService:
    """
    Speaks text with Piper and plays it through pygame.

    Only one narration plays at a time. speak() cancels whatever is playing;
    a cancelled narration ends silently (no on_done).
    """

    def __init__(self, dispatch: Optional[Callable[..., None]] = None):
        # dispatch(fn, *args) runs a callback on the UI thread
        self._dispatch = dispatch or (lambda fn, *args: fn(*args))
        self._voices: dict[Path, object] = {}
        self._voice_lock = threading.Lock()
        self._current_channel = None
        self._speech_id = 0  # Incremented on each speak()/stop() to cancel stale work

    def stop(self) -> None:
        """Stop any currently playing speech and cancel pending"""
        self._speech_id += 1  # Invalidate any pending speech (atomic due to GIL)
        channel = self._current_channel
        self._current_channel = None
        if channel is not None:
            try:
                channel.stop()
            except pygame.error as e:
                logger.debug(f"Could not stop audio channel: {e}")

    def speak(self, text: str, options: SpeechOptions, callbacks: SpeechCallbacks) -> None:
        """Start speaking in the background. Returns immediately."""
        self.stop()
        my_id = self._speech_id
        thread = threading.Thread(
            target=self._speak_sync, args=(text, options, callbacks, my_id), daemon=True
        )
        thread.start()

    def is_available(self, language: str = "en-US") -> bool:
        return find_voice_model(language) is not None

    def _cancelled(self, speech_id: int) -> bool:
        return speech_id != self._speech_id

    def _speak_sync(self, text: str, options: SpeechOptions,
                    callbacks: SpeechCallbacks, speech_id: int) -> None:
        """Synchronous speech - called from background thread"""
        wav_path = None
        try:
            if not text or not text.strip():
                raise ValueError("Nothing to read")
            if not _ensure_mixer():
                raise SpeechUnavailable("No audio output device")

            voice = self._get_voice(options.language)
            if self._cancelled(speech_id):
                return

            with tempfile.NamedTemporaryFile(suffix='.wav', delete=False) as f:
                wav_path = f.name
            if not self._synthesize(voice, text, options, wav_path):
                raise SpeechUnavailable("Voice produced no audio")

            if self._cancelled(speech_id):
                return

            sound = pygame.mixer.Sound(wav_path)
            channel = sound.play()
            self._current_channel = channel
            self._dispatch(callbacks.on_start)

            if channel:
                while channel.get_busy():
                    if self._cancelled(speech_id):
                        channel.stop()
                        return
                    pygame.time.wait(50)

            if not self._cancelled(speech_id):
                self._current_channel = None
                self._dispatch(callbacks.on_done)

        except Exception as e:
            if self._cancelled(speech_id):
                return
            logger.error(f"TTS error: {e}")
            try:
                self._dispatch(callbacks.on_error, e)
            except Exception as dispatch_error:
                # The UI may already be gone
                logger.debug(f"Could not report TTS error: {dispatch_error}")
        finally:
            if wav_path:
                Path(wav_path).unlink(missing_ok=True)

    def _get_voice(self, language: str):
        """Get or load the Piper voice for a language"""
        model_path = find_voice_model(language)
        if model_path is None:
            raise SpeechUnavailable(f"No Piper voice installed for {language}")

        with self._voice_lock:
            voice = self._voices.get(model_path)
            if voice is None:
                from piper import PiperVoice
                voice = PiperVoice.load(str(model_path))
                self._voices[model_path] = voice
                logger.info(f"Loaded Piper voice {model_path.name}")
        return voice

    def _synthesize(self, voice, text: str, options: SpeechOptions, wav_path: str) -> bool:
        """Write synthesized speech to a WAV file. Returns False if no audio."""
        from piper.config import SynthesisConfig

        # Piper has no pitch control; rate maps onto phoneme length
        rate = options.rate if options.rate > 0 else 1.0
        speaker_id = VOICE_SPEAKER if voice.config.num_speakers > 1 else None
        config = SynthesisConfig(speaker_id=speaker_id, length_scale=1.0 / rate)

        # Pad with pauses before and after to prevent clipping on short words
        audio_chunks = list(voice.synthesize(f"... {text} ...", config))
        if not audio_chunks:
            return False

        first_chunk = audio_chunks[0]
        with wave.open(wav_path, 'wb') as wav_file:
            wav_file.setnchannels(first_chunk.sample_channels)
            wav_file.setsampwidth(first_chunk.sample_width)
            wav_file.setframerate(first_chunk.sample_rate)
            for chunk in audio_chunks:
                wav_file.writeframes(chunk.audio_int16_bytes)
        return True
