#!/usr/bin/env python3
"""Tests for PiperSpeechService - voice lookup, errors, and cancellation.

No voice model or sound card is needed: the narration thread body
(_speak_sync) is called directly with the voice and mixer patched out.

Run with: pytest tests/test_tts.py -v
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from chem_tui.speech import SpeechCallbacks, SpeechOptions
from chem_tui.tts import PiperSpeechService, SpeechUnavailable, find_voice_model, VOICE_MODELS


class RecordingDispatch:
    """Runs callbacks immediately and remembers which ones ran"""

    def __init__(self):
        self.calls = []

    def __call__(self, fn, *args):
        self.calls.append((fn, args))
        fn(*args)


@pytest.fixture
def dispatch():
    return RecordingDispatch()


@pytest.fixture
def service(dispatch):
    return PiperSpeechService(dispatch=dispatch)


@pytest.fixture
def callbacks():
    return SpeechCallbacks(on_start=MagicMock(), on_done=MagicMock(), on_error=MagicMock())


@pytest.fixture
def no_voice():
    with patch("chem_tui.tts.find_voice_model", return_value=None), \
         patch("chem_tui.tts._ensure_mixer", return_value=True):
        yield


class TestErrors:
    """Failures are reported through on_error, never raised."""

    def test_missing_voice_reports_error(self, service, callbacks, no_voice):
        service._speak_sync("Hydrogen", SpeechOptions(), callbacks, service._speech_id)

        callbacks.on_error.assert_called_once()
        assert isinstance(callbacks.on_error.call_args.args[0], SpeechUnavailable)
        callbacks.on_start.assert_not_called()
        callbacks.on_done.assert_not_called()

    def test_missing_audio_device_reports_error(self, service, callbacks):
        with patch("chem_tui.tts._ensure_mixer", return_value=False):
            service._speak_sync("Helium", SpeechOptions(), callbacks, service._speech_id)

        callbacks.on_error.assert_called_once()
        assert isinstance(callbacks.on_error.call_args.args[0], SpeechUnavailable)

    def test_blank_text_reports_error(self, service, callbacks):
        service._speak_sync("   ", SpeechOptions(), callbacks, service._speech_id)
        callbacks.on_error.assert_called_once()
        callbacks.on_start.assert_not_called()

    def test_dispatch_failure_does_not_escape(self, callbacks, no_voice):
        def closed_app(fn, *args):
            raise RuntimeError("App is not running")

        service = PiperSpeechService(dispatch=closed_app)
        # Must return quietly instead of killing the narration thread
        service._speak_sync("Lithium", SpeechOptions(), callbacks, service._speech_id)
        callbacks.on_error.assert_not_called()


class TestCancellation:
    """Superseded narrations end silently."""

    def test_stopped_narration_fires_nothing(self, service, callbacks, dispatch, no_voice):
        old_id = service._speech_id
        service.stop()

        service._speak_sync("Beryllium", SpeechOptions(), callbacks, old_id)

        assert dispatch.calls == []

    def test_speak_cancels_previous(self, service):
        first_id = service._speech_id
        with patch("chem_tui.tts.threading.Thread"):
            service.speak("Boron", SpeechOptions(),
                          SpeechCallbacks(MagicMock(), MagicMock(), MagicMock()))
        assert service._speech_id > first_id
        assert service._cancelled(first_id)

    def test_stop_is_repeatable(self, service):
        service.stop()
        service.stop()
        assert service._current_channel is None


class TestVoiceLookup:
    """Test finding installed Piper voices."""

    def test_finds_model_in_configured_directory(self, tmp_path, monkeypatch):
        model = tmp_path / f"{VOICE_MODELS['en-GB']}.onnx"
        model.write_bytes(b"")
        monkeypatch.setenv("CHEM_PIPER_VOICES", str(tmp_path))

        assert find_voice_model("en-GB") == model

    def test_unknown_language_uses_default_voice(self, tmp_path, monkeypatch):
        model = tmp_path / f"{VOICE_MODELS['en-US']}.onnx"
        model.write_bytes(b"")
        monkeypatch.setenv("CHEM_PIPER_VOICES", str(tmp_path))

        assert find_voice_model("tlh") == model

    def test_is_available(self, service):
        with patch("chem_tui.tts.find_voice_model", return_value=None):
            assert service.is_available() is False
        with patch("chem_tui.tts.find_voice_model", return_value=Path("/opt/piper/v.onnx")):
            assert service.is_available() is True


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
