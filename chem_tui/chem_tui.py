#!/usr/bin/env python3
"""
Chem Companion - Main Textual TUI Application

A pocket chemistry reference for students.

Keyboard controls:
- Tab / Shift+Tab: move between buttons and tiles
- Enter: activate
- Escape: back to the previous screen
- F12: Toggle dark/light theme
- Ctrl+Q: Quit
"""

import logging
import os

from textual.app import App
from textual.binding import Binding
from textual.theme import Theme

from .notes import NotesStore
from .services import (
    FileConverter, LicenseChecker, MockFileConverter, MockLicenseChecker,
)
from .speech import SpeechService

logger = logging.getLogger(__name__)

# Screens reachable through navigate()
NAVIGATION_TARGETS = ("home", "periodic_table", "elements", "notes", "reactions")


class ChemApp(App):
    """
    Chem Companion - startup check, then a home menu of chemistry tools.

    Owns the long-lived services (notes store, speech, license checker,
    converter) and hands them to screens as they are opened.
    """

    TITLE = "Chem Companion"

    CSS = """
    Screen {
        padding: 1 2;
    }
    """

    BINDINGS = [
        Binding("escape", "go_back", "Back", show=False),
        Binding("f12", "toggle_theme", "Theme", show=False, priority=True),
    ]

    def __init__(
        self,
        notes_store: NotesStore | None = None,
        license_checker: LicenseChecker | None = None,
        converter: FileConverter | None = None,
        speech_service: SpeechService | None = None,
    ):
        super().__init__()
        self.notes_store = notes_store or NotesStore()
        self.license_checker = license_checker or MockLicenseChecker()
        self.converter = converter or MockFileConverter()
        self._speech_service = speech_service
        self.active_theme = "chem-dark"

        self.register_theme(
            Theme(
                name="chem-dark",
                primary="#4f9cf0",
                secondary="#3a7bd5",
                warning="#ffc107",
                error="#dc3545",
                success="#28a745",
                accent="#7cc4ff",
                background="#0f1a2b",
                surface="#16253b",
                panel="#1d304b",
                dark=True,
            )
        )
        self.register_theme(
            Theme(
                name="chem-light",
                primary="#007bff",
                secondary="#0062cc",
                warning="#c69500",
                error="#dc3545",
                success="#28a745",
                accent="#0062cc",
                background="#f8f9fa",
                surface="#ffffff",
                panel="#eef2f6",
                dark=False,
            )
        )
        self.theme = self.active_theme

    @property
    def speech_service(self) -> SpeechService:
        """Piper TTS, created on first use (loads pygame)"""
        if self._speech_service is None:
            from .tts import PiperSpeechService
            self._speech_service = PiperSpeechService(dispatch=self.call_from_thread)
        return self._speech_service

    def on_mount(self) -> None:
        """Load notes, then run the startup check"""
        from .screens.splash_screen import SplashScreen

        self.notes_store.initialize()
        if self.notes_store.load_warning:
            self.notify(self.notes_store.load_warning, title="Notes", severity="warning", timeout=8)

        self.push_screen(SplashScreen(self.license_checker))

    def show_home(self) -> None:
        """Replace the startup gate with the home menu"""
        from .screens.home_screen import HomeScreen
        self.switch_screen(HomeScreen())

    def _create_screen(self, target: str, params: dict):
        """Create a new screen for a navigation target"""
        if target == "home":
            from .screens.home_screen import HomeScreen
            return HomeScreen()
        elif target == "periodic_table":
            from .screens.periodic_table import PeriodicTableScreen
            return PeriodicTableScreen()
        elif target == "elements":
            from .screens.elements_screen import ElementsScreen
            return ElementsScreen(search=params.get("search", ""))
        elif target == "notes":
            from .screens.notes_screen import NotesScreen
            return NotesScreen(self.notes_store, self.speech_service)
        elif target == "reactions":
            from .screens.reactions_screen import ReactionsScreen
            return ReactionsScreen()
        return None

    def navigate(self, target: str, **params) -> None:
        """Open a screen on top of the current one, e.g. navigate("elements", search="Fe")"""
        screen = self._create_screen(target, params)
        if screen is None:
            logger.warning(f"Unknown navigation target: {target}")
            self.notify(f"Nothing to open for {target!r}", severity="error")
            return
        logger.debug(f"Navigating to {target} {params}")
        self.push_screen(screen)

    def open_conversion_tool(self) -> None:
        from .screens.conversion_modal import ConversionModal
        self.push_screen(ConversionModal(self.converter, str(self.notes_store.notes_file)))

    def action_go_back(self) -> None:
        """Escape: pop back towards the home menu (never past it)"""
        from .screens.home_screen import HomeScreen
        from .screens.splash_screen import SplashScreen

        if isinstance(self.screen, (HomeScreen, SplashScreen)):
            return
        if len(self.screen_stack) > 2:
            self.pop_screen()

    def action_toggle_theme(self) -> None:
        """Toggle between dark and light mode (F12)"""
        self.active_theme = "chem-light" if self.active_theme == "chem-dark" else "chem-dark"
        self.theme = self.active_theme


def setup_logging() -> None:
    """Send logs to CHEM_LOG_FILE if set. Textual owns the terminal otherwise."""
    log_file = os.environ.get("CHEM_LOG_FILE")
    if not log_file:
        logging.getLogger("chem_tui").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if os.environ.get("CHEM_DEBUG") else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """Entry point for Chem Companion"""
    setup_logging()
    app = ChemApp()
    app.run()


if __name__ == "__main__":
    main()
