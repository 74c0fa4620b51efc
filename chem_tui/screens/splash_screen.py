"""
Splash Screen - startup security and license check

Shown before anything else. The check runs as a worker owned by this
screen, so it is cancelled if the screen goes away before it finishes.
"""

import logging

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Static, LoadingIndicator
from textual.containers import Center, Middle, Vertical

from ..services import LicenseChecker, LicenseResult, STATUS_CHECKING

logger = logging.getLogger(__name__)


class SplashScreen(Screen):
    """Blocks the app until the license checker answers."""

    DEFAULT_CSS = """
    SplashScreen {
        align: center middle;
        background: $background;
    }

    #splash-box {
        width: 60;
        height: auto;
    }

    #splash-loading {
        height: 3;
    }

    #splash-title {
        width: 100%;
        text-align: center;
        color: $primary;
        text-style: bold;
        margin-top: 1;
    }

    #splash-status {
        width: 100%;
        text-align: center;
        color: $text-muted;
        margin-top: 1;
    }

    #splash-status.failed {
        color: $error;
        text-style: bold;
    }
    """

    def __init__(self, checker: LicenseChecker, **kwargs):
        super().__init__(**kwargs)
        self.checker = checker
        self.result: LicenseResult | None = None

    def compose(self) -> ComposeResult:
        with Center():
            with Middle():
                with Vertical(id="splash-box"):
                    yield LoadingIndicator(id="splash-loading")
                    yield Static("Running Security and License Checks...", id="splash-title")
                    yield Static(STATUS_CHECKING, id="splash-status")

    def on_mount(self) -> None:
        self.run_worker(self._run_check(), name="license-check", exclusive=True)

    async def _run_check(self) -> None:
        result = await self.checker.check_license()
        self._show_result(result)

    def _show_result(self, result: LicenseResult) -> None:
        self.result = result
        self.query_one("#splash-status", Static).update(result.status)
        self.query_one("#splash-loading", LoadingIndicator).display = False

        if result.granted:
            logger.info("Startup check passed, opening home screen")
            self.app.show_home()
            return

        self.query_one("#splash-status", Static).add_class("failed")
        self.app.notify(result.message or result.status, title="License Required",
                        severity="error", timeout=10)
