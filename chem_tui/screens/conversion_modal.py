"""
File Conversion Tool - modal dialog

Convert lab reports or notes to a printable format. The conversion itself
is done by a FileConverter service (a mock for now).
"""

from textual.app import ComposeResult
from textual.screen import ModalScreen
from textual.widgets import Static, Button, Input
from textual.containers import Container, Horizontal
from textual.binding import Binding

from ..services import FileConverter, ConversionResult, SUPPORTED_FORMATS

STATUS_CONVERTING = "Converting..."


class FormatButton(Button):
    """One of the output format choices"""

    DEFAULT_CSS = """
    FormatButton {
        width: 1fr;
        margin: 0 1;
    }

    FormatButton.active {
        background: $primary;
        color: $background;
        text-style: bold;
    }
    """

    def __init__(self, output_format: str, **kwargs):
        super().__init__(output_format, id=f"format-{output_format.lower()}", **kwargs)
        self.output_format = output_format


class ConversionModal(ModalScreen):
    """Pick a file and a format, then convert."""

    BINDINGS = [
        Binding("escape", "dismiss", "Close"),
    ]

    DEFAULT_CSS = """
    ConversionModal {
        align: center middle;
        background: rgba(0, 0, 0, 0.7);
    }

    #convert-dialog {
        width: 64;
        height: auto;
        padding: 1 3;
        background: $surface;
        border: heavy $primary;
    }

    #convert-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $primary;
    }

    #convert-subtext {
        width: 100%;
        text-align: center;
        color: $text-muted;
        margin-bottom: 1;
    }

    #format-row {
        height: 3;
        margin: 1 0;
    }

    #convert-start, #convert-close {
        width: 100%;
        margin-top: 1;
    }

    #convert-status {
        width: 100%;
        text-align: center;
        color: $success;
        margin-top: 1;
    }

    #convert-status.failed {
        color: $error;
    }
    """

    def __init__(self, converter: FileConverter, default_path: str = "", **kwargs):
        super().__init__(**kwargs)
        self.converter = converter
        self.default_path = default_path
        self.output_format = SUPPORTED_FORMATS[0]
        self.status = ""

    def compose(self) -> ComposeResult:
        with Container(id="convert-dialog"):
            yield Static("File Conversion Tool", id="convert-title")
            yield Static("Convert lab reports or notes to a printable format.", id="convert-subtext")
            yield Input(value=self.default_path, placeholder="/path/to/lab_report.txt", id="convert-path")
            with Horizontal(id="format-row"):
                for output_format in SUPPORTED_FORMATS:
                    button = FormatButton(output_format)
                    if output_format == self.output_format:
                        button.add_class("active")
                    yield button
            yield Button("Start Conversion", id="convert-start", variant="primary")
            yield Static("", id="convert-status")
            yield Button("Close", id="convert-close")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if isinstance(event.button, FormatButton):
            self._select_format(event.button.output_format)
        elif event.button.id == "convert-start":
            self._start_conversion()
        elif event.button.id == "convert-close":
            self.dismiss()

    def _select_format(self, output_format: str) -> None:
        self.output_format = output_format
        for button in self.query(FormatButton):
            button.set_class(button.output_format == output_format, "active")

    def _start_conversion(self) -> None:
        if self.status == STATUS_CONVERTING:
            return
        path = self.query_one("#convert-path", Input).value.strip()
        self._set_status(STATUS_CONVERTING)
        start = self.query_one("#convert-start", Button)
        start.disabled = True
        start.label = "Processing..."
        self.run_worker(self._convert(path, self.output_format), name="convert", exclusive=True)

    async def _convert(self, path: str, output_format: str) -> None:
        result = await self.converter.convert(path, output_format)
        self._show_result(result)

    def _show_result(self, result: ConversionResult) -> None:
        self._set_status(result.message, failed=not result.success)
        start = self.query_one("#convert-start", Button)
        start.disabled = False
        start.label = "Start Conversion"

    def _set_status(self, status: str, failed: bool = False) -> None:
        self.status = status
        status_widget = self.query_one("#convert-status", Static)
        # The "Converting..." state shows on the button, not the status line
        status_widget.update("" if status == STATUS_CONVERTING else status)
        status_widget.set_class(failed, "failed")
