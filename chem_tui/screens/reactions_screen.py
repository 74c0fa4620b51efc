"""
Reaction Balancer (Future Implementation)

Step-by-step balancing of chemical equations.
"""

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Static
from textual.containers import Center, Middle

from ..widgets import ScreenTitle, BackHint


class ReactionsContent(Static):
    """Coming soon message"""

    def render(self) -> str:
        return (
            "[dim]Coming soon![/]\n\n"
            "Balance chemical equations step by step.\n\n"
            "[dim]Try the Periodic Table or Elements Explorer in the meantime.[/]"
        )


class ReactionsScreen(Screen):
    """
    Reaction Balancer - placeholder.

    Future implementation will include:
    - Parsing equations like "H2 + O2 -> H2O"
    - Balancing coefficients
    - Showing atom counts on both sides
    """

    DEFAULT_CSS = """
    ReactionsScreen {
        background: $surface;
    }

    #coming-soon {
        text-align: center;
        width: auto;
        height: auto;
    }
    """

    def compose(self) -> ComposeResult:
        yield ScreenTitle("reactions")
        with Center():
            with Middle():
                yield ReactionsContent(id="coming-soon")
        yield BackHint()
