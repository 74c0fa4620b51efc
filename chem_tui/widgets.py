"""Small widgets shared by several screens."""

from textual.widgets import Static

from .constants import SCREEN_TITLES


class ScreenTitle(Static):
    """Shows the current screen's icon and title at the top"""

    DEFAULT_CSS = """
    ScreenTitle {
        width: 100%;
        height: 1;
        text-align: center;
        color: $primary;
        text-style: bold;
        margin-bottom: 1;
    }
    """

    def __init__(self, screen_name: str, **kwargs):
        super().__init__(**kwargs)
        self.screen_name = screen_name

    def render(self) -> str:
        icon, label = SCREEN_TITLES.get(self.screen_name, ("", self.screen_name.title()))
        return f"{icon}  {label}"


class BackHint(Static):
    """Footer hint for screens that can be left with Escape"""

    DEFAULT_CSS = """
    BackHint {
        width: 100%;
        height: 1;
        dock: bottom;
        text-align: center;
        color: $text-muted;
    }
    """

    def __init__(self, text: str = "Escape: back", **kwargs):
        super().__init__(**kwargs)
        self.text = text

    def render(self) -> str:
        return f"[dim]{self.text}[/]"
