"""
Home Screen - main menu

Greets the student and links to every tool in the app.
"""

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Static, Button
from textual.containers import Grid, Vertical

from ..constants import SCREEN_TITLES, USER_NAME


# Menu order: (target, title key)
MENU_ITEMS = ["periodic_table", "elements", "notes", "reactions", "conversion"]


class MenuButton(Button):
    """A menu entry with icon and title"""

    DEFAULT_CSS = """
    MenuButton {
        width: 100%;
        height: 5;
        margin: 0 1 1 0;
    }
    """

    def __init__(self, target: str, **kwargs):
        icon, title = SCREEN_TITLES[target]
        super().__init__(f"{icon}  {title}", id=f"menu-{target}", **kwargs)
        self.target = target


class HomeScreen(Screen):
    """Welcome text and a grid of menu buttons."""

    DEFAULT_CSS = """
    HomeScreen {
        align: center middle;
        background: $background;
    }

    #home-box {
        width: 72;
        height: auto;
        padding: 1 2;
        border: heavy $primary;
        background: $surface;
    }

    #welcome {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $primary;
    }

    #subtitle {
        width: 100%;
        text-align: center;
        color: $text-muted;
        margin-bottom: 1;
    }

    #menu-grid {
        grid-size: 2;
        height: auto;
    }

    #home-hint {
        width: 100%;
        text-align: center;
        color: $text-muted;
        margin-top: 1;
    }
    """

    def compose(self) -> ComposeResult:
        with Vertical(id="home-box"):
            yield Static(f"Welcome, {USER_NAME}!", id="welcome")
            yield Static("Explore the world of Chemistry.", id="subtitle")
            with Grid(id="menu-grid"):
                for target in MENU_ITEMS:
                    yield MenuButton(target)
            yield Static("[dim]F12: light/dark  •  Ctrl+Q: quit[/]", id="home-hint")

    def on_mount(self) -> None:
        self.query_one(MenuButton).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if not isinstance(event.button, MenuButton):
            return
        event.stop()
        if event.button.target == "conversion":
            self.app.open_conversion_tool()
        else:
            self.app.navigate(event.button.target)
