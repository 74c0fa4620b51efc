"""
Periodic Table Screen

An 18-column grid of element tiles, tinted by category. Selecting a tile
opens the Elements Explorer with that element's symbol as the search.
"""

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Static
from textual.containers import Grid, VerticalScroll
from textual.message import Message
from textual import events

from ..elements import (
    Category, GridTile, GRID_COLUMNS, GRID_ROWS, CATEGORY_COLORS,
    color_for, text_color_for, tile_at,
)
from ..widgets import ScreenTitle, BackHint


class ElementTile(Static, can_focus=True):
    """A single element on the grid"""

    class Selected(Message, bubble=True):
        """Sent when a tile is clicked or Enter is pressed on it"""
        def __init__(self, tile: GridTile) -> None:
            self.tile = tile
            super().__init__()

    DEFAULT_CSS = """
    ElementTile {
        width: 6;
        height: 3;
        content-align: center middle;
        text-align: center;
    }

    ElementTile:focus {
        text-style: bold reverse;
    }
    """

    def __init__(self, tile: GridTile, **kwargs):
        super().__init__(**kwargs)
        self.tile = tile

    def on_mount(self) -> None:
        self.styles.background = color_for(self.tile.category)
        self.styles.color = text_color_for(self.tile.category)

    def render(self) -> str:
        if self.tile.is_series:
            return self.tile.symbol
        return f"{self.tile.number}\n[bold]{self.tile.symbol}[/]"

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Selected(self.tile))

    def on_key(self, event: events.Key) -> None:
        if event.key in ("enter", "space"):
            event.stop()
            event.prevent_default()
            self.post_message(self.Selected(self.tile))


class CategoryLegend(Static):
    """Color key for the element categories"""

    def render(self) -> str:
        entries = [
            f"[on {CATEGORY_COLORS[category]}]  [/] {category.value.replace('_', ' ')}"
            for category in Category
        ]
        # Two rows of five
        return "   ".join(entries[:5]) + "\n" + "   ".join(entries[5:])


class PeriodicTableScreen(Screen):
    """Interactive periodic table"""

    DEFAULT_CSS = """
    PeriodicTableScreen {
        background: $surface;
    }

    #table-subtitle {
        width: 100%;
        text-align: center;
        color: $text-muted;
        margin-bottom: 1;
    }

    #table-grid {
        grid-size: 18 7;
        grid-columns: 6;
        grid-rows: 3;
        width: auto;
        height: auto;
    }

    .blank-cell {
        width: 6;
        height: 3;
    }

    #legend {
        margin-top: 1;
        color: $text-muted;
    }

    #table-note {
        margin-top: 1;
        color: $text-muted;
    }
    """

    def compose(self) -> ComposeResult:
        yield ScreenTitle("periodic_table")
        yield Static("Tap any element for detailed information.", id="table-subtitle")
        with VerticalScroll():
            with Grid(id="table-grid"):
                for row in range(1, GRID_ROWS + 1):
                    for column in range(1, GRID_COLUMNS + 1):
                        tile = tile_at(column, row)
                        if tile is None:
                            yield Static("", classes="blank-cell")
                        else:
                            yield ElementTile(tile)
            yield CategoryLegend(id="legend")
            yield Static(
                "[dim]Only the first four periods are shown. "
                "Lanthanides and actinides are grouped into series tiles.[/]",
                id="table-note",
            )
        yield BackHint("Tab: next element  •  Enter: details  •  Escape: back")

    def on_mount(self) -> None:
        self.query_one(ElementTile).focus()

    def on_element_tile_selected(self, event: ElementTile.Selected) -> None:
        event.stop()
        self.app.navigate("elements", search=event.tile.symbol)
