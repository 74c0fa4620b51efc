"""
Elements Explorer Screen

Search the element catalog by name, symbol or atomic number. When a search
narrows down to a single element, its details open automatically.
"""

from rich.console import Group
from rich.table import Table
from rich.text import Text

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Static, Input, ListView, ListItem, Label
from textual.containers import Horizontal

from ..elements import (
    Element, filter_elements, auto_select, color_for, text_color_for, category_label,
)
from ..widgets import ScreenTitle, BackHint

NO_RESULTS = "No elements match your search criteria."


def format_properties(element: Element) -> list[tuple[str, str]]:
    """Label/value rows for the detail card"""
    return [
        ("Atomic Mass", f"{element.atomic_mass:.3f} u"),
        ("Density", f"{element.density:g} g/L"),
        ("Melting Point", f"{element.melting_point:.2f} °C"),
        ("Boiling Point", f"{element.boiling_point:.2f} °C"),
    ]


def format_list_entry(element: Element) -> str:
    return (
        f"[bold]{element.name} ({element.symbol})[/]  "
        f"[dim]#{element.atomic_number}[/]  "
        f"[dim]Atomic Mass: {element.atomic_mass:.3f} u[/]"
    )


def _property_table(title: str, rows: list[tuple[str, str]]) -> Table:
    table = Table.grid(padding=(0, 2))
    table.title = title
    table.title_justify = "left"
    table.title_style = "bold"
    table.add_column(style="dim")
    table.add_column()
    for label, value in rows:
        table.add_row(f"{label}:", value)
    return table


class ElementDetails(Static):
    """Full details of the selected element"""

    DEFAULT_CSS = """
    ElementDetails {
        width: 100%;
        height: auto;
        padding: 1 2;
        margin-bottom: 1;
        border-left: thick $primary;
        background: $panel;
    }
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.element: Element | None = None

    def show(self, element: Element | None) -> None:
        self.element = element
        self.display = element is not None
        if element is None:
            self.update("")
            return

        color = color_for(element.category)
        self.styles.border_left = ("thick", color)

        header = Text()
        header.append(f"{element.symbol}  ", style="bold")
        header.append(element.name, style="bold")
        header.append(f"\nAtomic Number: {element.atomic_number}\n")
        header.append(
            f" {category_label(element.category)} ",
            style=f"bold {text_color_for(element.category)} on {color}",
        )

        self.update(Group(
            header,
            Text(""),
            _property_table("Key Physical Properties", format_properties(element)),
            Text(""),
            _property_table("Quantum Information",
                            [("Electronic Config", element.electronic_configuration)]),
        ))


class ElementListItem(ListItem):
    """A row in the results list"""

    DEFAULT_CSS = """
    ElementListItem {
        height: 1;
        padding: 0 1;
    }
    """

    def __init__(self, element: Element, **kwargs):
        super().__init__(Label(format_list_entry(element)), **kwargs)
        self.element = element

    def on_mount(self) -> None:
        self.styles.border_left = ("wide", color_for(self.element.category))


class ElementsScreen(Screen):
    """Search box, detail card and results list"""

    DEFAULT_CSS = """
    ElementsScreen {
        background: $surface;
    }

    #search-row {
        height: 3;
        margin-bottom: 1;
    }

    #element-search {
        width: 1fr;
    }

    #no-results {
        width: 100%;
        text-align: center;
        color: $text-muted;
        display: none;
    }

    #no-results.visible {
        display: block;
    }

    #element-list {
        height: 1fr;
    }
    """

    def __init__(self, search: str = "", **kwargs):
        super().__init__(**kwargs)
        self.search = search
        self.results: list[Element] = []

    def compose(self) -> ComposeResult:
        yield ScreenTitle("elements")
        with Horizontal(id="search-row"):
            yield Input(
                value=self.search,
                placeholder="Search by Name, Symbol, or Atomic Number",
                id="element-search",
            )
        yield ElementDetails(id="element-details")
        yield Static(NO_RESULTS, id="no-results")
        yield ListView(id="element-list")
        yield BackHint("Type to search  •  Enter on a row: details  •  Escape: back")

    async def on_mount(self) -> None:
        self.query_one("#element-details", ElementDetails).show(None)
        await self._apply_search(self.search)
        self.query_one("#element-search", Input).focus()

    async def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "element-search":
            return
        await self._apply_search(event.value.strip())

    async def _apply_search(self, query: str) -> None:
        self.search = query
        self.results = filter_elements(query)

        list_view = self.query_one("#element-list", ListView)
        await list_view.clear()
        await list_view.extend(ElementListItem(element) for element in self.results)

        no_results = self.query_one("#no-results", Static)
        no_results.set_class(bool(query) and not self.results, "visible")

        details = self.query_one("#element-details", ElementDetails)
        single = auto_select(self.results)
        if single is not None:
            details.show(single)
        elif details.element is not None and details.element not in self.results:
            details.show(None)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        event.stop()
        if isinstance(event.item, ElementListItem):
            self.query_one("#element-details", ElementDetails).show(event.item.element)
