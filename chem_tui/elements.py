"""
Element Catalog for Chem Companion

A small, read-only table of element records plus the search filter that
drives the Elements Explorer and the category colors shared by every screen.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Category(Enum):
    """Element families, used for grouping and color coding"""
    ALKALI_METAL = "alkali_metal"
    ALKALINE_EARTH_METAL = "alkaline_earth_metal"
    TRANSITION_METAL = "transition_metal"
    POST_TRANSITION_METAL = "post_transition_metal"
    METALLOID = "metalloid"
    NONMETAL = "nonmetal"
    HALOGEN = "halogen"
    NOBLE_GAS = "noble_gas"
    LANTHANIDE = "lanthanide"
    ACTINIDE = "actinide"


@dataclass(frozen=True)
class Element:
    atomic_number: int
    symbol: str
    name: str
    atomic_mass: float          # u
    density: float              # g/L
    melting_point: float        # °C
    boiling_point: float        # °C
    category: Category
    electronic_configuration: str


_C = Category

ELEMENTS: tuple[Element, ...] = (
    Element(1, "H", "Hydrogen", 1.008, 0.08988, -259.16, -252.87, _C.NONMETAL, "1s¹"),
    Element(2, "He", "Helium", 4.0026, 0.1786, -272.2, -268.93, _C.NOBLE_GAS, "1s²"),
    Element(3, "Li", "Lithium", 6.94, 0.534, 180.5, 1342, _C.ALKALI_METAL, "[He] 2s¹"),
    Element(4, "Be", "Beryllium", 9.0122, 1.85, 1287, 2471, _C.ALKALINE_EARTH_METAL, "[He] 2s²"),
    Element(5, "B", "Boron", 10.81, 2.34, 2076, 3927, _C.METALLOID, "[He] 2s² 2p¹"),
    Element(6, "C", "Carbon", 12.011, 2.267, 3500, 4827, _C.NONMETAL, "[He] 2s² 2p²"),
    Element(7, "N", "Nitrogen", 14.007, 1.251, -210.0, -195.8, _C.NONMETAL, "[He] 2s² 2p³"),
    Element(8, "O", "Oxygen", 15.999, 1.429, -218.4, -183.0, _C.NONMETAL, "[He] 2s² 2p⁴"),
    Element(9, "F", "Fluorine", 18.998, 1.696, -219.6, -188.1, _C.HALOGEN, "[He] 2s² 2p⁵"),
    Element(10, "Ne", "Neon", 20.180, 0.9, -248.59, -246.08, _C.NOBLE_GAS, "[He] 2s² 2p⁶"),
    Element(11, "Na", "Sodium", 22.990, 0.968, 97.72, 883, _C.ALKALI_METAL, "[Ne] 3s¹"),
    Element(12, "Mg", "Magnesium", 24.305, 1.738, 650, 1090, _C.ALKALINE_EARTH_METAL, "[Ne] 3s²"),
    Element(13, "Al", "Aluminum", 26.982, 2.70, 660.32, 2519, _C.POST_TRANSITION_METAL, "[Ne] 3s² 3p¹"),
    Element(14, "Si", "Silicon", 28.085, 2.329, 1414, 3265, _C.METALLOID, "[Ne] 3s² 3p²"),
    Element(15, "P", "Phosphorus", 30.974, 1.823, 44.15, 280.5, _C.NONMETAL, "[Ne] 3s² 3p³"),
    Element(16, "S", "Sulfur", 32.06, 2.07, 115.2, 444.6, _C.NONMETAL, "[Ne] 3s² 3p⁴"),
    Element(17, "Cl", "Chlorine", 35.45, 3.2, -101.5, -34.04, _C.HALOGEN, "[Ne] 3s² 3p⁵"),
    Element(18, "Ar", "Argon", 39.948, 1.784, -189.3, -185.8, _C.NOBLE_GAS, "[Ne] 3s² 3p⁶"),
    Element(19, "K", "Potassium", 39.098, 0.862, 63.38, 759, _C.ALKALI_METAL, "[Ar] 4s¹"),
    Element(20, "Ca", "Calcium", 40.078, 1.55, 842, 1484, _C.ALKALINE_EARTH_METAL, "[Ar] 4s²"),
    Element(24, "Cr", "Chromium", 51.996, 7.19, 1857, 2671, _C.TRANSITION_METAL, "[Ar] 3d⁵ 4s¹"),
    Element(26, "Fe", "Iron", 55.845, 7.87, 1538, 2862, _C.TRANSITION_METAL, "[Ar] 3d⁶ 4s²"),
    Element(29, "Cu", "Copper", 63.546, 8.96, 1084.6, 2560, _C.TRANSITION_METAL, "[Ar] 3d¹⁰ 4s¹"),
    Element(47, "Ag", "Silver", 107.87, 10.49, 961.78, 2162, _C.TRANSITION_METAL, "[Kr] 4d¹⁰ 5s¹"),
    Element(79, "Au", "Gold", 196.97, 19.3, 1064.18, 2856, _C.TRANSITION_METAL, "[Xe] 4f¹⁴ 5d¹⁰ 6s¹"),
    Element(80, "Hg", "Mercury", 200.59, 13.534, -38.83, 356.73, _C.TRANSITION_METAL, "[Xe] 4f¹⁴ 5d¹⁰ 6s²"),
)


# Category colors (Material palette)
CATEGORY_COLORS = {
    Category.ALKALI_METAL: "#f44336",           # red
    Category.ALKALINE_EARTH_METAL: "#ff9800",   # orange
    Category.TRANSITION_METAL: "#4caf50",       # green
    Category.POST_TRANSITION_METAL: "#03a9f4",  # light blue
    Category.METALLOID: "#ffeb3b",              # yellow (needs dark text)
    Category.NONMETAL: "#9e9e9e",               # gray
    Category.HALOGEN: "#e91e63",                # pink
    Category.NOBLE_GAS: "#9c27b0",              # purple
    Category.LANTHANIDE: "#8bc34a",
    Category.ACTINIDE: "#ff5722",
}
DEFAULT_COLOR = "#cccccc"

LIGHT_TEXT = "#ffffff"
DARK_TEXT = "#333333"


def _as_category(category) -> Optional[Category]:
    if isinstance(category, Category):
        return category
    try:
        return Category(category)
    except ValueError:
        return None


def color_for(category) -> str:
    """Display color for a category (enum or raw string). Unknown -> gray."""
    return CATEGORY_COLORS.get(_as_category(category), DEFAULT_COLOR)


def text_color_for(category) -> str:
    """Readable text color on top of color_for(category)"""
    return DARK_TEXT if _as_category(category) is Category.METALLOID else LIGHT_TEXT


def category_label(category) -> str:
    """'alkali_metal' -> 'ALKALI METAL'"""
    value = category.value if isinstance(category, Category) else str(category)
    return value.replace("_", " ").upper()


def filter_elements(query: str) -> list[Element]:
    """
    Search the catalog.

    Empty query returns everything in table order. Otherwise an element
    matches if its name contains the query, its symbol equals the query, or
    its atomic number equals the query. Case-insensitive.
    """
    if not query:
        return list(ELEMENTS)
    needle = query.lower()
    return [
        element for element in ELEMENTS
        if needle in element.name.lower()
        or element.symbol.lower() == needle
        or str(element.atomic_number) == needle
    ]


def auto_select(results: list[Element]) -> Optional[Element]:
    """The element to show straight away: only when the search narrowed to one."""
    if len(results) == 1:
        return results[0]
    return None


def get_element(atomic_number: int) -> Optional[Element]:
    for element in ELEMENTS:
        if element.atomic_number == atomic_number:
            return element
    return None


# =============================================================================
# PERIODIC TABLE LAYOUT
# =============================================================================

@dataclass(frozen=True)
class GridTile:
    """One tile on the periodic table grid (column 1-18, row 1-7)"""
    number: int
    symbol: str
    column: int
    row: int
    category: Category

    @property
    def is_series(self) -> bool:
        """Lanthanide/actinide placeholder tiles like 'La-Lu'"""
        return "-" in self.symbol


GRID_COLUMNS = 18
GRID_ROWS = 7

GRID_TILES: tuple[GridTile, ...] = (
    GridTile(1, "H", 1, 1, _C.NONMETAL),
    GridTile(2, "He", 18, 1, _C.NOBLE_GAS),
    GridTile(3, "Li", 1, 2, _C.ALKALI_METAL),
    GridTile(4, "Be", 2, 2, _C.ALKALINE_EARTH_METAL),
    GridTile(5, "B", 13, 2, _C.METALLOID),
    GridTile(6, "C", 14, 2, _C.NONMETAL),
    GridTile(7, "N", 15, 2, _C.NONMETAL),
    GridTile(8, "O", 16, 2, _C.NONMETAL),
    GridTile(9, "F", 17, 2, _C.HALOGEN),
    GridTile(10, "Ne", 18, 2, _C.NOBLE_GAS),
    GridTile(11, "Na", 1, 3, _C.ALKALI_METAL),
    GridTile(12, "Mg", 2, 3, _C.ALKALINE_EARTH_METAL),
    GridTile(13, "Al", 13, 3, _C.POST_TRANSITION_METAL),
    GridTile(14, "Si", 14, 3, _C.METALLOID),
    GridTile(15, "P", 15, 3, _C.NONMETAL),
    GridTile(16, "S", 16, 3, _C.NONMETAL),
    GridTile(17, "Cl", 17, 3, _C.HALOGEN),
    GridTile(18, "Ar", 18, 3, _C.NOBLE_GAS),
    GridTile(19, "K", 1, 4, _C.ALKALI_METAL),
    GridTile(20, "Ca", 2, 4, _C.ALKALINE_EARTH_METAL),
    GridTile(21, "Sc", 3, 4, _C.TRANSITION_METAL),
    GridTile(22, "Ti", 4, 4, _C.TRANSITION_METAL),
    GridTile(23, "V", 5, 4, _C.TRANSITION_METAL),
    GridTile(24, "Cr", 6, 4, _C.TRANSITION_METAL),
    GridTile(25, "Mn", 7, 4, _C.TRANSITION_METAL),
    GridTile(26, "Fe", 8, 4, _C.TRANSITION_METAL),
    GridTile(27, "Co", 9, 4, _C.TRANSITION_METAL),
    GridTile(28, "Ni", 10, 4, _C.TRANSITION_METAL),
    GridTile(29, "Cu", 11, 4, _C.TRANSITION_METAL),
    GridTile(30, "Zn", 12, 4, _C.TRANSITION_METAL),
    GridTile(31, "Ga", 13, 4, _C.POST_TRANSITION_METAL),
    GridTile(32, "Ge", 14, 4, _C.METALLOID),
    GridTile(33, "As", 15, 4, _C.METALLOID),
    GridTile(34, "Se", 16, 4, _C.NONMETAL),
    GridTile(35, "Br", 17, 4, _C.HALOGEN),
    GridTile(36, "Kr", 18, 4, _C.NOBLE_GAS),
    # Series placeholders
    GridTile(57, "La-Lu", 3, 6, _C.LANTHANIDE),
    GridTile(89, "Ac-Lr", 3, 7, _C.ACTINIDE),
)


def tile_at(column: int, row: int) -> Optional[GridTile]:
    for tile in GRID_TILES:
        if tile.column == column and tile.row == row:
            return tile
    return None
