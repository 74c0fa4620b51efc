"""
Chem Companion Screens

One Textual screen per menu entry, plus the startup license gate and the
file conversion dialog. Screens render data from the notes store, the
speech controller and the element catalog; they hold no data of their own.
"""

from .splash_screen import SplashScreen
from .home_screen import HomeScreen
from .periodic_table import PeriodicTableScreen
from .elements_screen import ElementsScreen
from .notes_screen import NotesScreen
from .reactions_screen import ReactionsScreen
from .conversion_modal import ConversionModal

__all__ = [
    "SplashScreen",
    "HomeScreen",
    "PeriodicTableScreen",
    "ElementsScreen",
    "NotesScreen",
    "ReactionsScreen",
    "ConversionModal",
]
