"""
Chem Companion - Shared Constants

Central location for paths, timings and display constants used across the app.

Demo mode: Set CHEM_FAST_DEMO=1 to use short delays for the startup check
and the file conversion tool.
"""

import os
from pathlib import Path


def _get_timing(normal: float, demo: float) -> float:
    """Get timing value - uses demo value if CHEM_FAST_DEMO is set."""
    if os.environ.get("CHEM_FAST_DEMO"):
        return demo
    return normal


# =============================================================================
# STORAGE
# =============================================================================

# Private document storage for the app (like a phone's document directory)
DATA_DIR = Path(os.environ.get("CHEM_DATA_DIR", Path.home() / ".chem-companion"))

NOTES_DIR_NAME = "notes"
NOTES_FILENAME = "chemistry_notes.json"

# Display format for a note's "Saved on" date (locale date)
NOTE_DATE_FORMAT = "%x"

# =============================================================================
# TIMING
# =============================================================================

LICENSE_CHECK_DELAY = _get_timing(3.0, 0.3)   # Security/license splash
CONVERSION_DELAY = _get_timing(2.0, 0.2)      # Mock file conversion

# =============================================================================
# SPEECH
# =============================================================================

SPEECH_LANGUAGE = "en-US"
SPEECH_PITCH = 1.0
SPEECH_RATE = 1.0

# =============================================================================
# DISPLAY
# =============================================================================

USER_NAME = os.environ.get("CHEM_USER_NAME", "Jomy Kings")

# Nerd Font icons (https://www.nerdfonts.com/cheat-sheet)
ICON_VOLUME_ON = "󰕾"        # nf-md-volume_high
ICON_VOLUME_OFF = "󰖁"       # nf-md-volume_off
ICON_SAVE = "󰆓"             # nf-md-content_save
ICON_TRASH = "󰩺"            # nf-md-trash_can
ICON_GRID = "󰕰"             # nf-md-view_grid
ICON_SEARCH = "󰍉"           # nf-md-magnify
ICON_PENCIL = "󰏫"           # nf-md-pencil
ICON_FLASK = "󰂓"            # nf-md-flask
ICON_DOCUMENT = "󰈙"         # nf-md-file_document
ICON_MOON = "󰖙"             # nf-md-weather_night
ICON_SUN = "󰖨"              # nf-md-weather_sunny

# Screen titles with icons
SCREEN_TITLES = {
    "periodic_table": (ICON_GRID, "Periodic Table"),
    "elements": (ICON_SEARCH, "Elements Explorer"),
    "notes": (ICON_PENCIL, "Quick Notes"),
    "reactions": (ICON_FLASK, "Reaction Balancer"),
    "conversion": (ICON_DOCUMENT, "File Conversion Tool"),
}
