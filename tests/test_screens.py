#!/usr/bin/env python3
"""Tests for screen helpers and navigation wiring (no running app needed).

Run with: pytest tests/test_screens.py -v
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from chem_tui.constants import SCREEN_TITLES, _get_timing
from chem_tui.elements import get_element
from chem_tui.chem_tui import NAVIGATION_TARGETS
from chem_tui.screens.home_screen import MENU_ITEMS
from chem_tui.screens.elements_screen import format_properties, format_list_entry


class TestElementFormatting:
    """Test the text shown on the element detail card and list."""

    def test_properties_of_iron(self):
        rows = dict(format_properties(get_element(26)))
        assert rows == {
            "Atomic Mass": "55.845 u",
            "Density": "7.87 g/L",
            "Melting Point": "1538.00 °C",
            "Boiling Point": "2862.00 °C",
        }

    def test_negative_temperatures(self):
        rows = dict(format_properties(get_element(1)))
        assert rows["Melting Point"] == "-259.16 °C"

    def test_list_entry(self):
        entry = format_list_entry(get_element(79))
        assert "Gold (Au)" in entry
        assert "#79" in entry
        assert "196.970 u" in entry


class TestNavigation:
    """Test that the menu and titles line up with the app's screens."""

    def test_every_menu_item_has_a_title(self):
        for target in MENU_ITEMS:
            assert target in SCREEN_TITLES

    def test_menu_items_open_something(self):
        # The conversion tool is a modal, everything else is a screen
        for target in MENU_ITEMS:
            assert target in NAVIGATION_TARGETS or target == "conversion"

    def test_five_menu_items(self):
        assert len(MENU_ITEMS) == 5


class TestTiming:
    """Test demo mode timing."""

    def test_normal_timing(self, monkeypatch):
        monkeypatch.delenv("CHEM_FAST_DEMO", raising=False)
        assert _get_timing(3.0, 0.3) == 3.0

    def test_demo_timing(self, monkeypatch):
        monkeypatch.setenv("CHEM_FAST_DEMO", "1")
        assert _get_timing(3.0, 0.3) == 0.3


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
