#!/usr/bin/env python3
"""Tests for the element catalog - search filter, colors, and grid layout.

Run with: pytest tests/test_elements.py -v
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from chem_tui.elements import (
    ELEMENTS, GRID_TILES, GRID_COLUMNS, GRID_ROWS, Category, DEFAULT_COLOR,
    filter_elements, auto_select, color_for, text_color_for, category_label,
    get_element, tile_at,
)


def names(elements):
    return [e.name for e in elements]


class TestCatalog:
    """Test the static element table."""

    def test_twenty_six_elements(self):
        assert len(ELEMENTS) == 26

    def test_keys_are_unique(self):
        assert len({e.atomic_number for e in ELEMENTS}) == 26
        assert len({e.symbol for e in ELEMENTS}) == 26
        assert len({e.name for e in ELEMENTS}) == 26

    def test_sorted_by_atomic_number(self):
        numbers = [e.atomic_number for e in ELEMENTS]
        assert numbers == sorted(numbers)

    def test_values_are_sane(self):
        for e in ELEMENTS:
            assert e.atomic_mass > 0
            assert e.density >= 0
            assert e.boiling_point > e.melting_point
            assert isinstance(e.category, Category)

    def test_get_element(self):
        assert get_element(79).name == "Gold"
        assert get_element(118) is None


class TestFilter:
    """Test the search filter."""

    def test_empty_returns_all_in_order(self):
        assert filter_elements("") == list(ELEMENTS)

    def test_symbol_match(self):
        assert names(filter_elements("fe")) == ["Iron"]

    def test_atomic_number_match(self):
        assert names(filter_elements("26")) == ["Iron"]

    def test_no_match(self):
        assert filter_elements("zzz") == []

    def test_name_substring(self):
        assert names(filter_elements("on")) == [
            "Boron", "Carbon", "Neon", "Silicon", "Argon", "Iron",
        ]

    def test_case_insensitive(self):
        assert names(filter_elements("GOLD")) == ["Gold"]
        assert names(filter_elements("Hg")) == ["Mercury"]

    def test_symbol_or_name(self):
        # "ag" is Silver's symbol and part of "Magnesium"
        assert names(filter_elements("ag")) == ["Magnesium", "Silver"]

    def test_number_is_exact_not_substring(self):
        assert names(filter_elements("2")) == ["Helium"]

    def test_whitespace_is_not_trimmed(self):
        assert filter_elements(" fe") == []


class TestAutoSelect:
    """Test picking the single search result."""

    def test_single_result(self):
        assert auto_select(filter_elements("iron")).symbol == "Fe"

    def test_multiple_results(self):
        assert auto_select(filter_elements("on")) is None

    def test_no_results(self):
        assert auto_select([]) is None


class TestColors:
    """Test category colors and labels."""

    def test_every_category_has_a_color(self):
        for category in Category:
            assert color_for(category) != DEFAULT_COLOR

    def test_accepts_raw_strings(self):
        assert color_for("alkali_metal") == "#f44336"

    @pytest.mark.parametrize("value", ["unobtainium", "", None])
    def test_unknown_category_gets_default(self, value):
        assert color_for(value) == DEFAULT_COLOR

    def test_metalloid_uses_dark_text(self):
        assert text_color_for(Category.METALLOID) != text_color_for(Category.HALOGEN)

    def test_category_label(self):
        assert category_label(Category.ALKALINE_EARTH_METAL) == "ALKALINE EARTH METAL"
        assert category_label("noble_gas") == "NOBLE GAS"


class TestGrid:
    """Test the periodic table layout."""

    def test_tiles_fit_in_grid(self):
        for tile in GRID_TILES:
            assert 1 <= tile.column <= GRID_COLUMNS
            assert 1 <= tile.row <= GRID_ROWS

    def test_no_overlapping_tiles(self):
        positions = [(t.column, t.row) for t in GRID_TILES]
        assert len(positions) == len(set(positions))

    def test_tile_at(self):
        assert tile_at(8, 4).symbol == "Fe"
        assert tile_at(5, 1) is None

    def test_series_tiles(self):
        series = [t.symbol for t in GRID_TILES if t.is_series]
        assert series == ["La-Lu", "Ac-Lr"]

    def test_catalog_elements_agree_with_grid(self):
        for element in ELEMENTS:
            matching = [t for t in GRID_TILES if t.number == element.atomic_number]
            if matching:
                assert matching[0].symbol == element.symbol
                assert matching[0].category == element.category


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
