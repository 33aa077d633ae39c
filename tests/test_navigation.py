from __future__ import annotations

import pytest

from ucfinder.core.navigation import CHART_PAGE_SIZE, NavigationEngine, chart_base
from ucfinder.core.parser import load_index


@pytest.fixture
def navigation(index) -> NavigationEngine:
    return NavigationEngine(index)


def test_block_for_codepoint_includes_both_ends(navigation):
    assert navigation.block_for_codepoint(0x00).title == "Basic Latin"
    assert navigation.block_for_codepoint(0x7F).title == "Basic Latin"
    assert navigation.block_for_codepoint(0x80).title == "Latin-1 Supplement"
    assert navigation.block_for_codepoint(0x1F600).title == "Emoticons"


def test_block_for_codepoint_returns_none_in_gaps(navigation):
    assert navigation.block_for_codepoint(0x0200) is None
    assert navigation.block_for_codepoint(0x036F) is None
    assert navigation.block_for_codepoint(0x10FFFF) is None


def test_block_lookup_between_blocks():
    index = load_index("[0000\t000F\tA\tf\tu\n[0020\t002F\tB\tf\tu\n")
    assert NavigationEngine(index).block_for_codepoint(0x18) is None
    assert NavigationEngine(index).block_for_codepoint(0x28).title == "B"


def test_next_assigned_codepoint_skips_unassigned(navigation):
    assert navigation.next_assigned_codepoint(0x41, 1) == 0x42
    assert navigation.next_assigned_codepoint(0x42, 1) == 0x61
    assert navigation.next_assigned_codepoint(0x391, -1) == 0xE9
    assert navigation.next_assigned_codepoint(0x100, 1) == 0x391


def test_next_assigned_codepoint_boundaries(navigation):
    assert navigation.next_assigned_codepoint(0x20, -1) is None
    assert navigation.next_assigned_codepoint(0, -1) is None
    assert navigation.next_assigned_codepoint(0x1F600, 1) is None
    assert navigation.next_assigned_codepoint(0x10FFFF, -1) == 0x1F600
    assert navigation.next_assigned_codepoint(0x20000, 1) is None


def test_next_assigned_codepoint_rejects_bad_direction(navigation):
    with pytest.raises(ValueError):
        navigation.next_assigned_codepoint(0x41, 2)


def test_block_relative_jump(navigation):
    assert navigation.block_relative_jump(0x41, 1).title == "Latin-1 Supplement"
    assert navigation.block_relative_jump(0x3B1, -1).title == "Latin-1 Supplement"
    assert navigation.block_relative_jump(0x41, -1) is None
    assert navigation.block_relative_jump(0x1F600, 1) is None
    assert navigation.block_relative_jump(0x0200, 1) is None


def test_chart_page_grid(navigation):
    page = navigation.chart_page(0x41, current=0x41)
    assert page.base == 0
    assert page.title == "0000 - 007F"
    assert page.block.title == "Basic Latin"
    assert len(page.rows) == 8
    assert all(len(row) == 16 for row in page.rows)
    assert len(page.cells()) == CHART_PAGE_SIZE

    cell = page.cell_at(4, 1)
    assert (cell.codepoint, cell.character, cell.current) == (0x41, "A", True)
    assert page.cell_at(4, 2).current is False
    assert page.cell_at(0, 0).reserved
    assert page.cell_at(2, 0).character == " "


def test_chart_page_rounds_down_to_page_start(navigation):
    assert navigation.chart_page(0x3B1).base == 0x380
    assert navigation.chart_page(0x1F600).title == "1F600 - 1F67F"
    assert navigation.chart_page(0x10FFFF).base == 0x10FF80


def test_turn_chart_page_never_goes_below_zero(navigation):
    assert navigation.turn_chart_page(0, -1).base == 0
    assert navigation.turn_chart_page(0x41, 1).base == 0x80
    assert navigation.turn_chart_page(0x100, -1).base == 0x80
    assert navigation.turn_chart_page(0x10FF80, 1).base == 0x10FF80


def test_chart_page_for_block(navigation):
    page = navigation.chart_page_for_block(2)
    assert page.base == 0x0300
    assert page.block is None
    assert page.cell_at(7, 0).codepoint == 0x0370
    assert all(cell.reserved for cell in page.cells())

    page = navigation.chart_page_for_block(4)
    assert page.cell_at(0, 0).character == "\U0001F600"
    assert page.block.title == "Emoticons"


def test_block_menu_labels(navigation):
    assert navigation.block_menu()[:2] == [(0, "0000 Basic Latin"), (1, "0080 Latin-1 Supplement")]


def test_chart_base():
    assert chart_base(0x7F) == 0
    assert chart_base(0x80) == 0x80
    assert chart_base(0x10FFFF) == 0x10FF80
