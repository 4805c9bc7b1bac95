from __future__ import annotations

import pytest

from romhex.core.cursor import CursorGrid, offset_for_cell
from romhex.core.geometry import GridGeometry

G = GridGeometry()


def test_scenario_twenty_byte_buffer() -> None:
    # Two rows: 16 bytes then 4 bytes
    assert offset_for_cell(G, 10, 0, 0, 20) == 0
    assert offset_for_cell(G, 10, 1, 0, 20) == 16
    assert offset_for_cell(G, 10 + 3 * 3, 1, 0, 20) == 19
    # 5th byte of row 2 is past the end
    assert offset_for_cell(G, 10 + 3 * 4, 1, 0, 20) is None


def test_second_digit_resolves_to_same_byte() -> None:
    assert offset_for_cell(G, 11, 0, 0, 64) == 0
    assert offset_for_cell(G, 14, 2, 0, 64) == 33


@pytest.mark.parametrize("cell_x", [0, 5, 9, 12, 15, 57, 58, 70])
def test_cells_outside_hex_digits_resolve_to_nothing(cell_x: int) -> None:
    # gutter (0..9), separators (12, 15, 57) and ASCII column (58+)
    assert offset_for_cell(G, cell_x, 0, 0, 1024) is None


def test_negative_and_below_viewport_inputs() -> None:
    assert offset_for_cell(G, -1, 0, 0, 64) is None
    assert offset_for_cell(G, 10, -1, 0, 64) is None
    assert offset_for_cell(G, 10, G.visible_rows, 0, 100_000) is None


def test_view_offset_shifts_resolution() -> None:
    assert offset_for_cell(G, 13, 2, 48, 1024) == 48 + 2 * 16 + 1


def test_empty_buffer_never_resolves() -> None:
    for y in range(G.visible_rows):
        for x in range(G.max_cell_x + 1):
            assert offset_for_cell(G, x, y, 0, 0) is None


@pytest.mark.parametrize("view_offset", [0, 16, 160])
def test_round_trip_first_digit_cells(view_offset: int) -> None:
    grid = CursorGrid(G)
    length = 1000
    for y in range(G.visible_rows):
        for i in range(G.row_width):
            x = G.address_column_width + i * G.columns_per_byte
            off = offset_for_cell(G, x, y, view_offset, length)
            if off is None:
                continue
            assert grid.cell_for_offset(off, view_offset) == (x, y)


def test_cell_for_offset_outside_viewport() -> None:
    grid = CursorGrid(G)
    assert grid.cell_for_offset(15, 16) is None
    assert grid.cell_for_offset(16 + G.page_bytes, 16) is None


@pytest.mark.parametrize("dx,dy", [(-1000, 0), (1000, 0), (0, -1000), (0, 1000), (999, -999)])
def test_move_cursor_clamps(dx: int, dy: int) -> None:
    grid = CursorGrid(G)
    grid.move_cursor(20, 5)
    grid.move_cursor(dx, dy)
    assert 0 <= grid.cell_x <= G.max_cell_x
    assert 0 <= grid.cell_y <= G.max_cell_y


def test_move_cursor_does_not_wrap() -> None:
    grid = CursorGrid(G)
    grid.move_cursor(-3, -1)
    assert grid.cell == (0, 0)
    grid.move_cursor(10_000, 10_000)
    assert grid.cell == (G.max_cell_x, G.max_cell_y)


def test_byte_steps_land_on_first_digit() -> None:
    grid = CursorGrid(G)
    grid.move_right()
    assert grid.cell == (10, 0)
    grid.move_right()
    grid.move_right()
    assert grid.cell == (16, 0)
    grid.move_left()
    assert grid.cell == (13, 0)
    for _ in range(40):
        grid.move_right()
    # Last byte of the row, not a separator
    assert grid.cell == (10 + 15 * 3, 0)
    for _ in range(40):
        grid.move_left()
    assert grid.cell == (10, 0)


def test_left_in_gutter_stays() -> None:
    grid = CursorGrid(G)
    grid.move_left()
    assert grid.cell == (0, 0)


def test_vertical_steps_one_row() -> None:
    grid = CursorGrid(G)
    grid.move_down()
    grid.move_down()
    assert grid.cell_y == 2
    grid.move_up()
    assert grid.cell_y == 1


def test_is_cursor_on() -> None:
    grid = CursorGrid(G)
    grid.move_cursor(10 + 3 * 7, 4)
    assert grid.is_cursor_on(7, 4)
    assert not grid.is_cursor_on(7, 3)
    assert not grid.is_cursor_on(6, 4)


def test_custom_geometry_mapping() -> None:
    g = GridGeometry(row_width=8, columns_per_byte=4, address_column_width=6)
    assert offset_for_cell(g, 6, 0, 0, 100) == 0
    assert offset_for_cell(g, 8, 0, 0, 100) == 0
    assert offset_for_cell(g, 9, 0, 0, 100) is None
    assert offset_for_cell(g, 10, 1, 0, 100) == 9
    grid = CursorGrid(g)
    assert grid.cell_for_offset(9, 0) == (10, 1)
