from __future__ import annotations

import logging

from romhex.core.geometry import DEFAULT_GEOMETRY, GridGeometry

logger = logging.getLogger(__name__)


def offset_for_cell(
    geometry: GridGeometry,
    cell_x: int,
    cell_y: int,
    view_offset: int,
    buffer_length: int,
) -> int | None:
    """Return the byte offset shown at cell (cell_x, cell_y), or None.

    Only cells on a hex digit resolve: the address gutter, the separator cell
    after each byte and the ASCII column do not, nor does any byte past
    `buffer_length` (blank padding on the last partial row).
    """
    if cell_x < 0 or cell_y < 0 or view_offset < 0:
        return None
    if cell_y >= geometry.visible_rows:
        return None
    if not geometry.address_column_width <= cell_x < geometry.hex_region_end:
        return None
    rel = cell_x - geometry.address_column_width
    if rel % geometry.columns_per_byte == geometry.columns_per_byte - 1:
        return None
    byte_index = rel // geometry.columns_per_byte
    offset = view_offset + cell_y * geometry.row_width + byte_index
    if offset >= buffer_length:
        return None
    return offset


class CursorGrid:
    """2-D cursor over the character grid, relative to the viewport.

    The cursor never stores a byte offset; `offset()` derives it from the cell
    and the current viewport each time it is asked.
    """

    def __init__(self, geometry: GridGeometry | None = None) -> None:
        self.geometry = geometry or DEFAULT_GEOMETRY
        self.cell_x = 0
        self.cell_y = 0

    @property
    def cell(self) -> tuple[int, int]:
        return (self.cell_x, self.cell_y)

    def reset(self) -> None:
        self.cell_x = 0
        self.cell_y = 0

    def offset(self, view_offset: int, buffer_length: int) -> int | None:
        return offset_for_cell(self.geometry, self.cell_x, self.cell_y, view_offset, buffer_length)

    # ---- Movement ----
    def move_cursor(self, dx: int, dy: int) -> None:
        """Shift by (dx, dy) then clamp each axis to the grid; no wrap-around."""
        g = self.geometry
        self.cell_x = max(0, min(self.cell_x + dx, g.max_cell_x))
        self.cell_y = max(0, min(self.cell_y + dy, g.max_cell_y))
        logger.debug("cursor moved by (%d, %d) to %s", dx, dy, self.cell)

    def move_left(self) -> None:
        self._step_byte(-1)

    def move_right(self) -> None:
        self._step_byte(1)

    def _step_byte(self, direction: int) -> None:
        # Horizontal steps are whole bytes and land on the first hex digit.
        g = self.geometry
        if self.cell_x < g.address_column_width:
            if direction > 0:
                self.move_cursor(g.address_column_width - self.cell_x, 0)
            return
        column = min((self.cell_x - g.address_column_width) // g.columns_per_byte, g.row_width - 1)
        target = max(0, min(column + direction, g.row_width - 1))
        x = g.address_column_width + target * g.columns_per_byte
        self.move_cursor(x - self.cell_x, 0)

    def move_up(self) -> None:
        self.move_cursor(0, -1)

    def move_down(self) -> None:
        self.move_cursor(0, 1)

    # ---- Inverse mapping ----
    def cell_for_byte_within_row(self, index: int, display_row: int) -> tuple[int, int]:
        """Cell of the first hex digit of row-relative byte `index` on `display_row`."""
        g = self.geometry
        return (g.address_column_width + index * g.columns_per_byte, display_row)

    def is_cursor_on(self, index: int, display_row: int) -> bool:
        return self.cell == self.cell_for_byte_within_row(index, display_row)

    def cell_for_offset(self, offset: int, view_offset: int) -> tuple[int, int] | None:
        """Cell showing `offset` for a viewport at `view_offset`; None if off-screen."""
        g = self.geometry
        rel = offset - view_offset
        if rel < 0 or rel >= g.page_bytes:
            return None
        row, index = divmod(rel, g.row_width)
        return self.cell_for_byte_within_row(index, row)
