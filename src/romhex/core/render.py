from __future__ import annotations

from dataclasses import dataclass

from romhex.core.buffer import BufferView
from romhex.core.cursor import CursorGrid
from romhex.core.geometry import GridGeometry
from romhex.core.values import ascii_char


@dataclass(frozen=True)
class RenderRow:
    """One visible grid row.

    `hex_cells` always holds `row_width` entries; None marks padding past the
    end of the buffer. `cursor_index` is the row-relative index of the byte
    under the cursor, if it is on this row.
    """

    address: int
    hex_cells: tuple[str | None, ...]
    ascii_text: str
    cursor_index: int | None = None


@dataclass(frozen=True)
class Frame:
    rows: list[RenderRow]
    cursor_cell: tuple[int, int]
    status_line: str
    file_line: str


def build_rows(buffer: BufferView, cursor: CursorGrid) -> list[RenderRow]:
    """Rows currently inside the viewport, top to bottom."""
    g = buffer.geometry
    rows: list[RenderRow] = []
    for display_row in range(g.visible_rows):
        row_offset = buffer.view_offset + display_row * g.row_width
        if row_offset >= len(buffer):
            break
        chunk = buffer.row(row_offset)
        cells: list[str | None] = [f"{b:02X}" for b in chunk]
        cells += [None] * (g.row_width - len(chunk))
        cursor_index = None
        for idx in range(len(chunk)):
            if cursor.is_cursor_on(idx, display_row):
                cursor_index = idx
                break
        rows.append(
            RenderRow(
                address=row_offset,
                hex_cells=tuple(cells),
                ascii_text="".join(ascii_char(b) for b in chunk),
                cursor_index=cursor_index,
            )
        )
    return rows


def address_label(offset: int, geometry: GridGeometry) -> str:
    """Address gutter text, exactly `address_column_width` cells wide."""
    digits = max(1, geometry.address_column_width - 2)
    return f"{offset:0{digits}X}"[-digits:].ljust(geometry.address_column_width)


def hex_cell(cell: str | None, geometry: GridGeometry) -> str:
    """A byte's cells: two digits (or blanks) followed by the separator."""
    return (cell or "  ").ljust(geometry.columns_per_byte)


def render_line(row: RenderRow, geometry: GridGeometry) -> str:
    """Plain text of a row; character index equals grid cell x."""
    hex_part = "".join(hex_cell(c, geometry) for c in row.hex_cells)
    return address_label(row.address, geometry) + hex_part + row.ascii_text


def header_line(geometry: GridGeometry) -> str:
    """Column ruler aligned with `render_line` output."""
    ruler = "".join(
        hex_cell(f"{i % 256:02X}", geometry) for i in range(geometry.row_width)
    )
    return "Offset".ljust(geometry.address_column_width) + ruler + "ASCII"


def file_line(buffer: BufferView) -> str:
    if buffer.source_path is None and buffer.is_empty:
        return "No file open"
    name = buffer.source_path or "<unsaved>"
    flag = ", modified" if buffer.modified else ""
    return f"File: {name} ({len(buffer)} bytes{flag})"
