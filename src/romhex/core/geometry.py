from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GridGeometry:
    """Layout constants of the address/hex/ASCII grid.

    Every cell <-> offset conversion reads its numbers from here so the mapping
    and its inverse stay in step.
    """

    row_width: int = 16
    columns_per_byte: int = 3
    address_column_width: int = 10
    display_rows: int = 40
    header_rows: int = 10

    @property
    def visible_rows(self) -> int:
        return self.display_rows - self.header_rows

    @property
    def hex_region_end(self) -> int:
        """First cell past the hex block."""
        return self.address_column_width + self.row_width * self.columns_per_byte

    @property
    def ascii_column_start(self) -> int:
        return self.hex_region_end

    @property
    def max_cell_x(self) -> int:
        return self.hex_region_end - 1

    @property
    def max_cell_y(self) -> int:
        return self.visible_rows - 1

    @property
    def page_bytes(self) -> int:
        return self.visible_rows * self.row_width

    def validate(self) -> list[str]:
        """Return a list of problems; empty when the geometry is usable."""
        errors: list[str] = []
        for name in (
            "row_width",
            "columns_per_byte",
            "address_column_width",
            "display_rows",
            "header_rows",
        ):
            value = getattr(self, name)
            # bool is an int subclass; reject it explicitly
            if not isinstance(value, int) or isinstance(value, bool):
                errors.append(f"{name} must be an integer, got {type(value).__name__}")
            elif value < 0 or (value == 0 and name != "header_rows"):
                errors.append(f"{name} must be positive, got {value}")
        if errors:
            return errors
        if self.columns_per_byte < 3:
            errors.append("columns_per_byte must be at least 3 (two hex digits and a separator)")
        if self.header_rows >= self.display_rows:
            errors.append("header_rows must be smaller than display_rows")
        return errors


DEFAULT_GEOMETRY = GridGeometry()
