from __future__ import annotations

import logging
from enum import Enum

from romhex.core.geometry import DEFAULT_GEOMETRY, GridGeometry
from romhex.core.io import Storage

logger = logging.getLogger(__name__)


class OutOfRange(ValueError):
    """Raised for a negative offset or a byte value outside 0..255."""


class NoSaveTarget(Exception):
    """Raised when saving a buffer that has neither a source path nor an explicit path."""


class ScrollDirection(Enum):
    BACKWARD = -1
    FORWARD = 1


class BufferView:
    """In-memory file contents plus the scroll position of the viewport.

    - `modified` is False only while `data` matches what was last loaded or saved.
    - `view_offset` is always a multiple of the row width and within
      `[0, max_view_offset]`.
    """

    def __init__(self, geometry: GridGeometry | None = None) -> None:
        self.geometry = geometry or DEFAULT_GEOMETRY
        self.data = bytearray()
        self.modified = False
        self.source_path: str | None = None
        self.view_offset = 0

    def __len__(self) -> int:
        return len(self.data)

    @property
    def is_empty(self) -> bool:
        return not self.data

    @property
    def max_view_offset(self) -> int:
        """Largest row-aligned top offset; the last row is then on screen.

        Equals `len - page_bytes` when the length is a whole number of rows and
        rounds up to the next row start otherwise. With a partial last row this
        is deliberately past `len - page_bytes` by less than one row (490 bytes
        on the default grid gives 16, not 10) so the offset stays row-aligned.
        """
        g = self.geometry
        total_rows = -(-len(self.data) // g.row_width)
        return max(0, total_rows - g.visible_rows) * g.row_width

    # ---- Content ----
    def load(self, data: bytes, path: str | None = None) -> None:
        self.data = bytearray(data)
        self.view_offset = 0
        self.modified = False
        if path is not None:
            self.source_path = path
        logger.info("loaded %d bytes from %s", len(self.data), path or "<memory>")

    def byte_at(self, offset: int) -> int | None:
        if offset < 0:
            raise OutOfRange("offset must be >= 0")
        if offset >= len(self.data):
            return None
        return self.data[offset]

    def row(self, offset: int) -> bytes:
        """Bytes of the display row starting at `offset`, truncated at end of buffer."""
        if offset < 0:
            raise OutOfRange("offset must be >= 0")
        return bytes(self.data[offset : offset + self.geometry.row_width])

    def edit_byte(self, offset: int, value: int) -> bool:
        """Set the byte at `offset`. Offsets outside the buffer are ignored.

        Returns True when the buffer was changed.
        """
        if not 0 <= value <= 0xFF:
            raise OutOfRange(f"byte value must be between 0 and 255, got {value}")
        if not 0 <= offset < len(self.data):
            logger.warning("ignoring edit at 0x%08X beyond end of buffer", offset)
            return False
        self.data[offset] = value
        self.modified = True
        logger.info("byte 0x%08X set to 0x%02X", offset, value)
        return True

    # ---- Viewport ----
    def scroll(self, direction: ScrollDirection) -> None:
        step = self.geometry.row_width
        if direction is ScrollDirection.BACKWARD:
            self.view_offset = max(0, self.view_offset - step)
        else:
            self.view_offset = min(self.view_offset + step, self.max_view_offset)
        logger.debug("view offset now 0x%08X", self.view_offset)

    # ---- Persistence ----
    def save(self, storage: Storage, path: str | None = None) -> str:
        """Write the buffer through `storage` and return the path written.

        Storage errors propagate unchanged and leave `modified` untouched.
        """
        target = path or self.source_path
        if not target:
            raise NoSaveTarget("no file name to save to")
        storage.write(target, bytes(self.data))
        self.source_path = target
        self.modified = False
        logger.info("saved %d bytes to %s", len(self.data), target)
        return target
