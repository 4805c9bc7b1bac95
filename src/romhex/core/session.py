from __future__ import annotations

import logging
from dataclasses import dataclass

from romhex.core.buffer import BufferView, NoSaveTarget, ScrollDirection
from romhex.core.config import EditorConfig
from romhex.core.cursor import CursorGrid
from romhex.core.geometry import GridGeometry
from romhex.core.io import FileStorage, Storage
from romhex.core.render import Frame, build_rows, file_line
from romhex.core.values import InvalidHexInput, format_address, parse_hex_byte

logger = logging.getLogger(__name__)


# ---- Commands ----
@dataclass(frozen=True)
class MoveCursor:
    dx: int
    dy: int


@dataclass(frozen=True)
class MoveByte:
    """Step the cursor whole bytes left (-1) or right (+1) within a row."""

    delta: int


@dataclass(frozen=True)
class ScrollPage:
    direction: ScrollDirection


@dataclass(frozen=True)
class OpenFile:
    path: str


@dataclass(frozen=True)
class SaveFile:
    path: str | None = None


@dataclass(frozen=True)
class EditByte:
    text: str


@dataclass(frozen=True)
class Quit:
    pass


Command = MoveCursor | MoveByte | ScrollPage | OpenFile | SaveFile | EditByte | Quit


class EditorSession:
    """All editor state behind one object: buffer, cursor and status message.

    `dispatch` applies a single command. Storage and input errors are reported
    through `message` and never escape.
    """

    def __init__(self, config: EditorConfig | None = None, storage: Storage | None = None) -> None:
        self.config = config or EditorConfig()
        self.storage: Storage = storage or FileStorage()
        self.buffer = BufferView(self.config.geometry)
        self.cursor = CursorGrid(self.config.geometry)
        self.message = ""
        self._quit_pending = False

    @property
    def geometry(self) -> GridGeometry:
        return self.config.geometry

    def cursor_offset(self) -> int | None:
        return self.cursor.offset(self.buffer.view_offset, len(self.buffer))

    def dispatch(self, command: Command) -> bool:
        """Apply `command`; return False when the editor should exit."""
        if not isinstance(command, Quit):
            self._quit_pending = False
        if isinstance(command, (MoveCursor, MoveByte, ScrollPage)):
            self.message = ""
        if isinstance(command, MoveCursor):
            self.cursor.move_cursor(command.dx, command.dy)
        elif isinstance(command, MoveByte):
            step = self.cursor.move_right if command.delta > 0 else self.cursor.move_left
            for _ in range(abs(command.delta)):
                step()
        elif isinstance(command, ScrollPage):
            self.buffer.scroll(command.direction)
        elif isinstance(command, OpenFile):
            self.open_file(command.path)
        elif isinstance(command, SaveFile):
            self.save_file(command.path)
        elif isinstance(command, EditByte):
            self.edit_byte(command.text)
        elif isinstance(command, Quit):
            return not self.request_quit()
        else:
            raise TypeError(f"unknown command: {command!r}")
        return True

    # ---- Handlers ----
    def open_file(self, path: str) -> bool:
        path = path.strip()
        if not path:
            return False
        try:
            data = self.storage.read(path)
        except (OSError, ValueError) as e:
            logger.warning("open failed for %s: %s", path, e)
            self.message = f"Error opening file: {e}"
            return False
        old_length = len(self.buffer)
        self.buffer.load(data, path)
        if len(data) != old_length:
            self.cursor.reset()
        self.message = f"Opened {path}"
        return True

    def save_file(self, path: str | None = None) -> bool:
        if path is not None:
            path = path.strip()
            if not path:
                return False
        try:
            written = self.buffer.save(self.storage, path)
        except NoSaveTarget:
            self.message = "No save target"
            return False
        except (OSError, ValueError) as e:
            logger.warning("save failed for %s: %s", path or self.buffer.source_path, e)
            self.message = f"Error saving: {e}"
            return False
        self.message = f"Saved {written}"
        return True

    def edit_byte(self, text: str) -> bool:
        offset = self.cursor_offset()
        if offset is None:
            self.message = "Cursor is not on a byte"
            return False
        if not text.strip():
            return False
        try:
            value = parse_hex_byte(text)
        except InvalidHexInput:
            logger.warning("rejected edit value %r", text)
            self.message = "Invalid value. Use hexadecimal (e.g. 1F)"
            return False
        if not self.buffer.edit_byte(offset, value):
            return False
        self.message = f"Byte {format_address(offset)} changed to 0x{value:02X}"
        return True

    def request_quit(self) -> bool:
        """Return True when quitting is allowed now."""
        if self.config.confirm_quit and self.buffer.modified and not self._quit_pending:
            self._quit_pending = True
            self.message = "Unsaved changes. Quit again to discard them."
            return False
        return True

    # ---- Prompts & rendering ----
    def edit_prompt(self) -> str | None:
        """Prompt text for editing the byte under the cursor, or None if there is none."""
        offset = self.cursor_offset()
        if offset is None:
            return None
        current = self.buffer.data[offset]
        return f"Edit byte at {format_address(offset)} [current value: 0x{current:02X}]: 0x"

    def status_line(self) -> str:
        offset = self.cursor_offset()
        if offset is None:
            where = "cursor: --"
        else:
            where = f"cursor: {format_address(offset)} [{self.buffer.data[offset]:02X}]"
        top = f"top: {format_address(self.buffer.view_offset)}"
        extra = f"  {self.message}" if self.message else ""
        return f"{top} | {where}{extra}"

    def frame(self) -> Frame:
        return Frame(
            rows=build_rows(self.buffer, self.cursor),
            cursor_cell=self.cursor.cell,
            status_line=self.status_line(),
            file_line=file_line(self.buffer),
        )
