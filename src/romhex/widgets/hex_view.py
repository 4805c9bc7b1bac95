from __future__ import annotations

from contextlib import suppress

from rich.style import Style
from rich.text import Text
from textual.widget import Widget

from romhex.core.buffer import ScrollDirection
from romhex.core.render import RenderRow, address_label, header_line
from romhex.core.session import Command, EditorSession, MoveByte, MoveCursor, ScrollPage
from romhex.ui.palette import PALETTE


class HexView(Widget):
    """Address/hex/ASCII grid for an EditorSession.

    - Shows exactly the session's viewport; scrolling is one row per PgUp/PgDn.
    - Text columns line up with grid cells so the cursor cell is where it is drawn.
    """

    can_focus = True

    BINDINGS = [
        ("left", "cursor_left", "Left"),
        ("right", "cursor_right", "Right"),
        ("h", "cursor_left", "Left"),
        ("l", "cursor_right", "Right"),
        ("up", "cursor_up", "Up"),
        ("down", "cursor_down", "Down"),
        ("k", "cursor_up", "Up"),
        ("j", "cursor_down", "Down"),
        ("pageup", "page_up", "PgUp"),
        ("pagedown", "page_down", "PgDn"),
    ]

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session

    # ---- Rendering ----
    def render(self) -> Text:
        session = self.session
        g = session.geometry
        text = Text(header_line(g), style=Style(color=PALETTE.header_fg, bold=True))
        if session.buffer.is_empty:
            text.append("\n")
            text.append("No data to display. Press o to open a file.", style=Style(dim=True))
            return text
        for row in session.frame().rows:
            text.append("\n")
            text.append(self._render_row(row))
        return text

    def _render_row(self, row: RenderRow) -> Text:
        g = self.session.geometry
        line = Text(address_label(row.address, g), style=Style(color=PALETTE.address_fg))
        sep = " " * (g.columns_per_byte - 2)
        cursor_style = Style(bgcolor=PALETTE.hex_cursor_bg, color=PALETTE.hex_selected_fg)
        for idx, cell in enumerate(row.hex_cells):
            if cell is None:
                # Past end of buffer: blank padding
                line.append("  " + sep, style=Style(color=PALETTE.padding_fg))
                continue
            style = cursor_style if idx == row.cursor_index else Style(color=PALETTE.hex_fg)
            line.append(cell, style=style)
            line.append(sep)
        for idx, ch in enumerate(row.ascii_text):
            style = cursor_style if idx == row.cursor_index else Style(color=PALETTE.ascii_fg)
            line.append(ch, style=style)
        return line

    # ---- Commands ----
    def send(self, command: Command) -> None:
        self.session.dispatch(command)
        self.refresh()
        with suppress(Exception):
            if hasattr(self.app, "update_status"):
                self.app.update_status()  # type: ignore[attr-defined]

    # ---- Actions (bound in BINDINGS) ----
    def action_cursor_left(self) -> None:
        self.send(MoveByte(-1))

    def action_cursor_right(self) -> None:
        self.send(MoveByte(1))

    def action_cursor_up(self) -> None:
        self.send(MoveCursor(0, -1))

    def action_cursor_down(self) -> None:
        self.send(MoveCursor(0, 1))

    def action_page_up(self) -> None:
        self.send(ScrollPage(ScrollDirection.BACKWARD))

    def action_page_down(self) -> None:
        self.send(ScrollPage(ScrollDirection.FORWARD))
