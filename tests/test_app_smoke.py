from __future__ import annotations

from pathlib import Path

import pytest
from rich.style import Style

textual = pytest.importorskip("textual")
from romhex.app import RomHexApp  # noqa: E402
from romhex.core.io import MemoryStorage  # noqa: E402
from romhex.core.session import EditByte, MoveByte, MoveCursor, OpenFile  # noqa: E402
from romhex.ui.palette import PALETTE  # noqa: E402
from romhex.widgets.hex_view import HexView  # noqa: E402


def test_app_constructs(tmp_path: Path) -> None:
    p = tmp_path / "tiny.bin"
    p.write_bytes(bytes(range(64)))
    app = RomHexApp(str(p))
    # Do not run the app; just ensure construction doesn't crash
    assert app is not None
    assert app.session.buffer.is_empty


def test_compose_builds_hex_view() -> None:
    app = RomHexApp(None, storage=MemoryStorage())
    list(app.compose())
    assert isinstance(app.hex_view, HexView)
    assert app.hex_view.session is app.session


def test_hex_view_renders_grid() -> None:
    app = RomHexApp(None, storage=MemoryStorage({"rom.bin": b"ROM!" + bytes(range(16))}))
    list(app.compose())
    app.session.dispatch(OpenFile("rom.bin"))
    app.session.dispatch(MoveCursor(10, 1))
    assert app.hex_view is not None
    text = app.hex_view.render()
    lines = text.plain.split("\n")
    assert lines[0].startswith("Offset")
    assert lines[1].startswith("00000000  52 4F 4D 21 00 01")
    assert lines[1].endswith("ROM!............")
    assert lines[2].startswith("00000010  0C 0D 0E 0F")
    assert len(lines) == 3
    # The cursor byte (offset 16) carries the highlight style
    spans = [s for s in text.spans if "on " in str(s.style)]
    assert spans


def test_hex_view_empty_buffer_message() -> None:
    app = RomHexApp(None, storage=MemoryStorage())
    list(app.compose())
    assert app.hex_view is not None
    assert "Press o to open a file" in app.hex_view.render().plain


def test_status_bar_and_modified_file_line_use_palette() -> None:
    from textual.color import Color

    app = RomHexApp(None, storage=MemoryStorage({"rom.bin": bytes(20)}))
    assert app.status.styles.background == Color.parse(PALETTE.status_bg)
    assert app.status.styles.color == Color.parse(PALETTE.status_fg)
    app.session.dispatch(OpenFile("rom.bin"))
    assert app.file_text().style == Style()
    app.session.dispatch(MoveByte(1))
    app.session.dispatch(EditByte("AA"))
    text = app.file_text()
    assert text.plain == "File: rom.bin (20 bytes, modified)"
    assert text.style == Style(color=PALETTE.modified_fg)
