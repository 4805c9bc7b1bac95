from __future__ import annotations

import logging
import os

from rich.style import Style
from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Footer, Header, Input, Label, Static

from romhex.core.config import EditorConfig
from romhex.core.io import Storage
from romhex.core.render import file_line
from romhex.core.session import (
    Command,
    EditByte,
    EditorSession,
    OpenFile,
    Quit,
    SaveFile,
)
from romhex.ui.palette import PALETTE
from romhex.widgets.hex_view import HexView

logger = logging.getLogger(__name__)


class RomHexApp(App):
    """Textual application shell for romhex."""

    CSS_PATH = "ui/theme.tcss"

    BINDINGS = [
        ("q", "request_quit", "Quit"),
        ("?", "open_help", "Help"),
        ("o", "open_file", "Open"),
        ("s", "save", "Save"),
        ("S", "save_as", "Save As"),
        ("enter", "edit_byte", "Edit"),
    ]

    def __init__(
        self,
        path: str | None = None,
        *,
        config: EditorConfig | None = None,
        storage: Storage | None = None,
    ) -> None:
        super().__init__()
        self._path = path
        self.session = EditorSession(config, storage)
        self.hex_view: HexView | None = None
        self.file_label = Static(id="file-line")
        self.status = Static(id="status")
        self.status.styles.background = PALETTE.status_bg
        self.status.styles.color = PALETTE.status_fg
        self.title = "romhex"

    def compose(self) -> ComposeResult:  # noqa: D401 - Textual API
        self.hex_view = HexView(self.session)
        yield Header(show_clock=False, id="header")
        yield self.file_label
        yield self.hex_view
        yield self.status
        yield Footer(id="footer")

    def on_mount(self) -> None:
        # A path on the command line behaves like an immediate Open
        if self._path:
            self.send(OpenFile(self._path))
        self.update_status()
        if self.hex_view is not None:
            self.set_focus(self.hex_view)

    # ---- Dispatch ----
    def send(self, command: Command) -> bool:
        keep_running = self.session.dispatch(command)
        if self.hex_view is not None:
            self.hex_view.refresh()
        self.update_status()
        return keep_running

    # ---- Actions ----
    def action_open_file(self) -> None:
        self.push_screen(PromptScreen("Open file:", "path/to/file.bin"), self._open_submit)

    def action_save(self) -> None:
        if self.session.buffer.source_path is None:
            self.action_save_as()
            return
        self.send(SaveFile())

    def action_save_as(self) -> None:
        self.push_screen(PromptScreen("Save to path:", "path/to/file.bin"), self._save_submit)

    def action_edit_byte(self) -> None:
        prompt = self.session.edit_prompt()
        if prompt is None:
            self.session.message = "Cursor is not on a byte"
            self.update_status()
            return
        self.push_screen(PromptScreen(prompt, "1F"), self._edit_submit)

    def action_request_quit(self) -> None:
        if not self.send(Quit()):
            logger.info("exiting")
            self.exit()

    def action_open_help(self) -> None:
        self.push_screen(HelpScreen())

    # ---- Callbacks ----
    def _open_submit(self, value: str | None) -> None:
        if value is None:
            return
        self.send(OpenFile(value))

    def _save_submit(self, value: str | None) -> None:
        if value is None:
            return
        self.send(SaveFile(value))

    def _edit_submit(self, value: str | None) -> None:
        if value is None:
            return
        self.send(EditByte(value))

    # ---- Status ----
    def update_status(self) -> None:
        buffer = self.session.buffer
        name = os.path.basename(buffer.source_path) if buffer.source_path else "romhex"
        self.title = f"romhex - {name}{' *' if buffer.modified else ''}"
        self.file_label.update(self.file_text())
        self.status.update(Text(self.session.status_line()))

    def file_text(self) -> Text:
        buffer = self.session.buffer
        style = Style(color=PALETTE.modified_fg) if buffer.modified else Style()
        return Text(file_line(buffer), style=style)


# ---- Simple modals ----


class PromptScreen(ModalScreen[str | None]):
    """Collects one line of text; Escape abandons with None."""

    def __init__(self, label: str, placeholder: str = "") -> None:
        super().__init__()
        self._label = label
        self._placeholder = placeholder

    def compose(self) -> ComposeResult:  # type: ignore[override]
        with Vertical(id="prompt-box"):
            yield Label(self._label)
            self._input = Input(placeholder=self._placeholder)
            yield self._input

    def on_mount(self) -> None:  # type: ignore[override]
        self.set_focus(self._input)

    def on_input_submitted(self, event: Input.Submitted) -> None:  # type: ignore[override]
        self.dismiss(event.value)

    def on_key(self, event) -> None:  # type: ignore[override]
        if event.key == "escape":
            self.dismiss(None)


class HelpScreen(ModalScreen[None]):
    def compose(self) -> ComposeResult:  # type: ignore[override]
        text = (
            "Navigation: arrows or h/j/k/l move the cursor, PgUp/PgDn scroll one row\n"
            "Edit: Enter on a byte, type a hex value (e.g. 1F)\n"
            "Files: o open, s save, S save as\n"
            "Quit: q (asks again when there are unsaved changes)"
        )
        with Vertical(id="help-box"):
            yield Static(text)

    def on_key(self, event) -> None:  # type: ignore[override]
        if event.key in {"escape", "enter", "q", "question_mark"}:
            self.dismiss(None)
