from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Palette:
    header_fg: str
    address_fg: str
    hex_fg: str
    ascii_fg: str
    padding_fg: str
    hex_cursor_bg: str
    hex_selected_fg: str
    status_fg: str
    status_bg: str
    modified_fg: str


DEFAULT = Palette(
    header_fg="#5ea1ff",
    address_fg="#8892a0",
    hex_fg="#d8dee9",
    ascii_fg="#d7ba7d",
    padding_fg="#6b7280",
    hex_cursor_bg="#b36b00",
    hex_selected_fg="#ffffff",
    status_fg="#d8dee9",
    status_bg="#1f2430",
    modified_fg="#ffb86c",
)

PALETTE = DEFAULT
