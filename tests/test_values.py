from __future__ import annotations

import pytest

from romhex.core.values import InvalidHexInput, ascii_char, format_address, parse_hex_byte


@pytest.mark.parametrize(
    "text,expected",
    [("FF", 0xFF), ("1f", 0x1F), ("0", 0), ("a", 0x0A), (" 7E ", 0x7E), ("0x20", 0x20), ("0XaB", 0xAB)],
)
def test_parse_hex_byte_accepts(text: str, expected: int) -> None:
    assert parse_hex_byte(text) == expected


@pytest.mark.parametrize("text", ["", "0x", "100", "G1", "-1", "+1", "1 2", "ff ff", "0x100"])
def test_parse_hex_byte_rejects(text: str) -> None:
    with pytest.raises(InvalidHexInput):
        parse_hex_byte(text)


def test_invalid_hex_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_hex_byte("xyz")


def test_format_address() -> None:
    assert format_address(0x13) == "0x00000013"


def test_ascii_char() -> None:
    assert ascii_char(0x41) == "A"
    assert ascii_char(0x1F) == "."
    assert ascii_char(0x7F) == "."
    assert ascii_char(0x20) == " "
