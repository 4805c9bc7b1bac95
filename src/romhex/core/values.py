from __future__ import annotations

HEX_DIGITS = "0123456789abcdefABCDEF"


class InvalidHexInput(ValueError):
    """Raised when typed text is not a one- or two-digit hexadecimal byte."""


def parse_hex_byte(text: str) -> int:
    """Parse a byte typed as hex, e.g. "1F", "f" or "0xA0".

    Surrounding whitespace is ignored. Anything longer than two digits, or with
    non-hex characters, raises `InvalidHexInput`.
    """
    s = text.strip()
    if s[:2] in ("0x", "0X"):
        s = s[2:]
    if not 1 <= len(s) <= 2 or not all(c in HEX_DIGITS for c in s):
        raise InvalidHexInput(f"not a hex byte: {text!r}")
    return int(s, 16)


def format_address(offset: int) -> str:
    return f"0x{offset:08X}"


def ascii_char(value: int) -> str:
    return chr(value) if 32 <= value <= 126 else "."
