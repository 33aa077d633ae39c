"""Codepoint conversions between decimal, hex, UTF-8 and UTF-16 forms."""

from __future__ import annotations

import re

from ucfinder.core.exceptions import ParseError


MAX_CODEPOINT = 0x10FFFF
UNKNOWN = "unknown"
REPLACEMENT_CHARACTER = "\ufffd"

_HEX_PATTERN = re.compile(r"[0-9A-Fa-f]+")


def decimal_to_hex(value: int, min_width: int = 4) -> str:
    """Render ``value`` as uppercase hex, zero-padded to ``min_width`` digits."""
    return f"{value:0{min_width}X}"


def hex_to_decimal(text: str) -> int:
    """Parse bare hex digits into an integer."""
    if not isinstance(text, str) or _HEX_PATTERN.fullmatch(text) is None:
        raise ParseError(f"not a hexadecimal number: {text!r}")
    return int(text, 16)


def surrogate_pair(codepoint: int) -> tuple[int, int]:
    """Split a supplementary-plane codepoint into UTF-16 high/low surrogates."""
    if codepoint < 0x10000 or codepoint > MAX_CODEPOINT:
        raise ValueError(f"U+{codepoint:04X} has no surrogate pair")
    offset = codepoint - 0x10000
    high = (offset // 0x400) + 0xD800
    low = (offset % 0x400) + 0xDC00
    return high, low


def codepoint_to_text(codepoint: int) -> str:
    """Return the single character for ``codepoint``."""
    return chr(codepoint)


def is_surrogate(codepoint: int) -> bool:
    return 0xD800 <= codepoint <= 0xDFFF


def printable_text(codepoint: int) -> str:
    """Like :func:`codepoint_to_text`, with U+FFFD standing in for lone surrogates."""
    if is_surrogate(codepoint):
        return REPLACEMENT_CHARACTER
    return codepoint_to_text(codepoint)


def text_to_codepoint(text: str) -> int:
    """Return the codepoint of the first character of ``text``.

    A leading UTF-16 surrogate pair (as produced by ``surrogatepass`` decoding
    or explicit ``uD83DuDE00`` deep-link input) is combined into one codepoint.
    """
    if not text:
        raise ValueError("cannot read a codepoint from empty text")
    high = ord(text[0])
    if (high & 0xF800) != 0xD800 or len(text) < 2:
        return high
    low = ord(text[1])
    if not 0xDC00 <= low <= 0xDFFF or high > 0xDBFF:
        return high
    return ((high - 0xD800) * 0x400) + (low - 0xDC00) + 0x10000


def codepoint_to_utf8_hex(codepoint: int) -> str:
    """Return the UTF-8 encoding of ``codepoint`` as space-separated octets."""
    if codepoint < 0x80:
        octets = [codepoint]
    elif codepoint < 0x800:
        octets = [
            0xC0 | (codepoint >> 6),
            0x80 | (codepoint & 0x3F),
        ]
    elif codepoint < 0x10000:
        octets = [
            0xE0 | (codepoint >> 12),
            0x80 | ((codepoint >> 6) & 0x3F),
            0x80 | (codepoint & 0x3F),
        ]
    elif codepoint <= MAX_CODEPOINT:
        octets = [
            0xF0 | (codepoint >> 18),
            0x80 | ((codepoint >> 12) & 0x3F),
            0x80 | ((codepoint >> 6) & 0x3F),
            0x80 | (codepoint & 0x3F),
        ]
    else:
        return UNKNOWN
    return " ".join(decimal_to_hex(octet, 2) for octet in octets)


def codepoint_to_utf16_hex(codepoint: int) -> str:
    """Return the UTF-16 code unit(s) of ``codepoint`` as 4-digit hex."""
    if codepoint < 0x10000:
        return decimal_to_hex(codepoint, 4)
    if codepoint <= MAX_CODEPOINT:
        return " ".join(decimal_to_hex(unit, 4) for unit in surrogate_pair(codepoint))
    return UNKNOWN


__all__ = [
    "MAX_CODEPOINT",
    "REPLACEMENT_CHARACTER",
    "UNKNOWN",
    "codepoint_to_text",
    "codepoint_to_utf16_hex",
    "codepoint_to_utf8_hex",
    "decimal_to_hex",
    "hex_to_decimal",
    "is_surrogate",
    "printable_text",
    "surrogate_pair",
    "text_to_codepoint",
]
