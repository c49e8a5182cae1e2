"""Conversion between raw bytes and upper-case hexadecimal text."""

from __future__ import annotations

_HEX_DIGITS = "0123456789ABCDEF"
_DIGIT_VALUES = {ch: value for value, ch in enumerate(_HEX_DIGITS)}
_DIGIT_VALUES.update({ch.lower(): value for ch, value in _DIGIT_VALUES.items()})


def _check_separator(sep: str) -> str:
    if len(sep) > 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return sep


def bytes_to_hex(data: bytes | bytearray | memoryview, sep: str = "") -> str:
    """Render bytes as upper-case hex digits.

    When ``sep`` is given it follows every byte, including the last one.
    """
    sep = _check_separator(sep)
    return "".join(
        f"{_HEX_DIGITS[byte >> 4]}{_HEX_DIGITS[byte & 0xF]}{sep}" for byte in bytes(data)
    )


def hex_to_bytes(text: str, sep: str = "") -> bytes:
    """Parse hex text produced by :func:`bytes_to_hex`.

    Each byte occupies two digits plus the optional separator; a trailing
    partial group is ignored and characters that are not hex digits count as 0.
    """
    sep = _check_separator(sep)
    stride = 2 + len(sep)
    count = len(text) // stride
    return bytes(
        (_DIGIT_VALUES.get(text[pos], 0) << 4) | _DIGIT_VALUES.get(text[pos + 1], 0)
        for pos in range(0, count * stride, stride)
    )