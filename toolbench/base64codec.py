"""Standard Base64 encoding and strict decoding."""

from __future__ import annotations

import base64
import binascii


class Base64Error(ValueError):
    """Raised when text is not valid padded Base64."""


def encode_base64(data: bytes | bytearray | memoryview) -> str:
    """Encode bytes as padded standard Base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def decode_base64(text: str) -> bytes:
    """Decode padded standard Base64 text.

    The text must be a whole number of four-character groups drawn from the
    standard alphabet; trailing ``=`` padding is dropped from the result.
    """
    if len(text) % 4:
        raise Base64Error(f"Base64 text length {len(text)} is not a multiple of 4")
    try:
        raw = text.encode("ascii")
    except UnicodeEncodeError:
        raise Base64Error("Base64 text holds non-ASCII characters") from None
    try:
        return base64.b64decode(raw, validate=True)
    except binascii.Error as exc:
        raise Base64Error(f"invalid Base64 text: {exc}") from None