"""Framing for the length-prefixed packets exchanged by client and server.

A frame is a two-byte big-endian size, then a one-byte packet type, then the
payload. The size counts the type byte and the payload.
"""

from __future__ import annotations

import enum
from typing import Iterable, Union

PACKET_HEADER_SIZE = 2
PACKET_TYPE_SIZE = 1
MAX_PACKET_SIZE = 0xFFFF

Chunk = Union[str, bytes, bytearray, memoryview, Iterable[int]]


class PacketType(enum.IntEnum):
    STRING_DATA = 0
    BYTES_DATA = 1


def _as_bytes(chunk: Chunk) -> bytes:
    if isinstance(chunk, str):
        return chunk.encode("utf-8")
    return bytes(chunk)


def make_packet(packet_type: PacketType, *args: Chunk) -> bytes:
    """Build a full frame: size header, type byte, then each chunk in order."""
    body = bytes([int(PacketType(packet_type))]) + b"".join(_as_bytes(arg) for arg in args)
    if len(body) > MAX_PACKET_SIZE:
        raise ValueError(f"packet of {len(body)} bytes exceeds {MAX_PACKET_SIZE}")
    return len(body).to_bytes(PACKET_HEADER_SIZE, "big") + body


def split_payload(payload: bytes) -> tuple[PacketType, bytes]:
    """Split a frame body (without the size header) into its type and data."""
    if len(payload) < PACKET_TYPE_SIZE:
        raise ValueError("packet has no type byte")
    try:
        packet_type = PacketType(payload[0])
    except ValueError:
        raise ValueError(f"unknown packet type: {payload[0]}") from None
    return packet_type, bytes(payload[PACKET_TYPE_SIZE:])