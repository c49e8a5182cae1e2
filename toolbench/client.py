"""Blocking TCP client that sends one framed packet."""

from __future__ import annotations

import argparse
import socket

from toolbench.hexutil import bytes_to_hex, hex_to_bytes
from toolbench.packet import PACKET_HEADER_SIZE, PacketType, make_packet, split_payload

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8888
DEFAULT_MESSAGE = "Hello, asio"


def _recv_exactly(sock: socket.socket, size: int) -> bytes:
    chunks = bytearray()
    while len(chunks) < size:
        chunk = sock.recv(size - len(chunks))
        if not chunk:
            raise ConnectionError(
                f"connection closed after {len(chunks)} of {size} bytes"
            )
        chunks.extend(chunk)
    return bytes(chunks)


def _send_packet(sock: socket.socket, packet: bytes) -> int:
    print(f"Send data: {bytes_to_hex(packet)}")
    sock.sendall(packet)
    print(f"Send data size: {len(packet)}")
    return len(packet)


def send_message(host: str, port: int, message: str) -> str:
    """Send a string packet and return the text of the reply packet."""
    with socket.create_connection((host, port)) as sock:
        _send_packet(sock, make_packet(PacketType.STRING_DATA, message))
        header = _recv_exactly(sock, PACKET_HEADER_SIZE)
        print(f"Receive data size: {len(header)}")
        body = _recv_exactly(sock, int.from_bytes(header, "big"))
        print(f"Receive data size: {len(body)}")
    _, data = split_payload(body)
    text = data.decode("utf-8", errors="replace")
    print(f"Receive data: {text}")
    return text


def send_bytes(host: str, port: int, data: bytes) -> int:
    """Send a bytes packet and return how many bytes went on the wire."""
    with socket.create_connection((host, port)) as sock:
        return _send_packet(sock, make_packet(PacketType.BYTES_DATA, data))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Send one framed packet to the server.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--message", default=DEFAULT_MESSAGE, help="string to send")
    group.add_argument("--hex", help="send these hex-encoded bytes instead of a string")
    args = parser.parse_args(argv)
    try:
        if args.hex is not None:
            send_bytes(args.host, args.port, hex_to_bytes(args.hex))
        else:
            send_message(args.host, args.port, args.message)
    except OSError as exc:
        print(f"Send data error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())