"""Asynchronous TCP server that answers framed string packets."""

from __future__ import annotations

import argparse
import asyncio

from toolbench.hexutil import bytes_to_hex
from toolbench.packet import PACKET_HEADER_SIZE, PacketType, make_packet

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8888
REPLY_MESSAGE = "asio server hello"


def _describe_peer(writer: asyncio.StreamWriter) -> str:
    peer = writer.get_extra_info("peername")
    if isinstance(peer, tuple) and len(peer) >= 2:
        return f"{peer[0]} : {peer[1]}"
    return str(peer)


async def handle_connection(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
    """Serve one connection until the peer closes it or an error occurs.

    A string packet is answered with a string packet; byte packets and
    packets of unknown type are logged and not answered.
    """
    peer = _describe_peer(writer)
    print(f"Accept new connection from {peer}")
    try:
        while True:
            try:
                header = await reader.readexactly(PACKET_HEADER_SIZE)
                size = int.from_bytes(header, "big")
                body = await reader.readexactly(size)
            except (asyncio.IncompleteReadError, ConnectionError) as exc:
                print(f"Receive data error: {exc}")
                break
            print(f"Receive data size: {size + PACKET_HEADER_SIZE}")
            if not body:
                print("Receive data error: empty packet")
                break

            packet_type = body[0]
            if packet_type == PacketType.STRING_DATA:
                message = body[1:].decode("utf-8", errors="replace")
                print(f"Receive string data: {message}")
                reply = make_packet(PacketType.STRING_DATA, REPLY_MESSAGE)
                try:
                    writer.write(reply)
                    await writer.drain()
                except ConnectionError as exc:
                    print(f"Send data error: {exc}")
                    break
                print(f"Send data size: {len(reply)}")
            elif packet_type == PacketType.BYTES_DATA:
                print(f"Receive bytes data: {bytes_to_hex(body)}")
            else:
                print(f"Receive unknown data type: {packet_type}")
    finally:
        print(f"Close connection from {peer}")
        writer.close()
        try:
            await writer.wait_closed()
        except ConnectionError:
            pass


async def serve(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> asyncio.base_events.Server:
    """Start listening and return the running server."""
    return await asyncio.start_server(handle_connection, host, port)


async def _run(host: str, port: int) -> None:
    server = await serve(host, port)
    async with server:
        await server.serve_forever()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve framed packets over TCP.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        asyncio.run(_run(args.host, args.port))
    except KeyboardInterrupt:
        pass
    except OSError as exc:
        print(f"Accept error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())