import socket
import threading

import pytest

from toolbench.client import main, send_bytes, send_message
from toolbench.packet import PacketType, make_packet


def _recv_exactly(conn, size):
    data = bytearray()
    while len(data) < size:
        chunk = conn.recv(size - len(data))
        if not chunk:
            break
        data.extend(chunk)
    return bytes(data)


@pytest.fixture
def fake_server():
    listener = socket.create_server(("127.0.0.1", 0))
    port = listener.getsockname()[1]
    received = []
    threads = []

    def start(reply=None):
        def run():
            conn, _ = listener.accept()
            with conn:
                header = _recv_exactly(conn, 2)
                received.append(_recv_exactly(conn, int.from_bytes(header, "big")))
                if reply is not None:
                    conn.sendall(reply)

        thread = threading.Thread(target=run, daemon=True)
        thread.start()
        threads.append(thread)
        return port, received

    yield start
    listener.close()
    for thread in threads:
        thread.join(2)


def _free_port():
    with socket.create_server(("127.0.0.1", 0)) as sock:
        return sock.getsockname()[1]


def test_send_message_returns_reply_text(fake_server):
    port, received = fake_server(make_packet(PacketType.STRING_DATA, "pong"))
    assert send_message("127.0.0.1", port, "Hello") == "pong"
    assert received == [b"\x00Hello"]


def test_send_bytes_sends_bytes_packet(fake_server):
    port, received = fake_server()
    payload = b"\x01\x02\x03\x04"
    sent = send_bytes("127.0.0.1", port, payload)
    assert sent == len(make_packet(PacketType.BYTES_DATA, payload))
    for _ in range(200):
        if received:
            break
        threading.Event().wait(0.01)
    assert received == [b"\x01" + payload]


def test_send_message_prints_hex_frame(fake_server, capsys):
    port, _ = fake_server(make_packet(PacketType.STRING_DATA, "ok"))
    send_message("127.0.0.1", port, "Hi")
    out = capsys.readouterr().out
    assert "Send data: 0003004869" in out
    assert "Receive data: ok" in out


def test_missing_reply_raises(fake_server):
    port, _ = fake_server()
    with pytest.raises(ConnectionError):
        send_message("127.0.0.1", port, "Hello")


def test_main_success(fake_server, capsys):
    port, received = fake_server(make_packet(PacketType.STRING_DATA, "pong"))
    assert main(["--port", str(port), "--message", "abc"]) == 0
    assert received == [b"\x00abc"]
    assert "Receive data: pong" in capsys.readouterr().out


def test_main_reports_connection_failure(capsys):
    assert main(["--port", str(_free_port())]) == 1
    assert "Send data error" in capsys.readouterr().out