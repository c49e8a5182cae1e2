"""Hex and Base64 codecs, packet framing with a TCP server and client, locks, queues, a timer and a key-management HTTP client."""

__version__ = "0.1.0"