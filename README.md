# toolbench

Small building blocks for systems-style Python code, plus a few commands
built on them.

## Modules

- **`toolbench.hexutil`**: `bytes_to_hex(data, sep="")` renders bytes as
  upper-case hex; a one-character `sep` follows every byte, the last one
  included. `hex_to_bytes(text, sep="")` reads such text back: each byte takes
  two digits plus the separator, a trailing partial group is ignored and
  characters that are not hex digits count as 0. A separator longer than one
  character raises `ValueError`.
- **`toolbench.base64codec`**: `encode_base64(data)` gives padded standard
  Base64 text. `decode_base64(text)` accepts only whole four-character groups
  from the standard alphabet and raises `Base64Error` (a `ValueError`)
  otherwise.
- **`toolbench.timer`**: `Timer`, a context manager that prints
  `Timer took <n> ms` when its block ends (to `stream`, or standard output).
  Afterwards `duration` holds seconds and `milliseconds` milliseconds.
- **`toolbench.packet`**: the framing used by the server and client. A frame
  is a two-byte big-endian size, a one-byte `PacketType` (`STRING_DATA` = 0,
  `BYTES_DATA` = 1) and the payload; the size counts the type byte and the
  payload. `make_packet(packet_type, *chunks)` joins strings (as UTF-8),
  bytes or iterables of ints into a frame and raises `ValueError` above 65535
  bytes. `split_payload(body)` returns `(PacketType, data)` from a body
  without its size header, raising `ValueError` for an empty body or an
  unknown type.
- **`toolbench.devhandles`**: `DevHandle(index, ptr=None)`, ordered by index,
  and `DevHandleVector`, which keeps handles sorted and offers `insert`,
  `search` and `delete` by bisection (`search` and `delete` raise `KeyError`
  for a missing index), plus `len()` and iteration.
  `run_benchmarks(indexes)` times insert, search and delete on a sorted
  vector, a plain list, a dict and a sorted key map, and returns the total
  seconds for each.
- **`toolbench.rwlock`**: `ReadWriteLock`, allowing many readers or one
  writer. It has `read_lock` / `read_unlock`, `write_lock` / `write_unlock`,
  the non-blocking `try_read_lock` / `try_write_lock`, the context managers
  `reading()` and `writing()`, and the `readers` and `write_locked`
  properties. Unlocking what is not held raises `RuntimeError`.
- **`toolbench.sync`**: `Semaphore(initial_count=0)`, a counting semaphore
  whose `release(count=1)` can add several permits at once, usable as a
  context manager, with a `value` property; and `BoundedQueue(max_size)`,
  whose `produce` blocks while it is full and `consume` blocks while it is
  empty.
- **`toolbench.server`**: `handle_connection(reader, writer)` serves one
  asyncio stream connection: a string packet is answered with the string
  packet `asio server hello`; byte packets and unknown types are logged and
  not answered. `serve(host, port)` starts listening and returns the asyncio
  server.
- **`toolbench.client`**: `send_message(host, port, message)` sends a string
  packet and returns the reply text; `send_bytes(host, port, data)` sends a
  bytes packet and returns how many bytes were written.
- **`toolbench.sm9data`**: `standard_vectors()` returns the SM9 standard
  test vectors as a dict of label to bytes.
- **`toolbench.kms`**: `KmsClient(base_url="http://127.0.0.1:8080",
  session=None, timeout=None)`, an HTTP/JSON client for a key-management and
  cryptography service. It works on `Key(alias="", version=0)` objects and
  covers the handshake calls (`init_req_a`, `auth_req_a`), key management
  (`import_symm_key`, `enable_key`, `disable_key`, `delete_key`) and crypto
  calls (`get_random`, `hash`, `hmac`, `sm4_encrypt`, `sm4_decrypt`, `sign`,
  `verify`, `asym_encrypt`, `asym_decrypt`). Binary values travel as Base64.
  A transport failure, a non-200 status or a reply code other than 20000
  raises `KmsError`; `verify` instead returns `True` or `False`.

## Installation

```
pip install .
```

With the test tools:

```
pip install ".[test]"
```

## Library use

```python
from toolbench.base64codec import encode_base64, decode_base64
from toolbench.hexutil import bytes_to_hex
from toolbench.rwlock import ReadWriteLock
from toolbench.timer import Timer

assert encode_base64(b"hello") == "aGVsbG8="
assert decode_base64("aGVsbG8=") == b"hello"
assert bytes_to_hex(b"\x01\xab", ":") == "01:AB:"

lock = ReadWriteLock()
with lock.reading():
    ...  # shared access
with lock.writing():
    ...  # exclusive access

with Timer():
    sum(range(1_000_000))
```

## Commands

Start the packet server (default `--host 0.0.0.0 --port 8888`):

```
toolbench-server
```

From another terminal, send a greeting and print the reply (default
`--host 127.0.0.1 --port 8888 --message "Hello, asio"`; `--hex` sends a
bytes packet instead):

```
toolbench-client
```

Print the SM9 standard test vectors as hex:

```
toolbench-sm9data
```

Run the container lookup benchmarks over `--count` shuffled handles
(default 10000):

```
toolbench-bench
```

## What it does not do

- `toolbench.sm9data` only holds the SM9 test vectors; the package has no
  SM9, SM4 or SM2 implementation. All cryptography in `toolbench.kms` is done
  by the remote service, and the package ships no such service.
- The packet client is blocking and sends a single packet per connection.

## Running the tests

```
pip install ".[test]"
pytest
```