# minnow

A small networking toolkit built around a bounded, in-memory byte stream.

## What is inside

- `minnow.byte_stream.ByteStream` is a byte pipe with a fixed capacity.
  A writer calls `push()` and `close()`. A reader calls `peek()`, `pop()` and
  `read()`. Bytes that do not fit in the available capacity are dropped, and
  pushes after `close()` are ignored. The counters `bytes_pushed()`,
  `bytes_popped()`, `bytes_buffered()` and `available_capacity()` track the
  stream's state. `is_closed()` reports whether the writer closed the stream,
  and `is_finished()` reports whether it is closed and fully drained.
  `set_error()` marks the stream as failed and `has_error()` reports it.
  A negative capacity or length raises `ValueError`.
- `minnow.stream_copy.bidirectional_stream_copy(sock, peer_name, source=None, sink=None)`
  copies data in both directions between a connected socket and a local
  source and sink. These default to standard input and standard output. Each
  direction is buffered in a `ByteStream`. When the local input ends, the
  socket's sending side is shut down. When the peer finishes sending, the sink
  is closed. Progress and errors are reported on stderr as `DEBUG:` lines.
- `minnow.webget` provides `build_request(host, path)`, which returns the
  HTTP/1.1 GET request as bytes, and `get_url(host, path, out)`, which sends
  that request to port 80 of `host` and writes the raw response to `out`.
- `minnow.tcp_native` provides `parse_args(argv)`, which returns an `Options`
  value or raises `UsageError`. It also provides
  `establish(host, port, listen)`, which returns a connected IPv4 TCP socket.
  In listen mode it accepts exactly one connection. Otherwise it connects to
  the given address.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command-line tools

Fetch a page and print the full HTTP response, headers included:

```
webget HOST PATH
webget example.com /index.html
```

Connect to a TCP server, then copy stdin to the connection and the connection
to stdout:

```
tcp-native HOST PORT
```

Listen on an address, accept exactly one connection, then copy in the same
way:

```
tcp-native -l HOST PORT
```

Both tools print a usage message when their arguments are wrong. Errors go to
stderr, and either case ends with exit status 1. `tcp-native` also writes
`DEBUG:` progress lines to stderr.

## Using the byte stream

```python
from minnow.byte_stream import ByteStream

stream = ByteStream(15)
stream.push(b"hello")
stream.close()

assert stream.peek() == b"hello"
stream.pop(4)
assert stream.read(1) == b"o"
assert stream.is_finished()
```

## What it does not do

- `webget` speaks plain HTTP on port 80 only. It has no HTTPS, no redirects
  and no response parsing; the bytes the server sends are written as they are.
- `tcp-native` resolves and uses IPv4 addresses only.
- There is no TCP implementation of its own and no raw IP sending. The tools
  use the operating system's sockets.
- The stream copier relies on non-blocking file descriptors and `selectors`,
  so it is meant for POSIX systems.