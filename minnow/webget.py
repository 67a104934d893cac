"""Fetch a web page over plain HTTP/1.1 and copy the raw response to a sink."""

from __future__ import annotations

import socket
import sys
from typing import BinaryIO, Sequence

HTTP_PORT = 80
_PROG = "webget"
_RECV_SIZE = 65536


def build_request(host: str, path: str) -> bytes:
    """Return the HTTP GET request sent for ``path`` on ``host``."""
    request = (
        f"GET {path} HTTP/1.1\r\n"
        f"Host: {host}\r\n"
        "Connection: close\r\n"
        "\r\n"
    )
    return request.encode("latin-1")


def get_url(host: str, path: str, out: BinaryIO) -> None:
    """Request ``path`` from ``host`` on port 80 and write the full response to ``out``."""
    with socket.create_connection((host, HTTP_PORT)) as sock:
        sock.sendall(build_request(host, path))
        while chunk := sock.recv(_RECV_SIZE):
            out.write(chunk)
    if hasattr(out, "flush"):
        out.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command with ``HOST PATH`` arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        sys.stderr.write(f"Usage: {_PROG} HOST PATH\n")
        sys.stderr.write(f"\tExample: {_PROG} stanford.edu /class/cs144\n")
        return 1

    host, path = args
    try:
        get_url(host, path, sys.stdout.buffer)
    except Exception as exc:  # report any failure as the exit status
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())