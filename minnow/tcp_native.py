"""Connect to, or accept one connection from, a TCP peer and relay it to stdin/stdout."""

from __future__ import annotations

import socket
import sys
from dataclasses import dataclass
from typing import Sequence

from minnow.stream_copy import bidirectional_stream_copy

_PROG = "tcp_native"


class UsageError(ValueError):
    """Raised when the command-line arguments are malformed."""


@dataclass(frozen=True)
class Options:
    listen: bool
    host: str
    port: str


def _show_usage() -> None:
    sys.stderr.write(
        f"Usage: {_PROG} [-l] <host> <port>\n\n"
        "  -l specifies listen mode; <host>:<port> is the listening address.\n"
    )


def _format_address(address: tuple) -> str:
    return f"{address[0]}:{address[1]}"


def _resolve(host: str, port: str) -> tuple:
    infos = socket.getaddrinfo(host, port, socket.AF_INET, socket.SOCK_STREAM)
    if not infos:
        raise OSError(f"could not resolve {host}:{port}")
    return infos[0][4]


def parse_args(argv: Sequence[str]) -> Options:
    """Parse ``[-l] <host> <port>``; raise :class:`UsageError` if malformed."""
    args = list(argv)
    if len(args) < 2:
        raise UsageError("expected <host> <port>")
    if args[0] == "-l":
        if len(args) < 3:
            raise UsageError("expected -l <host> <port>")
        return Options(listen=True, host=args[1], port=args[2])
    return Options(listen=False, host=args[0], port=args[1])


def establish(host: str, port: str, listen: bool) -> socket.socket:
    """Return a connected TCP socket.

    In listen mode, bind to ``host:port`` and accept exactly one connection;
    otherwise connect to ``host:port``.
    """
    address = _resolve(host, str(port))
    if listen:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
            listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            listener.bind(address)
            listener.listen()
            sys.stderr.write("DEBUG: Listening for incoming connection...\n")
            connected, peer = listener.accept()
        sys.stderr.write(f"DEBUG: New connection from {_format_address(peer)}.\n")
        return connected

    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sys.stderr.write(f"DEBUG: Connecting to {_format_address(address)}... ")
        sock.connect(address)
    except BaseException:
        sock.close()
        raise
    sys.stderr.write(
        f"DEBUG: Successfully connected to {_format_address(sock.getpeername())}.\n"
    )
    return sock


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = parse_args(args)
    except UsageError:
        _show_usage()
        return 1

    try:
        sock = establish(options.host, options.port, options.listen)
        with sock:
            bidirectional_stream_copy(sock, _format_address(sock.getpeername()))
    except Exception as exc:  # report any failure as the exit status
        sys.stderr.write(f"Exception: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())