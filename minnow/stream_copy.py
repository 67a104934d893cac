"""Copy between a connected socket and a local source/sink until both directions finish."""

from __future__ import annotations

import os
import selectors
import socket
import sys

from minnow.byte_stream import ByteStream

BUFFER_SIZE = 1048576


def _debug(message: str) -> None:
    sys.stderr.write(f"DEBUG: {message}\n")
    sys.stderr.flush()


def bidirectional_stream_copy(sock: socket.socket, peer_name: str, source=None, sink=None) -> None:
    """Copy ``source`` into ``sock`` and ``sock`` into ``sink`` until both streams end.

    ``source`` and ``sink`` default to standard input and output; each must
    provide ``fileno()``. The sink is closed once the inbound stream is done.
    """
    source = sys.stdin.buffer if source is None else source
    sink = sys.stdout.buffer if sink is None else sink
    source_fd, sink_fd, sock_fd = source.fileno(), sink.fileno(), sock.fileno()

    outbound = ByteStream(BUFFER_SIZE)
    inbound = ByteStream(BUFFER_SIZE)
    shut_down = {"outbound": False, "inbound": False}

    sock.setblocking(False)
    os.set_blocking(source_fd, False)
    os.set_blocking(sink_fd, False)

    def fill(stream: ByteStream, receive) -> None:
        data = receive(stream.available_capacity())
        stream.push(data)
        if not data:
            stream.close()

    def close_outbound() -> None:
        sock.shutdown(socket.SHUT_WR)
        _debug(f"Outbound stream to {peer_name} finished.")

    def close_inbound() -> None:
        if hasattr(sink, "close"):
            sink.close()
        else:
            os.close(sink_fd)
        ending = " uncleanly." if inbound.has_error() else "."
        _debug(f"Inbound stream from {peer_name} finished{ending}")

    def drain(stream: ByteStream, send, key: str, finish) -> None:
        if stream.bytes_buffered():
            stream.pop(send(stream.peek()))
        if stream.is_finished():
            finish()
            shut_down[key] = True

    def wants_input(stream: ByteStream) -> bool:
        return (
            not outbound.has_error()
            and not inbound.has_error()
            and stream.available_capacity() > 0
            and not stream.is_closed()
        )

    def wants_output(stream: ByteStream, key: str) -> bool:
        return stream.bytes_buffered() > 0 or (stream.is_finished() and not shut_down[key])

    # Each rule: (fd, event, action, interest, message reported on error).
    rules = [
        (source_fd, selectors.EVENT_READ,
         lambda: fill(outbound, lambda n: os.read(source_fd, n)),
         lambda: wants_input(outbound),
         "Outbound stream had error from source."),
        (sock_fd, selectors.EVENT_WRITE,
         lambda: drain(outbound, sock.send, "outbound", close_outbound),
         lambda: wants_output(outbound, "outbound"),
         "Outbound stream had error from destination."),
        (sock_fd, selectors.EVENT_READ,
         lambda: fill(inbound, sock.recv),
         lambda: wants_input(inbound),
         "Inbound stream had error from source."),
        (sink_fd, selectors.EVENT_WRITE,
         lambda: drain(inbound, lambda data: os.write(sink_fd, data), "inbound", close_inbound),
         lambda: wants_output(inbound, "inbound"),
         "Inbound stream had error from destination."),
    ]
    cancelled: set[int] = set()

    while True:
        active = [i for i, rule in enumerate(rules) if i not in cancelled and rule[3]()]
        if not active:
            return

        masks: dict[int, int] = {}
        for i in active:
            fd, event = rules[i][0], rules[i][1]
            masks[fd] = masks.get(fd, 0) | event
        with selectors.DefaultSelector() as selector:
            for fd, mask in masks.items():
                selector.register(fd, mask)
            ready = {key.fd: mask for key, mask in selector.select()}

        for i in active:
            fd, event, action, interested, message = rules[i]
            if not ready.get(fd, 0) & event or i in cancelled or not interested():
                continue
            try:
                action()
            except (BlockingIOError, InterruptedError):
                continue
            except OSError:
                cancelled.add(i)
                _debug(message)
                outbound.set_error()
                inbound.set_error()