"""A bounded, in-memory byte stream with a writing end and a reading end."""

from __future__ import annotations


class ByteStream:
    """A reliable byte stream of limited capacity.

    Bytes pushed by the writer are buffered until the reader pops them. The
    buffer never holds more than ``capacity`` bytes; anything pushed beyond
    that is dropped.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._buffer = bytearray()
        self._pushed = 0
        self._popped = 0
        self._closed = False
        self._error = False

    # Writer side

    def push(self, data: bytes) -> None:
        """Append as much of ``data`` as the available capacity allows."""
        if self._closed:
            return
        chunk = memoryview(data)[: self.available_capacity()]
        self._buffer += chunk
        self._pushed += len(chunk)

    def close(self) -> None:
        """Signal that no more bytes will be pushed."""
        self._closed = True

    def is_closed(self) -> bool:
        return self._closed

    def available_capacity(self) -> int:
        return self._capacity - len(self._buffer)

    def bytes_pushed(self) -> int:
        return self._pushed

    # Reader side

    def peek(self) -> bytes:
        """Return the buffered bytes without removing them."""
        return bytes(self._buffer)

    def pop(self, length: int) -> None:
        """Remove up to ``length`` bytes from the front of the buffer."""
        if length < 0:
            raise ValueError("length must not be negative")
        count = min(length, len(self._buffer))
        del self._buffer[:count]
        self._popped += count

    def read(self, length: int) -> bytes:
        """Remove and return up to ``length`` bytes from the front of the buffer."""
        if length < 0:
            raise ValueError("length must not be negative")
        chunk = bytes(self._buffer[:length])
        self.pop(len(chunk))
        return chunk

    def is_finished(self) -> bool:
        """True once the stream is closed and every byte has been popped."""
        return self._closed and not self._buffer

    def bytes_buffered(self) -> int:
        return len(self._buffer)

    def bytes_popped(self) -> int:
        return self._popped

    # Shared

    def set_error(self) -> None:
        self._error = True

    def has_error(self) -> bool:
        return self._error