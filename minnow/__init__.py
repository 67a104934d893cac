"""Bounded in-memory byte streams, a socket stream copier, and small TCP tools."""

__version__ = "0.1.0"
__all__ = ["byte_stream", "stream_copy", "webget", "tcp_native"]