"""
hexstream - Instrumented Stream I/O

Pass-through source and sink wrappers that count the bytes moving through
them, so the command line can report how much data a run processed without
holding on to any of it.
"""

from .streams import ByteSink, ByteSource


class CountingSource:
    """
    ByteSource wrapper that tallies bytes read and read calls.

    Usage:
        source = CountingSource(sys.stdin.buffer)
        encode_stream(source, sink)
        print(f"{source.bytes_read} bytes in")
    """

    def __init__(self, source: ByteSource):
        self._source = source
        self.bytes_read = 0
        self.reads = 0

    def read(self, size: int = -1) -> bytes:
        """Read from the wrapped source and record the result."""
        data = self._source.read(size)
        self.reads += 1
        self.bytes_read += len(data)
        return data


class CountingSink:
    """ByteSink wrapper that tallies bytes written and write calls."""

    def __init__(self, sink: ByteSink):
        self._sink = sink
        self.bytes_written = 0
        self.writes = 0

    def write(self, data: bytes) -> int:
        """Write to the wrapped sink, counting only once the write succeeds."""
        self._sink.write(data)
        self.writes += 1
        self.bytes_written += len(data)
        return len(data)

    def flush(self) -> None:
        """Flush the wrapped sink if it buffers."""
        flush = getattr(self._sink, "flush", None)
        if flush is not None:
            flush()
