"""
hexstream - Stream Protocols

Minimal capability contracts shared by every adapter in the pipeline, plus
the pull-then-push copy loop that drives a pass.

Adapters don't inherit from anything: a source is any object with
read(size) -> bytes, a sink is any object with write(data). Binary file
objects (sys.stdin.buffer, io.BytesIO, open(..., "rb")) already qualify.
"""

from typing import Protocol

# Size of the single working buffer used by copy_stream
BUFFER_SIZE = 32 * 1024


class ByteSource(Protocol):
    """Produces bytes on demand."""

    def read(self, size: int = -1, /) -> bytes:
        """
        Read up to size bytes.

        Returns b"" only when the source is exhausted.
        """
        ...


class ByteSink(Protocol):
    """Accepts bytes and may fail with OSError."""

    def write(self, data: bytes, /) -> int | None:
        """Write all of data."""
        ...


def copy_stream(
    source: ByteSource, sink: ByteSink, buffer_size: int = BUFFER_SIZE
) -> int:
    """
    Copy source to sink until the source is exhausted.

    Args:
        source: Object to pull bytes from
        sink: Object to push bytes into
        buffer_size: Maximum bytes requested per read

    Returns:
        Total number of bytes written to sink

    Raises:
        ValueError: If buffer_size is not positive
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")

    total = 0
    while True:
        chunk = source.read(buffer_size)
        if not chunk:
            return total
        sink.write(chunk)
        total += len(chunk)
