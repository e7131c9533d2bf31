"""
hexstream - Line Wrapper

Sink adapter that breaks encoded output into fixed-width CRLF lines.
"""

from .streams import ByteSink

CRLF = b"\r\n"


class LineWrapper:
    """
    Wraps a ByteSink, inserting CRLF after every `width` bytes.

    The column counter belongs to the instance. Width 0 disables wrapping
    and bytes pass straight through.

    Usage:
        wrapper = LineWrapper(sys.stdout.buffer, 76)
        wrapper.write(hex_text)
        wrapper.flush()  # terminate the last line
    """

    def __init__(self, sink: ByteSink, width: int):
        """
        Args:
            sink: Destination for wrapped output
            width: Bytes per line, 0 for no wrapping

        Raises:
            ValueError: If width is negative
        """
        if width < 0:
            raise ValueError(f"Wrap width must be non-negative, got {width}")
        self._sink = sink
        self.width = width
        self.count = 0

    def write(self, data: bytes) -> int:
        """
        Write data, breaking lines whenever the counter reaches width.

        A break is only emitted once another byte needs room, so a line that
        ends exactly at width waits for flush() or the next write.

        Returns:
            Number of input bytes written

        Raises:
            OSError: If the sink fails; the counter reflects what was written
        """
        if self.width == 0:
            self._sink.write(data)
            return len(data)

        pos = 0
        while pos < len(data):
            if self.count >= self.width:
                self._write_crlf()
            run = min(self.width - self.count, len(data) - pos)
            self._sink.write(data[pos : pos + run])
            pos += run
            self.count += run
        return len(data)

    def flush(self) -> None:
        """Terminate the current line if anything was written to it."""
        if self.count > 0:
            self._write_crlf()

    def _write_crlf(self) -> None:
        self._sink.write(CRLF)
        self.count = 0
