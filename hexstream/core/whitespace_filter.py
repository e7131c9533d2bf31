"""
hexstream - Whitespace Filter

Source adapter that drops line breaks, spaces and tabs from hex text so the
decoder only ever sees meaningful characters.
"""

from .streams import BUFFER_SIZE, ByteSource

# Bytes discarded by the filter: CR, LF, space, horizontal tab
WHITESPACE = b"\r\n \t"


class WhitespaceFilter:
    """
    Wraps a ByteSource and strips whitespace from everything it yields.

    Usage:
        source = WhitespaceFilter(sys.stdin.buffer)
        chunk = source.read(4096)  # never b"" until stdin is exhausted
    """

    def __init__(self, source: ByteSource):
        self._source = source

    def read(self, size: int = -1) -> bytes:
        """
        Read up to size meaningful bytes.

        Keeps pulling from the underlying source while it only yields
        whitespace, so an empty result always means end of stream.

        Args:
            size: Maximum bytes to request from the source per pull

        Returns:
            Filtered bytes, or b"" once the source is exhausted
        """
        if size is None or size < 0:
            size = BUFFER_SIZE
        elif size == 0:
            return b""

        while True:
            chunk = self._source.read(size)
            if not chunk:
                return b""
            meaningful = chunk.translate(None, WHITESPACE)
            if meaningful:
                return meaningful
