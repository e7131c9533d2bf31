"""
hexstream - Hex Transcoder

Converts between raw octets and their two-character hexadecimal text form.

Decoding is a source adapter (HexDecoder wraps whatever yields hex text),
encoding is a sink adapter (HexEncoder wraps whatever accepts hex text), so
both directions slot into the same copy loop.
"""

from .errors import DecodeError
from .streams import BUFFER_SIZE, ByteSink, ByteSource

HEX_DIGITS = b"0123456789abcdefABCDEF"

# Input octets encoded per sink write
ENCODE_CHUNK = 1024


def hex_digit(char: int) -> int:
    """
    Value of a single hex character.

    Args:
        char: Byte value of an ASCII character

    Returns:
        Integer 0-15

    Raises:
        DecodeError: If char is not 0-9, a-f or A-F

    Example:
        >>> hex_digit(ord("b"))
        11
    """
    if 0x30 <= char <= 0x39:  # 0-9
        return char - 0x30
    if 0x61 <= char <= 0x66:  # a-f
        return char - 0x61 + 10
    if 0x41 <= char <= 0x46:  # A-F
        return char - 0x41 + 10
    raise _invalid_char(char)


def encode_hex(data: bytes | memoryview) -> bytes:
    """
    Encode octets as lowercase hex text, high nibble first.

    Example:
        >>> encode_hex(b"\\x4a\\xff")
        b'4aff'
    """
    return data.hex().encode("ascii")


def _first_invalid(text: bytes) -> int | None:
    """Index of the first non-hex byte in text, or None."""
    stray = text.translate(None, HEX_DIGITS)
    if not stray:
        return None
    return text.index(stray[:1])


def _invalid_char(char: int) -> DecodeError:
    if 0x20 <= char < 0x7F:
        shown = f"{chr(char)!r} (0x{char:02X})"
    else:
        shown = f"0x{char:02X}"
    return DecodeError(f"invalid hex character {shown}", char=char)


class HexDecoder:
    """
    ByteSource yielding the octets encoded by a hex text source.

    A single unpaired character is held back between reads until its
    partner arrives. If a read hits an invalid character after some valid
    pairs, the decoded pairs are returned first and the error is raised by
    the following read. Once raised, the error is raised by every later
    read as well.
    """

    def __init__(self, source: ByteSource):
        self._source = source
        self._pending = b""
        self._error: DecodeError | None = None

    def read(self, size: int = -1) -> bytes:
        """
        Read up to size decoded octets.

        Returns:
            Decoded bytes, or b"" at a clean end of stream

        Raises:
            DecodeError: On a non-hex character or a dangling final character
        """
        if self._error is not None:
            raise self._error
        if size is None or size < 0:
            size = BUFFER_SIZE
        elif size == 0:
            return b""

        while True:
            chunk = self._source.read(2 * size - len(self._pending))
            if not chunk:
                return self._finish()

            text = self._pending + chunk
            even = len(text) - len(text) % 2
            self._pending = text[even:]
            if even:
                return self._decode(text[:even])

    def _finish(self) -> bytes:
        if not self._pending:
            return b""
        char = self._pending[0]
        self._pending = b""
        try:
            hex_digit(char)
        except DecodeError as error:
            self._error = error
        else:
            self._error = DecodeError("odd-length hex input")
        raise self._error

    def _decode(self, text: bytes) -> bytes:
        bad = _first_invalid(text)
        if bad is None:
            return bytes.fromhex(text.decode("ascii"))

        self._error = _invalid_char(text[bad])
        self._pending = b""
        valid = bad - bad % 2
        if valid:
            return bytes.fromhex(text[:valid].decode("ascii"))
        raise self._error


class HexEncoder:
    """
    ByteSink that hex-encodes everything written to it into another sink.

    Usage:
        encoder = HexEncoder(sys.stdout.buffer)
        encoder.write(b"\\x4a\\xff")  # sink receives b"4aff"
    """

    def __init__(self, sink: ByteSink):
        self._sink = sink

    def write(self, data: bytes) -> int:
        """
        Encode data and pass the hex text downstream.

        Returns:
            Number of input octets consumed
        """
        view = memoryview(data)
        for start in range(0, len(view), ENCODE_CHUNK):
            self._sink.write(encode_hex(view[start : start + ENCODE_CHUNK]))
        return len(view)
