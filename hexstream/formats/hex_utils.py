"""
hexstream - Hex String Utilities

One-shot helpers for converting in-memory values, built on the same
pipelines the command line streams through.
"""

import io

from ..core.errors import StreamError
from ..core.pipeline import decode_stream, encode_stream


def to_hex(data: bytes, wrap_width: int = 0) -> str:
    """
    Format bytes as lowercase hex text.

    Args:
        data: Bytes to encode
        wrap_width: Characters per CRLF-terminated line, 0 for no wrapping

    Returns:
        Hex string

    Example:
        >>> to_hex(bytes([0, 1, 2]), wrap_width=2)
        '00\\r\\n01\\r\\n02\\r\\n'
    """
    out = io.BytesIO()
    encode_stream(io.BytesIO(data), out, wrap_width)
    return out.getvalue().decode("ascii")


def from_hex(text: str) -> bytes:
    """
    Parse hex text into bytes, ignoring CR, LF, space and tab.

    Args:
        text: Hex string in either case

    Returns:
        Decoded bytes

    Raises:
        DecodeError: If text holds a non-hex character or an odd number of
            hex digits

    Example:
        >>> from_hex("4a ff\\r\\n")
        b'J\\xff'
    """
    out = io.BytesIO()
    try:
        decode_stream(io.BytesIO(text.encode("utf-8")), out)
    except StreamError as e:
        raise e.cause from None
    return out.getvalue()
