"""
hexstream - Transcoding Pipelines

Composes the stream adapters into the two supported passes:

    decode: source -> WhitespaceFilter -> HexDecoder -> sink
    encode: source -> HexEncoder -> LineWrapper -> sink

Failures are re-raised as StreamError tagged with the phase that failed.
After a failure nothing else is read or written and the wrapper is not
flushed.
"""

from .config import Config, Direction
from .errors import DecodeError, StreamError
from .line_wrapper import LineWrapper
from .streams import BUFFER_SIZE, ByteSink, ByteSource, copy_stream
from .transcoder import HexDecoder, HexEncoder
from .whitespace_filter import WhitespaceFilter


def decode_stream(
    source: ByteSource, sink: ByteSink, buffer_size: int = BUFFER_SIZE
) -> int:
    """
    Decode hex text from source into raw bytes on sink.

    Whitespace (CR, LF, space, tab) anywhere in the input is ignored.

    Args:
        source: Hex text input
        sink: Binary output
        buffer_size: Decoded bytes moved per iteration

    Returns:
        Number of bytes written to sink

    Raises:
        StreamError: phase "decode", wrapping DecodeError or OSError
    """
    decoder = HexDecoder(WhitespaceFilter(source))
    try:
        return copy_stream(decoder, sink, buffer_size)
    except (DecodeError, OSError) as e:
        raise StreamError("decode", e) from e


def encode_stream(
    source: ByteSource,
    sink: ByteSink,
    wrap_width: int = 0,
    buffer_size: int = BUFFER_SIZE,
) -> int:
    """
    Encode raw bytes from source as lowercase hex text on sink.

    Args:
        source: Binary input
        sink: Hex text output
        wrap_width: Characters per CRLF-terminated line, 0 for one long line
        buffer_size: Input bytes moved per iteration

    Returns:
        Number of input bytes encoded

    Raises:
        StreamError: phase "encode" or "flush", wrapping OSError
    """
    wrapper = LineWrapper(sink, wrap_width)
    encoder = HexEncoder(wrapper)
    try:
        total = copy_stream(source, encoder, buffer_size)
    except OSError as e:
        raise StreamError("encode", e) from e

    try:
        wrapper.flush()
    except OSError as e:
        raise StreamError("flush", e) from e
    return total


def run(config: Config, source: ByteSource, sink: ByteSink) -> int:
    """
    Run the pass described by config.

    Returns:
        Bytes written to sink by decode, bytes consumed from source by encode
    """
    if config.direction is Direction.DECODE:
        return decode_stream(source, sink)
    return encode_stream(source, sink, config.wrap_width)
