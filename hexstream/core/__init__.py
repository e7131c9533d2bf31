"""
Core streaming functionality.

This package contains the stream adapters (whitespace filter, hex
transcoder, line wrapper) and the pipelines that chain them together.
"""

from .config import Config, Direction
from .errors import ConfigError, DecodeError, HexStreamError, StreamError
from .line_wrapper import LineWrapper
from .pipeline import decode_stream, encode_stream, run
from .transcoder import HexDecoder, HexEncoder, encode_hex, hex_digit
from .whitespace_filter import WhitespaceFilter

__all__ = [
    "Config",
    "Direction",
    "ConfigError",
    "DecodeError",
    "HexStreamError",
    "StreamError",
    "LineWrapper",
    "decode_stream",
    "encode_stream",
    "run",
    "HexDecoder",
    "HexEncoder",
    "encode_hex",
    "hex_digit",
    "WhitespaceFilter",
]
