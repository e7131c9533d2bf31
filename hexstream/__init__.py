"""
hexstream - streaming hex encoder/decoder.

Converts unbounded byte streams to lowercase hex text and back under
constant memory.
"""

__version__ = "0.1.0"
