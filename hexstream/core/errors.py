"""
hexstream - Exceptions

Every error raised by the package derives from HexStreamError, so callers
can catch the whole family at once or pick out a single phase.
"""


class HexStreamError(Exception):
    """Base class for all hexstream errors."""

    pass


class ConfigError(HexStreamError, ValueError):
    """Raised when a Config is constructed with invalid values."""

    pass


class DecodeError(HexStreamError, ValueError):
    """
    Raised when hex text cannot be decoded.

    Attributes:
        char: Offending byte value, or None when the input ended with an
            unpaired hex character
    """

    def __init__(self, message: str, char: int | None = None):
        super().__init__(message)
        self.char = char


class StreamError(HexStreamError):
    """
    Raised by the pipeline when a pass fails.

    Wraps the underlying DecodeError or OSError and records which phase
    ("decode", "encode" or "flush") was running.
    """

    def __init__(self, phase: str, cause: BaseException):
        super().__init__(f"{phase} error: {cause}")
        self.phase = phase
        self.cause = cause
