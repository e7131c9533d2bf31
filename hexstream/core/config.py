"""
hexstream - Run Configuration

Immutable description of a single pass: which direction to transcode and,
when encoding, how wide output lines may grow.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import ConfigError


class Direction(Enum):
    """Transcoding direction."""

    ENCODE = "encode"  # binary -> hex
    DECODE = "decode"  # hex -> binary


@dataclass(frozen=True)
class Config:
    """
    Settings for one pipeline run.

    Attributes:
        direction: Direction.ENCODE or Direction.DECODE
        wrap_width: Hex characters per output line when encoding, 0 for no
            wrapping. Ignored when decoding.
    """

    direction: Direction = Direction.ENCODE
    wrap_width: int = 0

    def __post_init__(self):
        if not isinstance(self.direction, Direction):
            raise ConfigError(f"Unknown direction: {self.direction!r}")
        if self.wrap_width < 0:
            raise ConfigError("Wrap width must be non-negative")

    @classmethod
    def from_flags(cls, decode: bool = False, wrap: int = 0) -> "Config":
        """
        Build a Config from command-line style flags.

        Args:
            decode: True selects decode mode, False encode mode
            wrap: Wrap width for encode mode

        Raises:
            ConfigError: If wrap is negative
        """
        direction = Direction.DECODE if decode else Direction.ENCODE
        return cls(direction=direction, wrap_width=wrap)
