"""Exceptions raised by the codec.

Both error kinds are raised synchronously, before any output is produced.
They subclass ``ValueError`` so callers that already guard argument errors
keep working.
"""

from __future__ import annotations


class GrayCodecError(ValueError):
    """Base class for codec errors."""


class ConfigurationError(GrayCodecError):
    """Width is not an integer in ``[MIN_WIDTH, MAX_WIDTH]``."""


class RangeError(GrayCodecError):
    """Input value is negative or has bits set at or above the codec width."""

    def __init__(self, value: int, width: int) -> None:
        self.value = value
        self.width = width
        super().__init__(
            f"Value {value} is outside the {width}-bit unsigned range [0, {(1 << width) - 1}]"
        )


__all__ = ["GrayCodecError", "ConfigurationError", "RangeError"]
