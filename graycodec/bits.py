"""Shared helpers for fixed-width unsigned bit vectors.

This module centralizes width and value validation used by both transforms,
together with small conversions between integers, bit lists and bit strings,
and the integer literal parsing used by the command line.

Bit 0 is the least significant bit. ``to_bits`` returns LSB-first lists,
while ``to_bitstring`` renders MSB-first text as ``format(value, "b")`` does.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable

from graycodec.config import BASE_PREFIXES, Config
from graycodec.errors import ConfigurationError, RangeError


def validate_width(width: int) -> int:
    """Return ``width`` as a plain int or raise ``ConfigurationError``.

    Parameters
    ----------
    width:
        Number of bits, ``Config.MIN_WIDTH <= width <= Config.MAX_WIDTH``.
    """

    if isinstance(width, bool):
        raise ConfigurationError(f"Width must be an integer, got {width!r}")
    try:
        n = operator.index(width)
    except TypeError:
        raise ConfigurationError(f"Width must be an integer, got {width!r}") from None
    if n < Config.MIN_WIDTH:
        raise ConfigurationError(f"Width must be >= {Config.MIN_WIDTH}, got {n}")
    if n > Config.MAX_WIDTH:
        raise ConfigurationError(f"Width must be <= {Config.MAX_WIDTH}, got {n}")
    return n


def mask_for(width: int) -> int:
    """Return the all-ones mask for ``width`` bits."""

    return (1 << width) - 1


def validate_value(value: int, width: int) -> int:
    """Return ``value`` as a plain int, rejecting anything outside ``width`` bits.

    Out-of-range values are rejected, never masked.

    Raises
    ------
    TypeError
        If ``value`` is not an integer (``bool`` included).
    RangeError
        If ``value`` is negative or exceeds ``2**width - 1``.
    """

    if isinstance(value, bool):
        raise TypeError(f"Expected an unsigned integer, got {value!r}")
    v = operator.index(value)
    if v < 0 or v >> width:
        raise RangeError(v, width)
    return v


def to_bits(value: int, width: int) -> list[int]:
    """Return the ``width`` bits of ``value``, least significant first."""

    v = validate_value(value, width)
    return [(v >> i) & 1 for i in range(width)]


def from_bits(bits: Iterable[int]) -> int:
    """Inverse of ``to_bits``: assemble an int from LSB-first bits."""

    out = 0
    for i, b in enumerate(bits):
        if b not in (0, 1):
            raise ValueError(f"Bit {i} must be 0 or 1, got {b!r}")
        out |= int(b) << i
    return out


def to_bitstring(value: int, width: int) -> str:
    """Return ``value`` as an MSB-first string of exactly ``width`` digits."""

    v = validate_value(value, width)
    return format(v, f"0{width}b")


def hamming_distance(a: int, b: int) -> int:
    """Number of bit positions in which ``a`` and ``b`` differ."""

    return bin(a ^ b).count("1")


def parse_int_literal(text: str) -> tuple[int, int]:
    """Parse a decimal, ``0x`` hexadecimal or ``0b`` binary literal.

    Returns ``(value, base)`` so the caller can print results in the same base.
    Signs are not accepted.
    """

    s = text.strip().lower()
    if not s:
        raise ValueError("Empty integer literal")
    if s[0] in "+-":
        raise ValueError(f"Signed literals are not supported: {text!r}")
    if s.startswith("0x"):
        base = 16
    elif s.startswith("0b"):
        base = 2
    else:
        base = 10
    digits = s[len(BASE_PREFIXES[base]):]
    if not digits:
        raise ValueError(f"Missing digits in literal: {text!r}")
    return int(digits, base), base


def format_int(value: int, base: int, width: int) -> str:
    """Format ``value`` in ``base``; hex and binary are zero-padded to ``width`` bits."""

    if base == 16:
        return f"0x{value:0{(width + 3) // 4}x}"
    if base == 2:
        return f"0b{value:0{width}b}"
    if base == 10:
        return str(value)
    raise ValueError(f"Unsupported base: {base}")


__all__ = [
    "validate_width",
    "validate_value",
    "mask_for",
    "to_bits",
    "from_bits",
    "to_bitstring",
    "hamming_distance",
    "parse_int_literal",
    "format_int",
]
