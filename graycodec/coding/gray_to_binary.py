"""Reflected binary (Gray) code back to standard binary.

Each output bit is the parity of the Gray bits at and above its position:
``A[i] = G[i] ^ G[i+1] ^ ... ^ G[N-1]``. ``gray_to_binary`` accumulates that
parity from the top bit down (``A[N-1] = G[N-1]``, ``A[i] = A[i+1] ^ G[i]``)
for all positions at once by folding successively shifted copies of ``G``.
``gray_to_binary_parity`` evaluates the per-bit reduction literally and is
kept as a reference for tests.
"""

from __future__ import annotations

from graycodec.bits import from_bits, to_bits, validate_value, validate_width
from graycodec.config import Config


def gray_to_binary(value: int, width: int = Config.DEFAULT_WIDTH) -> int:
    """Return the binary value whose Gray-code encoding is ``value``.

    Runs in O(width) shifts and XORs.
    """

    n = validate_width(width)
    g = validate_value(value, n)
    a = 0
    while g:
        a ^= g
        g >>= 1
    return a


def gray_to_binary_parity(value: int, width: int = Config.DEFAULT_WIDTH) -> int:
    """Bit-by-bit parity reduction, O(width**2). Same result as ``gray_to_binary``."""

    n = validate_width(width)
    g = to_bits(value, n)
    return from_bits(sum(g[i:]) & 1 for i in range(n))


__all__ = ["gray_to_binary", "gray_to_binary_parity"]
