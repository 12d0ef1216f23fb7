"""Binary to reflected binary (Gray) code.

``G = A ^ (A >> 1)`` over exactly ``width`` bits. Python's ``>>`` on a
non-negative int is a logical shift, so the top bit of ``G`` always equals the
top bit of ``A`` and every lower bit is ``A[i] ^ A[i+1]``.

Example
-------
>>> from graycodec.coding import binary_to_gray
>>> binary_to_gray(0b0111)
4
"""

from __future__ import annotations

from graycodec.bits import validate_value, validate_width
from graycodec.config import Config


def binary_to_gray(value: int, width: int = Config.DEFAULT_WIDTH) -> int:
    """Return the Gray-code encoding of the ``width``-bit unsigned ``value``.

    Raises
    ------
    ConfigurationError
        If ``width`` is outside ``[1, Config.MAX_WIDTH]``.
    RangeError
        If ``value`` does not fit in ``width`` bits.
    """

    n = validate_width(width)
    a = validate_value(value, n)
    return a ^ (a >> 1)


__all__ = ["binary_to_gray"]
