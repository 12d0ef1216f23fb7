"""Fixed-width Gray codec.

``GrayCodec`` binds a width once and exposes both directions of the
transform, so callers do not pass the width to every call. ``decode`` is the
inverse of ``encode`` on ``[0, 2**width - 1]`` and vice versa.

Example
-------
>>> from graycodec.codec import GrayCodec
>>> codec = GrayCodec(8)
>>> codec.encode(0b11111111)
128
>>> codec.decode(codec.encode(200))
200
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from graycodec.bits import mask_for, validate_width
from graycodec.coding.binary_to_gray import binary_to_gray
from graycodec.coding.gray_to_binary import gray_to_binary
from graycodec.coding.vectorized import decode_array, encode_array
from graycodec.config import Config


_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class GrayCodec:
    """Binary <-> Gray conversion for ``width``-bit unsigned integers.

    Parameters
    ----------
    width:
        Bit width, ``1 <= width <= Config.MAX_WIDTH``. Default 8.

    Notes
    -----
    - Instances hold only the width and its mask and never change after
      construction, so one codec can be shared freely between threads.
    - Out-of-range inputs raise ``RangeError``; they are never masked.
    """

    width: int = Config.DEFAULT_WIDTH
    mask: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        n = validate_width(self.width)
        object.__setattr__(self, "width", n)
        object.__setattr__(self, "mask", mask_for(n))
        _LOGGER.debug("GrayCodec created: width=%d", n)

    @property
    def max_value(self) -> int:
        """Largest representable value, ``2**width - 1``."""

        return self.mask

    # Scalar transforms ------------------------------------------------------
    def encode(self, value: int) -> int:
        """Binary -> Gray."""

        return binary_to_gray(value, self.width)

    def decode(self, value: int) -> int:
        """Gray -> binary."""

        return gray_to_binary(value, self.width)

    # Array transforms -------------------------------------------------------
    def encode_array(self, values: Any) -> np.ndarray:
        return encode_array(values, self.width)

    def decode_array(self, values: Any) -> np.ndarray:
        return decode_array(values, self.width)

    # Convenience ------------------------------------------------------------
    def sequence(self) -> Iterator[int]:
        """Yield the Gray codes of ``0, 1, ..., max_value`` in counting order.

        Consecutive items differ in exactly one bit.
        """

        for a in range(self.mask + 1):
            yield self.encode(a)

    def to_dict(self) -> dict[str, Any]:
        """Return codec metadata suitable for JSON serialization."""

        return {
            "width": self.width,
            "max_value": self.max_value,
            "bit_order": "lsb0",
            "range_policy": "reject",
        }


__all__ = ["GrayCodec"]
