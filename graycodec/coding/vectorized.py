"""Element-wise Gray transforms over numpy arrays.

Arrays are validated as a whole before any work: the dtype must be an integer
kind, no entry may be negative and no entry may exceed the width mask. Results
are always new ``numpy.uint64`` arrays with the input's shape; inputs are never
modified. Sequences of Python ints too large for a native numpy integer dtype
are checked entry by entry and raise ``RangeError`` like the scalar path.

Decoding uses the logarithmic prefix XOR ``r ^= r >> 1; r ^= r >> 2; ...``
which yields the same parity per bit as the scalar accumulation.

Examples
--------
>>> from graycodec.coding import encode_array, decode_array
>>> encode_array([0, 1, 2, 7]).tolist()
[0, 1, 3, 4]
>>> decode_array([0, 1, 3, 4]).tolist()
[0, 1, 2, 7]
"""

from __future__ import annotations

from typing import Any

import numpy as np

from graycodec.bits import mask_for, validate_value, validate_width
from graycodec.config import Config
from graycodec.errors import RangeError


def _check_entries(values: Any, width: int) -> np.ndarray:
    # Python ints beyond int64/uint64 make numpy fall back to object or float64.
    obj = np.array(values, dtype=object)
    for v in obj.flat:
        validate_value(v, width)
    return obj.astype(np.uint64)


def _as_uint64(values: Any, width: int) -> np.ndarray:
    arr = np.asarray(values)
    kind = arr.dtype.kind
    if kind == "O" or (kind == "f" and not isinstance(values, np.ndarray)):
        return _check_entries(values, width)
    if kind not in "iu":
        raise TypeError(f"Expected an integer array, got dtype {arr.dtype}")
    if arr.size == 0:
        return np.empty(arr.shape, dtype=np.uint64)
    if kind == "i":
        low = int(arr.min())
        if low < 0:
            raise RangeError(low, width)
    high = int(arr.max())
    if high > mask_for(width):
        raise RangeError(high, width)
    return arr.astype(np.uint64, copy=True)


def encode_array(values: Any, width: int = Config.DEFAULT_WIDTH) -> np.ndarray:
    """Gray-encode every element of ``values``."""

    n = validate_width(width)
    a = _as_uint64(values, n)
    return a ^ (a >> np.uint64(1))


def decode_array(values: Any, width: int = Config.DEFAULT_WIDTH) -> np.ndarray:
    """Gray-decode every element of ``values``."""

    n = validate_width(width)
    result = _as_uint64(values, n)
    shift = 1
    while shift < n:
        result ^= result >> np.uint64(shift)
        shift <<= 1
    return result


__all__ = ["encode_array", "decode_array"]
