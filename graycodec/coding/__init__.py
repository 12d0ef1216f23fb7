"""Binary <-> reflected binary (Gray) transforms.

The two scalar transforms are independent leaves; neither imports the other.

Public API:
- binary_to_gray
- gray_to_binary
- gray_to_binary_parity
- encode_array (numpy)
- decode_array (numpy)
"""

from __future__ import annotations

from typing import Any

from graycodec.coding.binary_to_gray import binary_to_gray
from graycodec.coding.gray_to_binary import gray_to_binary, gray_to_binary_parity

__all__ = [
    "binary_to_gray",
    "gray_to_binary",
    "gray_to_binary_parity",
    "encode_array",
    "decode_array",
]


def __getattr__(name: str) -> Any:  # lazy imports so scalar use does not pull in numpy
    if name == "encode_array":
        from graycodec.coding.vectorized import encode_array as _ea

        return _ea
    if name == "decode_array":
        from graycodec.coding.vectorized import decode_array as _da

        return _da
    raise AttributeError(f"module 'graycodec.coding' has no attribute {name!r}")
