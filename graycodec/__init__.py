"""
graycodec: fixed-width binary <-> reflected binary (Gray) code conversion.

Implements the two pure transforms, a codec that binds a bit width, numpy
array variants, and property checks showing the transforms are inverse
bijections whose consecutive codes differ in a single bit.
"""

__all__ = [
    "GrayCodec",
    "Config",
    "DEFAULT_WIDTH",
    "MAX_WIDTH",
    "__version__",
    # Errors
    "GrayCodecError",
    "ConfigurationError",
    "RangeError",
    # Transforms
    "encode",
    "decode",
    "binary_to_gray",
    "gray_to_binary",
    # Array transforms (lazy-imported via __getattr__)
    "encode_array",
    "decode_array",
    # Validation (lazy-imported via __getattr__)
    "run_property_suite",
]

__version__ = "0.1.0"

from typing import Any

from graycodec.coding.binary_to_gray import binary_to_gray
from graycodec.coding.gray_to_binary import gray_to_binary
from graycodec.config import Config, DEFAULT_WIDTH, MAX_WIDTH
from graycodec.errors import ConfigurationError, GrayCodecError, RangeError

encode = binary_to_gray
decode = gray_to_binary


def __getattr__(name: str) -> Any:  # lazy attribute access to keep numpy out of plain imports
    if name == "GrayCodec":
        from graycodec.codec import GrayCodec as _GC

        return _GC
    if name == "encode_array":
        from graycodec.coding.vectorized import encode_array as _ea

        return _ea
    if name == "decode_array":
        from graycodec.coding.vectorized import decode_array as _da

        return _da
    if name == "run_property_suite":
        from graycodec.validation.properties import run_property_suite as _rps

        return _rps
    raise AttributeError(f"module 'graycodec' has no attribute {name!r}")
