"""Property validation for the Gray transforms.

This package provides utilities for:
- Exhaustive and sampled checks of round-trip, bijectivity, single-bit change,
  top-bit identity and the zero fixed point
- Formatting suite summaries for the command line

Public API:
- run_property_suite, format_property_results
- PropertyResult and the individual check_* functions
"""

from __future__ import annotations

from graycodec.validation.properties import (
    PROPERTY_NAMES,
    PropertyResult,
    check_bijective,
    check_round_trip,
    check_single_bit_change,
    check_top_bit,
    check_zero_fixed_point,
    format_property_results,
    run_property_suite,
)

__all__ = [
    "PROPERTY_NAMES",
    "PropertyResult",
    "check_bijective",
    "check_round_trip",
    "check_single_bit_change",
    "check_top_bit",
    "check_zero_fixed_point",
    "format_property_results",
    "run_property_suite",
]
