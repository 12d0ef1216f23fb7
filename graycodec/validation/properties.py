"""Executable checks of the Gray code properties.

Each ``check_*`` function takes a codec and the values to test and returns a
``PropertyResult``. ``run_property_suite`` drives all of them across a range
of widths: small widths are enumerated exhaustively, larger ones are sampled
with a seeded ``numpy.random.Generator`` (the extremes ``0`` and ``max_value``
are always included).

Examples
--------
>>> from graycodec.validation import run_property_suite
>>> summary = run_property_suite(widths=[1, 2, 3, 4])
>>> summary["passed"]
True
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from typing import Any, Optional

import numpy as np

from graycodec.bits import hamming_distance
from graycodec.codec import GrayCodec
from graycodec.config import Config


_LOGGER = logging.getLogger(__name__)

PROPERTY_NAMES: tuple[str, ...] = (
    "zero_fixed_point",
    "round_trip",
    "bijective",
    "single_bit_change",
    "top_bit",
)


@dataclass
class PropertyResult:
    """Outcome of one property check at one width."""

    name: str
    width: int
    checked: int
    passed: bool
    skipped: bool = False
    counterexample: Optional[dict[str, int]] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def domain_values(
    codec: GrayCodec,
    *,
    exhaustive_max_width: int,
    samples: int,
    rng: np.random.Generator,
) -> tuple[np.ndarray, bool]:
    """Return ``(values, exhaustive)`` to test ``codec`` on.

    Values are ``uint64``. For widths above ``exhaustive_max_width`` the
    values are ``samples`` uniform draws plus ``0`` and ``max_value``.
    """

    if codec.width <= exhaustive_max_width:
        return np.arange(codec.max_value + 1, dtype=np.uint64), True
    if samples <= 0:
        raise ValueError("samples must be > 0")
    drawn = rng.integers(0, codec.max_value, size=samples, endpoint=True, dtype=np.uint64)
    extremes = np.array([0, codec.max_value], dtype=np.uint64)
    return np.concatenate([extremes, drawn]), False


def check_zero_fixed_point(codec: GrayCodec) -> PropertyResult:
    ok = codec.encode(0) == 0 and codec.decode(0) == 0
    return PropertyResult(
        name="zero_fixed_point",
        width=codec.width,
        checked=2,
        passed=ok,
        counterexample=None if ok else {"value": 0},
    )


def check_round_trip(codec: GrayCodec, values: Iterable[int]) -> PropertyResult:
    """``decode(encode(a)) == a`` for every value.

    The array path covers every value. The scalar path covers at most
    ``Config.SCALAR_CHECK_LIMIT`` evenly spaced values, first and last included.
    """

    arr = values if isinstance(values, np.ndarray) else np.array(list(values), dtype=np.uint64)
    arr = arr.astype(np.uint64, copy=False)
    limit = Config.SCALAR_CHECK_LIMIT
    scalar = arr if arr.size <= limit else arr[np.linspace(0, arr.size - 1, limit, dtype=np.int64)]
    for a in scalar.tolist():
        g = codec.encode(a)
        back = codec.decode(g)
        if back != a:
            return PropertyResult(
                name="round_trip",
                width=codec.width,
                checked=int(arr.size),
                passed=False,
                counterexample={"value": a, "gray": g, "decoded": back},
            )
    back_arr = codec.decode_array(codec.encode_array(arr))
    mismatch = np.nonzero(back_arr != arr)[0]
    if mismatch.size:
        i = int(mismatch[0])
        return PropertyResult(
            name="round_trip",
            width=codec.width,
            checked=int(arr.size),
            passed=False,
            counterexample={"value": int(arr[i]), "decoded": int(back_arr[i])},
        )
    return PropertyResult(name="round_trip", width=codec.width, checked=int(arr.size), passed=True)


def check_bijective(codec: GrayCodec, values: np.ndarray, *, exhaustive: bool) -> PropertyResult:
    """No two inputs share a code. Only meaningful on the full domain."""

    if not exhaustive:
        return PropertyResult(name="bijective", width=codec.width, checked=0, passed=True, skipped=True)
    codes = codec.encode_array(values)
    unique = np.unique(codes)
    ok = unique.size == values.size and int(unique[-1]) <= codec.max_value
    counterexample = None
    if not ok:
        order = np.argsort(codes, kind="stable")
        sorted_codes = codes[order]
        dup = np.nonzero(sorted_codes[1:] == sorted_codes[:-1])[0]
        if dup.size:
            i = int(dup[0])
            counterexample = {
                "value": int(values[order[i]]),
                "other": int(values[order[i + 1]]),
                "gray": int(sorted_codes[i]),
            }
    return PropertyResult(
        name="bijective",
        width=codec.width,
        checked=int(values.size),
        passed=bool(ok),
        counterexample=counterexample,
    )


def check_single_bit_change(codec: GrayCodec, values: np.ndarray) -> PropertyResult:
    """Codes of ``a`` and ``a + 1`` differ in exactly one bit (no wraparound)."""

    base = values[values < np.uint64(codec.max_value)]
    diff = codec.encode_array(base) ^ codec.encode_array(base + np.uint64(1))
    one_bit = (diff != 0) & ((diff & (diff - np.uint64(1))) == 0)
    bad = np.nonzero(~one_bit)[0]
    if bad.size:
        a = int(base[bad[0]])
        g, g_next = codec.encode(a), codec.encode(a + 1)
        return PropertyResult(
            name="single_bit_change",
            width=codec.width,
            checked=int(base.size),
            passed=False,
            counterexample={
                "value": a,
                "gray": g,
                "next_gray": g_next,
                "bits_changed": hamming_distance(g, g_next),
            },
        )
    return PropertyResult(name="single_bit_change", width=codec.width, checked=int(base.size), passed=True)


def check_top_bit(codec: GrayCodec, values: np.ndarray) -> PropertyResult:
    """Gray code and binary agree on bit ``width - 1``."""

    top = np.uint64(codec.width - 1)
    codes = codec.encode_array(values)
    differs = ((codes ^ values.astype(np.uint64)) >> top) & np.uint64(1)
    bad = np.nonzero(differs)[0]
    if bad.size:
        a = int(values[bad[0]])
        return PropertyResult(
            name="top_bit",
            width=codec.width,
            checked=int(values.size),
            passed=False,
            counterexample={"value": a, "gray": codec.encode(a)},
        )
    return PropertyResult(name="top_bit", width=codec.width, checked=int(values.size), passed=True)


def check_width(
    codec: GrayCodec,
    *,
    exhaustive_max_width: int,
    samples: int,
    rng: np.random.Generator,
) -> list[PropertyResult]:
    """Run every property check for a single codec."""

    values, exhaustive = domain_values(
        codec, exhaustive_max_width=exhaustive_max_width, samples=samples, rng=rng
    )
    results = [
        check_zero_fixed_point(codec),
        check_round_trip(codec, values),
        check_bijective(codec, values, exhaustive=exhaustive),
        check_single_bit_change(codec, values),
        check_top_bit(codec, values),
    ]
    for r in results:
        if not r.passed:
            _LOGGER.warning("Property %s failed at width=%d: %s", r.name, r.width, r.counterexample)
        else:
            _LOGGER.debug("Property %s ok at width=%d (%d values%s)", r.name, r.width, r.checked, ", skipped" if r.skipped else "")
    return results


def run_property_suite(
    widths: Iterable[int] | None = None,
    exhaustive_max_width: int | None = None,
    samples: int | None = None,
    seed: int | None = None,
) -> dict[str, Any]:
    """Check all properties for each width and return a summary dict.

    Parameters
    ----------
    widths:
        Widths to check. Defaults to ``1..Config.MAX_WIDTH``.
    exhaustive_max_width:
        Enumerate every value up to this width. Defaults to Config.EXHAUSTIVE_MAX_WIDTH.
    samples:
        Random values per width above the exhaustive limit. Defaults to Config.SAMPLE_COUNT.
    seed:
        Random seed for reproducibility. Defaults to Config.RANDOM_SEED.
    """

    ws = list(widths) if widths is not None else list(range(Config.MIN_WIDTH, Config.MAX_WIDTH + 1))
    ex = int(exhaustive_max_width if exhaustive_max_width is not None else Config.EXHAUSTIVE_MAX_WIDTH)
    n = int(samples if samples is not None else Config.SAMPLE_COUNT)
    rng_seed = int(seed if seed is not None else Config.RANDOM_SEED)

    if not ws:
        raise ValueError("widths must be non-empty")
    if not (0 <= ex <= Config.EXHAUSTIVE_LIMIT):
        raise ValueError(f"exhaustive_max_width must be in [0, {Config.EXHAUSTIVE_LIMIT}]")

    rng = np.random.default_rng(rng_seed)
    results: list[PropertyResult] = []
    for w in ws:
        codec = GrayCodec(w)
        results.extend(check_width(codec, exhaustive_max_width=ex, samples=n, rng=rng))

    passed = all(r.passed for r in results)
    _LOGGER.info("Property suite over %d widths: %s", len(ws), "passed" if passed else "FAILED")
    return {
        "widths": ws,
        "exhaustive_max_width": ex,
        "samples": n,
        "seed": rng_seed,
        "passed": passed,
        "results": [r.to_dict() for r in results],
    }


def format_property_results(summary: dict[str, Any], output_format: str = "table") -> str | dict:
    """Render a ``run_property_suite`` summary as an ASCII table, or return it for JSON."""

    if output_format == "json":
        return summary

    headers = ["width", "property", "checked", "status"]
    rows: list[list[str]] = []
    for r in summary.get("results", []):
        status = "skip" if r.get("skipped") else ("ok" if r.get("passed") else "FAIL")
        rows.append([str(r.get("width")), str(r.get("name")), str(r.get("checked")), status])

    widths = [max(len(h), *(len(row[i]) for row in rows)) if rows else len(h) for i, h in enumerate(headers)]

    def _fmt_row(cols: list[str]) -> str:
        return " | ".join(col.ljust(widths[i]) for i, col in enumerate(cols))

    sep = "-+-".join("-" * w for w in widths)
    lines = [_fmt_row(headers), sep]
    for row in rows:
        lines.append(_fmt_row(row))
    return "\n".join(lines)


__all__ = [
    "PROPERTY_NAMES",
    "PropertyResult",
    "domain_values",
    "check_zero_fixed_point",
    "check_round_trip",
    "check_bijective",
    "check_single_bit_change",
    "check_top_bit",
    "check_width",
    "run_property_suite",
    "format_property_results",
]
