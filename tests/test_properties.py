import json
from dataclasses import dataclass

import numpy as np
import pytest

from graycodec.codec import GrayCodec
from graycodec.config import Config
from graycodec.validation import (
    PROPERTY_NAMES,
    check_bijective,
    check_round_trip,
    check_single_bit_change,
    check_top_bit,
    check_zero_fixed_point,
    format_property_results,
    run_property_suite,
)
from graycodec.validation.properties import domain_values


@dataclass(frozen=True)
class _BrokenCodec(GrayCodec):
    """Codec whose encoder drops the lowest bit, to exercise failure paths."""

    def encode(self, value: int) -> int:
        return super().encode(value) & ~1

    def encode_array(self, values):
        return super().encode_array(values) & ~np.uint64(1)


def test_suite_passes_small_widths():
    summary = run_property_suite(widths=range(1, 9), exhaustive_max_width=8)
    assert summary["passed"] is True
    assert summary["widths"] == list(range(1, 9))
    assert len(summary["results"]) == 8 * len(PROPERTY_NAMES)
    assert {r["name"] for r in summary["results"]} == set(PROPERTY_NAMES)


def test_suite_samples_large_widths_and_skips_bijectivity():
    summary = run_property_suite(widths=[40, 64], exhaustive_max_width=8, samples=64, seed=7)
    assert summary["passed"] is True
    bij = [r for r in summary["results"] if r["name"] == "bijective"]
    assert all(r["skipped"] for r in bij)
    rt = [r for r in summary["results"] if r["name"] == "round_trip"]
    assert all(r["checked"] == 64 + 2 for r in rt)


def test_suite_is_deterministic_for_seed():
    a = run_property_suite(widths=[30], exhaustive_max_width=4, samples=16, seed=123)
    b = run_property_suite(widths=[30], exhaustive_max_width=4, samples=16, seed=123)
    assert a == b


def test_suite_summary_is_json_serializable():
    summary = run_property_suite(widths=[3, 20], exhaustive_max_width=4, samples=8)
    json.dumps(summary)


def test_suite_rejects_bad_arguments():
    with pytest.raises(ValueError):
        run_property_suite(widths=[])
    with pytest.raises(ValueError):
        run_property_suite(widths=[4], exhaustive_max_width=40)


def test_domain_values_exhaustive_and_sampled():
    rng = np.random.default_rng(0)
    values, exhaustive = domain_values(GrayCodec(4), exhaustive_max_width=4, samples=10, rng=rng)
    assert exhaustive is True
    assert values.tolist() == list(range(16))

    values, exhaustive = domain_values(GrayCodec(64), exhaustive_max_width=4, samples=10, rng=rng)
    assert exhaustive is False
    assert values.size == 12
    assert int(values[0]) == 0
    assert int(values[1]) == 2**64 - 1


def test_individual_checks_pass_for_correct_codec():
    codec = GrayCodec(6)
    values = np.arange(64, dtype=np.uint64)
    assert check_zero_fixed_point(codec).passed
    assert check_round_trip(codec, values).passed
    assert check_round_trip(codec, range(64)).passed
    assert check_bijective(codec, values, exhaustive=True).passed
    res = check_single_bit_change(codec, values)
    assert res.passed and res.checked == 63
    assert check_top_bit(codec, values).passed


def test_checks_report_counterexamples_for_broken_codec():
    codec = _BrokenCodec(4)
    values = np.arange(16, dtype=np.uint64)

    rt = check_round_trip(codec, values)
    assert not rt.passed
    assert rt.counterexample is not None and rt.counterexample["value"] == 1

    bij = check_bijective(codec, values, exhaustive=True)
    assert not bij.passed
    assert bij.counterexample is not None

    sbc = check_single_bit_change(codec, values)
    assert not sbc.passed
    assert sbc.counterexample["value"] == 0
    assert sbc.counterexample["bits_changed"] == 0


def test_format_property_results_table_and_json():
    summary = run_property_suite(widths=[2], exhaustive_max_width=2)
    table = format_property_results(summary, "table")
    assert isinstance(table, str)
    lines = table.splitlines()
    assert lines[0].split(" | ")[0].strip() == "width"
    assert len(lines) == 2 + len(PROPERTY_NAMES)
    assert "FAIL" not in table
    assert format_property_results(summary, "json") is summary


_SCALAR_CALLS: list[int] = []


@dataclass(frozen=True)
class _CountingCodec(GrayCodec):
    """Codec that records every scalar encode call."""

    def encode(self, value: int) -> int:
        _SCALAR_CALLS.append(value)
        return super().encode(value)


def test_round_trip_bounds_scalar_path(monkeypatch):
    """Large domains run the scalar path on a spread subset; arrays cover everything."""

    monkeypatch.setattr(Config, "SCALAR_CHECK_LIMIT", 8)
    _SCALAR_CALLS.clear()
    res = check_round_trip(_CountingCodec(8), np.arange(256, dtype=np.uint64))
    assert res.passed
    assert res.checked == 256
    assert len(_SCALAR_CALLS) == 8
    assert _SCALAR_CALLS[0] == 0
    assert _SCALAR_CALLS[-1] == 255


def test_round_trip_small_domain_runs_every_scalar():
    _SCALAR_CALLS.clear()
    res = check_round_trip(_CountingCodec(4), range(16))
    assert res.passed
    assert _SCALAR_CALLS == list(range(16))
