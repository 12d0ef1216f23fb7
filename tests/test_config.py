import pytest

from graycodec.config import (
    BASE_PREFIXES,
    Config,
    DEFAULT_WIDTH,
    MAX_WIDTH,
    RANDOM_SEED,
    get_config,
)


def test_random_seed_set():
    """RANDOM_SEED convenience constant should match Config defaults."""

    assert RANDOM_SEED == Config.RANDOM_SEED == 42


def test_config_singleton():
    """get_config should return the same singleton instance across calls."""

    c1 = get_config()
    c2 = get_config()
    assert c1 is c2
    assert isinstance(c1, Config)


def test_width_defaults():
    assert DEFAULT_WIDTH == 8
    assert MAX_WIDTH == 64
    assert Config.MIN_WIDTH == 1
    assert Config.MAX_TABLE_WIDTH <= Config.EXHAUSTIVE_MAX_WIDTH <= Config.EXHAUSTIVE_LIMIT
    assert Config.MIN_WIDTH <= Config.DEFAULT_TABLE_WIDTH <= Config.MAX_TABLE_WIDTH
    assert Config.SCALAR_CHECK_LIMIT >= 1 << Config.EXHAUSTIVE_MAX_WIDTH


def test_config_is_immutable():
    cfg = get_config()
    with pytest.raises(Exception):
        cfg.DEFAULT_WIDTH = 16  # type: ignore[misc]


def test_base_prefixes():
    assert BASE_PREFIXES == {2: "0b", 10: "", 16: "0x"}
