import pytest

from graycodec.coding import binary_to_gray
from graycodec.errors import ConfigurationError, RangeError

GRAY_4BIT = [0, 1, 3, 2, 6, 7, 5, 4, 12, 13, 15, 14, 10, 11, 9, 8]


@pytest.mark.parametrize(
    "value,expected",
    [
        (0b00000000, 0b00000000),
        (0b00000001, 0b00000001),
        (0b00000010, 0b00000011),
        (0b00000111, 0b00000100),
        (0b11111111, 0b10000000),
    ],
)
def test_encode_known_values_width8(value: int, expected: int):
    assert binary_to_gray(value) == expected
    assert binary_to_gray(value, 8) == expected


def test_encode_4bit_sequence():
    assert [binary_to_gray(a, 4) for a in range(16)] == GRAY_4BIT


def test_encode_width1_is_identity():
    assert binary_to_gray(0, 1) == 0
    assert binary_to_gray(1, 1) == 1


@pytest.mark.parametrize("width", [1, 2, 7, 8, 13, 33, 64])
def test_encode_top_bit_unchanged(width: int):
    top = 1 << (width - 1)
    for a in (0, 1, top - 1 if top > 1 else 0, top, (1 << width) - 1):
        assert binary_to_gray(a, width) & top == a & top


def test_encode_lower_bits_are_neighbour_xor():
    a = 0b1011_0110
    g = binary_to_gray(a, 8)
    for i in range(7):
        assert (g >> i) & 1 == ((a >> i) & 1) ^ ((a >> (i + 1)) & 1)


def test_encode_64bit_extremes():
    assert binary_to_gray(2**64 - 1, 64) == 1 << 63
    assert binary_to_gray(1 << 63, 64) == (1 << 63) | (1 << 62)


def test_encode_rejects_out_of_range():
    with pytest.raises(RangeError):
        binary_to_gray(256, 8)
    with pytest.raises(RangeError):
        binary_to_gray(-1, 8)
    with pytest.raises(RangeError):
        binary_to_gray(2, 1)


def test_encode_rejects_bad_width():
    with pytest.raises(ConfigurationError):
        binary_to_gray(0, 0)
    with pytest.raises(ConfigurationError):
        binary_to_gray(0, 65)
