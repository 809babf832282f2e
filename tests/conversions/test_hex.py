import numpy as np
import pytest

from palettica.conversions import (
    InvalidHexError,
    normalize_hex,
    is_valid_hex,
    parse_hex,
    hex_to_rgb,
    rgb_to_hex,
    np_hex_to_rgb,
    np_rgb_to_int,
    np_rgb_to_hex,
)
from samples import invalid_hex_inputs


@pytest.mark.parametrize("value", invalid_hex_inputs)
def test_normalize_rejects_invalid(value):
    assert normalize_hex(value) is None
    assert not is_valid_hex(value)


def test_normalize_expands_shorthand():
    assert normalize_hex("abc") == "AABBCC"
    assert normalize_hex("123") == "112233"
    assert normalize_hex("fff") == "FFFFFF"
    assert normalize_hex("000") == "000000"


def test_normalize_six_digits():
    assert normalize_hex("aabbcc") == "AABBCC"
    assert normalize_hex("112233") == "112233"
    assert normalize_hex("FfFfFf") == "FFFFFF"


def test_normalize_strips_hash_and_whitespace():
    assert normalize_hex("#abc") == "AABBCC"
    assert normalize_hex("#aabbcc") == "AABBCC"
    assert normalize_hex("  abc  ") == "AABBCC"
    assert normalize_hex("  #abc  ") == "AABBCC"
    assert normalize_hex("\tff5500\n") == "FF5500"


def test_normalize_removes_first_hash_anywhere():
    assert normalize_hex("abc#") == "AABBCC"
    assert normalize_hex("aa#bbcc") == "AABBCC"


def test_parse_hex_raises():
    assert parse_hex("#f50") == "FF5500"
    with pytest.raises(InvalidHexError) as info:
        parse_hex("GGG")
    assert isinstance(info.value, ValueError)
    assert info.value.value == "GGG"


def test_hex_to_rgb():
    assert hex_to_rgb("000000") == (0, 0, 0)
    assert hex_to_rgb("FFFFFF") == (255, 255, 255)
    assert hex_to_rgb("FF0000") == (255, 0, 0)
    assert hex_to_rgb("00FF00") == (0, 255, 0)
    assert hex_to_rgb("0000FF") == (0, 0, 255)
    assert hex_to_rgb("FF5500") == (255, 85, 0)


def test_rgb_to_hex():
    assert rgb_to_hex(0, 0, 0) == "#000000"
    assert rgb_to_hex(255, 255, 255) == "#FFFFFF"
    assert rgb_to_hex(255, 0, 0) == "#FF0000"
    assert rgb_to_hex(10, 11, 12) == "#0A0B0C"


def test_rgb_to_hex_clamps():
    assert rgb_to_hex(-10, 0, 0) == "#000000"
    assert rgb_to_hex(300, 0, 0) == "#FF0000"
    assert rgb_to_hex(0, -50, 300) == "#0000FF"


def test_rgb_to_hex_rounds_half_up():
    assert rgb_to_hex(127.4, 127.6, 0) == "#7F8000"
    assert rgb_to_hex(0.5, 1.5, 2.5) == "#010203"
    assert rgb_to_hex(254.5, -0.4, 255.4) == "#FF00FF"


def test_np_hex_to_rgb():
    rgb = np_hex_to_rgb(["FF5500", "000000", "0A0B0C"])
    assert rgb.tolist() == [[255, 85, 0], [0, 0, 0], [10, 11, 12]]


def test_np_rgb_to_int_matches_rgb_to_hex_rules():
    raw = np.array([[127.4, 127.6, 0.5], [-10, 300, 254.5]])
    assert np_rgb_to_int(raw).tolist() == [[127, 128, 1], [0, 255, 255]]
    assert np_rgb_to_hex(raw) == [rgb_to_hex(*row) for row in raw.tolist()]
