import re

import pytest

from palettica.conversions import hex_to_rgb, normalize_hex, rgb_to_hsl
from palettica.colors import ColorRGB
from palettica.variations import (
    ColorVariation,
    VARIATION_NAMES,
    ORIGINAL,
    generate_variations,
    as_grid,
)
from samples import samples_ff5500_variations

HEX_OUTPUT = re.compile(r"^#[0-9A-F]{6}$")

expected_names = [
    "Lighter Tint",
    "Analogous Left",
    "Darker Shade",
    "Muted/Desaturated",
    "ORIGINAL",
    "Vibrant/Saturated",
    "Triadic Shift",
    "Analogous Right",
    "Complement",
]


def _lightness(variation: ColorVariation) -> float:
    return rgb_to_hsl(*hex_to_rgb(variation.hex[1:]))[2]


def test_nine_variations_with_original_in_the_middle():
    variations = generate_variations("FF5500")
    assert len(variations) == 9
    assert variations[4] == ColorVariation("ORIGINAL", "#FF5500")


def test_hex_format():
    for hex_color in ["FF5500", "000000", "FFFFFF", "808080", "123456", "00FF00"]:
        for v in generate_variations(hex_color):
            assert HEX_OUTPUT.match(v.hex), v


def test_names_in_order():
    for hex_color in ["FF5500", "000000", "ABCDEF"]:
        assert [v.name for v in generate_variations(hex_color)] == expected_names
    assert list(VARIATION_NAMES) == expected_names
    assert VARIATION_NAMES[4] == ORIGINAL


def test_ff5500_variations():
    variations = generate_variations("FF5500")
    assert [(v.name, v.hex) for v in variations] == samples_ff5500_variations


def test_mid_gray_tint_and_shade():
    variations = generate_variations("808080")
    original = variations[4]
    assert _lightness(variations[0]) > _lightness(original)
    assert _lightness(variations[2]) < _lightness(original)
    assert variations[0].hex == "#B3B3B3"
    assert variations[2].hex == "#4D4D4D"


def test_original_echoed_without_round_trip():
    for user_input in ["#010203", "fedcba", "  #abc "]:
        hex_color = normalize_hex(user_input)
        assert generate_variations(hex_color)[4].hex == "#" + hex_color


def test_original_uppercased():
    assert generate_variations("ff5500")[4].hex == "#FF5500"


def test_extremes_clamp():
    white = generate_variations("FFFFFF")
    assert white[0].hex == "#FFFFFF"
    black = generate_variations("000000")
    assert black[2].hex == "#000000"


def test_deterministic():
    assert generate_variations("3366CC") == generate_variations("3366CC")


def test_variation_to_rgb():
    assert ColorVariation("ORIGINAL", "#FF5500").to_rgb() == ColorRGB((255, 85, 0))


def test_variation_is_immutable():
    variation = ColorVariation("ORIGINAL", "#FF5500")
    with pytest.raises(AttributeError):
        variation.hex = "#000000"


def test_as_grid():
    variations = generate_variations("FF5500")
    grid = as_grid(variations)
    assert len(grid) == 3
    assert all(len(row) == 3 for row in grid)
    assert grid[1][1].name == ORIGINAL
    assert [v for row in grid for v in row] == variations


def test_as_grid_wrong_length():
    with pytest.raises(ValueError):
        as_grid(generate_variations("FF5500")[:8])
