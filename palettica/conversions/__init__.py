"""
Palettica Color Conversions
===========================

Scalar and vectorized (numpy) conversions between hex strings, 8-bit RGB and
unit HSL.

Conversion Functions
-------------------

Hex:
    normalize_hex(value)
        Validate user input, expand shorthand, uppercase. Returns None if invalid
    parse_hex(value)
        Same as normalize_hex but raises InvalidHexError
    hex_to_rgb(hex_color)
        "FF5500" -> (255, 85, 0)
    rgb_to_hex(r, g, b)
        Clamp to [0, 255], round half up, "#RRGGBB"
    np_rgb_to_int(rgb) / np_rgb_to_hex(rgb) / np_hex_to_rgb(hexes)
        Vectorized versions

RGB → HSL:
    rgb_to_hsl(r, g, b)
        Channels in [0, 255] to (h, s, l) in [0, 1]
    np_rgb_to_hsl(r, g, b)
        Vectorized RGB to HSL conversion

HSL → RGB:
    hsl_to_rgb(h, s, l)
        Unclamped channels scaled to 255
    hsl_to_hex(h, s, l)
        HSL straight to "#RRGGBB"; hue wrapped as (h + 1) mod 1
    np_hsl_to_rgb(h, s, l)
        Vectorized HSL to RGB conversion

High-Level API
-------------
    convert(color, from_space, to_space)
    np_convert(color, from_space, to_space)

Examples
--------
>>> from palettica.conversions import normalize_hex, hex_to_rgb, rgb_to_hsl, hsl_to_hex
>>> hex_color = normalize_hex("#f50")
>>> hex_color
'FF5500'
>>> h, s, l = rgb_to_hsl(*hex_to_rgb(hex_color))
>>> hsl_to_hex(h + 0.5, s, l)
'#00AAFF'
"""

# Hex
from .hex import (
    HEX_PATTERN,
    InvalidHexError,
    normalize_hex,
    is_valid_hex,
    parse_hex,
    hex_to_rgb,
    rgb_to_hex,
    to_channel,
    np_hex_to_rgb,
    np_rgb_to_int,
    np_rgb_to_hex,
)

# RGB → HSL conversions
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl

# HSL → RGB conversions
from .to_rgb import (
    wrap_hue,
    hue_to_channel,
    hsl_to_rgb,
    hsl_to_hex,
    np_hsl_to_rgb,
)

# High-level API
from .wrapper import convert, np_convert

__all__ = [
    # Hex
    'HEX_PATTERN',
    'InvalidHexError',
    'normalize_hex',
    'is_valid_hex',
    'parse_hex',
    'hex_to_rgb',
    'rgb_to_hex',
    'to_channel',
    'np_hex_to_rgb',
    'np_rgb_to_int',
    'np_rgb_to_hex',

    # RGB → HSL
    'rgb_to_hsl',
    'np_rgb_to_hsl',

    # HSL → RGB
    'wrap_hue',
    'hue_to_channel',
    'hsl_to_rgb',
    'hsl_to_hex',
    'np_hsl_to_rgb',

    # High-level API
    'convert',
    'np_convert',
]
