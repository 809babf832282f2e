"""Palettica: hex color normalization, RGB/HSL conversion and nine-swatch variations."""

from .conversions import (
    InvalidHexError,
    normalize_hex,
    parse_hex,
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    hsl_to_rgb,
    hsl_to_hex,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    convert,
    np_convert,
)
from .colors import ColorBase, ColorRGB, ColorHSL, color_convert
from .variations import (
    ColorVariation,
    VARIATION_NAMES,
    generate_variations,
    as_grid,
)

__version__ = "1.0.0"

__all__ = [
    # conversions
    "InvalidHexError",
    "normalize_hex",
    "parse_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hsl_to_hex",
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    "convert",
    "np_convert",
    # core color types
    "ColorBase",
    "ColorRGB",
    "ColorHSL",
    "color_convert",
    # variations
    "ColorVariation",
    "VARIATION_NAMES",
    "generate_variations",
    "as_grid",
    "__version__",
]
