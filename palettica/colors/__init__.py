"""
Palettica Color Classes
=======================

Immutable value classes for 8-bit RGB and unit HSL colors.

Features
--------
- Immutable color instances (frozen after initialization)
- Value equality and hashing
- RGB channels clamped and rounded on construction
- HSL components kept raw; wrapped and clamped only on encode

Usage
-----
>>> from palettica.colors import ColorRGB
>>> color = ColorRGB.from_hex("#f50")
>>> color.value
(255, 85, 0)
>>> color.to_hsl().shift(hue=0.5).to_hex()
'#00AAFF'

Notes
-----
- ``ColorRGB.from_hex`` raises ``InvalidHexError`` for malformed input; use
  ``normalize_hex`` when a non-raising check is wanted.
"""

from .color_base import ColorBase
from .rgb import ColorRGB, RGB
from .hsl import ColorHSL, HSL

unified_tuple_to_class: dict[str, type[ColorBase]] = {
    ColorRGB.mode: ColorRGB,
    ColorHSL.mode: ColorHSL,
}


def color_convert(color: ColorBase, to_space: str) -> ColorBase:
    """
    Convert a color to another space.

    Args:
        color: Source color
        to_space: ``"rgb"`` or ``"hsl"``

    Returns:
        New ColorBase instance in the target space
    """
    to_space = to_space.lower()
    if to_space not in unified_tuple_to_class:
        raise ValueError(f"Unsupported color space: {to_space}")
    if to_space == color.mode:
        return color
    if isinstance(color, ColorRGB):
        return color.to_hsl()
    return color.to_rgb()  # type: ignore[attr-defined]


__all__ = ['ColorBase', 'ColorRGB', 'ColorHSL', 'RGB', 'HSL', 'color_convert', 'unified_tuple_to_class']
