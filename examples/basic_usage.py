"""Basic Palettica usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from palettica import (
    ColorRGB,
    as_grid,
    generate_variations,
    normalize_hex,
    np_hsl_to_rgb,
    np_rgb_to_hsl,
)
from palettica.conversions import np_rgb_to_hex


def demonstrate_colors() -> None:
    # Construct typed colors and move between spaces.
    accent = ColorRGB.from_hex("#f50")
    print("RGB:", accent.value)

    hsl = accent.to_hsl()
    print("HSL:", hsl.value)
    print("Complement:", hsl.shift(hue=0.5).to_hex())


def demonstrate_variations() -> None:
    hex_color = normalize_hex("  #3366cc ")
    if hex_color is None:
        print("Invalid Hex Code")
        return
    for row in as_grid(generate_variations(hex_color)):
        print("  ".join(f"{v.hex} {v.name:<18}" for v in row))


def demonstrate_arrays() -> None:
    # Darken a batch of colors in one pass.
    rgb = np.array([[255, 85, 0], [51, 102, 204], [128, 128, 128]])
    hsl = np_rgb_to_hsl(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    darker = np_hsl_to_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2] - 0.2)
    print("Darker:", np_rgb_to_hex(darker))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_variations()
    demonstrate_arrays()
