from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Sequence

from ..colors.rgb import ColorRGB
from ..conversions.hex import hex_to_rgb
from ..conversions.to_hsl import rgb_to_hsl
from ..conversions.to_rgb import hsl_to_hex
from ..types.color_types import HexColor, HSLTuple

HSLTransform = Callable[[float, float, float], HSLTuple]

ORIGINAL = "ORIGINAL"
GRID_SIZE = 3


@dataclass(frozen=True)
class ColorVariation:
    """A named transform of a base color, ``hex`` is ``#RRGGBB``."""

    name: str
    hex: str

    def to_rgb(self) -> ColorRGB:
        return ColorRGB(hex_to_rgb(self.hex[1:]))


class VariationSpec(NamedTuple):
    name: str
    transform: HSLTransform | None  # None keeps the input untouched


VARIATIONS: tuple[VariationSpec, ...] = (
    VariationSpec("Lighter Tint", lambda h, s, l: (h, s, l + 0.2)),
    VariationSpec("Analogous Left", lambda h, s, l: (h - 0.08, s, l)),
    VariationSpec("Darker Shade", lambda h, s, l: (h, s, l - 0.2)),
    VariationSpec("Muted/Desaturated", lambda h, s, l: (h, s * 0.5, l)),
    VariationSpec(ORIGINAL, None),
    VariationSpec("Vibrant/Saturated", lambda h, s, l: (h, min(1, s + 0.3), l)),
    VariationSpec("Triadic Shift", lambda h, s, l: (h + 0.33, s, l)),
    VariationSpec("Analogous Right", lambda h, s, l: (h + 0.08, s, l)),
    VariationSpec("Complement", lambda h, s, l: (h + 0.5, s, l)),
)

VARIATION_NAMES: tuple[str, ...] = tuple(spec.name for spec in VARIATIONS)


def generate_variations(hex_color: HexColor) -> List[ColorVariation]:
    """
    Derive the nine variations of a normalized hex color.

    The order is fixed and ``ORIGINAL`` sits at index 4. Transforms may push
    hue, saturation or lightness outside [0, 1]; :func:`hsl_to_hex` wraps and
    clamps them. The original is echoed without an HSL round trip.

    Args:
        hex_color: Six hexits without ``#``, as returned by ``normalize_hex``

    Returns:
        List[ColorVariation]: nine entries in ``VARIATIONS`` order
    """
    h, s, l = rgb_to_hsl(*hex_to_rgb(hex_color))
    variations = []
    for spec in VARIATIONS:
        if spec.transform is None:
            hex_out = "#" + hex_color.upper()
        else:
            hex_out = hsl_to_hex(*spec.transform(h, s, l))
        variations.append(ColorVariation(spec.name, hex_out))
    return variations


def as_grid(variations: Sequence[ColorVariation]) -> List[List[ColorVariation]]:
    """Lay nine variations out as 3x3 rows, ``ORIGINAL`` in the centre."""
    if len(variations) != GRID_SIZE * GRID_SIZE:
        raise ValueError(
            f"Expected {GRID_SIZE * GRID_SIZE} variations, got {len(variations)}"
        )
    return [list(variations[i:i + GRID_SIZE]) for i in range(0, len(variations), GRID_SIZE)]
