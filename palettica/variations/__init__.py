from .palette import (
    ColorVariation,
    VariationSpec,
    VARIATIONS,
    VARIATION_NAMES,
    ORIGINAL,
    generate_variations,
    as_grid,
)

__all__ = [
    "ColorVariation",
    "VariationSpec",
    "VARIATIONS",
    "VARIATION_NAMES",
    "ORIGINAL",
    "generate_variations",
    "as_grid",
]
