from .color_types import (
    Scalar,
    HexColor,
    RGBTuple,
    FloatRGBTuple,
    HSLTuple,
    ColorElement,
    ColorValue,
    ColorSpace,
    CHANNEL_MAX,
    element_to_array,
    is_hue_space,
)

__all__ = [
    "Scalar",
    "HexColor",
    "RGBTuple",
    "FloatRGBTuple",
    "HSLTuple",
    "ColorElement",
    "ColorValue",
    "ColorSpace",
    "CHANNEL_MAX",
    "element_to_array",
    "is_hue_space",
]
