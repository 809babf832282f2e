import numpy as np
from typing import Callable, cast

from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_rgb import hsl_to_rgb, np_hsl_to_rgb

from ..types.color_types import ColorElement, ColorSpace, element_to_array

CONVERT_SCALAR: dict[tuple[str, str], Callable[[float, float, float], ColorElement]] = {
    ("rgb", "hsl"): rgb_to_hsl,
    ("hsl", "rgb"): hsl_to_rgb,
}

CONVERT_NUMPY: dict[tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("rgb", "hsl"): np_rgb_to_hsl,
    ("hsl", "rgb"): np_hsl_to_rgb,
}


def _key(from_space: ColorSpace, to_space: ColorSpace) -> tuple[str, str]:
    key = (from_space.lower(), to_space.lower())
    if key[0] not in ("rgb", "hsl") or key[1] not in ("rgb", "hsl"):
        raise ValueError(f"Unknown conversion: {from_space} -> {to_space}")
    return key


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> ColorElement:
    """
    Convert one color between ``"rgb"`` (0-255 channels) and ``"hsl"`` (unit floats).

    RGB results are raw floats; clamp them with ``rgb_to_hex`` or ``ColorRGB``.
    """
    key = _key(from_space, to_space)
    if key[0] == key[1]:
        return color  # No conversion needed
    a, b, c = color
    return CONVERT_SCALAR[key](a, b, c)


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> np.ndarray:
    """Vectorized :func:`convert` for arrays of shape (..., 3)."""
    key = _key(from_space, to_space)
    if key[0] == key[1]:
        return color  # No conversion needed
    arr = element_to_array(color)
    return cast(np.ndarray, CONVERT_NUMPY[key](arr[..., 0], arr[..., 1], arr[..., 2]))
