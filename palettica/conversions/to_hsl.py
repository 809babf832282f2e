import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import CHANNEL_MAX, HSLTuple, Scalar

## RGB to HSL conversions

def rgb_to_hsl(r: Scalar, g: Scalar, b: Scalar) -> HSLTuple:
    """
    Convert 8-bit RGB to HSL.

    The hue branch is chosen by the maximum channel, checked in the order
    red, green, blue. Equal channels therefore resolve towards red first.

    Args:
        r: Red component in [0, 255]
        g: Green component in [0, 255]
        b: Blue component in [0, 255]

    Returns:
        Tuple[float, float, float]: (hue [0, 1), saturation [0, 1], lightness [0, 1])
    """
    r, g, b = r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2

    if max_c == min_c:
        return 0.0, 0.0, lightness

    delta = max_c - min_c
    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    if max_c == r:
        hue = ((g - b) / delta) % 6
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4

    return hue / 6, saturation, lightness


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert 8-bit RGB to HSL.

    Uses the same branch order as :func:`rgb_to_hsl`, so ties between
    channels resolve identically.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0, 1), saturation [0, 1], lightness [0, 1])
    """
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float) / CHANNEL_MAX,
        np.asarray(g, dtype=float) / CHANNEL_MAX,
        np.asarray(b, dtype=float) / CHANNEL_MAX,
    )

    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2

    chromatic = max_c != min_c
    safe_delta = np.where(chromatic, delta, 1.0)

    # Saturation
    denom = np.where(lightness > 0.5, 2 - max_c - min_c, max_c + min_c)
    saturation = np.where(chromatic, delta / np.where(chromatic, denom, 1.0), 0.0)

    # Hue
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & ~mask_r & (max_c == g)
    mask_b = chromatic & ~mask_r & ~mask_g

    hue = np.zeros_like(lightness)
    hue = np.where(mask_r, ((g - b) / safe_delta) % 6, hue)
    hue = np.where(mask_g, (b - r) / safe_delta + 2, hue)
    hue = np.where(mask_b, (r - g) / safe_delta + 4, hue)

    return np.stack([hue / 6, saturation, lightness], axis=-1)
