import math

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import CHANNEL_MAX, FloatRGBTuple
from .hex import rgb_to_hex

ONE_THIRD = 1 / 3
ONE_SIXTH = 1 / 6
TWO_THIRDS = 2 / 3


def wrap_hue(h: float) -> float:
    """
    Wrap a hue into [0, 1) as ``(h + 1) mod 1``.

    The remainder keeps the sign of the dividend, so hues below -1 stay negative.
    """
    return math.fmod(h + 1, 1)


def hue_to_channel(p: float, q: float, t: float) -> float:
    """Evaluate one RGB channel in [0, 1] at hue offset ``t``."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < ONE_SIXTH:
        return p + (q - p) * 6 * t
    if t < 0.5:
        return q
    if t < TWO_THIRDS:
        return p + (q - p) * (TWO_THIRDS - t) * 6
    return p

## HSL to RGB conversions

def hsl_to_rgb(h: float, s: float, l: float) -> FloatRGBTuple:
    """
    Convert HSL to unclamped RGB channels.

    Args:
        h: Hue, any real; wrapped with :func:`wrap_hue`
        s: Saturation, nominally [0, 1]
        l: Lightness, nominally [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) scaled to 255, not clamped or rounded
    """
    h = wrap_hue(h)
    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return (
        hue_to_channel(p, q, h + ONE_THIRD) * CHANNEL_MAX,
        hue_to_channel(p, q, h) * CHANNEL_MAX,
        hue_to_channel(p, q, h - ONE_THIRD) * CHANNEL_MAX,
    )


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """
    Convert HSL to ``#RRGGBB``.

    Any real inputs are accepted; out of range results are clamped by
    :func:`~palettica.conversions.hex.rgb_to_hex`.
    """
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def _np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < ONE_SIXTH, t < 0.5, t < TWO_THIRDS],
        [p + (q - p) * 6 * t, q, p + (q - p) * (TWO_THIRDS - t) * 6],
        default=p,
    )


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to unclamped RGB channels.

    Args:
        h, s, l: array-like or scalar

    Returns:
        rgb: float array of shape (..., 3) scaled to 255
    """
    h, s, l = np.broadcast_arrays(
        np.asarray(h, dtype=float),
        np.asarray(s, dtype=float),
        np.asarray(l, dtype=float),
    )
    h = np.fmod(h + 1, 1)
    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    r = _np_hue_to_channel(p, q, h + ONE_THIRD)
    g = _np_hue_to_channel(p, q, h)
    b = _np_hue_to_channel(p, q, h - ONE_THIRD)
    return np.stack([r, g, b], axis=-1) * CHANNEL_MAX
