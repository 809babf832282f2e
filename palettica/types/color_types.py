from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
HexColor = str  # six uppercase hexits, no '#'
RGBTuple = Tuple[int, int, int]
FloatRGBTuple = Tuple[float, float, float]
HSLTuple = Tuple[float, float, float]
ColorElement = Union[RGBTuple, FloatRGBTuple, HSLTuple]
ColorValue = Union[ColorElement, ndarray]
ColorSpace = Literal["rgb", "hsl"]
HUE_SPACES = {"hsl"}

CHANNEL_MAX = 255


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Tuple of channels or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.asarray(element, dtype=float)


def is_hue_space(color_space: ColorSpace) -> bool:
    """
    Check if the given color space is hue-based.

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES
