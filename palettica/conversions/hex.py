import logging
import math
import re
from typing import Optional, Sequence

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import clamp
from boundednumbers.np_functions import clamp as np_clamp

from ..types.color_types import CHANNEL_MAX, HexColor, RGBTuple, Scalar

logger = logging.getLogger(__name__)

HEX_PATTERN = re.compile(r"^([0-9A-F]{3}){1,2}$", re.IGNORECASE)


class InvalidHexError(ValueError):
    """Raised by the strict parsers when a string is not a 3 or 6 digit hex color."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}")


## Normalization

def normalize_hex(value: str) -> Optional[HexColor]:
    """
    Validate and normalize a user supplied hex color.

    The first ``#`` is removed wherever it appears, then surrounding whitespace.
    Three digit shorthand is expanded by doubling each digit.

    Args:
        value: Raw input such as ``"#abc"``, ``" FF5500 "`` or ``"ff5500"``

    Returns:
        Six uppercase hexits without ``#``, or ``None`` when the input is invalid.
    """
    query = value.replace("#", "", 1).strip()
    if not HEX_PATTERN.match(query):
        logger.debug("Rejected hex input %r", value)
        return None
    if len(query) == 3:
        query = "".join(c + c for c in query)
    return query.upper()


def is_valid_hex(value: str) -> bool:
    return normalize_hex(value) is not None


def parse_hex(value: str) -> HexColor:
    """Strict form of :func:`normalize_hex`; raises :class:`InvalidHexError`."""
    normalized = normalize_hex(value)
    if normalized is None:
        raise InvalidHexError(value)
    return normalized


## Hex <-> RGB

def hex_to_rgb(hex_color: HexColor) -> RGBTuple:
    """
    Split a normalized hex color into integer channels.

    No validation happens here; pass the output of :func:`normalize_hex`.
    """
    r, g, b = (int(hex_color[p:p + 2], 16) for p in (0, 2, 4))
    return r, g, b


def to_channel(value: Scalar) -> int:
    """Clamp to [0, 255] and round half up."""
    return int(math.floor(clamp(value, 0, CHANNEL_MAX) + 0.5))


def rgb_to_hex(r: Scalar, g: Scalar, b: Scalar) -> str:
    """
    Encode three channels as ``#RRGGBB``.

    Channels may be fractional or outside [0, 255]; this is the one place where
    they are clamped and rounded, so callers should pass raw values.

    Returns:
        str: uppercase, zero padded, ``#`` prefixed hex string
    """
    return "#" + "".join(f"{to_channel(c):02X}" for c in (r, g, b))


## Vectorized helpers

def np_hex_to_rgb(hex_colors: Sequence[HexColor]) -> NDArray:
    """
    Vectorized: parse normalized hex colors.

    Returns:
        int array of shape (n, 3)
    """
    packed = np.array([int(h, 16) for h in hex_colors], dtype=np.int64)
    return np.stack([(packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF], axis=-1)


def np_rgb_to_int(rgb: NDArray) -> NDArray:
    """
    Vectorized: clamp and round-half-up channels, same rules as :func:`rgb_to_hex`.

    Args:
        rgb: array-like of shape (..., 3), any real values

    Returns:
        int array of the same shape, values in [0, 255]
    """
    rgb = np.asarray(rgb, dtype=float)
    return np.floor(np_clamp(rgb, 0, CHANNEL_MAX) + 0.5).astype(np.int64)


def np_rgb_to_hex(rgb: NDArray) -> list[str]:
    """Vectorized: encode an (n, 3) array of raw channels as ``#RRGGBB`` strings."""
    channels = np_rgb_to_int(rgb).reshape(-1, 3)
    return [f"#{r:02X}{g:02X}{b:02X}" for r, g, b in channels.tolist()]
