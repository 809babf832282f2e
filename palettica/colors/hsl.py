from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Tuple

from ..conversions.to_rgb import hsl_to_hex, hsl_to_rgb
from ..types.color_types import ColorSpace, HSLTuple, Scalar
from .color_base import ColorBase

if TYPE_CHECKING:
    from .rgb import ColorRGB


class ColorHSL(ColorBase):
    """
    HSL color with unit components.

    Components are kept as given, including values outside [0, 1]; they are
    wrapped and clamped only when the color is encoded back to RGB or hex.
    """

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace] = "hsl"
    null_value: ClassVar[HSLTuple] = (0.0, 0.0, 0.0)

    @classmethod
    def _coerce(cls, value: Tuple[Scalar, ...]) -> HSLTuple:
        h, s, l = (float(v) for v in value)
        return h, s, l

    @property
    def hue(self) -> float:
        return self._value[0]

    @property
    def saturation(self) -> float:
        return self._value[1]

    @property
    def lightness(self) -> float:
        return self._value[2]

    def shift(self, hue: float = 0.0, saturation: float = 0.0, lightness: float = 0.0) -> ColorHSL:
        """Return a new color with each component offset by the given amount."""
        h, s, l = self._value
        return ColorHSL((h + hue, s + saturation, l + lightness))

    def scale_saturation(self, factor: float) -> ColorHSL:
        h, s, l = self._value
        return ColorHSL((h, s * factor, l))

    def to_hex(self) -> str:
        return hsl_to_hex(*self._value)

    def to_rgb(self) -> ColorRGB:
        from .rgb import ColorRGB
        return ColorRGB(hsl_to_rgb(*self._value))


HSL = ColorHSL
