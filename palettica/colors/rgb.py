from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Tuple

from ..conversions.hex import hex_to_rgb, parse_hex, rgb_to_hex, to_channel
from ..conversions.to_hsl import rgb_to_hsl
from ..types.color_types import ColorSpace, HexColor, RGBTuple, Scalar
from .color_base import ColorBase

if TYPE_CHECKING:
    from .hsl import ColorHSL


class ColorRGB(ColorBase):
    """8-bit RGB color. Channels are clamped to [0, 255] and rounded half up."""

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace] = "rgb"
    null_value: ClassVar[RGBTuple] = (0, 0, 0)

    @classmethod
    def _coerce(cls, value: Tuple[Scalar, ...]) -> RGBTuple:
        r, g, b = (to_channel(v) for v in value)
        return r, g, b

    @classmethod
    def from_hex(cls, value: str) -> ColorRGB:
        """
        Build from user input such as ``"#abc"``.

        Raises:
            InvalidHexError: if ``value`` is not a 3 or 6 digit hex color
        """
        return cls(hex_to_rgb(parse_hex(value)))

    @property
    def red(self) -> int:
        return self._value[0]

    @property
    def green(self) -> int:
        return self._value[1]

    @property
    def blue(self) -> int:
        return self._value[2]

    @property
    def hex(self) -> HexColor:
        """Six uppercase hexits, no ``#``."""
        return self.to_hex()[1:]

    def to_hex(self) -> str:
        return rgb_to_hex(*self._value)

    def to_hsl(self) -> ColorHSL:
        from .hsl import ColorHSL
        return ColorHSL(rgb_to_hsl(*self._value))


RGB = ColorRGB
