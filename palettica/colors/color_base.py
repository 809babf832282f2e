from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple

from ..types.color_types import ColorElement, ColorSpace, Scalar, is_hue_space


class ColorBase:
    __slots__ = ('_value', '_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace]
    null_value: ClassVar[ColorElement]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorElement) -> None:
        if len(value) != self.num_channels:
            raise ValueError(
                f"{self.mode} expects {self.num_channels} channels, got {len(value)}"
            )

        # safe assignment; __setattr__ still allows it during init
        self._value = self._coerce(tuple(value))

        # freeze instance — no more writes allowed
        super().__setattr__('_frozen', True)

    @classmethod
    def _coerce(cls, value: Tuple[Scalar, ...]) -> ColorElement:
        """Subclasses enforce channel types and ranges here."""
        return tuple(float(v) for v in value)  # type: ignore[return-value]

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorElement:
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"
