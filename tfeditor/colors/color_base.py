from __future__ import annotations
from typing import Any, Callable, ClassVar, Tuple
import math

from ..conversions import format_hex, format_hex8, scale, FormatType
from ..types.color_types import ColorSpace, RGBATuple, RGBTuple


class Color:
    """
    Immutable sRGB color with an opacity channel.

    Channels are unit floats. Values are clamped to [0, 1] on construction
    but never rounded, so colors produced by interpolation keep their full
    precision until they are formatted.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgb"
    maxima: ClassVar[RGBATuple] = (1.0, 1.0, 1.0, 1.0)
    null_value: ClassVar[RGBATuple] = (0.0, 0.0, 0.0, 1.0)
    convert: Callable[[Color, ColorSpace], Tuple[float, float, float]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: float, g: float, b: float, opacity: float = 1.0) -> None:
        value = []
        for channel, maximum in zip((r, g, b, opacity), self.maxima):
            channel = float(channel)
            if math.isnan(channel):
                raise ValueError(f"{self.__class__.__name__} channels must be numbers, got NaN")
            value.append(max(0.0, min(channel, maximum)))

        # safe assignment; __setattr__ still allows it during init
        self._value = tuple(value)

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> RGBATuple:
        return self._value

    @property
    def r(self) -> float:
        return self._value[0]

    @property
    def g(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    @property
    def opacity(self) -> float:
        return self._value[3]

    @property
    def rgb(self) -> RGBTuple:
        return self._value[:3]

    @property
    def has_alpha(self) -> bool:
        """True when the color is not fully opaque."""
        return self.opacity < 1.0

    @property
    def hex(self) -> str:
        """``#rrggbb``; opacity is dropped."""
        return format_hex(*self.rgb)

    @property
    def hex8(self) -> str:
        """``#rrggbbaa``."""
        return format_hex8(*self._value)

    def to_format(self, format_type: FormatType = FormatType.INT) -> Tuple:
        """RGB channels scaled to ``format_type`` (e.g. 0-255 ints)."""
        return scale(self.rgb, "rgb", format_type)

    def with_alpha(self, opacity: float) -> Color:
        """Return a copy with a different opacity."""
        return self.__class__(self.r, self.g, self.b, opacity)

    def isclose(self, other: Any, tolerance: float = 1e-6) -> bool:
        """Channel-wise comparison with an absolute tolerance."""
        from .color import to_color  # local import to avoid cycles
        other = to_color(other)
        return all(abs(a - b) <= tolerance for a, b in zip(self._value, other.value))

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Color):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __iter__(self):
        return iter(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(r={self.r!r}, g={self.g!r}, b={self.b!r}, opacity={self.opacity!r})"

    def __str__(self) -> str:
        return self.hex if self.opacity == 1.0 else self.hex8
