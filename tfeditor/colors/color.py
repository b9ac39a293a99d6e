from __future__ import annotations
from typing import Sequence, Tuple, Union

from .color_base import Color
from ..conversions import convert, parse_css_color
from ..types.color_types import ColorSpace
from ..errors import ColorParseError

ColorInput = Union[Color, str, Sequence[float]]


def color_convert(self: Color, to_space: ColorSpace = "rgb") -> Tuple[float, float, float]:
    """
    Express this color in another color space.

    Args:
        to_space: Target color space ("rgb", "hsl", "hsv", "lab", "hcl", "cubehelix")

    Returns:
        The three channels in ``to_space``; opacity is not included.
    """
    return convert(self.rgb, "rgb", to_space.lower())  # type: ignore


Color.convert = color_convert


def from_space(channels: Sequence[float], color_space: ColorSpace, opacity: float = 1.0) -> Color:
    """Build a color from three channels expressed in ``color_space``."""
    r, g, b = convert(tuple(channels), color_space, "rgb")  # type: ignore
    return Color(r, g, b, opacity)


def to_color(value: ColorInput) -> Color:
    """
    Coerce a color value into a :class:`Color`.

    Accepts a ``Color``, a CSS color string or a tuple/list of three or
    four unit floats (r, g, b[, opacity]).

    Raises:
        ColorParseError: if the value cannot be read as a color
    """
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        try:
            return Color(*parse_css_color(value))
        except ValueError as exc:
            raise ColorParseError(f"Unknown color string: {value!r}") from exc
    if isinstance(value, (tuple, list)):
        if len(value) not in (3, 4):
            raise ColorParseError(f"Expected 3 or 4 channels, got {len(value)}")
        try:
            return Color(*value)
        except (TypeError, ValueError) as exc:
            raise ColorParseError(f"Invalid color channels: {value!r}") from exc
    raise ColorParseError(f"Unsupported color input type: {type(value).__name__}")
