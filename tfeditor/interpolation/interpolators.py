"""
Color-space interpolators.

Each interpolation method maps to a factory ``(start, end) -> (t -> Color)``.
The factories convert both endpoints once; the returned closure is cheap
to call many times, which is what gradient rendering does.
"""
from __future__ import annotations

import math
from typing import Callable, Dict, Union

from ..colors import Color, ColorInput, from_space, to_color
from ..conversions.numbers import is_undefined
from ..types.color_types import ColorSpace
from ..types.interpolation_method import InterpolationMethod
from .hue import HueMode, hue_interpolator

ColorAt = Callable[[float], Color]
ColorInterpolator = Callable[[ColorInput, ColorInput], ColorAt]


def channel_interpolator(a: float, b: float) -> Callable[[float], float]:
    """Linear ``t -> value`` for one channel, filling an undefined end from the other."""
    if is_undefined(a) and is_undefined(b):
        return lambda t: math.nan
    if is_undefined(a):
        a = b
    elif is_undefined(b):
        b = a
    delta = b - a
    if delta == 0:
        return lambda t: a
    return lambda t: a + t * delta


def interpolate_rgb(start: ColorInput, end: ColorInput) -> ColorAt:
    """Per-channel linear interpolation in sRGB."""
    c0, c1 = to_color(start), to_color(end)
    r = channel_interpolator(c0.r, c1.r)
    g = channel_interpolator(c0.g, c1.g)
    b = channel_interpolator(c0.b, c1.b)
    opacity = channel_interpolator(c0.opacity, c1.opacity)

    def color_at(t: float) -> Color:
        return Color(r(t), g(t), b(t), opacity(t))
    return color_at


def interpolate_lab(start: ColorInput, end: ColorInput) -> ColorAt:
    """Linear interpolation of L*, a* and b*."""
    return _interpolate_cartesian(start, end, "lab")


def _interpolate_cartesian(start: ColorInput, end: ColorInput, color_space: ColorSpace) -> ColorAt:
    c0, c1 = to_color(start), to_color(end)
    channels = [
        channel_interpolator(a, b)
        for a, b in zip(c0.convert(color_space), c1.convert(color_space))
    ]
    opacity = channel_interpolator(c0.opacity, c1.opacity)

    def color_at(t: float) -> Color:
        return from_space([ch(t) for ch in channels], color_space, opacity(t))
    return color_at


def _interpolate_cylindrical(start: ColorInput, end: ColorInput, color_space: ColorSpace,
                             mode: HueMode) -> ColorAt:
    """Hue along ``mode``; the two other channels and opacity linearly."""
    c0, c1 = to_color(start), to_color(end)
    h0, x0, y0 = c0.convert(color_space)
    h1, x1, y1 = c1.convert(color_space)

    hue = hue_interpolator(h0, h1, mode)
    x = channel_interpolator(x0, x1)
    y = channel_interpolator(y0, y1)
    opacity = channel_interpolator(c0.opacity, c1.opacity)

    def color_at(t: float) -> Color:
        return from_space((hue(t), x(t), y(t)), color_space, opacity(t))
    return color_at


def cylindrical(color_space: ColorSpace, mode: HueMode) -> ColorInterpolator:
    """Factory for a hue-space interpolator (HSL, HSV, HCL, cubehelix)."""
    def interpolate(start: ColorInput, end: ColorInput) -> ColorAt:
        return _interpolate_cylindrical(start, end, color_space, mode)
    interpolate.__name__ = f"interpolate_{color_space}_{mode.name.lower()}"
    return interpolate


INTERPOLATORS: Dict[InterpolationMethod, ColorInterpolator] = {
    InterpolationMethod.RGB: interpolate_rgb,
    InterpolationMethod.LAB: interpolate_lab,
}
for _method in InterpolationMethod:
    if _method not in INTERPOLATORS:
        INTERPOLATORS[_method] = cylindrical(
            _method.color_space,
            HueMode.LINEAR if _method.is_long else HueMode.SHORTEST,
        )
del _method


def get_color_interpolator(method: Union[InterpolationMethod, str]) -> ColorInterpolator:
    """
    Return the interpolator factory for ``method``.

    Args:
        method: An :class:`InterpolationMethod` or its name, e.g. ``"HSL_LONG"``

    Returns:
        ``(start, end) -> (t -> Color)``

    Raises:
        ValueError: for an unknown method name
    """
    return INTERPOLATORS[InterpolationMethod.coerce(method)]


def interpolate(start: ColorInput, end: ColorInput, t: float,
                method: Union[InterpolationMethod, str] = InterpolationMethod.RGB) -> Color:
    """One-shot interpolation between two colors."""
    return get_color_interpolator(method)(start, end)(t)
