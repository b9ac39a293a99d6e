"""
tfeditor Color Interpolation
============================

Blending between two colors in one of ten interpolation methods.

Usage
-----
>>> from tfeditor.interpolation import get_color_interpolator
>>> blend = get_color_interpolator("HSL")("red", "blue")
>>> blend(0.5).hex
'#ff00ff'

Notes
-----
- Hue methods travel the short arc; ``*_LONG`` methods the long one
- A gray endpoint borrows the hue of the other endpoint
"""

from .hue import HueMode, HueMemory, hue_delta, hue_interpolator, hue_lerp
from .interpolators import (
    ColorAt,
    ColorInterpolator,
    INTERPOLATORS,
    channel_interpolator,
    cylindrical,
    get_color_interpolator,
    interpolate,
    interpolate_lab,
    interpolate_rgb,
)
from .scale import PiecewiseScale, interpolate_number


__all__ = [
    'HueMode', 'HueMemory', 'hue_delta', 'hue_interpolator', 'hue_lerp',
    'ColorAt', 'ColorInterpolator', 'INTERPOLATORS', 'channel_interpolator',
    'cylindrical', 'get_color_interpolator', 'interpolate', 'interpolate_lab',
    'interpolate_rgb', 'PiecewiseScale', 'interpolate_number',
]
