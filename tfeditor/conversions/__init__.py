"""
tfeditor Color Space Conversions
================================

Scalar conversions between sRGB and the spaces the color-map interpolators
work in: HSL, HSV, CIE Lab, HCL and cubehelix, plus CSS color parsing.

Conventions
-----------
- RGB channels are unit floats (0.0-1.0), nonlinear sRGB
- Hues are degrees; a gray has no hue and reports it as NaN
- Lab/HCL luminance runs from 0 to 100
- Saturation/chroma of black and white is NaN where the space cannot define it

Conversion Functions
-------------------

RGB ↔ HSL:
    unit_rgb_to_hsl(r, g, b)
    hsl_to_unit_rgb(h, s, l)

RGB ↔ HSV:
    unit_rgb_to_hsv(r, g, b)
    hsv_to_unit_rgb(h, s, v)

HSV ↔ HSL:
    hsv_to_hsl(h, s, v)
    hsl_to_hsv(h, s, l)

RGB ↔ Lab ↔ HCL:
    unit_rgb_to_lab(r, g, b)
    lab_to_unit_rgb(l, a, b)
    lab_to_hcl(l, a, b)
    hcl_to_lab(h, c, l)

RGB ↔ Cubehelix:
    unit_rgb_to_cubehelix(r, g, b)
    cubehelix_to_unit_rgb(h, s, l)

CSS:
    parse_css_color(text)
    format_hex(r, g, b)
    format_hex8(r, g, b, opacity)

High-Level API
-------------
    convert(color, from_space, to_space)
        Universal three-channel converter routed through RGB

Examples
--------
>>> from tfeditor.conversions import unit_rgb_to_hsl, convert
>>> unit_rgb_to_hsl(1.0, 0.0, 0.0)
(0.0, UnitFloat(1.0), UnitFloat(0.5))
>>> l, a, b = convert((1.0, 1.0, 1.0), "rgb", "lab")
"""

from .hsl import unit_rgb_to_hsl, hsl_to_unit_rgb, normalize_hue
from .hsv import unit_rgb_to_hsv, hsv_to_unit_rgb, hsv_to_hsl, hsl_to_hsv
from .lab import (
    srgb_to_linear,
    linear_to_srgb,
    unit_rgb_to_lab,
    lab_to_unit_rgb,
    lab_to_hcl,
    hcl_to_lab,
    unit_rgb_to_hcl,
    hcl_to_unit_rgb,
)
from .cubehelix import unit_rgb_to_cubehelix, cubehelix_to_unit_rgb
from .css import parse_css_color, format_hex, format_hex8
from .numbers import UnitFloat, clamp01, is_undefined
from .wrapper import convert, scale, normalize

# Types and enums
from ..types.format_type import FormatType

__all__ = [
    'unit_rgb_to_hsl',
    'hsl_to_unit_rgb',
    'normalize_hue',
    'unit_rgb_to_hsv',
    'hsv_to_unit_rgb',
    'hsv_to_hsl',
    'hsl_to_hsv',
    'srgb_to_linear',
    'linear_to_srgb',
    'unit_rgb_to_lab',
    'lab_to_unit_rgb',
    'lab_to_hcl',
    'hcl_to_lab',
    'unit_rgb_to_hcl',
    'hcl_to_unit_rgb',
    'unit_rgb_to_cubehelix',
    'cubehelix_to_unit_rgb',
    'parse_css_color',
    'format_hex',
    'format_hex8',
    'UnitFloat',
    'clamp01',
    'is_undefined',
    'convert',
    'scale',
    'normalize',
    'FormatType',
]
