"""
tfeditor Color Values
=====================

Immutable sRGB colors with opacity, the value type carried by color stops
and returned by every sampling function.

Features
--------
- Immutable instances (frozen after initialization)
- Unit float channels, clamped but never rounded
- Coercion from CSS strings and channel tuples
- Conversion to HSL, HSV, Lab, HCL and cubehelix
- ``#rrggbb`` / ``#rrggbbaa`` formatting

Usage
-----
>>> from tfeditor.colors import Color, to_color
>>> blue = to_color("blue")
>>> blue.value
(0.0, 0.0, 1.0, 1.0)
>>> blue.convert("hsl")
(240.0, UnitFloat(1.0), UnitFloat(0.5))
>>> blue.with_alpha(0.5).hex8
'#0000ff80'

Notes
-----
- ``Color`` equality is exact; use ``isclose`` for tolerant comparisons
- ``str(color)`` gives the hex form, with alpha only when not opaque
"""

from .color_base import Color
from .color import ColorInput, color_convert, from_space, to_color


__all__ = ['Color', 'ColorInput', 'color_convert', 'from_space', 'to_color']
