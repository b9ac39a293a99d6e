"""CSS color strings <-> unit RGB(A).

Parsing is delegated to Pillow's ``ImageColor``, which understands the CSS
named colors, ``#rgb``/``#rrggbb``/``#rrggbbaa`` hex notation and the
``rgb()``, ``rgba()``, ``hsl()`` and ``hsv()`` functional forms.
"""
from __future__ import annotations

from PIL import ImageColor

from .numbers import clamp01
from ..types.format_type import FormatType, max_non_hue


def parse_css_color(text: str) -> tuple[float, float, float, float]:
    """
    Parse a CSS color string.

    Args:
        text: e.g. ``"blue"``, ``"#ff8000"``, ``"rgb(255, 128, 0)"``

    Returns:
        (r, g, b, opacity), every channel in [0, 1]

    Raises:
        ValueError: if Pillow does not recognise the string
    """
    channels = ImageColor.getrgb(text.strip())
    maxval = max_non_hue[FormatType.INT]
    r, g, b = (c / maxval for c in channels[:3])
    opacity = channels[3] / maxval if len(channels) == 4 else 1.0
    return r, g, b, opacity


def _hex_byte(c: float) -> str:
    return f"{round(clamp01(c) * max_non_hue[FormatType.INT]):02x}"


def format_hex(r: float, g: float, b: float) -> str:
    """Unit RGB -> ``#rrggbb``."""
    return "#" + "".join(_hex_byte(c) for c in (r, g, b))


def format_hex8(r: float, g: float, b: float, opacity: float) -> str:
    """Unit RGBA -> ``#rrggbbaa``."""
    return format_hex(r, g, b) + _hex_byte(opacity)
