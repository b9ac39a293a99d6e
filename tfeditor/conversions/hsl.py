import math
from .numbers import UnitFloat, is_undefined


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % 360


## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#Converting_to_RGB

    An undefined (NaN) hue or saturation is treated as a gray of lightness ``l``.

    Args:
        h: Hue in degrees, any real value (wrapped to [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    if is_undefined(h) or is_undefined(s):
        s = 0.0
        h = 0.0
    h = normalize_hue(h)

    m2 = l + (l if l < 0.5 else 1 - l) * s
    m1 = 2 * l - m2

    return (
        _hsl_channel(h + 120 if h < 240 else h - 240, m1, m2),
        _hsl_channel(h, m1, m2),
        _hsl_channel(h - 120 if h >= 120 else h + 240, m1, m2),
    )


def _hsl_channel(h: float, m1: float, m2: float) -> float:
    if h < 60:
        return m1 + (m2 - m1) * h / 60
    if h < 180:
        return m2
    if h < 240:
        return m1 + (m2 - m1) * (240 - h) / 60
    return m1


## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Grays have no hue, so the hue comes back as NaN; black and white have
    no saturation either, so the saturation is NaN for them as well. The
    interpolators fill these gaps from the other endpoint.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, UnitFloat]: (hue [0,360) or NaN, saturation [0,1] or NaN, lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        saturation = 0.0 if 0 < lightness < 1 else math.nan
        return math.nan, saturation, UnitFloat(lightness)

    if max_c == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4
    hue *= 60

    if lightness < 0.5:
        saturation = delta / (max_c + min_c)
    else:
        saturation = delta / (2 - max_c - min_c)

    return hue, UnitFloat(saturation), UnitFloat(lightness)
