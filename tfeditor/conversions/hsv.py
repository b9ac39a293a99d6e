import math
from .numbers import UnitFloat, is_undefined
from .hsl import normalize_hue


def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    HSV from nonlinear sRGB (0..1).

    Input:
        r, g, b ∈ [0, 1]   nonlinear sRGB

    Output:
        h ∈ [0, 360), NaN for grays
        s ∈ [0, 1],   NaN for black
        v ∈ [0, 1]
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    saturation = math.nan if max_c == 0 else delta / max_c

    if delta == 0:
        return math.nan, saturation, UnitFloat(max_c)

    if max_c == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4

    return hue * 60, UnitFloat(saturation), UnitFloat(max_c)


def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to nonlinear sRGB (0..1).

    Args:
        h: Hue in degrees, NaN treated as a gray
        s: Saturation in [0, 1], NaN treated as 0
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    if is_undefined(h) or is_undefined(s):
        return v, v, v

    h = normalize_hue(h)
    sector = int(math.floor(h / 60)) % 6
    f = h / 60 - math.floor(h / 60)
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    if sector == 0:
        return v, t, p
    if sector == 1:
        return q, v, p
    if sector == 2:
        return p, v, t
    if sector == 3:
        return p, q, v
    if sector == 4:
        return t, p, v
    return v, p, q


def hsv_to_hsl(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert HSV to HSL, keeping the hue as is."""
    if is_undefined(s):
        s = 0.0
    lightness = v * (1 - s / 2)
    if lightness in (0.0, 1.0):
        saturation = 0.0
    else:
        saturation = (v - lightness) / min(lightness, 1 - lightness)
    return h, saturation, lightness


def hsl_to_hsv(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert HSL to HSV, keeping the hue as is."""
    if is_undefined(s):
        s = 0.0
    value = l + s * min(l, 1 - l)
    saturation = 0.0 if value == 0 else 2 * (1 - l / value)
    return h, saturation, value
