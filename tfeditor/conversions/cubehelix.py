"""Dave Green's cubehelix color space.

Reference: https://people.phy.cam.ac.uk/dag9/CUBEHELIX/

A color is (h, s, l): a hue angle in degrees, a saturation (amplitude of the
helix around the gray diagonal) and a lightness along the diagonal.
"""
import math
from .numbers import is_undefined
from .lab import DEG_TO_RAD, RAD_TO_DEG

A = -0.14861
B = +1.78277
C = -0.29227
D = -0.90649
E = +1.97294
ED = E * D
EB = E * B
BC_DA = B * C - D * A

# Rounding noise left on the gray diagonal
ACHROMATIC_TOLERANCE = 1e-12


def unit_rgb_to_cubehelix(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert nonlinear sRGB (0..1) to cubehelix.

    Returns:
        (h in [0, 360) or NaN, s or NaN, l); grays have no hue, black and
        white have neither hue nor saturation.
    """
    l = (BC_DA * b + ED * r - EB * g) / (BC_DA + ED - EB)
    bl = b - l
    k = (E * (g - l) - C * bl) / D
    denominator = E * l * (1 - l)
    magnitude = math.sqrt(k * k + bl * bl)

    if denominator == 0:
        s = math.nan
    elif magnitude < ACHROMATIC_TOLERANCE:
        s = 0.0
    else:
        s = magnitude / denominator

    if s and not is_undefined(s):
        h = math.atan2(k, bl) * RAD_TO_DEG - 120
        if h < 0:
            h += 360
    else:
        h = math.nan
    return h, s, l


def cubehelix_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert cubehelix to nonlinear sRGB (0..1), unclamped."""
    h_rad = 0.0 if is_undefined(h) else (h + 120) * DEG_TO_RAD
    amplitude = 0.0 if is_undefined(s) else s * l * (1 - l)
    cos_h = math.cos(h_rad)
    sin_h = math.sin(h_rad)
    return (
        l + amplitude * (A * cos_h + B * sin_h),
        l + amplitude * (C * cos_h + D * sin_h),
        l + amplitude * (E * cos_h),
    )
