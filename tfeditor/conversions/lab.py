"""CIE L*a*b* and its cylindrical form HCL (hue, chroma, luminance).

Both go through CIE XYZ with Bradford-adapted D50 matrices and the D50
reference white, the constants most web color libraries use, so gradients
match what a browser-based editor shows for the same stops.
"""
import math
from .numbers import is_undefined

# Reference white
XN = 0.96422
YN = 1.0
ZN = 0.82521

T0 = 4 / 29
T1 = 6 / 29
T2 = 3 * T1 * T1
T3 = T1 * T1 * T1

DEG_TO_RAD = math.pi / 180
RAD_TO_DEG = 180 / math.pi


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * (c ** (1 / 2.4)) - 0.055


def _xyz_to_lab(t: float) -> float:
    return t ** (1 / 3) if t > T3 else t / T2 + T0


def _lab_to_xyz(t: float) -> float:
    return t * t * t if t > T1 else T2 * (t - T0)


## RGB <-> Lab

def unit_rgb_to_lab(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert nonlinear sRGB (0..1) to CIE Lab.

    Returns:
        (L in [0, 100], a, b); grays come out with a == b == 0 exactly.
    """
    rl = srgb_to_linear(r)
    gl = srgb_to_linear(g)
    bl = srgb_to_linear(b)

    y = _xyz_to_lab((0.2225045 * rl + 0.7168786 * gl + 0.0606169 * bl) / YN)
    if rl == gl == bl:
        x = z = y
    else:
        x = _xyz_to_lab((0.4360747 * rl + 0.3850649 * gl + 0.1430804 * bl) / XN)
        z = _xyz_to_lab((0.0139322 * rl + 0.0971045 * gl + 0.7141733 * bl) / ZN)

    return 116 * y - 16, 500 * (x - y), 200 * (y - z)


def lab_to_unit_rgb(l: float, a: float, b: float) -> tuple[float, float, float]:
    """
    Convert CIE Lab to nonlinear sRGB (0..1).

    The result is not clamped; Lab covers colors outside the sRGB gamut.
    """
    y = (l + 16) / 116
    x = y if is_undefined(a) else y + a / 500
    z = y if is_undefined(b) else y - b / 200

    x = XN * _lab_to_xyz(x)
    y = YN * _lab_to_xyz(y)
    z = ZN * _lab_to_xyz(z)

    return (
        linear_to_srgb(3.1338561 * x - 1.6168667 * y - 0.4906146 * z),
        linear_to_srgb(-0.9787684 * x + 1.9161415 * y + 0.0334540 * z),
        linear_to_srgb(0.0719453 * x - 0.2289914 * y + 1.4052427 * z),
    )


## Lab <-> HCL

def lab_to_hcl(l: float, a: float, b: float) -> tuple[float, float, float]:
    """
    Lab -> HCL. Returns H in degrees [0, 360).

    Neutral colors have no hue (NaN) and zero chroma.
    """
    if a == 0 and b == 0:
        return math.nan, 0.0, l
    h = math.atan2(b, a) * RAD_TO_DEG
    return (h + 360 if h < 0 else h), math.sqrt(a * a + b * b), l


def hcl_to_lab(h: float, c: float, l: float) -> tuple[float, float, float]:
    """HCL -> Lab. H in degrees."""
    if is_undefined(h):
        return l, 0.0, 0.0
    if is_undefined(c):
        c = 0.0
    h_rad = h * DEG_TO_RAD
    return l, math.cos(h_rad) * c, math.sin(h_rad) * c


def unit_rgb_to_hcl(r: float, g: float, b: float) -> tuple[float, float, float]:
    return lab_to_hcl(*unit_rgb_to_lab(r, g, b))


def hcl_to_unit_rgb(h: float, c: float, l: float) -> tuple[float, float, float]:
    return lab_to_unit_rgb(*hcl_to_lab(h, c, l))
