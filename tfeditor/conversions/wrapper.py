from typing import Callable, Dict, Tuple

from ..types.format_type import FormatType, max_non_hue
from ..types.color_types import ColorSpace, COLOR_SPACES

from .hsl import unit_rgb_to_hsl, hsl_to_unit_rgb
from .hsv import unit_rgb_to_hsv, hsv_to_unit_rgb, hsv_to_hsl, hsl_to_hsv
from .lab import unit_rgb_to_lab, lab_to_unit_rgb, unit_rgb_to_hcl, hcl_to_unit_rgb, lab_to_hcl, hcl_to_lab
from .cubehelix import unit_rgb_to_cubehelix, cubehelix_to_unit_rgb
from .numbers import is_undefined

Triplet = Tuple[float, float, float]
Conversion = Callable[[float, float, float], Triplet]

# Every space converts to and from unit RGB
FROM_RGB: Dict[str, Conversion] = {
    "hsl": unit_rgb_to_hsl,
    "hsv": unit_rgb_to_hsv,
    "lab": unit_rgb_to_lab,
    "hcl": unit_rgb_to_hcl,
    "cubehelix": unit_rgb_to_cubehelix,
}

TO_RGB: Dict[str, Conversion] = {
    "hsl": hsl_to_unit_rgb,
    "hsv": hsv_to_unit_rgb,
    "lab": lab_to_unit_rgb,
    "hcl": hcl_to_unit_rgb,
    "cubehelix": cubehelix_to_unit_rgb,
}

# Shortcuts that skip the RGB round trip
CONVERT_DIRECT: Dict[Tuple[str, str], Conversion] = {
    ("hsv", "hsl"): hsv_to_hsl,
    ("hsl", "hsv"): hsl_to_hsv,
    ("lab", "hcl"): lab_to_hcl,
    ("hcl", "lab"): hcl_to_lab,
}


def _check_space(space: str) -> str:
    space = space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown space: {space}")
    return space


def convert(color: Triplet, from_space: ColorSpace, to_space: ColorSpace) -> Triplet:
    """
    Convert a three-channel color between any two supported spaces.

    Channels are in their natural units: unit floats for RGB, degrees for
    hues, [0, 100] for Lab/HCL luminance.
    """
    fs = _check_space(from_space)
    ts = _check_space(to_space)
    c0, c1, c2 = color

    if fs == ts:
        return c0, c1, c2
    if (fs, ts) in CONVERT_DIRECT:
        return CONVERT_DIRECT[(fs, ts)](c0, c1, c2)

    rgb = (c0, c1, c2) if fs == "rgb" else TO_RGB[fs](c0, c1, c2)
    if ts == "rgb":
        return rgb
    return FROM_RGB[ts](*rgb)


def scale(color: Triplet, space: ColorSpace, fmt: FormatType) -> Tuple:
    """Scale unit channels to ``fmt``; hue channels stay in degrees."""
    maxval = max_non_hue[FormatType(fmt)]
    if space == "rgb":
        scaled = tuple(c * maxval for c in color)
    elif space in ("hsv", "hsl"):
        scaled = (color[0], color[1] * maxval, color[2] * maxval)
    else:
        raise ValueError(f"Cannot scale space: {space}")

    if fmt == FormatType.INT:
        return tuple(0 if is_undefined(c) else round(c) for c in scaled)
    return scaled


def normalize(color: Tuple, space: ColorSpace, fmt: FormatType) -> Triplet:
    """Inverse of :func:`scale`."""
    maxval = max_non_hue[FormatType(fmt)]
    if space == "rgb":
        return tuple(c / maxval for c in color)
    if space in ("hsv", "hsl"):
        return color[0], color[1] / maxval, color[2] / maxval
    raise ValueError(f"Cannot normalize space: {space}")
