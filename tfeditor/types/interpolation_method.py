from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

from .color_types import ColorSpace


class InterpolationMethod(str, Enum):
    """
    Methods of interpolating between two color stops.

    Every method except RGB and LAB interpolates in a cylindrical space;
    the ``_LONG`` variants blend hue as a plain number from the first stop
    to the second, without taking the shorter way through 0/360.
    """
    RGB = "RGB"
    HSL = "HSL"
    HSL_LONG = "HSL_LONG"
    HSV = "HSV"
    HSV_LONG = "HSV_LONG"
    HCL = "HCL"
    HCL_LONG = "HCL_LONG"
    LAB = "LAB"
    CUBEHELIX = "CUBEHELIX"
    CUBEHELIX_LONG = "CUBEHELIX_LONG"

    @classmethod
    def coerce(cls, value: Union[InterpolationMethod, str]) -> InterpolationMethod:
        """Accept an enum member or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                pass
        raise ValueError(f"Unknown interpolation method: {value!r}")

    @property
    def color_space(self) -> ColorSpace:
        return _METHOD_SPACES[self][0]

    @property
    def is_long(self) -> bool:
        return _METHOD_SPACES[self][1]


_METHOD_SPACES: dict[InterpolationMethod, Tuple[ColorSpace, bool]] = {
    InterpolationMethod.RGB: ("rgb", False),
    InterpolationMethod.HSL: ("hsl", False),
    InterpolationMethod.HSL_LONG: ("hsl", True),
    InterpolationMethod.HSV: ("hsv", False),
    InterpolationMethod.HSV_LONG: ("hsv", True),
    InterpolationMethod.HCL: ("hcl", False),
    InterpolationMethod.HCL_LONG: ("hcl", True),
    InterpolationMethod.LAB: ("lab", False),
    InterpolationMethod.CUBEHELIX: ("cubehelix", False),
    InterpolationMethod.CUBEHELIX_LONG: ("cubehelix", True),
}
