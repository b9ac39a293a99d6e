from .format_type import FormatType, max_non_hue
from .color_types import ColorSpace, COLOR_SPACES
from .interpolation_method import InterpolationMethod

__all__ = [
    "FormatType",
    "max_non_hue",
    "ColorSpace",
    "COLOR_SPACES",
    "InterpolationMethod",
]
