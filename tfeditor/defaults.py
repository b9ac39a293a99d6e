"""Central place for transfer-function editor defaults."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Tuple

from .types.interpolation_method import InterpolationMethod

# Stop collections
POSITION_EPSILON: float = sys.float_info.epsilon  # Minimum gap kept between dragged neighbors
MIN_STOPS: int = 2

# Initial transfer function: a linear opacity ramp and a green-yellow-red map
DEFAULT_ALPHA_STOPS: Tuple[Tuple[float, float], ...] = ((0.0, 0.0), (0.5, 0.5), (1.0, 1.0))
DEFAULT_COLOR_STOPS: Tuple[Tuple[float, str], ...] = ((0.0, "green"), (0.5, "yellow"), (1.0, "red"))
DEFAULT_INTERPOLATION_METHOD: InterpolationMethod = InterpolationMethod.HSL_LONG
DEFAULT_DISCRETE: bool = False
DEFAULT_BINS: int = 7

# Color picker
DEFAULT_PICKER_COLOR: str = "#ffffff"

# Rasterization
DEFAULT_RASTER_WIDTH: int = 256
DEFAULT_RASTER_HEIGHT: int = 1


@dataclass(frozen=True)
class TransferFunctionOptions:
    """
    Options for a new transfer function.

    Attributes:
        initial_alpha_stops: ``(position, alpha)`` pairs, or AlphaStop records
        initial_color_stops: ``(position, color)`` pairs, or ColorStop records
        interpolation_method: Method used between color stops
        discrete: Whether the color map starts out quantized
        bins: Number of bins used when discrete
        position_epsilon: Minimum gap a dragged stop keeps from its neighbors
        min_stops: Minimum size of each stop collection
    """
    initial_alpha_stops: Tuple[Any, ...] = DEFAULT_ALPHA_STOPS
    initial_color_stops: Tuple[Any, ...] = DEFAULT_COLOR_STOPS
    interpolation_method: InterpolationMethod = DEFAULT_INTERPOLATION_METHOD
    discrete: bool = DEFAULT_DISCRETE
    bins: int = DEFAULT_BINS
    position_epsilon: float = POSITION_EPSILON
    min_stops: int = MIN_STOPS

    def __post_init__(self):
        if not self.position_epsilon >= 0.0:
            raise ValueError(f"position_epsilon must be >= 0, got {self.position_epsilon!r}")
        if self.min_stops < 2:
            raise ValueError(f"min_stops must be >= 2, got {self.min_stops!r}")
        object.__setattr__(self, 'interpolation_method',
                           InterpolationMethod.coerce(self.interpolation_method))
