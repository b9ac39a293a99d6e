from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Tuple

from ..colors import Color
from ..defaults import DEFAULT_BINS, DEFAULT_COLOR_STOPS, DEFAULT_INTERPOLATION_METHOD
from ..errors import DegenerateBinsError
from ..stops import ColorStop
from ..types.interpolation_method import InterpolationMethod


def check_bins(bins: Any, discrete: bool = True) -> int:
    """
    Return ``bins`` as an int.

    ``bins`` only matters in discrete mode, so the lower bound of 1 is only
    enforced when ``discrete`` is true; the type is checked either way.

    Raises:
        TypeError: if ``bins`` is not an int
        DegenerateBinsError: if ``discrete`` and ``bins`` is below 1
    """
    if isinstance(bins, bool) or not isinstance(bins, int):
        raise TypeError(f"bins must be an int, got {type(bins).__name__}")
    if discrete and bins < 1:
        raise DegenerateBinsError(bins)
    return bins


@dataclass(frozen=True)
class ColorMap:
    """
    Color part of a transfer function.

    ``bins`` only matters when ``discrete`` is true, but is kept either way;
    a continuous map may carry ``bins=0``.
    """
    color_stops: Tuple[ColorStop, ...] = DEFAULT_COLOR_STOPS
    interpolation_method: InterpolationMethod = DEFAULT_INTERPOLATION_METHOD
    discrete: bool = False
    bins: int = DEFAULT_BINS

    def __post_init__(self):
        object.__setattr__(self, 'color_stops', tuple(ColorStop.coerce(s) for s in self.color_stops))
        object.__setattr__(self, 'interpolation_method',
                           InterpolationMethod.coerce(self.interpolation_method))
        object.__setattr__(self, 'discrete', bool(self.discrete))


@dataclass(frozen=True)
class ColorMapBin:
    """One flat-colored slice ``[lower_bound, upper_bound)`` of a discrete color map."""
    lower_bound: float
    center: float
    upper_bound: float
    color: Color


def bin_index(position: float, span: Tuple[float, float], bins: int) -> int:
    """Index of the bin holding ``position``; positions past the span land in the edge bins."""
    low, high = span
    relative = (position - low) / (high - low)
    return max(0, min(math.floor(relative * bins), bins - 1))


def bin_representative(index: int, span: Tuple[float, float], bins: int) -> float:
    """
    Position whose continuous color stands for bin ``index``.

    Bin ``i`` of ``n`` resolves to ``i / (n - 1)`` across the span, so the
    first and last bins show the exact endpoint colors. A single bin
    resolves to the middle of the span.
    """
    low, high = span
    if bins == 1:
        return low + (high - low) / 2
    return low + (high - low) * index / (bins - 1)


def bin_bounds(span: Tuple[float, float], bins: int) -> List[Tuple[float, float]]:
    """``bins`` equal-width ``(lower, upper)`` pairs; the last upper bound is the span end."""
    low, high = span
    width = high - low
    bounds = []
    for i in range(bins):
        lower = low + width * i / bins
        upper = high if i == bins - 1 else low + width * (i + 1) / bins
        bounds.append((lower, upper))
    return bounds

