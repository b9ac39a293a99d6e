"""
tfeditor Color Maps
===================

The color half of a transfer function: color stops, an interpolation
method and optional discretization into equal-width bins.

Usage
-----
>>> from tfeditor.colormap import ColorMap, ColorMapModel
>>> model = ColorMapModel(ColorMap([(0, "blue"), (1, "red")], "RGB", discrete=True, bins=4))
>>> [b.lower_bound for b in model.get_bins()]
[0.0, 0.25, 0.5, 0.75]

Notes
-----
- Bin ``i`` of ``n`` takes the continuous color at ``i / (n - 1)``
- A single bin takes the color at the middle of the span
"""

from .color_map import ColorMap, ColorMapBin, bin_bounds, bin_index, bin_representative, check_bins
from .model import ColorMapModel


__all__ = [
    'ColorMap', 'ColorMapBin', 'ColorMapModel',
    'bin_bounds', 'bin_index', 'bin_representative', 'check_bins',
]
