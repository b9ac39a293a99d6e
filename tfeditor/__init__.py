"""tfeditor: transfer-function editing core.

A transfer function maps a scalar in [0, 1] to a color and an opacity, as
used when rendering volumetric data. This package holds the model behind a
transfer-function editor: ordered alpha and color stops, ten color-space
interpolation methods, continuous and discrete sampling, and synchronous
change notification for the widgets drawing it.

Quick Start
-----------
>>> from tfeditor import create_transfer_function
>>> tf = create_transfer_function()
>>> tf.add_listener(lambda model: None)
1
>>> tf.sample_alpha(0.25)
0.25
>>> tf.set_interpolation_method("RGB")
>>> tf.sample_color(0.0).hex
'#008000'
"""

import logging

from .colors import Color, ColorInput, to_color
from .colormap import ColorMap, ColorMapBin, ColorMapModel
from .defaults import TransferFunctionOptions
from .errors import (
    ColorParseError,
    DegenerateBinsError,
    InvalidStopSetError,
    OutOfRangeError,
    RecordFormatError,
    TransferFunctionError,
)
from .interpolation import HueMemory, HueMode, get_color_interpolator, interpolate
from .observable import Observable
from .picker import ColorPickerModel, create_color_picker
from .stops import AlphaStop, AlphaStopCollection, ColorStop, ColorStopCollection, StopCollection
from .transfer_function import TransferFunction, TransferFunctionModel, create_transfer_function
from .types import FormatType, InterpolationMethod

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # values
    "Color",
    "ColorInput",
    "to_color",
    "AlphaStop",
    "ColorStop",
    "ColorMap",
    "ColorMapBin",
    "TransferFunction",
    "TransferFunctionOptions",
    # models
    "Observable",
    "StopCollection",
    "AlphaStopCollection",
    "ColorStopCollection",
    "ColorMapModel",
    "TransferFunctionModel",
    "create_transfer_function",
    "ColorPickerModel",
    "create_color_picker",
    # interpolation
    "InterpolationMethod",
    "HueMode",
    "HueMemory",
    "get_color_interpolator",
    "interpolate",
    "FormatType",
    # errors
    "TransferFunctionError",
    "OutOfRangeError",
    "InvalidStopSetError",
    "DegenerateBinsError",
    "ColorParseError",
    "RecordFormatError",
]
