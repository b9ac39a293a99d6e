"""
Rasterization of transfer functions.

Presentation layers draw a transfer function as a horizontal strip: the
color gradient with the opacity curve applied, usually composited over a
background. These helpers produce that strip as numpy arrays or Pillow
images.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import numpy as np
from PIL import Image

from .colors import ColorInput, to_color
from .defaults import DEFAULT_RASTER_HEIGHT, DEFAULT_RASTER_WIDTH

if TYPE_CHECKING:
    from .transfer_function import TransferFunctionModel


def _check_size(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return int(value)


def sample_positions(width: int) -> np.ndarray:
    """``width`` evenly spaced positions from 0 to 1 inclusive."""
    return np.linspace(0.0, 1.0, _check_size(width, "width"))


def sample_rgba(model: TransferFunctionModel, width: int, premultiplied: bool = False) -> np.ndarray:
    """
    Sample colors and opacities across the domain.

    Args:
        model: The transfer function to sample
        width: Number of samples
        premultiplied: Multiply RGB by opacity

    Returns:
        A float64 array of shape ``(width, 4)``
    """
    rows = np.array([
        model.sample_color_with_alpha(float(p)).value for p in sample_positions(width)
    ], dtype=np.float64)
    if premultiplied:
        rows[:, :3] *= rows[:, 3:4]
    return rows


def composite(rgba: np.ndarray, background: ColorInput = "white") -> np.ndarray:
    """Blend straight-alpha RGBA rows over an opaque background; returns RGB."""
    bg = np.asarray(to_color(background).rgb, dtype=np.float64)
    alpha = rgba[..., 3:4]
    return rgba[..., :3] * alpha + bg * (1.0 - alpha)


def to_uint8(values: np.ndarray) -> np.ndarray:
    """Unit floats to 0-255 bytes."""
    return np.round(np.clip(values, 0.0, 1.0) * 255).astype(np.uint8)


def render_image(model: TransferFunctionModel, width: int = DEFAULT_RASTER_WIDTH,
                 height: int = DEFAULT_RASTER_HEIGHT,
                 background: Optional[ColorInput] = None) -> Image.Image:
    """
    Draw the transfer function as a ``width`` x ``height`` strip.

    Args:
        model: The transfer function to draw
        width: Image width; one sample per column
        height: Image height; every row is identical
        background: If given, composite over this color and return an RGB
            image; otherwise return RGBA with the opacity curve as alpha

    Returns:
        A Pillow image
    """
    height = _check_size(height, "height")
    rgba = sample_rgba(model, width)
    row = rgba if background is None else composite(rgba, background)
    pixels = np.repeat(to_uint8(row)[np.newaxis, :, :], height, axis=0)
    return Image.fromarray(np.ascontiguousarray(pixels))
