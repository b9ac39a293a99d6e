from __future__ import annotations
from typing import Literal, Tuple

RGBTuple = Tuple[float, float, float]
RGBATuple = Tuple[float, float, float, float]
ColorSpace = Literal["rgb", "hsv", "hsl", "lab", "hcl", "cubehelix"]
COLOR_SPACES = ("rgb", "hsv", "hsl", "lab", "hcl", "cubehelix")
