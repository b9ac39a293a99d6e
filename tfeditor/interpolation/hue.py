"""
Hue arithmetic on the color circle.

Hues are degrees. NaN stands for "no hue" (a gray), which every function
here treats as "take the hue from the other side".
"""
from __future__ import annotations

import math
from enum import IntEnum
from typing import Callable

from ..conversions.numbers import is_undefined
from ..conversions.hsl import normalize_hue


class HueMode(IntEnum):
    """
    Hue interpolation modes for cyclical color spaces.

    SHORTEST: Shortest path (≤180° arc), wrapping through 0/360
    LINEAR:   Hues blended as plain numbers from h0 to h1, never wrapping;
              the path of the ``_LONG`` interpolation methods
    """
    SHORTEST = 0
    LINEAR = 1


def hue_delta(h0: float, h1: float, mode: HueMode = HueMode.SHORTEST) -> float:
    """
    Signed angle to travel from ``h0`` to ``h1`` in the given mode.

    Identical hues give 0 in every mode: a gradient between two stops of
    the same hue never spins around the whole circle.
    """
    if mode == HueMode.LINEAR:
        return h1 - h0
    forward = (h1 - h0) % 360
    if forward == 0:
        return 0.0
    return forward - 360 if forward > 180 else forward


def hue_interpolator(h0: float, h1: float, mode: HueMode = HueMode.SHORTEST) -> Callable[[float], float]:
    """
    Build ``t -> hue`` between two hues.

    If one hue is undefined the other one is used for the whole segment;
    if both are, the result stays undefined.
    """
    if is_undefined(h0) and is_undefined(h1):
        return lambda t: math.nan
    if is_undefined(h0):
        h0 = h1
    elif is_undefined(h1):
        h1 = h0

    delta = hue_delta(h0, h1, mode)
    if delta == 0:
        return lambda t: h0
    return lambda t: h0 + t * delta


def hue_lerp(h0: float, h1: float, t: float, mode: HueMode = HueMode.SHORTEST) -> float:
    """Interpolated hue at ``t``, wrapped to [0, 360) (NaN if both are undefined)."""
    h = hue_interpolator(h0, h1, mode)(t)
    return h if is_undefined(h) else normalize_hue(h)


class HueMemory:
    """
    Remembers the last well-defined hue of one color editor.

    A color picker dragged to white or black loses its hue: HSL and HSV
    cannot express it. Routing every hue through :meth:`resolve` keeps the
    previous hue instead, so moving back to a saturated color restores it.
    """

    __slots__ = ('_hue',)

    def __init__(self, hue: float = 0.0):
        self._hue = 0.0 if is_undefined(hue) else normalize_hue(hue)

    @property
    def hue(self) -> float:
        return self._hue

    def resolve(self, hue: float) -> float:
        """Return ``hue``, or the remembered one when ``hue`` is undefined."""
        if is_undefined(hue):
            return self._hue
        self._hue = normalize_hue(hue)
        return self._hue

    def __repr__(self) -> str:
        return f"HueMemory({self._hue!r})"
