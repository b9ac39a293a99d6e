"""
Color picker model.

Holds the color being edited by a hue/saturation-value picker. The state
is kept in HSV with an opacity channel; hues are degrees, everything else
is a unit float.

Grays have no hue, so a picker dragged to white would forget which hue it
was on. Each picker keeps its own :class:`~tfeditor.interpolation.HueMemory`:
setting an achromatic color keeps the last good hue, and raising the
saturation afterwards brings it back.
"""
from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from .colors import Color, ColorInput, to_color
from .conversions import hsl_to_hsv, hsv_to_hsl, hsv_to_unit_rgb, unit_rgb_to_hsv
from .conversions.numbers import clamp01, is_undefined
from .defaults import DEFAULT_PICKER_COLOR
from .interpolation import HueMemory
from .observable import Observable

logger = logging.getLogger(__name__)


class RGB(NamedTuple):
    r: float
    g: float
    b: float


class RGBA(NamedTuple):
    r: float
    g: float
    b: float
    a: float


class HSL(NamedTuple):
    h: float
    s: float
    l: float


class HSLA(NamedTuple):
    h: float
    s: float
    l: float
    a: float


class HSV(NamedTuple):
    h: float
    s: float
    v: float


class HSVA(NamedTuple):
    h: float
    s: float
    v: float
    a: float


class ColorPickerModel(Observable):
    """
    Editable color with per-instance hue memory.

    Args:
        initial_color: Anything :func:`~tfeditor.colors.to_color` accepts
    """

    def __init__(self, initial_color: ColorInput = DEFAULT_PICKER_COLOR):
        super().__init__()
        self._hue_memory = HueMemory()
        self._hsva = HSVA(0.0, 0.0, 0.0, 1.0)
        self._assign_rgba(*to_color(initial_color).value, notify=False)

    # ------------------ STATE ------------------
    def _assign(self, h: float, s: float, v: float, a: float, notify: bool = True) -> None:
        hsva = HSVA(
            self._hue_memory.resolve(h),
            0.0 if is_undefined(s) else clamp01(s),
            clamp01(v),
            clamp01(a),
        )
        if hsva == self._hsva:
            return
        self._hsva = hsva
        if notify:
            logger.debug("Picker color set to %s", hsva)
            self.notify()

    def _assign_rgba(self, r: float, g: float, b: float, a: float, notify: bool = True) -> None:
        self._assign(*unit_rgb_to_hsv(r, g, b), a, notify=notify)

    @property
    def hue_memory(self) -> HueMemory:
        return self._hue_memory

    @property
    def color(self) -> Color:
        h, s, v, a = self._hsva
        return Color(*hsv_to_unit_rgb(h, s, v), a)

    # ------------------ SETTERS ------------------
    def set_color(self, color: ColorInput) -> None:
        self._assign_rgba(*to_color(color).value)

    def set_hex(self, text: str) -> None:
        """Set from a CSS string such as ``#ff8000`` or ``#ff800080``."""
        self.set_color(text)

    def set_rgb(self, r: float, g: float, b: float) -> None:
        self._assign_rgba(r, g, b, self._hsva.a)

    def set_rgba(self, r: float, g: float, b: float, a: float) -> None:
        self._assign_rgba(r, g, b, a)

    def set_hsl(self, h: float, s: float, l: float) -> None:
        self._assign(*hsl_to_hsv(h, clamp01(s), clamp01(l)), self._hsva.a)

    def set_hsla(self, h: float, s: float, l: float, a: float) -> None:
        self._assign(*hsl_to_hsv(h, clamp01(s), clamp01(l)), a)

    def set_hsv(self, h: float, s: float, v: float) -> None:
        self._assign(h, s, v, self._hsva.a)

    def set_hsva(self, h: float, s: float, v: float, a: float) -> None:
        self._assign(h, s, v, a)

    def set_hue(self, h: float) -> None:
        """Move along the hue strip, keeping saturation and value."""
        _, s, v, a = self._hsva
        self._assign(h, s, v, a)

    def set_saturation_value(self, s: float, v: float) -> None:
        """Move within the saturation/value square, keeping the hue."""
        h, _, _, a = self._hsva
        self._assign(h, s, v, a)

    def set_alpha(self, a: float) -> None:
        h, s, v, _ = self._hsva
        self._assign(h, s, v, a)

    # ------------------ GETTERS ------------------
    def get_hex(self) -> str:
        return self.color.hex

    def get_hex8(self) -> str:
        return self.color.hex8

    def get_rgb(self) -> RGB:
        return RGB(*self.color.rgb)

    def get_rgba(self) -> RGBA:
        return RGBA(*self.color.value)

    def get_hsl(self) -> HSL:
        h, s, v, _ = self._hsva
        return HSL(*hsv_to_hsl(h, s, v))

    def get_hsla(self) -> HSLA:
        h, s, v, a = self._hsva
        return HSLA(*hsv_to_hsl(h, s, v), a)

    def get_hsv(self) -> HSV:
        return HSV(*self._hsva[:3])

    def get_hsva(self) -> HSVA:
        return self._hsva

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.color.hex8!r})"


def create_color_picker(initial_color: Optional[ColorInput] = None) -> ColorPickerModel:
    return ColorPickerModel(DEFAULT_PICKER_COLOR if initial_color is None else initial_color)
