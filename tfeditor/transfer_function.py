"""
The transfer function aggregate.

:class:`TransferFunction` is the plain, frozen record of an opacity curve
and a color map. :class:`TransferFunctionModel` is the editable handle
around it: it owns an alpha stop collection and a color map model, and
notifies its own listeners whenever either of them changes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from .colormap import ColorMap, ColorMapBin, ColorMapModel
from .colors import Color, ColorInput
from .defaults import DEFAULT_ALPHA_STOPS, TransferFunctionOptions
from .observable import Observable
from .raster import sample_rgba
from .stops import AlphaStop, AlphaStopCollection, ColorStop, StopInput
from .types.interpolation_method import InterpolationMethod

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransferFunction:
    """Opacity stops plus a color map; the canonical serializable state."""
    alpha_stops: Tuple[AlphaStop, ...] = DEFAULT_ALPHA_STOPS
    color_map: ColorMap = field(default_factory=ColorMap)

    def __post_init__(self):
        object.__setattr__(self, 'alpha_stops', tuple(AlphaStop.coerce(s) for s in self.alpha_stops))
        if not isinstance(self.color_map, ColorMap):
            raise TypeError(f"color_map must be a ColorMap, got {type(self.color_map).__name__}")

    @classmethod
    def from_options(cls, options: TransferFunctionOptions) -> TransferFunction:
        return cls(
            options.initial_alpha_stops,
            ColorMap(options.initial_color_stops, options.interpolation_method,
                     options.discrete, options.bins),
        )


class TransferFunctionModel(Observable):
    """
    Editable transfer function.

    Every successful mutation, made here or directly on one of the two
    underlying collections, notifies listeners exactly once. Rejected or
    no-op mutations do not notify.

    Args:
        initial: Starting state; built from ``options`` if omitted
        options: Defaults, neighbor gap and minimum stop count

    Raises:
        InvalidStopSetError: if ``initial`` breaks the stop invariants
        DegenerateBinsError: if ``initial.color_map`` is discrete with fewer than 1 bin
    """

    def __init__(self, initial: Optional[TransferFunction] = None, *,
                 options: Optional[TransferFunctionOptions] = None):
        super().__init__()
        self.options = TransferFunctionOptions() if options is None else options
        if initial is None:
            initial = TransferFunction.from_options(self.options)
        self._suspended = False

        self._alpha = AlphaStopCollection(
            initial.alpha_stops,
            epsilon=self.options.position_epsilon, min_stops=self.options.min_stops,
        )
        self._color_map = ColorMapModel(
            initial.color_map,
            epsilon=self.options.position_epsilon, min_stops=self.options.min_stops,
        )
        self._alpha.add_listener(self._on_part_changed)
        self._color_map.add_listener(self._on_part_changed)

    def _on_part_changed(self, part) -> None:
        if not self._suspended:
            self.notify()

    # ------------------ STATE ------------------
    @property
    def alpha_collection(self) -> AlphaStopCollection:
        return self._alpha

    @property
    def color_map_model(self) -> ColorMapModel:
        return self._color_map

    @property
    def alpha_stops(self) -> Tuple[AlphaStop, ...]:
        return self._alpha.stops

    @property
    def color_stops(self) -> Tuple[ColorStop, ...]:
        return self._color_map.color_stops

    @property
    def color_map(self) -> ColorMap:
        return self._color_map.get_color_map()

    @property
    def interpolation_method(self) -> InterpolationMethod:
        return self._color_map.interpolation_method

    @property
    def discrete(self) -> bool:
        return self._color_map.discrete

    @property
    def bins(self) -> int:
        return self._color_map.bins

    def get_transfer_function(self) -> TransferFunction:
        """Frozen snapshot of the whole state."""
        return TransferFunction(self._alpha.stops, self._color_map.get_color_map())

    def get_bins(self) -> List[ColorMapBin]:
        return self._color_map.get_bins()

    # ------------------ SAMPLING ------------------
    def sample_alpha(self, position: float) -> float:
        return self._alpha.sample(position)

    def sample_color(self, position: float) -> Color:
        return self._color_map.sample_color(position)

    def sample_color_with_alpha(self, position: float) -> Color:
        """The sampled color with its opacity taken from the alpha curve."""
        return self.sample_color(position).with_alpha(self.sample_alpha(position))

    def render(self, width: int, premultiplied: bool = False) -> np.ndarray:
        """
        Sample the transfer function at ``width`` evenly spaced positions.

        Returns:
            A float array of shape ``(width, 4)`` holding RGBA rows
        """
        return sample_rgba(self, width, premultiplied=premultiplied)

    # ------------------ MUTATIONS ------------------
    def replace_alpha_stops(self, stops: Iterable[StopInput]) -> bool:
        return self._alpha.replace(stops)

    def replace_color_map(self, color_map: ColorMap) -> bool:
        return self._color_map.replace(color_map)

    def replace(self, transfer_function: TransferFunction) -> bool:
        """
        Take over a whole transfer function. Both halves are validated before
        either changes; listeners are notified once at most.
        """
        alpha_stops = self._alpha.validate(transfer_function.alpha_stops)
        color_map = self._color_map.validate(transfer_function.color_map)

        self._suspended = True
        try:
            changed = self._alpha.replace(alpha_stops)
            changed = self._color_map.replace(color_map) or changed
        finally:
            self._suspended = False
        if changed:
            self.notify()
        return changed

    def add_alpha_stop(self, position: float, alpha: Optional[float] = None) -> int:
        return self._alpha.add(position, alpha)

    def remove_alpha_stop_at(self, index: int) -> bool:
        return self._alpha.remove(index)

    def move_alpha_stop_to(self, index: int, position: float, alpha: Optional[float] = None) -> float:
        return self._alpha.move_to(index, position, alpha)

    def set_alpha_stop_value(self, index: int, alpha: float) -> None:
        self._alpha.set_value(index, alpha)

    def add_color_stop(self, position: float, color: Optional[ColorInput] = None) -> int:
        return self._color_map.add_stop(position, color)

    def remove_color_stop_at(self, index: int) -> bool:
        return self._color_map.remove_stop_at(index)

    def move_color_stop_to(self, index: int, position: float, color: Optional[ColorInput] = None) -> float:
        return self._color_map.move_stop_to(index, position, color)

    def set_color_stop_color(self, index: int, color: ColorInput) -> None:
        self._color_map.set_stop_color(index, color)

    def set_interpolation_method(self, method: Union[InterpolationMethod, str]) -> None:
        self._color_map.set_interpolation_method(method)

    def set_discrete(self, discrete: bool) -> None:
        self._color_map.set_discrete(discrete)

    def set_bins(self, bins: int) -> None:
        self._color_map.set_bins(bins)


def create_transfer_function(initial: Optional[TransferFunction] = None, *,
                             options: Optional[TransferFunctionOptions] = None) -> TransferFunctionModel:
    """
    Create an editable transfer function.

    Args:
        initial: Starting state; the defaults (a linear opacity ramp and a
            green-yellow-red ``HSL_LONG`` color map) if omitted
        options: See :class:`~tfeditor.defaults.TransferFunctionOptions`

    Returns:
        A :class:`TransferFunctionModel`
    """
    model = TransferFunctionModel(initial, options=options)
    logger.debug("Created transfer function with %d alpha and %d color stops",
                 len(model.alpha_stops), len(model.color_stops))
    return model
