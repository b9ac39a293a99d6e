from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple, Union

from ..colors import Color, ColorInput
from ..defaults import MIN_STOPS, POSITION_EPSILON
from ..observable import Observable
from ..stops import ColorStop, ColorStopCollection, check_position
from ..types.interpolation_method import InterpolationMethod
from .color_map import ColorMap, ColorMapBin, bin_bounds, bin_index, bin_representative, check_bins

logger = logging.getLogger(__name__)


class ColorMapModel(Observable):
    """
    Editable color map: color stops plus interpolation method and bins.

    Notifies its listeners once for every change, whether it was made
    through this model or directly on :attr:`stop_collection`.

    Args:
        color_map: Initial state; the default green-yellow-red map if omitted
        epsilon: Minimum gap a dragged stop keeps from its neighbors
        min_stops: Minimum number of color stops

    Raises:
        InvalidStopSetError: if the color stops break the collection invariants
        DegenerateBinsError: if ``color_map`` is discrete with fewer than 1 bin
    """

    def __init__(self, color_map: Optional[ColorMap] = None, *,
                 epsilon: float = POSITION_EPSILON, min_stops: int = MIN_STOPS):
        super().__init__()
        color_map = ColorMap() if color_map is None else color_map
        self._bins = check_bins(color_map.bins, color_map.discrete)
        self._discrete = color_map.discrete
        self._stops = ColorStopCollection(
            color_map.color_stops, color_map.interpolation_method,
            epsilon=epsilon, min_stops=min_stops,
        )
        self._stops.add_listener(self._on_stops_changed)

    def _on_stops_changed(self, stops: ColorStopCollection) -> None:
        self.notify()

    # ------------------ STATE ------------------
    @property
    def stop_collection(self) -> ColorStopCollection:
        return self._stops

    @property
    def color_stops(self) -> Tuple[ColorStop, ...]:
        return self._stops.stops

    @property
    def interpolation_method(self) -> InterpolationMethod:
        return self._stops.interpolation_method

    @property
    def discrete(self) -> bool:
        return self._discrete

    @property
    def bins(self) -> int:
        return self._bins

    def get_color_map(self) -> ColorMap:
        """Frozen snapshot of the current state."""
        return ColorMap(self._stops.stops, self.interpolation_method, self._discrete, self._bins)

    # ------------------ SAMPLING ------------------
    def sample_continuous(self, position: float) -> Color:
        """Color at ``position`` ignoring discretization."""
        return self._stops.sample(position)

    def sample_color(self, position: float) -> Color:
        """
        Color at ``position``.

        In discrete mode the position is first snapped to the representative
        point of its bin, so every position in a bin gets the same color.

        Raises:
            OutOfRangeError: if ``position`` is outside [0, 1]
        """
        position = check_position(position)
        if not self._discrete:
            return self._stops.sample(position)
        index = bin_index(position, self._stops.span, self._bins)
        return self._bin_color(index)

    def _bin_color(self, index: int) -> Color:
        return self._stops.sample(bin_representative(index, self._stops.span, self._bins))

    def get_bins(self) -> List[ColorMapBin]:
        """The ``bins`` slices of a discrete map, or an empty list in continuous mode."""
        if not self._discrete:
            return []
        return [
            ColorMapBin(lower, lower + (upper - lower) / 2, upper, self._bin_color(i))
            for i, (lower, upper) in enumerate(bin_bounds(self._stops.span, self._bins))
        ]

    # ------------------ MUTATIONS ------------------
    def add_stop(self, position: float, color: Optional[ColorInput] = None) -> int:
        return self._stops.add(position, color)

    def remove_stop_at(self, index: int) -> bool:
        return self._stops.remove(index)

    def move_stop_to(self, index: int, position: float, color: Optional[ColorInput] = None) -> float:
        return self._stops.move_to(index, position, color)

    def set_stop_color(self, index: int, color: ColorInput) -> None:
        self._stops.set_color(index, color)

    def set_interpolation_method(self, method: Union[InterpolationMethod, str]) -> None:
        """Raises ValueError for an unknown method name."""
        self._stops.set_interpolation_method(method)

    def set_discrete(self, discrete: bool) -> None:
        """
        Switch between continuous and binned sampling.

        Raises:
            DegenerateBinsError: if switching on while ``bins`` is below 1
        """
        discrete = bool(discrete)
        if discrete:
            check_bins(self._bins, discrete)
        if discrete != self._discrete:
            self._discrete = discrete
            logger.debug("Color map discrete=%s", discrete)
            self.notify()

    def set_bins(self, bins: Any) -> None:
        """
        Set the number of bins used in discrete mode.

        Raises:
            DegenerateBinsError: if the map is discrete and ``bins`` is below 1
        """
        bins = check_bins(bins, self._discrete)
        if bins != self._bins:
            self._bins = bins
            logger.debug("Color map bins=%d", bins)
            self.notify()

    def validate(self, color_map: ColorMap) -> ColorMap:
        """
        Check ``color_map`` against this model's invariants without applying it.

        Returns:
            The same map with its stops sorted
        """
        if not isinstance(color_map, ColorMap):
            raise TypeError(f"Expected a ColorMap, got {type(color_map).__name__}")
        check_bins(color_map.bins, color_map.discrete)
        stops = self._stops.validate(color_map.color_stops)
        return ColorMap(stops, color_map.interpolation_method, color_map.discrete, color_map.bins)

    def replace(self, color_map: ColorMap) -> bool:
        """
        Take over every field of ``color_map`` at once.

        Everything is validated before anything changes; listeners are
        notified once at most.

        Returns:
            True if anything changed

        Raises:
            InvalidStopSetError: if the color stops break the collection invariants
            DegenerateBinsError: if ``color_map`` is discrete with fewer than 1 bin
        """
        color_map = self.validate(color_map)
        bins = color_map.bins
        stops = color_map.color_stops

        options_changed = (bins, color_map.discrete) != (self._bins, self._discrete)
        self._bins = bins
        self._discrete = color_map.discrete
        # A change in the stop collection notifies through _on_stops_changed
        if self._stops.replace(stops, color_map.interpolation_method):
            return True
        if options_changed:
            self.notify()
        return options_changed
