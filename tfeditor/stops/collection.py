"""
Ordered stop collections.

A collection always holds at least two stops, sorted by position, with the
first one at 0 and the last one at 1. Those endpoints are anchors: they
cannot be removed and dragging them only changes their value. Interior
stops are clamped between their neighbors while dragged, so stops never
cross or coincide.
"""
from __future__ import annotations

import logging
import math
from bisect import bisect_left
from operator import attrgetter
from typing import Any, ClassVar, Generic, Iterable, Iterator, Optional, Tuple, Type, TypeVar, Union

from ..colors import ColorInput
from ..defaults import DEFAULT_INTERPOLATION_METHOD, MIN_STOPS, POSITION_EPSILON
from ..errors import InvalidStopSetError
from ..interpolation import PiecewiseScale, get_color_interpolator, interpolate_number
from ..observable import Observable
from ..types.interpolation_method import InterpolationMethod
from .stop import AlphaStop, ColorStop, StopInput, check_position

logger = logging.getLogger(__name__)

S = TypeVar('S', AlphaStop, ColorStop)


class StopCollection(Observable, Generic[S]):
    """
    Base class for alpha and color stop collections.

    Args:
        stops: Initial stops (records, ``(position, value)`` pairs or mappings)
        epsilon: Minimum gap a dragged stop keeps from its neighbors
        min_stops: Minimum number of stops

    Raises:
        InvalidStopSetError: if ``stops`` breaks the collection invariants
    """

    stop_type: ClassVar[Type]

    def __init__(self, stops: Iterable[StopInput], *, epsilon: float = POSITION_EPSILON,
                 min_stops: int = MIN_STOPS):
        super().__init__()
        self.epsilon = epsilon
        self.min_stops = min_stops
        self._stops: Tuple[S, ...] = self.validate(stops)
        self._scale: Optional[PiecewiseScale] = None

    # ------------------ QUERIES ------------------
    @property
    def stops(self) -> Tuple[S, ...]:
        return self._stops

    @property
    def positions(self) -> Tuple[float, ...]:
        return tuple(stop.position for stop in self._stops)

    @property
    def values(self) -> tuple:
        return tuple(stop.value for stop in self._stops)

    @property
    def span(self) -> Tuple[float, float]:
        """Positions of the first and last stop."""
        return self._stops[0].position, self._stops[-1].position

    def __len__(self) -> int:
        return len(self._stops)

    def __getitem__(self, index: int) -> S:
        return self._stops[index]

    def __iter__(self) -> Iterator[S]:
        return iter(self._stops)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._stops)!r})"

    def sample(self, position: float):
        """
        Value of the curve at ``position``.

        Raises:
            OutOfRangeError: if ``position`` is outside [0, 1]
        """
        position = check_position(position)
        if self._scale is None:
            self._scale = PiecewiseScale(self.positions, self.values, self._segment_interpolator())
        return self._scale(position)

    def _segment_interpolator(self):
        raise NotImplementedError

    # ------------------ VALIDATION ------------------
    def validate(self, stops: Iterable[StopInput]) -> Tuple[S, ...]:
        """
        Coerce and check a full set of stops without touching the collection.

        Returns:
            The stops as a sorted tuple of records

        Raises:
            InvalidStopSetError: fewer than ``min_stops`` stops, endpoints not
                at 0 and 1, two stops at the same position, or a stop that
                cannot be read
        """
        name = self.stop_type.__name__
        try:
            coerced = sorted((self.stop_type.coerce(stop) for stop in stops),
                             key=attrgetter('position'))
        except (TypeError, ValueError) as exc:
            raise InvalidStopSetError(f"Invalid {name}: {exc}") from exc

        if len(coerced) < self.min_stops:
            raise InvalidStopSetError(
                f"Need at least {self.min_stops} stops, got {len(coerced)}")
        if coerced[0].position != 0.0 or coerced[-1].position != 1.0:
            raise InvalidStopSetError(
                f"First and last {name} must be at 0 and 1, "
                f"got {coerced[0].position} and {coerced[-1].position}")
        for left, right in zip(coerced, coerced[1:]):
            if left.position == right.position:
                raise InvalidStopSetError(f"Two stops at position {left.position}")
        return tuple(coerced)

    def _check_index(self, index: int) -> int:
        n = len(self._stops)
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"Stop index must be an int, got {type(index).__name__}")
        if not -n <= index < n:
            raise IndexError(f"Stop index {index} out of range for {n} stops")
        return index % n

    def is_endpoint(self, index: int) -> bool:
        return self._check_index(index) in (0, len(self._stops) - 1)

    # ------------------ MUTATIONS ------------------
    def _assign(self, stops: Tuple[S, ...]) -> bool:
        if stops == self._stops:
            return False
        self._stops = stops
        self._scale = None
        self.notify()
        return True

    def add(self, position: float, value: Any = None) -> int:
        """
        Insert a stop, keeping the collection sorted.

        A stop already sitting at ``position`` is updated in place instead of
        getting a duplicate neighbor.

        Args:
            position: Position in [0, 1]
            value: The stop value; ``None`` takes the current curve value there

        Returns:
            Index of the new (or updated) stop

        Raises:
            OutOfRangeError: if ``position`` is outside [0, 1]
        """
        position = check_position(position)
        if value is None:
            value = self.sample(position)
        stop = self.stop_type(position, value)

        stops = list(self._stops)
        index = bisect_left(self.positions, position)
        if index < len(stops) and stops[index].position == position:
            stops[index] = stop
            logger.debug("Merged %r into existing stop %d", stop, index)
        else:
            stops.insert(index, stop)
            logger.debug("Added %r at index %d", stop, index)
        self._assign(tuple(stops))
        return index

    def remove(self, index: int) -> bool:
        """
        Delete the stop at ``index``.

        Returns:
            False (and changes nothing) for the first and last stop, or when
            the collection is already at its minimum size
        """
        index = self._check_index(index)
        if index in (0, len(self._stops) - 1) or len(self._stops) <= self.min_stops:
            return False
        stops = self._stops[:index] + self._stops[index + 1:]
        logger.debug("Removed stop %d (%r)", index, self._stops[index])
        self._assign(stops)
        return True

    def clamp_position(self, index: int, position: float) -> float:
        """
        Where the stop at ``index`` ends up if dragged to ``position``.

        Endpoints stay where they are; interior stops are kept strictly
        between their neighbors, at least ``epsilon`` away from each.
        """
        index = self._check_index(index)
        current = self._stops[index].position
        if index in (0, len(self._stops) - 1):
            return current
        prev = self._stops[index - 1].position
        nxt = self._stops[index + 1].position
        low = max(prev + self.epsilon, math.nextafter(prev, math.inf))
        high = min(nxt - self.epsilon, math.nextafter(nxt, -math.inf))
        if low > high:
            # neighbors too close for the gap; stay put
            return current
        return min(max(position, low), high)

    def move_to(self, index: int, position: float, value: Any = None) -> float:
        """
        Drag the stop at ``index`` to ``position``, optionally changing its value.

        Returns:
            The position the stop actually ended at

        Raises:
            OutOfRangeError: if ``position`` is outside [0, 1]
        """
        index = self._check_index(index)
        position = check_position(position)
        current = self._stops[index]
        stop = self.stop_type(
            self.clamp_position(index, position),
            current.value if value is None else value,
        )
        stops = list(self._stops)
        stops[index] = stop
        if self._assign(tuple(stops)):
            logger.debug("Moved stop %d to %r", index, stop)
        return stop.position

    def set_value(self, index: int, value: Any) -> None:
        """Change only the value of the stop at ``index``."""
        index = self._check_index(index)
        stops = list(self._stops)
        stops[index] = stops[index].with_value(value)
        self._assign(tuple(stops))

    def replace(self, stops: Iterable[StopInput]) -> bool:
        """
        Replace every stop at once. Either all of ``stops`` is taken or,
        on InvalidStopSetError, nothing changes.

        Returns:
            True if the collection changed
        """
        return self._assign(self.validate(stops))


class AlphaStopCollection(StopCollection[AlphaStop]):
    """Stops of the opacity curve, interpolated piecewise linearly."""

    stop_type = AlphaStop

    def _segment_interpolator(self):
        return interpolate_number


class ColorStopCollection(StopCollection[ColorStop]):
    """
    Stops of the color map.

    Sampling blends the two bracketing colors with the collection's
    interpolation method, which the owning color map sets.
    """

    stop_type = ColorStop

    def __init__(self, stops: Iterable[StopInput],
                 interpolation_method: Union[InterpolationMethod, str] = DEFAULT_INTERPOLATION_METHOD,
                 **kwargs):
        self._interpolation_method = InterpolationMethod.coerce(interpolation_method)
        super().__init__(stops, **kwargs)

    @property
    def interpolation_method(self) -> InterpolationMethod:
        return self._interpolation_method

    def set_interpolation_method(self, method: Union[InterpolationMethod, str]) -> bool:
        """Switch the blending method. Returns True if it changed."""
        method = InterpolationMethod.coerce(method)
        if method == self._interpolation_method:
            return False
        self._interpolation_method = method
        self._scale = None
        logger.debug("Interpolation method set to %s", method.name)
        self.notify()
        return True

    def _segment_interpolator(self):
        return get_color_interpolator(self._interpolation_method)

    def set_color(self, index: int, color: ColorInput) -> None:
        self.set_value(index, color)

    def replace(self, stops: Iterable[StopInput],
                interpolation_method: Union[InterpolationMethod, str, None] = None) -> bool:
        """
        Replace every stop, and the interpolation method when given, at once.

        Listeners are notified once at most.
        """
        validated = self.validate(stops)
        method = (self._interpolation_method if interpolation_method is None
                  else InterpolationMethod.coerce(interpolation_method))
        if method == self._interpolation_method:
            return self._assign(validated)
        self._interpolation_method = method
        self._scale = None
        if not self._assign(validated):
            self.notify()
        return True
