"""
Piecewise scales over stop positions.

A scale maps a domain position to a value by finding the two bracketing
stops and handing the local fraction to an interpolator built for that
segment. Positions before the first stop or after the last one return the
boundary value (clamped, never extrapolated).
"""
from __future__ import annotations

from bisect import bisect_right
from typing import Callable, Generic, Sequence, Tuple, TypeVar

V = TypeVar('V')
Segment = Callable[[float], V]


def interpolate_number(a: float, b: float) -> Callable[[float], float]:
    delta = b - a
    return lambda t: a + t * delta


class PiecewiseScale(Generic[V]):
    """
    A piecewise interpolating scale.

    Args:
        positions: Strictly increasing stop positions (at least two)
        values: One value per position
        interpolator: ``(a, b) -> (t -> value)`` factory used per segment
    """

    __slots__ = ('_positions', '_values', '_segments')

    def __init__(self, positions: Sequence[float], values: Sequence[V],
                 interpolator: Callable[[V, V], Segment]):
        if len(positions) != len(values):
            raise ValueError(f"Got {len(positions)} positions but {len(values)} values")
        if len(positions) < 2:
            raise ValueError("A scale needs at least two stops")
        self._positions: Tuple[float, ...] = tuple(positions)
        self._values: Tuple[V, ...] = tuple(values)
        self._segments = [interpolator(a, b) for a, b in zip(self._values, self._values[1:])]

    @property
    def domain(self) -> Tuple[float, float]:
        return self._positions[0], self._positions[-1]

    def __call__(self, position: float) -> V:
        positions = self._positions
        if position <= positions[0]:
            return self._values[0]
        if position >= positions[-1]:
            return self._values[-1]
        i = bisect_right(positions, position) - 1
        p0 = positions[i]
        if position == p0:
            return self._values[i]
        t = (position - p0) / (positions[i + 1] - p0)
        return self._segments[i](t)
