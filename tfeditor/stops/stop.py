from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Mapping, Sequence, Union

from ..colors import Color, ColorInput, to_color
from ..errors import OutOfRangeError


def check_position(position: Any, what: str = "position") -> float:
    """Return ``position`` as a float, raising OutOfRangeError outside [0, 1]."""
    try:
        value = float(position)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"{what} must be a number, got {type(position).__name__}") from exc
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise OutOfRangeError(position, what)
    return value


@dataclass(frozen=True)
class AlphaStop:
    """One point of the opacity curve."""
    position: float
    alpha: float

    value_name: ClassVar[str] = "alpha"

    def __post_init__(self):
        object.__setattr__(self, 'position', check_position(self.position))
        object.__setattr__(self, 'alpha', check_position(self.alpha, "alpha"))

    @property
    def value(self) -> float:
        return self.alpha

    def with_position(self, position: float) -> AlphaStop:
        return replace(self, position=position)

    def with_value(self, alpha: float) -> AlphaStop:
        return replace(self, alpha=alpha)

    @classmethod
    def coerce(cls, value: StopInput) -> AlphaStop:
        return _coerce(cls, value)


@dataclass(frozen=True)
class ColorStop:
    """One point of the color map. ``color`` accepts anything :func:`to_color` does."""
    position: float
    color: Color

    value_name: ClassVar[str] = "color"

    def __post_init__(self):
        object.__setattr__(self, 'position', check_position(self.position))
        object.__setattr__(self, 'color', to_color(self.color))

    @property
    def value(self) -> Color:
        return self.color

    def with_position(self, position: float) -> ColorStop:
        return replace(self, position=position)

    def with_value(self, color: ColorInput) -> ColorStop:
        return replace(self, color=color)

    @classmethod
    def coerce(cls, value: StopInput) -> ColorStop:
        return _coerce(cls, value)


Stop = Union[AlphaStop, ColorStop]
StopInput = Union[Stop, Sequence[Any], Mapping[str, Any]]


def _coerce(cls, value):
    """
    Build a stop of type ``cls`` from a stop, a ``(position, value)`` pair or
    a mapping with a ``position`` (or ``stop``) key and a value key.
    """
    if isinstance(value, cls):
        return value
    if isinstance(value, Mapping):
        position = value.get("position", value.get("stop"))
        if position is None or cls.value_name not in value:
            raise TypeError(
                f"{cls.__name__} mapping needs 'position' and {cls.value_name!r} keys, "
                f"got {sorted(value)}"
            )
        return cls(position, value[cls.value_name])
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return cls(value[0], value[1])
    raise TypeError(f"Cannot build {cls.__name__} from {value!r}")
