"""Conversion of transfer functions to and from plain records.

The record layout matches the editor's interchange format::

    {
        "alphaStops": [{"stop": 0.0, "alpha": 0.0}, ...],
        "colorMap": {
            "colorStops": [{"stop": 0.0, "color": "#008000"}, ...],
            "interpolationMethod": "HSL_LONG",
            "discrete": false,
            "bins": 7
        }
    }

Colors are written as ``#rrggbb`` (``#rrggbbaa`` when not opaque), so they
round-trip at 8 bits per channel. Loading also accepts snake_case keys and
``position`` in place of ``stop``.
"""
from __future__ import annotations

import json
from typing import Any, Mapping

from .colormap import ColorMap
from .defaults import DEFAULT_BINS, DEFAULT_DISCRETE
from .errors import RecordFormatError
from .stops import AlphaStop, ColorStop
from .transfer_function import TransferFunction


def to_dict(transfer_function: TransferFunction) -> dict[str, Any]:
    """Convert a TransferFunction to a JSON-ready dict."""
    return {
        'alphaStops': [_alpha_stop_to_dict(s) for s in transfer_function.alpha_stops],
        'colorMap': color_map_to_dict(transfer_function.color_map),
    }


def from_dict(data: Mapping[str, Any]) -> TransferFunction:
    """
    Reconstruct a TransferFunction from a dict.

    Raises:
        RecordFormatError: If a required key is missing or a value is malformed
    """
    if not isinstance(data, Mapping):
        raise RecordFormatError(f"Expected a mapping, got {type(data).__name__}")
    try:
        alpha_stops = [_dict_to_alpha_stop(s) for s in _get(data, 'alphaStops', 'alpha_stops')]
        color_map = dict_to_color_map(_get(data, 'colorMap', 'color_map'))
        return TransferFunction(tuple(alpha_stops), color_map)
    except RecordFormatError:
        raise
    except (TypeError, ValueError) as exc:
        raise RecordFormatError(f"Malformed transfer function record: {exc}") from exc


def color_map_to_dict(color_map: ColorMap) -> dict[str, Any]:
    """Convert a ColorMap to dict."""
    return {
        'colorStops': [_color_stop_to_dict(s) for s in color_map.color_stops],
        'interpolationMethod': color_map.interpolation_method.value,
        'discrete': color_map.discrete,
        'bins': color_map.bins,
    }


def dict_to_color_map(data: Mapping[str, Any]) -> ColorMap:
    """Reconstruct a ColorMap from dict; ``discrete`` and ``bins`` are optional."""
    if not isinstance(data, Mapping):
        raise RecordFormatError(f"Expected a color map mapping, got {type(data).__name__}")
    return ColorMap(
        tuple(_dict_to_color_stop(s) for s in _get(data, 'colorStops', 'color_stops')),
        _get(data, 'interpolationMethod', 'interpolation_method'),
        data.get('discrete', DEFAULT_DISCRETE),
        data.get('bins', DEFAULT_BINS),
    )


def to_json(transfer_function: TransferFunction, **kwargs: Any) -> str:
    """Serialize to a JSON string; ``kwargs`` go to :func:`json.dumps`."""
    return json.dumps(to_dict(transfer_function), **kwargs)


def from_json(text: str) -> TransferFunction:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RecordFormatError(f"Invalid JSON: {exc}") from exc
    return from_dict(data)


def _get(data: Mapping[str, Any], key: str, alias: str) -> Any:
    if key in data:
        return data[key]
    if alias in data:
        return data[alias]
    raise RecordFormatError(f"Missing key {key!r}")


def _alpha_stop_to_dict(stop: AlphaStop) -> dict[str, Any]:
    return {'stop': stop.position, 'alpha': stop.alpha}


def _dict_to_alpha_stop(data: Mapping[str, Any]) -> AlphaStop:
    return AlphaStop(_get(data, 'stop', 'position'), _get(data, 'alpha', 'value'))


def _color_stop_to_dict(stop: ColorStop) -> dict[str, Any]:
    return {'stop': stop.position, 'color': str(stop.color)}


def _dict_to_color_stop(data: Mapping[str, Any]) -> ColorStop:
    return ColorStop(_get(data, 'stop', 'position'), _get(data, 'color', 'value'))
