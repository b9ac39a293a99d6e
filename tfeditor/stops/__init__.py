"""
tfeditor Stops
==============

Control points of a transfer function and the ordered collections that
hold them.

Usage
-----
>>> from tfeditor.stops import AlphaStopCollection
>>> alpha = AlphaStopCollection([(0, 1), (0.5, 0.5), (1, 0)])
>>> alpha.move_to(1, 0.9, 0.2)
0.9
>>> alpha.remove(0)
False
"""

from .stop import AlphaStop, ColorStop, Stop, StopInput, check_position
from .collection import AlphaStopCollection, ColorStopCollection, StopCollection


__all__ = [
    'AlphaStop', 'ColorStop', 'Stop', 'StopInput', 'check_position',
    'AlphaStopCollection', 'ColorStopCollection', 'StopCollection',
]
