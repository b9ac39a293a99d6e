"""Synchronous change notification.

Models that can be edited derive from :class:`Observable`. Each successful
mutation calls :meth:`Observable.notify` once, which hands the whole,
up-to-date model (not a diff) to every listener in registration order.
There is no batching: dragging a stop through N positions produces N
notifications.
"""
from __future__ import annotations

import itertools
import logging
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


class Observable:
    """Mixin holding a table of listeners keyed by integer ids."""

    def __init__(self) -> None:
        self._listeners: Dict[int, Listener] = {}
        self._listener_ids = itertools.count(1)

    def add_listener(self, callback: Listener) -> int:
        """
        Register ``callback`` and call it once right away.

        The immediate call passes the current state, so a new listener never
        needs a separate read to get in sync.

        Args:
            callback: Called with this model after every change

        Returns:
            An id for :meth:`remove_listener`
        """
        if not callable(callback):
            raise TypeError(f"Listener must be callable, got {type(callback).__name__}")
        listener_id = next(self._listener_ids)
        self._listeners[listener_id] = callback
        self._call(listener_id, callback)
        return listener_id

    def remove_listener(self, listener_id: int) -> bool:
        """Unregister a listener. Returns False if the id is unknown."""
        return self._listeners.pop(listener_id, None) is not None

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def notify(self) -> None:
        """Call every registered listener with this model."""
        # A listener may add or remove listeners while we iterate.
        for listener_id, callback in list(self._listeners.items()):
            self._call(listener_id, callback)

    def _call(self, listener_id: int, callback: Listener) -> None:
        try:
            callback(self)
        except Exception:
            logger.warning(
                "Listener %d (%r) of %s raised", listener_id, callback,
                type(self).__name__, exc_info=True,
            )
