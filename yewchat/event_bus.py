"""A small publish/subscribe bus that fans text messages out to subscribers."""

from __future__ import annotations

import itertools
from collections.abc import Callable

Subscriber = Callable[[str], object]


class EventBus:
    """Delivers every message sent on the bus to each connected subscriber."""

    def __init__(self) -> None:
        self._subscribers: dict[int, Subscriber] = {}
        self._ids = itertools.count(1)

    def connect(self, callback: Subscriber) -> int:
        """Register ``callback`` and return the handler id that identifies it."""
        handler_id = next(self._ids)
        self._subscribers[handler_id] = callback
        return handler_id

    def disconnect(self, handler_id: int) -> None:
        """Remove a subscriber; unknown ids are ignored."""
        self._subscribers.pop(handler_id, None)

    def send(self, message: str) -> None:
        """Deliver ``message`` to every connected subscriber."""
        for callback in list(self._subscribers.values()):
            callback(message)

    def __len__(self) -> int:
        return len(self._subscribers)