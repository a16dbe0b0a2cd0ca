"""Bounded in-memory store of received events."""
from collections import deque
from typing import Any, Callable, Dict, List

EventDict = Dict[str, Any]
Listener = Callable[[EventDict, "EventStore"], None]

ALERT_SEVERITIES = ("high", "critical")


def _level(value):
    value = getattr(value, "value", value)
    return value if isinstance(value, str) else None


class EventStore:
    """
    Newest-first list of received events with a fixed capacity.

    Adding past capacity evicts the oldest entry. Listeners are called
    synchronously on every add. Events are stored exactly as received
    (wire dicts) and never modified.
    """

    def __init__(self, max_events: int = 500):
        self.max_events = max_events
        self._events: deque = deque(maxlen=max_events)
        self._listeners: List[Listener] = []

    def add(self, event: EventDict):
        """Insert at the front and notify listeners."""
        self._events.appendleft(event)
        for listener in list(self._listeners):
            listener(event, self)

    def all(self) -> List[EventDict]:
        return list(self._events)

    def recent(self, n: int = 10) -> List[EventDict]:
        return [e for _, e in zip(range(n), self._events)]

    def by_type(self, event_type) -> List[EventDict]:
        wanted = _level(event_type)
        if wanted is None:
            return []
        return [e for e in self._events if e.get("type") == wanted]

    def by_severity(self, *levels) -> List[EventDict]:
        """Events whose severity is one of ``levels``."""
        wanted = {_level(level) for level in levels} - {None}
        return [e for e in self._events if _level(e.get("severity")) in wanted]

    def alerts(self) -> List[EventDict]:
        return self.by_severity(*ALERT_SEVERITIES)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called as ``listener(event, store)``.

        Returns:
            Function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def clear(self):
        self._events.clear()

    @property
    def count(self) -> int:
        return len(self._events)

    def __len__(self) -> int:
        return len(self._events)
