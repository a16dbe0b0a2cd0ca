"""Stream client side: reconnecting socket, event store and view renderers."""
from .store import EventStore
from .stream import StreamClient, backoff_delay

__all__ = ["EventStore", "StreamClient", "backoff_delay"]
