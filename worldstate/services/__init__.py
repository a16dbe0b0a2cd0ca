"""Event generation, live data aggregation and the broadcast loop."""
from .generator import EventGenerator, weighted_choice
from .live_feed import LiveFeed
from .emitter import EventEmitter

__all__ = ["EventEmitter", "EventGenerator", "LiveFeed", "weighted_choice"]
