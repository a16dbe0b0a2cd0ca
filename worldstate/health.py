"""
Aggregate health report for the /health endpoint.
"""
import time
from typing import Any, Dict
from .logging import get_logger

logger = get_logger()


class HealthChecker:
    """
    Builds the health payload.

    Only aggregate counters are exposed: uptime, number of connected
    clients, emitted events and per-API fetch counters. Nothing that
    identifies a connection or a client is ever included.
    """

    def __init__(self, broadcaster, emitter, live_feed=None, metrics=None):
        self.broadcaster = broadcaster
        self.emitter = emitter
        self.live_feed = live_feed
        self.metrics = metrics
        self._started = time.monotonic()

    def uptime(self) -> int:
        return int(time.monotonic() - self._started)

    def report(self) -> Dict[str, Any]:
        """
        Returns:
            dict: status, uptime (s), clients, eventsEmitted, realEventsEmitted, apis
        """
        if self.metrics is not None:
            self.metrics.update_system_metrics()

        result = {
            "status": "ok",
            "uptime": self.uptime(),
            "clients": self.broadcaster.connection_count,
        }
        result.update(self.emitter.stats())
        result["apis"] = self.live_feed.stats() if self.live_feed is not None else {}
        logger.debug("health.report", clients=result["clients"])
        return result
