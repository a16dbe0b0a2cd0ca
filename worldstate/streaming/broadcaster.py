"""Broadcast-only WebSocket fan-out."""
from typing import Any, Dict, Set
import orjson
import structlog
from fastapi import WebSocket, WebSocketDisconnect
from pydantic.alias_generators import to_camel
from starlette.websockets import WebSocketState
from ..data import GUB_DATA_SOURCE, GUB_REGIONS, RELIABILITY_BADGES
from ..event_models import Event, utc_now

log = structlog.get_logger()


def reference_data() -> Dict[str, Any]:
    """Static reference tables shipped in every ``init`` message."""
    return {
        "gubRegions": [{to_camel(k): v for k, v in region.items()} for region in GUB_REGIONS],
        "dataSource": GUB_DATA_SOURCE,
        "reliabilityBadges": RELIABILITY_BADGES,
    }


def is_open(websocket: WebSocket) -> bool:
    return (
        websocket.client_state == WebSocketState.CONNECTED
        and websocket.application_state == WebSocketState.CONNECTED
    )


class Broadcaster:
    """
    Owns the set of open connections and fans events out to them.

    Connections are anonymous: only set membership is kept, never an
    address or identifier. Clients cannot send anything that changes
    server state; inbound frames are discarded.
    """

    def __init__(self, live_feed=None, recent_limit: int = 10, metrics=None):
        """
        Args:
            live_feed: Source of the live snapshot in ``init`` messages
            recent_limit: Number of live events in the snapshot
            metrics: Optional Prometheus metrics holder
        """
        self._connections: Set[WebSocket] = set()
        self._live_feed = live_feed
        self._recent_limit = recent_limit
        self._metrics = metrics

    async def connect(self, websocket: WebSocket):
        """
        Accept a connection, register it and send the ``init`` message.

        Args:
            websocket: WebSocket connection to add
        """
        await websocket.accept()
        self._connections.add(websocket)
        self._update_gauge()
        log.info("websocket.connected", total_connections=len(self._connections))
        await websocket.send_text(orjson.dumps(await self.init_message()).decode())

    def disconnect(self, websocket: WebSocket):
        """
        Remove a WebSocket connection.

        Args:
            websocket: WebSocket connection to remove
        """
        if websocket in self._connections:
            self._connections.discard(websocket)
            self._update_gauge()
            log.info("websocket.disconnected", total_connections=len(self._connections))

    async def init_message(self) -> Dict[str, Any]:
        recent = []
        if self._live_feed is not None:
            recent = await self._live_feed.recent_earthquakes(self._recent_limit)
        payload = reference_data()
        payload["serverTime"] = utc_now().isoformat()
        payload["recentEvents"] = [e.to_wire() for e in recent]
        return {"type": "init", "payload": payload}

    async def broadcast(self, event: Event) -> int:
        """
        Send one event to every open connection.

        The message is serialized once. Connections that are not open are
        skipped; a failed send drops that connection and is never raised.

        Args:
            event: Event to broadcast

        Returns:
            Number of connections the event was sent to
        """
        if not self._connections:
            return 0

        message = orjson.dumps({"type": "event", "payload": event.to_wire()}).decode()

        sent = 0
        failed = set()
        for connection in list(self._connections):
            if not is_open(connection):
                continue
            try:
                await connection.send_text(message)
                sent += 1
            except (WebSocketDisconnect, RuntimeError, OSError) as e:
                log.debug("websocket.send_failed", error=str(e))
                failed.add(connection)

        for connection in failed:
            self.disconnect(connection)

        return sent

    @property
    def connection_count(self) -> int:
        """Get number of active connections."""
        return len(self._connections)

    def _update_gauge(self):
        if self._metrics is not None:
            self._metrics.set_connections(len(self._connections))


async def handle_websocket_stream(websocket: WebSocket, broadcaster: Broadcaster):
    """
    Serve one broadcast-only connection until the client goes away.

    Args:
        websocket: WebSocket connection
        broadcaster: Shared broadcaster
    """
    try:
        await broadcaster.connect(websocket)
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
            # Inbound frames are ignored
    except WebSocketDisconnect:
        log.info("websocket.client_disconnected")
    except (RuntimeError, OSError) as e:
        log.warning("websocket.error", error=str(e), error_type=type(e).__name__)
    finally:
        broadcaster.disconnect(websocket)
