"""Reconnecting client for the WorldState event stream."""
import asyncio
from typing import Any, Callable, Dict, List
import orjson
import structlog
import websockets
from websockets.exceptions import WebSocketException
from ..config import Settings

log = structlog.get_logger()

MESSAGE_TYPES = ("init", "event", "status")


def backoff_delay(attempt: int, base: float = 1.0, factor: float = 1.5, cap: float = 15.0) -> float:
    """Delay before reconnect attempt ``attempt`` (0-based), capped at ``cap``."""
    return min(base * factor ** attempt, cap)


class StreamClient:
    """
    Receive-only WebSocket client with exponential backoff.

    Listeners are registered per message type (``init``, ``event``,
    ``status``). Status payloads are dicts with a ``state`` key:
    connecting, connected, disconnected, error, reconnecting or failed.
    After ``max_attempts`` consecutive failed reconnects the client stops
    and reports ``failed`` once. Nothing is ever sent to the server.
    """

    def __init__(
        self,
        url: str,
        connector: Callable[[str], Any] | None = None,
        base_delay: float = 1.0,
        factor: float = 1.5,
        max_delay: float = 15.0,
        max_attempts: int = 20,
    ):
        """
        Args:
            url: Stream endpoint (ws:// or wss://)
            connector: Returns an async context manager yielding an async
                iterator of frames; defaults to ``websockets.connect``
            base_delay: First reconnect delay in seconds
            factor: Growth factor per attempt
            max_delay: Upper bound for any delay
            max_attempts: Reconnect budget before giving up
        """
        self.url = url
        self._connector = connector or websockets.connect
        self.base_delay = base_delay
        self.factor = factor
        self.max_delay = max_delay
        self.max_attempts = max_attempts
        self.attempts = 0
        self.state = "idle"
        self._listeners: Dict[str, List[Callable]] = {t: [] for t in MESSAGE_TYPES}
        self._task: asyncio.Task | None = None
        self._reconnect_handle: asyncio.TimerHandle | None = None
        self._stopped = False
        self._finished = asyncio.Event()

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "StreamClient":
        return cls(
            settings.stream_url(),
            base_delay=settings.RECONNECT_BASE_DELAY,
            factor=settings.RECONNECT_FACTOR,
            max_delay=settings.RECONNECT_MAX_DELAY,
            max_attempts=settings.RECONNECT_MAX_ATTEMPTS,
            **kwargs,
        )

    def on(self, message_type: str, callback: Callable) -> "StreamClient":
        """Register a listener; returns the client for chaining."""
        self._listeners.setdefault(message_type, []).append(callback)
        return self

    def _emit(self, message_type: str, data):
        if self._stopped:
            return
        for callback in list(self._listeners.get(message_type, [])):
            try:
                callback(data)
            except Exception as e:
                log.error("stream.listener_failed", type=message_type, error=str(e), exc_info=True)

    def _set_status(self, state: str, **extra):
        self.state = state
        self._emit("status", {"state": state, **extra})

    def connect(self):
        """Start a connection attempt on the running event loop."""
        if self._stopped:
            return
        self._reconnect_handle = None
        log.info("stream.connecting", url=self.url, attempt=self.attempts)
        self._set_status("connecting")
        self._task = asyncio.get_running_loop().create_task(self._session())

    async def _session(self):
        try:
            async with self._connector(self.url) as websocket:
                self.attempts = 0
                log.info("stream.connected", url=self.url)
                self._set_status("connected")
                async for frame in websocket:
                    self.handle_message(frame)
        except (OSError, WebSocketException, asyncio.TimeoutError) as e:
            if self._stopped:
                return
            log.warning("stream.connection_error", error=str(e), error_type=type(e).__name__)
            self._set_status("error")
            self._schedule_reconnect()
            return

        if self._stopped:
            return
        log.info("stream.disconnected")
        self._set_status("disconnected")
        self._schedule_reconnect()

    def handle_message(self, frame):
        """Parse one frame and dispatch it by its ``type`` field."""
        try:
            message = orjson.loads(frame)
            message_type = message["type"]
            payload = message.get("payload")
        except (orjson.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
            log.warning("stream.malformed_message", error=str(e))
            return

        if message_type in ("init", "event"):
            self._emit(message_type, payload)
        else:
            log.debug("stream.unknown_message", type=message_type)

    def _schedule_reconnect(self):
        if self._stopped:
            return
        if self.attempts >= self.max_attempts:
            log.warning("stream.reconnect_exhausted", attempts=self.attempts)
            self._set_status("failed")
            self._finished.set()
            return

        delay = backoff_delay(self.attempts, self.base_delay, self.factor, self.max_delay)
        self.attempts += 1
        log.info("stream.reconnect_scheduled", delay=round(delay, 3), attempt=self.attempts)
        self._set_status("reconnecting", attempt=self.attempts, delay=delay)
        self._reconnect_handle = asyncio.get_running_loop().call_later(delay, self.connect)

    async def disconnect(self):
        """Cancel any pending reconnect and close the active connection."""
        self._stopped = True
        if self._reconnect_handle is not None:
            self._reconnect_handle.cancel()
            self._reconnect_handle = None
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        self.state = "closed"
        self._finished.set()

    async def wait_closed(self):
        """Wait until the client has failed for good or was disconnected."""
        await self._finished.wait()
