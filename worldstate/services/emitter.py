"""Randomized broadcast loop mixing live and synthetic events."""
import asyncio
import random
import structlog
from .generator import EventGenerator
from .live_feed import LiveFeed
from ..event_models import Event
from ..streaming.broadcaster import Broadcaster

log = structlog.get_logger()


class EventEmitter:
    """
    Emits one event per tick to every connected client.

    Ticks fire on a uniformly random interval. No work is done while no
    client is connected. A share of ticks tries live data first; a live
    miss falls back to the synthetic generator, never to a skipped tick.
    """

    def __init__(
        self,
        broadcaster: Broadcaster,
        generator: EventGenerator,
        live_feed: LiveFeed | None = None,
        rng: random.Random | None = None,
        tick_min: float = 2.0,
        tick_max: float = 5.0,
        live_ratio: float = 0.6,
        metrics=None,
    ):
        self._broadcaster = broadcaster
        self._generator = generator
        self._live_feed = live_feed
        self._rng = rng or random.Random()
        self.tick_min = tick_min
        self.tick_max = tick_max
        self.live_ratio = live_ratio
        self._metrics = metrics
        self._task: asyncio.Task | None = None
        self.events_emitted = 0
        self.real_events_emitted = 0

    def next_delay(self) -> float:
        return self._rng.uniform(self.tick_min, self.tick_max)

    async def tick(self) -> Event | None:
        """
        Run one emission step.

        Returns:
            The broadcast event, or None when no client is connected
        """
        if self._broadcaster.connection_count == 0:
            return None

        event = None
        if self._live_feed is not None and self._rng.random() < self.live_ratio:
            event = await self._live_feed.random_event()

        if event is None:
            event = self._generator.generate().as_synthetic()
        else:
            self.real_events_emitted += 1

        await self._broadcaster.broadcast(event)
        self.events_emitted += 1
        if self._metrics is not None:
            self._metrics.record_event_emitted(event.type.value, event.live)
        log.debug("event.emitted", type=event.type.value, severity=event.severity.value, live=event.live)
        return event

    async def run(self):
        """Tick forever; an unexpected error costs one tick, not the loop."""
        while True:
            try:
                await self.tick()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                log.error("emitter.tick_failed", error=str(e), exc_info=True)
            await asyncio.sleep(self.next_delay())

    def start(self):
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self.run())
            log.info("emitter.started", tick_min=self.tick_min, tick_max=self.tick_max)

    async def stop(self):
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        log.info("emitter.stopped", events_emitted=self.events_emitted)

    def stats(self) -> dict:
        return {
            "eventsEmitted": self.events_emitted,
            "realEventsEmitted": self.real_events_emitted,
        }
