"""Aggregates the live external adapters behind one interface."""
from typing import Any, Dict
import random
import httpx
import structlog
from ..adapters import CyberThreatAdapter, EarthquakeAdapter, WeatherAdapter
from ..cache import TTLCache
from ..config import Settings
from ..event_models import Event

log = structlog.get_logger()

CYBER_SHARE = 0.2


class LiveFeed:
    """
    Owns the HTTP client, the shared TTL cache and the live adapters.

    Created once per process and closed on shutdown.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        cache: TTLCache | None = None,
        rng: random.Random | None = None,
        cyber_enabled: bool = False,
        min_magnitude: float = 2.5,
        earthquake_limit: int = 50,
        metrics=None,
    ):
        self._client = client
        self._rng = rng or random.Random()
        self.cache = cache or TTLCache()
        shared = dict(client=client, cache=self.cache, rng=self._rng, metrics=metrics)
        self.earthquakes = EarthquakeAdapter(
            **shared, min_magnitude=min_magnitude, limit=earthquake_limit
        )
        self.weather = WeatherAdapter(**shared)
        self.cyber = CyberThreatAdapter(**shared, enabled=cyber_enabled)

    @classmethod
    def from_settings(cls, settings: Settings, metrics=None) -> "LiveFeed":
        client = httpx.AsyncClient(
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            headers={"User-Agent": "worldstate/0.1.0"},
        )
        return cls(
            client,
            cyber_enabled=settings.ENABLE_CYBER_LAYER,
            min_magnitude=settings.EARTHQUAKE_MIN_MAGNITUDE,
            earthquake_limit=settings.EARTHQUAKE_LIMIT,
            metrics=metrics,
        )

    async def recent_earthquakes(self, limit: int = 10) -> list[Event]:
        """Latest earthquakes for the init snapshot."""
        quakes = await self.earthquakes.fetch_earthquakes()
        return quakes[:limit]

    async def random_event(self) -> Event | None:
        """
        One live event from a randomly chosen adapter.

        Returns None when the chosen adapter has nothing to offer; callers
        fall back to synthetic generation.
        """
        if self.cyber.enabled and self._rng.random() < CYBER_SHARE:
            return await self.cyber.fetch_event()
        if self._rng.random() < 0.5:
            return await self.earthquakes.fetch_event()
        return await self.weather.fetch_event()

    def stats(self) -> Dict[str, Any]:
        """Aggregate fetch counters (no per-client data)."""
        quake_stats = self.earthquakes.stats
        weather_stats = self.weather.stats
        cyber_stats = self.cyber.stats
        return {
            "usgs": {"fetches": quake_stats.fetches, "lastFetch": quake_stats.last_fetch},
            "openMeteo": {"fetches": weather_stats.fetches, "lastFetch": weather_stats.last_fetch},
            "abuseCh": {
                "enabled": self.cyber.enabled,
                "fetches": cyber_stats.fetches,
                "lastFetch": cyber_stats.last_fetch,
            },
            "errors": quake_stats.errors + weather_stats.errors + cyber_stats.errors,
            "cacheSize": len(self.cache),
        }

    async def aclose(self):
        await self._client.aclose()
        log.info("live_feed.closed")
