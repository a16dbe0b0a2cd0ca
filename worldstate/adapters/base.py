"""Base interface for live external data sources."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict
import random
import httpx
import structlog
from ..cache import TTLCache
from ..event_models import Badge, Event, SourceAttribution, utc_now
from ..data import RELIABILITY_BADGES
from ..exceptions import SourceUnavailable

log = structlog.get_logger()


@dataclass
class FetchStats:
    """Aggregate counters for one external API."""
    fetches: int = 0
    errors: int = 0
    last_fetch: str | None = None

    def as_dict(self) -> Dict[str, Any]:
        return {"fetches": self.fetches, "lastFetch": self.last_fetch, "errors": self.errors}


def live_attribution(name: str, url: str, reliability: str = "scientific",
                     update_frequency: str = "Real time") -> SourceAttribution:
    """Attribution record for data fetched from a real external API."""
    badge = RELIABILITY_BADGES.get(reliability, RELIABILITY_BADGES["community"])
    return SourceAttribution(
        name=name,
        url=url,
        update_frequency=update_frequency,
        reliability=reliability,
        last_verified=utc_now().date().isoformat(),
        badge=Badge(label=badge["label"], icon=badge["icon"], color=badge["color"]),
        live=True,
    )


class LiveSource(ABC):
    """
    Adapter translating one public API into internal events.

    Subclasses never raise to their callers: fetch failures are logged,
    counted, and turned into stale data or an empty result.
    """

    name: str = "source"

    def __init__(
        self,
        client: httpx.AsyncClient,
        cache: TTLCache,
        rng: random.Random | None = None,
        metrics=None,
    ):
        """
        Args:
            client: Shared HTTP client
            cache: Shared TTL cache
            rng: Random source (injectable for tests)
            metrics: Optional Prometheus metrics holder
        """
        self._client = client
        self._cache = cache
        self._rng = rng or random.Random()
        self._metrics = metrics
        self.stats = FetchStats()

    async def _get_json(self, url: str, params: Dict[str, Any] | None = None) -> Any:
        """
        GET a JSON document.

        Raises:
            SourceUnavailable: On transport errors, non-success status or bad JSON
        """
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise SourceUnavailable(self.name, str(e)) from e

    def _record_fetch(self):
        self.stats.fetches += 1
        self.stats.last_fetch = utc_now().isoformat()
        if self._metrics is not None:
            self._metrics.record_api_fetch(self.name)

    def _record_error(self, error: Exception):
        self.stats.errors += 1
        log.warning(f"{self.name}.fetch_failed", error=str(error), error_type=type(error).__name__)
        if self._metrics is not None:
            self._metrics.record_api_error(self.name)

    @abstractmethod
    async def fetch_event(self) -> Event | None:
        """
        Return one live event, or None when nothing is available.

        Returns:
            An event whose source is marked live, or None
        """
        pass
