"""USGS earthquake catalog adapter."""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict
import structlog
from .base import LiveSource, live_attribution
from ..event_models import EarthquakeMetadata, Event, EventType, Severity, utc_now
from ..exceptions import SourceUnavailable

log = structlog.get_logger()

USGS_QUERY_URL = "https://earthquake.usgs.gov/fdsnws/event/1/query"
CACHE_KEY = "usgs-earthquakes"
CACHE_TTL_SECONDS = 5 * 60


def magnitude_severity(magnitude: float) -> Severity:
    """Severity tier for a magnitude; boundaries belong to the higher tier."""
    if magnitude >= 7.0:
        return Severity.CRITICAL
    if magnitude >= 5.0:
        return Severity.HIGH
    if magnitude >= 4.0:
        return Severity.MEDIUM
    return Severity.LOW


def extract_region(place: str | None) -> str:
    """Rough region from a USGS place string ("12 km SSE of City, Country")."""
    if not place:
        return "Unknown"
    parts = place.split(", ")
    return parts[-1] if len(parts) > 1 else place


class EarthquakeAdapter(LiveSource):
    """
    Fetches the last 24 hours of earthquakes from the USGS catalog.

    The whole page is cached for five minutes. On failure the last good
    page is returned (even if its cache entry has expired), or an empty
    list when nothing was ever fetched.
    """

    name = "usgs"

    def __init__(self, *args, min_magnitude: float = 2.5, limit: int = 50, **kwargs):
        super().__init__(*args, **kwargs)
        self.min_magnitude = min_magnitude
        self.limit = limit
        self._last_good: list[Event] = []

    async def fetch_earthquakes(self) -> list[Event]:
        """Return recent earthquakes, newest first."""
        cached = self._cache.get(CACHE_KEY)
        if cached is not None:
            return cached

        start = datetime.now(timezone.utc) - timedelta(hours=24)
        params = {
            "format": "geojson",
            "starttime": start.strftime("%Y-%m-%dT%H:%M:%S"),
            "minmagnitude": self.min_magnitude,
            "limit": self.limit,
            "orderby": "time",
        }

        try:
            payload = await self._get_json(USGS_QUERY_URL, params=params)
            features = payload["features"]
            events = [e for e in (self._convert(f) for f in features) if e is not None]
        except (SourceUnavailable, KeyError, TypeError, ValueError) as e:
            self._record_error(e)
            return self._last_good

        self._cache.set(CACHE_KEY, events, CACHE_TTL_SECONDS)
        self._last_good = events
        self._record_fetch()
        log.info("usgs.fetched", count=len(events), min_magnitude=self.min_magnitude)
        return events

    async def fetch_event(self) -> Event | None:
        """Pick one recent earthquake at random."""
        quakes = await self.fetch_earthquakes()
        if not quakes:
            return None
        return self._rng.choice(quakes).reissued("usgs")

    def _convert(self, feature) -> Event | None:
        """Convert one feature, skipping it when malformed."""
        try:
            return self._to_event(feature)
        except (ValueError, TypeError, AttributeError) as e:
            feature_id = feature.get("id") if isinstance(feature, dict) else None
            log.warning("usgs.feature_skipped", feature_id=feature_id, error=str(e))
            return None

    def _to_event(self, feature: Dict[str, Any]) -> Event | None:
        properties = feature.get("properties") or {}
        geometry = feature.get("geometry") or {}
        coordinates = geometry.get("coordinates") or []
        magnitude = properties.get("mag")
        if magnitude is None or len(coordinates) < 2:
            return None

        lng, lat = coordinates[0], coordinates[1]
        depth = coordinates[2] if len(coordinates) > 2 else None
        place = properties.get("place") or "Unknown location"
        depth_text = f"{depth:.0f}" if depth is not None else "?"

        timestamp = utc_now()
        if properties.get("time") is not None:
            timestamp = datetime.fromtimestamp(properties["time"] / 1000, tz=timezone.utc)

        return Event(
            id=f"usgs-{feature.get('id')}",
            type=EventType.DISASTER,
            severity=magnitude_severity(magnitude),
            coords=(lat, lng),
            timestamp=timestamp,
            source=live_attribution("USGS Earthquake Hazards", "https://earthquake.usgs.gov/"),
            metadata=EarthquakeMetadata(
                location=place,
                region=extract_region(place),
                message=f"Earthquake M{magnitude:.1f} - {place} (depth {depth_text} km)",
                magnitude=magnitude,
                depth=depth,
                usgs_id=str(feature.get("id")),
                usgs_url=properties.get("url"),
            ),
        )
