"""Open-Meteo current weather adapter."""
import structlog
from .base import LiveSource, live_attribution
from ..data import WEATHER_LOCATIONS, WMO_WEATHER_CODES
from ..event_models import (
    Event,
    EventType,
    Severity,
    WeatherReportMetadata,
    escalate,
    new_event_id,
)
from ..exceptions import SourceUnavailable

log = structlog.get_logger()

OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"
CACHE_TTL_SECONDS = 30 * 60


def weather_severity(base: Severity, temperature: float, wind_speed: float) -> Severity:
    """
    Escalate a weather code's base severity under extreme conditions.

    Severity is only ever raised, never lowered.
    """
    severity = base
    if temperature > 40 or temperature < -25:
        severity = escalate(severity, Severity.CRITICAL)
    elif temperature > 35 or temperature < -15:
        severity = escalate(severity, Severity.HIGH)

    if wind_speed > 100:
        severity = escalate(severity, Severity.CRITICAL)
    elif wind_speed > 60:
        severity = escalate(severity, Severity.HIGH)
    return severity


class WeatherAdapter(LiveSource):
    """Current conditions for a random city, cached per city for 30 minutes."""

    name = "open_meteo"

    def __init__(self, *args, locations: list[dict] | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.locations = locations or WEATHER_LOCATIONS

    async def fetch_event(self) -> Event | None:
        location = self._rng.choice(self.locations)
        cache_key = f"weather-{location['name']}"
        cached = self._cache.get(cache_key)
        if cached is not None:
            return cached.reissued(self._id_prefix(location))

        params = {
            "latitude": location["lat"],
            "longitude": location["lng"],
            "current": "temperature_2m,relative_humidity_2m,wind_speed_10m,weather_code",
            "timezone": "auto",
        }

        try:
            payload = await self._get_json(OPEN_METEO_URL, params=params)
            event = self._to_event(location, payload["current"])
        except (SourceUnavailable, KeyError, TypeError, ValueError) as e:
            self._record_error(e)
            return None

        self._cache.set(cache_key, event, CACHE_TTL_SECONDS)
        self._record_fetch()
        log.info(
            "open_meteo.fetched",
            location=location["name"],
            temperature=event.metadata.temperature,
            severity=event.severity.value,
        )
        return event

    @staticmethod
    def _id_prefix(location: dict) -> str:
        return "weather-" + location["name"].lower().replace(" ", "-")

    def _to_event(self, location: dict, current: dict) -> Event:
        code = int(current["weather_code"])
        info = WMO_WEATHER_CODES.get(code, WMO_WEATHER_CODES[0])
        temperature = float(current["temperature_2m"])
        wind = float(current["wind_speed_10m"])
        humidity = current.get("relative_humidity_2m")

        severity = weather_severity(Severity(info["severity"]), temperature, wind)
        message = (
            f"{info['icon']} {location['name']}: {info['desc']} - {temperature}°C, "
            f"wind {wind} km/h, humidity {humidity if humidity is not None else '?'}%"
        )

        return Event(
            id=new_event_id(self._id_prefix(location)),
            type=EventType.WEATHER,
            severity=severity,
            coords=(location["lat"], location["lng"]),
            source=live_attribution("Open-Meteo (ECMWF/DWD)", "https://open-meteo.com/"),
            metadata=WeatherReportMetadata(
                location=location["name"],
                region=location["region"],
                message=message,
                temperature=temperature,
                wind_speed=wind,
                humidity=humidity,
                weather_code=code,
                weather_icon=info["icon"],
                weather_description=info["desc"],
            ),
        )
