"""Tests for the live data adapters."""
import random
from unittest.mock import AsyncMock, Mock
import orjson
import pytest
from worldstate.adapters import CyberThreatAdapter, EarthquakeAdapter, WeatherAdapter
from worldstate.adapters.open_meteo import weather_severity
from worldstate.adapters.usgs import CACHE_TTL_SECONDS, extract_region, magnitude_severity
from worldstate.event_models import EventType, Severity
from worldstate.services import LiveFeed
from worldstate.streaming import Broadcaster
from conftest import feodo_payload, usgs_payload, weather_payload

BERLIN = [{"name": "Berlin", "lat": 52.52, "lng": 13.40, "region": "Europe"}]


def first_choice_rng(draw: float = 0.1):
    """Rng stub: fixed uniform draw, always the first element."""
    return Mock(random=Mock(return_value=draw), choice=lambda seq: seq[0])


@pytest.mark.parametrize(
    "magnitude, expected",
    [
        (3.0, Severity.LOW),
        (3.9, Severity.LOW),
        (4.2, Severity.MEDIUM),
        (5.5, Severity.HIGH),
        (7.2, Severity.CRITICAL),
        (4.0, Severity.MEDIUM),
        (4.9, Severity.MEDIUM),
        (5.0, Severity.HIGH),
        (6.9, Severity.HIGH),
        (7.0, Severity.CRITICAL),
        (8.2, Severity.CRITICAL),
    ],
)
def test_magnitude_severity(magnitude, expected):
    """Test magnitude tiers include their lower boundary."""
    assert magnitude_severity(magnitude) is expected


def test_extract_region():
    """Test region is the last comma-separated part of the place."""
    assert extract_region("85 km SSE of Sand Point, Alaska") == "Alaska"
    assert extract_region("Ridgecrest") == "Ridgecrest"
    assert extract_region(None) == "Unknown"


@pytest.mark.asyncio
async def test_earthquakes_parsed(http_client, cache):
    """Test USGS features become live disaster events."""
    adapter = EarthquakeAdapter(http_client, cache)
    quakes = await adapter.fetch_earthquakes()

    assert len(quakes) == 2
    quake = quakes[0]
    assert quake.type is EventType.DISASTER
    assert quake.severity is Severity.HIGH
    assert quake.coords == (54.6, -160.1)
    assert quake.live is True
    assert quake.metadata.magnitude == 6.1
    assert quake.metadata.region == "Alaska"
    assert quake.metadata.usgs_id == "us7000abcd"
    assert adapter.stats.fetches == 1


@pytest.mark.asyncio
async def test_earthquakes_cached(http_client, cache, upstream, clock):
    """Test the page is fetched once per cache window."""
    adapter = EarthquakeAdapter(http_client, cache)
    await adapter.fetch_earthquakes()
    clock.advance(CACHE_TTL_SECONDS - 1)
    await adapter.fetch_earthquakes()
    assert upstream.count("earthquake.usgs.gov") == 1

    clock.advance(2)
    await adapter.fetch_earthquakes()
    assert upstream.count("earthquake.usgs.gov") == 2


@pytest.mark.asyncio
async def test_earthquakes_stale_on_failure(http_client, cache, upstream, clock):
    """Test a failed refresh returns the last good data."""
    adapter = EarthquakeAdapter(http_client, cache)
    first = await adapter.fetch_earthquakes()

    clock.advance(CACHE_TTL_SECONDS + 1)
    upstream.failing.add("earthquake.usgs.gov")
    second = await adapter.fetch_earthquakes()

    assert second == first
    assert adapter.stats.errors == 1


@pytest.mark.asyncio
async def test_earthquakes_empty_on_first_failure(http_client, cache, upstream):
    """Test failure without prior data yields an empty list, not an error."""
    upstream.failing.add("earthquake.usgs.gov")
    adapter = EarthquakeAdapter(http_client, cache)
    assert await adapter.fetch_earthquakes() == []
    assert await adapter.fetch_event() is None


@pytest.mark.asyncio
async def test_earthquake_event_reissued(http_client, cache):
    """Test a re-emitted quake gets a fresh id each time."""
    adapter = EarthquakeAdapter(http_client, cache, rng=first_choice_rng())
    first = await adapter.fetch_event()
    second = await adapter.fetch_event()

    assert first.id != second.id
    assert first.id.startswith("usgs-")
    assert first.metadata == second.metadata


@pytest.mark.parametrize(
    "base, temperature, wind, expected",
    [
        (Severity.LOW, 20, 10, Severity.LOW),
        (Severity.LOW, 36, 10, Severity.HIGH),
        (Severity.LOW, 41, 10, Severity.CRITICAL),
        (Severity.LOW, -20, 10, Severity.HIGH),
        (Severity.LOW, -30, 10, Severity.CRITICAL),
        (Severity.LOW, 20, 61, Severity.HIGH),
        (Severity.LOW, 20, 101, Severity.CRITICAL),
        (Severity.MEDIUM, 36, 10, Severity.HIGH),
        (Severity.CRITICAL, 20, 10, Severity.CRITICAL),
        (Severity.CRITICAL, 36, 61, Severity.CRITICAL),
    ],
)
def test_weather_severity_only_escalates(base, temperature, wind, expected):
    """Test extreme conditions raise severity and never lower it."""
    assert weather_severity(base, temperature, wind) is expected


@pytest.mark.asyncio
async def test_weather_event(http_client, cache, upstream):
    """Test current conditions become a live weather event."""
    upstream.weather = weather_payload(temperature=42.0, wind=15.0, code=95)
    adapter = WeatherAdapter(http_client, cache, locations=BERLIN)
    event = await adapter.fetch_event()

    assert event.type is EventType.WEATHER
    assert event.severity is Severity.CRITICAL
    assert event.coords == (52.52, 13.40)
    assert event.live is True
    assert event.metadata.weather_description == "Thunderstorm"
    assert "Berlin" in event.metadata.message
    assert event.id.startswith("weather-berlin-")


@pytest.mark.asyncio
async def test_weather_cached_per_city(http_client, cache, upstream):
    """Test a city is fetched once per window and reissued from cache."""
    adapter = WeatherAdapter(http_client, cache, locations=BERLIN)
    first = await adapter.fetch_event()
    second = await adapter.fetch_event()

    assert upstream.count("api.open-meteo.com") == 1
    assert first.id != second.id
    assert second.metadata == first.metadata


@pytest.mark.asyncio
async def test_weather_failure_returns_none(http_client, cache, upstream):
    """Test a failed fetch yields nothing instead of raising."""
    upstream.failing.add("api.open-meteo.com")
    adapter = WeatherAdapter(http_client, cache, locations=BERLIN)
    assert await adapter.fetch_event() is None
    assert adapter.stats.errors == 1


@pytest.mark.asyncio
async def test_weather_malformed_payload(http_client, cache, upstream):
    """Test a payload without current conditions is treated as a failure."""
    upstream.weather = {"hourly": {}}
    adapter = WeatherAdapter(http_client, cache, locations=BERLIN)
    assert await adapter.fetch_event() is None


@pytest.mark.asyncio
async def test_cyber_disabled(http_client, cache, upstream):
    """Test the disabled layer makes no requests."""
    adapter = CyberThreatAdapter(http_client, cache, enabled=False)
    assert await adapter.fetch_event() is None
    assert upstream.calls == []


@pytest.mark.asyncio
async def test_feodo_keeps_recent_entries(http_client, cache):
    """Test only C2 servers seen in the last 30 days are kept."""
    adapter = CyberThreatAdapter(http_client, cache, enabled=True)
    entries = await adapter.fetch_feodo()
    assert [e["ip_address"] for e in entries] == ["192.0.2.10"]


@pytest.mark.asyncio
async def test_urlhaus_keeps_online_entries(http_client, cache):
    """Test only online malware URLs are kept."""
    adapter = CyberThreatAdapter(http_client, cache, enabled=True)
    entries = await adapter.fetch_urlhaus()
    assert len(entries) == 1
    assert entries[0]["url_status"] == "online"


@pytest.mark.asyncio
async def test_c2_event(http_client, cache):
    """Test a Feodo entry becomes a geolocated live cyber event."""
    adapter = CyberThreatAdapter(http_client, cache, rng=first_choice_rng(0.1), enabled=True)
    event = await adapter.fetch_event()

    assert event.type is EventType.CYBER
    assert event.severity is Severity.HIGH
    assert event.coords == (50.11, 8.68)
    assert event.live is True
    assert event.metadata.subtype == "c2_server"
    assert event.metadata.malware_family == "QakBot"
    assert event.metadata.port == 443


@pytest.mark.asyncio
async def test_malware_host_event(http_client, cache):
    """Test a URLhaus entry with an IP host becomes a cyber event."""
    adapter = CyberThreatAdapter(http_client, cache, rng=first_choice_rng(0.9), enabled=True)
    event = await adapter.fetch_event()

    assert event.metadata.subtype == "malware_host"
    assert event.metadata.ip == "198.51.100.7"
    assert event.metadata.malware_family == "mirai"


@pytest.mark.asyncio
async def test_geocode_cached(http_client, cache, upstream):
    """Test IP lookups are cached."""
    adapter = CyberThreatAdapter(http_client, cache, enabled=True)
    await adapter.geocode("192.0.2.10")
    location = await adapter.geocode("192.0.2.10")
    assert location["city"] == "Frankfurt"
    assert upstream.count("ip-api.com") == 1


@pytest.mark.asyncio
async def test_geocode_failure(http_client, cache, upstream):
    """Test an unreachable geocoder yields no event."""
    upstream.failing.add("ip-api.com")
    adapter = CyberThreatAdapter(http_client, cache, rng=first_choice_rng(0.1), enabled=True)
    assert await adapter.geocode("192.0.2.10") is None
    assert await adapter.fetch_event() is None


@pytest.mark.asyncio
async def test_metrics_recorded(http_client, cache, upstream):
    """Test fetches and errors reach the metrics holder."""
    metrics = Mock()
    adapter = EarthquakeAdapter(http_client, cache, metrics=metrics, rng=random.Random(1))
    await adapter.fetch_earthquakes()
    metrics.record_api_fetch.assert_called_once_with("usgs")

    upstream.failing.add("api.open-meteo.com")
    weather = WeatherAdapter(http_client, cache, metrics=metrics, locations=BERLIN)
    await weather.fetch_event()
    metrics.record_api_error.assert_called_once_with("open_meteo")


@pytest.mark.asyncio
async def test_malformed_features_skipped(http_client, cache, upstream):
    """Test one bad feature is dropped without losing the rest of the page."""
    page = usgs_payload()
    page["features"] += [
        {"id": "nullcoord", "properties": {"mag": 4.4, "place": "Somewhere"},
         "geometry": {"coordinates": [None, 20.0, 5.0]}},
        {"id": "strdepth", "properties": {"mag": 4.4, "place": "Elsewhere"},
         "geometry": {"coordinates": [10.0, 20.0, "deep"]}},
    ]
    upstream.payloads["earthquake.usgs.gov"] = page
    adapter = EarthquakeAdapter(http_client, cache)

    quakes = await adapter.fetch_earthquakes()

    assert [q.metadata.usgs_id for q in quakes] == ["us7000abcd", "ci40000001"]
    assert adapter.stats.errors == 0


@pytest.mark.asyncio
async def test_init_survives_malformed_feature(http_client, cache, upstream):
    """Test a new connection still gets its init snapshot."""
    page = usgs_payload()
    page["features"].append(
        {"id": "nullcoord", "properties": {"mag": 4.4}, "geometry": {"coordinates": [None, 20.0]}}
    )
    upstream.payloads["earthquake.usgs.gov"] = page
    feed = LiveFeed(http_client, cache=cache)
    ws = AsyncMock()

    await Broadcaster(live_feed=feed).connect(ws)

    ws.send_text.assert_awaited_once()
    assert len(orjson.loads(ws.send_text.await_args.args[0])["payload"]["recentEvents"]) == 2


@pytest.mark.asyncio
async def test_c2_bad_port_returns_none(http_client, cache, upstream):
    """Test a non-numeric port is recorded as an error, not raised."""
    entry = feodo_payload()[0]
    entry["port"] = "n/a"
    upstream.payloads["feodotracker.abuse.ch"] = [entry]
    adapter = CyberThreatAdapter(http_client, cache, rng=first_choice_rng(0.1), enabled=True)

    assert await adapter.fetch_event() is None
    assert adapter.stats.errors == 1


@pytest.mark.asyncio
async def test_c2_missing_coordinates_returns_none(http_client, cache, upstream):
    """Test a geocode without coordinates yields no event."""
    upstream.payloads["ip-api.com"] = {"status": "success", "lat": None, "lon": None, "city": "X"}
    adapter = CyberThreatAdapter(http_client, cache, rng=first_choice_rng(0.1), enabled=True)

    assert await adapter.fetch_event() is None
    assert adapter.stats.errors == 1
