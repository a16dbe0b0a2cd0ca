"""Shared fixtures: a fake upstream for every external API."""
from datetime import datetime, timedelta, timezone
import random
import httpx
import pytest
from worldstate.cache import TTLCache
from worldstate.services import LiveFeed


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


def usgs_payload():
    now_ms = int(datetime.now(timezone.utc).timestamp() * 1000)
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "id": "us7000abcd",
                "properties": {
                    "mag": 6.1,
                    "place": "85 km SSE of Sand Point, Alaska",
                    "time": now_ms,
                    "url": "https://earthquake.usgs.gov/earthquakes/eventpage/us7000abcd",
                },
                "geometry": {"type": "Point", "coordinates": [-160.1, 54.6, 35.2]},
            },
            {
                "id": "ci40000001",
                "properties": {"mag": 3.2, "place": "Ridgecrest", "time": now_ms - 60_000},
                "geometry": {"type": "Point", "coordinates": [-117.6, 35.7, 8.0]},
            },
            # No magnitude: skipped
            {
                "id": "nn00000000",
                "properties": {"mag": None, "place": "Nevada"},
                "geometry": {"type": "Point", "coordinates": [-118.0, 38.0, 1.0]},
            },
        ],
    }


def weather_payload(temperature=21.5, wind=12.0, code=2):
    return {
        "current": {
            "temperature_2m": temperature,
            "relative_humidity_2m": 55,
            "wind_speed_10m": wind,
            "weather_code": code,
        }
    }


def feodo_payload():
    recent = (datetime.now(timezone.utc) - timedelta(days=2)).strftime("%Y-%m-%d %H:%M:%S")
    old = (datetime.now(timezone.utc) - timedelta(days=90)).strftime("%Y-%m-%d %H:%M:%S")
    return [
        {"ip_address": "192.0.2.10", "port": 443, "malware": "QakBot", "first_seen": recent, "last_online": recent},
        {"ip_address": "192.0.2.99", "port": 8080, "malware": "Emotet", "first_seen": old, "last_online": old},
    ]


def urlhaus_payload():
    return {
        "urls": [
            {"url": "http://198.51.100.7/bins/x86", "url_status": "online", "threat": "malware_download", "tags": ["mirai"]},
            {"url": "http://198.51.100.8/a.exe", "url_status": "offline", "threat": "malware_download", "tags": []},
        ]
    }


def geo_payload():
    return {"status": "success", "lat": 50.11, "lon": 8.68, "country": "Germany", "city": "Frankfurt"}


class FakeUpstream:
    """httpx transport handler answering like the real public APIs."""

    def __init__(self):
        self.calls = []
        self.failing = set()
        self.weather = weather_payload()
        # host -> JSON body replacing the default answer
        self.payloads = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        host = request.url.host
        self.calls.append(host)
        if host in self.failing:
            return httpx.Response(500, text="upstream error")
        if host in self.payloads:
            return httpx.Response(200, json=self.payloads[host])
        if host == "earthquake.usgs.gov":
            return httpx.Response(200, json=usgs_payload())
        if host == "api.open-meteo.com":
            return httpx.Response(200, json=self.weather)
        if host == "feodotracker.abuse.ch":
            return httpx.Response(200, json=feodo_payload())
        if host == "urlhaus.abuse.ch":
            return httpx.Response(200, json=urlhaus_payload())
        if host == "ip-api.com":
            return httpx.Response(200, json=geo_payload())
        return httpx.Response(404)

    def count(self, host: str) -> int:
        return self.calls.count(host)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def http_client(upstream):
    return httpx.AsyncClient(transport=httpx.MockTransport(upstream))


@pytest.fixture
def cache(clock):
    return TTLCache(clock=clock)


@pytest.fixture
def live_feed(http_client, cache):
    return LiveFeed(http_client, cache=cache, rng=random.Random(7), cyber_enabled=True)
