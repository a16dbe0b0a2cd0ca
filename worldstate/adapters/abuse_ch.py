"""
abuse.ch cyber threat adapter.

Only public threat indicators are used (botnet C2 addresses from Feodo
Tracker, malware distribution hosts from URLhaus). IP addresses are
geolocated through ip-api.com so they can be placed on the map.
"""
from datetime import datetime, timedelta, timezone
from ipaddress import ip_address
from typing import Any, Dict, List
from urllib.parse import urlparse
import structlog
from .base import LiveSource, live_attribution
from ..event_models import CyberThreatMetadata, Event, EventType, Severity, new_event_id
from ..exceptions import SourceUnavailable

log = structlog.get_logger()

FEODO_URL = "https://feodotracker.abuse.ch/downloads/ipblocklist.json"
URLHAUS_URL = "https://urlhaus.abuse.ch/downloads/json_recent/"
GEOCODE_URL = "http://ip-api.com/json/{ip}"

FEED_TTL_SECONDS = 60 * 60
GEOCODE_TTL_SECONDS = 24 * 60 * 60
ACTIVE_WINDOW = timedelta(days=30)
FEODO_SHARE = 0.7


def _parse_seen(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _ip_host(url: str) -> str | None:
    """Host part of a URL if it is an IPv4 literal."""
    try:
        host = urlparse(url).hostname
        if host is None:
            return None
        return str(ip_address(host)) if ip_address(host).version == 4 else None
    except ValueError:
        return None


class CyberThreatAdapter(LiveSource):
    """Feodo Tracker (70%) and URLhaus (30%) threats, cached for an hour."""

    name = "abuse_ch"

    def __init__(self, *args, enabled: bool = False, **kwargs):
        super().__init__(*args, **kwargs)
        self.enabled = enabled
        self._stale: Dict[str, List[Dict[str, Any]]] = {"feodo": [], "urlhaus": []}

    async def fetch_feodo(self) -> List[Dict[str, Any]]:
        """Botnet C2 entries seen within the last 30 days."""
        cached = self._cache.get("abuse-feodo")
        if cached is not None:
            return cached
        try:
            payload = await self._get_json(FEODO_URL)
            cutoff = datetime.now(timezone.utc) - ACTIVE_WINDOW
            entries = []
            for entry in payload:
                seen = _parse_seen(entry.get("last_online") or entry.get("first_seen"))
                if seen is not None and seen >= cutoff:
                    entries.append(entry)
        except (SourceUnavailable, AttributeError, TypeError) as e:
            self._record_error(e)
            return self._stale["feodo"]

        self._cache.set("abuse-feodo", entries, FEED_TTL_SECONDS)
        self._stale["feodo"] = entries
        self._record_fetch()
        log.info("abuse_ch.feodo_fetched", active=len(entries))
        return entries

    async def fetch_urlhaus(self) -> List[Dict[str, Any]]:
        """Malware URLs currently online."""
        cached = self._cache.get("abuse-urlhaus")
        if cached is not None:
            return cached
        try:
            payload = await self._get_json(URLHAUS_URL)
            entries = [e for e in payload.get("urls") or [] if e.get("url_status") == "online"]
        except (SourceUnavailable, AttributeError, TypeError) as e:
            self._record_error(e)
            return self._stale["urlhaus"]

        self._cache.set("abuse-urlhaus", entries, FEED_TTL_SECONDS)
        self._stale["urlhaus"] = entries
        self._record_fetch()
        log.info("abuse_ch.urlhaus_fetched", active=len(entries))
        return entries

    async def geocode(self, ip: str) -> Dict[str, Any] | None:
        """Approximate location of an IP address, or None."""
        key = f"geo-{ip}"
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        try:
            data = await self._get_json(
                GEOCODE_URL.format(ip=ip), params={"fields": "status,lat,lon,country,city"}
            )
            if data.get("status") != "success":
                return None
            result = {
                "lat": data["lat"],
                "lng": data["lon"],
                "country": data.get("country"),
                "city": data.get("city") or "Unknown",
            }
        except (SourceUnavailable, AttributeError, KeyError) as e:
            log.warning("abuse_ch.geocode_failed", error=str(e))
            return None
        self._cache.set(key, result, GEOCODE_TTL_SECONDS)
        return result

    async def fetch_event(self) -> Event | None:
        if not self.enabled:
            return None
        try:
            if self._rng.random() < FEODO_SHARE:
                return await self._c2_event()
            return await self._malware_host_event()
        except (ValueError, TypeError) as e:
            # Malformed upstream entry (bad port, missing coordinates)
            self._record_error(e)
            return None

    async def _c2_event(self) -> Event | None:
        entries = await self.fetch_feodo()
        if not entries:
            return None
        threat = self._rng.choice(entries)
        ip = threat.get("ip_address")
        location = await self.geocode(ip) if ip else None
        if location is None:
            return None
        malware = threat.get("malware") or "Unknown"
        port = threat.get("port") or threat.get("dst_port")
        return self._build_event(
            location,
            CyberThreatMetadata(
                subtype="c2_server",
                title="Botnet C2 server detected",
                message=f"{malware} command and control server active",
                location=location["city"],
                region=location["city"],
                country=location["country"],
                ip=ip,
                malware_family=malware,
                port=int(port) if port else None,
                first_seen=threat.get("first_seen"),
                last_seen=threat.get("last_online") or threat.get("first_seen"),
                confidence="High (abuse.ch verified)",
                verified=True,
            ),
            "abuse.ch Feodo Tracker",
            "https://feodotracker.abuse.ch/",
        )

    async def _malware_host_event(self) -> Event | None:
        entries = await self.fetch_urlhaus()
        if not entries:
            return None
        threat = self._rng.choice(entries)
        ip = _ip_host(threat.get("url", ""))
        if ip is None:
            return None
        location = await self.geocode(ip)
        if location is None:
            return None
        tags = threat.get("tags") or []
        return self._build_event(
            location,
            CyberThreatMetadata(
                subtype="malware_host",
                title="Malware distribution server",
                message=f"{threat.get('threat') or 'Malware'} actively distributed",
                location=location["city"],
                region=location["city"],
                country=location["country"],
                ip=ip,
                url=threat.get("url"),
                malware_family=", ".join(tags) or "Unknown",
                first_seen=threat.get("dateadded"),
                confidence="High (abuse.ch verified)",
                verified=True,
            ),
            "abuse.ch URLhaus",
            "https://urlhaus.abuse.ch/",
        )

    @staticmethod
    def _build_event(location, metadata: CyberThreatMetadata, source_name: str, source_url: str) -> Event:
        return Event(
            id=new_event_id("cyber"),
            type=EventType.CYBER,
            severity=Severity.HIGH,
            coords=(location["lat"], location["lng"]),
            source=live_attribution(source_name, source_url, update_frequency="Hourly"),
            metadata=metadata,
        )

