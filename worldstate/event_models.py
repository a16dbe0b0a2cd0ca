from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Annotated, Literal, Union
from datetime import datetime, timezone
from enum import Enum
import random, string, time

_ID_ALPHABET = string.ascii_lowercase + string.digits


class Severity(str, Enum):
    """Ordered severity levels (low < medium < high < critical)."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return SEVERITY_ORDER.index(self)


SEVERITY_ORDER = [Severity.LOW, Severity.MEDIUM, Severity.HIGH, Severity.CRITICAL]


class EventType(str, Enum):
    URBAN_GROWTH = "urban_growth"
    CONFLICT = "conflict"
    INFRASTRUCTURE = "infrastructure"
    DISASTER = "disaster"
    PROTEST = "protest"
    WEATHER = "weather"
    CYBER = "cyber"


def escalate(current: Severity, candidate: Severity) -> Severity:
    """Return the higher of two severities."""
    return candidate if candidate.rank > current.rank else current


def coerce_severity(value, default: Severity = Severity.LOW) -> Severity:
    """Map a raw severity value to the enum, falling back to ``default``."""
    try:
        return Severity(value)
    except ValueError:
        return default


def coerce_event_type(value) -> EventType | None:
    """Map a raw type value to the enum, or None when unrecognized."""
    try:
        return EventType(value)
    except ValueError:
        return None


def new_event_id(prefix: str = "evt", rng: random.Random | None = None) -> str:
    """Opaque event id: ``{prefix}-{epoch_ms}-{6 base36 chars}``."""
    rng = rng or random
    suffix = "".join(rng.choices(_ID_ALPHABET, k=6))
    return f"{prefix}-{int(time.time() * 1000)}-{suffix}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class WireModel(BaseModel):
    """Immutable model serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Badge(WireModel):
    label: str
    icon: str
    color: str


class SourceAttribution(WireModel):
    name: str
    url: str
    update_frequency: str
    reliability: str
    last_verified: str
    badge: Badge
    # True only for data fetched from a real external API
    live: bool = False


class UrbanGrowthMetadata(WireModel):
    kind: Literal["urban_growth"] = "urban_growth"
    city: str
    country: str
    message: str
    population: int
    impervious_km2: float
    growth_rate: float = Field(..., description="Percent growth 2020 -> 2024")
    polygon: list[tuple[float, float]] = Field(default_factory=list)


class HotspotMetadata(WireModel):
    kind: Literal["hotspot"] = "hotspot"
    location: str
    region: str
    message: str
    verified: bool = False
    sources: int = 1


class EarthquakeMetadata(WireModel):
    kind: Literal["earthquake"] = "earthquake"
    location: str
    region: str
    message: str
    magnitude: float
    depth: float | None = None
    verified: bool = True
    sources: int = 1
    usgs_id: str
    usgs_url: str | None = None


class WeatherReportMetadata(WireModel):
    kind: Literal["weather_report"] = "weather_report"
    location: str
    region: str
    message: str
    temperature: float
    wind_speed: float
    humidity: float | None = None
    weather_code: int
    weather_icon: str
    weather_description: str
    verified: bool = True
    sources: int = 1


class CyberThreatMetadata(WireModel):
    kind: Literal["cyber_threat"] = "cyber_threat"
    subtype: Literal["c2_server", "malware_host"]
    title: str
    message: str
    location: str
    region: str
    country: str | None = None
    ip: str | None = None
    url: str | None = None
    malware_family: str | None = None
    port: int | None = None
    first_seen: str | None = None
    last_seen: str | None = None
    confidence: str | None = None
    verified: bool = False


EventMetadata = Annotated[
    Union[
        UrbanGrowthMetadata,
        HotspotMetadata,
        EarthquakeMetadata,
        WeatherReportMetadata,
        CyberThreatMetadata,
    ],
    Field(discriminator="kind"),
]


class Event(WireModel):
    """A single map event as broadcast to stream clients."""
    id: str
    type: EventType
    severity: Severity
    coords: tuple[float, float]
    timestamp: datetime = Field(default_factory=utc_now)
    source: SourceAttribution
    metadata: EventMetadata

    @property
    def live(self) -> bool:
        return self.source.live

    def to_wire(self) -> dict:
        """JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)

    def reissued(self, prefix: str) -> "Event":
        """Copy with a fresh id, used when a cached reading is emitted again."""
        return self.model_copy(update={"id": new_event_id(prefix)})

    def as_synthetic(self) -> "Event":
        """Copy whose source is explicitly marked as not live."""
        return self.model_copy(update={"source": self.source.model_copy(update={"live": False})})
