"""Synthetic event generator for demonstration data."""
from typing import Dict, Sequence, Tuple, TypeVar
import random
from ..data import (
    CYBER_LOCATIONS,
    CYBER_MALWARE_FAMILIES,
    EVENT_SOURCES,
    EVENT_TEMPLATES,
    GUB_REGIONS,
    HOTSPOT_LOCATIONS,
    RELIABILITY_BADGES,
)
from ..event_models import (
    SEVERITY_ORDER,
    Badge,
    CyberThreatMetadata,
    Event,
    EventType,
    HotspotMetadata,
    Severity,
    SourceAttribution,
    UrbanGrowthMetadata,
    new_event_id,
)

T = TypeVar("T")

DEFAULT_WEIGHTS: Dict[EventType, float] = {
    EventType.URBAN_GROWTH: 0.20,
    EventType.CONFLICT: 0.20,
    EventType.INFRASTRUCTURE: 0.10,
    EventType.DISASTER: 0.15,
    EventType.PROTEST: 0.10,
    EventType.WEATHER: 0.25,
}
CYBER_WEIGHT = 0.10

HOTSPOT_JITTER = 0.08
URBAN_JITTER = 0.03
CYBER_JITTER = 0.05


def weighted_choice(weights: Sequence[Tuple[T, float]], draw: float) -> T:
    """
    Cumulative-probability selection.

    Args:
        weights: (item, weight) pairs in priority order
        draw: Uniform draw in [0, 1), scaled by the total weight

    Returns:
        The first item whose cumulative weight meets or exceeds the draw

    Raises:
        ValueError: If ``weights`` is empty
    """
    if not weights:
        raise ValueError("weighted_choice requires at least one weighted item")
    total = sum(w for _, w in weights)
    target = draw * total
    cumulative = 0.0
    for item, weight in weights:
        cumulative += weight
        if target <= cumulative:
            return item
    # Float rounding at the top of the range
    return weights[-1][0]


def jitter(coords: Sequence[float], amount: float, rng: random.Random) -> Tuple[float, float]:
    """Offset both coordinates uniformly within +/- ``amount`` degrees."""
    return (
        coords[0] + (rng.random() - 0.5) * amount * 2,
        coords[1] + (rng.random() - 0.5) * amount * 2,
    )


def growth_rate(impervious_km2: Dict[str, float]) -> float:
    """Percent change of impervious surface between 2020 and 2024."""
    base = impervious_km2["y2020"]
    return round((impervious_km2["y2024"] - base) / base * 100, 1)


def growth_severity(rate: float) -> Severity:
    if rate > 10:
        return Severity.HIGH
    if rate > 5:
        return Severity.MEDIUM
    return Severity.LOW


def synthetic_attribution(event_type: EventType, rng: random.Random) -> SourceAttribution:
    """
    Plausible attribution for a generated event.

    The organization is picked for display only and the record is always
    marked as not live.
    """
    candidates = EVENT_SOURCES.get(event_type.value, EVENT_SOURCES["conflict"])
    source = rng.choice(candidates)
    badge = RELIABILITY_BADGES.get(source["reliability"], RELIABILITY_BADGES["community"])
    return SourceAttribution(
        name=source["name"],
        url=source["url"],
        update_frequency=source["update_frequency"],
        reliability=source["reliability"],
        last_verified=source["last_verified"],
        badge=Badge(label=badge["label"], icon=badge["icon"], color=badge["color"]),
        live=False,
    )


class EventGenerator:
    """
    Produces demo events with no external dependency.

    Type is a weighted draw, location and message are uniform picks from
    the static tables, and coordinates are jittered so markers don't stack.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        cyber_enabled: bool = False,
        weights: Dict[EventType, float] | None = None,
    ):
        """
        Args:
            rng: Random source (injectable for tests)
            cyber_enabled: Include the cyber type in the weight table
            weights: Override of the type weight table
        """
        self._rng = rng or random.Random()
        table = dict(weights or DEFAULT_WEIGHTS)
        if cyber_enabled:
            table.setdefault(EventType.CYBER, CYBER_WEIGHT)
        else:
            table.pop(EventType.CYBER, None)
        self.weights = list(table.items())

    def pick_type(self) -> EventType:
        return weighted_choice(self.weights, self._rng.random())

    def generate(self) -> Event:
        """Generate one synthetic event of a weighted-random type."""
        event_type = self.pick_type()
        if event_type is EventType.URBAN_GROWTH:
            return self.urban_growth_event()
        if event_type is EventType.CYBER:
            return self.cyber_event()
        return self.hotspot_event(event_type)

    def urban_growth_event(self, region: Dict | None = None) -> Event:
        """
        Urban growth event whose severity follows the region's growth rate.

        This is the only synthetic event whose severity is deterministic.
        """
        region = region or self._rng.choice(GUB_REGIONS)
        impervious = region["impervious_km2"]
        rate = growth_rate(impervious)
        return Event(
            id=new_event_id("evt", self._rng),
            type=EventType.URBAN_GROWTH,
            severity=growth_severity(rate),
            coords=jitter(region["center"], URBAN_JITTER, self._rng),
            source=synthetic_attribution(EventType.URBAN_GROWTH, self._rng),
            metadata=UrbanGrowthMetadata(
                city=region["name"],
                country=region["country"],
                message=self._rng.choice(EVENT_TEMPLATES["urban_growth"]),
                population=region["population"],
                impervious_km2=impervious["y2024"],
                growth_rate=rate,
                polygon=[tuple(p) for p in region["polygon"]],
            ),
        )

    def hotspot_event(self, event_type: EventType) -> Event:
        """Conflict, infrastructure, disaster, protest or weather event at a hotspot."""
        location = self._rng.choice(HOTSPOT_LOCATIONS)
        templates = EVENT_TEMPLATES.get(event_type.value, EVENT_TEMPLATES["conflict"])
        return Event(
            id=new_event_id("evt", self._rng),
            type=event_type,
            severity=self._rng.choice(SEVERITY_ORDER),
            coords=jitter(location["coords"], HOTSPOT_JITTER, self._rng),
            source=synthetic_attribution(event_type, self._rng),
            metadata=HotspotMetadata(
                location=location["name"],
                region=location["region"],
                message=self._rng.choice(templates),
                verified=self._rng.random() > 0.3,
                sources=self._rng.randint(1, 5),
            ),
        )

    def cyber_event(self) -> Event:
        """Synthetic threat marker at a data-center metro."""
        location = self._rng.choice(CYBER_LOCATIONS)
        subtype = "c2_server" if self._rng.random() < 0.7 else "malware_host"
        malware = self._rng.choice(CYBER_MALWARE_FAMILIES)
        title = "Botnet C2 server detected" if subtype == "c2_server" else "Malware distribution server"
        return Event(
            id=new_event_id("evt", self._rng),
            type=EventType.CYBER,
            severity=self._rng.choice([Severity.MEDIUM, Severity.HIGH]),
            coords=jitter(location["coords"], CYBER_JITTER, self._rng),
            source=synthetic_attribution(EventType.CYBER, self._rng),
            metadata=CyberThreatMetadata(
                subtype=subtype,
                title=title,
                message=f"{malware}: {self._rng.choice(EVENT_TEMPLATES['cyber'])}",
                location=location["name"],
                region=location["region"],
                malware_family=malware,
            ),
        )
