"""Static reference data (regions, locations, templates, attribution)."""
from .catalog import (
    CYBER_LOCATIONS,
    CYBER_MALWARE_FAMILIES,
    EVENT_SOURCES,
    EVENT_TEMPLATES,
    GUB_DATA_SOURCE,
    HOTSPOT_LOCATIONS,
    RELIABILITY_BADGES,
    WEATHER_LOCATIONS,
    WMO_WEATHER_CODES,
)
from .regions import GUB_REGIONS

__all__ = [
    "CYBER_LOCATIONS",
    "CYBER_MALWARE_FAMILIES",
    "EVENT_SOURCES",
    "EVENT_TEMPLATES",
    "GUB_DATA_SOURCE",
    "GUB_REGIONS",
    "HOTSPOT_LOCATIONS",
    "RELIABILITY_BADGES",
    "WEATHER_LOCATIONS",
    "WMO_WEATHER_CODES",
]
