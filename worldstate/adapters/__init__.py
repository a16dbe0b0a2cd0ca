"""Adapters for live external data sources."""
from .base import FetchStats, LiveSource, live_attribution
from .usgs import EarthquakeAdapter, magnitude_severity
from .open_meteo import WeatherAdapter, weather_severity
from .abuse_ch import CyberThreatAdapter

__all__ = [
    "CyberThreatAdapter",
    "EarthquakeAdapter",
    "FetchStats",
    "LiveSource",
    "WeatherAdapter",
    "live_attribution",
    "magnitude_severity",
    "weather_severity",
]
