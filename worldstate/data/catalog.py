"""
Static reference tables for event generation.

Message templates, source attribution, reliability badges and the
location lists used by the synthetic generator and the live adapters.
"""

EVENT_TEMPLATES = {
    "urban_growth": [
        "New residential zone detected via Sentinel-2",
        "Impervious surface expansion identified",
        "Urban sprawl boundary shift detected",
        "Construction activity cluster identified",
        "New industrial zone development",
        "Suburban growth corridor emerging",
        "Land use change: agricultural to urban",
        "Road network expansion detected",
    ],
    "conflict": [
        "Armed clash reported near border region",
        "Artillery fire detected via acoustic sensors",
        "Military convoy movement tracked",
        "Drone strike reported",
        "Cross-border incident escalation",
        "Ceasefire violation detected",
        "IED detonation reported",
        "Militia activity surge detected",
    ],
    "infrastructure": [
        "Undersea cable maintenance alert",
        "Pipeline pressure anomaly detected",
        "Power grid overload warning",
        "Port congestion alert: vessel queue growing",
        "Railway disruption reported",
        "Telecom tower outage detected",
        "Dam water level critical threshold",
        "Refinery incident reported",
    ],
    "disaster": [
        "Earthquake detected: magnitude assessment pending",
        "Tropical storm formation tracked",
        "Flood warning issued",
        "Wildfire spread accelerating",
        "Volcanic activity increase detected",
        "Landslide risk elevated",
        "Tsunami advisory issued",
        "Severe drought conditions expanding",
    ],
    "protest": [
        "Large-scale demonstration forming",
        "Anti-government protest reported",
        "Labor strike: major industry affected",
        "Student protest movement growing",
        "Environmental activism blockade",
        "Election-related unrest detected",
        "Social media mobilization surge",
        "Transport workers strike affecting services",
    ],
    "weather": [
        "Severe storm warning issued",
        "Heat wave advisory: temperatures exceeding threshold",
        "Heavy rainfall warning: flash flood risk",
        "Snow storm approaching: travel disruption expected",
        "Dense fog advisory: visibility reduced",
        "High wind warning: gusts exceeding 80 km/h",
        "Freezing rain alert: surface icing expected",
        "Thunderstorm cluster detected: lightning rate increasing",
    ],
    "cyber": [
        "Botnet command and control server observed",
        "Malware distribution host active",
        "Credential phishing campaign infrastructure detected",
        "Ransomware staging server identified",
        "Scanning activity surge from hosting range",
        "Exploit kit landing page observed",
    ],
}

EVENT_SOURCES = {
    "urban_growth": [
        {"name": "ESA Copernicus Sentinel-2", "url": "https://sentinels.copernicus.eu/web/sentinel/missions/sentinel-2", "update_frequency": "5-day cycle", "reliability": "scientific", "last_verified": "2026-02-15"},
        {"name": "NASA Landsat Program", "url": "https://landsat.gsfc.nasa.gov/", "update_frequency": "16-day cycle", "reliability": "scientific", "last_verified": "2026-02-15"},
        {"name": "Global Human Settlement Layer", "url": "https://ghsl.jrc.ec.europa.eu/", "update_frequency": "Yearly", "reliability": "scientific", "last_verified": "2026-01-10"},
        {"name": "World Bank Urban Development", "url": "https://www.worldbank.org/en/topic/urbandevelopment", "update_frequency": "Quarterly", "reliability": "governmental", "last_verified": "2026-02-01"},
    ],
    "conflict": [
        {"name": "ACLED - Armed Conflict Data", "url": "https://acleddata.com/", "update_frequency": "Weekly", "reliability": "scientific", "last_verified": "2026-02-14"},
        {"name": "Uppsala Conflict Data Program", "url": "https://ucdp.uu.se/", "update_frequency": "Monthly", "reliability": "scientific", "last_verified": "2026-02-10"},
        {"name": "International Crisis Group", "url": "https://www.crisisgroup.org/", "update_frequency": "Weekly", "reliability": "scientific", "last_verified": "2026-02-13"},
        {"name": "OSCE Conflict Prevention", "url": "https://www.osce.org/conflict-prevention", "update_frequency": "Daily", "reliability": "governmental", "last_verified": "2026-02-15"},
    ],
    "infrastructure": [
        {"name": "IEA - International Energy Agency", "url": "https://www.iea.org/", "update_frequency": "Monthly", "reliability": "governmental", "last_verified": "2026-02-01"},
        {"name": "World Bank Infrastructure", "url": "https://www.worldbank.org/en/topic/infrastructure", "update_frequency": "Quarterly", "reliability": "governmental", "last_verified": "2026-01-15"},
        {"name": "ITU - International Telecom Union", "url": "https://www.itu.int/", "update_frequency": "Yearly", "reliability": "governmental", "last_verified": "2026-01-20"},
        {"name": "MarineTraffic", "url": "https://www.marinetraffic.com/", "update_frequency": "Real time", "reliability": "commercial", "last_verified": "2026-02-15"},
    ],
    "disaster": [
        {"name": "USGS Earthquake Hazards", "url": "https://earthquake.usgs.gov/", "update_frequency": "Real time", "reliability": "scientific", "last_verified": "2026-02-15"},
        {"name": "NOAA - National Weather Service", "url": "https://www.weather.gov/", "update_frequency": "Real time", "reliability": "scientific", "last_verified": "2026-02-15"},
        {"name": "GDACS - Global Disaster Alert", "url": "https://www.gdacs.org/", "update_frequency": "Real time", "reliability": "governmental", "last_verified": "2026-02-15"},
        {"name": "ReliefWeb - OCHA", "url": "https://reliefweb.int/", "update_frequency": "Daily", "reliability": "governmental", "last_verified": "2026-02-14"},
    ],
    "protest": [
        {"name": "ACLED - Disorder Tracker", "url": "https://acleddata.com/early-warning-research-hub/disorder-tracker/", "update_frequency": "Weekly", "reliability": "scientific", "last_verified": "2026-02-14"},
        {"name": "CIVICUS Monitor", "url": "https://monitor.civicus.org/", "update_frequency": "Monthly", "reliability": "community", "last_verified": "2026-02-01"},
        {"name": "V-Dem Institute", "url": "https://www.v-dem.net/", "update_frequency": "Yearly", "reliability": "scientific", "last_verified": "2026-01-15"},
        {"name": "Freedom House", "url": "https://freedomhouse.org/", "update_frequency": "Yearly", "reliability": "community", "last_verified": "2026-01-20"},
    ],
    "weather": [
        {"name": "ECMWF - European Weather Centre", "url": "https://www.ecmwf.int/", "update_frequency": "Real time", "reliability": "scientific", "last_verified": "2026-02-15"},
        {"name": "DWD - Deutscher Wetterdienst", "url": "https://www.dwd.de/", "update_frequency": "Real time", "reliability": "governmental", "last_verified": "2026-02-15"},
        {"name": "NOAA Climate.gov", "url": "https://www.climate.gov/", "update_frequency": "Daily", "reliability": "scientific", "last_verified": "2026-02-15"},
        {"name": "Copernicus Climate Service", "url": "https://climate.copernicus.eu/", "update_frequency": "Real time", "reliability": "scientific", "last_verified": "2026-02-15"},
    ],
    "cyber": [
        {"name": "abuse.ch Feodo Tracker", "url": "https://feodotracker.abuse.ch/", "update_frequency": "Hourly", "reliability": "scientific", "last_verified": "2026-02-15"},
        {"name": "abuse.ch URLhaus", "url": "https://urlhaus.abuse.ch/", "update_frequency": "Hourly", "reliability": "scientific", "last_verified": "2026-02-15"},
        {"name": "CISA Known Exploited Vulnerabilities", "url": "https://www.cisa.gov/known-exploited-vulnerabilities-catalog", "update_frequency": "Daily", "reliability": "governmental", "last_verified": "2026-02-10"},
        {"name": "Shadowserver Foundation", "url": "https://www.shadowserver.org/", "update_frequency": "Daily", "reliability": "community", "last_verified": "2026-02-12"},
    ],
}

RELIABILITY_BADGES = {
    "scientific": {
        "label": "Scientific",
        "icon": "\U0001F52C",
        "color": "#00ff88",
        "description": "Peer-reviewed, scientific standards",
    },
    "governmental": {
        "label": "Governmental",
        "icon": "\U0001F3DB",
        "color": "#4a9eff",
        "description": "Official government or UN data",
    },
    "commercial": {
        "label": "Commercial",
        "icon": "\U0001F4C8",
        "color": "#ffa500",
        "description": "Commercial providers, public APIs",
    },
    "community": {
        "label": "Community",
        "icon": "\U0001F310",
        "color": "#9d4edd",
        "description": "Community-maintained open data",
    },
}

GUB_DATA_SOURCE = {
    "name": "Global Urban Boundaries - Tsinghua University / ESA",
    "url": "https://data-starcloud.pcl.ac.cn/resource/9",
    "satellite": "Sentinel-2 / Landsat-8",
    "resolution": "10m",
}

HOTSPOT_LOCATIONS = [
    {"name": "Kyiv", "coords": [50.4501, 30.5234], "region": "Europe"},
    {"name": "Gaza", "coords": [31.3547, 34.3088], "region": "MENA"},
    {"name": "Khartoum", "coords": [15.5007, 32.5599], "region": "Africa"},
    {"name": "Yangon", "coords": [16.8661, 96.1951], "region": "Asia"},
    {"name": "Taipei", "coords": [25.0330, 121.5654], "region": "Asia"},
    {"name": "Caracas", "coords": [10.4806, -66.9036], "region": "Americas"},
    {"name": "Tehran", "coords": [35.6892, 51.3890], "region": "MENA"},
    {"name": "Kabul", "coords": [34.5553, 69.2075], "region": "Asia"},
    {"name": "Mogadishu", "coords": [2.0469, 45.3182], "region": "Africa"},
    {"name": "Bogota", "coords": [4.7110, -74.0721], "region": "Americas"},
    {"name": "Dhaka", "coords": [23.8103, 90.4125], "region": "Asia"},
    {"name": "Tripoli", "coords": [32.9022, 13.1800], "region": "MENA"},
    {"name": "Port-au-Prince", "coords": [18.5944, -72.3074], "region": "Americas"},
    {"name": "Donetsk", "coords": [48.0159, 37.8028], "region": "Europe"},
    {"name": "Aleppo", "coords": [36.2021, 37.1343], "region": "MENA"},
    {"name": "Bamako", "coords": [12.6392, -8.0029], "region": "Africa"},
    {"name": "Odesa", "coords": [46.4825, 30.7233], "region": "Europe"},
    {"name": "Aden", "coords": [12.7855, 45.0187], "region": "MENA"},
    {"name": "Manila", "coords": [14.5995, 120.9842], "region": "Asia"},
    {"name": "Addis Ababa", "coords": [9.0250, 38.7469], "region": "Africa"},
    # Infrastructure chokepoints
    {"name": "Strait of Hormuz", "coords": [26.5667, 56.2500], "region": "MENA"},
    {"name": "Suez Canal", "coords": [30.4550, 32.3500], "region": "MENA"},
    {"name": "Panama Canal", "coords": [9.0800, -79.6800], "region": "Americas"},
    {"name": "Strait of Malacca", "coords": [2.5000, 101.5000], "region": "Asia"},
    {"name": "Bosphorus", "coords": [41.1200, 29.0500], "region": "Europe"},
    # Natural disaster prone
    {"name": "Ring of Fire - Japan", "coords": [35.0000, 139.0000], "region": "Asia"},
    {"name": "San Andreas Fault", "coords": [35.0000, -119.0000], "region": "Americas"},
    {"name": "Caribbean Basin", "coords": [18.0000, -68.0000], "region": "Americas"},
    {"name": "Bay of Bengal", "coords": [15.0000, 88.0000], "region": "Asia"},
    {"name": "Sahel Region", "coords": [14.0000, 0.0000], "region": "Africa"},
]

# Data-center heavy metros used for synthetic cyber markers
CYBER_LOCATIONS = [
    {"name": "Frankfurt", "coords": [50.1109, 8.6821], "region": "Europe"},
    {"name": "Amsterdam", "coords": [52.3676, 4.9041], "region": "Europe"},
    {"name": "Ashburn", "coords": [39.0438, -77.4874], "region": "Americas"},
    {"name": "Singapore", "coords": [1.3521, 103.8198], "region": "Asia"},
    {"name": "Sao Paulo", "coords": [-23.5505, -46.6333], "region": "Americas"},
    {"name": "Moscow", "coords": [55.7558, 37.6173], "region": "Europe"},
    {"name": "Hong Kong", "coords": [22.3193, 114.1694], "region": "Asia"},
    {"name": "Johannesburg", "coords": [-26.2041, 28.0473], "region": "Africa"},
]

CYBER_MALWARE_FAMILIES = [
    "QakBot", "Emotet", "Dridex", "IcedID", "Pikabot", "TrickBot", "BumbleBee",
]

WEATHER_LOCATIONS = [
    {"name": "Berlin", "lat": 52.52, "lng": 13.40, "region": "Europe"},
    {"name": "London", "lat": 51.51, "lng": -0.13, "region": "Europe"},
    {"name": "Paris", "lat": 48.86, "lng": 2.35, "region": "Europe"},
    {"name": "New York", "lat": 40.71, "lng": -74.01, "region": "North America"},
    {"name": "Tokyo", "lat": 35.68, "lng": 139.69, "region": "East Asia"},
    {"name": "Sydney", "lat": -33.87, "lng": 151.21, "region": "Oceania"},
    {"name": "Sao Paulo", "lat": -23.55, "lng": -46.63, "region": "South America"},
    {"name": "Mumbai", "lat": 19.08, "lng": 72.88, "region": "South Asia"},
    {"name": "Dubai", "lat": 25.20, "lng": 55.27, "region": "Middle East"},
    {"name": "Nairobi", "lat": -1.29, "lng": 36.82, "region": "East Africa"},
    {"name": "Mexico City", "lat": 19.43, "lng": -99.13, "region": "North America"},
    {"name": "Shanghai", "lat": 31.23, "lng": 121.47, "region": "East Asia"},
    {"name": "Moscow", "lat": 55.76, "lng": 37.62, "region": "Eastern Europe"},
    {"name": "Lagos", "lat": 6.52, "lng": 3.38, "region": "West Africa"},
    {"name": "Jakarta", "lat": -6.21, "lng": 106.85, "region": "Southeast Asia"},
    {"name": "Cairo", "lat": 30.04, "lng": 31.24, "region": "North Africa"},
]

# WMO weather interpretation codes
WMO_WEATHER_CODES = {
    0: {"desc": "Clear sky", "icon": "☀️", "severity": "low"},
    1: {"desc": "Mainly clear", "icon": "\U0001F324", "severity": "low"},
    2: {"desc": "Partly cloudy", "icon": "⛅", "severity": "low"},
    3: {"desc": "Overcast", "icon": "☁️", "severity": "low"},
    45: {"desc": "Fog", "icon": "\U0001F32B", "severity": "medium"},
    48: {"desc": "Depositing rime fog", "icon": "\U0001F32B", "severity": "medium"},
    51: {"desc": "Light drizzle", "icon": "\U0001F326", "severity": "low"},
    53: {"desc": "Drizzle", "icon": "\U0001F326", "severity": "low"},
    55: {"desc": "Dense drizzle", "icon": "\U0001F327", "severity": "medium"},
    61: {"desc": "Light rain", "icon": "\U0001F327", "severity": "low"},
    63: {"desc": "Rain", "icon": "\U0001F327", "severity": "medium"},
    65: {"desc": "Heavy rain", "icon": "\U0001F327", "severity": "high"},
    66: {"desc": "Freezing rain", "icon": "\U0001F9CA", "severity": "high"},
    67: {"desc": "Heavy freezing rain", "icon": "\U0001F9CA", "severity": "critical"},
    71: {"desc": "Light snowfall", "icon": "\U0001F328", "severity": "medium"},
    73: {"desc": "Snowfall", "icon": "\U0001F328", "severity": "medium"},
    75: {"desc": "Heavy snowfall", "icon": "❄️", "severity": "high"},
    77: {"desc": "Snow grains", "icon": "\U0001F328", "severity": "medium"},
    80: {"desc": "Light rain showers", "icon": "\U0001F326", "severity": "low"},
    81: {"desc": "Rain showers", "icon": "\U0001F327", "severity": "medium"},
    82: {"desc": "Violent rain showers", "icon": "⛈", "severity": "high"},
    85: {"desc": "Light snow showers", "icon": "\U0001F328", "severity": "medium"},
    86: {"desc": "Heavy snow showers", "icon": "❄️", "severity": "high"},
    95: {"desc": "Thunderstorm", "icon": "⛈", "severity": "high"},
    96: {"desc": "Thunderstorm with hail", "icon": "⛈", "severity": "critical"},
    99: {"desc": "Severe thunderstorm with hail", "icon": "⛈", "severity": "critical"},
}
