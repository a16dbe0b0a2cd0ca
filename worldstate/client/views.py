"""
Pure renderers for the client views.

Every function takes plain event dicts (as received on the wire) or an
EventStore and returns markup or data; nothing here touches I/O or
randomness. Unknown severities and types fall back to a default display.
"""
from collections import Counter
from html import escape
from typing import Any, Dict, List, NamedTuple, Tuple
from .store import EventStore


class Route(NamedTuple):
    id: str
    icon: str
    label: str


ROUTES: Dict[str, Route] = {
    "/": Route("map", "\U0001F30D", "Globe"),
    "/feed": Route("feed", "\U0001F4F0", "Feed"),
    "/alerts": Route("alerts", "⚠️", "Alerts"),
    "/economy": Route("dashboard", "\U0001F4C8", "Dashboard"),
    "/profile": Route("profile", "\U0001F464", "Profile"),
}

SEVERITY_DISPLAY: Dict[str, Tuple[str, str]] = {
    "low": ("Low", "#22c55e"),
    "medium": ("Medium", "#f59e0b"),
    "high": ("High", "#ef4444"),
    "critical": ("Critical", "#dc2626"),
}
DEFAULT_SEVERITY_DISPLAY = ("Unknown", "#6b7280")

TYPE_DISPLAY: Dict[str, Tuple[str, str]] = {
    "urban_growth": ("\U0001F3D7", "Urban growth"),
    "conflict": ("⚔", "Conflict"),
    "infrastructure": ("⚡", "Infrastructure"),
    "disaster": ("\U0001F30B", "Disaster"),
    "protest": ("✊", "Protest"),
    "weather": ("\U0001F326", "Weather"),
    "cyber": ("\U0001F6E1", "Cyber"),
}
DEFAULT_TYPE_DISPLAY = ("\U0001F4CD", "Event")

STATUS_BADGES: Dict[str, Tuple[str, str]] = {
    "connecting": ("Connecting", "#f59e0b"),
    "connected": ("Live", "#22c55e"),
    "reconnecting": ("Reconnecting", "#f59e0b"),
    "disconnected": ("Offline", "#6b7280"),
    "error": ("Error", "#ef4444"),
    "failed": ("Connection failed", "#dc2626"),
}


def resolve_route(location_hash: str) -> Tuple[str, Route]:
    """Map a ``#/path`` hash to its route; unknown paths go to the map."""
    path = location_hash.lstrip("#") or "/"
    if path not in ROUTES:
        path = "/"
    return path, ROUTES[path]


def severity_display(severity: Any) -> Tuple[str, str]:
    if not isinstance(severity, str):
        return DEFAULT_SEVERITY_DISPLAY
    return SEVERITY_DISPLAY.get(severity, DEFAULT_SEVERITY_DISPLAY)


def type_display(event_type: Any) -> Tuple[str, str]:
    if not isinstance(event_type, str):
        return DEFAULT_TYPE_DISPLAY
    return TYPE_DISPLAY.get(event_type, DEFAULT_TYPE_DISPLAY)


def status_badge(state: str) -> Tuple[str, str]:
    """Coarse connection badge; never shows raw error detail."""
    if not isinstance(state, str):
        return STATUS_BADGES["disconnected"]
    return STATUS_BADGES.get(state, STATUS_BADGES["disconnected"])


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _label(value: Any) -> str:
    return value if isinstance(value, str) else "unknown"


def _provenance(event: Dict[str, Any]) -> Tuple[str, str]:
    source = _mapping(event.get("source"))
    if source.get("live") is True:
        return "live", "Live data"
    return "simulated", "Simulated"


def _place(metadata: Dict[str, Any]) -> str:
    return str(metadata.get("location") or metadata.get("city") or "")


def render_feed_item(event: Dict[str, Any]) -> str:
    """Markup for one feed entry."""
    metadata = _mapping(event.get("metadata"))
    source = _mapping(event.get("source"))
    icon, type_label = type_display(event.get("type"))
    severity_label, color = severity_display(event.get("severity"))
    provenance, provenance_label = _provenance(event)

    return (
        f'<article class="feed-item {provenance}" data-id="{escape(str(event.get("id", "")))}" '
        f'style="border-left-color:{color}">'
        f'<header><span class="feed-icon">{icon}</span>'
        f'<span class="feed-type">{escape(type_label)}</span>'
        f'<span class="feed-severity" style="color:{color}">{severity_label}</span>'
        f'<span class="feed-provenance {provenance}">{provenance_label}</span></header>'
        f'<p class="feed-message">{escape(str(metadata.get("message", "")))}</p>'
        f'<footer><span class="feed-place">{escape(_place(metadata))}</span>'
        f'<span class="feed-source">{escape(str(source.get("name", "")))}</span>'
        f'<time>{escape(str(event.get("timestamp", "")))}</time></footer>'
        f"</article>"
    )


def render_feed(store: EventStore, limit: int = 50) -> List[str]:
    return [render_feed_item(e) for e in store.recent(limit)]


def render_alerts(store: EventStore) -> List[str]:
    """High and critical events, critical first, newest first within a level."""
    alerts = sorted(store.alerts(), key=lambda e: e.get("severity") != "critical")
    return [render_feed_item(e) for e in alerts]


def render_console_line(event: Dict[str, Any]) -> str:
    """One-line text rendering for terminals."""
    metadata = _mapping(event.get("metadata"))
    icon, type_label = type_display(event.get("type"))
    severity_label, _ = severity_display(event.get("severity"))
    _, provenance_label = _provenance(event)
    place = _place(metadata)
    where = f" @ {place}" if place else ""
    return f"{icon} [{severity_label.upper()}] {type_label}{where}: {metadata.get('message', '')} ({provenance_label})"


def dashboard_summary(store: EventStore) -> Dict[str, Any]:
    """Counts by type, severity and provenance for the dashboard view."""
    events = store.all()
    live = sum(1 for e in events if _provenance(e)[0] == "live")
    return {
        "total": len(events),
        "byType": dict(Counter(_label(e.get("type")) for e in events)),
        "bySeverity": dict(Counter(_label(e.get("severity")) for e in events)),
        "live": live,
        "simulated": len(events) - live,
        "alerts": len(store.alerts()),
    }
