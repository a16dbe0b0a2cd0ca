"""Tests for the client view renderers."""
import pytest
from worldstate.client import EventStore
from worldstate.client.views import (
    DEFAULT_SEVERITY_DISPLAY,
    DEFAULT_TYPE_DISPLAY,
    dashboard_summary,
    render_alerts,
    render_console_line,
    render_feed_item,
    resolve_route,
    severity_display,
    status_badge,
    type_display,
)


def wire(i, severity="high", event_type="conflict", live=False, message="Clashes reported"):
    return {
        "id": f"evt-{i}",
        "type": event_type,
        "severity": severity,
        "timestamp": "2026-02-15T04:30:00Z",
        "source": {"name": "ACLED", "live": live},
        "metadata": {"kind": "hotspot", "location": "Kyiv", "message": message},
    }


@pytest.mark.parametrize(
    "location_hash, path, route_id",
    [
        ("", "/", "map"),
        ("#/", "/", "map"),
        ("#/feed", "/feed", "feed"),
        ("#/alerts", "/alerts", "alerts"),
        ("#/economy", "/economy", "dashboard"),
        ("#/profile", "/profile", "profile"),
        ("#/admin", "/", "map"),
        ("#nonsense", "/", "map"),
    ],
)
def test_resolve_route(location_hash, path, route_id):
    """Test hashes map to views and unknown ones fall back to the map."""
    resolved_path, route = resolve_route(location_hash)
    assert resolved_path == path
    assert route.id == route_id


def test_display_fallbacks():
    """Test unknown vocabulary renders with defaults."""
    assert severity_display("catastrophic") == DEFAULT_SEVERITY_DISPLAY
    assert type_display("volcano") == DEFAULT_TYPE_DISPLAY
    assert severity_display("critical")[1] == "#dc2626"


def test_status_badge():
    """Test connection states map to coarse labels."""
    assert status_badge("connected")[0] == "Live"
    assert status_badge("failed")[0] == "Connection failed"
    assert status_badge("something odd") == status_badge("disconnected")


def test_feed_item_marks_provenance():
    """Test live and simulated events are visibly distinguished."""
    live = render_feed_item(wire(1, live=True))
    simulated = render_feed_item(wire(2, live=False))
    assert "Live data" in live
    assert "Simulated" in simulated
    assert "Live data" not in simulated


def test_feed_item_escapes_text():
    """Test event text cannot inject markup."""
    html = render_feed_item(wire(1, message="<script>alert(1)</script>"))
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_feed_item_unknown_values():
    """Test an event with unknown type and severity still renders."""
    html = render_feed_item({"id": "x", "type": "volcano", "severity": "extreme"})
    assert "Unknown" in html
    assert "Event" in html


@pytest.mark.parametrize(
    "event",
    [
        {"id": "x", "type": ["weird"], "severity": {"lvl": 1}},
        {"id": "x", "type": None, "severity": 3, "source": "ACLED", "metadata": ["not", "a", "dict"]},
        {"id": "x", "type": {"a": 1}, "severity": ["high"], "metadata": {"location": 42}},
    ],
)
def test_non_string_values_render(event):
    """Test malformed wire values fall back to the default display."""
    html = render_feed_item(event)
    assert "Unknown" in html
    assert "Event" in html
    assert "Simulated" in html
    assert render_console_line(event).startswith(DEFAULT_TYPE_DISPLAY[0])


def test_store_views_tolerate_non_string_values():
    """Test filters and the dashboard survive unhashable wire values."""
    store = EventStore()
    store.add({"id": "odd", "type": ["weird"], "severity": {"lvl": 1}})
    store.add(wire(1, "critical"))

    assert len(render_alerts(store)) == 1
    summary = dashboard_summary(store)
    assert summary["byType"] == {"unknown": 1, "conflict": 1}
    assert summary["bySeverity"] == {"unknown": 1, "critical": 1}
    assert status_badge(["connected"]) == status_badge("disconnected")


def test_alerts_critical_first():
    """Test alerts list critical before high and skip lower levels."""
    store = EventStore()
    store.add(wire(1, "critical"))
    store.add(wire(2, "high"))
    store.add(wire(3, "low"))
    store.add(wire(4, "critical"))

    alerts = render_alerts(store)
    assert len(alerts) == 3
    assert 'data-id="evt-4"' in alerts[0]
    assert 'data-id="evt-1"' in alerts[1]
    assert 'data-id="evt-2"' in alerts[2]


def test_dashboard_summary():
    """Test dashboard counts by type, severity and provenance."""
    store = EventStore()
    store.add(wire(1, "low", "weather", live=True))
    store.add(wire(2, "high", "conflict"))
    store.add(wire(3, "critical", "conflict"))

    summary = dashboard_summary(store)
    assert summary["total"] == 3
    assert summary["byType"] == {"weather": 1, "conflict": 2}
    assert summary["bySeverity"]["critical"] == 1
    assert summary["live"] == 1
    assert summary["simulated"] == 2
    assert summary["alerts"] == 2


def test_console_line():
    """Test the terminal rendering carries level, place and provenance."""
    line = render_console_line(wire(1, "high", live=True))
    assert "[HIGH]" in line
    assert "@ Kyiv" in line
    assert line.endswith("(Live data)")
