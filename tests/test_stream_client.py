"""Tests for the reconnecting stream client."""
import asyncio
import orjson
import pytest
from worldstate.client import StreamClient, backoff_delay
from worldstate.config import Settings


class FakeConnection:
    """Yields queued frames; ``None`` closes the connection normally."""

    def __init__(self, frames=()):
        self.queue: asyncio.Queue = asyncio.Queue()
        for frame in frames:
            self.queue.put_nowait(frame)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    def __aiter__(self):
        return self

    async def __anext__(self):
        frame = await self.queue.get()
        if frame is None:
            raise StopAsyncIteration
        return frame


class FakeConnector:
    """Hands out prepared connections, refusing once they run out."""

    def __init__(self, connections=()):
        self.connections = list(connections)
        self.urls = []

    def __call__(self, url):
        self.urls.append(url)
        if not self.connections:
            raise ConnectionRefusedError("refused")
        return self.connections.pop(0)


def frame(message_type, payload):
    return orjson.dumps({"type": message_type, "payload": payload}).decode()


def collect(client):
    seen = {"init": [], "event": [], "status": []}
    for message_type, items in seen.items():
        client.on(message_type, items.append)
    return seen


async def wait_for(predicate, timeout=2.0):
    deadline = asyncio.get_running_loop().time() + timeout
    while not predicate():
        if asyncio.get_running_loop().time() > deadline:
            raise AssertionError("condition not reached")
        await asyncio.sleep(0.005)


def test_backoff_delay():
    """Test delays grow geometrically up to the cap."""
    assert backoff_delay(0) == 1.0
    assert backoff_delay(1) == 1.5
    assert backoff_delay(2) == 2.25
    assert backoff_delay(20) == 15.0
    assert backoff_delay(3, base=1, factor=2, cap=5) == 5


def test_from_settings():
    """Test settings drive the endpoint and backoff."""
    client = StreamClient.from_settings(Settings(PORT=9000, RECONNECT_MAX_ATTEMPTS=3))
    assert client.url == "ws://localhost:9000/"
    assert client.max_attempts == 3

    client = StreamClient.from_settings(Settings(WS_URL="wss://example.org/stream"))
    assert client.url == "wss://example.org/stream"


@pytest.mark.asyncio
async def test_dispatches_init_and_events():
    """Test frames are decoded and routed by type."""
    connection = FakeConnection(
        [frame("init", {"gubRegions": []}), frame("event", {"id": "evt-1"}), frame("event", {"id": "evt-2"})]
    )
    client = StreamClient("ws://test/", connector=FakeConnector([connection]))
    seen = collect(client)

    client.connect()
    await wait_for(lambda: len(seen["event"]) == 2)
    await client.disconnect()

    assert seen["init"] == [{"gubRegions": []}]
    assert [e["id"] for e in seen["event"]] == ["evt-1", "evt-2"]
    assert [s["state"] for s in seen["status"]][:2] == ["connecting", "connected"]


@pytest.mark.asyncio
async def test_malformed_frames_ignored():
    """Test bad frames are dropped and the connection survives."""
    connection = FakeConnection(
        ["not json", '{"payload": {}}', "[1, 2]", frame("status", {}), frame("event", {"id": "ok"})]
    )
    client = StreamClient("ws://test/", connector=FakeConnector([connection]))
    seen = collect(client)

    client.connect()
    await wait_for(lambda: len(seen["event"]) == 1)
    assert client.state == "connected"
    await client.disconnect()

    assert seen["event"] == [{"id": "ok"}]


@pytest.mark.asyncio
async def test_backoff_until_failed():
    """Test refused connections back off, cap the delay and fail once."""
    connector = FakeConnector()
    client = StreamClient(
        "ws://test/", connector=connector, base_delay=0.001, factor=2, max_delay=0.004, max_attempts=4
    )
    seen = collect(client)

    client.connect()
    await asyncio.wait_for(client.wait_closed(), timeout=2)

    reconnecting = [s for s in seen["status"] if s["state"] == "reconnecting"]
    delays = [s["delay"] for s in reconnecting]
    assert [s["attempt"] for s in reconnecting] == [1, 2, 3, 4]
    assert delays == [0.001, 0.002, 0.004, 0.004]
    assert delays == sorted(delays)
    assert [s["state"] for s in seen["status"]].count("failed") == 1
    assert seen["status"][-1]["state"] == "failed"
    assert len(connector.urls) == 5

    await asyncio.sleep(0.02)
    assert len(connector.urls) == 5


@pytest.mark.asyncio
async def test_attempts_reset_after_connect():
    """Test a successful connection resets the backoff budget."""
    first = FakeConnection([frame("event", {"id": "a"}), None])
    second = FakeConnection([frame("event", {"id": "b"})])
    client = StreamClient(
        "ws://test/", connector=FakeConnector([first, second]), base_delay=0.001, max_attempts=2
    )
    seen = collect(client)

    client.connect()
    await wait_for(lambda: len(seen["event"]) == 2)

    states = [s["state"] for s in seen["status"]]
    assert states[:6] == ["connecting", "connected", "disconnected", "reconnecting", "connecting", "connected"]
    assert client.attempts == 0
    await client.disconnect()


@pytest.mark.asyncio
async def test_disconnect_cancels_reconnect():
    """Test a pending reconnect is cancelled on disconnect."""
    connector = FakeConnector()
    client = StreamClient("ws://test/", connector=connector, base_delay=0.05, max_attempts=5)
    seen = collect(client)

    client.connect()
    await wait_for(lambda: client.state == "reconnecting")
    await client.disconnect()
    await asyncio.sleep(0.1)

    assert len(connector.urls) == 1
    assert seen["status"][-1]["state"] == "reconnecting"
    assert client.state == "closed"
    await asyncio.wait_for(client.wait_closed(), timeout=1)


@pytest.mark.asyncio
async def test_listener_errors_isolated():
    """Test a failing listener does not stop delivery to the others."""
    connection = FakeConnection([frame("event", {"id": "x"})])
    client = StreamClient("ws://test/", connector=FakeConnector([connection]))
    received = []

    def broken(_):
        raise ValueError("listener bug")

    client.on("event", broken).on("event", received.append)
    client.connect()
    await wait_for(lambda: received)
    await client.disconnect()

    assert received == [{"id": "x"}]
