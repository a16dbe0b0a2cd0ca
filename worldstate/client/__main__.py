"""Console feed: ``python -m worldstate.client``."""
import asyncio
from ..config import get_settings
from ..logging import get_logger, setup_logging
from .store import EventStore
from .stream import StreamClient
from .views import dashboard_summary, render_console_line, status_badge

logger = get_logger()


async def run():
    settings = get_settings()
    store = EventStore(max_events=settings.STORE_MAX_EVENTS)
    client = StreamClient.from_settings(settings)

    def on_init(payload):
        logger.info(
            "feed.init",
            regions=len(payload.get("gubRegions", [])),
            recent=len(payload.get("recentEvents", [])),
        )
        for event in reversed(payload.get("recentEvents", [])):
            store.add(event)

    def on_status(status):
        label, _ = status_badge(status["state"])
        print(f"-- {label}")

    store.subscribe(lambda event, _: print(render_console_line(event)))
    client.on("init", on_init).on("event", store.add).on("status", on_status)
    client.connect()
    try:
        await client.wait_closed()
    finally:
        await client.disconnect()
        logger.info("feed.closed", **dashboard_summary(store))


def main():
    settings = get_settings()
    setup_logging(json_output=settings.LOG_JSON, level=settings.LOG_LEVEL)
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
