"""
WorldState - broadcast server for the live world event map.

Features:
- Broadcast-only WebSocket stream (init snapshot + periodic events)
- Live USGS / Open-Meteo / abuse.ch data with synthetic fallback
- Aggregate-only health endpoint
- Structured logging, optional Prometheus metrics
"""
import random
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app
from . import __version__
from .config import Settings, get_settings
from .logging import setup_logging, get_logger
from .api.ws_router import router as ws_router
from .health import HealthChecker
from .metrics import Metrics
from .middleware import (
    CorrelationIdMiddleware,
    CorsMiddleware,
    ErrorHandlerMiddleware,
    MetricsMiddleware,
)
from .services import EventEmitter, EventGenerator, LiveFeed
from .streaming import Broadcaster

logger = get_logger()


def create_app(
    settings: Settings | None = None,
    live_feed: LiveFeed | None = None,
    generator: EventGenerator | None = None,
    rng: random.Random | None = None,
) -> FastAPI:
    """
    Build the application and its explicitly owned components.

    Components live on ``app.state`` for the lifetime of the process:
    ``broadcaster``, ``emitter``, ``live_feed``, ``metrics``, ``health``.

    Args:
        settings: Configuration (defaults to environment settings)
        live_feed: Live data aggregate (defaults to one built from settings)
        generator: Synthetic generator
        rng: Random source shared by the emitter and generator
    """
    settings = settings or get_settings()
    rng = rng or random.Random()
    metrics = Metrics(service_name="worldstate", version=__version__)
    live_feed = live_feed or LiveFeed.from_settings(settings, metrics=metrics)
    generator = generator or EventGenerator(rng=rng, cyber_enabled=settings.ENABLE_CYBER_LAYER)
    broadcaster = Broadcaster(
        live_feed=live_feed, recent_limit=settings.INIT_RECENT_EVENTS, metrics=metrics
    )
    emitter = EventEmitter(
        broadcaster,
        generator,
        live_feed=live_feed,
        rng=rng,
        tick_min=settings.TICK_MIN_SECONDS,
        tick_max=settings.TICK_MAX_SECONDS,
        live_ratio=settings.LIVE_DATA_RATIO,
        metrics=metrics,
    )
    health_checker = HealthChecker(broadcaster, emitter, live_feed=live_feed, metrics=metrics)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "service_starting",
            version=__version__,
            env=settings.ENV,
            port=settings.PORT,
            cyber_layer=settings.ENABLE_CYBER_LAYER,
        )
        emitter.start()
        yield
        logger.info("service_stopping")
        await emitter.stop()
        await live_feed.aclose()
        metrics.app_up.labels(service="worldstate", version=__version__).set(0)

    app = FastAPI(
        title="WorldState",
        version=__version__,
        description="Broadcast-only world event stream",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.broadcaster = broadcaster
    app.state.emitter = emitter
    app.state.live_feed = live_feed
    app.state.metrics = metrics
    app.state.health = health_checker

    # Last added runs first: CORS answers OPTIONS before anything else
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(MetricsMiddleware, metrics=metrics)
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(CorsMiddleware)

    app.include_router(ws_router)

    if settings.METRICS_ENABLED:
        app.mount("/metrics", make_asgi_app(registry=metrics.registry))

    @app.get("/health")
    async def health():
        """
        Aggregate service health.

        Returns uptime, client count, emitted-event counters and
        per-API fetch counters. No per-connection data.
        """
        return JSONResponse(health_checker.report(), headers={"Cache-Control": "no-store"})

    @app.api_route("/health", methods=["POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
    async def health_other_methods():
        # Only GET exists; any other method is an unknown route
        return JSONResponse({"detail": "Not Found"}, status_code=404)

    return app


settings = get_settings()
setup_logging(json_output=settings.LOG_JSON, level=settings.LOG_LEVEL)
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "worldstate.main:app",
        host=settings.HOST,
        port=settings.PORT,
    )
