"""
Prometheus metrics for the WorldState service.
"""
from prometheus_client import Counter, Histogram, Gauge, Info, CollectorRegistry
import psutil
import os


class Metrics:
    """
    Centralized metrics for the WorldState service.

    Every instance owns its registry, so several apps (e.g. in tests)
    can coexist in one process.
    """

    def __init__(self, service_name: str = "worldstate", version: str = "0.1.0", registry=None):
        self.service_name = service_name
        self.version = version
        self.registry = registry or CollectorRegistry()

        # HTTP Metrics
        self.http_requests_total = Counter(
            "http_requests_total",
            "Total HTTP requests",
            ["service", "method", "path", "status"],
            registry=self.registry,
        )

        self.http_request_duration = Histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["service", "method", "path"],
            registry=self.registry,
        )

        # Application Info
        self.app_info = Info(
            "app",
            "Application information",
            registry=self.registry,
        )
        self.app_info.info({"service": service_name, "version": version})

        self.app_up = Gauge(
            "app_up",
            "Application up status (1=up, 0=down)",
            ["service", "version"],
            registry=self.registry,
        )
        self.app_up.labels(service=service_name, version=version).set(1)

        # Stream metrics
        self.events_emitted_total = Counter(
            "worldstate_events_emitted_total",
            "Total events broadcast",
            ["type", "live"],
            registry=self.registry,
        )

        self.websocket_connections = Gauge(
            "worldstate_websocket_connections",
            "Number of open stream connections",
            registry=self.registry,
        )

        # External API metrics
        self.api_fetches_total = Counter(
            "worldstate_api_fetches_total",
            "Successful external API fetches",
            ["api"],
            registry=self.registry,
        )

        self.api_errors_total = Counter(
            "worldstate_api_errors_total",
            "Failed external API fetches",
            ["api"],
            registry=self.registry,
        )

        # System Metrics
        self.process_memory_bytes = Gauge(
            "process_resident_memory_bytes",
            "Resident memory size in bytes",
            ["service"],
            registry=self.registry,
        )

        self.process_open_fds = Gauge(
            "process_open_fds",
            "Number of open file descriptors",
            ["service"],
            registry=self.registry,
        )

        self.update_system_metrics()

    def update_system_metrics(self):
        """Update process metrics from psutil."""
        try:
            process = psutil.Process(os.getpid())
            self.process_memory_bytes.labels(service=self.service_name).set(process.memory_info().rss)
            try:
                self.process_open_fds.labels(service=self.service_name).set(process.num_fds())
            except AttributeError:
                # num_fds() not available on all platforms
                pass
        except psutil.Error:
            pass

    def record_event_emitted(self, event_type: str, live: bool):
        self.events_emitted_total.labels(type=event_type, live=str(live).lower()).inc()

    def set_connections(self, count: int):
        self.websocket_connections.set(count)

    def record_api_fetch(self, api: str):
        self.api_fetches_total.labels(api=api).inc()

    def record_api_error(self, api: str):
        self.api_errors_total.labels(api=api).inc()
