from .correlation import CorrelationIdMiddleware, get_correlation_id
from .cors import CorsMiddleware
from .error_handler import ErrorHandlerMiddleware
from .observability import MetricsMiddleware

__all__ = [
    "CorrelationIdMiddleware",
    "CorsMiddleware",
    "ErrorHandlerMiddleware",
    "MetricsMiddleware",
    "get_correlation_id",
]
