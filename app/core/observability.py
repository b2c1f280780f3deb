"""
Observability module for the Account Owner API.

Provides:
- Structured logging with JSON format and correlation IDs
- Request correlation ID (request_id) generation and propagation
- Prometheus metrics collection (HTTP, DB)
- Request tracking middleware for latency and status codes

Usage:
    from app.core.observability import (
        get_request_id,
        db_metrics,
        metrics,
    )
"""

import json
import logging
import time
import uuid
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

from fastapi import Request, Response
from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

REQUEST_ID_HEADER = "X-Request-ID"

# Correlation ID - links all logs for a single request
_request_id_ctx: ContextVar[str] = ContextVar("request_id", default="")


def generate_request_id() -> str:
    """Generate a unique request ID for correlation."""
    return str(uuid.uuid4())


def get_request_id() -> str:
    """Get the current request ID from context."""
    return _request_id_ctx.get()


def set_correlation_id(request_id: str) -> None:
    """Set the correlation ID for the current request context."""
    _request_id_ctx.set(request_id)


# ============================================================================
# Structured Logging Configuration
# ============================================================================

# Attributes every LogRecord carries; anything else came in through `extra=`.
_RESERVED_RECORD_KEYS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs logs as JSON with standard fields:
    - timestamp: ISO 8601 format
    - level: Log level
    - logger: Logger name
    - message: Log message
    - request_id: Correlation ID (if available)
    - exception: type and message when exc_info is set
    - extra: Any additional context from logging.extra
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }

        request_id = get_request_id()
        if request_id:
            log_entry["request_id"] = request_id

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
            }

        extra_keys = {
            k: v for k, v in record.__dict__.items() if k not in _RESERVED_RECORD_KEYS
        }
        if extra_keys:
            log_entry["extra"] = extra_keys

        return json.dumps(log_entry, default=str)


def configure_structured_logging(level: str = "INFO") -> None:
    """
    Configure root logger with structured JSON formatting.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    root_logger = logging.getLogger()

    # Replace only stream handlers we own; keep anything a test harness attached
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, StructuredFormatter):
            root_logger.removeHandler(handler)

    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    root_logger.addHandler(handler)


# ============================================================================
# Prometheus Metrics
# ============================================================================

# Use a custom registry to avoid conflicts with other Prometheus metrics
_registry = CollectorRegistry()


class Metrics:
    """
    Prometheus collectors for the API.

    - HTTP: request count by status and latency per route template
    - Database: repository query count and timing
    """

    def __init__(self, registry: CollectorRegistry) -> None:
        self.registry = registry

        self.http_requests_total = Counter(
            "http_requests_total",
            "Total HTTP requests",
            ["method", "route", "status_code"],
            registry=self.registry,
        )
        self.http_request_duration_seconds = Histogram(
            "http_request_duration_seconds",
            "HTTP request latency in seconds",
            ["method", "route"],
            buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
            registry=self.registry,
        )
        # Route is only known after routing, so in-flight requests are per method
        self.http_requests_in_progress = Gauge(
            "http_requests_in_progress",
            "HTTP requests currently in progress",
            ["method"],
            registry=self.registry,
        )

        self.db_query_duration_seconds = Histogram(
            "db_query_duration_seconds",
            "Database query duration in seconds",
            ["operation"],
            buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
            registry=self.registry,
        )
        self.db_queries_total = Counter(
            "db_queries_total",
            "Total database queries",
            ["operation", "status"],
            registry=self.registry,
        )


# Global metrics instance
metrics = Metrics(_registry)


# ============================================================================
# Middleware
# ============================================================================

UNMATCHED_ROUTE = "unmatched"


def resolve_route(request: Request) -> str:
    """
    Route template the request was dispatched to, e.g. "/api/owner/{id}".

    Raw paths would give every owner id its own time series, so requests
    that matched no route share a single label.
    """
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ROUTE)


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """
    Request logs and HTTP metrics, correlated by request id.

    The request id is taken from the X-Request-ID header (or generated),
    bound to the logging context and echoed on the response.
    """

    def __init__(
        self,
        app: ASGIApp,
        metrics_instance: Metrics | None = None,
        skip_paths: list[str] | None = None,
    ) -> None:
        """
        Args:
            app: ASGI application
            metrics_instance: Metrics instance (uses global if None)
            skip_paths: Paths that are measured but not logged (health, metrics)
        """
        super().__init__(app)
        self.metrics = metrics_instance or metrics
        self.skip_paths = set(skip_paths or ["/api/health", "/api/readyz", "/metrics"])

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or generate_request_id()
        set_correlation_id(request_id)

        path = request.url.path
        in_progress = self.metrics.http_requests_in_progress.labels(method=request.method)
        in_progress.inc()
        start_time = time.perf_counter()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            latency = time.perf_counter() - start_time
            in_progress.dec()

            route = resolve_route(request)
            self.metrics.http_requests_total.labels(
                method=request.method, route=route, status_code=status_code
            ).inc()
            self.metrics.http_request_duration_seconds.labels(
                method=request.method, route=route
            ).observe(latency)

            if not any(path.startswith(skip) for skip in self.skip_paths):
                logging.getLogger("app.request").log(
                    logging.ERROR if status_code >= 500 else logging.INFO,
                    f"{request.method} {path}",
                    extra={
                        "method": request.method,
                        "route": route,
                        "status_code": status_code,
                        "latency_ms": round(latency * 1000, 2),
                    },
                )


# ============================================================================
# Database Metrics Helper
# ============================================================================


class DBMetricsWrapper:
    """
    Wrapper to track database query metrics.

    Usage in repos:
        with db_metrics.track("owner.select"):
            result = await session.execute(stmt)
    """

    def __init__(self, metrics_instance: Metrics | None = None) -> None:
        self.metrics = metrics_instance or metrics

    @contextmanager
    def track(self, operation: str) -> Iterator[None]:
        """
        Time the enclosed block and count it as a success or an error.

        Args:
            operation: Name of the operation (e.g., "owner.select")
        """
        start = time.perf_counter()
        status = "success"
        try:
            yield
        except Exception:
            status = "error"
            raise
        finally:
            self.metrics.db_query_duration_seconds.labels(operation=operation).observe(
                time.perf_counter() - start
            )
            self.metrics.db_queries_total.labels(operation=operation, status=status).inc()


# Global DB metrics wrapper
db_metrics = DBMetricsWrapper()


# ============================================================================
# Metrics Endpoint
# ============================================================================


def metrics_endpoint(request: Request) -> Response:  # noqa: ARG001
    """
    Prometheus metrics endpoint.

    Returns metrics in Prometheus text format for scraping.
    """
    return Response(
        content=generate_latest(_registry),
        media_type="text/plain; version=0.0.4; charset=utf-8",
    )


def extract_request_context(request: Request) -> dict[str, Any]:
    """
    Extract observability context from request for logging.

    Args:
        request: FastAPI Request object

    Returns:
        Dictionary with request_id, method and path
    """
    return {
        "request_id": get_request_id(),
        "method": request.method,
        "path": request.url.path,
    }
