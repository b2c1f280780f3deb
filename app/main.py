import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.api.routes.health import router as health_router
from app.api.routes.owners import router as owners_router
from app.core.config import settings
from app.core.db import reset_async_engine
from app.core.errors import AccountOwnerError, get_status_code
from app.core.observability import (
    ObservabilityMiddleware,
    configure_structured_logging,
    extract_request_context,
    metrics_endpoint,
)

# Configure structured logging before creating logger
if settings.observability_structured_logs:
    configure_structured_logging(settings.app_log_level)

logger = logging.getLogger(__name__)

API_PREFIX = "/api"

INTERNAL_SERVER_ERROR_MESSAGE = "Internal server error"


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Sets up:
    - Observability middleware (request ids, metrics, request logs)
    - CORS middleware
    - Error boundary: anything unexpected becomes a generic 500
    - Exception handlers: domain errors map to their status code with an
      empty body
    - API routers
    - Metrics endpoint for Prometheus scraping
    """
    app = FastAPI(
        title="Account Owner API",
        description="Read API for owners and their accounts",
        version="0.1.0",
    )

    @app.on_event("shutdown")
    async def shutdown_app():
        """Release pooled database connections."""
        await reset_async_engine()

    # ============================================================================
    # Middleware
    # ============================================================================

    # Registered first so it sits innermost: unexpected errors become a 500
    # response before the observability and CORS layers see it.
    @app.middleware("http")
    async def unhandled_error_boundary(request: Request, call_next) -> Response:
        """
        Catch-all for unexpected exceptions.

        Logs the exception and returns a generic 500 error to the client
        without exposing internal implementation details.
        """
        try:
            return await call_next(request)
        except Exception as exc:
            endpoint = request.scope.get("endpoint")
            action = getattr(endpoint, "__name__", request.url.path)
            logger.error(
                f"Something went wrong inside {action} action: {exc}",
                exc_info=True,
                extra=extract_request_context(request),
            )
            return PlainTextResponse(
                INTERNAL_SERVER_ERROR_MESSAGE,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    if settings.observability_enabled:
        app.add_middleware(ObservabilityMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # ============================================================================
    # Exception Handlers
    # ============================================================================

    @app.exception_handler(AccountOwnerError)
    async def account_owner_error_handler(request: Request, exc: AccountOwnerError) -> Response:
        """
        Handle expected domain errors (e.g. an unknown owner id).

        The response carries only the status code; the message goes to the log.
        """
        status_code = get_status_code(exc)
        logger.error(
            exc.message,
            extra={
                "error": exc.__class__.__name__,
                "details": exc.details,
                **extract_request_context(request),
            },
        )
        return Response(status_code=status_code)

    # ============================================================================
    # Router Registration
    # ============================================================================

    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(owners_router, prefix=API_PREFIX)

    if settings.observability_enabled:
        app.add_api_route("/metrics", metrics_endpoint, methods=["GET"], include_in_schema=False)

    return app


app = create_app()
