"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from transaction_app.api.routers import transactions_router
from transaction_app.api.schemas import ErrorResponse
from transaction_app.app_context import AppContext
from transaction_app.config.logging_config import setup_logging
from transaction_app.core.exceptions import AppError, InternalError, ValidationError

logger = logging.getLogger(__name__)


def _error_response(exc: AppError, details: Optional[list[str]] = None) -> JSONResponse:
    body = ErrorResponse(
        error=exc.code,
        message=exc.message,
        status=exc.status_code,
        details=details,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(mode="json", exclude_none=True),
    )


def _field_errors(exc: RequestValidationError) -> list[str]:
    """Flatten pydantic errors into "field: message" strings."""
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        field = ".".join(loc) or "body"
        errors.append(f"{field}: {error.get('msg')}")
    return errors


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """
    Build the FastAPI application around an AppContext.

    Each app owns its context (and therefore its store); tests pass a fresh
    one per app.
    """
    context = context or AppContext()
    settings = context.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        # Startup
        setup_logging(settings)
        logger.info("%s %s started", settings.app_name, settings.app_version)
        yield
        # Shutdown (in-memory state is dropped with the process)

    app = FastAPI(
        title=settings.app_name,
        description="In-memory transaction records with a cached listing",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.context = context

    # Include routers
    app.include_router(transactions_router)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        """Global handler for application errors."""
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        details = exc.details if isinstance(exc, ValidationError) else None
        return _error_response(exc, details)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed request bodies as 400 with per-field messages."""
        errors = _field_errors(exc)
        return _error_response(ValidationError("Validation failed", errors), errors)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Last-resort handler: generic 500 with a diagnostic message."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(InternalError(f"Internal server error: {exc}"))

    @app.get("/health")
    def health_check() -> dict[str, object]:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "transactions": context.transactions.count_transactions(),
        }

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint with API info."""
        return {
            "app": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
        }

    return app


app = create_app()
